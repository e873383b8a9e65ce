"""Exceptions raised inside the scrape pipeline.

Only :class:`InputError` and :class:`FetchError` ever reach the orchestrator's
failure result; :class:`SecondaryFetchError` is caught and logged during the
contact-page crawl.
"""

from __future__ import annotations


class ScrapeError(Exception):
    """Base class for pipeline errors; ``str(exc)`` is the user-facing cause."""


class InputError(ScrapeError):
    """The target URL is missing or unusable."""


class FetchError(ScrapeError):
    """A page could not be fetched or its body could not be read."""

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class SecondaryFetchError(FetchError):
    """The optional contact page failed; never terminal for a request."""
