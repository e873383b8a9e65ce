"""Data models for the scrape pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

SOCIAL_PLATFORMS = ("facebook", "twitter", "linkedin", "instagram", "youtube", "tiktok")


@dataclass
class RawPage:
    """The raw HTTP response for a single URL fetch.

    ``url`` is the resolved URL after redirects, which is the base for any
    relative links found in ``html``.
    """

    url: str
    html: str
    status_code: int


@dataclass(frozen=True)
class Anchor:
    """A single ``<a>`` element: its raw ``href`` and visible text."""

    href: str
    text: str


@dataclass
class ExtractedPage:
    """The three derived views of a page used by the miners."""

    text: str
    mailto: List[str] = field(default_factory=list)
    anchors: List[Anchor] = field(default_factory=list)


class ScrapeResult(BaseModel):
    """Response payload for one scrape request.

    Success and failure share one model; the fields that only make sense on
    one side are left ``None`` and dropped on serialisation.
    """

    success: bool
    url: Optional[str] = None
    candidates_found: Optional[int] = None
    valid_emails_count: Optional[int] = None
    error: Optional[str] = None
    emails: List[str] = Field(default_factory=list)
    social_media: Dict[str, List[str]] = Field(default_factory=dict)

    @classmethod
    def ok(
        cls,
        url: str,
        candidates: int,
        emails: List[str],
        social_media: Dict[str, List[str]],
    ) -> "ScrapeResult":
        return cls(
            success=True,
            url=url,
            candidates_found=candidates,
            valid_emails_count=len(emails),
            emails=emails,
            social_media=social_media,
        )

    @classmethod
    def failed(cls, url: Optional[str], error: str) -> "ScrapeResult":
        return cls(success=False, url=url, error=error)

    def to_response(self) -> dict:
        """Serialise with exactly the keys of the success or failure shape."""
        if self.success:
            keep = {"success", "url", "candidates_found", "valid_emails_count", "emails", "social_media"}
        else:
            keep = {"success", "url", "error", "emails", "social_media"}
        return self.model_dump(include=keep)
