"""Process-wide logging setup shared by the API and the CLI."""

from __future__ import annotations

import logging

_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Attach a stream handler to the root logger once.

    Calling this again only adjusts the level, so the app factory and the CLI
    can both call it without duplicating output.
    """
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=_FORMAT)
    root.setLevel(level.upper())
    # httpx logs every request at INFO; the pipeline already reports fetches.
    logging.getLogger("httpx").setLevel(logging.WARNING)
