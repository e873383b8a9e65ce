"""Email mining over the combined text of a page."""

from __future__ import annotations

import re
from typing import Iterable, Set

EMAIL_RE = re.compile(r"[a-zA-Z0-9._-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}", re.IGNORECASE)

# Asset filenames such as ``logo@2x.png`` match the email shape.
ASSET_EXTENSIONS = (
    ".png", ".jpg", ".jpeg", ".gif", ".svg", ".webp", ".ico", ".bmp",
    ".js", ".css",
    ".woff", ".woff2", ".ttf", ".eot", ".otf",
    ".mp4", ".webm", ".mov",
)


def combine_sources(text: str, mailto: Iterable[str]) -> str:
    """Join visible text and mailto addresses into one searchable blob."""
    return " ".join([text, *mailto])


def is_asset_name(candidate: str) -> bool:
    return candidate.lower().endswith(ASSET_EXTENSIONS)


def mine_emails(text: str) -> Set[str]:
    """Return the set of lowercased, email-shaped tokens found in *text*.

    Tokens ending in a known asset extension are dropped.
    """
    found: Set[str] = set()
    for match in EMAIL_RE.findall(text or ""):
        email = match.lower()
        if not is_asset_name(email):
            found.add(email)
    return found
