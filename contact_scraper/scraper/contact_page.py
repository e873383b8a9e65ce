"""Pick the one secondary page worth crawling when the home page has no emails."""

from __future__ import annotations

from typing import Iterable, Optional
from urllib.parse import urljoin, urlparse

from contact_scraper.scraper.models import Anchor

_TEXT_KEYWORDS = ("contact", "about")
_HREF_KEYWORDS = ("contact",)
_SKIP_SCHEMES = ("mailto:", "tel:", "javascript:", "sms:")


def _qualifies(anchor: Anchor) -> bool:
    href = anchor.href.strip().lower()
    if not href or href.startswith("#") or href.startswith(_SKIP_SCHEMES):
        return False
    text = anchor.text.lower()
    return any(k in text for k in _TEXT_KEYWORDS) or any(k in href for k in _HREF_KEYWORDS)


def select_contact_page(anchors: Iterable[Anchor], base_url: str) -> Optional[str]:
    """Return the absolute URL of the first contact/about link, or ``None``.

    Anchors are scanned in document order and the first qualifying one wins;
    there is no ranking between equally plausible links.
    """
    for anchor in anchors:
        if not _qualifies(anchor):
            continue
        try:
            resolved = urljoin(base_url, anchor.href.strip())
        except ValueError:
            return None
        if urlparse(resolved).scheme in ("http", "https"):
            return resolved
        return None
    return None
