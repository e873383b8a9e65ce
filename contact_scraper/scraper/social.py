"""Classify outbound links into social-media profile buckets."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple
from urllib.parse import urlparse

from contact_scraper.scraper.models import SOCIAL_PLATFORMS, Anchor

# Checked in order; the first platform whose domain appears in the href wins.
_PLATFORM_DOMAINS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("facebook", ("facebook.com",)),
    ("twitter", ("twitter.com",)),
    ("linkedin", ("linkedin.com",)),
    ("instagram", ("instagram.com",)),
    ("youtube", ("youtube.com", "youtu.be")),
    ("tiktok", ("tiktok.com",)),
)

_SHARE_MARKERS = ("share", "intent/tweet")


def _is_x_profile(href: str) -> bool:
    # A bare "x.com" substring test would also match dropbox.com.
    try:
        host = urlparse(href if "//" in href else "//" + href).hostname or ""
    except ValueError:
        return False
    return host == "x.com" or host.endswith(".x.com")


def classify_link(href: str) -> Optional[str]:
    """Return the platform for *href*, or ``None`` for non-social and share links."""
    lowered = href.lower()
    if any(marker in lowered for marker in _SHARE_MARKERS):
        return None
    for platform, domains in _PLATFORM_DOMAINS:
        if any(domain in lowered for domain in domains):
            return platform
        if platform == "twitter" and _is_x_profile(lowered):
            return platform
    return None


def empty_social_links() -> Dict[str, List[str]]:
    return {platform: [] for platform in SOCIAL_PLATFORMS}


def extract_social_links(anchors: Iterable[Anchor]) -> Dict[str, List[str]]:
    """Bucket profile links by platform, deduplicating by exact href."""
    links = empty_social_links()
    for anchor in anchors:
        platform = classify_link(anchor.href)
        if platform and anchor.href not in links[platform]:
            links[platform].append(anchor.href)
    return links


def merge_social_links(*mappings: Dict[str, List[str]]) -> Dict[str, List[str]]:
    """Per-platform union of *mappings*, keeping first-seen order."""
    merged = empty_social_links()
    for mapping in mappings:
        for platform, hrefs in mapping.items():
            bucket = merged.setdefault(platform, [])
            for href in hrefs:
                if href not in bucket:
                    bucket.append(href)
    return merged
