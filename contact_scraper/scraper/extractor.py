"""Content extraction: turns raw HTML into the views the miners work on."""

from __future__ import annotations

import re
from typing import List
from urllib.parse import unquote

from bs4 import BeautifulSoup

from contact_scraper.scraper.models import Anchor, ExtractedPage

_MAILTO_PREFIX = re.compile(r"^\s*mailto:", re.IGNORECASE)
_WHITESPACE = re.compile(r"\s+")

# Elements whose text is never shown to a visitor.
_INVISIBLE_TAGS = ["script", "style", "noscript", "template"]


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _visible_text(soup: BeautifulSoup) -> str:
    """Return all human-readable text of the page body.

    Unlike a readability extractor this keeps headers, footers and navigation,
    which is where contact details usually live.
    """
    for tag in soup(_INVISIBLE_TAGS):
        tag.decompose()
    container = soup.body or soup
    return _WHITESPACE.sub(" ", container.get_text(separator=" ")).strip()


def mailto_address(href: str) -> str:
    """Strip the ``mailto:`` scheme and any ``?subject=...`` query from *href*."""
    address = _MAILTO_PREFIX.sub("", href).split("?", 1)[0]
    return unquote(address).strip()


def _mailto_links(soup: BeautifulSoup) -> List[str]:
    addresses: List[str] = []
    for a in soup.find_all("a", href=_MAILTO_PREFIX):
        address = mailto_address(a["href"])
        if address:
            addresses.append(address)
    return addresses


def _anchors(soup: BeautifulSoup) -> List[Anchor]:
    """Return every anchor with a non-empty ``href``, in document order."""
    anchors: List[Anchor] = []
    for a in soup.find_all("a", href=True):
        href = a["href"].strip()
        if not href:
            continue
        text = _WHITESPACE.sub(" ", a.get_text(separator=" ")).strip()
        anchors.append(Anchor(href=href, text=text))
    return anchors


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract_page(html: str) -> ExtractedPage:
    """Derive visible text, mailto addresses and the anchor list from *html*.

    Links are collected before invisible elements are stripped so a
    ``<noscript>`` fallback link is still available to the link miners.
    """
    soup = BeautifulSoup(html or "", "html.parser")
    mailto = _mailto_links(soup)
    anchors = _anchors(soup)
    text = _visible_text(soup)
    return ExtractedPage(text=text, mailto=mailto, anchors=anchors)
