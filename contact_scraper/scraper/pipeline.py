"""Orchestrates one scrape request from URL to :class:`ScrapeResult`.

Flow
----
1. Normalise the target URL.
2. Fetch and extract the home page.  Failure here ends the request.
3. If the home page yielded no email candidates, fetch at most one
   contact/about page.  Failure here is logged and ignored.
4. Union candidates, merge social links, validate MX records concurrently.
5. Assemble the result.

``ContactScraper.scrape`` never raises; every outcome is a ``ScrapeResult``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Set

from contact_scraper.config import Settings
from contact_scraper.scraper.contact_page import select_contact_page
from contact_scraper.scraper.emails import combine_sources, mine_emails
from contact_scraper.scraper.errors import FetchError, InputError, SecondaryFetchError
from contact_scraper.scraper.extractor import extract_page
from contact_scraper.scraper.fetcher import Fetcher, FetcherConfig, normalise_url
from contact_scraper.scraper.models import ScrapeResult
from contact_scraper.scraper.social import extract_social_links, merge_social_links
from contact_scraper.scraper.validator import DomainValidator, ValidatorConfig

log = logging.getLogger(__name__)


@dataclass
class PageFindings:
    """What one page contributed: its email candidates and social links."""

    url: str
    candidates: Set[str]
    social_links: Dict[str, List[str]]
    contact_page: Optional[str] = None


class ContactScraper:
    """Runs the crawl, extract and validate pipeline for one URL at a time.

    Holds configuration only; every call to :meth:`scrape` builds its own
    HTTP client, so one instance can serve concurrent requests.
    """

    def __init__(
        self,
        settings: Settings,
        fetcher: Fetcher | None = None,
        validator: DomainValidator | None = None,
    ) -> None:
        self.fetcher = fetcher or Fetcher(
            FetcherConfig(
                timeout=settings.request_timeout,
                proxy=settings.proxy_url,
                verify_tls=settings.verify_tls,
            )
        )
        self.validator = validator or DomainValidator(
            ValidatorConfig(
                timeout=settings.dns_timeout,
                lifetime=settings.dns_lifetime,
                max_workers=settings.dns_max_workers,
            )
        )

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------

    def _scan(self, url: str, look_for_contact_page: bool) -> PageFindings:
        raw = self.fetcher.fetch(url)
        page = extract_page(raw.html)
        candidates = mine_emails(combine_sources(page.text, page.mailto))
        log.info("[EXTRACT] %s: %d candidate(s), %d link(s)", raw.url, len(candidates), len(page.anchors))

        contact_page = None
        if look_for_contact_page and not candidates:
            contact_page = select_contact_page(page.anchors, raw.url)
        return PageFindings(
            url=raw.url,
            candidates=candidates,
            social_links=extract_social_links(page.anchors),
            contact_page=contact_page,
        )

    def _scan_contact_page(self, url: str) -> PageFindings:
        log.info("[DEEP CRAWL] No emails on home page, trying %s", url)
        try:
            return self._scan(url, look_for_contact_page=False)
        except FetchError as exc:
            raise SecondaryFetchError(str(exc), url) from exc
        except Exception as exc:
            raise SecondaryFetchError(f"Could not parse {url}: {exc}", url) from exc

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def scrape(self, raw_url: Optional[str]) -> ScrapeResult:
        """Scrape *raw_url* and return a success or failure result."""
        try:
            url = normalise_url(raw_url)
        except InputError as exc:
            log.warning("[SCRAPE] Rejected input %r: %s", raw_url, exc)
            return ScrapeResult.failed(raw_url or None, str(exc))

        log.info("[SCRAPE] Starting scrape for %s", url)
        try:
            home = self._scan(url, look_for_contact_page=True)
        except FetchError as exc:
            log.error("[SCRAPE] Error scraping %s: %s", url, exc)
            return ScrapeResult.failed(url, str(exc))
        except Exception as exc:
            log.exception("[SCRAPE] Could not process %s", url)
            return ScrapeResult.failed(url, f"Could not process page: {exc}")

        pages = [home]
        if home.contact_page:
            try:
                pages.append(self._scan_contact_page(home.contact_page))
            except SecondaryFetchError as exc:
                log.warning("[DEEP CRAWL] Skipping contact page: %s", exc)

        candidates: Set[str] = set().union(*(p.candidates for p in pages))
        social_links = merge_social_links(*(p.social_links for p in pages))

        log.info("[VALIDATE] Found %d candidate(s). Validating DNS...", len(candidates))
        valid = self.validator.validate(candidates)
        emails = sorted(valid)

        log.info("[SCRAPE] Success! Found %d valid email(s) for %s", len(emails), url)
        return ScrapeResult.ok(
            url=url,
            candidates=len(candidates),
            emails=emails,
            social_media=social_links,
        )
