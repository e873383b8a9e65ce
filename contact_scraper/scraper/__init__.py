"""Scraper package: fetch, extract, mine and validate contact data."""

from contact_scraper.scraper.extractor import extract_page
from contact_scraper.scraper.fetcher import Fetcher, FetcherConfig, normalise_url
from contact_scraper.scraper.models import ScrapeResult
from contact_scraper.scraper.pipeline import ContactScraper
from contact_scraper.scraper.validator import DomainValidator, ValidatorConfig

__all__ = [
    "ContactScraper",
    "DomainValidator",
    "Fetcher",
    "FetcherConfig",
    "ScrapeResult",
    "ValidatorConfig",
    "extract_page",
    "normalise_url",
]
