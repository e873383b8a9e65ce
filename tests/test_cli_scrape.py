"""Tests for the ``scrape`` CLI command."""

from __future__ import annotations

import json
from unittest.mock import patch

from typer.testing import CliRunner

from cli.main import app
from contact_scraper.scraper import ScrapeResult

runner = CliRunner()

_OK = ScrapeResult.ok(
    url="https://acme.test",
    candidates=3,
    emails=["info@acme.test", "sales@acme.test"],
    social_media={"facebook": ["https://facebook.com/acme"], "twitter": []},
)


def test_scrape_prints_summary():
    with patch("contact_scraper.scraper.ContactScraper.scrape", return_value=_OK) as mock_scrape:
        result = runner.invoke(app, ["scrape", "--url", "acme.test"])

    assert result.exit_code == 0
    mock_scrape.assert_called_once_with("acme.test")
    assert "Candidates : 3" in result.stdout
    assert "sales@acme.test" in result.stdout
    assert "[facebook] https://facebook.com/acme" in result.stdout


def test_scrape_json_output():
    with patch("contact_scraper.scraper.ContactScraper.scrape", return_value=_OK):
        result = runner.invoke(app, ["scrape", "--url", "acme.test", "--json"])

    assert result.exit_code == 0
    body = json.loads(result.stdout)
    assert body["valid_emails_count"] == 2
    assert body["emails"] == ["info@acme.test", "sales@acme.test"]


def test_scrape_failure_exits_non_zero():
    failed = ScrapeResult.failed("https://down.test", "HTTP 503 Service Unavailable: https://down.test")
    with patch("contact_scraper.scraper.ContactScraper.scrape", return_value=failed):
        result = runner.invoke(app, ["scrape", "--url", "down.test"])

    assert result.exit_code == 1
    assert "HTTP 503" in result.stdout
