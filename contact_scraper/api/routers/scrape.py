"""Scrape endpoint.

Routes
------
POST /scrape    Body: {"url": "example.com"}    → ContactScraper.scrape

Every outcome, including a missing URL or a blocked target, is returned with
HTTP 200 and a ``success`` flag; the automation calling this endpoint treats
any other status as a broken pipeline.
"""

from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, Request
from pydantic import BaseModel

router = APIRouter()


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

class ScrapeRequest(BaseModel):
    url: Optional[str] = None


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.post("", status_code=200)
def scrape_endpoint(body: ScrapeRequest, request: Request) -> dict[str, Any]:
    """Find validated contact emails and social profiles for ``body.url``.

    Declared as a plain ``def`` so each request runs on FastAPI's worker
    thread pool; the pipeline itself is synchronous.
    """
    scraper = request.app.state.scraper
    return scraper.scrape(body.url).to_response()
