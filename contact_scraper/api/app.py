"""FastAPI application factory.

Lifespan
--------
On startup the app configures logging and builds a single
:class:`ContactScraper` (shared across requests via
``request.app.state.scraper``).  The scraper only holds configuration, so
sharing it keeps requests independent.

Routes
------
    GET  /        — liveness check
    POST /scrape  — scrape a site for contact emails and social links
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from contact_scraper import __version__
from contact_scraper.config import Settings, settings as default_settings
from contact_scraper.logging_config import configure_logging
from contact_scraper.scraper import ContactScraper, ScrapeResult

from contact_scraper.api.routers import scrape as scrape_router

log = logging.getLogger(__name__)


async def _invalid_request_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed bodies as a failed scrape, still with HTTP 200."""
    log.warning("[API] Invalid request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=200, content=ScrapeResult.failed(None, "Missing url").to_response())


def create_app(config: Settings | None = None) -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    config = config or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Build the shared scraper on startup."""
        configure_logging(config.log_level)
        app.state.scraper = ContactScraper(config)
        if config.proxy_url:
            log.info("[API] Outbound requests will use the configured proxy")
        yield

    app = FastAPI(
        title="Contact Scraper API",
        description=(
            "Finds contact email addresses on a website, keeps those whose "
            "domain publishes MX records, and collects social-media profile links."
        ),
        version=__version__,
        lifespan=lifespan,
    )

    # Called from automation tools and browser frontends on any origin.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, _invalid_request_handler)

    @app.get("/", response_class=PlainTextResponse)
    def health() -> str:
        return "Scraper is running!"

    app.include_router(scrape_router.router, prefix="/scrape", tags=["scrape"])

    return app


# Module-level instance used by uvicorn:
#   uvicorn contact_scraper.api.app:app --reload
app = create_app()
