"""Contact scraper CLI.

Usage:
    python cli/main.py --help

Commands:
    scrape    → run the scrape pipeline once and print the result
    serve     → start the HTTP API
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that
# `from contact_scraper.xxx import ...` works when the CLI is invoked as
# `python cli/main.py` from any working directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import json
from typing import Optional

import typer

from contact_scraper.config import settings
from contact_scraper.logging_config import configure_logging

app = typer.Typer(
    name="contact-scraper",
    help="Find validated contact emails and social profiles on a website.",
    no_args_is_help=True,
)


@app.callback()
def main(
    log_level: str = typer.Option(settings.log_level, "--log-level", help="Logging level."),
) -> None:
    configure_logging(log_level)


# ---------------------------------------------------------------------------
# Scrape
# ---------------------------------------------------------------------------
@app.command("scrape")
def scrape(
    url: str = typer.Option(..., help="Site to scrape, e.g. example.com."),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON result."),
) -> None:
    """Scrape a site once and print the emails and social links found."""
    from contact_scraper.scraper import ContactScraper

    result = ContactScraper(settings).scrape(url)

    if as_json:
        typer.echo(json.dumps(result.to_response(), indent=2))
    elif not result.success:
        typer.echo(f"[scrape] Failed {result.url or url!r}: {result.error}")
    else:
        typer.echo(f"[scrape] URL        : {result.url}")
        typer.echo(f"[scrape] Candidates : {result.candidates_found}")
        typer.echo(f"[scrape] Valid      : {result.valid_emails_count}")
        for email in result.emails:
            typer.echo(f"  {email}")
        for platform, links in result.social_media.items():
            for link in links:
                typer.echo(f"  [{platform}] {link}")

    if not result.success:
        raise typer.Exit(code=1)


# ---------------------------------------------------------------------------
# Serve
# ---------------------------------------------------------------------------
@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address (default: $HOST)."),
    port: Optional[int] = typer.Option(None, help="Port (default: $PORT)."),
) -> None:
    """Start the HTTP API with uvicorn."""
    import uvicorn

    bind_host = host or settings.host
    bind_port = port or settings.port
    typer.echo(f"[serve] Listening on {bind_host}:{bind_port}")
    uvicorn.run("contact_scraper.api.app:app", host=bind_host, port=bind_port)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
