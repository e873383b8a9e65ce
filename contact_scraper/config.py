"""Centralised settings for the contact scraper service.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).

Pipeline code never reads the environment directly: the :class:`Settings`
instance is handed to :class:`~contact_scraper.scraper.pipeline.ContactScraper`
which derives the fetcher and validator configuration from it.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


def _env_flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # HTTP service
    # ------------------------------------------------------------------
    host: str = field(default_factory=lambda: os.environ.get("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.environ.get("PORT", "3000")))
    log_level: str = field(default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO"))

    # ------------------------------------------------------------------
    # Fetcher
    # ------------------------------------------------------------------
    proxy_url: Optional[str] = field(
        default_factory=lambda: os.environ.get("PROXY_URL") or None
    )
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "20.0"))
    )
    verify_tls: bool = field(default_factory=lambda: _env_flag("VERIFY_TLS", "false"))

    # ------------------------------------------------------------------
    # MX validation
    # ------------------------------------------------------------------
    dns_timeout: float = field(
        default_factory=lambda: float(os.environ.get("DNS_TIMEOUT", "3.0"))
    )
    dns_lifetime: float = field(
        default_factory=lambda: float(os.environ.get("DNS_LIFETIME", "5.0"))
    )
    dns_max_workers: int = field(
        default_factory=lambda: int(os.environ.get("DNS_MAX_WORKERS", "16"))
    )


# Module-level singleton; import this at the process edges only:
#   from contact_scraper.config import settings
settings = Settings()
