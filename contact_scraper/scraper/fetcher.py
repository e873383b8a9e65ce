"""HTTP fetcher that presents a browser identity to the target site."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional
from urllib.parse import urlparse

import httpx

from contact_scraper.scraper.errors import FetchError, InputError
from contact_scraper.scraper.models import RawPage

log = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Browser identity
# ---------------------------------------------------------------------------
BROWSER_HEADERS: Dict[str, str] = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept": (
        "text/html,application/xhtml+xml,application/xml;q=0.9,"
        "image/avif,image/webp,*/*;q=0.8"
    ),
    "Accept-Language": "en-US,en;q=0.9",
    "Referer": "https://www.google.com/",
    "Connection": "keep-alive",
    "Upgrade-Insecure-Requests": "1",
    "Sec-Fetch-Dest": "document",
    "Sec-Fetch-Mode": "navigate",
    "Sec-Fetch-Site": "none",
    "Sec-Fetch-User": "?1",
}


@dataclass
class FetcherConfig:
    """Everything that shapes an outbound page request.

    ``verify_tls`` is deliberately off by default: target sites with expired or
    self-signed certificates must still be readable.  The flag only affects the
    client built by :class:`Fetcher` (including the hop to ``proxy``).
    """

    timeout: float = 20.0
    proxy: Optional[str] = None
    headers: Dict[str, str] = field(default_factory=lambda: dict(BROWSER_HEADERS))
    verify_tls: bool = False


def normalise_url(raw: Optional[str]) -> str:
    """Return *raw* with an explicit scheme, coercing bare hosts to ``https://``.

    Raises:
        InputError: If *raw* is missing or blank.
    """
    if raw is None or not str(raw).strip():
        raise InputError("Missing url")
    url = str(raw).strip()
    if not url.lower().startswith(("http://", "https://")):
        url = "https://" + url.lstrip("/")
    if not urlparse(url).netloc:
        raise InputError(f"Unusable url: {raw!r}")
    return url


class Fetcher:
    """Issues single GET requests; no retries, one attempt per page."""

    def __init__(self, config: FetcherConfig | None = None) -> None:
        self.config = config or FetcherConfig()

    def _client(self) -> httpx.Client:
        return httpx.Client(
            headers=self.config.headers,
            timeout=self.config.timeout,
            follow_redirects=True,
            verify=self.config.verify_tls,
            proxy=self.config.proxy,
        )

    def fetch(self, url: str) -> RawPage:
        """Fetch *url* and return a :class:`RawPage`.

        Raises:
            FetchError: On timeout, connection/TLS failure, a 4xx/5xx status
                or a body that cannot be decoded.
        """
        if self.config.proxy:
            log.info("[FETCH] Using proxy for %s", url)
        log.debug("[FETCH] GET %s", url)

        try:
            with self._client() as client:
                response = client.get(url)
                response.raise_for_status()
                html = response.text
        except httpx.TimeoutException as exc:
            raise FetchError(
                f"Request timeout after {self.config.timeout:g}s: {url}", url
            ) from exc
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            reason = exc.response.reason_phrase or ""
            raise FetchError(f"HTTP {status} {reason}".strip() + f": {url}", url) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise FetchError(str(exc) or exc.__class__.__name__, url) from exc
        except (UnicodeDecodeError, LookupError) as exc:
            raise FetchError(f"Unreadable response body from {url}: {exc}", url) from exc

        return RawPage(url=str(response.url), html=html, status_code=response.status_code)
