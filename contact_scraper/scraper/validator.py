"""MX-record validation of email candidates.

Each candidate is checked independently on a bounded thread pool.  A lookup
that fails for any reason simply marks its candidate invalid; nothing is
raised to the caller.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Iterable, Optional, Set

import dns.exception
import dns.resolver

log = logging.getLogger(__name__)


@dataclass
class ValidatorConfig:
    timeout: float = 3.0
    lifetime: float = 5.0
    max_workers: int = 16


def email_domain(email: str) -> Optional[str]:
    """Return the part after the last ``@``, or ``None`` if there is none."""
    if "@" not in email:
        return None
    domain = email.rsplit("@", 1)[1].strip().rstrip(".")
    return domain or None


class DomainValidator:
    """Checks that an email's domain publishes at least one MX record."""

    def __init__(self, config: ValidatorConfig | None = None) -> None:
        self.config = config or ValidatorConfig()
        self._resolver: Optional[dns.resolver.Resolver] = None

    @property
    def resolver(self) -> dns.resolver.Resolver:
        """The system resolver, built on first use.

        Reading the resolver configuration can itself fail (no
        ``/etc/resolv.conf``); doing it lazily lets that surface as a failed
        lookup instead of a failed startup.
        """
        if self._resolver is None:
            resolver = dns.resolver.Resolver()
            resolver.timeout = self.config.timeout
            resolver.lifetime = self.config.lifetime
            self._resolver = resolver
        return self._resolver

    @resolver.setter
    def resolver(self, resolver: dns.resolver.Resolver) -> None:
        self._resolver = resolver

    def has_mx(self, email: str) -> bool:
        domain = email_domain(email)
        if domain is None:
            return False
        try:
            answers = self.resolver.resolve(domain, "MX")
            return len(answers) > 0
        except dns.resolver.NXDOMAIN:
            log.debug("[VALIDATE] %s: domain does not exist", domain)
        except dns.resolver.NoAnswer:
            log.debug("[VALIDATE] %s: no MX records", domain)
        except dns.exception.Timeout:
            log.debug("[VALIDATE] %s: lookup timed out", domain)
        except (dns.exception.DNSException, ValueError, UnicodeError) as exc:
            log.debug("[VALIDATE] %s: lookup failed: %s", domain, exc)
        return False

    def validate(self, candidates: Iterable[str]) -> Set[str]:
        """Return the subset of *candidates* whose domain has MX records.

        All lookups are dispatched at once and the call returns only after
        every one of them has finished.
        """
        emails = list(dict.fromkeys(candidates))
        if not emails:
            return set()

        valid: Set[str] = set()
        workers = max(1, min(self.config.max_workers, len(emails)))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="mx") as pool:
            future_to_email = {pool.submit(self.has_mx, email): email for email in emails}
            for future in as_completed(future_to_email):
                email = future_to_email[future]
                try:
                    if future.result():
                        valid.add(email)
                except Exception as exc:
                    log.warning("[VALIDATE] Unexpected failure for %s: %s", email, exc)
        return valid
