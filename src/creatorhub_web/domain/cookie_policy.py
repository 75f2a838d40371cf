from __future__ import annotations

import logging
from dataclasses import dataclass
from urllib.parse import urlsplit

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CookieDomain:
    """Parent domain shared by the API host and the page origin.

    ``attribute`` is the value for the cookie ``Domain`` attribute, or None when
    the cookie must stay scoped to the exact host (local development).
    """

    domain: str
    tld: str
    attribute: str | None


def split_host(api_url: str) -> tuple[str, str] | None:
    """Returns (domain, tld), the last two labels of the API host, or None."""
    url = api_url if "://" in api_url else f"//{api_url}"
    host = urlsplit(url).hostname or ""
    labels = [label for label in host.split(".") if label]
    if len(labels) < 2:
        return None
    return labels[-2], labels[-1]


def derive_cookie_domain(api_url: str, *, development: bool) -> CookieDomain:
    parts = split_host(api_url)
    domain, tld = parts if parts else ("", "")
    if development:
        return CookieDomain(domain, tld, None)
    if parts is None:
        # no parent domain to share; fall back to a host-only cookie
        logger.warning("API host of %s has no parent domain, cookie stays host-only", api_url)
        return CookieDomain(domain, tld, None)
    return CookieDomain(domain, tld, f".{domain}.{tld}")
