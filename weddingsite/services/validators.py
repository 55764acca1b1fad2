"""Input validation for subdomains and custom domains."""

import re
from typing import Optional

_SUBDOMAIN_RE = re.compile(r"^[a-z0-9]([a-z0-9-]{0,61}[a-z0-9])?$")
_DOMAIN_RE = re.compile(r"^(?:[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?\.)+[a-z]{2,}$")
_SCHEME_RE = re.compile(r"^[a-z][a-z0-9+.-]*://", re.I)

MIN_SUBDOMAIN_LENGTH = 3


def is_valid_subdomain(subdomain: str) -> bool:
    return len(subdomain) >= MIN_SUBDOMAIN_LENGTH and bool(_SUBDOMAIN_RE.match(subdomain))


def normalize_custom_domain(raw: Optional[str]) -> Optional[str]:
    """
    Canonical stored form of a custom domain: lowercase, no scheme, no path.
    Returns None for blank input (detach the domain).
    """
    if raw is None:
        return None
    domain = _SCHEME_RE.sub("", raw.strip()).lower()
    domain = domain.split("/", 1)[0].rstrip(".")
    return domain or None


def is_valid_domain(domain: str) -> bool:
    return len(domain) <= 253 and bool(_DOMAIN_RE.match(domain))
