"""
Custom domain routing
=====================

Decides whether a request's Host is one of the platform's own domains and,
for tenant custom domains, which internal path the request should be served
from.

- classify_host(): platform-domain vs external-domain
- is_bypassed_path(): paths that are never rewritten, whatever the host
- rewrite_path(): "/gallery" on a custom domain → "/site/{subdomain}/gallery"
"""

import enum
from typing import Iterable, Optional

from weddingsite.config import settings

SITE_PATH_PREFIX = "/site"

# Served as-is regardless of host
BYPASS_PATH_PREFIXES = (
    "/api/",
    "/static/",
    "/auth/",
    "/dashboard/",
    "/docs",
    "/redoc",
    "/openapi.json",
    "/health",
)


class HostClass(str, enum.Enum):
    PLATFORM = "platform-domain"
    EXTERNAL = "external-domain"


def normalize_host(host: Optional[str]) -> str:
    """Lowercase a Host header value and drop its port and trailing dot."""
    host = (host or "").strip().lower()
    if host.startswith("["):
        # IPv6 literal, e.g. [::1]:8000
        host = host[1:].split("]", 1)[0]
    else:
        host = host.split(":", 1)[0]
    return host.rstrip(".")


def _matches(host: str, domain: str, match_mode: str) -> bool:
    if match_mode == "substring":
        return domain in host
    return host == domain or host.endswith("." + domain)


def classify_host(
    host: Optional[str],
    platform_domains: Optional[Iterable[str]] = None,
    match_mode: Optional[str] = None,
) -> HostClass:
    """
    Classify a Host header.

    In "suffix" mode a host is ours only if it equals a platform domain or is
    a subdomain of one. "substring" mode keeps the old containment check, under
    which e.g. "evilwedding-tiv4.vercel.app.attacker.test" counts as ours.
    An empty host is always external.
    """
    host = normalize_host(host)
    if not host:
        return HostClass.EXTERNAL

    domains = settings.platform_domains if platform_domains is None else platform_domains
    mode = match_mode or settings.PLATFORM_DOMAIN_MATCH

    if any(_matches(host, d.lower(), mode) for d in domains if d):
        return HostClass.PLATFORM
    return HostClass.EXTERNAL


def is_platform_host(host: Optional[str], **kwargs) -> bool:
    return classify_host(host, **kwargs) is HostClass.PLATFORM


def is_bypassed_path(path: str) -> bool:
    # Anything with a dot is treated as a static asset (favicon.ico, robots.txt, ...)
    return path.startswith(BYPASS_PATH_PREFIXES) or "." in path


def rewrite_path(path: str, subdomain: str) -> str:
    base = f"{SITE_PATH_PREFIX}/{subdomain}"
    if not path or path == "/":
        return base
    if not path.startswith("/"):
        path = "/" + path
    return base + path


def rewrite_raw_path(raw_path: bytes, subdomain: str) -> bytes:
    """Same as rewrite_path, but keeps the request's percent-encoding intact."""
    base = rewrite_path("/", subdomain).encode("ascii")
    if not raw_path or raw_path == b"/":
        return base
    if not raw_path.startswith(b"/"):
        raw_path = b"/" + raw_path
    return base + raw_path
