"""
Custom Domain Routing Middleware

Serves a couple's site on their own domain:

1. API, auth, dashboard, docs and asset paths pass through untouched
2. Platform hosts pass through untouched
3. Any other host is looked up in the domain directory
4. On a hit the request is routed to /site/{subdomain}{path}

Only the server-side route changes; the visitor's URL stays as typed.
Lookup failures and timeouts fail open (request served unchanged).
"""

import asyncio
import contextvars
import logging

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from weddingsite.api.deps import get_db
from weddingsite.config import settings
from weddingsite.services import domain_directory
from weddingsite.services.domain_routing import (
    HostClass,
    classify_host,
    is_bypassed_path,
    normalize_host,
    rewrite_path,
    rewrite_raw_path,
)

logger = logging.getLogger("weddingsite.domain")


def _lookup_subdomain(request: Request, host: str):
    # Honour dependency overrides so the middleware shares the request's DB
    provider = request.app.dependency_overrides.get(get_db, get_db)
    session_gen = provider()
    db = next(session_gen)
    try:
        return domain_directory.lookup(db, host)
    finally:
        session_gen.close()


class CustomDomainMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        path = request.url.path
        if is_bypassed_path(path):
            return await call_next(request)

        raw_host = request.headers.get("host", "")
        if classify_host(raw_host) is HostClass.PLATFORM:
            return await call_next(request)

        host = normalize_host(raw_host)
        loop = asyncio.get_running_loop()
        ctx = contextvars.copy_context()
        try:
            # on timeout the worker thread is abandoned and finishes on its own
            subdomain = await asyncio.wait_for(
                loop.run_in_executor(None, ctx.run, _lookup_subdomain, request, host),
                timeout=settings.DOMAIN_LOOKUP_TIMEOUT_SECONDS,
            )
        except asyncio.TimeoutError:
            logger.warning(
                "Custom domain lookup for %s timed out after %.1fs",
                host, settings.DOMAIN_LOOKUP_TIMEOUT_SECONDS,
            )
            return await call_next(request)
        except domain_directory.DirectoryLookupError as e:
            logger.warning("Custom domain resolution failed for %s: %s", host, e)
            return await call_next(request)

        if subdomain:
            new_path = rewrite_path(path, subdomain)
            request.scope["path"] = new_path
            raw_path = request.scope.get("raw_path") or path.encode("utf-8")
            request.scope["raw_path"] = rewrite_raw_path(raw_path, subdomain)
            logger.debug("Rewrote %s%s → %s", host, path, new_path)

        return await call_next(request)
