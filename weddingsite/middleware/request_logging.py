"""
Request Logging Middleware

- Assigns a unique request_id to every request
- Sets user_id / host logging context
- Logs request start & end with timing
"""

import logging
import time

from jose import JWTError
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from weddingsite.core.security import decode_access_token
from weddingsite.logging_config import (
    generate_request_id,
    host_ctx,
    request_id_ctx,
    user_id_ctx,
)

logger = logging.getLogger("weddingsite.request")


def _extract_user_id(request: Request) -> str:
    """Best-effort user id from the bearer token; auth itself happens in deps."""
    auth = request.headers.get("authorization", "")
    if not auth.startswith("Bearer "):
        return "-"
    try:
        payload = decode_access_token(auth[7:], verify_exp=False)
    except JWTError:
        return "-"
    return str(payload.get("sub", "-"))


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        rid = generate_request_id()
        request_id_ctx.set(rid)
        user_id_ctx.set(_extract_user_id(request))
        host_ctx.set(request.headers.get("host", "-") or "-")

        method = request.method
        path = request.url.path
        client_ip = request.client.host if request.client else "-"

        logger.info("→ %s %s from %s", method, path, client_ip)

        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            elapsed = (time.perf_counter() - start) * 1000
            logger.exception("✗ %s %s — %.1fms (unhandled exception)", method, path, elapsed)
            raise

        elapsed = (time.perf_counter() - start) * 1000
        response.headers["X-Request-ID"] = rid

        logger.info(
            "← %s %s — %d — %.1fms",
            method, path, response.status_code, elapsed,
        )
        return response
