"""
Logging setup.

JSON lines in production / staging, a readable one-liner in development.
Every record carries the request id and the Host it arrived on, so a
custom-domain rewrite can be traced back to the domain that triggered it.
Couple emails and bearer tokens are masked before they reach the output.
"""

import json
import logging
import re
import sys
import uuid
from contextvars import ContextVar
from typing import Any

from weddingsite.config import settings

request_id_ctx: ContextVar[str] = ContextVar("request_id", default="-")
user_id_ctx: ContextVar[str] = ContextVar("user_id", default="-")
host_ctx: ContextVar[str] = ContextVar("host", default="-")

_EMAIL = re.compile(r'([a-zA-Z0-9._%+-]+)@([a-zA-Z0-9.-]+\.[a-zA-Z]{2,})')
_BEARER = re.compile(r'(Bearer\s+)[A-Za-z0-9._-]+')


def generate_request_id() -> str:
    return uuid.uuid4().hex[:8]


def _mask_email(match: re.Match) -> str:
    local, domain = match.group(1), match.group(2)
    tail = local[-1] if len(local) > 2 else ""
    return f"{local[0]}***{tail}@{domain}"


def mask_pii(text: str) -> str:
    text = _BEARER.sub(r"\1***", text)
    return _EMAIL.sub(_mask_email, text)


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S.000Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": mask_pii(record.getMessage()),
        }
        for key, ctx in (("request_id", request_id_ctx), ("user_id", user_id_ctx), ("host", host_ctx)):
            value = ctx.get()
            if value != "-":
                entry[key] = value
        if record.exc_info and record.exc_info[1]:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


class HumanFormatter(logging.Formatter):
    FORMAT = "%(asctime)s %(levelname)-7s %(name)s [%(request_id)s %(host)s] %(message)s"

    def format(self, record: logging.LogRecord) -> str:
        record.request_id = request_id_ctx.get()
        record.host = host_ctx.get()
        return super().format(record)


def setup_logging() -> None:
    handler = logging.StreamHandler(sys.stdout)
    root = logging.getLogger()
    root.handlers.clear()

    if settings.is_production or settings.is_staging:
        handler.setFormatter(JSONFormatter())
        root.setLevel(logging.INFO)
    else:
        handler.setFormatter(HumanFormatter(HumanFormatter.FORMAT, datefmt="%H:%M:%S"))
        root.setLevel(logging.DEBUG)
    root.addHandler(handler)

    # SQL is logged by the slow-query hook, not the engine logger
    for name in ("uvicorn.access", "httpx", "sqlalchemy.engine"):
        logging.getLogger(name).setLevel(logging.WARNING)
