"""
Database engine and session factory.

Pool settings apply to PostgreSQL only; SQLite (local runs, tests) gets a
plain engine that can be shared across the threadpool.
"""

import logging
import time

from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

from weddingsite.config import settings

logger = logging.getLogger("weddingsite.db")

SLOW_QUERY_THRESHOLD_MS = settings.SLOW_QUERY_THRESHOLD_MS


def _build_engine(url: str):
    if url.startswith("sqlite"):
        return create_engine(url, connect_args={"check_same_thread": False})
    return create_engine(
        url,
        pool_pre_ping=True,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_recycle=1800,
    )


engine = _build_engine(settings.SQLALCHEMY_DATABASE_URI)


@event.listens_for(engine, "before_cursor_execute")
def _before_cursor_execute(conn, cursor, statement, parameters, context, executemany):
    conn.info.setdefault("query_start_time", []).append(time.perf_counter())


@event.listens_for(engine, "after_cursor_execute")
def _after_cursor_execute(conn, cursor, statement, parameters, context, executemany):
    total_ms = (time.perf_counter() - conn.info["query_start_time"].pop()) * 1000

    if total_ms >= SLOW_QUERY_THRESHOLD_MS:
        stmt_preview = statement[:500] + "..." if len(statement) > 500 else statement
        logger.warning(
            "Slow query detected (%.1fms): %s", total_ms, stmt_preview,
        )


SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
