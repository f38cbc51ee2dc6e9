"""
Async database access helpers (raw SQL) using asyncpg.

The pool is created once per process by the FastAPI lifespan hook
(see `api/main.py`) and closed on shutdown.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
- dynamic fragments come from `core.sql` and keep the same numbering.
"""

from __future__ import annotations

import logging
import os
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg

_pool: asyncpg.Pool | None = None

logger = logging.getLogger(__name__)


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _sanitize_database_url(url: str) -> str:
    # asyncpg rejects libpq-only query args like sslmode.
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url() -> str:
    url = os.environ.get("DATABASE_URL", "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")
    return _sanitize_database_url(url)


def pool_sizes() -> tuple[int, int]:
    min_size = max(1, _env_int("DB_POOL_MIN_SIZE", 1))
    max_size = max(min_size, _env_int("DB_POOL_MAX_SIZE", 5))
    return min_size, max_size


async def init_pool() -> None:
    global _pool
    if _pool is not None:
        return None
    min_size, max_size = pool_sizes()
    _pool = await asyncpg.create_pool(
        dsn=database_url(),
        min_size=min_size,
        max_size=max_size,
        command_timeout=30,
    )
    logger.info("db_pool_ready min_size=%s max_size=%s", min_size, max_size)


async def close_pool() -> None:
    global _pool
    if _pool is None:
        return None
    await _pool.close()
    _pool = None


def pool() -> asyncpg.Pool:
    if _pool is None:
        raise RuntimeError("DB pool is not initialized. Call init_pool() on startup.")
    return _pool


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


async def fetch_one(sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    row = await pool().fetchrow(sql, *args)
    return _record_to_dict(row) if row is not None else None


async def fetch_all(sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    rows = await pool().fetch(sql, *args)
    return [_record_to_dict(r) for r in rows]
