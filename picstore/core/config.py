"""
Environment-driven settings.

Constructor arguments passed to `Db` / `Database` always win over these.
"""

from __future__ import annotations

import os
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

DEFAULT_DATABASE_URL = "postgresql://postgres@localhost:5432/picstore"

_TRUTHY = {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    return raw in _TRUTHY


def sanitize_database_url(url: str) -> str:
    # asyncpg does not understand libpq's `sslmode` query parameter.
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def with_database(url: str, name: str) -> str:
    """
    Return `url` pointing at database `name` on the same server.
    """
    parts = urlsplit(url)
    return urlunsplit((parts.scheme, parts.netloc, "/" + name, parts.query, parts.fragment))


def database_name(url: str) -> str:
    return urlsplit(url).path.lstrip("/")


def database_url() -> str:
    url = (
        os.environ.get("PICSTORE_DATABASE_URL", "").strip()
        or os.environ.get("DATABASE_URL", "").strip()
        or DEFAULT_DATABASE_URL
    )
    name = os.environ.get("PICSTORE_DB", "").strip()
    if name:
        url = with_database(url, name)
    return sanitize_database_url(url)


def setup_enabled() -> bool:
    return _env_bool("PICSTORE_SETUP")


def pool_min_size() -> int:
    return _env_int("PICSTORE_POOL_MIN_SIZE", 1)


def pool_max_size() -> int:
    return _env_int("PICSTORE_POOL_MAX_SIZE", 5)


def command_timeout() -> float:
    return _env_float("PICSTORE_COMMAND_TIMEOUT", 30.0)
