"""
Async database access (raw SQL) using asyncpg.

`Database` owns the connection pool for one `Db` instance. It is created
disconnected; `connect()` opens the pool and `disconnect()` closes it.
Use it as an async context manager to guarantee the pool is released.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import asyncpg

from picstore.core import config
from picstore.core.errors import NotConnectedError, StoreConnectionError

logger = logging.getLogger(__name__)

# Database the server always has; used to create/drop the target database.
MAINTENANCE_DB = "postgres"

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS images (
    id          uuid PRIMARY KEY DEFAULT gen_random_uuid(),
    description text,
    url         text NOT NULL,
    likes       integer NOT NULL DEFAULT 0,
    liked       boolean NOT NULL DEFAULT false,
    tags        text[] NOT NULL DEFAULT '{}',
    user_id     text NOT NULL,
    created_at  timestamptz NOT NULL DEFAULT now()
);

CREATE INDEX IF NOT EXISTS idx_images_user_id ON images (user_id);
CREATE INDEX IF NOT EXISTS idx_images_tags ON images USING gin (tags);

CREATE TABLE IF NOT EXISTS users (
    id          uuid PRIMARY KEY DEFAULT gen_random_uuid(),
    username    text NOT NULL,
    email       text NOT NULL,
    name        text NOT NULL,
    password    text,
    facebook    boolean NOT NULL DEFAULT false,
    created_at  timestamptz NOT NULL DEFAULT now(),
    CONSTRAINT users_password_or_facebook CHECK ((password IS NOT NULL) <> facebook)
);

CREATE UNIQUE INDEX IF NOT EXISTS idx_users_username ON users (username);
"""

_CONNECT_ERRORS = (OSError, asyncio.TimeoutError, asyncpg.PostgresError, asyncpg.InterfaceError)


def _quote_ident(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


async def create_database(url: str, name: str) -> bool:
    """
    Create database `name` on the server behind `url` unless it exists.
    Returns True when it was created.
    """
    conn = await asyncpg.connect(dsn=config.with_database(url, MAINTENANCE_DB))
    try:
        exists = await conn.fetchval("SELECT 1 FROM pg_database WHERE datname = $1", name)
        if exists:
            return False
        # CREATE DATABASE cannot take bind parameters.
        await conn.execute(f"CREATE DATABASE {_quote_ident(name)}")
        logger.info("Created database %s", name)
        return True
    finally:
        await conn.close()


async def drop_database(url: str, name: str) -> None:
    conn = await asyncpg.connect(dsn=config.with_database(url, MAINTENANCE_DB))
    try:
        await conn.execute(f"DROP DATABASE IF EXISTS {_quote_ident(name)}")
        logger.info("Dropped database %s", name)
    finally:
        await conn.close()


class Database:
    def __init__(
        self,
        url: str | None = None,
        *,
        db: str | None = None,
        setup: bool | None = None,
        min_size: int | None = None,
        max_size: int | None = None,
        command_timeout: float | None = None,
    ) -> None:
        url = config.sanitize_database_url(url) if url else config.database_url()
        if db:
            url = config.with_database(url, db)
        self.url = url
        self.name = config.database_name(url)
        self.setup = config.setup_enabled() if setup is None else setup
        self.min_size = config.pool_min_size() if min_size is None else min_size
        self.max_size = config.pool_max_size() if max_size is None else max_size
        self.command_timeout = config.command_timeout() if command_timeout is None else command_timeout
        self._pool: asyncpg.Pool | None = None

    @property
    def connected(self) -> bool:
        return self._pool is not None

    async def connect(self) -> None:
        if self._pool is not None:
            return None

        try:
            if self.setup:
                await create_database(self.url, self.name)
            pool = await asyncpg.create_pool(
                dsn=self.url,
                min_size=self.min_size,
                max_size=self.max_size,
                command_timeout=self.command_timeout,
            )
        except _CONNECT_ERRORS as exc:
            logger.warning("Could not connect to database %s: %s", self.name, exc)
            raise StoreConnectionError(f"Could not connect to database {self.name!r}.") from exc

        if self.setup:
            try:
                await pool.execute(SCHEMA_SQL)
            except _CONNECT_ERRORS as exc:
                await pool.close()
                logger.warning("Could not create schema in database %s: %s", self.name, exc)
                raise StoreConnectionError(f"Could not set up database {self.name!r}.") from exc
            except BaseException:
                await pool.close()
                raise
            logger.info("Database %s schema is ready", self.name)

        self._pool = pool
        logger.info("Connected to database %s", self.name)

    async def disconnect(self) -> None:
        if self._pool is None:
            logger.warning("disconnect() called on database %s while not connected", self.name)
            return None
        pool, self._pool = self._pool, None
        await pool.close()
        logger.info("Disconnected from database %s", self.name)

    async def __aenter__(self) -> Database:
        await self.connect()
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.disconnect()

    def pool(self) -> asyncpg.Pool:
        if self._pool is None:
            raise NotConnectedError("Database is not connected. Call connect() first.")
        return self._pool

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        """
        Run a query and return a single row as a dict (or None).
        """
        row = await self.pool().fetchrow(sql, *args)
        return _record_to_dict(row) if row is not None else None

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        """
        Run a query and return all rows as a list of dicts.
        """
        rows = await self.pool().fetch(sql, *args)
        return [_record_to_dict(r) for r in rows]
