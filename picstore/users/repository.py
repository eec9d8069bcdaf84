"""
User persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from picstore.core.db import Database

_COLUMNS = "id, username, email, name, password, facebook, created_at"


async def create_user(
    database: Database,
    *,
    username: str,
    email: str,
    name: str,
    password_hash: str | None,
    facebook: bool,
) -> dict[str, Any]:
    row = await database.fetch_one(
        f"""
        INSERT INTO users (username, email, name, password, facebook)
        VALUES ($1, $2, $3, $4, $5)
        RETURNING {_COLUMNS}
        """,
        username,
        email,
        name,
        password_hash,
        facebook,
    )
    if row is None:
        raise RuntimeError("Failed to create user.")
    return row


async def get_user_by_username(database: Database, username: str) -> dict[str, Any] | None:
    return await database.fetch_one(
        f"""
        SELECT {_COLUMNS}
        FROM users
        WHERE username = $1
        """,
        username,
    )
