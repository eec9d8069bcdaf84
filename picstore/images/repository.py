"""
Image persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from picstore.core.db import Database

_COLUMNS = "id, description, url, likes, liked, tags, user_id, created_at"


async def insert_image(
    database: Database,
    *,
    url: str,
    user_id: str,
    description: str | None,
    tags: list[str],
) -> dict[str, Any]:
    row = await database.fetch_one(
        f"""
        INSERT INTO images (description, url, tags, user_id)
        VALUES ($1, $2, $3, $4)
        RETURNING {_COLUMNS}
        """,
        description,
        url,
        tags,
        user_id,
    )
    if row is None:
        raise RuntimeError("Failed to insert image.")
    return row


async def get_image_by_id(database: Database, image_id: str) -> dict[str, Any] | None:
    return await database.fetch_one(
        f"""
        SELECT {_COLUMNS}
        FROM images
        WHERE id = $1::uuid
        """,
        image_id,
    )


async def list_images(database: Database) -> list[dict[str, Any]]:
    return await database.fetch_all(
        f"""
        SELECT {_COLUMNS}
        FROM images
        """
    )


async def list_images_by_user(database: Database, user_id: str) -> list[dict[str, Any]]:
    return await database.fetch_all(
        f"""
        SELECT {_COLUMNS}
        FROM images
        WHERE user_id = $1
        """,
        user_id,
    )


async def list_images_by_tag(database: Database, tag: str) -> list[dict[str, Any]]:
    # `@>` (array contains) is the operator the GIN index on tags serves.
    return await database.fetch_all(
        f"""
        SELECT {_COLUMNS}
        FROM images
        WHERE tags @> ARRAY[$1::text]
        """,
        tag,
    )


async def increment_likes(database: Database, image_id: str) -> dict[str, Any] | None:
    """
    Add one like in a single statement so concurrent likes never lose updates.
    Returns None when no image has this id.
    """
    return await database.fetch_one(
        f"""
        UPDATE images
        SET likes = likes + 1,
            liked = true
        WHERE id = $1::uuid
        RETURNING {_COLUMNS}
        """,
        image_id,
    )
