"""
`Db`: the data-access surface the API layer talks to.

    async with Db(url, db="picstore") as db:
        image = await db.save_image({"url": ..., "user_id": ..., "description": "#sunset"})
        await db.like_image(image.public_id)
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from picstore.core.db import Database
from picstore.core.errors import NotConnectedError
from picstore.images import schemas as image_schemas
from picstore.images import service as image_service
from picstore.users import schemas as user_schemas
from picstore.users import service as user_service


class Db:
    def __init__(
        self,
        url: str | None = None,
        *,
        db: str | None = None,
        setup: bool | None = None,
        **pool_options: Any,
    ) -> None:
        self.database = Database(url, db=db, setup=setup, **pool_options)

    @property
    def connected(self) -> bool:
        return self.database.connected

    async def connect(self) -> None:
        await self.database.connect()

    async def disconnect(self) -> None:
        await self.database.disconnect()

    async def __aenter__(self) -> Db:
        await self.connect()
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.disconnect()

    def _require_connection(self) -> Database:
        if not self.database.connected:
            raise NotConnectedError("Db is not connected. Call connect() first.")
        return self.database

    # ── Images ────────────────────────────────────────────

    async def save_image(self, data: image_schemas.ImageCreate | Mapping[str, Any]) -> image_schemas.Image:
        return await image_service.save_image(self._require_connection(), data)

    async def get_image(self, public_id: str) -> image_schemas.Image:
        return await image_service.get_image(self._require_connection(), public_id)

    async def get_images(self) -> list[image_schemas.Image]:
        return await image_service.get_images(self._require_connection())

    async def get_images_by_user(self, user_id: str) -> list[image_schemas.Image]:
        return await image_service.get_images_by_user(self._require_connection(), user_id)

    async def get_images_by_tag(self, tag: str) -> list[image_schemas.Image]:
        return await image_service.get_images_by_tag(self._require_connection(), tag)

    async def like_image(self, public_id: str) -> image_schemas.Image:
        return await image_service.like_image(self._require_connection(), public_id)

    # ── Users ─────────────────────────────────────────────

    async def save_user(self, data: user_schemas.UserCreate | Mapping[str, Any]) -> user_schemas.User:
        return await user_service.save_user(self._require_connection(), data)

    async def get_user(self, username: str) -> user_schemas.User:
        return await user_service.get_user(self._require_connection(), username)

    async def authenticate(self, username: str, password: str) -> bool:
        return await user_service.authenticate(self._require_connection(), username, password)
