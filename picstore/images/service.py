"""
Image business logic.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import pydantic

from picstore.core import codec
from picstore.core.db import Database
from picstore.core.errors import NotFoundError, ValidationError

from . import repository, schemas, tags

logger = logging.getLogger(__name__)

IMAGE_NOT_FOUND = "image not found"


def _to_image(row: dict) -> schemas.Image:
    image_id = str(row["id"])
    return schemas.Image(
        id=image_id,
        public_id=codec.encode(image_id),
        description=row.get("description"),
        url=str(row["url"]),
        likes=int(row["likes"]),
        liked=bool(row["liked"]),
        tags=list(row.get("tags") or []),
        user_id=str(row["user_id"]),
        created_at=row["created_at"],
    )


def _lookup_id(public_id: str) -> str | None:
    """
    Map a public id to a store id. An undecodable public id is reported as
    a missing image by callers, so this is the only place DecodeError stops.
    """
    try:
        return codec.decode(public_id)
    except codec.DecodeError:
        logger.debug("Undecodable public id %r", public_id)
        return None


def _parse(data: schemas.ImageCreate | Mapping[str, Any]) -> schemas.ImageCreate:
    if isinstance(data, schemas.ImageCreate):
        return data
    try:
        return schemas.ImageCreate.model_validate(data)
    except pydantic.ValidationError as exc:
        raise ValidationError(f"Invalid image: {exc}") from exc


async def save_image(database: Database, data: schemas.ImageCreate | Mapping[str, Any]) -> schemas.Image:
    payload = _parse(data)

    row = await repository.insert_image(
        database,
        url=payload.url,
        user_id=payload.user_id,
        description=payload.description,
        tags=tags.extract_tags(payload.description),
    )
    image = _to_image(row)
    logger.info("Saved image %s for user %s", image.public_id, image.user_id)
    return image


async def get_image(database: Database, public_id: str) -> schemas.Image:
    image_id = _lookup_id(public_id)
    if image_id is None:
        raise NotFoundError(IMAGE_NOT_FOUND)

    row = await repository.get_image_by_id(database, image_id)
    if row is None:
        raise NotFoundError(IMAGE_NOT_FOUND)
    return _to_image(row)


async def get_images(database: Database) -> list[schemas.Image]:
    rows = await repository.list_images(database)
    return [_to_image(r) for r in rows]


async def get_images_by_user(database: Database, user_id: str) -> list[schemas.Image]:
    rows = await repository.list_images_by_user(database, user_id)
    return [_to_image(r) for r in rows]


async def get_images_by_tag(database: Database, tag: str) -> list[schemas.Image]:
    rows = await repository.list_images_by_tag(database, tags.normalize(tag))
    return [_to_image(r) for r in rows]


async def like_image(database: Database, public_id: str) -> schemas.Image:
    image_id = _lookup_id(public_id)
    if image_id is None:
        raise NotFoundError(IMAGE_NOT_FOUND)

    row = await repository.increment_likes(database, image_id)
    if row is None:
        raise NotFoundError(IMAGE_NOT_FOUND)
    image = _to_image(row)
    logger.info("Liked image %s (%d likes)", image.public_id, image.likes)
    return image
