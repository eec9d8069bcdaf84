"""
User business logic.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import pydantic

from picstore.core.db import Database
from picstore.core.errors import NotFoundError, ValidationError

from . import repository, schemas, security

logger = logging.getLogger(__name__)

USER_NOT_FOUND = "user not found"


def _to_user(row: dict) -> schemas.User:
    return schemas.User(
        id=str(row["id"]),
        username=str(row["username"]),
        email=str(row["email"]),
        name=str(row["name"]),
        password=row.get("password"),
        facebook=bool(row.get("facebook", False)),
        created_at=row["created_at"],
    )


def _parse(data: schemas.UserCreate | Mapping[str, Any]) -> schemas.UserCreate:
    if isinstance(data, schemas.UserCreate):
        return data
    try:
        return schemas.UserCreate.model_validate(data)
    except pydantic.ValidationError as exc:
        # Field names only: the pydantic error carries input values, plaintext included.
        fields = ", ".join(".".join(str(p) for p in err["loc"]) or "user" for err in exc.errors())
        raise ValidationError(f"Invalid user: {fields}") from None


async def save_user(database: Database, data: schemas.UserCreate | Mapping[str, Any]) -> schemas.User:
    payload = _parse(data)
    password_hash = security.hash_password(payload.password) if payload.password is not None else None

    row = await repository.create_user(
        database,
        username=payload.username,
        email=payload.email,
        name=payload.name,
        password_hash=password_hash,
        facebook=payload.facebook,
    )
    user = _to_user(row)
    logger.info("Saved user %s (%s)", user.username, user.id)
    return user


async def get_user(database: Database, username: str) -> schemas.User:
    row = await repository.get_user_by_username(database, username)
    if row is None:
        raise NotFoundError(USER_NOT_FOUND)
    return _to_user(row)


async def authenticate(database: Database, username: str, password: str) -> bool:
    """
    True only for a password account whose stored hash matches `password`.
    Unknown users and federated accounts are indistinguishable from a wrong
    password.
    """
    try:
        user = await get_user(database, username)
    except NotFoundError:
        return False

    if user.password is None:
        return False
    return security.verify_password(password, user.password)
