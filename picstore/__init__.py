"""
picstore: data-access layer for a photo-sharing service.
"""

from __future__ import annotations

from picstore.core.codec import DecodeError, decode, encode
from picstore.core.errors import (
    NotConnectedError,
    NotFoundError,
    PicstoreError,
    StoreConnectionError,
    ValidationError,
)
from picstore.images.tags import extract_tags, normalize
from picstore.store import Db
from picstore.users.security import encrypt

__all__ = [
    "Db",
    "DecodeError",
    "NotConnectedError",
    "NotFoundError",
    "PicstoreError",
    "StoreConnectionError",
    "ValidationError",
    "decode",
    "encode",
    "encrypt",
    "extract_tags",
    "normalize",
]
