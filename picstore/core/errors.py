"""
Error taxonomy raised by picstore operations.

Anything else that comes out of the driver (asyncpg) is propagated unchanged.
"""

from __future__ import annotations


class PicstoreError(RuntimeError):
    pass


class StoreConnectionError(PicstoreError):
    """Connecting to (or provisioning) the store failed."""


class NotConnectedError(PicstoreError):
    """An operation was attempted while no connection is held."""


class NotFoundError(PicstoreError):
    pass


class ValidationError(PicstoreError):
    """Malformed input to a save operation. Nothing was written."""
