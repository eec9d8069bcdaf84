"""
Credential hashing.

Passwords are stored as the unsalted SHA-256 hex digest of their UTF-8
bytes. Existing stored digests depend on this exact scheme, so it is kept
as is; moving to a salted KDF needs a migration of stored passwords.
"""

from __future__ import annotations

import hashlib
import hmac


def hash_password(plain_password: str) -> str:
    return hashlib.sha256(plain_password.encode("utf-8")).hexdigest()


# Name the upstream API layer imports.
encrypt = hash_password


def verify_password(plain_password: str, password_hash: str | None) -> bool:
    if not isinstance(plain_password, str) or not password_hash:
        return False
    return hmac.compare_digest(hash_password(plain_password), password_hash)
