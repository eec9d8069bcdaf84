"""
Public identifiers.

Store ids are UUIDs. Callers outside this layer only ever see the short
base-62 rendering of the UUID's 128-bit value, padded to a fixed width.
"""

from __future__ import annotations

import uuid

ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
BASE = len(ALPHABET)

# 62 ** 22 > 2 ** 128 > 62 ** 21
WIDTH = 22

_INDEX = {ch: i for i, ch in enumerate(ALPHABET)}


class DecodeError(ValueError):
    pass


def encode(identifier: str) -> str:
    try:
        value = uuid.UUID(str(identifier)).int
    except ValueError as exc:
        raise DecodeError(f"Not a UUID: {identifier!r}") from exc

    digits = []
    while value:
        value, rem = divmod(value, BASE)
        digits.append(ALPHABET[rem])
    return "".join(reversed(digits)).rjust(WIDTH, ALPHABET[0])


def decode(public_id: str) -> str:
    if not isinstance(public_id, str) or not public_id:
        raise DecodeError("Public id is empty.")
    if len(public_id) > WIDTH:
        raise DecodeError(f"Public id is too long: {public_id!r}")

    value = 0
    for ch in public_id:
        digit = _INDEX.get(ch)
        if digit is None:
            raise DecodeError(f"Invalid character {ch!r} in public id.")
        value = value * BASE + digit

    if value >= 1 << 128:
        raise DecodeError(f"Public id out of range: {public_id!r}")
    return str(uuid.UUID(int=value))
