"""
User schemas (input and stored record).
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, model_validator


class UserCreate(BaseModel):
    username: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    # Plaintext; replaced by its hash before anything is stored.
    password: str | None = Field(default=None, min_length=1, repr=False)
    facebook: bool = False

    @model_validator(mode="after")
    def _password_or_facebook(self) -> UserCreate:
        if (self.password is not None) == self.facebook:
            raise ValueError("Provide either a password or facebook=True, not both.")
        return self


class User(BaseModel):
    id: str
    username: str
    email: str
    name: str
    password: str | None = Field(default=None, repr=False)
    facebook: bool = False
    created_at: datetime
