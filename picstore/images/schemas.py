"""
Image schemas (input and stored record).
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class ImageCreate(BaseModel):
    url: str = Field(..., min_length=1)
    user_id: str = Field(..., min_length=1)
    description: str | None = None


class Image(BaseModel):
    id: str
    public_id: str
    description: str | None = None
    url: str
    likes: int = 0
    liked: bool = False
    tags: list[str] = Field(default_factory=list)
    user_id: str
    created_at: datetime
