from __future__ import annotations

from pydantic import Field

from .base import CamelModel


class UserCreate(CamelModel):
    username: str = Field(..., min_length=1, max_length=64)


class UserOut(UserCreate):
    """Same fields as input plus the generated id."""
    id: str
