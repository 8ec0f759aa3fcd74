from __future__ import annotations
from datetime import datetime

from pydantic import Field

from .base import CamelModel


class ProfileFields(CamelModel):
    age: int | None = Field(None, ge=0)
    gender: str | None = None
    height: float | None = Field(None, ge=0)
    weight: float | None = Field(None, ge=0)
    activity_level: str | None = None
    fitness_goals: list[str] | None = None
    dietary_restrictions: list[str] | None = None
    allergies: str | None = None


class ProfileIn(ProfileFields):
    user_id: str = Field(..., min_length=1)


class ProfileUpdate(ProfileFields):
    """Partial update: only keys present in the body are applied."""


class ProfileOut(ProfileFields):
    id: str
    user_id: str
    created_at: datetime
    updated_at: datetime
