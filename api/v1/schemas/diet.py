from __future__ import annotations
from datetime import datetime

from pydantic import Field

from .base import CamelModel


class DietPlanRequest(CamelModel):
    user_id: str | None = None
    goal: str = Field("maintenance", min_length=1, examples=["weight_loss", "muscle_gain", "maintenance"])
    diet_type: str | None = None
    allergies: str | None = None
    activity_level: str | None = None


class MealOut(CamelModel):
    name: str
    food: str
    calories: float


class DietPlanOut(CamelModel):
    id: str
    user_id: str | None
    goal: str
    diet_type: str | None
    meals: list[MealOut] | None
    total_calories: int | None
    created_at: datetime
