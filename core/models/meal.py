from datetime import datetime

from pydantic import BaseModel


class Meal(BaseModel):
    name: str          # Breakfast / Lunch / Dinner / snack slot
    food: str
    calories: float


class DietPlan(BaseModel):
    id: str
    user_id: str | None = None
    goal: str
    diet_type: str | None = None
    meals: list[Meal] | None = None
    total_calories: int | None = None
    created_at: datetime
