from datetime import datetime

from pydantic import BaseModel


class User(BaseModel):
    id: str
    username: str


class UserProfile(BaseModel):
    id: str
    user_id: str
    age: int | None = None
    gender: str | None = None
    height: float | None = None          # cm
    weight: float | None = None          # kg
    activity_level: str | None = None
    fitness_goals: list[str] | None = None
    dietary_restrictions: list[str] | None = None
    allergies: str | None = None
    created_at: datetime
    updated_at: datetime
