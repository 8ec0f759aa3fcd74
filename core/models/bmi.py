from datetime import datetime

from pydantic import BaseModel, ConfigDict

from core.bmi import Category


class BmiRecord(BaseModel):
    """One completed assessment; never updated after creation."""
    model_config = ConfigDict(frozen=True)

    id: str
    user_id: str | None = None
    height: float      # cm
    weight: float      # kg
    bmi: float
    category: Category
    recommendations: list[str] | None = None
    created_at: datetime
