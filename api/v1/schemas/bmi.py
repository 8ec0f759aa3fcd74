from __future__ import annotations
from datetime import datetime

from pydantic import Field

from core.bmi import Category
from .base import CamelModel


class BmiRequest(CamelModel):
    """
    Height in cm *or* feet/inches, weight in kg *or* pounds.
    Imperial values win when both are sent.
    """
    user_id: str | None = None
    height: float | None = Field(None, description="centimetres")
    height_feet: float | None = None
    height_inches: float | None = None
    weight: float | None = Field(None, description="kilograms")
    weight_lbs: float | None = None
    age: float | None = None
    gender: str | None = None


class BmiRecordOut(CamelModel):
    id: str
    user_id: str | None
    height: float
    weight: float
    bmi: float
    category: Category
    recommendations: list[str] | None
    created_at: datetime
