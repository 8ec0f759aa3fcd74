"""
core/units.py
────────────────────────────────────────────────────────────────────────
Turns whatever the BMI form sends (feet/inches or cm, pounds or kg, age,
gender) into canonical metric measurements.

Precedence: imperial wins. When feet or inches are supplied the cm value
is ignored, and pounds override kilograms.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from core.errors import InvalidInput, MissingInput

CM_PER_INCH = 2.54
KG_PER_POUND = 0.453592
INCHES_PER_FOOT = 12

MAX_AGE_YEARS = 130


@dataclass(frozen=True)
class Measurements:
    height_cm: float
    weight_kg: float
    age: int
    gender: str | None = None


def normalize_measurements(
    *,
    height_cm: Any = None,
    height_feet: Any = None,
    height_inches: Any = None,
    weight_kg: Any = None,
    weight_lbs: Any = None,
    age: Any = None,
    gender: str | None = None,
) -> Measurements:
    feet = _number(height_feet)
    inches = _number(height_inches)
    if feet is not None or inches is not None:
        height = ((feet or 0.0) * INCHES_PER_FOOT + (inches or 0.0)) * CM_PER_INCH
    else:
        height = _number(height_cm)

    lbs = _number(weight_lbs)
    weight = lbs * KG_PER_POUND if lbs is not None else _number(weight_kg)

    years = _number(age)

    missing = [
        name
        for name, value in (("height", height), ("weight", weight), ("age", years))
        if value is None
    ]
    if missing:
        raise MissingInput(f"Please enter valid {', '.join(missing)} values")

    if not years.is_integer() or not 0 < years <= MAX_AGE_YEARS:
        raise InvalidInput("age must be a whole number of years")

    return Measurements(
        height_cm=height,
        weight_kg=weight,
        age=int(years),
        gender=(gender or "").strip() or None,
    )


def _number(value: Any) -> float | None:
    """Parse a form value; blank / non-numeric / non-finite → None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        num = float(value)
    except (TypeError, ValueError):
        return None
    return num if math.isfinite(num) else None
