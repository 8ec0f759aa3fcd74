"""
core/bmi.py
────────────────────────────────────────────────────────────────────────
BMI value + category.

    bmi = weight_kg / (height_cm / 100)²

Classification always runs on the full-precision value; only the value
returned for display/storage is rounded to one decimal, so e.g. 24.96
stays "Normal Weight" even though it displays as 25.0.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from core.errors import InvalidInput


class Category(str, Enum):
    underweight = "Underweight"
    normal = "Normal Weight"
    overweight = "Overweight"
    obese = "Obese"


# (exclusive upper bound, category), scanned in order
_THRESHOLDS: tuple[tuple[float, Category], ...] = (
    (18.5, Category.underweight),
    (25.0, Category.normal),
    (30.0, Category.overweight),
)


@dataclass(frozen=True)
class BmiResult:
    bmi: float          # rounded to 1 decimal
    category: Category


def classify_bmi(bmi: float) -> Category:
    for upper, category in _THRESHOLDS:
        if bmi < upper:
            return category
    return Category.obese


def compute_bmi(height_cm: float, weight_kg: float) -> BmiResult:
    """Return rounded BMI and its category; raise `InvalidInput` on bad measurements."""
    _require_positive("height", height_cm)
    _require_positive("weight", weight_kg)

    try:
        raw = weight_kg / (height_cm / 100) ** 2
    except (OverflowError, ZeroDivisionError) as e:
        raise InvalidInput("height and weight are out of range") from e
    # extreme ratios can still overflow to inf or underflow to 0
    if not math.isfinite(raw) or raw <= 0:
        raise InvalidInput("height and weight are out of range")
    return BmiResult(bmi=round(raw, 1), category=classify_bmi(raw))


def _require_positive(name: str, value: float) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInput(f"{name} must be a number")
    if not math.isfinite(value) or value <= 0:
        raise InvalidInput(f"{name} must be a positive number")
