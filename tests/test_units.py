from __future__ import annotations

import math

import pytest

from core.errors import InvalidInput, MissingInput
from core.units import normalize_measurements


def test_metric_passthrough():
    m = normalize_measurements(height_cm=180, weight_kg=75, age=30, gender="male")
    assert (m.height_cm, m.weight_kg, m.age, m.gender) == (180, 75, 30, "male")


def test_imperial_conversion():
    m = normalize_measurements(height_feet=5, height_inches=10, weight_lbs=165, age="42")
    assert math.isclose(m.height_cm, 70 * 2.54)
    assert math.isclose(m.weight_kg, 165 * 0.453592)
    assert m.age == 42


def test_imperial_takes_precedence_over_metric():
    m = normalize_measurements(
        height_cm=150, height_feet=6, weight_kg=50, weight_lbs=200, age=25
    )
    assert math.isclose(m.height_cm, 72 * 2.54)
    assert math.isclose(m.weight_kg, 200 * 0.453592)


def test_inches_alone_count_as_height():
    m = normalize_measurements(height_inches="66", weight_kg="60.5", age=19)
    assert math.isclose(m.height_cm, 66 * 2.54)
    assert m.weight_kg == 60.5


def test_blank_gender_becomes_none():
    m = normalize_measurements(height_cm=170, weight_kg=70, age=30, gender="  ")
    assert m.gender is None


@pytest.mark.parametrize(
    "kwargs",
    [
        dict(weight_kg=70, age=30),
        dict(height_cm=170, age=30),
        dict(height_cm=170, weight_kg=70),
        dict(height_cm="", weight_kg=70, age=30),
        dict(height_cm="tall", weight_kg=70, age=30),
        dict(height_cm=170, weight_kg="nan", age=30),
    ],
)
def test_missing_or_non_numeric_blocks_everything(kwargs):
    with pytest.raises(MissingInput):
        normalize_measurements(**kwargs)


@pytest.mark.parametrize("age", [0, -3, 12.5, 200])
def test_out_of_range_age(age):
    with pytest.raises(InvalidInput):
        normalize_measurements(height_cm=170, weight_kg=70, age=age)
