"""Tests for the BMI calculator."""

import math

import pytest

from calcbox.calculators import body
from calcbox.calculators.energy import IN_TO_CM, LB_TO_KG


def test_bmi_imperial():
    """150 lb at 5'10" -> 150 x 703 / 70^2."""
    assert math.isclose(body.bmi(150, height_feet=5, height_inches=10), 150 * 703 / 70 ** 2, rel_tol=1e-12)


def test_bmi_metric():
    """70 kg at 175 cm -> 70 / 1.75^2."""
    value = body.bmi(70, height_cm=175, unit_system="metric")
    assert math.isclose(value, 70 / 1.75 ** 2, rel_tol=1e-12)


@pytest.mark.parametrize("weight,feet,inches", [(0, 5, 10), (-1, 5, 10), (150, 0, 0)])
def test_bmi_guards_return_zero(weight, feet, inches):
    """No weight or no height gives 0 rather than an error."""
    assert body.bmi(weight, height_feet=feet, height_inches=inches) == 0.0


def test_bmi_inches_only():
    """Either height component alone is enough."""
    assert body.bmi(150, height_inches=70) == body.bmi(150, height_feet=5, height_inches=10)


def test_metric_height_zero():
    assert body.bmi(70, height_cm=0, unit_system=body.UnitSystem.METRIC) == 0.0


@pytest.mark.parametrize("kg,cm", [(70, 175), (55, 160), (110, 190)])
def test_bmi_unit_invariance(kg, cm):
    """The same person measured in both systems gets (nearly) the same BMI."""
    metric = body.bmi(kg, height_cm=cm, unit_system="metric")
    imperial = body.bmi(kg / LB_TO_KG, height_inches=cm / IN_TO_CM)
    assert math.isclose(metric, imperial, rel_tol=1e-3)


def test_healthy_weight_range():
    """Healthy range at 5'10" spans BMI 18.5 to 24.9."""
    rng = body.healthy_weight_range(height_feet=5, height_inches=10)
    assert math.isclose(rng["min"], 18.5 * 4900 / 703, rel_tol=1e-9)
    assert math.isclose(rng["max"], 24.9 * 4900 / 703, rel_tol=1e-9)
    assert body.healthy_weight_range() == {"min": 0.0, "max": 0.0}


def test_weight_to_healthy():
    rng = body.healthy_weight_range(height_feet=5, height_inches=10)
    over = body.bmi(209, height_feet=5, height_inches=10)
    under = body.bmi(110, height_feet=5, height_inches=10)
    normal = body.bmi(150, height_feet=5, height_inches=10)
    assert math.isclose(body.weight_to_healthy(209, over, rng), 209 - rng["max"])
    assert math.isclose(body.weight_to_healthy(110, under, rng), rng["min"] - 110)
    assert body.weight_to_healthy(150, normal, rng) == 0.0
    assert body.weight_to_healthy(150, 0.0, rng) == 0.0
