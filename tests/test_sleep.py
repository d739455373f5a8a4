"""Tests for sleep debt and recovery planning."""

import math

import pytest

from calcbox.calculators import sleep


def test_sleep_debt_accumulates():
    """Two hours short for a week is 14 hours of debt."""
    assert sleep.sleep_debt(8, 6, 7) == 14.0


def test_oversleeping_banks_nothing():
    assert sleep.sleep_debt(7, 9, 7) == 0.0


def test_weekend_catchup():
    """Two weekend days per week of extra sleep are credited."""
    assert math.isclose(sleep.sleep_debt(8, 6, 7, weekend_extra_hours=2, weekend_catchup=True), 10.0)
    assert sleep.sleep_debt(8, 6, 7, weekend_extra_hours=2) == 14.0
    assert sleep.sleep_debt(8, 7, 7, weekend_extra_hours=5, weekend_catchup=True) == 0.0


def test_recovery_plan_average():
    plan = sleep.recovery_plan(10, 8)
    assert math.isclose(plan["recovery_hours"], 15.0)
    assert math.isclose(plan["recovery_nights"], 1.875)
    assert math.isclose(plan["extra_per_night"], 8.0)
    assert plan["performance_impact"] == 0.5


def test_recovery_plan_chronotypes():
    assert math.isclose(sleep.recovery_plan(10, 8, "early_bird")["recovery_hours"], 16.5)
    assert math.isclose(sleep.recovery_plan(10, 8, sleep.Chronotype.NIGHT_OWL)["recovery_hours"], 13.5)


def test_performance_impact_scales_then_caps():
    assert math.isclose(sleep.recovery_plan(2, 8)["performance_impact"], 0.2)
    assert sleep.recovery_plan(40, 8)["performance_impact"] == 0.5


def test_no_target_no_nights():
    plan = sleep.recovery_plan(5, 0)
    assert plan["recovery_nights"] == 0.0
    assert plan["extra_per_night"] == 0.0


@pytest.mark.parametrize(
    "debt,target,chronotype", [(10, 8, "average"), (3.5, 7.5, "night_owl"), (21, 9, "early_bird")]
)
def test_extra_per_night_is_the_nightly_target(debt, target, chronotype):
    """Recovery nights are counted in target-length nights, so the nightly figure is the target itself."""
    plan = sleep.recovery_plan(debt, target, chronotype)
    assert math.isclose(plan["extra_per_night"], target)
    assert math.isclose(plan["recovery_nights"] * plan["extra_per_night"], plan["recovery_hours"])
