"""Tests for BMR/TDEE, exercise burn and drink calories.

Reference profile: a 30 year old male, 79.4 kg and 177.8 cm.  Mifflin-St
Jeor gives 10 x 79.4 + 6.25 x 177.8 - 5 x 30 + 5 = 1760.25 kcal/day.
"""

import math

import pytest

from calcbox.calculators import energy


def test_mifflin_male_reference():
    assert math.isclose(energy.bmr(79.4, 177.8, 30), 1760.25, rel_tol=1e-12)


def test_mifflin_female_offset():
    """Female constant is 166 kcal below the male one."""
    assert math.isclose(energy.bmr(79.4, 177.8, 30, sex="female"), 1760.25 - 166, rel_tol=1e-12)


def test_harris_benedict():
    expected = 88.362 + 13.397 * 80 + 4.799 * 180 - 5.677 * 30
    assert math.isclose(energy.bmr(80, 180, 30, formula="harris_benedict"), expected, rel_tol=1e-12)
    expected_f = 447.593 + 9.247 * 60 + 3.098 * 165 - 4.330 * 40
    assert math.isclose(energy.bmr(60, 165, 40, sex="female", formula="harris_benedict"), expected_f)


def test_katch_mcardle_uses_lean_mass():
    """370 + 21.6 x 80 x 0.8."""
    value = energy.bmr(80, 180, 30, formula=energy.BMRFormula.KATCH_MCARDLE, body_fat_pct=20)
    assert math.isclose(value, 1752.4, rel_tol=1e-12)


def test_daily_calories_reference_scenario():
    """Moderately active (x1.55) with mild loss (-250)."""
    result = energy.daily_calories(
        79.4, 177.8, 30, activity="moderately_active", goal="mild_loss"
    )
    assert math.isclose(result["bmr"], 1760.25)
    assert math.isclose(result["tdee"], 1760.25 * 1.55)
    assert math.isclose(result["target"], 1760.25 * 1.55 - 250)


def test_target_floor():
    """The target never drops below 1200 kcal."""
    result = energy.daily_calories(40, 150, 80, sex="female", activity="sedentary", goal="aggressive_loss")
    assert result["tdee"] - 750 < 1200
    assert result["target"] == 1200.0


def test_daily_calories_without_weight():
    assert energy.daily_calories(0, 180, 30) == {"bmr": 0.0, "tdee": 0.0, "target": 0.0}


@pytest.mark.parametrize(
    "goal,weeks", [("maintain", 0.0), ("mild_loss", 20.0), ("moderate_gain", 10.0), ("aggressive_loss", 10 / 1.5)]
)
def test_weeks_to_change(goal, weeks):
    assert math.isclose(energy.weeks_to_change(goal), weeks)


def test_activity_multipliers():
    assert [a.multiplier for a in energy.ActivityLevel] == [1.2, 1.375, 1.55, 1.725, 1.9]


def test_exercise_calories():
    """MET x intensity x kg x hours."""
    assert math.isclose(energy.exercise_calories(70, 60, "running"), 560.0)
    assert math.isclose(energy.exercise_calories(70, 30, "running", "vigorous"), 8 * 1.3 * 70 * 0.5)
    assert math.isclose(energy.exercise_calories(70, 60, "yoga", "light"), 2.5 * 0.8 * 70)
    assert energy.exercise_calories(0, 60, "running") == 0.0
    assert energy.exercise_calories(70, 0, "running") == 0.0


def test_beer_defaults():
    """A typical 355 ml beer at 5% plus 0.1 kcal/ml of carbs."""
    result = energy.drink_calories("beer", quantity=3)
    grams = 355 * 0.05 * 0.789
    assert math.isclose(result["alcohol_grams"], grams)
    assert math.isclose(result["alcohol_calories"], grams * 7)
    assert math.isclose(result["per_drink"], grams * 7 + 35.5)
    assert math.isclose(result["total"], 3 * (grams * 7 + 35.5))


def test_cocktail_adds_mixer_calories():
    result = energy.drink_calories(energy.DrinkType.COCKTAIL)
    assert math.isclose(result["per_drink"], 120 * 0.15 * 0.789 * 7 + 100)


def test_custom_drink():
    """Custom drinks have no typical values and no extra calories."""
    assert energy.drink_calories("custom")["total"] == 0.0
    result = energy.drink_calories("custom", abv=40, serving_ml=50)
    assert math.isclose(result["per_drink"], 50 * 0.4 * 0.789 * 7)


def test_unit_helpers():
    assert math.isclose(energy.pounds_to_kg(175), 79.3786)
    assert math.isclose(energy.inches_to_cm(70), 177.8)


def test_unknown_formula_raises():
    with pytest.raises(ValueError):
        energy.bmr(80, 180, 30, formula="cunningham")
