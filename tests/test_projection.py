"""Tests for parameter sweeps built on top of compute."""

import math
from datetime import date, timedelta

import pytest

from calcbox.calculators import growth
from calcbox.calculators.debts import Debt
from calcbox.projection import ProjectionSeries, ProjectionTag, project
from calcbox.registry import compute

LIFT = {"weight": "225", "reps": "8"}
LOAN = {"amount": "25000", "rate": "6.5", "term": "60"}


def test_one_rep_max_percentages():
    series = project("one_rep_max_percentages", LIFT, variant="epley")
    assert series.labels[:2] == ("95%", "90%")
    assert len(series) == 8
    assert math.isclose(series.values[0], 285.0 * 0.95)
    assert series.points[-1].detail["percent"] == 60.0


def test_custom_percentage_sweep():
    series = project(ProjectionTag.ONE_REP_MAX_PERCENTAGES, LIFT, sweep=[100, 50])
    assert series.labels == ("100%", "50%")
    assert math.isclose(series.values[1], 142.5)


def test_formula_comparison():
    series = project("one_rep_max_formulas", LIFT)
    assert series.labels == ("Epley", "Brzycki", "Lander", "O'Conner")
    assert math.isclose(series.values[1], 225 * 36 / 29)


def test_rep_ranges():
    series = project("rep_ranges", LIFT, variant="epley")
    assert len(series) == 6
    assert series.labels[0] == "1-3 reps"
    assert math.isclose(series.values[0], 285.0)
    assert series.points[0].detail["purpose"] == "Maximum Strength"


def test_amortization_by_year():
    series = project("amortization", LOAN, variant="months")
    assert series.labels == ("Year 1", "Year 2", "Year 3", "Year 4", "Year 5")
    assert all(a > b for a, b in zip(series.values, series.values[1:]))
    assert series.values[-1] == pytest.approx(0.0, abs=1e-6)
    assert series.points[0].detail["interest"] > series.points[-1].detail["interest"]


def test_amortization_matches_payment_for_fractional_term():
    """The ledger and the headline payment agree on the number of payments."""
    raw = {"amount": "10000", "rate": "5", "term": "0.5"}
    series = project("amortization", raw, variant="months")
    assert series.labels == ("Year 1",)
    assert series.values[0] == pytest.approx(0.0, abs=1e-6)
    assert series.points[0].detail["principal"] == pytest.approx(10000)
    assert compute("loan", "months", raw)["months"] == 1


def test_amortization_sweep_and_empty_loan():
    assert project("amortization", LOAN, sweep=[1, 3], variant="months").labels == ("Year 1", "Year 3")
    assert len(project("amortization", {"amount": "", "term": "60"}, variant="months")) == 0


def test_loan_terms():
    series = project("loan_terms", {"amount": "25000", "rate": "6.5"})
    assert series.labels == ("36 months", "48 months", "60 months", "72 months")
    assert all(a > b for a, b in zip(series.values, series.values[1:]))
    interest = [p.detail["total_interest"] for p in series]
    assert all(a < b for a, b in zip(interest, interest[1:]))


def test_macros():
    series = project(
        "macros",
        {"weight": "80", "height": "180", "age": "30"},
        units="metric",
        activity="sedentary",
    )
    target = (800 + 1125 - 150 + 5) * 1.2
    assert series.labels == ("Protein", "Carbs", "Fat")
    assert math.isclose(series.values[0], target * 0.25 / 4)
    assert math.isclose(series.values[2], target * 0.30 / 9)
    assert math.isclose(sum(p.detail["calories"] for p in series), target)


def test_period_scaling():
    series = project("period_scaling", {"daily_miles": "30", "mpg": "30", "gas_price": "3.5"}, variant="gas")
    assert series.labels == ("Weekly", "Monthly", "Yearly")
    assert math.isclose(series.values[0], 17.5)
    assert math.isclose(series.values[1], 17.5 * 4.33)
    assert math.isclose(series.values[2], 910.0)
    assert math.isclose(series.points[2].detail["miles"], 7800.0)


def test_bill_frequencies():
    series = project("bill_frequencies", {"amount": "100"})
    assert series.labels == ("Weekly", "Bi-weekly", "Monthly", "Quarterly", "Annually")
    assert math.isclose(series.values[0], 433.0)
    assert math.isclose(series.values[4], 100 / 12)
    assert math.isclose(series.points[2].detail["annual"], 1200.0)


@pytest.mark.parametrize("amount", ["", "abc", "-5"])
def test_bill_frequencies_bad_amount_is_zero(amount):
    assert set(project("bill_frequencies", {"amount": amount}).values) == {0.0}


def test_pregnancy_milestones():
    lmp = date(2024, 1, 1)
    series = project("pregnancy_milestones", last_period=lmp, today=lmp + timedelta(days=56))
    assert len(series) == 8
    assert series.labels[0] == "Week 8"
    assert series.points[0].detail["passed"] is True
    assert series.points[1].detail["passed"] is False
    assert series.points[-1].detail["date"] == lmp + timedelta(days=280)
    assert len(project("pregnancy_milestones")) == 0


def test_compound_growth():
    raw = {"principal": "1000", "monthly_contribution": "100", "rate": "5", "years": "10"}
    series = project("compound_growth", raw, variant="monthly")
    assert len(series) == 10
    assert math.isclose(series.values[-1], growth.compound_interest(1000, 100, 5, 10)["future_value"])
    assert series.points[0].detail["contributions"] == 2200.0
    assert len(project("compound_growth", {"years": "10"})) == 0


def test_food_equivalents():
    """480 kcal from an hour of running at 60 kg."""
    series = project("food_equivalents", {"weight": "60", "minutes": "60"}, variant="running", units="metric")
    assert dict(zip(series.labels, series.values)) == {
        "Apples": 5.0,
        "Bananas": 4.0,
        "Slices of bread": 6.0,
        "Cookies": 3.0,
        "Pizza slices": 1.0,
    }


def test_exercise_equivalents():
    """A 44 ml shot of 40% spirits is about 97 kcal."""
    series = project("exercise_equivalents", {}, variant="spirits")
    assert series.values == (24.0, 8.0, 12.0, 9.0)


def test_to_frame():
    frame = project("bill_frequencies", {"amount": "100"}).to_frame()
    assert list(frame.columns) == ["label", "value", "annual"]
    assert len(frame) == 5
    empty = ProjectionSeries(ProjectionTag.AMORTIZATION, "Empty").to_frame()
    assert list(empty.columns) == ["label", "value"]
    assert empty.empty


def test_unknown_projection_raises():
    with pytest.raises(ValueError):
        project("lottery_odds")


DEBTS = [
    Debt("Card", "5000", "22", "150"),
    Debt("Car", "3000", "6", "300"),
    Debt("Store card", "800", "25", "40"),
]


@pytest.mark.parametrize(
    "tag,order",
    [
        ("debt_snowball", ("Store card", "Car", "Card")),
        ("debt_avalanche", ("Store card", "Card", "Car")),
    ],
)
def test_debt_payoff_order(tag, order):
    series = project(tag, {"extra_payment": "200"}, debts=DEBTS)
    assert series.labels == order
    assert all(month > 0 for month in series.values)
    assert series.points[0].detail["balance"] == 800.0
    assert series.points[0].detail["interest"] > 0


def test_unnamed_debts_and_empty_list():
    series = project("debt_snowball", {}, debts=[Debt("", 500, 10, 50)])
    assert series.labels == ("Debt 1",)
    assert len(project("debt_avalanche", {})) == 0


def test_retirement_drawdown():
    inputs = {"savings": "100000", "return_rate": "0", "withdrawal": "30000"}
    series = project("retirement_drawdown", inputs, variant="fixed")
    assert series.labels == ("Year 1", "Year 2", "Year 3", "Year 4")
    assert series.values == (70000.0, 40000.0, 10000.0, 0.0)
    assert series.points[-1].detail["withdrawal"] == 10000.0
    assert len(project("retirement_drawdown", {"savings": "0", "return_rate": "5", "withdrawal": "4"})) == 0
