"""Tests for tip, sales tax and percentage calculations."""

import math

import pytest

from calcbox.calculators import everyday


def test_tip_split():
    result = everyday.tip(100, 20, 4)
    assert result == {"tip": 20.0, "total": 120.0, "per_person": 30.0, "tip_per_person": 5.0}


def test_tip_without_people_is_one_payer():
    assert everyday.tip(100, 20, 0)["per_person"] == 120.0


def test_tip_without_bill():
    assert everyday.tip(0, 20, 2)["tip"] == 0.0


def test_sales_tax_add_and_remove():
    added = everyday.sales_tax(100, 8)
    assert math.isclose(added["tax"], 8.0)
    assert math.isclose(added["total"], 108.0)
    removed = everyday.sales_tax(108, 8, everyday.SalesTaxMode.REMOVE)
    assert math.isclose(removed["pre_tax"], 100.0)
    assert math.isclose(removed["tax"], 8.0)
    assert removed["total"] == 108


@pytest.mark.parametrize(
    "first,second,mode,expected",
    [
        (15, 200, "percent_of", 30.0),
        (30, 200, "what_percent", 15.0),
        (30, 0, "what_percent", 0.0),
        (50, 75, "percent_change", 50.0),
        (80, 60, "percent_change", -25.0),
        (0, 60, "percent_change", 0.0),
        (200, 10, "increase_decrease", 220.0),
        (200, -10, "increase_decrease", 180.0),
    ],
)
def test_percentage_modes(first, second, mode, expected):
    assert math.isclose(everyday.percentage(first, second, mode), expected, abs_tol=1e-12)
