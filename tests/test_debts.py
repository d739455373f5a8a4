"""Tests for the snowball and avalanche debt payoff simulation.

Reference debt: $1,000 at 12% APR with a $100 minimum.  The monthly rate is
1%, so the balance is gone in the 11th month.
"""

import pytest

from calcbox.calculators import debts
from calcbox.calculators.debts import Debt, PayoffStrategy


def test_single_debt_reference():
    plan = debts.payoff_plan([Debt("Card", 1000, 12, 100)])
    assert plan["months"] == 11
    assert plan["years"] == pytest.approx(11 / 12)
    assert plan["paid_off"]
    assert plan["payoff_month"] == [11]
    assert plan["remaining_balance"] == 0.0
    # interest on the declining balance, about 58.98 over the 11 months
    assert plan["total_interest"] == pytest.approx(58.98, abs=0.05)
    assert plan["total_paid"] == pytest.approx(1000 + plan["total_interest"])


def test_extra_payment_shortens_payoff():
    rows = [Debt("Card", 1000, 12, 100)]
    assert debts.payoff_plan(rows, 100)["months"] < debts.payoff_plan(rows)["months"]
    assert debts.payoff_plan(rows, 100)["total_interest"] < debts.payoff_plan(rows)["total_interest"]


def test_strategy_order():
    """Snowball goes smallest balance first, avalanche highest rate first."""
    rows = [Debt("Big", "9000", "24", "200"), Debt("Small", "500", "8", "25"), Debt("Mid", "3000", "15", "90")]
    assert [d.name for d in debts.payoff_order(rows, "snowball")] == ["Small", "Mid", "Big"]
    assert [d.name for d in debts.payoff_order(rows, PayoffStrategy.AVALANCHE)] == ["Big", "Mid", "Small"]


def test_extra_goes_to_first_debt_in_order():
    rows = [Debt("Low rate", 2000, 5, 50), Debt("High rate", 2000, 20, 50)]
    avalanche = debts.payoff_plan(rows, 300, "avalanche")
    snowball = debts.payoff_plan(rows, 300, "snowball")
    assert avalanche["order"] == ["High rate", "Low rate"]
    assert avalanche["total_interest"] < snowball["total_interest"]


@pytest.mark.parametrize(
    "row",
    [
        Debt("No balance", "0", "10", "50"),
        Debt("Zero rate", "1000", "0", "50"),
        Debt("No minimum", "1000", "10", ""),
        Debt("Typo", "1,000", "10", "50"),
    ],
)
def test_unpayable_rows_are_skipped(row):
    assert debts.payable_debts([row]) == []
    plan = debts.payoff_plan([row])
    assert plan["months"] == 0
    assert plan["order"] == []


def test_minimum_below_interest_hits_the_cap():
    """$20 a month never covers 24% on $5,000, so the simulation stops."""
    plan = debts.payoff_plan([Debt("Card", 5000, 24, 20)])
    assert plan["months"] == debts.MAX_MONTHS + 1
    assert not plan["paid_off"]
    assert plan["payoff_month"] == [0]
    assert plan["remaining_balance"] > 5000


def test_freed_minimums_do_not_roll_over():
    """Once the small debt is gone the big one still only gets its own minimum."""
    rows = [Debt("Small", 100, 12, 100), Debt("Big", 1200, 12, 100)]
    together = debts.payoff_plan(rows)
    alone = debts.payoff_plan([rows[1]])
    assert together["months"] == alone["months"]
    assert together["payoff_month"] == [2, alone["months"]]
