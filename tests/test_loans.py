"""Tests for loan, amortization and mortgage payments.

Reference loan: $30,000 purchase with $5,000 down, 6.5% APR over 60 months.
Monthly rate 0.065 / 12 = 0.0054167 and the annuity formula gives a
payment of about $489.15.
"""

import math

import pytest

from calcbox.calculators import loans


def test_reference_payment():
    payment = loans.monthly_payment(25000, 6.5, 60)
    assert payment == pytest.approx(489.15, abs=0.05)
    assert math.isclose(loans.monthly_rate(6.5), 0.0054167, rel_tol=1e-4)


def test_zero_rate_is_straight_division():
    """A 0% loan repays L / n each month exactly."""
    assert loans.monthly_payment(12000, 0, 24) == 500.0
    assert loans.monthly_payment(1000, 0, 3) == 1000 / 3


@pytest.mark.parametrize("principal,months", [(0, 60), (-100, 60), (25000, 0)])
def test_degenerate_inputs(principal, months):
    assert loans.monthly_payment(principal, 6.5, months) == 0.0


@pytest.mark.parametrize("rate", [0, 0.5, 3, 6.5, 12, 29.9])
def test_payments_cover_principal(rate):
    """payment x n >= principal for any non-negative rate."""
    payment = loans.monthly_payment(25000, rate, 60)
    assert payment * 60 >= 25000 - 1e-9


def test_payment_increases_with_rate():
    payments = [loans.monthly_payment(25000, r / 4, 60) for r in range(0, 80)]
    assert all(a < b for a, b in zip(payments, payments[1:]))


def test_term_months():
    assert loans.term_months(5, "years") == 60
    assert loans.term_months(60, loans.TermUnit.MONTHS) == 60
    assert loans.term_months(-1, "years") == 0


def test_loan_summary():
    summary = loans.loan_summary(25000, 6.5, 60)
    assert math.isclose(summary["total_paid"], summary["payment"] * 60)
    assert math.isclose(summary["total_interest"], summary["payment"] * 60 - 25000)
    assert math.isclose(summary["interest_pct"], summary["total_interest"] / 25000 * 100)
    assert loans.loan_summary(0, 6.5, 60)["total_paid"] == 0.0


def test_amortization_schedule_pays_off():
    ledger = loans.amortization_schedule(25000, 6.5, 60)
    assert ledger["year"] == [1.0, 2.0, 3.0, 4.0, 5.0]
    assert ledger["balance"][-1] == pytest.approx(0.0, abs=1e-6)
    assert sum(ledger["principal"]) == pytest.approx(25000, rel=1e-9)
    total_interest = loans.loan_summary(25000, 6.5, 60)["total_interest"]
    assert sum(ledger["interest"]) == pytest.approx(total_interest, rel=1e-9)
    # balances only go down
    assert all(a > b for a, b in zip(ledger["balance"], ledger["balance"][1:]))


def test_amortization_partial_year():
    ledger = loans.amortization_schedule(10000, 5, 18)
    assert ledger["year"] == [1.0, 2.0]
    assert ledger["balance"][-1] == pytest.approx(0.0, abs=1e-6)


def test_amortization_empty_without_loan():
    assert loans.amortization_schedule(0, 5, 60)["year"] == []


def test_mortgage_breakdown():
    """20% down avoids PMI; annual tax and insurance are spread monthly."""
    result = loans.mortgage_payment(400000, 80000, 6.5, 30, property_tax=4800, insurance=1200, hoa=50, pmi=150)
    pi = loans.monthly_payment(320000, 6.5, 360)
    assert result["loan_amount"] == 320000
    assert result["down_payment_pct"] == 20.0
    assert result["pmi"] == 0.0
    assert math.isclose(result["principal_interest"], pi)
    assert math.isclose(result["total"], pi + 400 + 100 + 50)
    assert math.isclose(result["total_interest"], pi * 360 - 320000)


def test_mortgage_pmi_below_twenty_percent():
    result = loans.mortgage_payment(400000, 40000, 6.5, 30, pmi=150)
    assert result["pmi"] == 150
    assert math.isclose(result["total"], result["principal_interest"] + 150)


def test_mortgage_zero_rate_and_large_down():
    assert loans.mortgage_payment(360000, 0, 0, 30)["principal_interest"] == 1000.0
    assert loans.mortgage_payment(100000, 150000, 6, 30)["loan_amount"] == 0.0


def test_fractional_term_rounds_up_to_whole_payments():
    """A 7.5 month term is 8 payments everywhere it is used."""
    assert loans.term_months(7.5) == 8
    assert loans.term_months(2.5, "years") == 30
    assert loans.monthly_payment(10000, 5, 7.5) == loans.monthly_payment(10000, 5, 8)
    summary = loans.loan_summary(10000, 5, 7.5)
    assert summary["months"] == 8
    assert math.isclose(summary["total_paid"], summary["payment"] * 8)
    ledger = loans.amortization_schedule(10000, 5, 7.5)
    assert ledger["balance"][-1] == pytest.approx(0.0, abs=1e-6)
    assert sum(ledger["principal"]) == pytest.approx(10000, rel=1e-9)
    assert sum(ledger["interest"]) == pytest.approx(summary["total_interest"], rel=1e-9)


def test_term_shorter_than_a_month_is_one_payment():
    ledger = loans.amortization_schedule(10000, 5, 0.5)
    assert ledger["year"] == [1.0]
    assert ledger["principal"][0] == pytest.approx(10000)
    assert loans.monthly_payment(10000, 5, 0.5) == pytest.approx(10000 * (1 + 5 / 1200))
