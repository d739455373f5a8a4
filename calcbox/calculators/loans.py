"""Loan and mortgage payment calculations.

Fixed-rate loans are repaid with equal monthly payments given by the
annuity formula

    P = L · r · (1 + r)^n / ((1 + r)^n − 1)

where ``L`` is the principal, ``r`` the monthly rate (annual percent / 1200)
and ``n`` the number of monthly payments.  A zero rate degrades to straight
division ``L / n`` instead of dividing by zero.  Fractional terms round up
to the next whole payment, so a 7.5 month loan is paid off in 8 payments
and the payment, the totals and the ledger all agree on ``n``.

Mortgages add escrowed costs on top of principal and interest: property tax
and homeowners insurance (entered per year), HOA dues and private mortgage
insurance (entered per month).  PMI only applies while the down payment is
below 20% of the purchase price.

Example
-------

>>> round(monthly_payment(25000, 6.5, 60), 2)
489.15
>>> monthly_payment(12000, 0, 24)
500.0
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Dict, List, Union

PMI_THRESHOLD_PCT = 20.0


class TermUnit(str, Enum):
    YEARS = "years"
    MONTHS = "months"

    @property
    def months(self) -> int:
        return 12 if self is TermUnit.YEARS else 1


def monthly_rate(annual_rate_pct: float) -> float:
    return annual_rate_pct / 100.0 / 12.0


def whole_months(months: float) -> float:
    """Number of payments for a term, rounded up to a whole month."""
    if months <= 0:
        return 0.0
    # drop float noise before rounding up
    return float(math.ceil(round(months, 9)))


def term_months(term: float, unit: Union[TermUnit, str] = TermUnit.MONTHS) -> float:
    return whole_months(max(0.0, term) * TermUnit(unit).months)


def monthly_payment(principal: float, annual_rate_pct: float, months: float) -> float:
    """Level monthly payment that retires ``principal`` in ``months`` payments.

    Returns 0 when there is nothing to borrow or no term.  Negative rates are
    treated as zero.  A fractional ``months`` is rounded up first.
    """
    months = whole_months(months)
    if principal <= 0 or months <= 0:
        return 0.0
    r = monthly_rate(max(0.0, annual_rate_pct))
    if r == 0:
        return principal / months
    growth = (1 + r) ** months
    return principal * r * growth / (growth - 1)


def loan_summary(principal: float, annual_rate_pct: float, months: float) -> Dict[str, float]:
    """Payment plus lifetime totals for a fixed-rate loan."""
    months = whole_months(months)
    payment = monthly_payment(principal, annual_rate_pct, months)
    total = payment * months if payment > 0 else 0.0
    interest = max(0.0, total - principal) if payment > 0 else 0.0
    return {
        "payment": payment,
        "months": months if payment > 0 else 0.0,
        "total_paid": total,
        "total_interest": interest,
        "interest_pct": (interest / principal * 100.0) if principal > 0 else 0.0,
    }


def amortization_schedule(
    principal: float, annual_rate_pct: float, months: float
) -> Dict[str, List[float]]:
    """Year-by-year payoff ledger.

    Each list holds one entry per loan year (the last year may be partial):
    ``year``, ``interest`` and ``principal`` paid during the year, and the
    remaining ``balance`` at its end.
    """
    ledger: Dict[str, List[float]] = {"year": [], "interest": [], "principal": [], "balance": []}
    payment = monthly_payment(principal, annual_rate_pct, months)
    if payment <= 0:
        return ledger

    r = monthly_rate(max(0.0, annual_rate_pct))
    n = int(whole_months(months))
    balance = principal
    year_interest = 0.0
    year_principal = 0.0
    for month in range(1, n + 1):
        interest = balance * r
        paid = payment - interest
        balance -= paid
        year_interest += interest
        year_principal += paid
        if month % 12 == 0 or month == n:
            ledger["year"].append(float(len(ledger["year"]) + 1))
            ledger["interest"].append(year_interest)
            ledger["principal"].append(year_principal)
            ledger["balance"].append(max(0.0, balance))
            year_interest = 0.0
            year_principal = 0.0
    return ledger


def mortgage_payment(
    home_price: float,
    down_payment: float,
    annual_rate_pct: float,
    term_years: float,
    property_tax: float = 0.0,
    insurance: float = 0.0,
    hoa: float = 0.0,
    pmi: float = 0.0,
) -> Dict[str, float]:
    """Monthly housing payment broken into its components.

    Parameters
    ----------
    home_price, down_payment : float
        Purchase price and cash down.  The loan is the difference, floored
        at zero.
    annual_rate_pct : float
        Mortgage APR in percent.
    term_years : float
        Loan term in years.
    property_tax, insurance : float
        Annual amounts, spread over twelve months.
    hoa, pmi : float
        Monthly amounts.  PMI is dropped once the down payment reaches 20%.

    Returns
    -------
    dict
        ``loan_amount``, ``down_payment_pct``, ``principal_interest``,
        ``property_tax``, ``insurance``, ``hoa``, ``pmi``, ``total`` (all
        monthly except the first two) and ``total_interest`` over the term.
    """
    loan = max(0.0, home_price - down_payment)
    down_pct = (down_payment / home_price * 100.0) if home_price > 0 else 0.0
    months = term_months(term_years, TermUnit.YEARS)
    pi = monthly_payment(loan, annual_rate_pct, months)
    monthly = {
        "principal_interest": pi,
        "property_tax": property_tax / 12.0,
        "insurance": insurance / 12.0,
        "hoa": hoa,
        "pmi": pmi if down_pct < PMI_THRESHOLD_PCT else 0.0,
    }
    return {
        "loan_amount": loan,
        "down_payment_pct": down_pct,
        **monthly,
        "total": sum(monthly.values()),
        "total_interest": max(0.0, pi * months - loan) if pi > 0 else 0.0,
    }


__all__ = [
    "TermUnit",
    "amortization_schedule",
    "loan_summary",
    "monthly_payment",
    "monthly_rate",
    "mortgage_payment",
    "term_months",
    "whole_months",
]
