"""Compound interest and inflation.

Compound interest
-----------------

The starting principal compounds ``n`` times a year at annual rate ``r``
while monthly contributions compound monthly:

    FV = p·(1 + r/n)^(n·t) + c·((1 + r/12)^(12·t) − 1) / (r/12)

With a zero rate the contribution term is just ``c·12·t``.

Inflation
---------

Prices grow by ``m = (1 + i/100)^years``.  A sum of money today buys
``amount / m`` in future terms, and ``amount · m`` is what is needed in the
future to keep the same purchasing power (equivalently, what a past sum is
worth today).

Investment returns
------------------

The annualized return is the compound annual growth rate
``(current / invested)^(1/years) − 1``, so a holding kept for six months
that gained 5% annualizes to about 10.25%.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Union

import numpy as np


class CompoundFrequency(str, Enum):
    ANNUALLY = "annually"
    SEMI_ANNUALLY = "semi_annually"
    QUARTERLY = "quarterly"
    MONTHLY = "monthly"
    DAILY = "daily"

    @property
    def periods(self) -> int:
        return _PERIODS[self]


_PERIODS = {
    CompoundFrequency.ANNUALLY: 1,
    CompoundFrequency.SEMI_ANNUALLY: 2,
    CompoundFrequency.QUARTERLY: 4,
    CompoundFrequency.MONTHLY: 12,
    CompoundFrequency.DAILY: 365,
}


class InflationMode(str, Enum):
    FUTURE_VALUE = "future_value"
    PAST_VALUE = "past_value"
    REQUIRED_AMOUNT = "required_amount"


def _future_values(
    principal: float,
    monthly_contribution: float,
    annual_rate_pct: float,
    years: np.ndarray,
    frequency: CompoundFrequency,
) -> np.ndarray:
    rate = annual_rate_pct / 100.0
    n = frequency.periods
    principal_growth = principal * (1 + rate / n) ** (n * years)
    months = years * 12
    if rate == 0:
        contributions = monthly_contribution * months
    else:
        mr = rate / 12
        contributions = monthly_contribution * ((1 + mr) ** months - 1) / mr
    return principal_growth + contributions


def compound_interest(
    principal: float,
    monthly_contribution: float,
    annual_rate_pct: float,
    years: float,
    frequency: Union[CompoundFrequency, str] = CompoundFrequency.MONTHLY,
) -> Dict[str, float]:
    """Future value of a lump sum plus monthly contributions.

    Returns ``future_value``, ``total_contributions`` and ``interest_earned``.
    All three are zero for a non-positive horizon or negative inputs.
    """
    if years <= 0 or principal < 0 or monthly_contribution < 0 or annual_rate_pct < 0:
        return {"future_value": 0.0, "total_contributions": 0.0, "interest_earned": 0.0}
    fv = float(
        _future_values(
            principal,
            monthly_contribution,
            annual_rate_pct,
            np.asarray(years, dtype=np.float64),
            CompoundFrequency(frequency),
        )
    )
    contributed = principal + monthly_contribution * years * 12
    return {
        "future_value": fv,
        "total_contributions": contributed,
        "interest_earned": fv - contributed,
    }


def yearly_balances(
    principal: float,
    monthly_contribution: float,
    annual_rate_pct: float,
    years: int,
    frequency: Union[CompoundFrequency, str] = CompoundFrequency.MONTHLY,
) -> List[float]:
    """Account balance at the end of each whole year ``1..years``."""
    if years <= 0:
        return []
    horizon = np.arange(1, int(years) + 1, dtype=np.float64)
    values = _future_values(
        principal, monthly_contribution, annual_rate_pct, horizon, CompoundFrequency(frequency)
    )
    return [float(v) for v in values]


def inflation_multiplier(annual_rate_pct: float, years: float) -> float:
    return (1 + annual_rate_pct / 100.0) ** years


def inflation_adjusted(
    amount: float,
    annual_rate_pct: float,
    years: float,
    mode: Union[InflationMode, str] = InflationMode.FUTURE_VALUE,
) -> Dict[str, float]:
    """Purchasing-power adjustment of ``amount`` plus cumulative inflation in percent."""
    if amount <= 0 or annual_rate_pct < 0 or years <= 0:
        return {"value": 0.0, "cumulative_pct": 0.0}
    m = inflation_multiplier(annual_rate_pct, years)
    if InflationMode(mode) is InflationMode.FUTURE_VALUE:
        value = amount / m
    else:
        value = amount * m
    return {"value": value, "cumulative_pct": (m - 1) * 100.0}


class HoldingPeriod(str, Enum):
    YEARS = "years"
    MONTHS = "months"
    DAYS = "days"

    @property
    def years(self) -> float:
        return _PERIOD_YEARS[self]


_PERIOD_YEARS = {
    HoldingPeriod.YEARS: 1.0,
    HoldingPeriod.MONTHS: 1.0 / 12.0,
    HoldingPeriod.DAYS: 1.0 / 365.0,
}


# long-run averages, annual %
SP500_RETURN_PCT = 10.0
BOND_RETURN_PCT = 4.0
INFLATION_PCT = 3.0


def investment_returns(
    initial: float,
    contributions: float,
    current_value: float,
    time_held: float,
    period: Union[HoldingPeriod, str] = HoldingPeriod.YEARS,
) -> Dict[str, float]:
    """Total and annualized return of an investment.

    Parameters
    ----------
    initial, contributions : float
        Money put in up front and added since.
    current_value : float
        What the holding is worth now.
    time_held : float
        How long it has been held, in ``period`` units.

    Returns
    -------
    dict
        ``total_invested``, ``total_return`` (gain or loss in money),
        ``return_pct``, ``years``, ``annualized_pct`` (compound annual growth
        rate; 0 without a holding period), ``projected_5y`` and
        ``projected_10y`` (current value grown at the annualized rate) and
        the gaps to the S&P 500, bond and inflation averages.  Empty when
        nothing was invested.
    """
    invested = initial + contributions
    if invested <= 0:
        return {}
    years = max(0.0, time_held) * HoldingPeriod(period).years
    gain = current_value - invested
    annualized = ((current_value / invested) ** (1.0 / years) - 1) * 100.0 if years > 0 else 0.0
    rate = annualized / 100.0
    return {
        "total_invested": invested,
        "total_return": gain,
        "return_pct": gain / invested * 100.0,
        "years": years,
        "annualized_pct": annualized,
        "projected_5y": current_value * (1 + rate) ** 5,
        "projected_10y": current_value * (1 + rate) ** 10,
        "vs_sp500_pct": annualized - SP500_RETURN_PCT,
        "vs_bonds_pct": annualized - BOND_RETURN_PCT,
        "vs_inflation_pct": annualized - INFLATION_PCT,
    }


__all__ = [
    "BOND_RETURN_PCT",
    "CompoundFrequency",
    "HoldingPeriod",
    "INFLATION_PCT",
    "InflationMode",
    "SP500_RETURN_PCT",
    "compound_interest",
    "inflation_adjusted",
    "inflation_multiplier",
    "investment_returns",
    "yearly_balances",
]
