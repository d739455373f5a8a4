"""How long retirement savings last under a withdrawal strategy.

Each year the balance first earns ``balance · return / 100`` and then the
year's withdrawal is taken, capped at what is in the account:

* percentage withdrawals take ``pct`` of the balance at the start of the
  year, so they shrink along with it;
* fixed withdrawals take the same amount every year.

The simulation stops the year the balance reaches zero, or after
:data:`MAX_YEARS` years, in which case the savings are considered to last
indefinitely.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Union

MAX_YEARS = 100


class WithdrawalType(str, Enum):
    PERCENTAGE = "percentage"
    FIXED = "fixed"


def drawdown_schedule(
    savings: float,
    annual_return_pct: float,
    withdrawal: float,
    withdrawal_type: Union[WithdrawalType, str] = WithdrawalType.PERCENTAGE,
) -> Dict[str, List[float]]:
    """Year-by-year ledger of a retirement account.

    ``withdrawal`` is a percentage of the balance or a fixed yearly amount,
    depending on ``withdrawal_type``.  Each list holds one entry per year:
    ``year``, ``starting``, ``gains``, ``withdrawal`` and ``ending`` (floored
    at zero).  Non-positive savings or withdrawals give empty lists.
    """
    ledger: Dict[str, List[float]] = {"year": [], "starting": [], "gains": [], "withdrawal": [], "ending": []}
    if savings <= 0 or withdrawal <= 0:
        return ledger
    percentage = WithdrawalType(withdrawal_type) is WithdrawalType.PERCENTAGE

    balance = savings
    for year in range(1, MAX_YEARS + 1):
        gains = balance * annual_return_pct / 100.0
        wanted = balance * withdrawal / 100.0 if percentage else withdrawal
        taken = min(wanted, balance + gains)
        ending = balance + gains - taken
        ledger["year"].append(float(year))
        ledger["starting"].append(balance)
        ledger["gains"].append(gains)
        ledger["withdrawal"].append(taken)
        ledger["ending"].append(max(0.0, ending))
        if ending <= 0:
            break
        balance = ending
    return ledger


def savings_duration(
    savings: float,
    annual_return_pct: float,
    withdrawal: float,
    withdrawal_type: Union[WithdrawalType, str] = WithdrawalType.PERCENTAGE,
) -> Dict[str, float]:
    """Summary of :func:`drawdown_schedule`.

    Returns ``years`` (the year the money runs out, or :data:`MAX_YEARS`),
    ``indefinite`` (True when it never runs out), the first year's
    ``first_withdrawal`` and ``first_gains``, and ``total_withdrawn``.
    """
    ledger = drawdown_schedule(savings, annual_return_pct, withdrawal, withdrawal_type)
    if not ledger["year"]:
        return {"years": 0.0, "indefinite": False, "first_withdrawal": 0.0, "first_gains": 0.0,
                "total_withdrawn": 0.0}
    depleted = ledger["ending"][-1] <= 0
    return {
        "years": ledger["year"][-1],
        "indefinite": not depleted,
        "first_withdrawal": ledger["withdrawal"][0],
        "first_gains": ledger["gains"][0],
        "total_withdrawn": sum(ledger["withdrawal"]),
    }


__all__ = ["MAX_YEARS", "WithdrawalType", "drawdown_schedule", "savings_duration"]
