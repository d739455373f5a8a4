"""Debt payoff projections with the snowball and avalanche strategies.

Every month each open debt accrues ``balance · rate / 1200`` of interest
and receives its minimum payment; then the whole extra payment goes to the
first open debt in strategy order.  Snowball orders debts by smallest
balance, avalanche by highest rate.  A minimum freed up by a paid-off debt
is not rolled into the next one, and a debt counts as paid off once its
balance is within a cent of zero.

Only debts with a positive balance, rate and minimum payment take part.
The projection stops after :data:`MAX_MONTHS` months even if something is
still owed (a minimum below the monthly interest never pays a debt down).

Example
-------

>>> plan = payoff_plan([Debt("Card", 1000, 12, 100)])
>>> plan["months"]
11
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Union

from ..parsing import parse_number

MAX_MONTHS = 600
PAID_OFF = 0.01


class PayoffStrategy(str, Enum):
    SNOWBALL = "snowball"
    AVALANCHE = "avalanche"


def _amount(value: Union[float, str]) -> float:
    if isinstance(value, str):
        parsed = parse_number(value)
    else:
        parsed = float(value)
    return parsed if parsed is not None and parsed > 0 else 0.0


@dataclass(frozen=True)
class Debt:
    """One row of the debt list; numbers may be the raw text typed in."""

    name: str
    balance: Union[float, str]
    rate: Union[float, str]
    minimum_payment: Union[float, str]

    @property
    def balance_value(self) -> float:
        return _amount(self.balance)

    @property
    def rate_value(self) -> float:
        return _amount(self.rate)

    @property
    def minimum_value(self) -> float:
        return _amount(self.minimum_payment)


def payable_debts(debts: Iterable[Debt]) -> List[Debt]:
    return [d for d in debts if d.balance_value > 0 and d.rate_value > 0 and d.minimum_value > 0]


def payoff_order(
    debts: Iterable[Debt], strategy: Union[PayoffStrategy, str] = PayoffStrategy.SNOWBALL
) -> List[Debt]:
    """Payable debts in the order the extra payment reaches them (stable on ties)."""
    rows = payable_debts(debts)
    if PayoffStrategy(strategy) is PayoffStrategy.SNOWBALL:
        return sorted(rows, key=lambda d: d.balance_value)
    return sorted(rows, key=lambda d: d.rate_value, reverse=True)


def payoff_plan(
    debts: Iterable[Debt],
    extra_payment: float = 0.0,
    strategy: Union[PayoffStrategy, str] = PayoffStrategy.SNOWBALL,
) -> Dict[str, object]:
    """Month-by-month payoff simulation.

    Parameters
    ----------
    debts : iterable of Debt
        The debt list; rows that are not payable are skipped.
    extra_payment : float
        Paid each month on top of the minimums.
    strategy : PayoffStrategy or str
        Which debt receives the extra payment first.

    Returns
    -------
    dict
        ``months`` and ``years`` until everything is paid (or the cap is
        hit), ``total_interest``, ``total_paid``, ``starting_balance``,
        ``remaining_balance``, ``paid_off`` (False when capped), and the
        per-debt lists ``order``, ``payoff_month`` (0 if never cleared) and
        ``interest`` in strategy order.  An empty debt list gives zeros.
    """
    order = payoff_order(debts, strategy)
    extra = max(0.0, extra_payment)
    balances = [d.balance_value for d in order]
    interest_paid = [0.0] * len(order)
    payoff_month = [0] * len(order)
    starting = sum(balances)

    month = 0
    while any(b > PAID_OFF for b in balances):
        month += 1
        for i, debt in enumerate(order):
            if balances[i] <= PAID_OFF:
                continue
            interest = balances[i] * debt.rate_value / 100.0 / 12.0
            principal = min(debt.minimum_value - interest, balances[i])
            balances[i] = max(0.0, balances[i] - principal)
            interest_paid[i] += interest
        for i, balance in enumerate(balances):
            if balance > PAID_OFF:
                balances[i] = max(0.0, balance - min(extra, balance))
                break
        for i, balance in enumerate(balances):
            if balance <= PAID_OFF and not payoff_month[i]:
                payoff_month[i] = month
        if month > MAX_MONTHS:
            break

    total_interest = sum(interest_paid)
    remaining = sum(balances)
    return {
        "months": month,
        "years": month / 12.0,
        "total_interest": total_interest,
        "starting_balance": starting,
        "remaining_balance": remaining,
        "total_paid": starting + total_interest - remaining,
        "paid_off": all(b <= PAID_OFF for b in balances),
        "order": [d.name for d in order],
        "payoff_month": payoff_month,
        "interest": interest_paid,
    }


__all__ = [
    "Debt",
    "MAX_MONTHS",
    "PayoffStrategy",
    "payable_debts",
    "payoff_order",
    "payoff_plan",
]
