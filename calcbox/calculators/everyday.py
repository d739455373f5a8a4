# calculators/everyday.py
from enum import Enum
from typing import Dict, Union


class SalesTaxMode(str, Enum):
    ADD = "add"
    REMOVE = "remove"


class PercentageMode(str, Enum):
    PERCENT_OF = "percent_of"
    WHAT_PERCENT = "what_percent"
    PERCENT_CHANGE = "percent_change"
    INCREASE_DECREASE = "increase_decrease"


def tip(bill: float, tip_pct: float, people: float = 1.0) -> Dict[str, float]:
    """Tip and total, overall and per person.

    A missing or non-positive head count means a single payer.
    """
    if bill <= 0 or tip_pct < 0:
        return {"tip": 0.0, "total": max(0.0, bill), "per_person": max(0.0, bill), "tip_per_person": 0.0}
    amount = bill * tip_pct / 100.0
    total = bill + amount
    heads = people if people > 0 else 1.0
    return {
        "tip": amount,
        "total": total,
        "per_person": total / heads,
        "tip_per_person": amount / heads,
    }


def sales_tax(
    amount: float, rate_pct: float, mode: Union[SalesTaxMode, str] = SalesTaxMode.ADD
) -> Dict[str, float]:
    """Split a purchase into pre-tax amount, tax and total.

    In ``add`` mode ``amount`` is the pre-tax price; in ``remove`` mode it is
    the receipt total and the tax is backed out of it.
    """
    if amount <= 0 or rate_pct < 0:
        return {"pre_tax": 0.0, "tax": 0.0, "total": 0.0}
    if SalesTaxMode(mode) is SalesTaxMode.ADD:
        tax = amount * rate_pct / 100.0
        return {"pre_tax": amount, "tax": tax, "total": amount + tax}
    pre_tax = amount / (1 + rate_pct / 100.0)
    return {"pre_tax": pre_tax, "tax": amount - pre_tax, "total": amount}


def percentage(
    first: float, second: float, mode: Union[PercentageMode, str] = PercentageMode.PERCENT_OF
) -> float:
    """The four everyday percentage questions.

    ``percent_of``        -- what is ``first``% of ``second``
    ``what_percent``      -- ``first`` is what percent of ``second``
    ``percent_change``    -- change from ``first`` (original) to ``second`` (new)
    ``increase_decrease`` -- ``first`` moved by ``second`` percent
    """
    mode = PercentageMode(mode)
    if mode is PercentageMode.PERCENT_OF:
        return first / 100.0 * second
    if mode is PercentageMode.WHAT_PERCENT:
        return first / second * 100.0 if second != 0 else 0.0
    if mode is PercentageMode.PERCENT_CHANGE:
        return (second - first) / first * 100.0 if first != 0 else 0.0
    return first * (1 + second / 100.0)
