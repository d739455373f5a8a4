"""Take-home pay per paycheck.

Gross pay per period is the annual salary divided by the number of pay
periods.  Federal, state, Social Security and Medicare withholding and the
401(k) contribution are percentages of gross pay; health insurance and
other deductions are flat amounts per paycheck.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Union

FEDERAL_PCT = 22.0
STATE_PCT = 5.0
SOCIAL_SECURITY_PCT = 6.2
MEDICARE_PCT = 1.45


class PayFrequency(str, Enum):
    BIWEEKLY = "biweekly"
    WEEKLY = "weekly"
    SEMIMONTHLY = "semimonthly"
    MONTHLY = "monthly"

    @property
    def periods(self) -> int:
        return _PERIODS[self]


_PERIODS = {
    PayFrequency.WEEKLY: 52,
    PayFrequency.BIWEEKLY: 26,
    PayFrequency.SEMIMONTHLY: 24,
    PayFrequency.MONTHLY: 12,
}


def paycheck(
    salary: float,
    frequency: Union[PayFrequency, str] = PayFrequency.BIWEEKLY,
    federal_pct: float = FEDERAL_PCT,
    state_pct: float = STATE_PCT,
    social_security_pct: float = SOCIAL_SECURITY_PCT,
    medicare_pct: float = MEDICARE_PCT,
    retirement_pct: float = 0.0,
    health_insurance: float = 0.0,
    other_deductions: float = 0.0,
) -> Dict[str, float]:
    """Break one paycheck into gross pay, taxes, deductions and net pay.

    Net pay can go negative when deductions exceed what is left after
    taxes; it is reported as is.  ``effective_tax_pct`` counts taxes only.
    """
    periods = PayFrequency(frequency).periods
    gross = salary / periods if salary > 0 else 0.0
    taxes = {
        "federal_tax": gross * federal_pct / 100.0,
        "state_tax": gross * state_pct / 100.0,
        "social_security": gross * social_security_pct / 100.0,
        "medicare": gross * medicare_pct / 100.0,
    }
    deductions = {
        "health_insurance": health_insurance,
        "retirement": gross * retirement_pct / 100.0,
        "other_deductions": other_deductions,
    }
    total_taxes = sum(taxes.values())
    total_deductions = sum(deductions.values())
    net = gross - total_taxes - total_deductions
    return {
        "gross": gross,
        **taxes,
        **deductions,
        "total_taxes": total_taxes,
        "total_deductions": total_deductions,
        "net": net,
        "annual_net": net * periods,
        "monthly_net": net * periods / 12.0,
        "effective_tax_pct": total_taxes / gross * 100.0 if gross > 0 else 0.0,
    }


__all__ = ["PayFrequency", "paycheck"]
