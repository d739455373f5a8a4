"""Sleep debt and recovery estimates."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Union

RECOVERY_FACTOR = 1.5
IMPACT_PER_HOUR = 0.1
MAX_IMPACT = 0.5


class Chronotype(str, Enum):
    EARLY_BIRD = "early_bird"
    AVERAGE = "average"
    NIGHT_OWL = "night_owl"

    @property
    def recovery_multiplier(self) -> float:
        return {"early_bird": 1.1, "average": 1.0, "night_owl": 0.9}[self.value]


def sleep_debt(
    target_hours: float,
    actual_hours: float,
    days: float,
    weekend_extra_hours: float = 0.0,
    weekend_catchup: bool = False,
) -> float:
    """Accumulated sleep debt in hours over ``days`` tracked days.

    Oversleeping on a given night does not bank credit; the daily deficit is
    floored at zero.  Weekend catch-up credits two days per week of
    ``weekend_extra_hours`` against the debt.
    """
    deficit = max(0.0, target_hours - actual_hours)
    total = deficit * max(0.0, days)
    if weekend_catchup:
        weekend_days = days / 7.0 * 2.0
        total = max(0.0, total - weekend_days * weekend_extra_hours)
    return total


def recovery_plan(
    debt_hours: float,
    target_hours: float,
    chronotype: Union[Chronotype, str] = Chronotype.AVERAGE,
) -> Dict[str, float]:
    """Hours and nights needed to pay back ``debt_hours``.

    ``extra_per_night`` is ``recovery_hours / recovery_nights``.  Nights are
    ``recovery_hours / target_hours``, so this always equals ``target_hours``
    (0 when there is no debt).  Screens show it as the nightly sleep to aim
    for while recovering, not as hours on top of the target.
    ``performance_impact`` is the estimated fractional drop in performance
    (capped at 50%).
    """
    hours = debt_hours * RECOVERY_FACTOR * Chronotype(chronotype).recovery_multiplier
    nights = hours / target_hours if target_hours > 0 else 0.0
    return {
        "recovery_hours": hours,
        "recovery_nights": nights,
        "extra_per_night": hours / nights if nights > 0 else 0.0,
        "performance_impact": min(MAX_IMPACT, debt_hours * IMPACT_PER_HOUR),
    }


__all__ = ["Chronotype", "recovery_plan", "sleep_debt"]
