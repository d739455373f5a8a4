"""Pregnancy due-date arithmetic.

Dates are counted from the first day of the last menstrual period (LMP):

* Estimated due date: LMP + 280 days (40 weeks, Naegele's rule).
* Estimated conception: LMP + half the cycle length, 14 days for the
  typical 28-day cycle.
* Gestational week: whole weeks elapsed since the LMP.
* Trimester: first through week 12, second through week 27, third after.

Example
-------

>>> from datetime import date
>>> info = pregnancy_timeline(date(2024, 1, 1), today=date(2024, 2, 26))
>>> info["due_date"], info["week"], info["trimester"]
(datetime.date(2024, 10, 7), 8, 1)
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Dict, List, Optional, Tuple

GESTATION_DAYS = 280
DEFAULT_CYCLE_DAYS = 28.0

MILESTONES: List[Tuple[int, str]] = [
    (8, "First prenatal appointment"),
    (12, "End of first trimester, nuchal translucency scan"),
    (16, "Possible gender determination"),
    (20, "Anatomy scan, halfway point"),
    (24, "Glucose screening test"),
    (28, "Start of third trimester"),
    (36, "Baby considered full-term soon"),
    (40, "Due date - baby is full-term"),
]


def trimester_for_week(week: int) -> int:
    if week <= 12:
        return 1
    if week <= 27:
        return 2
    return 3


def due_date(last_period: date) -> date:
    return last_period + timedelta(days=GESTATION_DAYS)


def conception_date(last_period: date, cycle_length: float = DEFAULT_CYCLE_DAYS) -> date:
    """Ovulation falls roughly mid-cycle; fractional days are truncated."""
    if cycle_length <= 0:
        cycle_length = DEFAULT_CYCLE_DAYS
    return last_period + timedelta(days=int(cycle_length / 2))


def pregnancy_timeline(
    last_period: date,
    cycle_length: float = DEFAULT_CYCLE_DAYS,
    today: Optional[date] = None,
) -> Dict[str, object]:
    """Collect the dates and counters shown on the pregnancy screen.

    Parameters
    ----------
    last_period : date
        First day of the last menstrual period.
    cycle_length : float, optional
        Average cycle length in days (default 28).
    today : date, optional
        Reference date; defaults to :func:`datetime.date.today`.

    Returns
    -------
    dict
        ``due_date``, ``conception_date``, ``days_elapsed``, ``week``,
        ``trimester``, ``days_remaining`` and ``weeks_remaining``.
    """
    today = today or date.today()
    due = due_date(last_period)
    days_elapsed = (today - last_period).days
    week = max(0, days_elapsed) // 7
    days_remaining = (due - today).days
    return {
        "due_date": due,
        "conception_date": conception_date(last_period, cycle_length),
        "days_elapsed": days_elapsed,
        "week": week,
        "trimester": trimester_for_week(week),
        "days_remaining": days_remaining,
        "weeks_remaining": max(0, days_remaining) // 7,
    }


def milestone_dates(last_period: date) -> List[Tuple[int, date, str]]:
    """Milestones as ``(week, calendar date, description)``."""
    return [
        (week, last_period + timedelta(weeks=week), text) for week, text in MILESTONES
    ]


__all__ = [
    "DEFAULT_CYCLE_DAYS",
    "GESTATION_DAYS",
    "MILESTONES",
    "conception_date",
    "due_date",
    "milestone_dates",
    "pregnancy_timeline",
    "trimester_for_week",
]
