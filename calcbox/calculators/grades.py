"""Grade point average on a 4.0 or weighted 5.0 scale.

Letter grades map to points with the usual table (A+ and A are both 4.0).
On the weighted 5.0 scale, honors and AP courses earn one extra point, capped
at 5.0; an F stays at zero.  Courses without a name or without positive
credit hours are ignored, matching an empty row in the course list.

Example
-------

>>> courses = [Course("Calculus", "A", 4), Course("History", "B+", 3)]
>>> round(gpa(courses), 3)
3.7
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Union

from ..parsing import parse_number


class GPAScale(str, Enum):
    FOUR_POINT = "four_point"
    FIVE_POINT = "five_point"

    @property
    def max_value(self) -> float:
        return 4.0 if self is GPAScale.FOUR_POINT else 5.0


GRADE_POINTS: Dict[str, float] = {
    "A+": 4.0,
    "A": 4.0,
    "A-": 3.7,
    "B+": 3.3,
    "B": 3.0,
    "B-": 2.7,
    "C+": 2.3,
    "C": 2.0,
    "C-": 1.7,
    "D+": 1.3,
    "D": 1.0,
    "F": 0.0,
}

HONORS_BONUS = 1.0


@dataclass(frozen=True)
class Course:
    """One row of the course list.

    ``credit_hours`` may be the raw text typed by the user; it is parsed the
    same forgiving way as any other field.
    """

    name: str
    grade: str
    credit_hours: Union[float, str]
    honors: bool = False

    @property
    def credits(self) -> float:
        if isinstance(self.credit_hours, str):
            value = parse_number(self.credit_hours)
        else:
            value = float(self.credit_hours)
        return value if value is not None and value > 0 else 0.0


def grade_points(
    grade: str, scale: Union[GPAScale, str] = GPAScale.FOUR_POINT, honors: bool = False
) -> float:
    """Points for a letter grade; unknown letters raise ``ValueError``."""
    try:
        base = GRADE_POINTS[grade.strip().upper()]
    except KeyError:
        raise ValueError(f"Unknown letter grade '{grade}'") from None
    if GPAScale(scale) is GPAScale.FIVE_POINT and honors and base > 0:
        return min(base + HONORS_BONUS, 5.0)
    return base


def counted_courses(courses: Iterable[Course]) -> list:
    return [c for c in courses if c.name.strip() and c.credits > 0]


def total_credits(courses: Iterable[Course]) -> float:
    return sum(c.credits for c in counted_courses(courses))


def gpa(courses: Iterable[Course], scale: Union[GPAScale, str] = GPAScale.FOUR_POINT) -> float:
    """Credit-weighted grade point average, or 0 with no countable courses."""
    rows = counted_courses(courses)
    credits = sum(c.credits for c in rows)
    if credits <= 0:
        return 0.0
    points = sum(grade_points(c.grade, scale, c.honors) * c.credits for c in rows)
    return points / credits


__all__ = [
    "Course",
    "GPAScale",
    "GRADE_POINTS",
    "counted_courses",
    "gpa",
    "grade_points",
    "total_credits",
]
