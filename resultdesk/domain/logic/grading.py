from __future__ import annotations

import math
from types import MappingProxyType
from typing import Mapping

from resultdesk.domain.models.entities import Course

GRADE_SCALE: Mapping[str, float] = MappingProxyType(
    {
        "A+": 4.00,
        "A": 3.75,
        "A-": 3.50,
        "B+": 3.25,
        "B": 3.00,
        "B-": 2.75,
        "C+": 2.50,
        "C": 2.25,
        "D": 2.00,
        "F": 0.00,
    }
)

PASS_MARK = 2.0
DEFAULT_GRADE = "A"


def grade_point(letter: str) -> float:
    return GRADE_SCALE.get(letter, 0.0)


def grade_options() -> list[tuple[str, float]]:
    """Letter/point pairs in scale order, for populating a grade selector."""
    return list(GRADE_SCALE.items())


def parse_credit(raw: str | float | None) -> float | None:
    """
    Turn a credit value typed by the user into a credit.

    Blank input gives None (unset). A finite, non-negative number is returned
    as float. Anything else raises ValueError.
    """
    if raw is None:
        return None
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return None
    try:
        value = float(raw)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Credit must be a number, got {raw!r}") from exc
    if not math.isfinite(value) or value < 0:
        raise ValueError(f"Credit must be a finite non-negative number, got {raw!r}")
    return value


def effective_credit(course: Course) -> float | None:
    credit = course.credit
    if credit is None or isinstance(credit, bool):
        return None
    try:
        value = float(credit)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value) or value < 0:
        return None
    return value


def is_course_backlog(course: Course) -> bool:
    if effective_credit(course) is None:
        return False
    return grade_point(course.grade) < PASS_MARK
