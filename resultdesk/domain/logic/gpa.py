from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Sequence

from resultdesk.domain.logic.grading import effective_credit, grade_point, is_course_backlog
from resultdesk.domain.models.entities import AggregateSummary, Course, Semester, SemesterSummary


def round_2dp(value: float) -> float:
    # Sums of huge credits can overflow to inf/nan; report those as 0 like an empty record.
    if not math.isfinite(value):
        return 0.0
    return float(Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def _weighted_points(courses: Iterable[Course]) -> float:
    total = 0.0
    for c in courses:
        credit = effective_credit(c)
        if credit is None:
            continue
        total += grade_point(c.grade) * credit
    return total


def compute_semester_summary(semester: Semester) -> SemesterSummary:
    weighted = 0.0
    attempted = 0.0
    earned = 0.0
    backlog: list[Course] = []
    for c in semester.courses:
        credit = effective_credit(c)
        if credit is None:
            continue
        weighted += grade_point(c.grade) * credit
        attempted += credit
        if is_course_backlog(c):
            backlog.append(c)
        else:
            earned += credit
    gpa = round_2dp(weighted / attempted) if attempted > 0 else 0.0
    return SemesterSummary(
        gpa=gpa,
        credits_attempted=attempted,
        credits_earned=earned,
        backlog_courses=tuple(backlog),
    )


def compute_aggregate(semesters: Sequence[Semester]) -> AggregateSummary:
    summaries = [compute_semester_summary(sem) for sem in semesters]
    total_attempted = sum(s.credits_attempted for s in summaries)
    total_points = sum(_weighted_points(sem.courses) for sem in semesters)
    cgpa = round_2dp(total_points / total_attempted) if total_attempted > 0 else 0.0
    backlog = tuple(c for s in summaries for c in s.backlog_courses)
    return AggregateSummary(
        total_semesters=len(semesters),
        total_credits_attempted=total_attempted,
        total_grade_points=total_points,
        cgpa=cgpa,
        backlog_courses=backlog,
    )
