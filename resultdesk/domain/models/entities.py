from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Course:
    id: str
    code: str = ""
    title: str = ""
    # None means the credit field was left blank; such courses are ignored by every aggregate.
    credit: float | None = None
    grade: str = "A"


@dataclass
class Semester:
    id: str
    name: str
    courses: list[Course] = field(default_factory=list)


@dataclass(frozen=True)
class SemesterSummary:
    gpa: float
    credits_attempted: float
    credits_earned: float
    backlog_courses: tuple[Course, ...] = ()


@dataclass(frozen=True)
class AggregateSummary:
    total_semesters: int
    total_credits_attempted: float
    total_grade_points: float
    cgpa: float
    backlog_courses: tuple[Course, ...] = ()
