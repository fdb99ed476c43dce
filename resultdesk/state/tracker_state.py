from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from typing import List, Optional

from resultdesk.domain.logic.gpa import compute_aggregate, compute_semester_summary
from resultdesk.domain.logic.grading import DEFAULT_GRADE, GRADE_SCALE, parse_credit
from resultdesk.domain.models.entities import AggregateSummary, Course, Semester, SemesterSummary

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("code", "title", "credit", "grade")


def _new_id() -> str:
    return uuid.uuid4().hex[:9]


def new_course() -> Course:
    return Course(id=_new_id(), code="", title="", credit=None, grade=DEFAULT_GRADE)


def new_semester(index: int) -> Semester:
    return Semester(id=_new_id(), name=f"Semester {index}", courses=[new_course()])


@dataclass
class TrackerState:
    """
    In-memory semester collection edited by the UI.

    Summaries are never cached: semester_summaries() and aggregate() recompute
    from the current courses on every call. Operations given an unknown
    semester or course id do nothing.
    """

    semesters: List[Semester] = field(default_factory=lambda: [new_semester(1)])

    def find_semester(self, semester_id: str) -> Optional[Semester]:
        return next((s for s in self.semesters if s.id == semester_id), None)

    def find_course(self, semester_id: str, course_id: str) -> Optional[Course]:
        semester = self.find_semester(semester_id)
        if semester is None:
            return None
        return next((c for c in semester.courses if c.id == course_id), None)

    def add_semester(self) -> Semester:
        semester = new_semester(len(self.semesters) + 1)
        self.semesters.append(semester)
        logger.debug("Added semester %s (%s)", semester.id, semester.name)
        return semester

    def remove_semester(self, semester_id: str) -> None:
        self.semesters = [s for s in self.semesters if s.id != semester_id]
        logger.debug("Removed semester %s", semester_id)

    def rename_semester(self, semester_id: str, name: str) -> None:
        semester = self.find_semester(semester_id)
        if semester is not None:
            semester.name = name

    def add_course(self, semester_id: str) -> Optional[Course]:
        semester = self.find_semester(semester_id)
        if semester is None:
            return None
        course = new_course()
        semester.courses.append(course)
        logger.debug("Added course %s to semester %s", course.id, semester_id)
        return course

    def remove_course(self, semester_id: str, course_id: str) -> None:
        semester = self.find_semester(semester_id)
        if semester is None:
            return
        semester.courses = [c for c in semester.courses if c.id != course_id]
        logger.debug("Removed course %s from semester %s", course_id, semester_id)

    def update_course(self, semester_id: str, course_id: str, field_name: str, value: str) -> None:
        if field_name not in EDITABLE_FIELDS:
            raise ValueError(f"Unsupported course field: {field_name}")
        course = self.find_course(semester_id, course_id)
        if course is None:
            return

        if field_name == "code":
            course.code = value.upper()
        elif field_name == "title":
            course.title = value
        elif field_name == "grade":
            if value not in GRADE_SCALE:
                raise ValueError(f"Unsupported letter grade: {value}")
            course.grade = value
        else:
            try:
                course.credit = parse_credit(value)
            except ValueError:
                # Keep the last valid credit while the user is mid-edit.
                logger.debug("Ignored credit %r for course %s", value, course_id)

    def semester_summaries(self) -> List[SemesterSummary]:
        return [compute_semester_summary(s) for s in self.semesters]

    def aggregate(self) -> AggregateSummary:
        return compute_aggregate(self.semesters)
