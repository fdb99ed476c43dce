from __future__ import annotations

from resultdesk.domain.logic.grading import parse_credit
from resultdesk.domain.models.entities import Course


def format_points(value: float) -> str:
    return f"{value:.2f}"


def format_credits(value: float | None) -> str:
    if value is None:
        return ""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


def backlog_label(course: Course) -> str:
    return f"{course.code or 'Untitled'} • {course.title or 'No title'}"


def backlog_count_label(count: int) -> str:
    if not count:
        return "All clear"
    return f"{count} backlog{'s' if count > 1 else ''}"


def credit_field_text(raw: str | None, previous: float | None) -> str:
    """Text to leave in a credit field: the typed value if it parses, else the credit still in effect."""
    try:
        parse_credit(raw)
    except ValueError:
        return format_credits(previous)
    return raw or ""
