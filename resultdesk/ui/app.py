from __future__ import annotations

import logging
from typing import Dict

import flet as ft

from resultdesk.config.settings import settings
from resultdesk.domain.logic.grading import grade_options, is_course_backlog
from resultdesk.domain.models.entities import Course, Semester
from resultdesk.state.tracker_state import TrackerState
from resultdesk.ui.formatting import (
    backlog_count_label,
    backlog_label,
    credit_field_text,
    format_credits,
    format_points,
)

logger = logging.getLogger(__name__)


def _badge(text: str, danger: bool = False) -> ft.Container:
    return ft.Container(
        content=ft.Text(text, size=12, color=ft.Colors.WHITE if danger else None),
        bgcolor=ft.Colors.RED_400 if danger else ft.Colors.BLUE_GREY_100,
        padding=ft.padding.symmetric(horizontal=8, vertical=4),
        border_radius=12,
    )


def _highlight(label: str, value: ft.Control) -> ft.Container:
    return ft.Container(
        content=ft.Column([ft.Text(label, size=12, color=ft.Colors.GREY_700), value], tight=True),
        padding=12,
        border_radius=8,
        bgcolor=ft.Colors.BLUE_GREY_50,
    )


class SemesterWidgets:
    def __init__(self) -> None:
        self.gpa = ft.Text(size=18, weight=ft.FontWeight.BOLD)
        self.attempted = ft.Text(size=18, weight=ft.FontWeight.BOLD)
        self.earned = ft.Text(size=18, weight=ft.FontWeight.BOLD)
        self.backlog = ft.Row(wrap=True)
        self.course_tags: Dict[str, ft.Container] = {}


class ResultDeskApp:
    def __init__(self, page: ft.Page, state: TrackerState | None = None) -> None:
        self.page = page
        self.page.title = settings.app_title
        self.page.scroll = ft.ScrollMode.AUTO
        self.state = state or TrackerState()
        self.status = ft.Text(color=ft.Colors.RED)

        self.cgpa_text = ft.Text(size=24, weight=ft.FontWeight.BOLD)
        self.total_credits_text = ft.Text(size=24, weight=ft.FontWeight.BOLD)
        self.total_semesters_text = ft.Text(size=24, weight=ft.FontWeight.BOLD)
        self.backlog_count = ft.Container(padding=ft.padding.symmetric(horizontal=10, vertical=4), border_radius=12)
        self.backlog_badges = ft.Row(wrap=True)
        self.semester_widgets: Dict[str, SemesterWidgets] = {}

    def run(self) -> None:
        self.render()

    def render(self) -> None:
        """Rebuild every control. Used after adding or removing a semester or course."""
        self.page.clean()
        self.semester_widgets.clear()

        if self.state.semesters:
            semester_cards = [self.semester_card(s) for s in self.state.semesters]
        else:
            semester_cards = [ft.Card(content=ft.Container(padding=20, content=ft.Text("No semesters yet. Start by adding your first semester.")))]

        self.page.add(
            ft.Column(
                [
                    ft.Text(settings.app_title, size=32, weight=ft.FontWeight.BOLD),
                    ft.Text(
                        "Track semester performance, compute CGPA on a 4.00 scale, and monitor backlog status in real time.",
                        color=ft.Colors.GREY_700,
                    ),
                ]
            ),
            ft.Card(
                content=ft.Container(
                    padding=16,
                    content=ft.Column(
                        [
                            ft.Row(
                                [
                                    _highlight("CGPA", self.cgpa_text),
                                    _highlight("Total Credits Attempted", self.total_credits_text),
                                    _highlight("Total Semesters", self.total_semesters_text),
                                    _highlight("Active Backlogs", self.backlog_count),
                                ],
                                wrap=True,
                            ),
                            ft.Text("Backlog Courses", size=12, color=ft.Colors.GREY_700),
                            self.backlog_badges,
                        ]
                    ),
                )
            ),
            ft.Row(
                [
                    ft.Column(
                        [
                            ft.Text("Semesters", size=22, weight=ft.FontWeight.BOLD),
                            ft.Text("Add semesters, courses, and manage results effortlessly.", color=ft.Colors.GREY_700),
                        ],
                        tight=True,
                    ),
                    ft.ElevatedButton("+ Add Semester", on_click=self.handle_add_semester),
                ],
                alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
            ),
            self.status,
            ft.Column(semester_cards, spacing=24),
        )
        self.refresh_summaries()

    def refresh_summaries(self) -> None:
        """Recompute all summaries from the current state and push them into the existing controls."""
        aggregate = self.state.aggregate()
        self.cgpa_text.value = format_points(aggregate.cgpa)
        self.total_credits_text.value = format_credits(aggregate.total_credits_attempted)
        self.total_semesters_text.value = str(aggregate.total_semesters)

        count = len(aggregate.backlog_courses)
        self.backlog_count.content = ft.Text(str(count), size=20, weight=ft.FontWeight.BOLD, color=ft.Colors.WHITE if count else None)
        self.backlog_count.bgcolor = ft.Colors.RED_400 if count else ft.Colors.GREEN_100
        self.backlog_badges.controls = [_badge(backlog_label(c)) for c in aggregate.backlog_courses] or [
            ft.Text("No pending backlogs", color=ft.Colors.GREY_700)
        ]

        for semester, summary in zip(self.state.semesters, self.state.semester_summaries()):
            widgets = self.semester_widgets.get(semester.id)
            if widgets is None:
                continue
            widgets.gpa.value = format_points(summary.gpa)
            widgets.attempted.value = format_credits(summary.credits_attempted)
            widgets.earned.value = format_credits(summary.credits_earned)
            count = len(summary.backlog_courses)
            widgets.backlog.controls = [_badge(backlog_count_label(count), danger=bool(count))]
            for course in semester.courses:
                tag = widgets.course_tags.get(course.id)
                if tag is not None:
                    tag.visible = is_course_backlog(course)

        self.page.update()

    def semester_card(self, semester: Semester) -> ft.Control:
        widgets = SemesterWidgets()
        self.semester_widgets[semester.id] = widgets

        name = ft.TextField(
            label="Semester Name",
            value=semester.name,
            hint_text="e.g. Fall 2024",
            expand=True,
            on_change=lambda e, sid=semester.id: self.state.rename_semester(sid, e.control.value),
        )
        header_controls: list[ft.Control] = [name]
        if len(self.state.semesters) > 1:
            header_controls.append(ft.OutlinedButton("Remove", on_click=lambda _, sid=semester.id: self.handle_remove_semester(sid)))

        rows = [self.course_row(semester, course, widgets) for course in semester.courses]

        return ft.Card(
            content=ft.Container(
                padding=16,
                content=ft.Column(
                    [
                        ft.Row(header_controls),
                        ft.Row(
                            [
                                _highlight("Semester GPA", widgets.gpa),
                                _highlight("Credits Attempted", widgets.attempted),
                                _highlight("Credits Earned", widgets.earned),
                            ],
                            wrap=True,
                        ),
                        ft.Row(
                            [
                                ft.Text("Course Code", width=140, weight=ft.FontWeight.BOLD),
                                ft.Text("Course Title", width=240, weight=ft.FontWeight.BOLD),
                                ft.Text("Credit", width=90, weight=ft.FontWeight.BOLD),
                                ft.Text("Grade", width=150, weight=ft.FontWeight.BOLD),
                            ]
                        ),
                        *rows,
                        ft.Row(
                            [
                                ft.OutlinedButton("+ Add Course", on_click=lambda _, sid=semester.id: self.handle_add_course(sid)),
                                widgets.backlog,
                            ],
                            alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                        ),
                    ]
                ),
            )
        )

    def course_row(self, semester: Semester, course: Course, widgets: SemesterWidgets) -> ft.Control:
        sid, cid = semester.id, course.id
        tag = _badge("Backlog", danger=True)
        tag.visible = is_course_backlog(course)
        widgets.course_tags[cid] = tag

        def on_code(e: ft.ControlEvent) -> None:
            e.control.value = (e.control.value or "").upper()
            self.handle_course_update(sid, cid, "code", e.control.value)

        def on_credit(e: ft.ControlEvent) -> None:
            current = self.state.find_course(sid, cid)
            e.control.value = credit_field_text(e.control.value, current.credit if current else None)
            self.handle_course_update(sid, cid, "credit", e.control.value)

        controls: list[ft.Control] = [
            ft.TextField(value=course.code, hint_text="CSE-201", width=140, on_change=on_code),
            ft.TextField(
                value=course.title,
                hint_text="Data Structures",
                width=240,
                on_change=lambda e: self.handle_course_update(sid, cid, "title", e.control.value),
            ),
            ft.TextField(
                value=format_credits(course.credit),
                hint_text="3",
                width=90,
                keyboard_type=ft.KeyboardType.NUMBER,
                on_change=on_credit,
            ),
            ft.Column(
                [
                    ft.Dropdown(
                        width=150,
                        value=course.grade,
                        options=[ft.dropdown.Option(label, f"{label} ({format_points(point)})") for label, point in grade_options()],
                        on_change=lambda e: self.handle_course_update(sid, cid, "grade", e.control.value),
                    ),
                    tag,
                ],
                tight=True,
            ),
        ]
        if len(semester.courses) > 1:
            controls.append(ft.IconButton(icon=ft.Icons.CLOSE, on_click=lambda _: self.handle_remove_course(sid, cid)))
        return ft.Row(controls, vertical_alignment=ft.CrossAxisAlignment.START)

    def handle_course_update(self, semester_id: str, course_id: str, field_name: str, value: str | None) -> None:
        try:
            self.state.update_course(semester_id, course_id, field_name, value or "")
            self.status.value = ""
        except ValueError as exc:
            logger.warning("Rejected %s edit for course %s: %s", field_name, course_id, exc)
            self.status.value = str(exc)
        self.refresh_summaries()

    def handle_add_semester(self, _: ft.ControlEvent) -> None:
        self.state.add_semester()
        self.render()

    def handle_remove_semester(self, semester_id: str) -> None:
        self.state.remove_semester(semester_id)
        self.render()

    def handle_add_course(self, semester_id: str) -> None:
        self.state.add_course(semester_id)
        self.render()

    def handle_remove_course(self, semester_id: str, course_id: str) -> None:
        self.state.remove_course(semester_id, course_id)
        self.render()


def main(page: ft.Page) -> None:
    ResultDeskApp(page).run()
