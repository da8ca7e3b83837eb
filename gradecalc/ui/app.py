from __future__ import annotations

import logging
from typing import Dict

import flet as ft

from gradecalc.config.settings import Settings
from gradecalc.domain.logic.grading import evaluate_all
from gradecalc.domain.models.entities import EntryOutcome, GradeResult
from gradecalc.state.entry_store import EntryStore
from gradecalc.ui import presenter

logger = logging.getLogger(__name__)

COLOR_BACKGROUND = "#1E1E2D"
COLOR_PANEL = "#2D2D41"
COLOR_TEXT = "#E6E6F5"
COLOR_FIELD = "#323246"
COLOR_FIELD_BORDER = "#505064"
COLOR_FIELD_ERROR = "#7E3838"
COLOR_PRIMARY = "#4682B4"
COLOR_DANGER = "#B45050"
COLOR_PASS = "#50B464"
COLOR_FAIL = "#C86464"

TONE_COLORS = {
    presenter.TONE_PASS: COLOR_PASS,
    presenter.TONE_FAIL: COLOR_FAIL,
    presenter.TONE_ERROR: COLOR_DANGER,
    presenter.TONE_NEUTRAL: COLOR_TEXT,
}


def _field(label: str, width: int, on_change, on_submit=None) -> ft.TextField:
    return ft.TextField(
        label=label,
        width=width,
        dense=True,
        color=COLOR_TEXT,
        bgcolor=COLOR_FIELD,
        border_color=COLOR_FIELD_BORDER,
        cursor_color=COLOR_TEXT,
        on_change=on_change,
        on_submit=on_submit,
    )


def _button(text: str, on_click, bgcolor: str = COLOR_PRIMARY) -> ft.ElevatedButton:
    return ft.ElevatedButton(text, on_click=on_click, bgcolor=bgcolor, color=ft.Colors.WHITE)


class SubjectRow:
    """Widgets for one entry; edits are written straight back into the store."""

    def __init__(self, app: "GradeCalculatorApp", handle: int) -> None:
        self.app = app
        self.handle = handle

        self.name = _field("Subject", 200, self._on_name)
        self.mark = _field("Mark Got", 110, self._on_mark, on_submit=app.handle_calculate)
        self.out_of = _field("Out of", 110, self._on_out_of, on_submit=app.handle_calculate)
        self.grade = ft.Text(presenter.format_entry(None), color=COLOR_TEXT, width=160)
        self.remove = ft.IconButton(
            icon=ft.Icons.CLOSE,
            icon_color=ft.Colors.WHITE,
            bgcolor=COLOR_DANGER,
            tooltip="Remove subject",
            on_click=lambda _: app.remove_subject_row(handle),
        )
        self.control = ft.Container(
            bgcolor=COLOR_PANEL,
            padding=5,
            content=ft.Row(
                [self.name, self.mark, self.out_of, self.grade, ft.Container(expand=True), self.remove],
                vertical_alignment=ft.CrossAxisAlignment.CENTER,
            ),
        )

    def _on_name(self, e: ft.ControlEvent) -> None:
        self.app.store.get(self.handle).name = e.control.value or ""

    def _on_mark(self, e: ft.ControlEvent) -> None:
        self.app.store.get(self.handle).mark = e.control.value or ""

    def _on_out_of(self, e: ft.ControlEvent) -> None:
        self.app.store.get(self.handle).out_of = e.control.value or ""

    def show(self, outcome: EntryOutcome) -> None:
        field_color = COLOR_FIELD if outcome.ok else COLOR_FIELD_ERROR
        self.mark.bgcolor = field_color
        self.out_of.bgcolor = field_color
        self.grade.value = presenter.format_entry(outcome)
        self.grade.color = TONE_COLORS[presenter.tone_for_outcome(outcome)]


class GradeCalculatorApp:
    def __init__(self, page: ft.Page, settings: Settings) -> None:
        self.page = page
        self.settings = settings
        self.store = EntryStore()
        self.rows: Dict[int, SubjectRow] = {}

        self.page.title = settings.window_title
        self.page.theme_mode = ft.ThemeMode.DARK
        self.page.bgcolor = COLOR_BACKGROUND
        self.page.padding = 15
        self.page.window.width = settings.window_width
        self.page.window.height = settings.window_height

        self.subjects_list = ft.Column(spacing=4, scroll=ft.ScrollMode.AUTO)
        self.total_label = ft.Text(weight=ft.FontWeight.BOLD, color=COLOR_TEXT)
        self.percentage_label = ft.Text(weight=ft.FontWeight.BOLD, color=COLOR_TEXT)
        self.grade_label = ft.Text(weight=ft.FontWeight.BOLD, color=COLOR_TEXT)

    def run(self) -> None:
        self.page.add(
            ft.Column(
                [
                    ft.Text(
                        "Student Grade Calculator",
                        size=18,
                        weight=ft.FontWeight.BOLD,
                        color=COLOR_TEXT,
                        text_align=ft.TextAlign.CENTER,
                    ),
                    ft.Container(
                        content=self.subjects_list,
                        bgcolor=COLOR_PANEL,
                        border=ft.border.all(1, COLOR_PRIMARY),
                        padding=5,
                        expand=True,
                    ),
                    ft.Row(
                        [
                            _button("Add New Subject", lambda _: self.add_subject_row()),
                            _button("Calculate", self.handle_calculate),
                        ],
                        alignment=ft.MainAxisAlignment.CENTER,
                    ),
                    ft.Row(
                        [self.total_label, self.percentage_label, self.grade_label],
                        alignment=ft.MainAxisAlignment.SPACE_EVENLY,
                    ),
                ],
                horizontal_alignment=ft.CrossAxisAlignment.CENTER,
                expand=True,
            )
        )
        self.show_aggregate(None)
        for _ in range(self.settings.initial_rows):
            self.add_subject_row()
        self.page.update()

    def add_subject_row(self) -> None:
        handle = self.store.add()
        row = SubjectRow(self, handle)
        self.rows[handle] = row
        self.subjects_list.controls.append(row.control)
        self.page.update()

    def remove_subject_row(self, handle: int) -> None:
        row = self.rows.pop(handle, None)
        if row is None:
            return
        self.store.remove(handle)
        self.subjects_list.controls.remove(row.control)
        self.page.update()

    def handle_calculate(self, _: ft.ControlEvent | None = None) -> None:
        report = evaluate_all(self.store.entries())
        for handle, outcome in zip(self.store.list(), report.per_entry):
            self.rows[handle].show(outcome)
        self.show_aggregate(report.aggregate)
        logger.info(
            "Calculated %d entries, aggregate %s",
            len(report.per_entry),
            report.aggregate.letter if report.is_available else "unavailable",
        )
        self.page.update()

    def show_aggregate(self, aggregate: GradeResult | None) -> None:
        self.total_label.value = presenter.format_total(aggregate)
        self.percentage_label.value = presenter.format_percentage(aggregate)
        self.grade_label.value = presenter.format_overall(aggregate)
        letter = aggregate.letter if aggregate is not None else None
        self.grade_label.color = TONE_COLORS[presenter.tone_for_letter(letter)]


def build_main(settings: Settings):
    def main(page: ft.Page) -> None:
        GradeCalculatorApp(page, settings).run()

    return main
