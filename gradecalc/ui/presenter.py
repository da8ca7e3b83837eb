"""Turns engine results into the strings and tones the window shows.

Kept free of flet so the wording can be tested without a display.
"""

from __future__ import annotations

from gradecalc.domain.logic.grading import is_passing
from gradecalc.domain.models.entities import EntryOutcome, GradeResult

PLACEHOLDER = "--"

TONE_PASS = "pass"
TONE_FAIL = "fail"
TONE_ERROR = "error"
TONE_NEUTRAL = "neutral"


def format_entry(outcome: EntryOutcome | None) -> str:
    if outcome is None:
        return f"Grade: {PLACEHOLDER}"
    if outcome.error is not None:
        return f"Grade: {outcome.error}"
    return f"Grade: {outcome.result.letter}"


def format_total(aggregate: GradeResult | None) -> str:
    if aggregate is None:
        return f"Total: {PLACEHOLDER} / {PLACEHOLDER}"
    return f"Total: {aggregate.total_got:.2f} / {aggregate.total_out_of:.2f}"


def format_percentage(aggregate: GradeResult | None) -> str:
    if aggregate is None:
        return f"Percentage: {PLACEHOLDER}%"
    return f"Percentage: {aggregate.percentage:.2f}%"


def format_overall(aggregate: GradeResult | None) -> str:
    if aggregate is None:
        return f"Overall Grade: {PLACEHOLDER}"
    return f"Overall Grade: {aggregate.letter}"


def tone_for_letter(letter: str | None) -> str:
    if letter is None:
        return TONE_NEUTRAL
    return TONE_PASS if is_passing(letter) else TONE_FAIL


def tone_for_outcome(outcome: EntryOutcome | None) -> str:
    if outcome is None:
        return TONE_NEUTRAL
    if outcome.error is not None:
        return TONE_ERROR
    return tone_for_letter(outcome.result.letter)
