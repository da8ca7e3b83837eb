from __future__ import annotations

import logging
import math
from typing import Iterable

from gradecalc.domain.models.entities import (
    EntryOutcome,
    EvaluationReport,
    GradeResult,
    RawNumber,
    SubjectEntry,
)

logger = logging.getLogger(__name__)

# Highest threshold first; anything below the last band is an F.
GRADE_SCALE: tuple[tuple[float, str], ...] = (
    (95, "O"),
    (90, "A+"),
    (85, "A"),
    (80, "B+"),
    (75, "B"),
    (70, "C+"),
    (65, "C"),
)
FAIL_LETTER = "F"
GRADE_LETTERS: tuple[str, ...] = tuple(letter for _, letter in GRADE_SCALE) + (FAIL_LETTER,)


class GradeError(ValueError):
    """Base class for input problems reported against a single entry."""

    default_message = "Invalid entry"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class ParseError(GradeError):
    default_message = "Invalid number"


class RangeError(GradeError):
    default_message = "Invalid range"


def grade_for(percentage: float) -> str:
    for threshold, letter in GRADE_SCALE:
        if percentage >= threshold:
            return letter
    return FAIL_LETTER


def is_passing(letter: str) -> bool:
    if letter not in GRADE_LETTERS:
        raise ValueError(f"Unsupported letter grade: {letter}")
    return letter != FAIL_LETTER


def parse_number(raw: RawNumber) -> float:
    """Convert a typed field value to a finite float.

    Numbers pass through unchanged; text is stripped first. Blank, non-numeric
    and non-finite input raise ParseError, as do ints too large for a float
    and underscore digit separators.
    """
    if isinstance(raw, bool):
        raise ParseError()
    if isinstance(raw, (int, float)):
        try:
            value = float(raw)
        except OverflowError as exc:
            raise ParseError() from exc
    else:
        text = str(raw).strip()
        if not text or "_" in text:
            raise ParseError()
        try:
            value = float(text)
        except ValueError as exc:
            raise ParseError() from exc
    if not math.isfinite(value):
        raise ParseError()
    return value


def evaluate_entry(mark: RawNumber, out_of: RawNumber) -> GradeResult:
    mark_value = parse_number(mark)
    out_of_value = parse_number(out_of)
    if out_of_value <= 0 or mark_value < 0 or mark_value > out_of_value:
        raise RangeError()
    percentage = (mark_value / out_of_value) * 100
    return GradeResult(
        total_got=mark_value,
        total_out_of=out_of_value,
        percentage=percentage,
        letter=grade_for(percentage),
    )


def _as_pair(entry: SubjectEntry | tuple[RawNumber, RawNumber]) -> tuple[RawNumber, RawNumber]:
    if isinstance(entry, SubjectEntry):
        return entry.mark, entry.out_of
    mark, out_of = entry
    return mark, out_of


def evaluate_all(entries: Iterable[SubjectEntry | tuple[RawNumber, RawNumber]]) -> EvaluationReport:
    per_entry: list[EntryOutcome] = []
    total_got = 0.0
    total_out_of = 0.0
    all_valid = True

    for index, entry in enumerate(entries):
        mark, out_of = _as_pair(entry)
        try:
            result = evaluate_entry(mark, out_of)
        except GradeError as exc:
            logger.debug("Entry %d rejected: %s (mark=%r, out_of=%r)", index, exc, mark, out_of)
            per_entry.append(EntryOutcome(error=exc))
            all_valid = False
            continue
        total_got += result.total_got
        total_out_of += result.total_out_of
        per_entry.append(EntryOutcome(result=result))

    if not all_valid or total_out_of == 0:
        logger.debug("Aggregate unavailable (entries=%d, all_valid=%s)", len(per_entry), all_valid)
        return EvaluationReport(per_entry=per_entry, aggregate=None)

    # Individually valid marks can still sum past the float range.
    if not (math.isfinite(total_got) and math.isfinite(total_out_of)):
        logger.debug("Aggregate unavailable: totals overflowed (entries=%d)", len(per_entry))
        return EvaluationReport(per_entry=per_entry, aggregate=None)

    percentage = (total_got / total_out_of) * 100
    aggregate = GradeResult(
        total_got=total_got,
        total_out_of=total_out_of,
        percentage=percentage,
        letter=grade_for(percentage),
    )
    return EvaluationReport(per_entry=per_entry, aggregate=aggregate)
