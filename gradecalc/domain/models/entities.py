from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

RawNumber = Union[float, int, str]


@dataclass
class SubjectEntry:
    name: str = ""
    mark: RawNumber = ""
    out_of: RawNumber = ""


@dataclass(frozen=True)
class GradeResult:
    total_got: float
    total_out_of: float
    percentage: float
    letter: str


@dataclass(frozen=True)
class EntryOutcome:
    result: GradeResult | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class EvaluationReport:
    per_entry: list[EntryOutcome] = field(default_factory=list)
    aggregate: GradeResult | None = None

    @property
    def is_available(self) -> bool:
        return self.aggregate is not None
