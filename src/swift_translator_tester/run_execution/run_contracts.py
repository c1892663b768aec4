"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from swift_translator_tester.results_writing.report_models import ResultStatus


class Translator(Protocol):  # pylint: disable=too-few-public-methods
    """Anything that turns source text into rendered output text."""

    def translate(self, text: str) -> str | None: ...


class ResultSink(Protocol):  # pylint: disable=too-few-public-methods
    """Persists one result; must not raise."""

    def __call__(self, tc_id: object, actual_output: str, status: ResultStatus) -> object: ...


@dataclass(frozen=True)
class CaseOutcome:
    """Outcome of executing one test case."""

    tc_id: object
    name: str
    actual_output: str
    status: ResultStatus
    diagnostics: str | None = None
    error_message: str | None = None

    @property
    def passed(self) -> bool:
        return self.status is ResultStatus.PASS


@dataclass(frozen=True)
class RunSummary:
    """Ordered outcomes of a sequential run."""

    outcomes: tuple[CaseOutcome, ...]

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @property
    def passed(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.passed)

    @property
    def failed(self) -> int:
        return self.total - self.passed
