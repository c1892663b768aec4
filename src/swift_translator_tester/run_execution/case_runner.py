"""Test case execution use-case service."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path

from swift_translator_tester.case_ingestion.testcase_models import TranslationTestCase
from swift_translator_tester.results_writing import ResultStatus, WriteOutcome, write_test_result

from .run_contracts import CaseOutcome, ResultSink, RunSummary, Translator

logger = logging.getLogger(__name__)

DIAGNOSTICS_ATTACHMENT_NAME = "Excel Details"

Attach = Callable[[str, str], None]
Pause = Callable[[int], None]


class ExpectationMismatchError(AssertionError):
    """Raised after the result is persisted when actual output differs from expected."""

    def __init__(self, expected: str, actual: str) -> None:
        super().__init__(f'Test failed: Expected "{expected}" but got "{actual}"')
        self.expected = expected
        self.actual = actual


@dataclass(frozen=True)
class WorkbookResultSink:
    """Writes results into one sheet of one workbook."""

    workbook_path: Path
    sheet_name: str

    def __call__(self, tc_id: object, actual_output: str, status: ResultStatus) -> WriteOutcome:
        return write_test_result(self.workbook_path, self.sheet_name, tc_id, actual_output, status)


def format_diagnostics(case: TranslationTestCase, actual_output: str) -> str:
    """Render the plain-text diagnostic bundle attached to failing cases."""
    return (
        f"TC ID      : {case.tc_id}\n"
        f"Test Name  : {case.name}\n"
        f"Input Type : {case.input_type}\n"
        "\n"
        f"Input:\n{case.input_text}\n"
        "\n"
        f"Expected:\n{case.expected}\n"
        "\n"
        f"Actual:\n{actual_output}\n"
        "\n"
        f"Justification:\n{case.justification}\n"
        "\n"
        f"Coverage:\n{case.coverage}\n"
    )


def run_test_case(
    case: TranslationTestCase,
    translator: Translator,
    *,
    result_sink: ResultSink,
    attach: Attach | None = None,
    pause: Pause | None = None,
    between_tests_ms: int = 0,
) -> CaseOutcome:
    """Translate one case, persist its result, then fail loudly if it did not pass.

    The result is always handed to ``result_sink`` before anything is raised,
    so a failing case still lands in the workbook.

    Raises:
      ExpectationMismatchError: When the output differs from the expectation or
        the translation raised. The translation error is chained as the cause.
    """
    actual_output = ""
    failure: Exception | None = None
    try:
        actual_output = translator.translate(case.input_text) or ""
    except Exception as exc:  # pylint: disable=broad-exception-caught
        failure = exc
        logger.warning("Translation failed for TC %s: %s", case.tc_id, exc)

    status = (
        ResultStatus.PASS
        if failure is None and actual_output == case.expected
        else ResultStatus.FAIL
    )
    diagnostics = None
    if status is ResultStatus.FAIL:
        diagnostics = format_diagnostics(case, actual_output)
        if attach is not None:
            attach(DIAGNOSTICS_ATTACHMENT_NAME, diagnostics)

    result_sink(case.tc_id, actual_output, status)
    if pause is not None and between_tests_ms:
        pause(between_tests_ms)

    if status is ResultStatus.FAIL:
        raise ExpectationMismatchError(case.expected, actual_output) from failure
    return CaseOutcome(
        tc_id=case.tc_id,
        name=case.name,
        actual_output=actual_output,
        status=status,
    )


def run_test_cases(
    cases: Iterable[TranslationTestCase],
    translator: Translator,
    *,
    result_sink: ResultSink,
    before_each: Callable[[], None] | None = None,
    pause: Pause | None = None,
    between_tests_ms: int = 0,
    on_outcome: Callable[[CaseOutcome], None] | None = None,
) -> RunSummary:
    """Run every case in order, collecting outcomes instead of stopping on failures.

    A failing ``before_each`` fails only its own case; no result is written
    for that case because the translation never ran.
    """
    outcomes: list[CaseOutcome] = []
    for case in cases:
        outcome = _run_collecting(
            case,
            translator,
            result_sink=result_sink,
            before_each=before_each,
            pause=pause,
            between_tests_ms=between_tests_ms,
        )
        outcomes.append(outcome)
        if on_outcome is not None:
            on_outcome(outcome)
    return RunSummary(outcomes=tuple(outcomes))


def _run_collecting(
    case: TranslationTestCase,
    translator: Translator,
    *,
    result_sink: ResultSink,
    before_each: Callable[[], None] | None,
    pause: Pause | None,
    between_tests_ms: int,
) -> CaseOutcome:
    if before_each is not None:
        try:
            before_each()
        except Exception as exc:  # pylint: disable=broad-exception-caught
            logger.error("Page setup failed before TC %s: %s", case.tc_id, exc)
            return CaseOutcome(
                tc_id=case.tc_id,
                name=case.name,
                actual_output="",
                status=ResultStatus.FAIL,
                error_message=str(exc),
            )

    attachments: list[str] = []
    try:
        return run_test_case(
            case,
            translator,
            result_sink=result_sink,
            attach=lambda _name, body: attachments.append(body),
            pause=pause,
            between_tests_ms=between_tests_ms,
        )
    except ExpectationMismatchError as exc:
        return CaseOutcome(
            tc_id=case.tc_id,
            name=case.name,
            actual_output=exc.actual,
            status=ResultStatus.FAIL,
            diagnostics=attachments[0] if attachments else None,
            error_message=str(exc.__cause__ or exc),
        )
