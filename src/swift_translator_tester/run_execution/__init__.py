"""Run execution domain exports."""

from .case_runner import (
    DIAGNOSTICS_ATTACHMENT_NAME,
    ExpectationMismatchError,
    WorkbookResultSink,
    format_diagnostics,
    run_test_case,
    run_test_cases,
)
from .run_contracts import CaseOutcome, ResultSink, RunSummary, Translator

__all__ = [
    "CaseOutcome",
    "DIAGNOSTICS_ATTACHMENT_NAME",
    "ExpectationMismatchError",
    "ResultSink",
    "RunSummary",
    "Translator",
    "WorkbookResultSink",
    "format_diagnostics",
    "run_test_case",
    "run_test_cases",
]
