"""Shared workbook column constants."""

from __future__ import annotations

TC_ID_COLUMN = "TC ID"
NAME_COLUMN = "Test case name"
INPUT_TYPE_COLUMN = "Input length type"
INPUT_COLUMN = "Input"
EXPECTED_OUTPUT_COLUMN = "Expected output"
JUSTIFICATION_COLUMN = "Accuracy justification/Description of issue type"
COVERAGE_COLUMN = "What is covered by the test"

ACTUAL_OUTPUT_COLUMN = "Actual Output"
STATUS_COLUMN = "Status"

CASE_COLUMNS: tuple[str, ...] = (
    TC_ID_COLUMN,
    NAME_COLUMN,
    INPUT_TYPE_COLUMN,
    INPUT_COLUMN,
    EXPECTED_OUTPUT_COLUMN,
    JUSTIFICATION_COLUMN,
    COVERAGE_COLUMN,
)
