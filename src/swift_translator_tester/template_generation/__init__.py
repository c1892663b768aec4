"""Template generation exports."""

from .case_workbook_builder import generate_case_workbook
from .constants import (
    ACTUAL_OUTPUT_COLUMN,
    CASE_COLUMNS,
    COVERAGE_COLUMN,
    EXPECTED_OUTPUT_COLUMN,
    INPUT_COLUMN,
    INPUT_TYPE_COLUMN,
    JUSTIFICATION_COLUMN,
    NAME_COLUMN,
    STATUS_COLUMN,
    TC_ID_COLUMN,
)

__all__ = [
    "ACTUAL_OUTPUT_COLUMN",
    "CASE_COLUMNS",
    "COVERAGE_COLUMN",
    "EXPECTED_OUTPUT_COLUMN",
    "INPUT_COLUMN",
    "INPUT_TYPE_COLUMN",
    "JUSTIFICATION_COLUMN",
    "NAME_COLUMN",
    "STATUS_COLUMN",
    "TC_ID_COLUMN",
    "generate_case_workbook",
]
