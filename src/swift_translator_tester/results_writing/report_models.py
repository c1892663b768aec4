"""Results writing entities."""

from __future__ import annotations

from enum import Enum


class ResultStatus(str, Enum):
    """Rendered status in the workbook Status column."""

    PASS = "PASS"
    FAIL = "FAIL"


class WriteOutcome(str, Enum):
    """What a result write did; failures are logged, never raised."""

    WRITTEN = "written"
    SHEET_NOT_FOUND = "sheet_not_found"
    TARGET_NOT_FOUND = "target_not_found"
    FAILED = "failed"
