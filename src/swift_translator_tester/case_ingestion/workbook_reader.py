"""Test case ingestion service."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from zipfile import BadZipFile

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from swift_translator_tester.configuration.runtime_settings import DEFAULT_SHEET_NAME
from swift_translator_tester.template_generation import (
    COVERAGE_COLUMN,
    EXPECTED_OUTPUT_COLUMN,
    INPUT_COLUMN,
    INPUT_TYPE_COLUMN,
    JUSTIFICATION_COLUMN,
    NAME_COLUMN,
    TC_ID_COLUMN,
)

from .testcase_models import CellValue, TestCaseReadResult, TranslationTestCase

logger = logging.getLogger(__name__)


class CaseIngestionError(Exception):
    """Raised when the test-case workbook cannot be ingested."""


class SheetNotFoundError(CaseIngestionError):
    """Raised when the named sheet is absent from the workbook."""


def read_test_cases(
    workbook_path: Path | str, sheet_name: str = DEFAULT_SHEET_NAME
) -> TestCaseReadResult:
    """Read the named sheet and return its rows as test cases in sheet order.

    The header is taken from row 1. Fully blank rows are skipped and every
    blank cell is read as an empty string. ``row_index`` is the case's position
    among the loaded rows plus two (one for 1-based numbering, one for the
    header). The workbook file is never modified.
    """
    path = Path(workbook_path)
    if not path.exists():
        raise CaseIngestionError(f"Workbook file not found: {path}")

    try:
        workbook = load_workbook(path, data_only=True, read_only=True)
    except (InvalidFileException, BadZipFile, KeyError, OSError) as exc:
        raise CaseIngestionError(f"Workbook {path} could not be opened: {exc}") from exc
    try:
        if sheet_name not in workbook.sheetnames:
            raise SheetNotFoundError(f'Sheet "{sheet_name}" not found in workbook {path}')
        rows = list(workbook[sheet_name].iter_rows(values_only=True))
    finally:
        workbook.close()

    if not rows:
        raise CaseIngestionError(f'Sheet "{sheet_name}" has no header row.')
    header_map = _build_header_map(rows[0])
    if TC_ID_COLUMN not in header_map:
        raise CaseIngestionError(f'Sheet "{sheet_name}" is missing the "{TC_ID_COLUMN}" column.')

    records = [
        _row_to_record(row, header_map) for row in rows[1:] if not _row_is_empty(row)
    ]
    testcases = tuple(
        _build_testcase(index + 2, record) for index, record in enumerate(records)
    )
    logger.info("Loaded %d test cases from %s [%s]", len(testcases), path, sheet_name)
    return TestCaseReadResult(sheet_name=sheet_name, testcases=testcases)


def _build_header_map(header_row: Sequence[CellValue]) -> dict[str, int]:
    header_map: dict[str, int] = {}
    for index, value in enumerate(header_row):
        if value is None:
            continue
        header_map.setdefault(str(value), index)
    return header_map


def _row_to_record(
    row: Sequence[CellValue], header_map: Mapping[str, int]
) -> dict[str, CellValue]:
    record: dict[str, CellValue] = {}
    for name, index in header_map.items():
        value = row[index] if index < len(row) else None
        record[name] = "" if value is None else value
    return record


def _row_is_empty(row: Sequence[CellValue]) -> bool:
    return all(value is None or value == "" for value in row)


def _build_testcase(row_index: int, record: Mapping[str, CellValue]) -> TranslationTestCase:
    return TranslationTestCase(
        row_index=row_index,
        tc_id=record.get(TC_ID_COLUMN, ""),
        name=_cell_text(record.get(NAME_COLUMN)),
        input_type=_cell_text(record.get(INPUT_TYPE_COLUMN)),
        input_text=_cell_text(record.get(INPUT_COLUMN)),
        expected=_cell_text(record.get(EXPECTED_OUTPUT_COLUMN)),
        justification=_cell_text(record.get(JUSTIFICATION_COLUMN)),
        coverage=_cell_text(record.get(COVERAGE_COLUMN)),
    )


def _cell_text(value: CellValue) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)
