"""Test case ingestion entities."""

from __future__ import annotations

from dataclasses import dataclass

CellValue = object


@dataclass(frozen=True)
class TranslationTestCase:  # pylint: disable=too-many-instance-attributes
    """One workbook row describing a single translation check."""

    row_index: int
    tc_id: CellValue
    name: str
    input_type: str
    input_text: str
    expected: str
    justification: str
    coverage: str


@dataclass(frozen=True)
class TestCaseReadResult:
    """Result of ingesting a test-case workbook."""

    __test__ = False

    sheet_name: str
    testcases: tuple[TranslationTestCase, ...]
