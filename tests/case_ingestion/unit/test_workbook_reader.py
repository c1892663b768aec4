"""Test case ingestion tests."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pytest
from openpyxl import Workbook
from swift_translator_tester.case_ingestion.testcase_models import TranslationTestCase
from swift_translator_tester.case_ingestion.workbook_reader import (
    CaseIngestionError,
    SheetNotFoundError,
    read_test_cases,
)
from swift_translator_tester.template_generation import CASE_COLUMNS


def _write_workbook(
    path: Path,
    rows: Sequence[Sequence[object]],
    *,
    header: Sequence[str] = CASE_COLUMNS,
    sheet_name: str = "Test Cases",
) -> Path:
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = sheet_name
    sheet.append(list(header))
    for row in rows:
        sheet.append(list(row))
    workbook.save(path)
    return path


def test_reads_rows_in_order_with_row_index(tmp_path: Path) -> None:
    path = _write_workbook(
        tmp_path / "cases.xlsx",
        [
            (
                "Pos_Fun_0001",
                "Simple sentence",
                "S",
                "mama gedara yanawa",
                "මම ගෙදර යනවා",
                "Correct",
                "Daily language",
            ),
            ("Neg_Fun_0001", "Joined words", "M", "mamagedarayanawa", "මම ගෙදර යනවා"),
        ],
    )

    result = read_test_cases(path, "Test Cases")

    assert result.sheet_name == "Test Cases"
    assert len(result.testcases) == 2
    first, second = result.testcases
    assert isinstance(first, TranslationTestCase)
    assert first.row_index == 2
    assert first.tc_id == "Pos_Fun_0001"
    assert first.name == "Simple sentence"
    assert first.input_type == "S"
    assert first.input_text == "mama gedara yanawa"
    assert first.expected == "මම ගෙදර යනවා"
    assert first.justification == "Correct"
    assert first.coverage == "Daily language"
    assert second.row_index == 3
    assert second.tc_id == "Neg_Fun_0001"


def test_blank_cells_default_to_empty_string(tmp_path: Path) -> None:
    path = _write_workbook(tmp_path / "cases.xlsx", [("TC-1", None, None, "input")])

    case = read_test_cases(path).testcases[0]

    assert case.name == ""
    assert case.input_type == ""
    assert case.expected == ""
    assert case.justification == ""
    assert case.coverage == ""


def test_missing_columns_default_to_empty_string(tmp_path: Path) -> None:
    path = _write_workbook(
        tmp_path / "cases.xlsx",
        [("TC-1", "hello")],
        header=("TC ID", "Input"),
    )

    case = read_test_cases(path).testcases[0]

    assert case.input_text == "hello"
    assert case.expected == ""
    assert case.name == ""


def test_numeric_tc_id_is_kept_as_cell_value(tmp_path: Path) -> None:
    path = _write_workbook(tmp_path / "cases.xlsx", [(7, "name", "S", 42, "42")])

    case = read_test_cases(path).testcases[0]

    assert case.tc_id == 7
    assert isinstance(case.tc_id, int)
    assert case.input_text == "42"


def test_fully_blank_rows_are_skipped(tmp_path: Path) -> None:
    path = _write_workbook(
        tmp_path / "cases.xlsx",
        [("TC-1", "a"), (None, None), ("TC-2", "b")],
    )

    result = read_test_cases(path)

    assert [case.tc_id for case in result.testcases] == ["TC-1", "TC-2"]
    assert [case.row_index for case in result.testcases] == [2, 3]


def test_reading_does_not_modify_the_file(tmp_path: Path) -> None:
    path = _write_workbook(tmp_path / "cases.xlsx", [("TC-1", "a")])
    before = path.read_bytes()

    read_test_cases(path)

    assert path.read_bytes() == before


def test_missing_sheet_raises_sheet_not_found(tmp_path: Path) -> None:
    path = _write_workbook(tmp_path / "cases.xlsx", [("TC-1", "a")], sheet_name="Other")

    with pytest.raises(SheetNotFoundError, match='Sheet "Test Cases" not found'):
        read_test_cases(path, "Test Cases")


def test_missing_workbook_raises(tmp_path: Path) -> None:
    with pytest.raises(CaseIngestionError, match="Workbook file not found"):
        read_test_cases(tmp_path / "missing.xlsx")


def test_unsupported_file_format_raises_ingestion_error(tmp_path: Path) -> None:
    path = tmp_path / "cases.csv"
    path.write_text("TC ID,Input\nPos_Fun_0001,mama\n", encoding="utf-8")

    with pytest.raises(CaseIngestionError, match="could not be opened") as exc_info:
        read_test_cases(path)

    assert exc_info.value.__cause__ is not None


def test_corrupt_workbook_raises_ingestion_error(tmp_path: Path) -> None:
    path = tmp_path / "cases.xlsx"
    path.write_bytes(b"not a zip archive")

    with pytest.raises(CaseIngestionError, match="could not be opened"):
        read_test_cases(path)


def test_missing_tc_id_header_raises(tmp_path: Path) -> None:
    path = _write_workbook(tmp_path / "cases.xlsx", [("a",)], header=("Input",))

    with pytest.raises(CaseIngestionError, match='missing the "TC ID" column'):
        read_test_cases(path)


def test_header_only_sheet_yields_no_cases(tmp_path: Path) -> None:
    path = _write_workbook(tmp_path / "cases.xlsx", [])

    assert read_test_cases(path).testcases == ()
