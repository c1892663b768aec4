"""Blank test-case workbook generation service."""

from __future__ import annotations

from pathlib import Path

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from swift_translator_tester.configuration.runtime_settings import DEFAULT_SHEET_NAME

from .constants import CASE_COLUMNS


def generate_case_workbook(
    output_path: Path | str, sheet_name: str = DEFAULT_SHEET_NAME
) -> Path:
    """Create an empty test-case workbook containing only the header row."""
    output_path = Path(output_path)
    if output_path.exists():
        raise FileExistsError(f"Workbook already exists: {output_path.resolve()}")

    workbook = Workbook()
    sheet = workbook.active
    if sheet is None:
        raise RuntimeError("Workbook active sheet is not available.")
    assert isinstance(sheet, Worksheet)
    sheet.title = sheet_name

    for column_index, name in enumerate(CASE_COLUMNS, start=1):
        cell = sheet.cell(row=1, column=column_index, value=name)
        cell.style = "Headline 4"
        sheet.column_dimensions[get_column_letter(column_index)].width = max(
            12, min(len(name) + 6, 40)
        )
    sheet.freeze_panes = "A2"

    output_path.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output_path)
    return output_path.resolve()
