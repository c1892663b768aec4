"""In-place workbook result writer service."""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence
from copy import copy
from dataclasses import dataclass
from pathlib import Path

from openpyxl import load_workbook

from swift_translator_tester.template_generation import (
    ACTUAL_OUTPUT_COLUMN,
    EXPECTED_OUTPUT_COLUMN,
    STATUS_COLUMN,
    TC_ID_COLUMN,
)

from .report_models import ResultStatus, WriteOutcome

logger = logging.getLogger(__name__)

Row = list[object]

_LOCKS_GUARD = threading.Lock()
_PATH_LOCKS: dict[Path, threading.Lock] = {}

_HEADER_FORMATS = ("font", "fill", "border", "alignment", "number_format", "protection")


@dataclass(frozen=True)
class _HeaderLayout:
    formats: dict[str, object]
    width: float | None


class _TargetRowNotFound(Exception):
    """Internal signal that no row carries the requested TC ID."""


def write_test_result(
    workbook_path: Path | str,
    sheet_name: str,
    tc_id: object,
    actual_output: str | None,
    status: ResultStatus | str | None,
) -> WriteOutcome:
    """Record actual output and status on the row whose TC ID equals ``tc_id``.

    The workbook is reloaded from disk on every call and rewritten in full.
    ``Actual Output`` and ``Status`` columns are created on first use right
    after ``Expected output``. Only the first row with a matching TC ID is
    updated. Errors are logged and reported through the returned outcome;
    this function never raises.
    """
    path = Path(workbook_path)
    status_text = status.value if isinstance(status, ResultStatus) else status
    try:
        with _lock_for(path):
            outcome = _write_locked(path, sheet_name, tc_id, actual_output, status_text)
    except Exception as exc:  # pylint: disable=broad-exception-caught
        logger.error("Error writing to workbook for TC %s: %s", tc_id, exc)
        return WriteOutcome.FAILED
    if outcome is WriteOutcome.WRITTEN:
        logger.info("Updated workbook: TC %s - Status: %s", tc_id, status_text)
    return outcome


def _write_locked(
    path: Path,
    sheet_name: str,
    tc_id: object,
    actual_output: str | None,
    status: str | None,
) -> WriteOutcome:
    workbook = load_workbook(path)
    if sheet_name not in workbook.sheetnames:
        logger.error('Sheet "%s" not found in workbook %s', sheet_name, path)
        return WriteOutcome.SHEET_NOT_FOUND

    rows = _sheet_to_rows(workbook[sheet_name])
    if not rows:
        logger.error('Sheet "%s" has no header row', sheet_name)
        return WriteOutcome.TARGET_NOT_FOUND

    actual_index, status_index = _ensure_result_columns(rows)
    try:
        target = _find_target_row(rows, tc_id)
    except _TargetRowNotFound:
        logger.error('Test case with TC ID "%s" not found in workbook', tc_id)
        return WriteOutcome.TARGET_NOT_FOUND

    row = rows[target]
    while len(row) <= max(actual_index, status_index):
        row.append("")
    row[actual_index] = actual_output or ""
    row[status_index] = status or ""

    _replace_sheet(workbook, sheet_name, rows)
    workbook.save(path)
    return WriteOutcome.WRITTEN


def _lock_for(path: Path) -> threading.Lock:
    key = path.resolve()
    with _LOCKS_GUARD:
        return _PATH_LOCKS.setdefault(key, threading.Lock())


def _sheet_to_rows(sheet) -> list[Row]:
    return [
        ["" if value is None else value for value in row]
        for row in sheet.iter_rows(values_only=True)
    ]


def _ensure_result_columns(rows: list[Row]) -> tuple[int, int]:
    header = rows[0]
    actual_index = _column_index(header, ACTUAL_OUTPUT_COLUMN)
    if actual_index is None:
        expected_index = _column_index(header, EXPECTED_OUTPUT_COLUMN)
        actual_index = expected_index + 1 if expected_index is not None else len(header)
        _insert_column(rows, actual_index, ACTUAL_OUTPUT_COLUMN)

    status_index = _column_index(header, STATUS_COLUMN)
    if status_index is None:
        status_index = actual_index + 1
        _insert_column(rows, status_index, STATUS_COLUMN)
    return actual_index, status_index


def _insert_column(rows: list[Row], position: int, name: str) -> None:
    rows[0].insert(position, name)
    for row in rows[1:]:
        if len(row) > position:
            row.insert(position, "")


def _find_target_row(rows: list[Row], tc_id: object) -> int:
    tc_id_index = _column_index(rows[0], TC_ID_COLUMN)
    if tc_id_index is None:
        raise _TargetRowNotFound()
    for index in range(1, len(rows)):
        row = rows[index]
        if tc_id_index >= len(row):
            continue
        value = row[tc_id_index]
        if type(value) is type(tc_id) and value == tc_id:
            return index
    raise _TargetRowNotFound()


def _column_index(header: Sequence[object], name: str) -> int | None:
    for index, value in enumerate(header):
        if value == name:
            return index
    return None


def _replace_sheet(workbook, sheet_name: str, rows: Sequence[Row]) -> None:
    position = workbook.sheetnames.index(sheet_name)
    previous = workbook[sheet_name]
    header_layout = _capture_header_layout(previous)
    freeze_panes = previous.freeze_panes
    was_active = workbook.active is not None and workbook.active.title == sheet_name
    workbook.remove(previous)
    sheet = workbook.create_sheet(sheet_name, position)
    for row in rows:
        sheet.append([None if value == "" else value for value in row])
    _apply_header_layout(sheet, header_layout)
    sheet.freeze_panes = freeze_panes
    if was_active:
        workbook.active = position


def _capture_header_layout(sheet) -> dict[object, _HeaderLayout]:
    layout: dict[object, _HeaderLayout] = {}
    for cell in next(sheet.iter_rows(min_row=1, max_row=1), ()):
        if cell.value is None or cell.value in layout:
            continue
        formats: dict[str, object] = {"style": cell.style}
        formats.update({name: copy(getattr(cell, name)) for name in _HEADER_FORMATS})
        dimension = sheet.column_dimensions.get(cell.column_letter)
        width = dimension.width if dimension is not None and dimension.customWidth else None
        layout[cell.value] = _HeaderLayout(formats=formats, width=width)
    return layout


def _apply_header_layout(sheet, header_layout: dict[object, _HeaderLayout]) -> None:
    # Inserted result columns take the format of the header cell to their left.
    previous_formats: dict[str, object] | None = None
    for cell in next(sheet.iter_rows(min_row=1, max_row=1), ()):
        if cell.value is None:
            continue
        layout = header_layout.get(cell.value)
        formats = layout.formats if layout is not None else previous_formats
        if formats is None:
            continue
        for name, value in formats.items():
            setattr(cell, name, copy(value) if name != "style" else value)
        if layout is not None and layout.width is not None:
            sheet.column_dimensions[cell.column_letter].width = layout.width
        previous_formats = formats
