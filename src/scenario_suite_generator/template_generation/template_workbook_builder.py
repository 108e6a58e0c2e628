"""Excel scenario workbook generation service."""

from __future__ import annotations

from pathlib import Path

from openpyxl import Workbook
from openpyxl.styles import Alignment
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from .constants import (
    EXAMPLE_ROWS,
    EXPECTED_RESULTS,
    SCENARIO_COLUMNS,
    TEMPLATE_SHEET_NAME,
    TEST_CASE_STEPS,
    TEST_DATA,
    TEST_SCENARIO_SUMMARY,
)

_WIDE_COLUMNS = {TEST_SCENARIO_SUMMARY, TEST_DATA, TEST_CASE_STEPS, EXPECTED_RESULTS}


def generate_template_workbook(output_path: Path | str, *, with_examples: bool = False) -> Path:
    """Create an empty scenario workbook with the recognized header row.

    With ``with_examples`` the three sample scenarios are added below the header.
    The destination must not exist yet.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Scenario workbook already exists: {destination.resolve()}")

    workbook = Workbook()
    sheet = workbook.active
    if sheet is None:
        raise RuntimeError("Workbook active sheet is not available.")
    assert isinstance(sheet, Worksheet)
    sheet.title = TEMPLATE_SHEET_NAME

    for column_index, name in enumerate(SCENARIO_COLUMNS, start=1):
        cell = sheet.cell(row=1, column=column_index, value=name)
        cell.style = "Headline 3"
        width = 48 if name in _WIDE_COLUMNS else max(14, len(name) + 4)
        sheet.column_dimensions[get_column_letter(column_index)].width = width
    sheet.freeze_panes = "A2"

    if with_examples:
        _write_example_rows(sheet)

    destination.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(destination)
    return destination.resolve()


def _write_example_rows(sheet: Worksheet) -> None:
    for row_index, example in enumerate(EXAMPLE_ROWS, start=2):
        for column_index, name in enumerate(SCENARIO_COLUMNS, start=1):
            cell = sheet.cell(row=row_index, column=column_index, value=example.get(name, ""))
            cell.alignment = Alignment(wrap_text=True, vertical="top")
