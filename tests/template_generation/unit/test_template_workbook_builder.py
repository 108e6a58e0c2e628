"""Scenario workbook template tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from openpyxl import load_workbook
from scenario_suite_generator.template_generation import (
    SCENARIO_COLUMNS,
    TEMPLATE_SHEET_NAME,
    generate_template_workbook,
)


def test_blank_template_has_header_row_only(tmp_path: Path) -> None:
    output_path = generate_template_workbook(tmp_path / "scenarios.xlsx")

    workbook = load_workbook(output_path)
    sheet = workbook[TEMPLATE_SHEET_NAME]
    header = tuple(cell.value for cell in sheet[1])

    assert header == SCENARIO_COLUMNS
    assert sheet.max_row == 1
    assert sheet.freeze_panes == "A2"


def test_template_with_examples_contains_sample_rows(tmp_path: Path) -> None:
    output_path = generate_template_workbook(tmp_path / "scenarios.xlsx", with_examples=True)

    sheet = load_workbook(output_path)[TEMPLATE_SHEET_NAME]
    ids = [sheet.cell(row=row, column=1).value for row in range(2, sheet.max_row + 1)]

    assert ids == ["TC_SMIT_01", "TC_SMIT_02", "TC_SMIT_03"]


def test_existing_destination_is_not_overwritten(tmp_path: Path) -> None:
    output_path = tmp_path / "scenarios.xlsx"
    output_path.write_bytes(b"keep")

    with pytest.raises(FileExistsError):
        generate_template_workbook(output_path)

    assert output_path.read_bytes() == b"keep"
