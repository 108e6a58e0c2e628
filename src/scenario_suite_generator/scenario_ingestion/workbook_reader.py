"""Scenario workbook ingestion service."""

from __future__ import annotations

import csv
import logging
from collections.abc import Iterable, Mapping, Sequence
from datetime import date, datetime, time
from pathlib import Path
from zipfile import BadZipFile

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from scenario_suite_generator.template_generation import TEMPLATE_SHEET_NAME
from scenario_suite_generator.template_generation.constants import (
    AUTOMATION_CLASS_NAME,
    AUTOMATION_METHOD_NAME,
    EXPECTED_RESULTS,
    PRE_CONDITIONS,
    SCENARIO_COLUMNS,
    TEST_CASE_ID,
    TEST_CASE_STEPS,
    TEST_DATA,
    TEST_SCENARIO_SUMMARY,
)

from .scenario_models import ScenarioSpec, build_scenario_spec

_LOGGER = logging.getLogger("scenario_suite_generator.ingestion")

WORKBOOK_SUFFIXES = frozenset({".xlsx", ".xlsm"})
CSV_SUFFIXES = frozenset({".csv"})

RowValues = Sequence[object]


class IngestionError(Exception):
    """Raised when the scenario source cannot be opened or parsed."""


def load_scenarios(source_path: Path | str) -> tuple[ScenarioSpec, ...]:
    """Read the scenario table and return one ScenarioSpec per row with an identifier.

    The first row holds the headers. Columns may appear in any order and unknown
    columns are ignored; a missing recognized column reads as empty text.
    """
    path = Path(source_path)
    if not path.exists():
        raise IngestionError(f"Scenario file not found: {path}")
    if not path.is_file():
        raise IngestionError(f"Scenario source is not a file: {path}")

    suffix = path.suffix.lower()
    if suffix in WORKBOOK_SUFFIXES:
        rows = _read_workbook_rows(path)
    elif suffix in CSV_SUFFIXES:
        rows = _read_csv_rows(path)
    else:
        raise IngestionError(
            f"Unsupported scenario file type '{path.suffix}'. Use .xlsx, .xlsm or .csv."
        )

    if not rows:
        raise IngestionError(f"Scenario file has no header row: {path}")
    header_map = build_header_map(rows[0])
    missing = [name for name in SCENARIO_COLUMNS if name not in header_map]
    if missing:
        _LOGGER.warning("Scenario file %s lacks columns: %s", path, ", ".join(missing))

    specs = tuple(_parse_rows(rows[1:], header_map))
    _LOGGER.info("Loaded %d scenarios from %s", len(specs), path)
    return specs


def build_header_map(header_row: RowValues) -> dict[str, int]:
    """Map trimmed header names to zero-based column indexes."""
    header_map: dict[str, int] = {}
    for index, value in enumerate(header_row):
        name = cell_text(value)
        if name and name not in header_map:
            header_map[name] = index
    return header_map


def cell_text(value: object) -> str:
    """Render a cell value as trimmed text."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, datetime | date | time):
        return value.isoformat()
    return str(value).strip()


def _read_workbook_rows(path: Path) -> list[RowValues]:
    try:
        workbook = load_workbook(path, read_only=True, data_only=True)
    except (InvalidFileException, BadZipFile, KeyError, OSError, ValueError) as exc:
        raise IngestionError(f"Failed to open scenario workbook {path}: {exc}") from exc
    try:
        sheet = (
            workbook[TEMPLATE_SHEET_NAME]
            if TEMPLATE_SHEET_NAME in workbook.sheetnames
            else workbook.worksheets[0]
        )
        return [tuple(row) for row in sheet.iter_rows(values_only=True)]
    except (IndexError, KeyError, ValueError) as exc:
        raise IngestionError(f"Failed to read scenario workbook {path}: {exc}") from exc
    finally:
        workbook.close()


def _read_csv_rows(path: Path) -> list[RowValues]:
    try:
        with path.open(encoding="utf-8-sig", newline="") as handle:
            return [tuple(row) for row in csv.reader(handle)]
    except (csv.Error, UnicodeDecodeError, OSError) as exc:
        raise IngestionError(f"Failed to read scenario CSV {path}: {exc}") from exc


def _parse_rows(rows: Iterable[RowValues], header_map: Mapping[str, int]) -> list[ScenarioSpec]:
    specs: list[ScenarioSpec] = []
    for row_number, row in enumerate(rows, start=2):
        test_id = _column_value(row, header_map, TEST_CASE_ID)
        if not test_id:
            continue
        specs.append(
            build_scenario_spec(
                test_id=test_id,
                target_class_name=_column_value(row, header_map, AUTOMATION_CLASS_NAME),
                target_method_name=_column_value(row, header_map, AUTOMATION_METHOD_NAME),
                preconditions=_column_value(row, header_map, PRE_CONDITIONS),
                summary=_column_value(row, header_map, TEST_SCENARIO_SUMMARY),
                raw_test_data=_column_value(row, header_map, TEST_DATA),
                steps_text=_column_value(row, header_map, TEST_CASE_STEPS),
                expected_result=_column_value(row, header_map, EXPECTED_RESULTS),
                row_number=row_number,
            )
        )
    return specs


def _column_value(row: RowValues, header_map: Mapping[str, int], column_name: str) -> str:
    index = header_map.get(column_name)
    if index is None or index >= len(row):
        return ""
    return cell_text(row[index])
