"""Scenario workbook template exports."""

from .constants import EXAMPLE_ROWS, SCENARIO_COLUMNS, TEMPLATE_SHEET_NAME
from .template_workbook_builder import generate_template_workbook

__all__ = [
    "TEMPLATE_SHEET_NAME",
    "SCENARIO_COLUMNS",
    "EXAMPLE_ROWS",
    "generate_template_workbook",
]
