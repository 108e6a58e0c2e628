"""Scenario ingestion exports."""

from .scenario_models import (
    ScenarioSpec,
    build_scenario_spec,
    parse_steps,
    parse_structured_test_data,
)
from .workbook_reader import IngestionError, load_scenarios

__all__ = [
    "ScenarioSpec",
    "IngestionError",
    "build_scenario_spec",
    "load_scenarios",
    "parse_steps",
    "parse_structured_test_data",
]
