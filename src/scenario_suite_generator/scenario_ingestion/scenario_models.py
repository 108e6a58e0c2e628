"""Scenario ingestion entities."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field

_STEP_SEPARATOR = re.compile(r"[\n\r;]+")
_STEP_NUMBER_PREFIX = re.compile(r"^\d+\.\s*")
_LINE_BREAKS = re.compile(r"[\n\r]+")


@dataclass(frozen=True)
class ScenarioSpec:  # pylint: disable=too-many-instance-attributes
    """Normalized representation of one scenario row."""

    test_id: str
    target_class_name: str
    target_method_name: str
    preconditions: str
    summary: str
    raw_test_data: str
    steps: tuple[str, ...]
    expected_result: str
    row_number: int = 0
    structured_test_data: Mapping[str, str] = field(default_factory=dict)

    def test_data_value(self, key: str) -> str | None:
        """Return a structured test data value, ignoring key case."""
        return self.structured_test_data.get(key.strip().lower())


def parse_steps(steps_text: str) -> tuple[str, ...]:
    """Split a steps cell into ordered steps without their enumeration prefix."""
    if not steps_text or not steps_text.strip():
        return ()
    steps = []
    for part in _STEP_SEPARATOR.split(steps_text):
        step = part.strip()
        if not step:
            continue
        step = _STEP_NUMBER_PREFIX.sub("", step, count=1)
        if step:
            steps.append(step)
    return tuple(steps)


def parse_structured_test_data(raw_test_data: str) -> dict[str, str]:
    """Parse ``Key: value`` lines into a lower-cased key mapping."""
    structured: dict[str, str] = {}
    if not raw_test_data or not raw_test_data.strip():
        return structured
    for line in _LINE_BREAKS.split(raw_test_data):
        key, separator, value = line.strip().partition(":")
        if not separator:
            continue
        structured[key.strip().lower()] = value.strip()
    return structured


def build_scenario_spec(
    *,
    test_id: str,
    target_class_name: str = "",
    target_method_name: str = "",
    preconditions: str = "",
    summary: str = "",
    raw_test_data: str = "",
    steps_text: str = "",
    expected_result: str = "",
    row_number: int = 0,
) -> ScenarioSpec:
    """Build a ScenarioSpec, deriving steps and structured test data from raw text."""
    return ScenarioSpec(
        test_id=test_id,
        target_class_name=target_class_name,
        target_method_name=target_method_name,
        preconditions=preconditions,
        summary=summary,
        raw_test_data=raw_test_data,
        steps=parse_steps(steps_text),
        expected_result=expected_result,
        row_number=row_number,
        structured_test_data=parse_structured_test_data(raw_test_data),
    )
