"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from scenario_suite_generator.configuration.runtime_settings import Configuration
from scenario_suite_generator.page_inference.page_catalog import PageCatalog
from scenario_suite_generator.results_writing.report_models import GenerationSummary
from scenario_suite_generator.scenario_ingestion.scenario_models import ScenarioSpec


@dataclass(frozen=True)
class RunRequest:
    """Input contract for executing one generation run."""

    input_path: str
    config_path: str | None = None
    output_dir: str | None = None
    template_only: bool = False


@dataclass(frozen=True)
class RunOutcome:
    """Output contract for one completed run."""

    summary: GenerationSummary
    report_path: Path


@dataclass(frozen=True)
class RunArtifacts:
    """Loaded inputs required during run execution."""

    configuration: Configuration
    catalog: PageCatalog
    specs: tuple[ScenarioSpec, ...]
