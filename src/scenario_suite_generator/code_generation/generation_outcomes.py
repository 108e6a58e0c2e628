"""Code generation domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from scenario_suite_generator.scenario_ingestion.scenario_models import ScenarioSpec


class ArtifactKind(str, Enum):
    """What a generation request produces."""

    PAGE = "page"
    TEST_CLASS = "test_class"
    BASE_PAGE = "base_page"
    BASE_TEST = "base_test"


class GenerationStatus(str, Enum):
    """How the text of one artifact was obtained."""

    TEMPLATE = "template"
    SERVICE = "service"
    FALLBACK_UNAVAILABLE = "fallback_unavailable"
    FALLBACK_MALFORMED = "fallback_malformed"

    @property
    def is_fallback(self) -> bool:
        return self in (GenerationStatus.FALLBACK_UNAVAILABLE, GenerationStatus.FALLBACK_MALFORMED)


@dataclass(frozen=True)
class GenerationRequest:
    """One synthesis call: a page or test class and the scenarios behind it.

    ``pages`` lists the page classes a test class drives and ``available_pages``
    every page of the run; both are empty for page requests.
    """

    kind: ArtifactKind
    name: str
    specs: tuple[ScenarioSpec, ...] = ()
    pages: tuple[str, ...] = ()
    available_pages: tuple[str, ...] = ()


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of one synthesis call."""

    text: str
    status: GenerationStatus
    error_message: str | None = None

    @staticmethod
    def from_template(text: str) -> GenerationResult:
        return GenerationResult(text=text, status=GenerationStatus.TEMPLATE)

    @staticmethod
    def from_service(text: str) -> GenerationResult:
        return GenerationResult(text=text, status=GenerationStatus.SERVICE)

    @staticmethod
    def fallback(text: str, status: GenerationStatus, error: Exception) -> GenerationResult:
        if not status.is_fallback:
            raise ValueError(f"{status.value} is not a fallback status.")
        return GenerationResult(text=text, status=status, error_message=str(error))
