"""Configuration domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_SERVICE_BASE_URL = "http://localhost:11434"
DEFAULT_SERVICE_MODEL = "mistral:latest"
DEFAULT_PROBE_TIMEOUT_SECONDS = 5
DEFAULT_GENERATION_TIMEOUT_SECONDS = 120

DEFAULT_OUTPUT_ROOT = "generated-framework"
DEFAULT_SOURCE_ROOT = "src/test/java"
DEFAULT_PAGES_PACKAGE = "pages"
DEFAULT_TESTS_PACKAGE = "tests"

DEFAULT_PAGE_KEYWORDS: Mapping[str, str] = {
    "login": "LoginPage",
    "authentication": "LoginPage",
    "patient": "PatientSearchPage",
    "message": "MessagePage",
    "navigation": "MessagePage",
}


@dataclass(frozen=True)
class ServiceSettings:
    """Local text-generation service connectivity."""

    base_url: str = DEFAULT_SERVICE_BASE_URL
    model: str = DEFAULT_SERVICE_MODEL
    probe_timeout_seconds: int = DEFAULT_PROBE_TIMEOUT_SECONDS
    timeout_seconds: int = DEFAULT_GENERATION_TIMEOUT_SECONDS


@dataclass(frozen=True)
class OutputSettings:
    """Generated suite layout."""

    root_dir: Path = Path(DEFAULT_OUTPUT_ROOT)
    source_root: str = DEFAULT_SOURCE_ROOT
    pages_package: str = DEFAULT_PAGES_PACKAGE
    tests_package: str = DEFAULT_TESTS_PACKAGE

    @property
    def pages_dir(self) -> Path:
        return self.root_dir / self.source_root / self.pages_package.replace(".", "/")

    @property
    def tests_dir(self) -> Path:
        return self.root_dir / self.source_root / self.tests_package.replace(".", "/")


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path | None = None
    service: ServiceSettings = field(default_factory=ServiceSettings)
    output: OutputSettings = field(default_factory=OutputSettings)
    page_keywords: Mapping[str, str] = field(
        default_factory=lambda: dict(DEFAULT_PAGE_KEYWORDS)
    )
