"""Configuration loader service."""

from __future__ import annotations

import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import (
    DEFAULT_GENERATION_TIMEOUT_SECONDS,
    DEFAULT_OUTPUT_ROOT,
    DEFAULT_PAGE_KEYWORDS,
    DEFAULT_PAGES_PACKAGE,
    DEFAULT_PROBE_TIMEOUT_SECONDS,
    DEFAULT_SERVICE_BASE_URL,
    DEFAULT_SERVICE_MODEL,
    DEFAULT_SOURCE_ROOT,
    DEFAULT_TESTS_PACKAGE,
    Configuration,
    OutputSettings,
    ServiceSettings,
)

JAVA_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")
JAVA_PACKAGE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)*$")


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def default_configuration(base_path: Path | None = None) -> Configuration:
    """Return the configuration used when no file is given."""
    root = Path(DEFAULT_OUTPUT_ROOT)
    if base_path is not None:
        root = (base_path / root).resolve()
    return Configuration(path=None, output=OutputSettings(root_dir=root))


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Failed to read configuration file {path}: {exc}") from exc

    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    service = _parse_service_section(parsed.get("service"))
    output = _parse_output_section(parsed.get("output"), path.parent)
    page_keywords = _parse_pages_section(parsed.get("pages"))

    return Configuration(
        path=path,
        service=service,
        output=output,
        page_keywords=page_keywords,
    )


def _parse_service_section(value: Any) -> ServiceSettings:
    section = _optional_mapping(value, "service")
    base_url = _require_non_empty_string(
        section.get("base_url", DEFAULT_SERVICE_BASE_URL), "service.base_url"
    )
    if not base_url.startswith(("http://", "https://")):
        raise ConfigurationError("service.base_url must start with http:// or https://.")
    model = _require_non_empty_string(section.get("model", DEFAULT_SERVICE_MODEL), "service.model")
    probe_timeout = _require_positive_int(
        section.get("probe_timeout_seconds", DEFAULT_PROBE_TIMEOUT_SECONDS),
        "service.probe_timeout_seconds",
    )
    timeout_seconds = _require_positive_int(
        section.get("timeout_seconds", DEFAULT_GENERATION_TIMEOUT_SECONDS),
        "service.timeout_seconds",
    )
    return ServiceSettings(
        base_url=base_url.rstrip("/"),
        model=model,
        probe_timeout_seconds=probe_timeout,
        timeout_seconds=timeout_seconds,
    )


def _parse_output_section(value: Any, base_path: Path) -> OutputSettings:
    section = _optional_mapping(value, "output")
    root_dir = _require_non_empty_string(
        section.get("root_dir", DEFAULT_OUTPUT_ROOT), "output.root_dir"
    )
    source_root = _require_non_empty_string(
        section.get("source_root", DEFAULT_SOURCE_ROOT), "output.source_root"
    )
    pages_package = _require_package_name(
        section.get("pages_package", DEFAULT_PAGES_PACKAGE), "output.pages_package"
    )
    tests_package = _require_package_name(
        section.get("tests_package", DEFAULT_TESTS_PACKAGE), "output.tests_package"
    )
    if pages_package == tests_package:
        raise ConfigurationError("output.pages_package and output.tests_package must differ.")
    return OutputSettings(
        root_dir=_resolve_path(base_path, root_dir),
        source_root=source_root,
        pages_package=pages_package,
        tests_package=tests_package,
    )


def _parse_pages_section(value: Any) -> dict[str, str]:
    if value is None:
        return dict(DEFAULT_PAGE_KEYWORDS)
    if not isinstance(value, Mapping):
        raise ConfigurationError("pages must be a mapping of keyword to page class name.")
    keywords: dict[str, str] = {}
    for raw_keyword, raw_page in value.items():
        keyword = _require_non_empty_string(raw_keyword, "pages keyword").lower()
        page_name = _require_non_empty_string(raw_page, f"pages.{keyword}")
        if not JAVA_IDENTIFIER.fullmatch(page_name):
            raise ConfigurationError(
                f"pages.{keyword} '{page_name}' is not a valid class name."
            )
        keywords[keyword] = page_name
    if not keywords:
        raise ConfigurationError("pages must contain at least one keyword.")
    return keywords


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _require_package_name(value: Any, field_name: str) -> str:
    package = _require_non_empty_string(value, field_name)
    if not JAVA_PACKAGE.fullmatch(package):
        raise ConfigurationError(f"{field_name} '{package}' is not a valid package name.")
    return package


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
