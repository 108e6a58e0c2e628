"""Configuration scaffold builder tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from scenario_suite_generator.configuration.config_scaffold_builder import (
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from scenario_suite_generator.configuration.loader import load_configuration


def test_build_placeholder_configuration_contains_all_sections() -> None:
    scaffold = build_placeholder_configuration()

    assert "service:" in scaffold
    assert "output:" in scaffold
    assert "pages:" in scaffold
    assert 'model: "mistral:latest"' in scaffold
    assert 'navigation: "MessagePage"' in scaffold


def test_written_scaffold_loads_as_defaults(tmp_path: Path) -> None:
    output_path = tmp_path / "config.yaml"

    written_path = write_placeholder_configuration(output_path)
    configuration = load_configuration(written_path)

    assert written_path == output_path.resolve()
    assert configuration.service.base_url == "http://localhost:11434"
    assert configuration.output.root_dir == (tmp_path / "generated-framework").resolve()
    assert configuration.page_keywords["patient"] == "PatientSearchPage"


def test_write_placeholder_configuration_fails_when_file_exists(tmp_path: Path) -> None:
    output_path = tmp_path / "config.yaml"
    output_path.write_text("existing", encoding="utf-8")

    with pytest.raises(FileExistsError):
        write_placeholder_configuration(output_path)

    assert output_path.read_text(encoding="utf-8") == "existing"
