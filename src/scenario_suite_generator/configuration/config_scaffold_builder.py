"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "config.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Generator configuration for scenario-suite-generator.
# Every key is optional; the values below are the defaults.

service:
  # Local text-generation service (Ollama compatible API).
  base_url: "http://localhost:11434"
  model: "mistral:latest"
  # Availability check runs once per generation run.
  probe_timeout_seconds: 5
  # Upper bound for one generation request.
  timeout_seconds: 120

output:
  # Relative paths resolve against the directory of this file.
  root_dir: "generated-framework"
  source_root: "src/test/java"
  pages_package: "pages"
  tests_package: "tests"

pages:
  # Keyword (matched case-insensitively inside "Automation Class Name") -> page class.
  # navigation intentionally maps to MessagePage; change it if your portal differs.
  login: "LoginPage"
  authentication: "LoginPage"
  patient: "PatientSearchPage"
  message: "MessagePage"
  navigation: "MessagePage"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML generator configuration with defaults and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the generator configuration scaffold to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
