"""CLI smoke tests."""

from click.testing import CliRunner
from scenario_suite_generator.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    for command in ("generate", "generate-template", "generate-config", "check-service"):
        assert command in result.output
    assert "--log-level" in result.output


def test_generate_help_lists_options() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["generate", "-h"])

    assert result.exit_code == 0
    assert "--input" in result.output
    assert "--template-only" in result.output
