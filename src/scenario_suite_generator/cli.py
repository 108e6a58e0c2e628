"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from scenario_suite_generator.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    default_configuration,
    load_configuration,
    write_placeholder_configuration,
)
from scenario_suite_generator.results_writing import render_console_summary
from scenario_suite_generator.run_execution import (
    RunExecutionError,
    RunRequest,
    execute_generation_run,
)
from scenario_suite_generator.service_client import ServiceError, TextGenerationClient
from scenario_suite_generator.template_generation import generate_template_workbook

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="scenario-suite-generator")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging threshold for progress and fallback messages",
)
def cli(log_level: str) -> None:
    """Generate Selenium page objects and test classes from scenario spreadsheets."""
    logging.basicConfig(level=log_level.upper(), format=LOG_FORMAT)


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML generator configuration to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="generate-template")
@click.option(
    "--output",
    "output_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the scenario workbook to write",
)
@click.option(
    "--with-examples",
    is_flag=True,
    default=False,
    help="Fill the workbook with sample scenario rows.",
)
def generate_template(output_path: str, with_examples: bool) -> None:
    """Generate a blank scenario workbook with the recognized columns."""
    try:
        resolved_output = generate_template_workbook(output_path, with_examples=with_examples)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="generate")
@click.option(
    "--input",
    "input_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the scenario workbook (.xlsx/.xlsm) or CSV file",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional YAML generator configuration file",
)
@click.option(
    "--output-dir",
    "output_dir",
    required=False,
    type=click.Path(path_type=str),
    help="Optional root directory for the generated suite",
)
@click.option(
    "--template-only",
    is_flag=True,
    default=False,
    help="Skip the text-generation service and render every class from templates.",
)
def generate(
    input_path: str, config_path: str | None, output_dir: str | None, template_only: bool
) -> None:
    """Generate page objects, test classes and the generation report."""
    try:
        outcome = execute_generation_run(
            RunRequest(
                input_path=input_path,
                config_path=config_path,
                output_dir=output_dir,
                template_only=template_only,
            )
        )
    except RunExecutionError as exc:
        raise CliError(str(exc)) from exc
    for line in render_console_summary(outcome.summary):
        click.echo(line)
    click.echo(str(outcome.report_path))


@cli.command(name="check-service")
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional YAML generator configuration file",
)
def check_service(config_path: str | None) -> None:
    """Probe the text-generation service and list its models."""
    try:
        configuration = (
            load_configuration(config_path) if config_path else default_configuration()
        )
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc

    settings = configuration.service
    client = TextGenerationClient(settings)
    if not client.probe():
        raise CliError(f"Text-generation service not reachable at {settings.base_url}")
    try:
        models = client.list_models()
    except ServiceError as exc:
        raise CliError(str(exc)) from exc

    click.echo(f"Service available at {settings.base_url}")
    for model in models:
        marker = "*" if model == settings.model else "-"
        click.echo(f"{marker} {model}")
    if settings.model not in models:
        click.echo(f"Configured model {settings.model} is not installed.", err=True)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), prog_name="scenario-suite-generator", standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
