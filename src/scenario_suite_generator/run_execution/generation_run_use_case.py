"""Generation run use-case service."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import replace
from datetime import UTC, datetime
from pathlib import Path

from scenario_suite_generator.artifact_emission import (
    ArtifactEmitter,
    EmitError,
    EmitResult,
    EmitStatus,
)
from scenario_suite_generator.code_generation import (
    ArtifactKind,
    GenerationBackend,
    GenerationRequest,
    GenerationStatus,
    TemplateBackend,
    java_identifier,
    select_backend,
)
from scenario_suite_generator.configuration import (
    Configuration,
    ConfigurationError,
    default_configuration,
    load_configuration,
)
from scenario_suite_generator.configuration.runtime_settings import OutputSettings, ServiceSettings
from scenario_suite_generator.page_inference import (
    PageCatalog,
    group_by_class,
    group_by_page,
    infer_pages,
)
from scenario_suite_generator.results_writing import (
    REPORT_FILENAME,
    ArtifactRecord,
    GenerationSummary,
    write_generation_report,
)
from scenario_suite_generator.scenario_ingestion import (
    IngestionError,
    ScenarioSpec,
    load_scenarios,
)
from scenario_suite_generator.service_client import TextGenerationClient

from .run_contracts import RunArtifacts, RunOutcome, RunRequest

_LOGGER = logging.getLogger("scenario_suite_generator.run")

JAVA_SUFFIX = ".java"
PAGE_FALLBACK_NAME = "GeneratedPage"
TEST_FALLBACK_NAME = "GeneratedTest"
BASE_PAGE_NAME = "BasePage"
BASE_TEST_NAME = "BaseTest"


class RunExecutionError(Exception):
    """Raised when a generation run cannot be completed."""


def execute_generation_run(
    request: RunRequest,
    *,
    client_factory: Callable[[ServiceSettings], TextGenerationClient] | None = None,
    emitter: ArtifactEmitter | None = None,
) -> RunOutcome:
    """Execute one full generation run and return its outcome.

    Steps run strictly in sequence: load inputs, infer pages, pick the backend
    once, then generate and emit one artifact at a time.
    """
    resolved_client_factory = client_factory or TextGenerationClient
    resolved_emitter = emitter or ArtifactEmitter()

    artifacts = _load_run_artifacts(request)
    configuration = artifacts.configuration
    output = configuration.output
    run_start = datetime.now(UTC)

    page_names = tuple(sorted(infer_pages(artifacts.specs, artifacts.catalog)))
    pages_by_name = group_by_page(artifacts.specs, artifacts.catalog)
    specs_by_class = group_by_class(artifacts.specs)

    template_backend = TemplateBackend(
        pages_package=output.pages_package, tests_package=output.tests_package
    )
    backend = select_backend(
        resolved_client_factory(configuration.service),
        template_backend,
        template_only=request.template_only,
        pages_package=output.pages_package,
        tests_package=output.tests_package,
    )

    generation_requests = [
        GenerationRequest(kind=ArtifactKind.BASE_PAGE, name=BASE_PAGE_NAME),
        GenerationRequest(kind=ArtifactKind.BASE_TEST, name=BASE_TEST_NAME),
    ]
    generation_requests.extend(
        GenerationRequest(kind=ArtifactKind.PAGE, name=page_name, specs=pages_by_name[page_name])
        for page_name in page_names
    )
    class_requests = _test_class_requests(specs_by_class, artifacts.catalog, page_names)
    generation_requests.extend(class_requests)

    records = tuple(
        _produce_artifact(generation_request, backend, resolved_emitter, output)
        for generation_request in generation_requests
    )

    summary = GenerationSummary(
        run_start=run_start,
        input_path=Path(request.input_path).resolve(),
        output_root=output.root_dir.resolve(),
        method_label=backend.method_label,
        scenario_count=len(artifacts.specs),
        page_names=page_names,
        class_names=tuple(class_request.name for class_request in class_requests),
        artifacts=records,
    )
    report_path = output.root_dir / REPORT_FILENAME
    try:
        write_generation_report(summary, report_path)
    except OSError as exc:
        raise RunExecutionError(f"Failed to write generation report: {exc}") from exc
    return RunOutcome(summary=summary, report_path=report_path.resolve())


def artifact_path(request: GenerationRequest, output: OutputSettings) -> Path:
    """Target file of a generation request inside the output tree."""
    if request.kind in (ArtifactKind.PAGE, ArtifactKind.BASE_PAGE):
        directory = output.pages_dir
        fallback = PAGE_FALLBACK_NAME
    else:
        directory = output.tests_dir
        fallback = TEST_FALLBACK_NAME
    return directory / f"{java_identifier(request.name, fallback)}{JAVA_SUFFIX}"


def _load_run_artifacts(request: RunRequest) -> RunArtifacts:
    try:
        configuration = (
            load_configuration(request.config_path)
            if request.config_path
            else default_configuration()
        )
        configuration = _resolve_output_root(configuration, request.output_dir)
        catalog = PageCatalog(configuration.page_keywords)
        specs = load_scenarios(request.input_path)
    except (ConfigurationError, IngestionError, ValueError) as exc:
        raise RunExecutionError(str(exc)) from exc
    return RunArtifacts(configuration=configuration, catalog=catalog, specs=specs)


def _resolve_output_root(configuration: Configuration, output_dir: str | None) -> Configuration:
    root_dir = Path(output_dir) if output_dir else configuration.output.root_dir
    output = replace(configuration.output, root_dir=root_dir.resolve())
    return replace(configuration, output=output)


def _produce_artifact(
    request: GenerationRequest,
    backend: GenerationBackend,
    emitter: ArtifactEmitter,
    output: OutputSettings,
) -> ArtifactRecord:
    path = artifact_path(request, output)
    if emitter.exists(path):
        _LOGGER.info("%s already exists, not regenerating", path)
        return _record(request, EmitResult.skipped(path))

    result = backend.generate(request)
    try:
        emitted = emitter.emit(path, result.text)
    except EmitError as exc:
        _LOGGER.error("Could not emit %s: %s", path, exc)
        emitted = EmitResult.failed(path, exc)
    return _record(
        request,
        emitted,
        generation_status=result.status,
        error_message=emitted.error_message or result.error_message,
    )


def _record(
    request: GenerationRequest,
    emitted: EmitResult,
    *,
    generation_status: GenerationStatus | None = None,
    error_message: str | None = None,
) -> ArtifactRecord:
    return ArtifactRecord(
        kind=request.kind,
        name=request.name,
        path=emitted.path,
        emit_status=emitted.status,
        generation_status=generation_status if emitted.status != EmitStatus.SKIPPED else None,
        error_message=error_message,
    )


def _test_class_requests(
    specs_by_class: Mapping[str, tuple[ScenarioSpec, ...]],
    catalog: PageCatalog,
    page_names: tuple[str, ...],
) -> list[GenerationRequest]:
    """One request per target file; class names mapping to the same file are merged."""
    names_by_file: dict[str, list[str]] = {}
    for class_name in specs_by_class:
        file_name = java_identifier(class_name, TEST_FALLBACK_NAME)
        names_by_file.setdefault(file_name, []).append(class_name)

    requests: list[GenerationRequest] = []
    for file_name, class_names in names_by_file.items():
        if len(class_names) > 1:
            _LOGGER.warning(
                "Test classes %s share %s%s, merging their scenarios",
                ", ".join(repr(name) for name in class_names),
                file_name,
                JAVA_SUFFIX,
            )
        pages: set[str] = set()
        for class_name in class_names:
            pages.update(catalog.pages_for(class_name))
        requests.append(
            GenerationRequest(
                kind=ArtifactKind.TEST_CLASS,
                name=class_names[0],
                specs=tuple(spec for name in class_names for spec in specs_by_class[name]),
                pages=tuple(sorted(pages)),
                available_pages=page_names,
            )
        )
    return requests
