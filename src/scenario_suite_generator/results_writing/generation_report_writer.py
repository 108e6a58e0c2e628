"""Generation report writer service."""

from __future__ import annotations

from pathlib import Path

from scenario_suite_generator.artifact_emission.emit_outcomes import EmitStatus

from .report_models import ArtifactRecord, GenerationSummary

REPORT_FILENAME = "generation-report.txt"
REPORT_TITLE = "Scenario Suite Generation Report"


def build_generation_report(summary: GenerationSummary) -> str:
    """Render the persisted plain-text report."""
    lines = [
        REPORT_TITLE,
        "=" * len(REPORT_TITLE),
        "",
        f"Generation Method: {summary.method_label}",
        f"Timestamp: {summary.run_start.isoformat(timespec='seconds')}",
        f"Input File: {summary.input_path}",
        f"Output Directory: {summary.output_root}",
        f"Test Cases: {summary.scenario_count}",
        f"Page Classes: {len(summary.page_names)}",
        f"Test Classes: {len(summary.class_names)}",
        "",
        f"Written: {summary.written}",
        f"Skipped: {summary.skipped}",
        f"Failed: {summary.failed}",
        f"Template Fallbacks: {summary.fallbacks}",
        "",
        "Generated Files:",
    ]
    lines.extend(_artifact_line(artifact, summary.output_root) for artifact in summary.artifacts)
    failures = [artifact for artifact in summary.artifacts if artifact.error_message]
    if failures:
        lines.extend(["", "Problems:"])
        for artifact in failures:
            relative = _relative(artifact.path, summary.output_root)
            lines.append(f"- {relative}: {artifact.error_message}")
    lines.append("")
    return "\n".join(lines)


def write_generation_report(summary: GenerationSummary, output_path: Path | str) -> Path:
    """Write the report next to the generated tree, replacing an older one."""
    destination = Path(output_path)
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(build_generation_report(summary), encoding="utf-8")
    return destination


def render_console_summary(summary: GenerationSummary) -> list[str]:
    """Short lines for the terminal."""
    lines = [
        f"Generation method: {summary.method_label}",
        f"Test cases processed: {summary.scenario_count}",
        f"Page classes: {len(summary.page_names)} ({', '.join(summary.page_names) or '-'})",
        f"Test classes: {len(summary.class_names)} ({', '.join(summary.class_names) or '-'})",
        (
            f"Artifacts: {summary.written} written, {summary.skipped} skipped, "
            f"{summary.failed} failed"
        ),
    ]
    if summary.fallbacks:
        lines.append(f"Template fallbacks: {summary.fallbacks}")
    lines.extend(
        f"FAILED {_relative(artifact.path, summary.output_root)}: {artifact.error_message}"
        for artifact in summary.artifacts
        if artifact.emit_status == EmitStatus.FAILED
    )
    return lines


def _artifact_line(artifact: ArtifactRecord, output_root: Path) -> str:
    status = artifact.emit_status.value
    if artifact.generation_status is not None:
        status = f"{status}, {artifact.generation_status.value}"
    return f"- {_relative(artifact.path, output_root)} [{status}]"


def _relative(path: Path, root: Path) -> str:
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return str(path)
