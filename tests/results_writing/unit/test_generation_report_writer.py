"""Generation report writer tests."""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

from scenario_suite_generator.artifact_emission import EmitStatus
from scenario_suite_generator.code_generation import ArtifactKind, GenerationStatus
from scenario_suite_generator.results_writing import (
    REPORT_FILENAME,
    ArtifactRecord,
    GenerationSummary,
    build_generation_report,
    render_console_summary,
    write_generation_report,
)


def _summary(root: Path) -> GenerationSummary:
    pages_dir = root / "src" / "test" / "java" / "pages"
    return GenerationSummary(
        run_start=datetime(2026, 3, 1, 9, 30, tzinfo=UTC),
        input_path=root / "scenarios.xlsx",
        output_root=root,
        method_label="Local LLM (mistral:latest)",
        scenario_count=3,
        page_names=("LoginPage", "MessagePage"),
        class_names=("PortalAuthenticationTest",),
        artifacts=(
            ArtifactRecord(
                kind=ArtifactKind.PAGE,
                name="LoginPage",
                path=pages_dir / "LoginPage.java",
                emit_status=EmitStatus.WRITTEN,
                generation_status=GenerationStatus.SERVICE,
            ),
            ArtifactRecord(
                kind=ArtifactKind.PAGE,
                name="MessagePage",
                path=pages_dir / "MessagePage.java",
                emit_status=EmitStatus.WRITTEN,
                generation_status=GenerationStatus.FALLBACK_MALFORMED,
                error_message="Generation reply has no 'response' text.",
            ),
            ArtifactRecord(
                kind=ArtifactKind.BASE_PAGE,
                name="BasePage",
                path=pages_dir / "BasePage.java",
                emit_status=EmitStatus.SKIPPED,
            ),
            ArtifactRecord(
                kind=ArtifactKind.TEST_CLASS,
                name="PortalAuthenticationTest",
                path=root / "src" / "test" / "java" / "tests" / "PortalAuthenticationTest.java",
                emit_status=EmitStatus.FAILED,
                generation_status=GenerationStatus.SERVICE,
                error_message="Permission denied",
            ),
        ),
    )


def test_report_lists_method_counts_and_files(tmp_path: Path) -> None:
    report = build_generation_report(_summary(tmp_path))

    assert "Generation Method: Local LLM (mistral:latest)" in report
    assert "Timestamp: 2026-03-01T09:30:00+00:00" in report
    assert "Test Cases: 3" in report
    assert "Page Classes: 2" in report
    assert "Test Classes: 1" in report
    assert "Written: 2" in report
    assert "Skipped: 1" in report
    assert "Failed: 1" in report
    assert "Template Fallbacks: 1" in report
    assert "- src/test/java/pages/LoginPage.java [written, service]" in report
    assert "- src/test/java/pages/BasePage.java [skipped]" in report
    assert "Problems:" in report
    assert "Permission denied" in report


def test_write_generation_report_replaces_previous_report(tmp_path: Path) -> None:
    report_path = tmp_path / REPORT_FILENAME
    report_path.write_text("old report", encoding="utf-8")

    written = write_generation_report(_summary(tmp_path), report_path)

    assert written == report_path
    assert report_path.read_text(encoding="utf-8").startswith("Scenario Suite Generation Report")


def test_console_summary_mentions_failures(tmp_path: Path) -> None:
    lines = render_console_summary(_summary(tmp_path))

    assert lines[0] == "Generation method: Local LLM (mistral:latest)"
    assert "Artifacts: 2 written, 1 skipped, 1 failed" in lines
    assert "Template fallbacks: 1" in lines
    assert lines[-1].startswith("FAILED src/test/java/tests/PortalAuthenticationTest.java")
