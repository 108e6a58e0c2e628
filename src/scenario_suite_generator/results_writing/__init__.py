"""Results writing domain exports."""

from .generation_report_writer import (
    REPORT_FILENAME,
    build_generation_report,
    render_console_summary,
    write_generation_report,
)
from .report_models import ArtifactRecord, GenerationSummary

__all__ = [
    "ArtifactRecord",
    "GenerationSummary",
    "REPORT_FILENAME",
    "build_generation_report",
    "render_console_summary",
    "write_generation_report",
]
