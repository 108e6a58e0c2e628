"""Results writing entities."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from scenario_suite_generator.artifact_emission.emit_outcomes import EmitStatus
from scenario_suite_generator.code_generation.generation_outcomes import (
    ArtifactKind,
    GenerationStatus,
)


@dataclass(frozen=True)
class ArtifactRecord:
    """What happened to one target file during a run.

    ``generation_status`` is None when the file already existed and nothing
    was generated for it.
    """

    kind: ArtifactKind
    name: str
    path: Path
    emit_status: EmitStatus
    generation_status: GenerationStatus | None = None
    error_message: str | None = None


@dataclass(frozen=True)
class GenerationSummary:  # pylint: disable=too-many-instance-attributes
    """Aggregated facts about one completed generation run."""

    run_start: datetime
    input_path: Path
    output_root: Path
    method_label: str
    scenario_count: int
    page_names: tuple[str, ...]
    class_names: tuple[str, ...]
    artifacts: tuple[ArtifactRecord, ...]

    def count(self, status: EmitStatus) -> int:
        return sum(1 for artifact in self.artifacts if artifact.emit_status == status)

    @property
    def written(self) -> int:
        return self.count(EmitStatus.WRITTEN)

    @property
    def skipped(self) -> int:
        return self.count(EmitStatus.SKIPPED)

    @property
    def failed(self) -> int:
        return self.count(EmitStatus.FAILED)

    @property
    def fallbacks(self) -> int:
        return sum(
            1
            for artifact in self.artifacts
            if artifact.generation_status is not None and artifact.generation_status.is_fallback
        )
