"""Artifact emission entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class EmitStatus(str, Enum):
    """Artifact emission outcome status."""

    WRITTEN = "written"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class EmitResult:
    """Outcome of emitting one artifact."""

    path: Path
    status: EmitStatus
    error_message: str | None = None

    @staticmethod
    def written(path: Path) -> EmitResult:
        return EmitResult(path=path, status=EmitStatus.WRITTEN)

    @staticmethod
    def skipped(path: Path) -> EmitResult:
        return EmitResult(path=path, status=EmitStatus.SKIPPED)

    @staticmethod
    def failed(path: Path, error: Exception) -> EmitResult:
        return EmitResult(path=path, status=EmitStatus.FAILED, error_message=str(error))
