"""Artifact emission exports."""

from .emit_outcomes import EmitResult, EmitStatus
from .file_emitter import ArtifactEmitter, EmitError

__all__ = [
    "ArtifactEmitter",
    "EmitError",
    "EmitResult",
    "EmitStatus",
]
