"""Run execution domain exports."""

from .generation_run_use_case import RunExecutionError, artifact_path, execute_generation_run
from .run_contracts import RunArtifacts, RunOutcome, RunRequest

__all__ = [
    "RunRequest",
    "RunOutcome",
    "RunArtifacts",
    "RunExecutionError",
    "artifact_path",
    "execute_generation_run",
]
