"""Skip-if-exists artifact writer."""

from __future__ import annotations

import logging
from pathlib import Path

from .emit_outcomes import EmitResult

_LOGGER = logging.getLogger("scenario_suite_generator.emission")


class EmitError(Exception):
    """Raised when an artifact cannot be written."""


class ArtifactEmitter:
    """Writes each artifact once and never overwrites an existing file.

    The existence check and the write are separate steps, so two runs sharing
    an output tree can both write the same file.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def exists(self, path: Path | str) -> bool:
        return Path(path).exists()

    def emit(self, path: Path | str, text: str) -> EmitResult:
        """Write ``text`` to ``path`` unless something is already there."""
        destination = Path(path)
        if destination.exists():
            _LOGGER.info("Skipping existing artifact %s", destination)
            return EmitResult.skipped(destination)
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            destination.write_text(text, encoding=self._encoding)
        except OSError as exc:
            raise EmitError(f"Failed to write {destination}: {exc}") from exc
        _LOGGER.info("Wrote artifact %s", destination)
        return EmitResult.written(destination)
