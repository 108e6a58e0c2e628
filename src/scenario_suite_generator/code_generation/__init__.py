"""Code generation exports."""

from .generation_outcomes import (
    ArtifactKind,
    GenerationRequest,
    GenerationResult,
    GenerationStatus,
)
from .java_templates import VERIFICATION_MARKER, java_identifier
from .service_backend import ServiceBackend, select_backend
from .template_backend import TEMPLATE_METHOD_LABEL, GenerationBackend, TemplateBackend

__all__ = [
    "ArtifactKind",
    "GenerationBackend",
    "GenerationRequest",
    "GenerationResult",
    "GenerationStatus",
    "ServiceBackend",
    "TEMPLATE_METHOD_LABEL",
    "TemplateBackend",
    "VERIFICATION_MARKER",
    "java_identifier",
    "select_backend",
]
