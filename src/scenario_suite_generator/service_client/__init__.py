"""Text-generation service client exports."""

from .text_generation_client import (
    MalformedReplyError,
    ServiceError,
    ServiceState,
    ServiceUnavailableError,
    TextGenerationClient,
    sanitize,
)

__all__ = [
    "MalformedReplyError",
    "ServiceError",
    "ServiceState",
    "ServiceUnavailableError",
    "TextGenerationClient",
    "sanitize",
]
