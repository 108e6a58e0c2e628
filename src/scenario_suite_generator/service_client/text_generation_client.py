"""Local text-generation service client."""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Any, Protocol

import requests

from scenario_suite_generator.configuration.runtime_settings import ServiceSettings

_LOGGER = logging.getLogger("scenario_suite_generator.service")

TAGS_PATH = "/api/tags"
GENERATE_PATH = "/api/generate"
RESPONSE_FIELD = "response"
SAMPLING_OPTIONS: dict[str, float | int] = {
    "temperature": 0.1,
    "top_p": 0.9,
    "max_tokens": 2000,
}

_CODE_FENCE = re.compile(r"```[A-Za-z0-9_+-]*[ \t]*\r?\n?")
_PACKAGE_DECLARATION = re.compile(r"^\s*package\s+[\w.]+\s*;", re.MULTILINE)


class ServiceError(Exception):
    """Raised when the text-generation service cannot produce usable text."""


class ServiceUnavailableError(ServiceError):
    """Network failure, timeout or non-success HTTP status."""


class MalformedReplyError(ServiceError):
    """Reply was not JSON or did not carry generated text."""


class ServiceState(str, Enum):
    """Availability as known from the last probe."""

    UNKNOWN = "unknown"
    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"


class HttpResponse(Protocol):
    """Subset of the requests response API used by the client."""

    status_code: int

    def json(self) -> Any: ...


class HttpSession(Protocol):
    """Subset of the requests session API used by the client."""

    def get(self, url: str, **kwargs: Any) -> HttpResponse: ...

    def post(self, url: str, **kwargs: Any) -> HttpResponse: ...


class TextGenerationClient:
    """Single request/response client for an Ollama compatible service."""

    def __init__(self, settings: ServiceSettings, session: HttpSession | None = None) -> None:
        self._settings = settings
        self._session: HttpSession = session or requests.Session()
        self._state = ServiceState.UNKNOWN

    @property
    def model(self) -> str:
        return self._settings.model

    @property
    def state(self) -> ServiceState:
        return self._state

    def probe(self) -> bool:
        """Check availability once; failures mark the service unavailable."""
        url = self._url(TAGS_PATH)
        try:
            response = self._session.get(url, timeout=self._settings.probe_timeout_seconds)
            available = response.status_code == 200
            if not available:
                _LOGGER.warning("Service probe %s returned HTTP %s", url, response.status_code)
        except requests.RequestException as exc:
            _LOGGER.warning("Service probe %s failed: %s", url, exc)
            available = False
        self._state = ServiceState.AVAILABLE if available else ServiceState.UNAVAILABLE
        return available

    def generate(self, prompt: str) -> str:
        """Send one generation request and return the raw generated text."""
        payload = {
            "model": self._settings.model,
            "prompt": prompt,
            "stream": False,
            "options": dict(SAMPLING_OPTIONS),
        }
        url = self._url(GENERATE_PATH)
        _LOGGER.debug("Requesting generation from %s with model %s", url, self._settings.model)
        try:
            response = self._session.post(url, json=payload, timeout=self._settings.timeout_seconds)
        except requests.RequestException as exc:
            raise ServiceUnavailableError(f"Generation request failed: {exc}") from exc
        if not 200 <= response.status_code < 300:
            raise ServiceUnavailableError(
                f"Generation request returned HTTP {response.status_code}."
            )
        body = _decode_json(response)
        text = body.get(RESPONSE_FIELD) if isinstance(body, dict) else None
        if not isinstance(text, str) or not text.strip():
            raise MalformedReplyError(
                f"Generation reply has no '{RESPONSE_FIELD}' text."
            )
        return text

    def list_models(self) -> tuple[str, ...]:
        """Return the model names the service reports."""
        url = self._url(TAGS_PATH)
        try:
            response = self._session.get(url, timeout=self._settings.probe_timeout_seconds)
        except requests.RequestException as exc:
            raise ServiceUnavailableError(f"Model listing failed: {exc}") from exc
        if response.status_code != 200:
            raise ServiceUnavailableError(f"Model listing returned HTTP {response.status_code}.")
        body = _decode_json(response)
        models = body.get("models") if isinstance(body, dict) else None
        if not isinstance(models, list):
            raise MalformedReplyError("Model listing reply has no 'models' array.")
        return tuple(
            str(entry["name"]) for entry in models if isinstance(entry, dict) and entry.get("name")
        )

    def _url(self, path: str) -> str:
        return self._settings.base_url.rstrip("/") + path


def sanitize(text: str, *, package: str = "pages") -> str:
    """Strip code fences, trim, and make sure a package declaration leads the source."""
    cleaned = _CODE_FENCE.sub("", text).strip()
    if not cleaned:
        raise MalformedReplyError("Generated text is empty once code fences are removed.")
    if not _PACKAGE_DECLARATION.search(cleaned):
        cleaned = f"package {package};\n\n{cleaned}"
    return cleaned + "\n"


def _decode_json(response: HttpResponse) -> Any:
    try:
        return response.json()
    except ValueError as exc:
        raise MalformedReplyError(f"Reply is not valid JSON: {exc}") from exc
