"""Service-backed generation with template fallback."""

from __future__ import annotations

import logging

from scenario_suite_generator.prompt_building import build_class_prompt, build_page_prompt
from scenario_suite_generator.service_client import (
    MalformedReplyError,
    ServiceUnavailableError,
    TextGenerationClient,
    sanitize,
)

from .generation_outcomes import (
    ArtifactKind,
    GenerationRequest,
    GenerationResult,
    GenerationStatus,
)
from .template_backend import GenerationBackend, TemplateBackend

_LOGGER = logging.getLogger("scenario_suite_generator.generation")


class ServiceBackend:
    """Asks the text-generation service for each class; any service failure falls back."""

    def __init__(
        self,
        client: TextGenerationClient,
        fallback: TemplateBackend,
        *,
        pages_package: str = "pages",
        tests_package: str = "tests",
    ) -> None:
        self._client = client
        self._fallback = fallback
        self._pages_package = pages_package
        self._tests_package = tests_package

    @property
    def method_label(self) -> str:
        return f"Local LLM ({self._client.model})"

    def generate(self, request: GenerationRequest) -> GenerationResult:
        if request.kind in (ArtifactKind.BASE_PAGE, ArtifactKind.BASE_TEST):
            return self._fallback.generate(request)

        prompt, package = self._prompt_for(request)
        try:
            text = sanitize(self._client.generate(prompt), package=package)
        except ServiceUnavailableError as exc:
            _LOGGER.warning("Service unavailable for %s, using template: %s", request.name, exc)
            return GenerationResult.fallback(
                self._fallback.render(request), GenerationStatus.FALLBACK_UNAVAILABLE, exc
            )
        except MalformedReplyError as exc:
            _LOGGER.warning("Unusable service reply for %s, using template: %s", request.name, exc)
            return GenerationResult.fallback(
                self._fallback.render(request), GenerationStatus.FALLBACK_MALFORMED, exc
            )
        _LOGGER.info("Generated %s with %s", request.name, self._client.model)
        return GenerationResult.from_service(text)

    def _prompt_for(self, request: GenerationRequest) -> tuple[str, str]:
        if request.kind is ArtifactKind.PAGE:
            prompt = build_page_prompt(request.name, request.specs, package=self._pages_package)
            return prompt, self._pages_package
        prompt = build_class_prompt(
            request.name,
            request.specs,
            package=self._tests_package,
            pages_package=self._pages_package,
        )
        return prompt, self._tests_package


def select_backend(
    client: TextGenerationClient,
    template_backend: TemplateBackend,
    *,
    template_only: bool = False,
    pages_package: str = "pages",
    tests_package: str = "tests",
) -> GenerationBackend:
    """Probe the service once and fix the backend for the whole run."""
    if template_only:
        _LOGGER.info("Template generation requested, skipping service probe")
        return template_backend
    if client.probe():
        _LOGGER.info("Text-generation service available, using model %s", client.model)
        return ServiceBackend(
            client,
            template_backend,
            pages_package=pages_package,
            tests_package=tests_package,
        )
    _LOGGER.warning("Text-generation service not available, using template generation")
    return template_backend
