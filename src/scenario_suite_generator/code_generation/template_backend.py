"""Deterministic template backend."""

from __future__ import annotations

from typing import Protocol

from .generation_outcomes import ArtifactKind, GenerationRequest, GenerationResult
from .java_templates import (
    render_base_page,
    render_base_test,
    render_page_class,
    render_test_class,
)

TEMPLATE_METHOD_LABEL = "Template-based"


class GenerationBackend(Protocol):
    """Strategy turning a generation request into source text."""

    @property
    def method_label(self) -> str: ...

    def generate(self, request: GenerationRequest) -> GenerationResult: ...


class TemplateBackend:
    """Pure string assembly; the same request always yields the same text."""

    def __init__(self, *, pages_package: str = "pages", tests_package: str = "tests") -> None:
        self._pages_package = pages_package
        self._tests_package = tests_package

    @property
    def method_label(self) -> str:
        return TEMPLATE_METHOD_LABEL

    def generate(self, request: GenerationRequest) -> GenerationResult:
        return GenerationResult.from_template(self.render(request))

    def render(self, request: GenerationRequest) -> str:
        """Return the template text for ``request``."""
        if request.kind is ArtifactKind.PAGE:
            return render_page_class(request.name, request.specs, package=self._pages_package)
        if request.kind is ArtifactKind.TEST_CLASS:
            return render_test_class(
                request.name,
                request.specs,
                request.pages,
                available_pages=request.available_pages,
                package=self._tests_package,
                pages_package=self._pages_package,
            )
        if request.kind is ArtifactKind.BASE_PAGE:
            return render_base_page(package=self._pages_package)
        if request.kind is ArtifactKind.BASE_TEST:
            return render_base_test(package=self._tests_package)
        raise ValueError(f"Unsupported artifact kind: {request.kind}")
