"""Page class inference from scenario target class names."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from scenario_suite_generator.configuration.runtime_settings import DEFAULT_PAGE_KEYWORDS
from scenario_suite_generator.scenario_ingestion.scenario_models import ScenarioSpec


@dataclass(frozen=True)
class PageCatalog:
    """Keyword to page class table, fixed for the lifetime of a run.

    Keywords are matched case-insensitively as substrings of a scenario's
    target class name. Several keywords may point at the same page.
    """

    keywords: Mapping[str, str] = field(default_factory=lambda: dict(DEFAULT_PAGE_KEYWORDS))

    def __post_init__(self) -> None:
        normalized = {keyword.strip().lower(): page for keyword, page in self.keywords.items()}
        if any(not keyword for keyword in normalized):
            raise ValueError("Page keywords must not be empty.")
        object.__setattr__(self, "keywords", normalized)

    @property
    def page_names(self) -> frozenset[str]:
        return frozenset(self.keywords.values())

    def pages_for(self, class_name: str) -> frozenset[str]:
        """Return every page whose keyword occurs in ``class_name``."""
        lowered = class_name.lower()
        return frozenset(page for keyword, page in self.keywords.items() if keyword in lowered)


def infer_pages(specs: Iterable[ScenarioSpec], catalog: PageCatalog) -> frozenset[str]:
    """Return the distinct page classes required by the given scenarios."""
    pages: set[str] = set()
    for spec in specs:
        pages.update(catalog.pages_for(spec.target_class_name))
    return frozenset(pages)


def group_by_page(
    specs: Iterable[ScenarioSpec], catalog: PageCatalog
) -> dict[str, tuple[ScenarioSpec, ...]]:
    """Group scenarios under each inferred page, pages sorted by name."""
    grouped: dict[str, list[ScenarioSpec]] = {}
    for spec in specs:
        for page_name in catalog.pages_for(spec.target_class_name):
            grouped.setdefault(page_name, []).append(spec)
    return {page_name: tuple(grouped[page_name]) for page_name in sorted(grouped)}


def group_by_class(specs: Iterable[ScenarioSpec]) -> dict[str, tuple[ScenarioSpec, ...]]:
    """Group scenarios by target class name in first-seen order.

    Scenarios without a class name cannot name a test class and are left out.
    """
    grouped: dict[str, list[ScenarioSpec]] = {}
    for spec in specs:
        if not spec.target_class_name:
            continue
        grouped.setdefault(spec.target_class_name, []).append(spec)
    return {class_name: tuple(class_specs) for class_name, class_specs in grouped.items()}
