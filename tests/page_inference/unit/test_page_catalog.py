"""Page inference tests."""

from __future__ import annotations

import pytest
from scenario_suite_generator.page_inference import (
    PageCatalog,
    group_by_class,
    group_by_page,
    infer_pages,
)
from scenario_suite_generator.scenario_ingestion.scenario_models import build_scenario_spec


def _spec(test_id: str, class_name: str):
    return build_scenario_spec(test_id=test_id, target_class_name=class_name)


def test_default_catalog_maps_sample_classes() -> None:
    catalog = PageCatalog()
    specs = [
        _spec("TC_SMIT_01", "PortalAuthenticationTest"),
        _spec("TC_SMIT_02", "PatientSearchTest"),
        _spec("TC_SMIT_03", "PortalNavigationTest"),
    ]

    assert infer_pages(specs, catalog) == {"LoginPage", "PatientSearchPage", "MessagePage"}


def test_matching_is_case_insensitive_and_may_hit_several_pages() -> None:
    catalog = PageCatalog()

    assert catalog.pages_for("LOGINANDMESSAGEFlow") == {"LoginPage", "MessagePage"}
    assert catalog.pages_for("ReportsTest") == frozenset()


def test_infer_pages_is_order_independent() -> None:
    catalog = PageCatalog()
    specs = [_spec("1", "LoginTest"), _spec("2", "MessageTest"), _spec("3", "Other")]

    assert infer_pages(specs, catalog) == infer_pages(list(reversed(specs)), catalog)


def test_custom_keywords_are_normalized() -> None:
    catalog = PageCatalog({" Cart ": "CartPage"})

    assert catalog.keywords == {"cart": "CartPage"}
    assert catalog.pages_for("ShoppingCartTest") == {"CartPage"}
    assert catalog.page_names == {"CartPage"}


def test_empty_keyword_is_rejected() -> None:
    with pytest.raises(ValueError):
        PageCatalog({"  ": "BlankPage"})


def test_group_by_page_sorts_pages_and_keeps_input_order() -> None:
    catalog = PageCatalog()
    specs = [
        _spec("1", "PatientSearchTest"),
        _spec("2", "LoginTest"),
        _spec("3", "PatientHistoryTest"),
    ]

    grouped = group_by_page(specs, catalog)

    assert list(grouped) == ["LoginPage", "PatientSearchPage"]
    assert [spec.test_id for spec in grouped["PatientSearchPage"]] == ["1", "3"]


def test_group_by_class_keeps_first_seen_order_and_drops_blank_names() -> None:
    specs = [_spec("1", "B"), _spec("2", "A"), _spec("3", "B"), _spec("4", "")]

    grouped = group_by_class(specs)

    assert list(grouped) == ["B", "A"]
    assert [spec.test_id for spec in grouped["B"]] == ["1", "3"]
