"""Prompt builder tests."""

from __future__ import annotations

from scenario_suite_generator.prompt_building import build_class_prompt, build_page_prompt
from scenario_suite_generator.scenario_ingestion.scenario_models import build_scenario_spec

LOGIN_SPEC = build_scenario_spec(
    test_id="TC_SMIT_01",
    target_class_name="PortalAuthenticationTest",
    target_method_name="loginPortal",
    preconditions="User has valid portal credentials",
    summary="Login to SMIT Portal",
    raw_test_data="Username: welldocsu\nPassword: welldoc123",
    steps_text="1. Navigate to login page\n2. Enter username\n3. Click Login",
    expected_result="User is logged in",
)

NAVIGATION_SPEC = build_scenario_spec(
    test_id="TC_SMIT_03",
    target_class_name="PortalNavigationTest",
    target_method_name="navigateToMessages",
    summary="Navigate to Messages",
    steps_text="Click Messages link",
    expected_result="Messages page shown",
)


def test_page_prompt_lists_requirements_and_scenarios() -> None:
    prompt = build_page_prompt("LoginPage", [LOGIN_SPEC], package="com.acme.pages")

    assert "- Class name: LoginPage" in prompt
    assert "- Package: com.acme.pages" in prompt
    assert "- Extends BasePage class" in prompt
    assert "- Login to SMIT Portal" in prompt
    assert "  Steps: Navigate to login page, Enter username, Click Login" in prompt
    assert "  Test Data: Username: welldocsu; Password: welldoc123" in prompt


def test_page_prompt_omits_empty_test_data() -> None:
    prompt = build_page_prompt("MessagePage", [NAVIGATION_SPEC])

    assert "Test Data" not in prompt
    assert "  Steps: Click Messages link" in prompt


def test_class_prompt_carries_every_scenario_field() -> None:
    prompt = build_class_prompt(
        "PortalAuthenticationTest", [LOGIN_SPEC, NAVIGATION_SPEC], pages_package="pages"
    )

    assert "- Class name: PortalAuthenticationTest" in prompt
    assert "- Extends BaseTest class" in prompt
    assert "- Test ID: TC_SMIT_01" in prompt
    assert "  Method: loginPortal" in prompt
    assert "  Preconditions: User has valid portal credentials" in prompt
    assert "  Expected: User is logged in" in prompt
    assert prompt.index("TC_SMIT_01") < prompt.index("TC_SMIT_03")
    assert prompt.count("Preconditions:") == 1
