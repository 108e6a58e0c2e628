"""Natural-language generation requests for page and test classes."""

from __future__ import annotations

from collections.abc import Sequence

from scenario_suite_generator.scenario_ingestion.scenario_models import ScenarioSpec

STEP_DELIMITER = ", "
LOCATOR_STRATEGIES: tuple[str, ...] = ("By.id()", "By.name()", "By.xpath()")
PAGE_BASE_CLASS = "BasePage"
TEST_BASE_CLASS = "BaseTest"


def build_page_prompt(
    page_name: str,
    specs: Sequence[ScenarioSpec],
    *,
    package: str = "pages",
) -> str:
    """Describe the page object class that should cover ``specs``."""
    lines = [
        "Generate a complete Java Page Object Model class for Selenium automation.",
        "",
        "Requirements:",
        f"- Class name: {page_name}",
        f"- Package: {package}",
        f"- Extends {PAGE_BASE_CLASS} class",
        "- Use Selenium WebDriver",
        "- Include proper Javadoc comments",
        "- Add TODO comments for locator verification",
        f"- Use {', '.join(LOCATOR_STRATEGIES)} for locators",
        "",
        "Test cases for this page:",
    ]
    for spec in specs:
        lines.append(f"- {spec.summary or spec.test_id}")
        lines.append(f"  Steps: {STEP_DELIMITER.join(spec.steps)}")
        if spec.raw_test_data:
            lines.append(f"  Test Data: {_single_line(spec.raw_test_data)}")
    lines.extend(
        [
            "",
            "Generate locators and methods for every action mentioned in the test steps.",
            "Return only the complete Java class code, no explanations.",
        ]
    )
    return "\n".join(lines)


def build_class_prompt(
    class_name: str,
    specs: Sequence[ScenarioSpec],
    *,
    package: str = "tests",
    pages_package: str = "pages",
) -> str:
    """Describe the TestNG class holding one test method per scenario."""
    lines = [
        "Generate a complete TestNG test class for Selenium automation.",
        "",
        "Requirements:",
        f"- Class name: {class_name}",
        f"- Package: {package}",
        f"- Extends {TEST_BASE_CLASS} class",
        f"- Import page objects from package {pages_package}",
        "- Use TestNG @Test annotations with description and priority",
        "- Include proper error handling",
        "- Use assertions for validations",
        "- Include logging statements",
        "",
        "Test cases to implement:",
    ]
    for spec in specs:
        lines.append(f"- Test ID: {spec.test_id}")
        lines.append(f"  Method: {spec.target_method_name}")
        lines.append(f"  Description: {spec.summary}")
        if spec.preconditions:
            lines.append(f"  Preconditions: {_single_line(spec.preconditions)}")
        lines.append(f"  Steps: {STEP_DELIMITER.join(spec.steps)}")
        if spec.raw_test_data:
            lines.append(f"  Test Data: {_single_line(spec.raw_test_data)}")
        lines.append(f"  Expected: {spec.expected_result}")
        lines.append("")
    lines.extend(
        [
            "Generate the complete Java class with all test methods.",
            "Return only the Java code, no explanations.",
        ]
    )
    return "\n".join(lines)


def _single_line(text: str) -> str:
    return "; ".join(part.strip() for part in text.splitlines() if part.strip())
