"""Java source skeletons for Selenium page objects and TestNG classes."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from scenario_suite_generator.scenario_ingestion.scenario_models import ScenarioSpec

VERIFICATION_MARKER = "TODO: verify locator on real page"
INDENT = "    "

_NON_IDENTIFIER = re.compile(r"[^A-Za-z0-9_$]+")


@dataclass(frozen=True)
class Locator:
    """A page element placeholder."""

    field_name: str
    strategy: str
    value: str

    def declaration(self) -> str:
        return (
            f'{INDENT}private final By {self.field_name} = By.{self.strategy}("{self.value}");'
            f" // {VERIFICATION_MARKER}"
        )


@dataclass(frozen=True)
class PageBlueprint:
    """Locators and action methods for one family of pages."""

    role: str
    description: str
    locators: tuple[Locator, ...]
    methods: tuple[str, ...]


LOGIN_BLUEPRINT = PageBlueprint(
    role="login",
    description="login form",
    locators=(
        Locator("usernameField", "id", "username"),
        Locator("passwordField", "id", "password"),
        Locator("loginButton", "xpath", "//button[@type='submit']"),
        Locator("loginForm", "id", "loginForm"),
    ),
    methods=(
        """\
    /**
     * Opens the login page at the configured base URL.
     */
    public void open() {
        open(baseUrl());
    }""",
        """\
    /**
     * Performs the login action.
     * @param username account user name
     * @param password account password
     */
    public void login(String username, String password) {
        type(usernameField, username);
        type(passwordField, password);
        click(loginButton);
    }""",
        """\
    /**
     * Checks whether the user left the login page.
     * @return true once the login form is gone
     */
    public boolean isLoggedIn() {
        return !getCurrentUrl().contains("Login") && !isDisplayed(loginForm);
    }""",
    ),
)

SEARCH_BLUEPRINT = PageBlueprint(
    role="search",
    description="patient search",
    locators=(
        Locator("patientSearchBox", "id", "patientSearch"),
        Locator("searchButton", "id", "searchButton"),
        Locator("searchResults", "id", "searchResults"),
    ),
    methods=(
        """\
    /**
     * Searches for a patient.
     * @param criteria text typed into the search box
     */
    public void searchPatient(String criteria) {
        type(patientSearchBox, criteria);
        click(searchButton);
    }""",
        """\
    /**
     * @return true when the result list is visible
     */
    public boolean areSearchResultsDisplayed() {
        return isDisplayed(searchResults);
    }""",
    ),
)

MESSAGE_BLUEPRINT = PageBlueprint(
    role="message",
    description="messages",
    locators=(
        Locator("messagesLink", "xpath", "//a[text()='Messages']"),
        Locator("messageTextArea", "id", "messageText"),
        Locator("sendButton", "id", "sendButton"),
        Locator("messageList", "id", "messageList"),
    ),
    methods=(
        """\
    /**
     * Navigates to the messages page through the main menu.
     */
    public void openMessages() {
        click(messagesLink);
    }""",
        """\
    /**
     * Sends a message.
     * @param text message body
     */
    public void sendMessage(String text) {
        type(messageTextArea, text);
        click(sendButton);
    }""",
        """\
    /**
     * @return true when the message list is visible
     */
    public boolean isMessageListDisplayed() {
        return isDisplayed(messageList);
    }""",
    ),
)


def blueprint_for(page_name: str) -> PageBlueprint | None:
    """Pick the blueprint whose role occurs in ``page_name``; None for unknown pages."""
    lowered = page_name.lower()
    if "login" in lowered:
        return LOGIN_BLUEPRINT
    if "search" in lowered or "patient" in lowered:
        return SEARCH_BLUEPRINT
    if "message" in lowered:
        return MESSAGE_BLUEPRINT
    return None


def java_identifier(text: str, fallback: str) -> str:
    """Turn free text into a Java identifier, using ``fallback`` when nothing is left."""
    candidate = _NON_IDENTIFIER.sub("", text.strip().replace(" ", "_"))
    if not candidate:
        candidate = _NON_IDENTIFIER.sub("", fallback)
    if not candidate or candidate[0].isdigit():
        candidate = f"_{candidate}"
    return candidate


def java_string(text: str) -> str:
    """Render ``text`` as a Java string literal."""
    escaped = (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\r", "")
        .replace("\n", "\\n")
        .replace("\t", "\\t")
    )
    return f'"{escaped}"'


def render_page_class(
    page_name: str, specs: Sequence[ScenarioSpec], *, package: str = "pages"
) -> str:
    """Render a page object extending BasePage."""
    class_name = java_identifier(page_name, "GeneratedPage")
    blueprint = blueprint_for(page_name)
    lines = [
        f"package {package};",
        "",
        "import org.openqa.selenium.By;",
        "import org.openqa.selenium.WebDriver;",
        "",
        "/**",
        f" * Page object for the {_humanize(class_name)}."
        + (f" Covers the {blueprint.description} flow." if blueprint else ""),
        " * Generated from scenario workbook rows"
        + (f": {', '.join(spec.test_id for spec in specs)}." if specs else "."),
        " */",
        f"public class {class_name} extends BasePage {{",
        "",
        f"{INDENT}// {VERIFICATION_MARKER}",
    ]
    if blueprint is not None:
        lines.extend(locator.declaration() for locator in blueprint.locators)
    lines.extend(
        [
            "",
            f"{INDENT}/**",
            f"{INDENT} * @param driver WebDriver instance shared with the calling test",
            f"{INDENT} */",
            f"{INDENT}public {class_name}(WebDriver driver) {{",
            f"{INDENT}{INDENT}super(driver);",
            f"{INDENT}}}",
        ]
    )
    if blueprint is not None:
        for method in blueprint.methods:
            lines.extend(["", method])
    lines.extend(["}", ""])
    return "\n".join(lines)


def render_test_class(
    class_name: str,
    specs: Sequence[ScenarioSpec],
    pages: Sequence[str],
    *,
    available_pages: Sequence[str] = (),
    package: str = "tests",
    pages_package: str = "pages",
) -> str:
    """Render a TestNG class with one test method per scenario, in input order.

    ``pages`` are the page classes this test class drives; ``available_pages`` are
    all pages of the run, used to find a login page for the preamble.
    """
    java_class = java_identifier(class_name, "GeneratedTest")
    lines = [
        f"package {package};",
        "",
        "import org.testng.Assert;",
        "import org.testng.SkipException;",
        "import org.testng.annotations.Test;",
        f"import {pages_package}.*;",
        "",
        "/**",
        f" * Tests for {_javadoc_text(class_name)}.",
        " * Generated from scenario workbook rows.",
        " */",
        f"public class {java_class} extends BaseTest {{",
        "",
        f"{INDENT}// {VERIFICATION_MARKER} before trusting these tests",
    ]
    used_names: set[str] = set()
    for priority, spec in enumerate(specs, start=1):
        method_name = _unique_method_name(spec, used_names)
        lines.append("")
        lines.extend(
            _render_test_method(spec, method_name, priority, pages, available_pages)
        )
    lines.extend(["}", ""])
    return "\n".join(lines)


def render_base_page(*, package: str = "pages") -> str:
    """Render the shared page base class with the interaction primitives."""
    return f"""\
package {package};

import java.time.Duration;
import org.openqa.selenium.By;
import org.openqa.selenium.NoSuchElementException;
import org.openqa.selenium.WebDriver;
import org.openqa.selenium.WebElement;
import org.openqa.selenium.support.ui.ExpectedConditions;
import org.openqa.selenium.support.ui.WebDriverWait;

/**
 * Base class for generated page objects.
 * Provides open, type, click and read-state primitives.
 */
public abstract class BasePage {{

    protected final WebDriver driver;
    protected final WebDriverWait wait;

    protected BasePage(WebDriver driver) {{
        this.driver = driver;
        this.wait = new WebDriverWait(driver, Duration.ofSeconds(10));
    }}

    /**
     * @return value of the base.url system property, empty when unset
     */
    protected String baseUrl() {{
        return System.getProperty("base.url", "");
    }}

    public void open(String url) {{
        driver.get(url);
    }}

    protected void type(By locator, String text) {{
        WebElement element = wait.until(ExpectedConditions.visibilityOfElementLocated(locator));
        element.clear();
        element.sendKeys(text);
    }}

    protected void click(By locator) {{
        wait.until(ExpectedConditions.elementToBeClickable(locator)).click();
    }}

    protected boolean isDisplayed(By locator) {{
        try {{
            return driver.findElement(locator).isDisplayed();
        }} catch (NoSuchElementException e) {{
            return false;
        }}
    }}

    public String getCurrentUrl() {{
        return driver.getCurrentUrl();
    }}
}}
"""


def render_base_test(*, package: str = "tests") -> str:
    """Render the shared TestNG fixture; each test class owns one browser session."""
    return f"""\
package {package};

import io.github.bonigarcia.wdm.WebDriverManager;
import org.openqa.selenium.WebDriver;
import org.openqa.selenium.chrome.ChromeDriver;
import org.testng.annotations.AfterClass;
import org.testng.annotations.BeforeClass;

/**
 * Base class for generated TestNG classes.
 */
public abstract class BaseTest {{

    protected WebDriver driver;

    @BeforeClass
    public void setUp() {{
        WebDriverManager.chromedriver().setup();
        driver = new ChromeDriver();
        driver.manage().window().maximize();
    }}

    @AfterClass(alwaysRun = true)
    public void tearDown() {{
        if (driver != null) {{
            driver.quit();
            driver = null;
        }}
    }}
}}
"""


def _render_test_method(
    spec: ScenarioSpec,
    method_name: str,
    priority: int,
    pages: Sequence[str],
    available_pages: Sequence[str],
) -> list[str]:
    body = INDENT * 2
    lines = [
        f"{INDENT}/**",
        f"{INDENT} * {spec.test_id} - {_javadoc_text(spec.summary)}",
    ]
    if spec.preconditions:
        lines.append(f"{INDENT} * Preconditions: {_javadoc_text(spec.preconditions)}")
    if spec.expected_result:
        lines.append(f"{INDENT} * Expected: {_javadoc_text(spec.expected_result)}")
    lines.extend(
        [
            f"{INDENT} */",
            f"{INDENT}@Test(description = {java_string(spec.summary or spec.test_id)}, "
            f"priority = {priority})",
            f"{INDENT}public void {method_name}() {{",
        ]
    )
    for index, step in enumerate(spec.steps, start=1):
        lines.append(f"{body}// {index}. {_comment_text(step)}")
    lines.extend(_render_test_logic(spec, pages, available_pages))
    lines.append(f"{INDENT}}}")
    return lines


def _render_test_logic(
    spec: ScenarioSpec, pages: Sequence[str], available_pages: Sequence[str]
) -> list[str]:
    body = INDENT * 2
    expected = java_string(spec.expected_result or f"{spec.test_id} should pass")
    own_login_page = _page_with_role(pages, "login")
    login_page = own_login_page or _page_with_role(available_pages, "login")
    search_page = _page_with_role(pages, "search")
    message_page = _page_with_role(pages, "message")

    if own_login_page is None and search_page is None and message_page is None:
        reason = java_string(f"{spec.test_id}: steps not automated yet")
        return [f"{body}throw new SkipException({reason});"]

    lines: list[str] = []
    if login_page is not None:
        username = java_string(spec.test_data_value("username") or "")
        password = java_string(spec.test_data_value("password") or "")
        lines.extend(
            [
                f'{body}String username = System.getProperty("portal.username", {username});',
                f'{body}String password = System.getProperty("portal.password", {password});',
                f"{body}{login_page} loginPage = new {login_page}(driver);",
                f"{body}loginPage.open();",
                f"{body}loginPage.login(username, password);",
            ]
        )
    if search_page is not None:
        criteria = (
            spec.test_data_value("search criteria")
            or spec.test_data_value("patient name")
            or spec.test_data_value("patient")
            or ""
        )
        lines.extend(
            [
                f"{body}{search_page} searchPage = new {search_page}(driver);",
                f"{body}searchPage.searchPatient({java_string(criteria)});",
                f"{body}Assert.assertTrue(searchPage.areSearchResultsDisplayed(), {expected});",
            ]
        )
    elif message_page is not None:
        lines.extend(
            [
                f"{body}{message_page} messagePage = new {message_page}(driver);",
                f"{body}messagePage.openMessages();",
                f"{body}Assert.assertTrue(messagePage.isMessageListDisplayed(), {expected});",
            ]
        )
    else:
        lines.append(f"{body}Assert.assertTrue(loginPage.isLoggedIn(), {expected});")
    return lines


def _page_with_role(pages: Sequence[str], role: str) -> str | None:
    for page in sorted(pages):
        blueprint = blueprint_for(page)
        if blueprint is not None and blueprint.role == role:
            return java_identifier(page, "GeneratedPage")
    return None


def _unique_method_name(spec: ScenarioSpec, used_names: set[str]) -> str:
    base = java_identifier(spec.target_method_name, f"test_{spec.test_id}")
    name = base
    suffix = 2
    while name in used_names:
        name = f"{base}_{suffix}"
        suffix += 1
    used_names.add(name)
    return name


def _humanize(class_name: str) -> str:
    return re.sub(r"(?<=[a-z0-9])(?=[A-Z])", " ", class_name)


def _javadoc_text(text: str) -> str:
    return " ".join(text.split()).replace("*/", "* /")


def _comment_text(text: str) -> str:
    return " ".join(text.split())
