"""Shared scenario workbook constants."""

from __future__ import annotations

TEMPLATE_SHEET_NAME = "TestCases"

TEST_CASE_ID = "Test Case ID"
AUTOMATION_CLASS_NAME = "Automation Class Name"
AUTOMATION_METHOD_NAME = "Automation Method Name"
PRE_CONDITIONS = "Pre-Conditions"
TEST_SCENARIO_SUMMARY = "Test Scenario Summary"
TEST_DATA = "Test Data"
TEST_CASE_STEPS = "Test Case (steps)"
EXPECTED_RESULTS = "Expected Results"

SCENARIO_COLUMNS: tuple[str, ...] = (
    TEST_CASE_ID,
    AUTOMATION_CLASS_NAME,
    AUTOMATION_METHOD_NAME,
    PRE_CONDITIONS,
    TEST_SCENARIO_SUMMARY,
    TEST_DATA,
    TEST_CASE_STEPS,
    EXPECTED_RESULTS,
)

EXAMPLE_ROWS: tuple[dict[str, str], ...] = (
    {
        TEST_CASE_ID: "TC_SMIT_01",
        AUTOMATION_CLASS_NAME: "PortalAuthenticationTest",
        AUTOMATION_METHOD_NAME: "loginPortal",
        PRE_CONDITIONS: "User has valid portal credentials",
        TEST_SCENARIO_SUMMARY: "Login to SMIT Portal",
        TEST_DATA: "Username: welldocsu\nPassword: welldoc123",
        TEST_CASE_STEPS: (
            "1. Navigate to the portal login page\n"
            "2. Enter username\n"
            "3. Enter password\n"
            "4. Click Login"
        ),
        EXPECTED_RESULTS: "System should allow the user to successfully login",
    },
    {
        TEST_CASE_ID: "TC_SMIT_02",
        AUTOMATION_CLASS_NAME: "PatientSearchTest",
        AUTOMATION_METHOD_NAME: "searchPatient",
        PRE_CONDITIONS: "User is logged in",
        TEST_SCENARIO_SUMMARY: "Search for Patient",
        TEST_DATA: "Search Criteria: John Doe",
        TEST_CASE_STEPS: "Login to SMIT Portal; Navigate to Patient Search; "
        "Enter search criteria; Click Search",
        EXPECTED_RESULTS: "Search results should be displayed",
    },
    {
        TEST_CASE_ID: "TC_SMIT_03",
        AUTOMATION_CLASS_NAME: "PortalNavigationTest",
        AUTOMATION_METHOD_NAME: "navigateToMessages",
        PRE_CONDITIONS: "User is logged in",
        TEST_SCENARIO_SUMMARY: "Navigate to Messages",
        TEST_DATA: "",
        TEST_CASE_STEPS: "1. Login to SMIT Portal\n2. Click Messages link\n3. Verify message page",
        EXPECTED_RESULTS: "Should successfully navigate to messages page",
    },
)
