"""Runs clipboard-free routines against real inputs rendered by Chromium."""

import pytest
from playwright.sync_api import Page

from input_field_checks import FieldConfig, InputFieldTestSuite, SuiteConfig

pytestmark = pytest.mark.e2e

FORM = """
<!DOCTYPE html>
<html>
<body>
    <form>
        <input type="checkbox" id="terms" />
        <input type="checkbox" id="newsletter" checked disabled />
        <input type="radio" id="basic" name="plan" value="basic" />
        <input type="radio" id="pro" name="plan" value="pro" />
        <input type="range" id="volume" min="0" max="10" step="1" />
        <input type="file" id="photos" accept="image/*" multiple />
        <input type="color" id="theme" value="#000000" />
        <input type="hidden" id="token" name="token" />
    </form>
</body>
</html>
"""


@pytest.fixture
def suite(page: Page):
    page.set_content(FORM)
    return InputFieldTestSuite(page, config=SuiteConfig(assertion_timeout_ms=1000, action_timeout_ms=500))


def test_checkbox(suite, page: Page):
    report = suite.checkbox_input(page.locator("#terms"))

    assert report.passed, report.to_json()


def test_disabled_checkbox_is_cataloged(suite, page: Page):
    report = suite.checkbox_input(page.locator("#newsletter"), FieldConfig(disabled=True), checked=True)

    assert not report.passed
    assert all(
        outcome.passed
        for outcome in report.outcomes
        if outcome.message in ("Checkbox should be checked by default.", "Disabled input should not be editable.")
    )


def test_radio_group(suite, page: Page):
    report = suite.radio_input(page.locator("#basic"), name="plan")

    assert report.passed, report.to_json()
    assert page.locator("#pro").is_checked()


def test_range(suite, page: Page):
    report = suite.range_input(page.locator("#volume"), min=0, max=10, step=1)

    assert report.passed, report.to_json()


def test_file_upload(suite, page: Page):
    report = suite.file_input(page.locator("#photos"), accept="image/*", multiple=True)

    assert report.passed, report.to_json()


def test_color(suite, page: Page):
    report = suite.color_input(page.locator("#theme"), default_value="#000000")

    assert report.passed, report.to_json()


def test_hidden(suite, page: Page):
    report = suite.hidden_input(page.locator("#token"))

    assert report.passed, report.to_json()
