"""Entry point exposing one validation method per HTML input category."""

from __future__ import annotations

import logging
import re
from typing import Any, Callable, Optional, Union

from playwright.sync_api import Locator, Page

from .checks import (
    CheckContext,
    check_checkbox,
    check_color,
    check_date,
    check_datetime_local,
    check_email,
    check_file,
    check_hidden,
    check_number,
    check_password,
    check_radio,
    check_range,
    check_search,
    check_tel,
    check_text,
    check_time,
    check_url,
)
from .core.assertions import ExpectFactory, SoftAssertions
from .core.config import FieldConfig, SuiteConfig, load_configuration
from .core.models import CheckReport
from .core.values import Number

logger = logging.getLogger(__name__)


class InputFieldTestSuite:
    """Runs a fixed battery of soft assertions against form inputs.

    Every method records its outcomes in a fresh ``CheckReport`` and returns
    it; call ``report.raise_for_failures()`` to fail the surrounding test.
    Malformed constraints raise ``FieldConfigError`` before the remaining
    checks run. Methods that paste share the system clipboard and must not
    run concurrently against the same page.
    """

    def __init__(
        self,
        page: Page,
        *,
        config: Optional[SuiteConfig] = None,
        expect_factory: Optional[ExpectFactory] = None,
    ) -> None:
        self.page = page
        self.config = config or load_configuration()
        self._expect_factory = expect_factory

    def _run(
        self,
        category: str,
        label: str,
        routine: Callable[..., None],
        element: Locator,
        field: Optional[FieldConfig],
        **constraints: Any,
    ) -> CheckReport:
        report = CheckReport(category=category)
        soft = SoftAssertions(
            report,
            expect_factory=self._expect_factory,
            timeout_ms=self.config.assertion_timeout_ms,
        )
        context = CheckContext(page=self.page, soft=soft, config=self.config)

        logger.info("Starting %s input field validation...", label.lower())
        routine(context, element, field or FieldConfig(), **constraints)

        failures = report.failures
        if failures:
            logger.info(
                "%s input: %d of %d soft assertions failed.",
                label,
                len(failures),
                len(report.outcomes),
            )
        logger.info("%s input field validation completed.", label)
        return report

    # ------------------------------------------------------------------
    # Free-text inputs
    # ------------------------------------------------------------------
    def text_input(self, input: Locator, field: Optional[FieldConfig] = None) -> CheckReport:
        return self._run("text", "Text", check_text, input, field)

    def password_input(self, input: Locator, field: Optional[FieldConfig] = None) -> CheckReport:
        return self._run("password", "Password", check_password, input, field)

    def email_input(self, input: Locator, field: Optional[FieldConfig] = None) -> CheckReport:
        return self._run("email", "Email", check_email, input, field)

    def search_input(self, input: Locator, field: Optional[FieldConfig] = None) -> CheckReport:
        return self._run("search", "Search", check_search, input, field)

    def url_input(self, input: Locator, field: Optional[FieldConfig] = None) -> CheckReport:
        return self._run("url", "URL", check_url, input, field)

    def tel_input(
        self,
        input: Locator,
        field: Optional[FieldConfig] = None,
        pattern: Optional[Union[str, re.Pattern]] = None,
    ) -> CheckReport:
        return self._run("tel", "Telephone", check_tel, input, field, pattern=pattern)

    # ------------------------------------------------------------------
    # Numeric inputs
    # ------------------------------------------------------------------
    def number_input(
        self,
        input: Locator,
        field: Optional[FieldConfig] = None,
        min: Optional[Number] = None,
        max: Optional[Number] = None,
        step: Optional[str] = None,
    ) -> CheckReport:
        return self._run("number", "Number", check_number, input, field, min=min, max=max, step=step)

    def range_input(
        self,
        input: Locator,
        field: Optional[FieldConfig] = None,
        min: Optional[Number] = None,
        max: Optional[Number] = None,
        step: Optional[Number] = None,
    ) -> CheckReport:
        return self._run("range", "Range", check_range, input, field, min=min, max=max, step=step)

    # ------------------------------------------------------------------
    # Date and time inputs
    # ------------------------------------------------------------------
    def date_input(
        self,
        input: Locator,
        field: Optional[FieldConfig] = None,
        min_date: Optional[str] = None,
        max_date: Optional[str] = None,
    ) -> CheckReport:
        return self._run("date", "Date", check_date, input, field, min_date=min_date, max_date=max_date)

    def time_input(
        self,
        input: Locator,
        field: Optional[FieldConfig] = None,
        min_time: Optional[str] = None,
        max_time: Optional[str] = None,
    ) -> CheckReport:
        return self._run("time", "Time", check_time, input, field, min_time=min_time, max_time=max_time)

    def datetime_local_input(
        self,
        input: Locator,
        field: Optional[FieldConfig] = None,
        min: Optional[str] = None,
        max: Optional[str] = None,
    ) -> CheckReport:
        return self._run(
            "datetime-local", "Datetime-local", check_datetime_local, input, field, min=min, max=max
        )

    # ------------------------------------------------------------------
    # Checkable inputs
    # ------------------------------------------------------------------
    def checkbox_input(
        self,
        input: Locator,
        field: Optional[FieldConfig] = None,
        checked: Optional[bool] = None,
    ) -> CheckReport:
        return self._run("checkbox", "Checkbox", check_checkbox, input, field, checked=checked)

    def radio_input(
        self,
        input: Locator,
        field: Optional[FieldConfig] = None,
        checked: Optional[bool] = None,
        name: Optional[str] = None,
    ) -> CheckReport:
        return self._run("radio", "Radio", check_radio, input, field, checked=checked, name=name)

    # ------------------------------------------------------------------
    # Other inputs
    # ------------------------------------------------------------------
    def file_input(
        self,
        input: Locator,
        field: Optional[FieldConfig] = None,
        accept: Optional[str] = None,
        multiple: bool = False,
    ) -> CheckReport:
        return self._run("file", "File", check_file, input, field, accept=accept, multiple=multiple)

    def color_input(
        self,
        input: Locator,
        field: Optional[FieldConfig] = None,
        default_value: Optional[str] = None,
    ) -> CheckReport:
        return self._run("color", "Color", check_color, input, field, default_value=default_value)

    def hidden_input(self, input: Locator, field: Optional[FieldConfig] = None) -> CheckReport:
        return self._run("hidden", "Hidden", check_hidden, input, field)
