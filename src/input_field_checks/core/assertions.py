"""Soft assertion recorder built on top of Playwright's ``expect``."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from playwright.sync_api import Locator, expect

from .models import AssertionOutcome, CheckReport

logger = logging.getLogger(__name__)

ExpectFactory = Callable[..., Any]


class SoftAssertions:
    """Runs Playwright matchers and records mismatches instead of raising.

    Only ``AssertionError`` is treated as a soft failure; Playwright errors
    raised by the matcher itself (detached page, closed browser...) propagate.
    """

    def __init__(
        self,
        report: CheckReport,
        *,
        expect_factory: Optional[ExpectFactory] = None,
        timeout_ms: Optional[int] = None,
    ) -> None:
        self.report = report
        self._expect = expect_factory or expect
        self._timeout = timeout_ms

    def record(self, passed: bool, message: str, detail: Optional[str] = None) -> None:
        self.report.add(AssertionOutcome(passed=passed, message=message, detail=detail))
        if not passed:
            logger.debug("Soft assertion failed: %s (%s)", message, detail)

    def _soft(self, message: str, check: Callable[[], None]) -> bool:
        try:
            check()
        except AssertionError as exc:
            self.record(False, message, str(exc) or None)
            return False
        self.record(True, message)
        return True

    def _matcher(self, locator: Locator, message: str) -> Any:
        return self._expect(locator, message)

    # ------------------------------------------------------------------
    # Locator matchers
    # ------------------------------------------------------------------
    def visible(self, locator: Locator, message: str) -> bool:
        return self._soft(message, lambda: self._matcher(locator, message).to_be_visible(timeout=self._timeout))

    def hidden(self, locator: Locator, message: str) -> bool:
        return self._soft(message, lambda: self._matcher(locator, message).to_be_hidden(timeout=self._timeout))

    def has_value(self, locator: Locator, value: str, message: str) -> bool:
        return self._soft(
            message, lambda: self._matcher(locator, message).to_have_value(value, timeout=self._timeout)
        )

    def not_has_value(self, locator: Locator, value: str, message: str) -> bool:
        return self._soft(
            message, lambda: self._matcher(locator, message).not_to_have_value(value, timeout=self._timeout)
        )

    def has_attribute(self, locator: Locator, name: str, value: str, message: str) -> bool:
        return self._soft(
            message,
            lambda: self._matcher(locator, message).to_have_attribute(name, value, timeout=self._timeout),
        )

    def not_has_attribute(self, locator: Locator, name: str, value: str, message: str) -> bool:
        return self._soft(
            message,
            lambda: self._matcher(locator, message).not_to_have_attribute(name, value, timeout=self._timeout),
        )

    def has_css(self, locator: Locator, name: str, value: str, message: str) -> bool:
        return self._soft(
            message, lambda: self._matcher(locator, message).to_have_css(name, value, timeout=self._timeout)
        )

    def disabled(self, locator: Locator, message: str) -> bool:
        return self._soft(message, lambda: self._matcher(locator, message).to_be_disabled(timeout=self._timeout))

    def checked(self, locator: Locator, message: str, checked: Optional[bool] = None) -> bool:
        if checked is None:
            return self._soft(
                message, lambda: self._matcher(locator, message).to_be_checked(timeout=self._timeout)
            )
        return self._soft(
            message,
            lambda: self._matcher(locator, message).to_be_checked(checked=checked, timeout=self._timeout),
        )

    def not_checked(self, locator: Locator, message: str) -> bool:
        return self._soft(
            message, lambda: self._matcher(locator, message).not_to_be_checked(timeout=self._timeout)
        )

    def not_focused(self, locator: Locator, message: str) -> bool:
        return self._soft(
            message, lambda: self._matcher(locator, message).not_to_be_focused(timeout=self._timeout)
        )

    # ------------------------------------------------------------------
    # Plain value matchers
    # ------------------------------------------------------------------
    def equals(self, actual: Any, expected: Any, message: str) -> bool:
        passed = actual == expected
        self.record(passed, message, None if passed else f"expected {expected!r}, got {actual!r}")
        return passed

    def not_equals(self, actual: Any, unexpected: Any, message: str) -> bool:
        passed = actual != unexpected
        self.record(passed, message, None if passed else f"expected anything but {unexpected!r}")
        return passed
