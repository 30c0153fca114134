"""Checks for checkable inputs: checkbox and radio."""

from __future__ import annotations

import logging
from typing import Optional

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator

from ..core.config import FieldConfig
from .common import CheckContext, apply_field_options, attempt, check_presence, click

logger = logging.getLogger(__name__)

SAME_NODE_SCRIPT = "(el, other) => el === other"


def _check_default_state(ctx: CheckContext, element: Locator, label: str, checked: Optional[bool]) -> None:
    if checked is not None:
        state = "checked" if checked else "unchecked"
        ctx.soft.checked(element, f"{label} should be {state} by default.", checked=checked)
    else:
        ctx.soft.not_checked(element, f"{label} should be unchecked by default.")


def _css_string(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


def _find_group_sibling(ctx: CheckContext, element: Locator, name: str) -> Optional[Locator]:
    """First radio of the named group that is not ``element`` itself."""

    timeout = ctx.config.action_timeout_ms
    try:
        handle = element.element_handle(timeout=timeout)
    except PlaywrightError:
        return None
    try:
        group = ctx.page.locator(f'input[type="radio"][name="{_css_string(name)}"]')
        for candidate in group.all():
            if not candidate.evaluate(SAME_NODE_SCRIPT, handle, timeout=timeout):
                return candidate
    except PlaywrightError:
        return None
    finally:
        handle.dispose()
    return None


def check_checkbox(
    ctx: CheckContext,
    element: Locator,
    field: FieldConfig,
    checked: Optional[bool] = None,
) -> None:
    check_presence(ctx, element, "Checkbox", "checkbox")
    _check_default_state(ctx, element, "Checkbox", checked)

    click(ctx, element)
    ctx.soft.checked(element, "Checkbox should be checked after clicking.")
    click(ctx, element)
    ctx.soft.not_checked(element, "Checkbox should be unchecked after clicking again.")

    attempt(lambda: element.check(timeout=ctx.config.action_timeout_ms))
    ctx.soft.checked(element, "Checkbox should be checked when manually checked.")
    attempt(lambda: element.uncheck(timeout=ctx.config.action_timeout_ms))
    ctx.soft.not_checked(element, "Checkbox should be unchecked when manually unchecked.")

    apply_field_options(ctx, element, field)


def check_radio(
    ctx: CheckContext,
    element: Locator,
    field: FieldConfig,
    checked: Optional[bool] = None,
    name: Optional[str] = None,
) -> None:
    check_presence(ctx, element, "Radio", "radio")

    if name:
        ctx.soft.has_attribute(element, "name", name, f"Radio input should have name '{name}'.")

    _check_default_state(ctx, element, "Radio button", checked)

    attempt(lambda: element.check(timeout=ctx.config.action_timeout_ms))
    ctx.soft.checked(element, "Radio button should be checked after selection.")

    if name:
        sibling = _find_group_sibling(ctx, element, name)
        if sibling is not None:
            attempt(lambda: sibling.check(timeout=ctx.config.action_timeout_ms))
            ctx.soft.not_checked(element, "Selecting another radio button in the group should uncheck this one.")
        else:
            logger.info("No other radio button named %s found; group exclusivity not checked.", name)

    apply_field_options(ctx, element, field)
