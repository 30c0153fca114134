"""Checks for hidden inputs."""

from __future__ import annotations

from playwright.sync_api import Locator

from ..core.config import FieldConfig
from .common import CheckContext, apply_field_options, assign_value, attempt, click

HIDDEN_VALUE = "HiddenValue"


def check_hidden(ctx: CheckContext, element: Locator, field: FieldConfig) -> None:
    ctx.soft.hidden(element, "Hidden input should be present in the DOM.")
    ctx.soft.has_attribute(element, "type", "hidden", "Hidden input should have type 'hidden'.")

    # fill() waits for visibility, so the value goes through the DOM setter.
    assign_value(ctx, element, HIDDEN_VALUE)
    ctx.soft.has_value(element, HIDDEN_VALUE, "Hidden input should accept a value.")

    attempt(lambda: element.focus(timeout=ctx.config.action_timeout_ms))
    ctx.soft.not_focused(element, "Hidden input should not be focusable.")

    click(ctx, element)
    ctx.soft.not_focused(element, "Hidden input should not be clickable.")

    ctx.soft.has_css(element, "display", "none", "Hidden input should not be visible.")

    apply_field_options(ctx, element, field)
