"""Context object and helpers shared by every check routine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page

from ..core.assertions import SoftAssertions
from ..core.config import FieldConfig, SuiteConfig

READ_ONLY_SENTINEL = "Read Only Test"

CLIPBOARD_WRITE_SCRIPT = "(text) => navigator.clipboard.writeText(text)"
ASSIGN_VALUE_SCRIPT = """(el, value) => {
    el.value = value;
    el.dispatchEvent(new Event('input', { bubbles: true }));
    el.dispatchEvent(new Event('change', { bubbles: true }));
}"""
FILE_COUNT_SCRIPT = "(el) => (el.files ? el.files.length : 0)"


@dataclass(slots=True)
class CheckContext:
    """Everything a check routine needs besides the element itself."""

    page: Page
    soft: SoftAssertions
    config: SuiteConfig


def attempt(action: Callable[[], None]) -> bool:
    """Runs a Playwright interaction, returning ``False`` when it is refused."""

    try:
        action()
        return True
    except PlaywrightError:
        return False


def fill(ctx: CheckContext, element: Locator, value: str) -> bool:
    return attempt(lambda: element.fill(value, timeout=ctx.config.action_timeout_ms))


def click(ctx: CheckContext, element: Locator) -> bool:
    return attempt(lambda: element.click(timeout=ctx.config.action_timeout_ms))


def assign_value(ctx: CheckContext, element: Locator, value: str) -> bool:
    """Sets ``value`` through the DOM property, bypassing Playwright's typing.

    ``fill`` refuses malformed literals for typed inputs (number, date,
    time...), while the DOM setter lets the browser sanitize them.
    """

    return attempt(lambda: element.evaluate(ASSIGN_VALUE_SCRIPT, value, timeout=ctx.config.action_timeout_ms))


def accepts(ctx: CheckContext, element: Locator, value: str, message: str) -> bool:
    fill(ctx, element, value)
    return ctx.soft.has_value(element, value, message)


def rejects(ctx: CheckContext, element: Locator, value: str, message: str, *, assign: bool = False) -> bool:
    if assign:
        assign_value(ctx, element, value)
    else:
        fill(ctx, element, value)
    return ctx.soft.not_has_value(element, value, message)


def paste(ctx: CheckContext, element: Locator, text: str, message: str, *, clear: bool = True) -> bool:
    if clear:
        fill(ctx, element, "")
    # Rejected without clipboard permissions; the value assertion reports it.
    attempt(lambda: ctx.page.evaluate(CLIPBOARD_WRITE_SCRIPT, text))
    attempt(lambda: element.focus(timeout=ctx.config.action_timeout_ms))
    ctx.page.keyboard.press(ctx.config.paste_shortcut)
    return ctx.soft.has_value(element, text, message)


# ----------------------------------------------------------------------
# Shared option checks
# ----------------------------------------------------------------------
def check_placeholder(ctx: CheckContext, element: Locator, placeholder: str) -> None:
    ctx.soft.has_attribute(element, "placeholder", placeholder, f"Placeholder should be '{placeholder}'.")


def check_disabled(ctx: CheckContext, element: Locator) -> None:
    ctx.soft.disabled(element, "Disabled input should not be editable.")


def check_read_only(ctx: CheckContext, element: Locator) -> None:
    message = "Read-only input should not allow typing."
    if not fill(ctx, element, READ_ONLY_SENTINEL):
        ctx.soft.record(True, message)
        return
    ctx.soft.not_has_value(element, READ_ONLY_SENTINEL, message)


def apply_field_options(ctx: CheckContext, element: Locator, field: FieldConfig) -> None:
    if field.placeholder:
        check_placeholder(ctx, element, field.placeholder)
    if field.disabled:
        check_disabled(ctx, element)
    if field.read_only:
        check_read_only(ctx, element)


def check_presence(ctx: CheckContext, element: Locator, label: str, input_type: str) -> None:
    ctx.soft.visible(element, f"{label} input should be visible.")
    ctx.soft.has_attribute(element, "type", input_type, f"{label} input should have type '{input_type}'.")
