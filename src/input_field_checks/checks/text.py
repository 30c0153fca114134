"""Checks for free-text inputs: text, password, email, search, url and tel."""

from __future__ import annotations

import logging
from typing import Optional, Pattern, Union

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator

from ..core.config import FieldConfig
from ..core.values import pattern_matches
from .common import (
    CheckContext,
    attempt,
    accepts,
    apply_field_options,
    check_presence,
    fill,
    paste,
    rejects,
)

logger = logging.getLogger(__name__)

INVALID_PHONE_NUMBER = "invalidPhoneNumber"


def check_text(ctx: CheckContext, element: Locator, field: FieldConfig) -> None:
    ctx.soft.visible(element, "Input field should be visible.")

    # A missing type attribute renders as a text input.
    try:
        input_type = element.get_attribute("type", timeout=ctx.config.action_timeout_ms)
    except PlaywrightError as exc:
        ctx.soft.record(False, "Input should have type 'text'.", exc.message)
    else:
        if input_type is None:
            ctx.soft.record(True, "Input should default to type 'text'.")
        else:
            ctx.soft.equals(input_type, "text", "Input should have type 'text'.")

    accepts(ctx, element, "QA Test", "Input should contain 'QA Test'.")
    accepts(ctx, element, "QATest123", "Input should allow alphanumeric characters.")
    accepts(ctx, element, "@#$%^&*()_+", "Input should allow special characters.")

    if field.max_length:
        rejects(
            ctx,
            element,
            "A" * (field.max_length + 1),
            f"Input should not allow more than {field.max_length} characters.",
        )

    accepts(ctx, element, "", "Input should allow empty value.")

    fill(ctx, element, "Clear me")
    accepts(ctx, element, "", "User should be able to clear input.")

    accepts(ctx, element, "123456", "Numbers should be allowed in input.")

    apply_field_options(ctx, element, field)
    paste(ctx, element, "CopiedText", "Text input should allow pasting.")


def check_password(ctx: CheckContext, element: Locator, field: FieldConfig) -> None:
    check_presence(ctx, element, "Password", "password")

    accepts(ctx, element, "QATest@123", "Password input should accept input.")

    if field.max_length:
        rejects(
            ctx,
            element,
            "A" * (field.max_length + 1),
            f"Password input should not allow more than {field.max_length} characters.",
        )

    accepts(ctx, element, "!@#$%^&*()", "Password input should accept special characters.")
    accepts(ctx, element, "Hello World", "Password input should accept spaces unless restricted.")

    apply_field_options(ctx, element, field)
    paste(ctx, element, "CopiedPassword", "Password input should allow pasting.")

    if field.auto_complete:
        ctx.soft.not_has_attribute(
            element,
            "autocomplete",
            "on",
            "Password input should have autocomplete off for security.",
        )


def check_email(ctx: CheckContext, element: Locator, field: FieldConfig) -> None:
    check_presence(ctx, element, "Email", "email")

    accepts(ctx, element, "test@example.com", "Email input should accept a valid email.")
    accepts(ctx, element, "valid.email@example.com", "Email input should accept a valid email format.")
    accepts(ctx, element, "user+alias@example.com", "Email input should allow special characters like '+'.")

    if field.max_length:
        rejects(
            ctx,
            element,
            "a" * (field.max_length + 1) + "@example.com",
            f"Email input should not exceed max length of {field.max_length}.",
        )

    apply_field_options(ctx, element, field)
    paste(ctx, element, "paste@example.com", "Email input should allow pasting.")


def check_search(ctx: CheckContext, element: Locator, field: FieldConfig) -> None:
    check_presence(ctx, element, "Search", "search")

    accepts(ctx, element, "playwright", "Search input should accept text input.")
    accepts(ctx, element, "test@search.com", "Search input should allow special characters.")
    accepts(ctx, element, "search query", "Search input should accept spaces.")

    fill(ctx, element, "clear this")
    attempt(lambda: element.press("Escape", timeout=ctx.config.action_timeout_ms))
    ctx.soft.has_value(element, "", "Search input should clear when 'Escape' is pressed.")

    fill(ctx, element, "search term")
    attempt(lambda: element.press("Enter", timeout=ctx.config.action_timeout_ms))
    logger.info("Search input submitted with Enter key; form submission is not asserted.")

    if field.max_length:
        rejects(
            ctx,
            element,
            "a" * (field.max_length + 5),
            f"Search input should not exceed max length of {field.max_length}.",
        )

    apply_field_options(ctx, element, field)
    paste(ctx, element, "pasteSearchQuery", "Search input should allow pasting.")


def check_url(ctx: CheckContext, element: Locator, field: FieldConfig) -> None:
    check_presence(ctx, element, "URL", "url")

    accepts(ctx, element, "https://example.com", "URL input should accept a valid URL.")
    accepts(ctx, element, "http://example.org", "URL input should accept 'http' protocol.")
    accepts(
        ctx,
        element,
        "https://sub.domain.com/path?query=1#fragment",
        "URL input should accept complex URLs.",
    )
    rejects(ctx, element, "invalid-url", "URL input should not accept an invalid URL.")

    if field.max_length:
        rejects(
            ctx,
            element,
            "https://example.com/" + "a" * field.max_length,
            f"URL input should not exceed max length of {field.max_length}.",
        )

    apply_field_options(ctx, element, field)
    paste(ctx, element, "https://pasted-url.com", "URL input should allow pasting.")


def check_tel(
    ctx: CheckContext,
    element: Locator,
    field: FieldConfig,
    pattern: Optional[Union[str, Pattern[str]]] = None,
) -> None:
    # Compile up front so a bad pattern aborts before the element is touched.
    invalid_matches = pattern_matches(pattern, INVALID_PHONE_NUMBER) if pattern else None

    check_presence(ctx, element, "Telephone", "tel")

    accepts(ctx, element, "1234567890", "Telephone input should accept numeric values.")
    accepts(ctx, element, "+1234567890123", "Telephone input should accept international format.")
    rejects(ctx, element, "abcdefg123", "Telephone input should not accept alphabets.")
    accepts(ctx, element, "(123) 456-7890", "Telephone input should allow formatting characters.")
    accepts(ctx, element, "123 456 7890", "Telephone input should handle spaces correctly.")

    if field.max_length:
        rejects(
            ctx,
            element,
            "1" * (field.max_length + 5),
            f"Telephone input should not exceed max length of {field.max_length}.",
        )

    apply_field_options(ctx, element, field)
    paste(ctx, element, "+1122334455", "Telephone input should allow pasting.")

    if pattern and not invalid_matches:
        rejects(
            ctx,
            element,
            INVALID_PHONE_NUMBER,
            f"Telephone input should follow the pattern: {getattr(pattern, 'pattern', pattern)}",
        )
