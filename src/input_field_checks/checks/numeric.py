"""Checks for numeric inputs: number and range."""

from __future__ import annotations

from typing import Optional, Union

from playwright.sync_api import Locator

from ..core.config import FieldConfig
from ..core.values import (
    Number,
    expected_decimal_value,
    format_number,
    parse_step,
    step_allows_fractions,
    to_decimal,
)
from .common import (
    CheckContext,
    accepts,
    apply_field_options,
    assign_value,
    check_presence,
    fill,
    paste,
    rejects,
)

DECIMAL_PROBE = "123.45"
STEP_BASE = 10


def check_number(
    ctx: CheckContext,
    element: Locator,
    field: FieldConfig,
    min: Optional[Number] = None,
    max: Optional[Number] = None,
    step: Optional[Union[str, Number]] = None,
) -> None:
    step_value = parse_step(step) if step is not None else None

    check_presence(ctx, element, "Number", "number")

    accepts(ctx, element, "123", "Number input should accept a valid number.")

    if step_allows_fractions(step):
        accepts(ctx, element, DECIMAL_PROBE, "Number input should accept decimal values.")
    else:
        fill(ctx, element, DECIMAL_PROBE)
        ctx.soft.has_value(
            element,
            expected_decimal_value(DECIMAL_PROBE, ctx.config.decimal_policy),
            "Number input should round decimals if step does not allow them.",
        )

    accepts(ctx, element, "-50", "Number input should accept negative numbers.")

    if min is not None:
        fill(ctx, element, format_number(to_decimal(min) - 1))
        ctx.soft.has_value(element, format_number(min), f"Number input should not accept values below {min}.")

    if max is not None:
        fill(ctx, element, format_number(to_decimal(max) + 1))
        ctx.soft.has_value(element, format_number(max), f"Number input should not accept values above {max}.")

    # Playwright refuses to type letters into a number input.
    assign_value(ctx, element, "abc")
    ctx.soft.has_value(element, "", "Number input should not accept non-numeric values.")

    accepts(ctx, element, "", "Number input should allow empty values.")

    if step_value is not None:
        fill(ctx, element, str(STEP_BASE))
        ctx.page.keyboard.press("ArrowUp")
        ctx.soft.has_value(
            element,
            format_number(STEP_BASE + step_value),
            f"Number input should increment by step {step}.",
        )
        ctx.page.keyboard.press("ArrowDown")
        ctx.soft.has_value(element, str(STEP_BASE), f"Number input should decrement by step {step}.")

    apply_field_options(ctx, element, field)
    paste(ctx, element, "42", "Number input should allow pasting numeric values.")


def check_range(
    ctx: CheckContext,
    element: Locator,
    field: FieldConfig,
    min: Optional[Number] = None,
    max: Optional[Number] = None,
    step: Optional[Number] = None,
) -> None:
    step_value = parse_step(step) if step is not None else None

    check_presence(ctx, element, "Range", "range")

    if min is not None:
        ctx.soft.has_attribute(
            element, "min", format_number(min), f"Range input should have a minimum value of {min}."
        )
    if max is not None:
        ctx.soft.has_attribute(
            element, "max", format_number(max), f"Range input should have a maximum value of {max}."
        )
    if step_value is not None:
        ctx.soft.has_attribute(
            element, "step", format_number(step_value), f"Range input should have a step value of {step}."
        )

    if min is not None:
        accepts(ctx, element, format_number(min), f"Range input should accept min value {min}.")
    if max is not None:
        accepts(ctx, element, format_number(max), f"Range input should accept max value {max}.")

    if min is not None and max is not None:
        middle = (to_decimal(min) + to_decimal(max)) / 2
        accepts(
            ctx,
            element,
            format_number(middle),
            f"Range input should accept a middle value of {format_number(middle)}.",
        )
        rejects(
            ctx,
            element,
            format_number(to_decimal(max) + 10),
            f"Range input should not accept values greater than {max}.",
        )

    if step_value is not None:
        accepts(
            ctx,
            element,
            format_number(to_decimal(min if min is not None else 0) + step_value),
            f"Range input should increment correctly by step {step}.",
        )

    apply_field_options(ctx, element, field)
