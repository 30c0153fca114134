"""Checks for date, time and datetime-local inputs."""

from __future__ import annotations

import logging
from typing import Optional

from playwright.sync_api import Locator

from ..core.config import FieldConfig
from ..core.values import shift_date, shift_datetime_local, shift_time
from .common import (
    CheckContext,
    accepts,
    apply_field_options,
    check_presence,
    paste,
    rejects,
)

logger = logging.getLogger(__name__)

DEFAULT_MIN_DATE = "2020-01-01"
DEFAULT_MAX_DATE = "2025-12-31"
DATETIME_BEFORE_PROBE = "1999-12-31T23:59"
DATETIME_AFTER_PROBE = "2099-12-31T23:59"


def check_date(
    ctx: CheckContext,
    element: Locator,
    field: FieldConfig,
    min_date: Optional[str] = None,
    max_date: Optional[str] = None,
) -> None:
    lower = min_date or DEFAULT_MIN_DATE
    upper = max_date or DEFAULT_MAX_DATE
    before = shift_date(lower, -1)
    after = shift_date(upper, 1)

    check_presence(ctx, element, "Date", "date")

    accepts(ctx, element, "2025-02-12", "Date input should accept a valid date.")
    rejects(ctx, element, "invalid-date", "Date input should reject invalid date format.", assign=True)
    accepts(ctx, element, "2025-12-31", "Date input should accept valid date formats.")

    apply_field_options(ctx, element, field)
    paste(ctx, element, "2025-05-15", "Date input should allow pasting.")

    if before is None:
        logger.info("No date precedes %s; lower bound check skipped.", lower)
    else:
        rejects(ctx, element, before, f"Date input should not accept dates before {lower}.")
    if after is None:
        logger.info("No date follows %s; upper bound check skipped.", upper)
    else:
        rejects(ctx, element, after, f"Date input should not accept dates after {upper}.")

    if field.max_length:
        rejects(
            ctx,
            element,
            "2025-02-12" * (field.max_length + 5),
            f"Date input should not exceed max length of {field.max_length}.",
            assign=True,
        )


def check_time(
    ctx: CheckContext,
    element: Locator,
    field: FieldConfig,
    min_time: Optional[str] = None,
    max_time: Optional[str] = None,
) -> None:
    before = shift_time(min_time, -1) if min_time else None
    after = shift_time(max_time, 1) if max_time else None

    check_presence(ctx, element, "Time", "time")

    accepts(ctx, element, "12:30", "Time input should accept a valid time.")
    rejects(ctx, element, "invalid-time", "Time input should reject invalid time format.", assign=True)
    accepts(ctx, element, "23:59", "Time input should accept valid 24-hour format.")
    rejects(ctx, element, "25:00", "Time input should not accept hours >= 24.", assign=True)
    rejects(ctx, element, "12:60", "Time input should not accept minutes >= 60.", assign=True)

    apply_field_options(ctx, element, field)
    paste(ctx, element, "15:45", "Time input should allow pasting.")

    if before is not None:
        rejects(ctx, element, before, f"Time input should not accept times before {min_time}.")
    elif min_time:
        logger.info("No time of day precedes %s; lower bound check skipped.", min_time)
    if after is not None:
        rejects(ctx, element, after, f"Time input should not accept times after {max_time}.")
    elif max_time:
        logger.info("No time of day follows %s; upper bound check skipped.", max_time)

    if field.max_length:
        rejects(
            ctx,
            element,
            "12:30" * (field.max_length + 5),
            f"Time input should not exceed max length of {field.max_length}.",
            assign=True,
        )


def check_datetime_local(
    ctx: CheckContext,
    element: Locator,
    field: FieldConfig,
    min: Optional[str] = None,
    max: Optional[str] = None,
) -> None:
    before = shift_datetime_local(min, -1) if min else None
    after = shift_datetime_local(max, 1) if max else None

    check_presence(ctx, element, "Datetime-local", "datetime-local")

    accepts(ctx, element, "2025-02-12T14:30", "Datetime-local input should accept a valid date and time.")
    rejects(ctx, element, "invalid-date", "Datetime-local input should reject invalid formats.", assign=True)
    accepts(ctx, element, "2030-12-31T23:59", "Datetime-local input should accept future dates.")
    accepts(ctx, element, "2000-01-01T00:00", "Datetime-local input should accept past dates.")

    if min:
        accepts(ctx, element, min, f"Datetime-local input should allow min value {min}.")
        message = f"Datetime-local input should not accept values before {min}."
        # Fixed-width ISO values compare chronologically as strings.
        if DATETIME_BEFORE_PROBE < min:
            rejects(ctx, element, DATETIME_BEFORE_PROBE, message)
        if before is None:
            logger.info("No datetime precedes %s; lower bound check skipped.", min)
        elif before != DATETIME_BEFORE_PROBE:
            rejects(ctx, element, before, message)

    if max:
        accepts(ctx, element, max, f"Datetime-local input should allow max value {max}.")
        message = f"Datetime-local input should not accept values after {max}."
        if DATETIME_AFTER_PROBE > max:
            rejects(ctx, element, DATETIME_AFTER_PROBE, message)
        if after is None:
            logger.info("No datetime follows %s; upper bound check skipped.", max)
        elif after != DATETIME_AFTER_PROBE:
            rejects(ctx, element, after, message)

    apply_field_options(ctx, element, field)
    paste(ctx, element, "2026-06-15T10:15", "Datetime-local input should allow pasting.")

    if field.max_length:
        rejects(
            ctx,
            element,
            "2025-02-12T14:30" * (field.max_length + 5),
            f"Datetime-local input should not exceed max length of {field.max_length}.",
            assign=True,
        )
