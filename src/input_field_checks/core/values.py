"""Helpers that derive probe values from caller-supplied constraints."""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta
from decimal import ROUND_DOWN, ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Optional, Pattern, Union

from .errors import FieldConfigError

TIME_FORMAT = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")
DATE_FORMAT = re.compile(r"^\d{4}-\d{2}-\d{2}$")
DATETIME_LOCAL_FORMAT = re.compile(r"^\d{4}-\d{2}-\d{2}T([01]\d|2[0-3]):([0-5]\d)$")

Number = Union[int, float, Decimal]


def to_decimal(value: Number) -> Decimal:
    """Exact decimal form of ``value``; floats go through their shortest repr."""

    return value if isinstance(value, Decimal) else Decimal(str(value))


def format_number(value: Number) -> str:
    """Renders a number the way an input's ``value`` property reports it."""

    number = to_decimal(value)
    if number == number.to_integral_value():
        return str(int(number))
    return format(number.normalize(), "f")


def parse_step(step: Union[str, Number]) -> Decimal:
    try:
        parsed = Decimal(str(step).strip())
    except InvalidOperation as exc:
        raise FieldConfigError(f"Invalid step '{step}'. Use a numeric value (e.g., '1' or '0.01').") from exc
    if not parsed.is_finite() or parsed <= 0:
        raise FieldConfigError(f"Invalid step '{step}'. Step must be greater than zero.")
    return parsed


def step_allows_fractions(step: Union[str, Number, None]) -> bool:
    return step is not None and "." in str(step)


def expected_decimal_value(raw: str, policy: str) -> str:
    """Value a number input without fractional steps is expected to keep."""

    if policy == "keep":
        return raw
    try:
        number = Decimal(raw)
    except InvalidOperation as exc:
        raise FieldConfigError(f"'{raw}' is not a decimal number.") from exc
    rounding = ROUND_DOWN if policy == "truncate" else ROUND_HALF_UP
    return str(number.quantize(Decimal(1), rounding=rounding))


def validate_time(value: str) -> str:
    if not TIME_FORMAT.match(value):
        raise FieldConfigError("Invalid time format. Use HH:mm (e.g., '08:00').")
    return value


def shift_time(value: str, minutes: int) -> Optional[str]:
    """Moves an ``HH:mm`` value by ``minutes``.

    Returns ``None`` when the result would fall on another day.
    """

    validate_time(value)
    hours, mins = (int(part) for part in value.split(":"))
    start = datetime(2000, 1, 1, hours, mins)
    moment = start + timedelta(minutes=minutes)
    if moment.date() != start.date():
        return None
    return moment.strftime("%H:%M")


def validate_date(value: str) -> date:
    if not DATE_FORMAT.match(value):
        raise FieldConfigError("Invalid date format. Use YYYY-MM-DD (e.g., '2020-01-01').")
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError as exc:
        raise FieldConfigError(f"Invalid date '{value}'.") from exc


def shift_date(value: str, days: int) -> Optional[str]:
    """Moves a ``YYYY-MM-DD`` value by ``days``; ``None`` past year 1 or 9999."""

    start = validate_date(value)
    try:
        return (start + timedelta(days=days)).isoformat()
    except OverflowError:
        return None


def validate_datetime_local(value: str) -> datetime:
    if not DATETIME_LOCAL_FORMAT.match(value):
        raise FieldConfigError("Invalid datetime format. Use YYYY-MM-DDTHH:mm (e.g., '2020-01-01T08:00').")
    try:
        return datetime.strptime(value, "%Y-%m-%dT%H:%M")
    except ValueError as exc:
        raise FieldConfigError(f"Invalid datetime '{value}'.") from exc


def shift_datetime_local(value: str, minutes: int) -> Optional[str]:
    start = validate_datetime_local(value)
    try:
        moment = start + timedelta(minutes=minutes)
    except OverflowError:
        return None
    return moment.isoformat(timespec="minutes")


def pattern_matches(pattern: Union[str, Pattern[str]], value: str) -> bool:
    try:
        compiled = pattern if isinstance(pattern, re.Pattern) else re.compile(pattern)
    except re.error as exc:
        raise FieldConfigError(f"Invalid pattern '{pattern}': {exc}") from exc
    return compiled.search(value) is not None
