"""Checks for file and color inputs."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, Union

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator

from ..core.config import FieldConfig
from ..core.fixtures import sample_files
from .common import FILE_COUNT_SCRIPT, CheckContext, accepts, apply_field_options, attempt, check_presence

NEW_COLOR = "#ff5733"


def _check_selection(
    ctx: CheckContext,
    element: Locator,
    files: Union[Path, Sequence[Path]],
    expected: int,
    message: str,
) -> None:
    attempt(lambda: element.set_input_files(files, timeout=ctx.config.action_timeout_ms))
    try:
        count = element.evaluate(FILE_COUNT_SCRIPT, timeout=ctx.config.action_timeout_ms)
    except PlaywrightError as exc:
        ctx.soft.record(False, message, f"Could not read the selected files: {exc.message}")
        return
    ctx.soft.equals(count, expected, message)


def check_file(
    ctx: CheckContext,
    element: Locator,
    field: FieldConfig,
    accept: Optional[str] = None,
    multiple: bool = False,
) -> None:
    samples = sample_files(ctx.config.assets_dir)

    check_presence(ctx, element, "File", "file")

    if accept:
        ctx.soft.has_attribute(element, "accept", accept, f"File input should accept '{accept}'.")
    if multiple:
        ctx.soft.has_attribute(element, "multiple", "", "File input should allow multiple file selection.")

    _check_selection(ctx, element, samples[0], 1, "File input should accept a single file.")

    if multiple:
        _check_selection(ctx, element, list(samples), len(samples), "File input should accept multiple files.")

    _check_selection(ctx, element, [], 0, "File input should be cleared after removing files.")

    apply_field_options(ctx, element, field)


def check_color(
    ctx: CheckContext,
    element: Locator,
    field: FieldConfig,
    default_value: Optional[str] = None,
) -> None:
    check_presence(ctx, element, "Color", "color")

    if default_value:
        ctx.soft.has_value(
            element, default_value, f"Color input should have default value '{default_value}'."
        )

    accepts(ctx, element, NEW_COLOR, "Color input should accept a new color value.")

    apply_field_options(ctx, element, field)
