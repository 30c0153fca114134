"""Configuration loading for the input field checks."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .errors import FieldConfigError

DECIMAL_POLICIES = ("truncate", "round", "keep")
DEFAULT_ASSETS_DIR = Path(__file__).resolve().parent.parent / "assets"


@dataclass(frozen=True, slots=True)
class FieldConfig:
    """Options shared by every check routine.

    Type-specific constraints (min, max, step, pattern...) are passed to the
    individual suite methods instead.
    """

    placeholder: Optional[str] = None
    disabled: bool = False
    read_only: bool = False
    max_length: Optional[int] = None
    auto_complete: bool = False

    def __post_init__(self) -> None:
        if self.max_length is not None and self.max_length <= 0:
            raise FieldConfigError(f"max_length must be positive, got {self.max_length}.")


@dataclass(slots=True)
class SuiteConfig:
    """Holds runtime options for the check suite."""

    paste_shortcut: str = "Control+V"
    assertion_timeout_ms: int = 5000
    action_timeout_ms: int = 5000
    decimal_policy: str = "truncate"
    assets_dir: Path = DEFAULT_ASSETS_DIR

    def __post_init__(self) -> None:
        if self.decimal_policy not in DECIMAL_POLICIES:
            raise FieldConfigError(
                f"Unknown decimal policy '{self.decimal_policy}'. "
                f"Use one of: {', '.join(DECIMAL_POLICIES)}."
            )


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise FieldConfigError(f"{name} must be an integer, got '{raw}'.") from exc


def load_configuration(
    *,
    paste_shortcut: Optional[str] = None,
    assertion_timeout_ms: Optional[int] = None,
    action_timeout_ms: Optional[int] = None,
    decimal_policy: Optional[str] = None,
    assets_dir: Optional[str] = None,
) -> SuiteConfig:
    """Builds a ``SuiteConfig`` from keyword overrides and environment variables."""

    load_dotenv()  # Loads .env values if present

    shortcut = paste_shortcut or os.getenv("INPUT_CHECKS_PASTE_SHORTCUT") or "Control+V"
    assertion_timeout = (
        assertion_timeout_ms
        if assertion_timeout_ms is not None
        else _int_from_env("INPUT_CHECKS_ASSERTION_TIMEOUT", 5000)
    )
    action_timeout = (
        action_timeout_ms
        if action_timeout_ms is not None
        else _int_from_env("INPUT_CHECKS_ACTION_TIMEOUT", 5000)
    )
    policy = (decimal_policy or os.getenv("INPUT_CHECKS_DECIMAL_POLICY") or "truncate").lower()
    assets = assets_dir or os.getenv("INPUT_CHECKS_ASSETS_DIR")

    return SuiteConfig(
        paste_shortcut=shortcut,
        assertion_timeout_ms=assertion_timeout,
        action_timeout_ms=action_timeout,
        decimal_policy=policy,
        assets_dir=Path(assets).resolve() if assets else DEFAULT_ASSETS_DIR,
    )
