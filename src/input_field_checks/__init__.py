"""Reusable Playwright checks for HTML form inputs."""

from .core.config import FieldConfig, SuiteConfig, load_configuration
from .core.errors import FieldConfigError, SoftAssertionFailures
from .core.models import AssertionOutcome, CheckReport
from .suite import InputFieldTestSuite

__all__ = [
    "AssertionOutcome",
    "CheckReport",
    "FieldConfig",
    "FieldConfigError",
    "InputFieldTestSuite",
    "SoftAssertionFailures",
    "SuiteConfig",
    "load_configuration",
]
