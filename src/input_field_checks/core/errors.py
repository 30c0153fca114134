"""Exception types raised by the input field checks."""

from __future__ import annotations

from typing import Iterable


class FieldConfigError(ValueError):
    """Raised when a caller-supplied constraint is malformed.

    These errors describe a broken test setup, so they abort the running
    check instead of being recorded as a soft failure.
    """


class SoftAssertionFailures(AssertionError):
    """Aggregates every failed soft assertion of one check routine."""

    def __init__(self, category: str, messages: Iterable[str]) -> None:
        self.category = category
        self.messages = tuple(messages)
        lines = "\n".join(f" - {message}" for message in self.messages)
        super().__init__(
            f"{len(self.messages)} soft assertion(s) failed for {category} input:\n{lines}"
        )
