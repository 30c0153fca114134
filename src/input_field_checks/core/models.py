"""Result structures produced by the check routines."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .errors import SoftAssertionFailures


@dataclass(frozen=True)
class AssertionOutcome:
    """Single soft assertion result."""

    passed: bool
    message: str
    detail: Optional[str] = None


@dataclass
class CheckReport:
    """Ordered soft assertion outcomes of one check routine invocation."""

    category: str
    outcomes: List[AssertionOutcome] = field(default_factory=list)

    def add(self, outcome: AssertionOutcome) -> None:
        self.outcomes.append(outcome)

    @property
    def passed(self) -> bool:
        return all(outcome.passed for outcome in self.outcomes)

    @property
    def failures(self) -> List[AssertionOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.passed]

    @property
    def messages(self) -> List[str]:
        return [outcome.message for outcome in self.outcomes]

    def to_json(self) -> str:
        data = {
            "category": self.category,
            "passed": self.passed,
            "outcomes": [
                {"passed": outcome.passed, "message": outcome.message, "detail": outcome.detail}
                for outcome in self.outcomes
            ],
        }
        return json.dumps(data, indent=4, ensure_ascii=False)

    def save(self, path: Path) -> None:
        path.write_text(self.to_json(), encoding="utf-8")

    def raise_for_failures(self) -> None:
        """Raises ``SoftAssertionFailures`` listing every failed message."""

        failures = self.failures
        if failures:
            raise SoftAssertionFailures(self.category, (outcome.message for outcome in failures))
