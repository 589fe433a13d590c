from __future__ import annotations

"""Errors raised by opt-in condition tree helpers.

Core operations (evaluation, editing, validity reporting) never raise these.
"""

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from condition_tree.core.conditions.base import Condition
    from condition_tree.core.conditions.drafts import TestConditionDraft
    from condition_tree.core.conditions.types import InvalidConditionTreeReason


class ConditionTreeError(RuntimeError):
    """Base class for condition tree errors."""


class IncompleteDraftError(ConditionTreeError):
    """Raised when building a condition from a draft that has no test."""

    def __init__(self, draft: "TestConditionDraft", message: str = "Draft has no test assigned"):
        self.draft = draft
        self.message = message
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        return f"{self.message} ({self.draft.__class__.__name__})"

    def __str__(self) -> str:
        return self._build_message()


class InvalidConditionTreeError(ConditionTreeError):
    """Wraps the reasons a condition tree was rejected."""

    def __init__(self, condition: "Condition", reasons: Sequence["InvalidConditionTreeReason"]):
        self.condition = condition
        self.reasons = list(reasons)
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        detail = ", ".join(r.value for r in self.reasons) or "no reason given"
        return f"Invalid condition tree {self.condition.describe()}: {detail}"

    def __str__(self) -> str:
        return self._build_message()


__all__ = ["ConditionTreeError", "IncompleteDraftError", "InvalidConditionTreeError"]
