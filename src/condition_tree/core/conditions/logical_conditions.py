"""
Logical conditions module.

Provides compound logical conditions (AND/OR) that combine child conditions.
Children keep their order for evaluation, but equality treats them as an
unordered multiset, so ``And([a, b]) == And([b, a])``.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Dict, Generic, Hashable, Optional, Sequence, Tuple

from .base import Condition, T
from .mixins import TreeEditingMixin, ValidityMixin


class NestedCondition(TreeEditingMixin, ValidityMixin, Condition[T], Generic[T]):
    """A condition that has sub-conditions."""

    conditions: Tuple[Condition, ...] = ()

    def __init__(self, conditions: Optional[Sequence[Condition]] = None, **data: Any):
        """
        Args:
            conditions: Child conditions, evaluated in the given order
        """
        if conditions is not None:
            data["conditions"] = conditions

        super().__init__(**data)

    def _props(self) -> Dict[Condition, int]:
        # Children as a multiset: order is ignored, repeats are counted.
        return dict(Counter(self.conditions))

    def _hash_key(self, props: Dict[Condition, int]) -> Hashable:
        return frozenset(props.items())

    def _join(self, operator: str) -> str:
        if not self.conditions:
            return f"{operator}()"
        parts = [c.describe() for c in self.conditions]
        return "(" + f" {operator} ".join(parts) + ")"


class And(NestedCondition[T], Generic[T]):
    """Logical AND of multiple conditions.

    All sub-conditions must evaluate to True for the AND to be True.
    With no sub-conditions the AND is vacuously True.
    """

    def evaluate(self, value: T) -> bool:
        """Evaluate all conditions with AND logic."""
        return all(c.evaluate(value) for c in self.conditions)

    def describe(self) -> str:
        """Human-readable description of this condition."""
        return self._join("AND")


class Or(NestedCondition[T], Generic[T]):
    """Logical OR of multiple conditions.

    At least one sub-condition must evaluate to True for the OR to be True.
    With no sub-conditions the OR is False.
    """

    def evaluate(self, value: T) -> bool:
        """Evaluate all conditions with OR logic."""
        return any(c.evaluate(value) for c in self.conditions)

    def describe(self) -> str:
        """Human-readable description of this condition."""
        return self._join("OR")


__all__ = ["NestedCondition", "And", "Or"]
