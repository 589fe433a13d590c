"""Validity analysis mixin for nested conditions.

Invalid trees can still be built and evaluated. These checks only report
problems; callers decide whether to act on them.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List

from condition_tree.core.conditions.types import InvalidConditionTreeReason
from condition_tree.errors import InvalidConditionTreeError

if TYPE_CHECKING:
    from condition_tree.core.conditions.base import Condition
    from condition_tree.core.conditions.logical_conditions import NestedCondition

logger = logging.getLogger(__name__)


class ValidityMixin:
    """Mixin providing duplicate and empty-subtree detection."""

    def contains_empty_child(self) -> bool:
        """Return True if any nested condition beneath this one is empty."""
        from condition_tree.core.conditions.logical_conditions import NestedCondition

        return any(
            isinstance(c, NestedCondition) and (not c.conditions or c.contains_empty_child())
            for c in self.conditions
        )

    def duplicates(self) -> List["Condition"]:
        """Return direct children that are value-equal to an earlier child."""
        seen = set()
        duplicates: List["Condition"] = []
        for condition in self.conditions:
            if condition in seen:
                duplicates.append(condition)
            else:
                seen.add(condition)
        return duplicates

    def contains_duplicates(self) -> bool:
        return bool(self.duplicates())

    @property
    def invalid_reasons(self) -> List[InvalidConditionTreeReason]:
        """Reasons why this tree is invalid, empty when it is valid."""
        reasons: List[InvalidConditionTreeReason] = []
        if self.contains_empty_child():
            reasons.append(InvalidConditionTreeReason.EMPTY_CHILD)
        if self.contains_duplicates():
            reasons.append(InvalidConditionTreeReason.DUPLICATE)
        return reasons

    @property
    def is_valid(self) -> bool:
        return not self.invalid_reasons

    def ensure_valid(self) -> "NestedCondition":
        """
        Return the receiver unchanged if it is valid.

        Raises:
            InvalidConditionTreeError: If any invalid reason applies
        """
        reasons = self.invalid_reasons
        if reasons:
            logger.info(
                "Rejected condition tree %s: %s",
                self.describe(),
                ", ".join(r.value for r in reasons),
            )
            raise InvalidConditionTreeError(self, reasons)
        return self


__all__ = ["ValidityMixin"]
