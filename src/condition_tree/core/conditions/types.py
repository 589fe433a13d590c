"""Enumerations describing condition trees.

The values of these enums are stable and may be persisted by callers.
"""

from enum import Enum


class ConditionType(str, Enum):
    """Identifies a condition variant."""

    IS_TRUE = "isTrue"
    IS_NOT_TRUE = "isNotTrue"
    AND = "and"
    OR = "or"


class InvalidConditionTreeReason(str, Enum):
    """Why a nested condition tree is considered invalid."""

    EMPTY_CHILD = "emptyChild"  # A nested condition below has no children
    DUPLICATE = "duplicate"  # Two value-equal direct children


__all__ = ["ConditionType", "InvalidConditionTreeReason"]
