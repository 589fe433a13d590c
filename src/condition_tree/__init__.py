"""Typed boolean condition trees.

Compose `Test` predicates with `IsTrue`/`IsNotTrue` leaves and `And`/`Or`
nodes, evaluate them against a value, and derive edited trees without
mutating the original.
"""

from condition_tree.core.conditions import (
    CONDITION_TYPE_TO_CLASS,
    And,
    Condition,
    ConditionType,
    InvalidConditionTreeReason,
    IsNotTrue,
    IsNotTrueDraft,
    IsTrue,
    IsTrueDraft,
    NestedCondition,
    Or,
    Test,
    TestCondition,
    TestConditionDraft,
    condition_type_of,
    draft_from_condition,
    get_condition_class,
)
from condition_tree.errors import ConditionTreeError, IncompleteDraftError, InvalidConditionTreeError

__all__ = [
    "Condition",
    "Test",
    "TestCondition",
    "IsTrue",
    "IsNotTrue",
    "NestedCondition",
    "And",
    "Or",
    "TestConditionDraft",
    "IsTrueDraft",
    "IsNotTrueDraft",
    "draft_from_condition",
    "ConditionType",
    "InvalidConditionTreeReason",
    "CONDITION_TYPE_TO_CLASS",
    "condition_type_of",
    "get_condition_class",
    "ConditionTreeError",
    "IncompleteDraftError",
    "InvalidConditionTreeError",
]
