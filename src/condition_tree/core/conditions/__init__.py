from .base import Condition, Test
from .drafts import IsNotTrueDraft, IsTrueDraft, TestConditionDraft, draft_from_condition
from .leaf_conditions import IsNotTrue, IsTrue, TestCondition
from .logical_conditions import And, NestedCondition, Or
from .registry import CONDITION_TYPE_TO_CLASS, condition_type_of, get_condition_class
from .types import ConditionType, InvalidConditionTreeReason

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
]
