"""Mapping between condition variants and their `ConditionType` tags.

Callers that persist condition trees store the tag and use
`get_condition_class` to find the variant again.
"""

from __future__ import annotations

from typing import Dict, Type, Union

from .base import Condition
from .leaf_conditions import IsNotTrue, IsTrue
from .logical_conditions import And, Or
from .types import ConditionType

CONDITION_TYPE_TO_CLASS: Dict[ConditionType, Type[Condition]] = {
    ConditionType.IS_TRUE: IsTrue,
    ConditionType.IS_NOT_TRUE: IsNotTrue,
    ConditionType.AND: And,
    ConditionType.OR: Or,
}


def get_condition_class(condition_type: Union[ConditionType, str]) -> Type[Condition]:
    """
    Return the condition class for a tag.

    Args:
        condition_type: A `ConditionType` or its string value (e.g. "and")

    Raises:
        KeyError: If the tag is unknown
    """
    try:
        key = ConditionType(condition_type)
    except ValueError:
        available = ", ".join(t.value for t in ConditionType)
        raise KeyError(f"Unknown condition type: {condition_type}. Available: {available}") from None
    return CONDITION_TYPE_TO_CLASS[key]


def condition_type_of(condition: Condition) -> ConditionType:
    """
    Return the tag of a condition's variant.

    Raises:
        TypeError: If the condition is not one of the known variants
    """
    for condition_type, condition_class in CONDITION_TYPE_TO_CLASS.items():
        if isinstance(condition, condition_class):
            return condition_type
    raise TypeError(f"Unknown condition variant: {condition.__class__.__name__}")


__all__ = [
    "CONDITION_TYPE_TO_CLASS",
    "get_condition_class",
    "condition_type_of",
]
