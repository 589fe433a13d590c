"""
Draft leaf conditions.

A draft mirrors a leaf condition whose test may not be chosen yet, e.g. while
a user is still building a filter. Drafts are plain values and are never
evaluated; `build` turns a complete draft into a real condition.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

from condition_tree.errors import IncompleteDraftError

from .base import Test, _FrozenModel
from .leaf_conditions import IsNotTrue, IsTrue, TestCondition
from .registry import get_condition_class
from .types import ConditionType


class TestConditionDraft(_FrozenModel, ABC):
    """A draft of a `TestCondition` whose test is optional."""

    test: Optional[Test] = None

    def __init__(self, test: Optional[Test] = None, **data: Any):
        if test is not None:
            data["test"] = test

        super().__init__(**data)

    @property
    @abstractmethod
    def type(self) -> ConditionType:
        raise NotImplementedError

    @property
    def is_complete(self) -> bool:
        return self.test is not None

    def with_test(self, test: Optional[Test]) -> "TestConditionDraft":
        """Return a draft of the same variant holding ``test``."""
        return self.__class__(test)

    def build(self) -> TestCondition:
        """
        Build the leaf condition this draft describes.

        Raises:
            IncompleteDraftError: If no test has been assigned
        """
        if self.test is None:
            raise IncompleteDraftError(self)
        return get_condition_class(self.type)(self.test)


class IsTrueDraft(TestConditionDraft):
    """A draft of an `IsTrue` condition."""

    @property
    def type(self) -> ConditionType:
        return ConditionType.IS_TRUE


class IsNotTrueDraft(TestConditionDraft):
    """A draft of an `IsNotTrue` condition."""

    @property
    def type(self) -> ConditionType:
        return ConditionType.IS_NOT_TRUE


def draft_from_condition(condition: TestCondition) -> TestConditionDraft:
    """Return the draft matching a leaf condition, holding the same test."""
    if isinstance(condition, IsTrue):
        return IsTrueDraft(condition.test)
    if isinstance(condition, IsNotTrue):
        return IsNotTrueDraft(condition.test)
    raise TypeError(f"No draft for condition variant: {condition.__class__.__name__}")


__all__ = ["TestConditionDraft", "IsTrueDraft", "IsNotTrueDraft", "draft_from_condition"]
