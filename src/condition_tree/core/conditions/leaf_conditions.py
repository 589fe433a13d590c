"""
Leaf conditions module.

Provides the conditions that wrap a single `Test` and have no children.
"""

from __future__ import annotations

from typing import Any, Generic, Hashable, Optional

from .base import Condition, T, Test


class TestCondition(Condition[T], Generic[T]):
    """A condition whose evaluation is determined by a single test.

    Equality is structural: two leaves of the same variant are equal iff
    their tests are equal.
    """

    test: Test

    def __init__(self, test: Optional[Test] = None, **data: Any):
        """
        Args:
            test: The test that determines this condition's evaluation
        """
        if test is not None:
            data["test"] = test

        super().__init__(**data)

    def _props(self) -> Hashable:
        return (self.test,)


class IsTrue(TestCondition[T], Generic[T]):
    """True when the wrapped test is met."""

    def evaluate(self, value: T) -> bool:
        return bool(self.test(value))

    def describe(self) -> str:
        return self.test.describe()


class IsNotTrue(TestCondition[T], Generic[T]):
    """True when the wrapped test is not met."""

    def evaluate(self, value: T) -> bool:
        return not self.test(value)

    def describe(self) -> str:
        return f"NOT {self.test.describe()}"


__all__ = ["TestCondition", "IsTrue", "IsNotTrue"]
