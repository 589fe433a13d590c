"""
Shared fixtures for condition tree tests.
"""

import pytest

from condition_tree import IsNotTrue, IsTrue
from tests.utils.string_tests import ContainsString, EqualsString, StartsWithLowerCase


@pytest.fixture
def starts_lower() -> IsTrue:
    return IsTrue(StartsWithLowerCase())


@pytest.fixture
def contains_one() -> IsTrue:
    return IsTrue(ContainsString(value="One"))


@pytest.fixture
def contains_two() -> IsTrue:
    return IsTrue(ContainsString(value="Two"))


@pytest.fixture
def equals_a() -> IsTrue:
    return IsTrue(EqualsString(value="a"))


@pytest.fixture
def equals_b() -> IsTrue:
    return IsTrue(EqualsString(value="b"))


@pytest.fixture
def not_equals_a() -> IsNotTrue:
    return IsNotTrue(EqualsString(value="a"))
