"""
Tests for replace/add/remove on nested conditions.

Edits address nodes by their synthetic id, never mutate the original tree
and always return a node of the receiver's variant.
"""

import logging

from condition_tree import And, IsNotTrue, IsTrue, Or
from tests.utils.string_tests import ContainsString, EqualsString, StartsWithLowerCase


class TestReplace:
    """Tests for NestedCondition.replace."""

    def test_replace_leaf(self, starts_lower, contains_one):
        condition = And([starts_lower, contains_one])

        assert condition.evaluate("payeeOne") is True
        assert condition.evaluate("PayeeOne") is False

        new_condition = condition.replace(starts_lower, IsTrue(ContainsString(value="Two")))

        assert new_condition.evaluate("One") is False
        assert new_condition.evaluate("OneTwo") is True

    def test_original_is_untouched(self, starts_lower, contains_one, contains_two):
        condition = And([starts_lower, contains_one])

        new_condition = condition.replace(starts_lower, contains_two)

        assert condition.conditions == (starts_lower, contains_one)
        assert condition.conditions[0] is starts_lower
        assert new_condition is not condition
        assert new_condition.conditions[1] is contains_one

    def test_replace_addresses_instance_not_value(self):
        first = IsTrue(EqualsString(value="a"))
        second = IsTrue(EqualsString(value="a"))
        replacement = IsTrue(EqualsString(value="b"))
        condition = Or([first, second])

        new_condition = condition.replace(second, replacement)

        assert new_condition.conditions[0] is first
        assert new_condition.conditions[1] is replacement

    def test_replace_with_additional(self, starts_lower, contains_one, contains_two, equals_a):
        condition = Or([starts_lower, contains_one])

        new_condition = condition.replace(starts_lower, contains_two, additional=[equals_a])

        assert list(new_condition.conditions) == [contains_two, equals_a, contains_one]

    def test_replace_in_nested_child(self, starts_lower, contains_one, contains_two, equals_a):
        inner = Or([contains_one, equals_a])
        condition = And([starts_lower, inner])

        new_condition = condition.replace(equals_a, contains_two)

        assert isinstance(new_condition, And)
        new_inner = new_condition.conditions[1]
        assert isinstance(new_inner, Or)
        assert new_inner is not inner
        assert list(new_inner.conditions) == [contains_one, contains_two]
        assert new_condition.conditions[0] is starts_lower

    def test_replace_root_with_nested(self, starts_lower, contains_one):
        condition = And([starts_lower])
        replacement = Or([contains_one])

        assert condition.replace(condition, replacement) is replacement

    def test_replace_nested_child_with_nested(self, starts_lower, contains_one, contains_two):
        inner = And([contains_one])
        condition = Or([starts_lower, inner])
        replacement = Or([contains_two])

        new_condition = condition.replace(inner, replacement)

        assert isinstance(new_condition, Or)
        assert new_condition.conditions[1] is replacement

    def test_nested_node_is_not_replaced_by_leaf(self, starts_lower, contains_one, contains_two):
        inner = And([contains_one])
        condition = Or([starts_lower, inner])

        new_condition = condition.replace(inner, contains_two)

        assert new_condition == condition

    def test_missing_target_returns_equal_copy(self, starts_lower, contains_one, contains_two):
        condition = And([starts_lower, Or([contains_one])])

        new_condition = condition.replace(IsTrue(StartsWithLowerCase()), contains_two)

        assert new_condition == condition
        assert new_condition is not condition
        assert new_condition.id != condition.id

    def test_replace_keeps_variant(self, equals_a, equals_b):
        assert isinstance(Or([equals_a]).replace(equals_a, equals_b), Or)
        assert isinstance(And([equals_a]).replace(equals_a, equals_b), And)

    def test_replace_is_logged(self, caplog, equals_a, equals_b):
        caplog.set_level(logging.DEBUG, logger="condition_tree")

        And([equals_a]).replace(equals_a, equals_b)

        messages = [r.getMessage() for r in caplog.records]
        assert any("Calling TreeEditingMixin.replace" in m for m in messages)
        assert sum("TreeEditingMixin.replace returned" in m for m in messages) == 1


class TestAdd:
    """Tests for NestedCondition.add."""

    def test_add_appends(self, equals_a, equals_b, contains_one):
        condition = And([equals_a, equals_b])

        new_condition = condition.add(contains_one)

        assert isinstance(new_condition, And)
        assert list(new_condition.conditions) == [equals_a, equals_b, contains_one]
        assert condition.conditions == (equals_a, equals_b)

    def test_add_value_equal_duplicate_is_noop(self, equals_a, equals_b):
        condition = Or([equals_a, equals_b])

        new_condition = condition.add(IsTrue(EqualsString(value="a")))

        assert isinstance(new_condition, Or)
        assert new_condition.conditions[0] is equals_a
        assert new_condition.conditions[1] is equals_b
        assert len(new_condition.conditions) == 2

    def test_add_collapses_existing_duplicates(self, equals_a, equals_b):
        duplicate = IsTrue(EqualsString(value="a"))
        condition = And([equals_a, duplicate, equals_b])

        new_condition = condition.add(equals_b)

        assert list(new_condition.conditions) == [equals_a, equals_b]
        assert not new_condition.contains_duplicates()

    def test_add_nested(self, equals_a, equals_b):
        condition = And([equals_a])

        new_condition = condition.add(Or([equals_b]))

        assert new_condition.evaluate("a") is False
        assert And([]).add(Or([])).contains_empty_child()


class TestRemove:
    """Tests for NestedCondition.remove."""

    def test_remove(self, equals_a, equals_b):
        condition = Or([equals_a, equals_b])

        new_condition = condition.remove(equals_a)

        assert isinstance(new_condition, Or)
        assert list(new_condition.conditions) == [equals_b]
        assert len(condition.conditions) == 2

    def test_remove_keeps_value_equal_instances(self, equals_a):
        other = IsTrue(EqualsString(value="a"))
        condition = And([equals_a, other])

        new_condition = condition.remove(equals_a)

        assert len(new_condition.conditions) == 1
        assert new_condition.conditions[0] is other

    def test_remove_missing_is_noop(self, equals_a, equals_b):
        condition = And([equals_a])

        new_condition = condition.remove(equals_b)

        assert new_condition == condition
        assert new_condition.conditions[0] is equals_a

    def test_remove_is_not_recursive(self, equals_a, equals_b):
        condition = And([Or([equals_a]), equals_b])

        assert condition.remove(equals_a) == condition

    def test_remove_then_add_restores_behavior(self, starts_lower, not_equals_a, contains_one):
        condition = And([starts_lower, not_equals_a, Or([contains_one])])

        restored = condition.remove(not_equals_a).add(not_equals_a)

        assert restored == condition
        for value in ["a", "b", "bOne", "One", ""]:
            assert restored.evaluate(value) == condition.evaluate(value)

    def test_remove_leaf_of_negated_test(self):
        test = EqualsString(value="a")
        negated = IsNotTrue(test)
        condition = Or([IsTrue(test), negated])

        assert condition.evaluate("b") is True
        assert condition.remove(negated).evaluate("b") is False
