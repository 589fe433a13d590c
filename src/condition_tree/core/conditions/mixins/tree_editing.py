"""Tree editing mixin for nested conditions.

Provides methods that derive a new tree from an existing one. Nothing is
mutated: nodes on the path to an edit are rebuilt, untouched subtrees are
shared by reference with the original tree.

Nodes are addressed by their synthetic id, not by value equality, so of two
value-equal leaves only the one passed in is affected.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Iterator, List, Sequence

from condition_tree.utils.logging import log_calls

if TYPE_CHECKING:
    from condition_tree.core.conditions.base import Condition
    from condition_tree.core.conditions.logical_conditions import NestedCondition


class TreeEditingMixin:
    """Mixin providing replace/add/remove on nested conditions."""

    @log_calls()
    def replace(
        self,
        old: "Condition",
        replacement: "Condition",
        additional: Sequence["Condition"] = (),
    ) -> "NestedCondition":
        """
        Replace ``old`` with ``replacement`` in this condition tree.

        Generally this will be called on the root condition.

        Args:
            old: The exact node instance to replace
            replacement: Condition put in place of ``old``
            additional: Conditions inserted right after ``replacement``
                when ``old`` is a leaf

        Returns:
            A new tree of the same variant as the receiver, or
            ``replacement`` itself when it is nested and ``old`` is the
            receiver
        """
        return self._replace(old, replacement, tuple(additional))

    def _replace(
        self,
        old: "Condition",
        replacement: "Condition",
        additional: Sequence["Condition"],
    ) -> "NestedCondition":
        from condition_tree.core.conditions.logical_conditions import NestedCondition

        if isinstance(replacement, NestedCondition) and self.id == old.id:
            # Replace the entire subtree.
            return replacement

        def replace_children() -> Iterator["Condition"]:
            for condition in self.conditions:
                if isinstance(condition, NestedCondition):
                    yield condition._replace(old, replacement, additional)
                elif condition.id == old.id:
                    yield replacement
                    yield from additional
                else:
                    yield condition

        return self._rebuild(replace_children())

    @log_calls()
    def add(self, condition: "Condition") -> "NestedCondition":
        """
        Add a condition to the receiver.

        Children are treated as a set: value-equal children collapse into
        the first occurrence and order is otherwise preserved, so adding a
        value-equal duplicate leaves the membership unchanged.

        Returns:
            A new condition of the same variant with the added child
        """
        return self._rebuild(dict.fromkeys([*self.conditions, condition]))

    @log_calls()
    def remove(self, condition: "Condition") -> "NestedCondition":
        """
        Remove the exact ``condition`` instance from the receiver's children.

        Value-equal children with another id are kept.

        Returns:
            A new condition of the same variant without the removed child
        """
        return self._rebuild(c for c in self.conditions if c.id != condition.id)

    def _rebuild(self, conditions: Iterable["Condition"]) -> "NestedCondition":
        children: List["Condition"] = list(conditions)
        return self.__class__(children)


__all__ = ["TreeEditingMixin"]
