"""
Mixins for NestedCondition.

These mixins break down nested-condition behavior into logical components:
- TreeEditingMixin: replace/add/remove returning new trees
- ValidityMixin: duplicate and empty-subtree detection
"""

from condition_tree.core.conditions.mixins.tree_editing import TreeEditingMixin
from condition_tree.core.conditions.mixins.validity import ValidityMixin

__all__ = [
    "TreeEditingMixin",
    "ValidityMixin",
]
