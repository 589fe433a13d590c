"""Formatting helpers for presenting condition trees on a console."""

from __future__ import annotations

from typing import Optional, Union

from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from condition_tree.core.conditions.base import Condition
from condition_tree.core.conditions.drafts import TestConditionDraft
from condition_tree.core.conditions.logical_conditions import NestedCondition

Renderable = Union[Condition, TestConditionDraft]


def format_condition(condition: Optional[Renderable]) -> str:
    """Format a condition or draft as a single line."""
    if condition is None:
        return "<missing>"

    if isinstance(condition, TestConditionDraft):
        test = condition.test.describe() if condition.test is not None else "<missing>"
        return f"{condition.type.value}: {test}"

    return condition.describe()


def _label(condition: Renderable, duplicate: bool = False) -> str:
    if isinstance(condition, NestedCondition):
        label = f"[bold]{condition.type.value.upper()}[/bold]"
        if not condition.conditions:
            label += " [red](empty)[/red]"
    elif isinstance(condition, TestConditionDraft):
        label = f"[dim]{escape(format_condition(condition))}[/dim]"
    else:
        label = f"{condition.type.value}: {escape(format_condition(condition))}"
    if duplicate:
        label += " [yellow](duplicate)[/yellow]"
    return label


def build_condition_tree(
    condition: Renderable,
    tree: Optional[Tree] = None,
    duplicate: bool = False,
) -> Tree:
    """
    Build a rich `Tree` for a condition tree.

    Empty nested conditions and children that repeat an earlier sibling are
    flagged in the labels.

    Args:
        condition: Root condition or draft to render
        tree: Existing tree to attach the rendering to
        duplicate: Whether ``condition`` repeats an earlier sibling

    Returns:
        The rich tree node holding the rendered condition
    """
    label = _label(condition, duplicate)
    node = Tree(label) if tree is None else tree.add(label)

    if isinstance(condition, NestedCondition):
        seen = set()
        for child in condition.conditions:
            build_condition_tree(child, node, duplicate=child in seen)
            seen.add(child)
    return node


def print_condition_tree(condition: Renderable, console: Optional[Console] = None) -> None:
    """Print a condition tree to ``console`` (stdout by default)."""
    (console or Console()).print(build_condition_tree(condition))


__all__ = ["format_condition", "build_condition_tree", "print_condition_tree"]
