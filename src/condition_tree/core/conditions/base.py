from __future__ import annotations

"""Base models for condition trees.

A condition tree is built from two kinds of objects:

- `Test`: a caller-supplied predicate over some value. Its declared pydantic
  fields are its identity for equality and hashing.
- `Condition`: a node of the tree. Every node gets an opaque synthetic id at
  construction time. The id is only used to address one exact node instance
  while editing a tree and never takes part in `==` or `hash()`.
"""

import uuid
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, Hashable, Mapping, TypeVar

from pydantic import BaseModel, ConfigDict, PrivateAttr

if TYPE_CHECKING:
    from condition_tree.core.conditions.types import ConditionType

T = TypeVar("T")


class _FrozenModel(BaseModel):
    """Base settings shared by all condition tree models."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    # Not a pytest test class.
    __test__ = False


class Test(_FrozenModel, ABC, Generic[T]):
    """A pure predicate over values of type ``T``.

    Subclasses declare their comparison fields as regular pydantic fields and
    implement ``__call__``. Two tests of the same class with the same field
    values are equal, even when constructed separately.
    """

    @abstractmethod
    def __call__(self, value: T) -> bool:
        raise NotImplementedError

    def describe(self) -> str:
        values = ", ".join(f"{name}={value!r}" for name, value in self)
        return f"{self.__class__.__name__}({values})"

    def __hash__(self) -> int:
        return hash((_origin(self), _freeze(self)))


def _origin(model: BaseModel) -> type:
    """Unparametrized class of a model, so `IsTrue[str]` compares like `IsTrue`."""
    return model.__pydantic_generic_metadata__["origin"] or model.__class__


def _freeze(value: Any) -> Hashable:
    """Hashable form of a field value; lists, dicts and sets hash by content."""
    if isinstance(value, BaseModel):
        return tuple((name, _freeze(v)) for name, v in value)
    if isinstance(value, Mapping):
        return frozenset((k, _freeze(v)) for k, v in value.items())
    if isinstance(value, (set, frozenset)):
        return frozenset(_freeze(v) for v in value)
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value


def _new_id() -> str:
    return uuid.uuid4().hex


class Condition(_FrozenModel, ABC, Generic[T]):
    """Base class for all condition tree nodes over values of type ``T``.

    The canonical form used for equality and its hash are computed once, at
    construction. Children are built before their parents, so hashing or
    comparing a tree never re-walks subtrees that were already hashed.
    """

    _id: str = PrivateAttr(default_factory=_new_id)
    _canonical: Any = PrivateAttr(default=None)
    _hash: int = PrivateAttr(default=0)

    def model_post_init(self, context: Any) -> None:
        self._canonical = self._props()
        self._hash = hash((_origin(self), self._hash_key(self._canonical)))

    @property
    def id(self) -> str:
        """Synthetic identifier of this node instance."""
        return self._id

    @abstractmethod
    def evaluate(self, value: T) -> bool:
        raise NotImplementedError

    def describe(self) -> str:
        return self.__class__.__name__

    @property
    def type(self) -> "ConditionType":
        """Serialization-friendly tag of this node's variant."""
        from condition_tree.core.conditions.registry import condition_type_of

        return condition_type_of(self)

    @abstractmethod
    def _props(self) -> Any:
        """Canonical value compared by `==`."""
        raise NotImplementedError

    def _hash_key(self, props: Any) -> Hashable:
        return props

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Condition):
            return NotImplemented
        return (
            self._hash == other._hash
            and _origin(self) is _origin(other)
            and self._canonical == other._canonical
        )

    def __hash__(self) -> int:
        return self._hash


__all__ = ["Condition", "Test"]
