"""Pair type and key/value extractors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

__all__ = ["Pair", "make_pair", "set_key", "map_key", "map_value"]

T1 = TypeVar("T1")
T2 = TypeVar("T2")


@dataclass
class Pair(Generic[T1, T2]):
    """Two values compared first by ``first`` then by ``second``.

    Ordering uses only ``<`` on the members, as the element types may not
    provide anything else.
    """

    first: Any = None
    second: Any = None

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented
        return self.first < other.first or (
            not (other.first < self.first) and self.second < other.second
        )

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented
        return not other < self

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented
        return other < self

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented
        return not self < other


def make_pair(first: Any, second: Any) -> Pair:
    """Build a :class:`Pair` from two values."""
    return Pair(first, second)


def set_key(value: Any) -> Any:
    """Key of a set element: the element itself.

    Raises ``TypeError`` if the element is unhashable and so cannot be a key.
    """
    hash(value)
    return value


def map_key(pair: Pair) -> Any:
    """Key of a map element: the pair's first member."""
    return pair.first


def map_value(pair: Pair) -> Any:
    """Mapped value of a map element: the pair's second member."""
    return pair.second