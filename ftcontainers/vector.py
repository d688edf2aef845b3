"""A growable sequence with explicit capacity and iterator positions."""

from __future__ import annotations

import copy
from typing import Any, Iterable, Iterator, Union

from .algorithm import equal, lexicographical_compare
from .iterator import NormalIterator, ReverseIterator
from .storage import VectorStorage

__all__ = ["Vector", "swap"]

Position = Union[NormalIterator, int]


class Vector:
    """A dynamic array whose capacity grows the way a contiguous buffer would.

    Positions are :class:`NormalIterator` objects (plain indices are accepted
    too). Swapping two vectors exchanges their storage, so iterators keep
    referring to the same elements afterwards.
    """

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._storage = VectorStorage(items)

    @classmethod
    def filled(cls, count: int, value: Any = None) -> Vector:
        """A vector of *count* copies of *value*."""
        return cls(_copies(count, value))

    # -- sequence protocol -------------------------------------------------

    def __len__(self) -> int:
        return len(self._storage)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._storage)

    def __reversed__(self) -> Iterator[Any]:
        for index in range(len(self._storage) - 1, -1, -1):
            yield self._storage[index]

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Vector(self._storage[index])
        return self._storage[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self._storage[index] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return len(self) == len(other) and equal(self, other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return lexicographical_compare(self, other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return not lexicographical_compare(other, self)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return lexicographical_compare(other, self)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return not lexicographical_compare(self, other)

    __hash__ = None  # type: ignore[assignment]

    def __copy__(self) -> Vector:
        return Vector(self._storage)

    def __repr__(self) -> str:
        return f"Vector({list(self._storage)!r})"

    # -- iterators ----------------------------------------------------------

    def begin(self) -> NormalIterator:
        """Position of the first element."""
        return NormalIterator(self._storage, 0)

    def end(self) -> NormalIterator:
        """Position one past the last element."""
        return NormalIterator(self._storage, len(self._storage))

    def rbegin(self) -> ReverseIterator:
        """Reverse position of the last element."""
        return ReverseIterator(self.end())

    def rend(self) -> ReverseIterator:
        """Reverse position one before the first element."""
        return ReverseIterator(self.begin())

    # -- capacity -----------------------------------------------------------

    def size(self) -> int:
        """Number of elements."""
        return len(self._storage)

    def capacity(self) -> int:
        """Number of elements that fit without growing."""
        return self._storage.capacity()

    def max_size(self) -> int:
        """Largest number of elements the vector may hold."""
        return self._storage.max_size()

    def reserve(self, n: int) -> None:
        """Make room for at least *n* elements."""
        self._storage.reserve(n)

    def empty(self) -> bool:
        """Whether the vector has no elements."""
        return len(self._storage) == 0

    def resize(self, new_size: int, value: Any = None) -> None:
        """Shrink to *new_size* or grow by appending copies of *value*."""
        if new_size < 0:
            raise ValueError("size must not be negative")
        size = len(self._storage)
        if new_size < size:
            self._storage.truncate(new_size)
        else:
            self._storage.insert_many(size, _copies(new_size - size, value))

    # -- element access -----------------------------------------------------

    def at(self, n: int) -> Any:
        """The element at *n*, checked against the size."""
        if not 0 <= n < len(self._storage):
            raise IndexError("vector::range_check")
        return self._storage[n]

    def front(self) -> Any:
        """The first element."""
        if self.empty():
            raise IndexError("front of an empty vector")
        return self._storage[0]

    def back(self) -> Any:
        """The last element."""
        if self.empty():
            raise IndexError("back of an empty vector")
        return self._storage[len(self._storage) - 1]

    # -- modifiers ----------------------------------------------------------

    def assign(self, items: Iterable[Any]) -> None:
        """Replace the contents with *items*."""
        self._storage.replace_all(items)

    def assign_fill(self, count: int, value: Any) -> None:
        """Replace the contents with *count* copies of *value*."""
        self._storage.replace_all(_copies(count, value))

    def push_back(self, value: Any) -> None:
        """Append *value*."""
        self._storage.insert_many(len(self._storage), [value])

    def pop_back(self) -> None:
        """Remove the last element."""
        if self.empty():
            raise IndexError("pop_back on an empty vector")
        self._storage.truncate(len(self._storage) - 1)

    def insert(self, position: Position, value: Any) -> NormalIterator:
        """Insert *value* before *position*; return the new element's position."""
        index = self._index(position)
        self._storage.insert_many(index, [value])
        return NormalIterator(self._storage, index)

    def insert_fill(self, position: Position, count: int, value: Any) -> None:
        """Insert *count* copies of *value* before *position*."""
        self._storage.insert_many(self._index(position), _copies(count, value))

    def insert_range(self, position: Position, items: Iterable[Any]) -> None:
        """Insert *items* before *position*, keeping their order."""
        self._storage.insert_many(self._index(position), items)

    def erase(self, position: Position) -> NormalIterator:
        """Remove the element at *position*; return the position that follows."""
        index = self._index(position)
        self._storage.erase_slice(index, index + 1)
        return NormalIterator(self._storage, index)

    def erase_range(self, first: Position, last: Position) -> NormalIterator:
        """Remove the elements in ``[first, last)``; return *first*."""
        start = self._index(first)
        self._storage.erase_slice(start, self._index(last))
        return NormalIterator(self._storage, start)

    def swap(self, other: Vector) -> None:
        """Exchange contents with *other*."""
        self._storage, other._storage = other._storage, self._storage

    def clear(self) -> None:
        """Remove every element; capacity is kept."""
        self._storage.truncate(0)

    def _index(self, position: Position) -> int:
        if isinstance(position, NormalIterator):
            if position.sequence is not self._storage:
                raise ValueError("iterator does not belong to this vector")
            return position.base()
        if isinstance(position, int):
            return position
        raise TypeError("position must be an iterator or an index")


def _copies(count: int, value: Any) -> list:
    if count < 0:
        raise ValueError("count must not be negative")
    return [copy.copy(value) for _ in range(count)]


def swap(x: Vector, y: Vector) -> None:
    """Exchange the contents of two vectors."""
    x.swap(y)