"""Element storage with explicit capacity, shared by the vector container."""

from __future__ import annotations

import sys
from typing import Any, Iterable, Iterator, List

from .errors import ContainerOverflowError

__all__ = ["VectorStorage"]


class VectorStorage:
    """A list of elements plus the capacity a contiguous buffer would have.

    Capacity follows the container's growth policy: it starts at the
    number of initial elements, only grows on insertion when the spare
    room is too small, and never shrinks on erasure or truncation.
    The underlying list object is kept for the storage's lifetime, so
    positions taken on it remain tied to the same storage.
    """

    MAX_SIZE = sys.maxsize

    __slots__ = ("_items", "_capacity")

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: List[Any] = list(items)
        self._capacity = len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __setitem__(self, index, value) -> None:
        self._items[index] = value

    def __repr__(self) -> str:
        return f"VectorStorage({self._items!r}, capacity={self._capacity})"

    def capacity(self) -> int:
        """Number of elements that fit without growing."""
        return self._capacity

    def max_size(self) -> int:
        """Largest number of elements the storage may hold."""
        return self.MAX_SIZE

    def reserve(self, n: int) -> None:
        """Make room for at least *n* elements; never shrinks."""
        if n < 0:
            raise ValueError("reserve size must not be negative")
        if n > self.max_size():
            raise ContainerOverflowError("vector::reserve")
        if self._capacity < n:
            self._capacity = n

    def grown_capacity(self, extra: int) -> int:
        """The capacity after making room for *extra* more elements.

        The current capacity is kept when the spare room suffices;
        otherwise it becomes ``size + max(size, extra)``.
        """
        if extra < 0:
            raise ValueError("extra must not be negative")
        size = len(self._items)
        if self._capacity - size >= extra:
            return self._capacity
        if self.max_size() - size < extra:
            raise ContainerOverflowError("vector")
        return min(size + max(size, extra), self.max_size())

    def _check_index(self, index: int, name: str = "index") -> None:
        if not 0 <= index <= len(self._items):
            raise IndexError(f"{name} {index} is out of range")

    def insert_many(self, index: int, items: Iterable[Any]) -> None:
        """Insert *items* before position *index*, growing if needed."""
        self._check_index(index)
        new_items = list(items)
        if not new_items:
            return
        self._capacity = self.grown_capacity(len(new_items))
        self._items[index:index] = new_items

    def erase_slice(self, start: int, stop: int) -> None:
        """Remove the elements in ``[start, stop)``."""
        self._check_index(start, "start")
        self._check_index(stop, "stop")
        if start > stop:
            raise ValueError("start must not come after stop")
        del self._items[start:stop]

    def truncate(self, size: int) -> None:
        """Drop every element from position *size* on."""
        self._check_index(size, "size")
        del self._items[size:]

    def replace_all(self, items: Iterable[Any]) -> None:
        """Replace the contents with *items*, growing only if they do not fit."""
        new_items = list(items)
        if len(new_items) > self.max_size():
            raise ContainerOverflowError("vector")
        if len(new_items) > self._capacity:
            self._capacity = len(new_items)
        self._items[:] = new_items