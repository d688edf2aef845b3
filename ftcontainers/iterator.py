"""Random-access positions into a sequence, forward and reversed."""

from __future__ import annotations

from typing import Any, MutableSequence

__all__ = ["NormalIterator", "ReverseIterator"]


class NormalIterator:
    """A position in a mutable sequence.

    Iterators are value objects: arithmetic, ``+=`` and ``-=`` produce new
    iterators, while ``value`` reads and writes the element at the position.
    """

    __slots__ = ("_sequence", "_index")

    def __init__(self, sequence: MutableSequence[Any], index: int = 0) -> None:
        self._sequence = sequence
        self._index = index

    def base(self) -> int:
        """The index this iterator refers to."""
        return self._index

    @property
    def sequence(self) -> MutableSequence[Any]:
        return self._sequence

    def _position(self, offset: int = 0) -> int:
        index = self._index + offset
        if not 0 <= index < len(self._sequence):
            raise IndexError(f"iterator position {index} is not dereferenceable")
        return index

    def _check_same(self, other: NormalIterator) -> None:
        if other._sequence is not self._sequence:
            raise ValueError("iterators refer to different sequences")

    @property
    def value(self) -> Any:
        """The element at this position."""
        return self._sequence[self._position()]

    @value.setter
    def value(self, new_value: Any) -> None:
        self._sequence[self._position()] = new_value

    def __add__(self, n: int) -> NormalIterator:
        if not isinstance(n, int):
            return NotImplemented
        return NormalIterator(self._sequence, self._index + n)

    def __radd__(self, n: int) -> NormalIterator:
        return self.__add__(n)

    def __sub__(self, other):
        if isinstance(other, NormalIterator):
            self._check_same(other)
            return self._index - other._index
        if isinstance(other, int):
            return NormalIterator(self._sequence, self._index - other)
        return NotImplemented

    def __iadd__(self, n: int) -> NormalIterator:
        return self + n

    def __isub__(self, n: int) -> NormalIterator:
        return self - n

    def __getitem__(self, n: int) -> Any:
        return self._sequence[self._position(n)]

    def __setitem__(self, n: int, new_value: Any) -> None:
        self._sequence[self._position(n)] = new_value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NormalIterator):
            return NotImplemented
        return other._sequence is self._sequence and other._index == self._index

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, NormalIterator):
            return NotImplemented
        self._check_same(other)
        return self._index < other._index

    def __le__(self, other: object) -> bool:
        if not isinstance(other, NormalIterator):
            return NotImplemented
        self._check_same(other)
        return self._index <= other._index

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, NormalIterator):
            return NotImplemented
        self._check_same(other)
        return self._index > other._index

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, NormalIterator):
            return NotImplemented
        self._check_same(other)
        return self._index >= other._index

    def __hash__(self) -> int:
        return hash((id(self._sequence), self._index))

    def __repr__(self) -> str:
        return f"NormalIterator(index={self._index})"


class ReverseIterator:
    """Walks a sequence backwards on top of a forward iterator.

    The element seen is the one just before ``base()``, so a reverse
    iterator built from the end of a sequence refers to its last element.
    """

    __slots__ = ("_base",)

    def __init__(self, base: Any) -> None:
        self._base = base + 0

    def base(self) -> Any:
        """The underlying forward iterator."""
        return self._base

    @property
    def value(self) -> Any:
        """The element at this position."""
        return (self._base - 1).value

    @value.setter
    def value(self, new_value: Any) -> None:
        (self._base - 1).value = new_value

    def __add__(self, n: int) -> ReverseIterator:
        if not isinstance(n, int):
            return NotImplemented
        return ReverseIterator(self._base - n)

    def __radd__(self, n: int) -> ReverseIterator:
        return self.__add__(n)

    def __sub__(self, other):
        if isinstance(other, ReverseIterator):
            return other._base - self._base
        if isinstance(other, int):
            return ReverseIterator(self._base + other)
        return NotImplemented

    def __iadd__(self, n: int) -> ReverseIterator:
        return self + n

    def __isub__(self, n: int) -> ReverseIterator:
        return self - n

    def __getitem__(self, n: int) -> Any:
        return (self + n).value

    def __setitem__(self, n: int, new_value: Any) -> None:
        (self + n).value = new_value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReverseIterator):
            return NotImplemented
        return self._base == other._base

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ReverseIterator):
            return NotImplemented
        return other._base < self._base

    def __le__(self, other: object) -> bool:
        if not isinstance(other, ReverseIterator):
            return NotImplemented
        return other._base <= self._base

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, ReverseIterator):
            return NotImplemented
        return self._base < other._base

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, ReverseIterator):
            return NotImplemented
        return self._base <= other._base

    def __hash__(self) -> int:
        return hash((ReverseIterator, self._base))

    def __repr__(self) -> str:
        return f"ReverseIterator({self._base!r})"