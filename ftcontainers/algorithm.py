"""Sequence comparison algorithms."""

from __future__ import annotations

import operator
from typing import Any, Callable, Iterable, Optional

__all__ = ["equal_to", "equal", "lexicographical_compare"]

_MISSING = object()


def equal_to(x: Any, y: Any) -> bool:
    """Default equality predicate."""
    return x == y


def equal(
    first: Iterable[Any],
    second: Iterable[Any],
    pred: Callable[[Any, Any], bool] = equal_to,
) -> bool:
    """Whether every element of *first* matches the element of *second* at the same position.

    Elements of *second* past the length of *first* are ignored; if *second*
    is shorter than *first* the ranges are not equal.
    """
    others = iter(second)
    for x in first:
        y = next(others, _MISSING)
        if y is _MISSING or not pred(x, y):
            return False
    return True


def lexicographical_compare(
    first: Iterable[Any],
    second: Iterable[Any],
    comp: Optional[Callable[[Any, Any], bool]] = None,
) -> bool:
    """Whether *first* orders strictly before *second*.

    *comp* is a strict "less than" predicate; ``<`` is used when omitted.
    """
    less = operator.lt if comp is None else comp
    left, right = iter(first), iter(second)
    while True:
        x = next(left, _MISSING)
        if x is _MISSING:
            return next(right, _MISSING) is not _MISSING
        y = next(right, _MISSING)
        if y is _MISSING:
            return False
        if less(x, y):
            return True
        if less(y, x):
            return False