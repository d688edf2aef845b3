"""Printable walkthroughs of vector comparisons and reverse iterators."""

from __future__ import annotations

import argparse
from typing import Any, Iterator, List, Optional, Sequence

from .vector import Vector, swap

__all__ = [
    "compare_report",
    "size_report",
    "relational_demo",
    "reverse_iterator_demo",
    "main",
]

_RULE = "###############################################"


def compare_report(lhs: Vector, rhs: Vector) -> str:
    """The six relational results of *lhs* against *rhs*, as 1/0 flags."""
    return (
        f"eq: {int(lhs == rhs)} | ne: {int(lhs != rhs)}\n"
        f"lt: {int(lhs < rhs)} | le: {int(lhs <= rhs)}\n"
        f"gt: {int(lhs > rhs)} | ge: {int(lhs >= rhs)}\n"
    )


def size_report(vector: Vector, print_content: bool = True) -> str:
    """Size, capacity sanity, max size and optionally the elements."""
    size = vector.size()
    capacity_ok = "OK" if vector.capacity() >= size else "KO"
    lines = [
        f"size: {size}",
        f"capacity: {capacity_ok}",
        f"max_size: {vector.max_size()}",
    ]
    if print_content:
        lines.append("")
        lines.append("Content is:")
        lines.extend(f"- {item}" for item in vector)
    lines.append(_RULE)
    return "\n".join(lines) + "\n"


def relational_demo() -> str:
    """Compare vectors through resizing, element changes and a swap."""
    reports: List[str] = []

    def record(lhs: Vector, rhs: Vector) -> None:
        reports.append(f"############### [{len(reports)}] ###############\n")
        reports[-1] += compare_report(lhs, rhs)

    vct = Vector.filled(4, 0)
    vct2 = Vector.filled(4, 0)
    record(vct, vct)
    record(vct, vct2)
    vct2.resize(10, 0)
    record(vct, vct2)
    record(vct2, vct)
    vct[2] = 42
    record(vct, vct2)
    record(vct2, vct)
    swap(vct, vct2)
    record(vct, vct2)
    record(vct2, vct)
    return "".join(reports)


def _flag(value: bool) -> str:
    return "true" if value else "false"


def _order_lines(first: Any, second: Any, redo: bool = True) -> Iterator[str]:
    yield _flag(first < second)
    yield _flag(first <= second)
    yield _flag(first > second)
    yield _flag(first >= second)
    if redo:
        yield from _order_lines(second, first, False)


def reverse_iterator_demo() -> str:
    """Fill a vector through reverse iterators and compare their positions."""
    size = 5
    vct = Vector.filled(size, 0)
    it_0 = vct.rbegin()
    it_1 = vct.rend()
    value = size
    while it_0 != it_1:
        it_0.value = value
        it_0 += 1
        value -= 1

    parts = [size_report(vct, True)]
    it_0 = vct.rbegin()
    cit_0 = vct.rbegin()
    cit_1 = vct.rend()
    it_mid = it_0 + 3
    cit_mid = it_mid

    lines = [_flag(it_0 + 3 == cit_0 + 3 and cit_0 + 3 == it_mid), "\t\tft_eq_ope:"]
    pairs = [
        (it_0 + 3, it_mid),
        (it_0, it_1),
        (it_1 - 3, it_mid),
        (cit_0 + 3, cit_mid),
        (cit_0, cit_1),
        (cit_1 - 3, cit_mid),
        (it_0 + 3, cit_mid),
        (it_mid, cit_0 + 3),
        (it_0, cit_1),
        (it_1, cit_0),
        (it_1 - 3, cit_mid),
        (it_mid, cit_1 - 3),
    ]
    for first, second in pairs:
        lines.extend(_order_lines(first, second))
    parts.append("\n".join(lines) + "\n")
    return "".join(parts)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the chosen walkthrough, or both."""
    parser = argparse.ArgumentParser(description="Vector walkthroughs.")
    parser.add_argument(
        "demo",
        nargs="?",
        choices=("relational", "reverse", "all"),
        default="all",
    )
    args = parser.parse_args(argv)
    if args.demo in ("relational", "all"):
        print(relational_demo(), end="")
    if args.demo in ("reverse", "all"):
        print(reverse_iterator_demo(), end="")
    return 0