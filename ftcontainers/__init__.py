"""A capacity-tracking vector, forward and reverse iterators, pairs, range comparisons and linked lists."""

__version__ = "0.1.0"

__all__ = [
    "algorithm",
    "demo",
    "errors",
    "iterator",
    "linked_list",
    "storage",
    "utility",
    "vector",
]