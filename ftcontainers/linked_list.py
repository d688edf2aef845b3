"""Doubly and singly linked lists."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, List, Optional

__all__ = ["Node", "DoublyLinkedList", "SinglyLinkedList"]


@dataclass(eq=False)
class Node:
    """A list node holding ``data`` and links to its neighbours."""

    data: Any
    next: Optional["Node"] = field(default=None, repr=False)
    prev: Optional["Node"] = field(default=None, repr=False)


class DoublyLinkedList:
    """A list whose nodes link both forwards and backwards."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        self._size = 0
        for item in items:
            self.append(item)

    def __iter__(self) -> Iterator[Any]:
        current = self.head
        while current is not None:
            yield current.data
            current = current.next

    def __len__(self) -> int:
        return self._size

    def _nodes(self) -> Iterator[Node]:
        current = self.head
        while current is not None:
            yield current
            current = current.next

    def append(self, data: Any) -> Node:
        """Add *data* after the last node and return its node."""
        node = Node(data)
        if self.head is None:
            self.head = node
        else:
            tail = self.head
            while tail.next is not None:
                tail = tail.next
            tail.next = node
            node.prev = tail
        self._size += 1
        return node

    def node_at(self, index: int) -> Node:
        """The node at position *index*, counting from zero."""
        if index < 0:
            raise IndexError(f"index {index} is out of range")
        for position, node in enumerate(self._nodes()):
            if position == index:
                return node
        raise IndexError(f"index {index} is out of range")

    def remove(self, node: Node) -> None:
        """Unlink *node* from the list."""
        if node is self.head:
            self.head = node.next
            if self.head is not None:
                self.head.prev = None
        else:
            if node.prev is None or node.prev.next is not node:
                raise ValueError("node is not in this list")
            node.prev.next = node.next
            if node.next is not None:
                node.next.prev = node.prev
        node.next = None
        node.prev = None
        self._size -= 1

    def insert_after(self, current: Node, data: Any) -> Node:
        """Insert *data* right after *current* and return its node."""
        if current is None:
            raise ValueError("cannot insert after a missing node")
        node = Node(data, next=current.next, prev=current)
        if current.next is not None:
            current.next.prev = node
        current.next = node
        self._size += 1
        return node

    def render(self) -> str:
        """The list as a framed, tab-separated listing."""
        body = "".join(f"{data}\t" for data in self)
        return (
            "PRINT CURRENT NODES\n"
            "===================\n"
            f"{body}\n"
            "=================\n"
        )


class SinglyLinkedList:
    """A list built by pushing onto its front."""

    def __init__(self) -> None:
        self.head: Optional[Node] = None

    def __iter__(self) -> Iterator[Any]:
        current = self.head
        while current is not None:
            yield current.data
            current = current.next

    def push_front(self, text: Any) -> None:
        """Make *text* the new first element."""
        self.head = Node(text, next=self.head)

    def render(self) -> str:
        """The elements joined by arrows, first to last."""
        items: List[str] = [str(item) for item in self]
        if not items:
            raise ValueError("list is empty")
        return "->".join(items)