"""Doubly linked list whose nodes can be used as positions."""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterator, Optional


class DNode:
    """A node of a doubly linked list, holding one value."""

    __slots__ = ("value", "next", "prev")

    def __init__(self, value: Any = None) -> None:
        self.value = value
        self.next: Optional[DNode] = None
        self.prev: Optional[DNode] = None

    def __repr__(self) -> str:
        return f"DNode({self.value!r})"


def _default_render(value: Any) -> str:
    return f"[{value}]"


class DoublyLinkedList:
    """Doubly linked list with insertion before or after any node."""

    def __init__(self) -> None:
        self._front: Optional[DNode] = None
        self._back: Optional[DNode] = None

    def push_back(self, value: Any) -> DNode:
        """Append a value at the back and return its node."""
        node = DNode(value)
        if self._back is None:
            self._front = self._back = node
        else:
            self._back.next = node
            node.prev = self._back
            self._back = node
        return node

    def push_front(self, value: Any) -> DNode:
        """Insert a value at the front and return its node."""
        node = DNode(value)
        if self._front is None:
            self._front = self._back = node
        else:
            self._front.prev = node
            node.next = self._front
            self._front = node
        return node

    def pop_front(self) -> Any:
        """Remove and return the front value; IndexError if empty."""
        node = self._front
        if node is None:
            raise IndexError("pop from empty list")
        self._front = node.next
        if self._front is not None:
            self._front.prev = None
        else:
            self._back = None
        node.next = node.prev = None
        return node.value

    def pop_back(self) -> Any:
        """Remove and return the back value; IndexError if empty."""
        node = self._back
        if node is None:
            raise IndexError("pop from empty list")
        self._back = node.prev
        if self._back is not None:
            self._back.next = None
        else:
            self._front = None
        node.next = node.prev = None
        return node.value

    def insert_after(self, pos: Optional[DNode], value: Any) -> DNode:
        """Insert a value after pos (at the back if pos is None)."""
        if pos is None:
            return self.push_back(value)
        node = DNode(value)
        following = pos.next
        pos.next = node
        node.prev = pos
        node.next = following
        if following is not None:
            following.prev = node
        else:
            self._back = node
        return node

    def insert_before(self, pos: Optional[DNode], value: Any) -> DNode:
        """Insert a value before pos (at the front if pos is None)."""
        if pos is None:
            return self.push_front(value)
        node = DNode(value)
        preceding = pos.prev
        pos.prev = node
        node.next = pos
        node.prev = preceding
        if preceding is not None:
            preceding.next = node
        else:
            self._front = node
        return node

    def erase(self, node: DNode) -> Any:
        """Unlink a node of this list and return its value."""
        if node is self._front:
            return self.pop_front()
        if node is self._back:
            return self.pop_back()
        before, after = node.prev, node.next
        before.next = after
        after.prev = before
        node.next = node.prev = None
        return node.value

    def clear(self) -> None:
        """Remove every value."""
        while self._front is not None:
            self.pop_front()

    def is_empty(self) -> bool:
        return self._front is None and self._back is None

    def front(self) -> Optional[DNode]:
        """Return the front node, or None if the list is empty."""
        return self._front

    def back(self) -> Optional[DNode]:
        """Return the back node, or None if the list is empty."""
        return self._back

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __iter__(self) -> Iterator[Any]:
        node = self._front
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._back
        while node is not None:
            yield node.value
            node = node.prev

    def pprint(self, render: Optional[Callable[[Any], str]] = None) -> None:
        """Print the list as ``NULL <= [a] <==> [b] => NULL``."""
        render = render or _default_render
        body = " <==> ".join(render(value) for value in self)
        sys.stdout.write(f"NULL <= {body} => NULL\n")