"""Singly linked list with an optional hook called on removed values."""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterator, Optional


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any, nxt: Optional["_Node"] = None) -> None:
        self.value = value
        self.next = nxt


def _default_render(value: Any) -> str:
    return f"[{value}]"


class SinglyLinkedList:
    """Singly linked list usable as a stack (front) or a queue (back to front)."""

    def __init__(self, on_remove: Optional[Callable[[Any], None]] = None) -> None:
        self._front: Optional[_Node] = None
        self._back: Optional[_Node] = None
        self.on_remove = on_remove

    def push_back(self, value: Any) -> None:
        """Append a value at the back."""
        node = _Node(value)
        if self._back is None:
            self._front = self._back = node
        else:
            self._back.next = node
            self._back = node

    def push_front(self, value: Any) -> None:
        """Insert a value at the front."""
        node = _Node(value, self._front)
        self._front = node
        if self._back is None:
            self._back = node

    def pop_front(self) -> Any:
        """Remove and return the front value; IndexError if empty."""
        node = self._front
        if node is None:
            raise IndexError("pop from empty list")
        self._front = node.next
        if self._front is None:
            self._back = None
        if self.on_remove is not None:
            self.on_remove(node.value)
        return node.value

    def front(self) -> Any:
        """Return the front value; IndexError if empty."""
        if self._front is None:
            raise IndexError("front of empty list")
        return self._front.value

    def back(self) -> Any:
        """Return the back value; IndexError if empty."""
        if self._back is None:
            raise IndexError("back of empty list")
        return self._back.value

    def is_empty(self) -> bool:
        return self._front is None

    def clear(self) -> None:
        """Remove every value, front first."""
        while self._front is not None:
            self.pop_front()

    def foreach(self, op: Callable[[Any], Any]) -> None:
        """Call op on each value in order, stopping when it returns a true value."""
        for value in self:
            if op(value):
                break

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __iter__(self) -> Iterator[Any]:
        node = self._front
        while node is not None:
            yield node.value
            node = node.next

    def pprint(self, render: Optional[Callable[[Any], str]] = None) -> None:
        """Print the list as ``[a] => [b] => NULL``."""
        render = render or _default_render
        parts = [f"{render(value)} => " for value in self]
        sys.stdout.write("".join(parts) + "NULL\n")