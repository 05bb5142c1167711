"""A growable array with an explicit capacity."""

from __future__ import annotations

from typing import Any, Iterator

GROWTH_PERCENT = 30


class DynArray:
    """Array whose size and capacity are tracked and grown explicitly."""

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._items: list[Any] = []
        self._capacity = capacity
        self.growth = GROWTH_PERCENT

    def append(self, value: Any) -> None:
        """Add a value at the end, growing the capacity when full."""
        if len(self._items) >= self._capacity:
            cap = self._capacity
            if cap > 100:
                new_cap = cap + cap * self.growth // 100
            else:
                new_cap = cap + self.growth
            self.set_capacity(new_cap)
        self._items.append(value)

    def set_capacity(self, capacity: int) -> None:
        """Change the capacity; elements beyond it are dropped."""
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        if len(self._items) > capacity:
            del self._items[capacity:]
        self._capacity = capacity

    def set_size(self, size: int) -> None:
        """Change the size, growing the capacity if needed; new slots hold None."""
        if size < 0:
            raise ValueError("size must not be negative")
        if size > self._capacity:
            self.set_capacity(size)
        if size < len(self._items):
            del self._items[size:]
        else:
            self._items.extend([None] * (size - len(self._items)))

    def capacity(self) -> int:
        """Return the number of slots reserved."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self._items[index] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"DynArray({self._items!r}, capacity={self._capacity})"