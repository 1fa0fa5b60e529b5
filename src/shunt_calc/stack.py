"""
LIFO stack used by the converter (operators) and the evaluator (values).
"""

from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class Stack(Generic[T]):
    """Thin wrapper over a list exposing only push, pop and peek."""

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: list[T] = []

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item. Raises IndexError when empty."""
        return self._items.pop()

    def peek(self) -> T | None:
        """Return the top item without removing it, or None when empty."""
        return self._items[-1] if self._items else None

    def is_empty(self) -> bool:
        return not self._items

    def drain(self) -> Iterator[T]:
        """Pop every item, top first."""
        while self._items:
            yield self._items.pop()

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"
