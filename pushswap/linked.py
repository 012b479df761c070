"""A singly linked sequence of arbitrary contents."""

from __future__ import annotations

from collections import deque
from typing import Any, Callable, Deque, Iterable, Iterator, Optional


class LinkedList:
    """An ordered collection supporting insertion at both ends.

    Callbacks named ``delete`` release a content that leaves the list; they
    are optional and called once per removed content.
    """

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: Deque[Any] = deque(items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"LinkedList({list(self._items)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return list(self._items) == list(other._items)

    def add_front(self, content: Any) -> None:
        """Insert ``content`` before the first element."""
        self._items.appendleft(content)

    def add_back(self, content: Any) -> None:
        """Append ``content`` after the last element."""
        self._items.append(content)

    def last(self) -> Any:
        """The content of the last element, or None when the list is empty."""
        return self._items[-1] if self._items else None

    def remove_first(self, delete: Optional[Callable[[Any], Any]] = None) -> None:
        """Remove the first element, passing its content to ``delete``."""
        if not self._items:
            raise IndexError("remove_first from an empty list")
        content = self._items.popleft()
        if delete is not None:
            delete(content)

    def clear(self, delete: Optional[Callable[[Any], Any]] = None) -> None:
        """Remove every element in order, passing each content to ``delete``."""
        while self._items:
            content = self._items.popleft()
            if delete is not None:
                delete(content)

    def iterate(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on each content in order."""
        for content in self._items:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Optional[Callable[[Any], Any]] = None,
    ) -> Optional["LinkedList"]:
        """A new list of ``func(content)`` for each element.

        If ``func`` returns None the mapping fails: the contents produced so
        far are passed to ``delete`` and None is returned. The list itself is
        never changed.
        """
        result = LinkedList()
        for content in self._items:
            mapped = func(content)
            if mapped is None:
                result.clear(delete)
                return None
            result.add_back(mapped)
        return result