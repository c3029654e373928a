"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Optional


class _Node:
    __slots__ = ("content", "next")

    def __init__(self, content: Any) -> None:
        self.content = content
        self.next: Optional[_Node] = None


class LinkedList:
    """Singly linked list supporting front and back insertion."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for item in items or ():
            self.push_back(item)

    def push_front(self, content: Any) -> None:
        """Insert *content* at the head."""
        node = _Node(content)
        node.next = self._head
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def push_back(self, content: Any) -> None:
        """Append *content* at the tail."""
        node = _Node(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def last(self) -> Any:
        """Content of the last element, or None when the list is empty."""
        return None if self._tail is None else self._tail.content

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.content
            node = node.next

    def clear(self, delete: Callable[[Any], None]) -> None:
        """Pass every content to *delete* in order, then empty the list."""
        node = self._head
        while node is not None:
            following = node.next
            delete(node.content)
            node = following
        self._head = self._tail = None
        self._size = 0

    def for_each(self, func: Callable[[Any], None]) -> None:
        """Call *func* on every content in order."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any], delete: Callable[[Any], None]) -> LinkedList:
        """Return a new list of ``func(content)`` for every element.

        If *func* fails part way, the contents produced so far are passed
        to *delete* and the error propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(func(content))
        except Exception:
            result.clear(delete)
            raise
        return result