"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Deleter = Callable[[Any], object]


@dataclass
class ListNode:
    """One link of a list: its content and the node after it."""

    content: Any
    next: Optional[ListNode] = None


class LinkedList:
    """A singly linked list whose iteration yields the node contents."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[ListNode] = None
        for item in items:
            self.add_back(item)

    def _nodes(self) -> Iterator[ListNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def add_front(self, content: Any) -> ListNode:
        """Put a new node holding ``content`` at the front and return it."""
        node = ListNode(content, self.head)
        self.head = node
        return node

    def add_back(self, content: Any) -> ListNode:
        """Put a new node holding ``content`` at the back and return it."""
        node = ListNode(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[ListNode]:
        """The final node, or None when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Optional[Deleter]) -> None:
        """Pass every content to ``delete`` from front to back, then empty the list.

        Nothing happens when ``delete`` is None.
        """
        if delete is None:
            return
        node = self.head
        while node is not None:
            following = node.next
            delete(node.content)
            node = following
        self.head = None

    def delete_first(self, delete: Optional[Deleter]) -> None:
        """Remove the first node, passing its content to ``delete``.

        Nothing happens when the list is empty or ``delete`` is None.
        """
        if self.head is None or delete is None:
            return
        node = self.head
        self.head = node.next
        delete(node.content)

    def iterate(self, func: Optional[Callable[[Any], object]]) -> None:
        """Call ``func`` on every content, starting from the last node.

        Nothing happens when ``func`` is None.
        """
        if func is None:
            return
        for content in reversed(list(self)):
            func(content)

    def map(
        self,
        func: Optional[Callable[[Any], Any]],
        delete: Optional[Deleter],
    ) -> Optional[LinkedList]:
        """A new list of ``func`` applied to each content.

        Returns None when ``func`` or ``delete`` is None. If ``func`` raises,
        the contents made so far are passed to ``delete`` and the error
        propagates.
        """
        if func is None or delete is None:
            return None
        result = LinkedList()
        try:
            for content in self:
                result.add_back(func(content))
        except Exception:
            result.clear(delete)
            raise
        return result