"""Stacks of numbers and the moves allowed on them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from itertools import pairwise
from typing import Callable, Iterable, Iterator, Optional

Logger = Callable[[str], object]


@dataclass
class Node:
    """One element of a stack: its value and its rank among all values."""

    data: int
    index: int = 0


class Stack:
    """A named stack whose top is its first element.

    Each move that changes the stack reports its name ("sa", "rb", "rra",
    "pb", ...) to ``log`` when one is given.
    """

    def __init__(
        self,
        name: str,
        values: Iterable[int] = (),
        log: Optional[Logger] = None,
    ) -> None:
        self.name = name
        self._nodes: deque[Node] = deque(Node(value) for value in values)
        self._log = log

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"Stack({self.name!r}, {self.values()!r})"

    def _emit(self, move: str) -> None:
        if self._log is not None:
            self._log(move)

    def swap(self) -> None:
        """Exchange the two top elements; does nothing with fewer than two."""
        if len(self._nodes) < 2:
            return
        first = self._nodes.popleft()
        second = self._nodes.popleft()
        self._nodes.appendleft(first)
        self._nodes.appendleft(second)
        self._emit(f"s{self.name}")

    def rotate(self) -> None:
        """Move the top element to the bottom."""
        if len(self._nodes) < 2:
            return
        self._nodes.rotate(-1)
        self._emit(f"r{self.name}")

    def reverse(self) -> None:
        """Move the bottom element to the top."""
        if len(self._nodes) < 2:
            return
        self._nodes.rotate(1)
        self._emit(f"rr{self.name}")

    def push(self, target: Stack) -> None:
        """Move the top element, with its rank, onto ``target``."""
        if not self._nodes:
            return
        target._nodes.appendleft(self._nodes.popleft())
        self._emit(f"p{target.name}")

    def is_sorted(self) -> bool:
        """True when values never decrease from top to bottom."""
        return all(a.data <= b.data for a, b in pairwise(self._nodes))

    def min_index(self) -> int:
        """The smallest rank in the stack, or -1 when it is empty."""
        if not self._nodes:
            return -1
        return min(node.index for node in self._nodes)

    def position_of(self, index: int) -> int:
        """Distance from the top of the node with rank ``index``.

        An empty stack gives -1 and a rank that is absent gives 0.
        """
        if not self._nodes:
            return -1
        for position, node in enumerate(self._nodes):
            if node.index == index:
                return position
        return 0

    def values(self) -> list[int]:
        """The values from top to bottom."""
        return [node.data for node in self._nodes]