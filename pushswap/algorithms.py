"""Strategies that sort stack ``a`` using only the allowed moves."""

from __future__ import annotations

from typing import Sequence

from .parsing import InputError
from .stack import Node, Stack

_CHUNK_FACTOR_NUM = 14
_CHUNK_FACTOR_DEN = 10
_SMALL_LIMIT = 7


def approx_sqrt(number: int) -> int:
    """Integer square root used to size the chunks of the large sort.

    Values below 4 give 1. A perfect square gives one less than its root
    and any other number gives the floor of its root.
    """
    if number < 4:
        return 1
    root = 2
    while root * root < number:
        root += 1
    return root - 1


def rank(values: Sequence[int]) -> list[int]:
    """The rank of each value in the ascending order of all values."""
    position = {}
    for place, value in enumerate(sorted(values)):
        position.setdefault(value, place)
    return [position[value] for value in values]


def _top(stack: Stack) -> Node:
    return next(iter(stack))


def is_rot_sort(stack: Stack) -> bool:
    """True when the top three values are a rotation of sorted order."""
    a, b, c = stack.values()[:3]
    return (a < b < c) or (b < c and a > c) or (c < a < b)


def _rotate_toward(stack: Stack, position: int, length: int) -> None:
    if position < length - position:
        stack.rotate()
    else:
        stack.reverse()


def simple_sort(stack: Stack, length: int) -> None:
    """Sort a stack of three elements in at most two moves."""
    if stack.is_sorted():
        return
    position = stack.position_of(stack.min_index())
    if not is_rot_sort(stack):
        stack.swap()
        if stack.is_sorted():
            return
    _rotate_toward(stack, position, length)


def insertion_sort(stack_a: Stack, stack_b: Stack, length: int) -> None:
    """Sort four to seven elements by parking the smallest ones on ``b``."""
    for _ in range(length - 3):
        smallest = stack_a.min_index()
        while _top(stack_a).index != smallest:
            if stack_a.position_of(smallest) <= len(stack_a) // 2:
                stack_a.rotate()
            else:
                stack_a.reverse()
        stack_a.push(stack_b)
    simple_sort(stack_a, 3)
    while len(stack_b):
        stack_b.push(stack_a)


def k_sort_push(stack_a: Stack, stack_b: Stack, length: int) -> None:
    """Move every element to ``b`` in rough chunks of increasing rank."""
    pushed = 0
    window = approx_sqrt(length) * _CHUNK_FACTOR_NUM // _CHUNK_FACTOR_DEN
    while len(stack_a):
        index = _top(stack_a).index
        if index <= pushed:
            stack_a.push(stack_b)
            pushed += 1
        elif index <= pushed + window:
            stack_a.push(stack_b)
            stack_b.rotate()
            pushed += 1
        else:
            stack_a.rotate()


def k_sort_pull(stack_a: Stack, stack_b: Stack, length: int) -> None:
    """Bring elements back to ``a`` from the largest rank down."""
    for wanted in range(length - 1, -1, -1):
        if stack_b.position_of(wanted) <= len(stack_b) // 2:
            while _top(stack_b).index != wanted:
                stack_b.rotate()
        else:
            while _top(stack_b).index != wanted:
                stack_b.reverse()
        stack_b.push(stack_a)


def sort_stacks(stack_a: Stack, stack_b: Stack, length: int) -> None:
    """Sort ``stack_a`` choosing the strategy by its length.

    Raises InputError when the stack is already sorted.
    """
    if stack_a.is_sorted():
        raise InputError("stack is already sorted")
    if length == 2:
        first, second = stack_a.values()[:2]
        if first > second:
            stack_a.swap()
    elif length == 3:
        simple_sort(stack_a, length)
    elif 3 < length <= _SMALL_LIMIT:
        insertion_sort(stack_a, stack_b, length)
    elif length > _SMALL_LIMIT:
        k_sort_push(stack_a, stack_b, length)
        k_sort_pull(stack_a, stack_b, length)
    else:
        raise InputError(f"cannot sort {length} elements")


def solve(numbers: Sequence[int]) -> list[str]:
    """The list of moves that sorts ``numbers`` onto stack ``a``."""
    moves: list[str] = []
    stack_a = Stack("a", numbers, moves.append)
    stack_b = Stack("b", (), moves.append)
    for node, node_rank in zip(stack_a, rank(numbers)):
        node.index = node_rank
    sort_stacks(stack_a, stack_b, len(numbers))
    return moves