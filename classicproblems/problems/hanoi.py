"""
Towers of Hanoi solved recursively over three explicit stacks.
"""

import logging
from typing import Generic, List, Tuple, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar('T')

DEFAULT_DISC_COUNT = 3


class Stack(Generic[T]):
    """Last-in first-out container."""

    def __init__(self):
        self._container: List[T] = []

    def push(self, item: T):
        self._container.append(item)

    def pop(self) -> T:
        """Remove and return the top item; IndexError when empty."""
        return self._container.pop()

    def peek(self) -> T:
        return self._container[-1]

    @property
    def is_empty(self) -> bool:
        return not self._container

    def __len__(self):
        return len(self._container)

    def __repr__(self):
        return repr(self._container)


def hanoi(begin: Stack, end: Stack, temp: Stack, n: int) -> int:
    """
    Move the top n discs from begin to end using temp as scratch space.

    Args:
        begin: Tower the discs start on
        end: Tower the discs finish on
        temp: Intermediate tower
        n: Number of discs to move

    Returns:
        Number of single-disc moves performed (2**n - 1)

    Raises:
        ValueError: If n is less than 1
    """
    if n < 1:
        raise ValueError(f"Number of discs must be at least 1, got {n}")

    if n == 1:
        end.push(begin.pop())
        return 1

    moves = hanoi(begin, temp, end, n - 1)
    moves += hanoi(begin, end, temp, 1)
    moves += hanoi(temp, end, begin, n - 1)
    return moves


def solve_towers(num_discs: int = DEFAULT_DISC_COUNT) -> Tuple[Stack, Stack, Stack]:
    """
    Build three towers with all discs on the first and move them to the third.

    Args:
        num_discs: Number of discs stacked on the first tower

    Returns:
        Tuple of (tower_a, tower_b, tower_c) after solving
    """
    tower_a: Stack[int] = Stack()
    tower_b: Stack[int] = Stack()
    tower_c: Stack[int] = Stack()

    for disc in range(1, num_discs + 1):
        tower_a.push(disc)

    moves = hanoi(tower_a, tower_c, tower_b, num_discs)
    logger.info(f"Moved {num_discs} discs in {moves} moves")
    return tower_a, tower_b, tower_c
