"""
Fibonacci numbers computed three ways: naive recursion, memoized recursion,
and iteration.
"""

from typing import Dict

# base cases
_fib_memo: Dict[int, int] = {0: 0, 1: 1}


def _check(n: int):
    if n < 0:
        raise ValueError(f"Fibonacci is undefined for negative n, got {n}")


def fib_recursive(n: int) -> int:
    """Naive recursion; exponential time."""
    _check(n)
    if n < 2:
        return n
    return fib_recursive(n - 2) + fib_recursive(n - 1)


def fib_memoized(n: int) -> int:
    """
    Look results up in a module-level table, extending it as needed.

    The table is filled upward from its largest cached entry, so a cold
    call for a large n does not recurse.

    Args:
        n: Position in the sequence

    Returns:
        The n-th Fibonacci number
    """
    _check(n)
    if n not in _fib_memo:
        for i in range(max(_fib_memo) + 1, n + 1):
            _fib_memo[i] = _fib_memo[i - 1] + _fib_memo[i - 2]
    return _fib_memo[n]


def fib_iterative(n: int) -> int:
    """
    Iterate pairwise from the base cases.

    Args:
        n: Position in the sequence

    Returns:
        The n-th Fibonacci number
    """
    _check(n)
    if n == 0:
        return n
    last, next_ = 0, 1
    for _ in range(1, n):
        last, next_ = next_, last + next_
    return next_
