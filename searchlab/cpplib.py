"""Small numeric helpers: a greeting, Fibonacci numbers and a maximum finder."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["hello_world", "fib", "find_max"]


def hello_world() -> str:
    """Return the fixed greeting banner."""
    return "**** Hello World ****"


def fib(n: int) -> int:
    """Return the n-th Fibonacci number.

    fib(0) is 0 and fib(1) is 1. Any n <= 1 is returned unchanged, so a
    negative input gives a negative result.
    """
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def find_max(inputs: Iterable[int]) -> int:
    """Return the largest value in ``inputs``, or -1 when it is empty."""
    return max(inputs, default=-1)