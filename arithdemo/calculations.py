"""Pure arithmetic operations behind the demo.

Each function is total over integers and has no side effects. Python ints
are arbitrary precision, so none of these can overflow.
"""

from __future__ import annotations

from typing import Iterable


def add(a: int, b: int) -> int:
    """Return the sum of two integers."""
    return a + b


def sum_sequence(numbers: Iterable[int]) -> int:
    """Accumulate a running total over an ordered sequence.

    Args:
        numbers: Any iterable of integers (list, tuple, generator).

    Returns:
        The total, starting from 0.  An empty sequence yields 0.
    """
    total = 0
    for n in numbers:
        total += n
    return total


def transform(value: int) -> int:
    """Double the value, then add ten."""
    multiplied = value * 2
    return multiplied + 10
