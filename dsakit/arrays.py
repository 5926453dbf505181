"""Classic algorithms over sequences of numbers."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import combinations


def second_minimum(values: Iterable[int]) -> int:
    """Return the second smallest distinct value.

    Raises ValueError when the input is empty or holds fewer than two
    distinct values.
    """
    distinct = sorted(set(values))
    if not distinct:
        raise ValueError("second_minimum() arg is an empty sequence")
    if len(distinct) < 2:
        raise ValueError("second_minimum() needs at least two distinct values")
    return distinct[1]


def max_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous run (Kadane's algorithm).

    Raises ValueError when the input is empty.
    """
    best: int | None = None
    running = 0
    for value in values:
        running += value
        if best is None or running > best:
            best = running
        if running < 0:
            running = 0
    if best is None:
        raise ValueError("max_subarray_sum() arg is an empty sequence")
    return best


def majority_element(values: Iterable[int]) -> int | None:
    """Return the element occurring more than len/2 times, or None if there is none.

    Uses Moore's voting algorithm followed by a verification pass.
    """
    items = list(values)
    candidate = None
    count = 0
    for item in items:
        if count == 0:
            candidate = item
            count = 1
        elif item == candidate:
            count += 1
        else:
            count -= 1
    if candidate is not None and items.count(candidate) * 2 > len(items):
        return candidate
    return None


def find_pair_with_sum(values: Iterable[int], target: int) -> tuple[int, int] | None:
    """Return the first pair (in index order) whose sum equals target, or None."""
    return next(
        ((a, b) for a, b in combinations(list(values), 2) if a + b == target),
        None,
    )