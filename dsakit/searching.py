"""Searching in sequences."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise


def binary_search(values: Sequence[int], key: int) -> int | None:
    """Return an index of key in ascending values, or None if absent.

    Raises ValueError when values are not in ascending order.
    """
    if any(later < earlier for earlier, later in pairwise(values)):
        raise ValueError("binary_search() requires values in ascending order")
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if key < values[mid]:
            high = mid - 1
        elif key > values[mid]:
            low = mid + 1
        else:
            return mid
    return None


def linear_search(values: Sequence[int], key: int) -> int | None:
    """Return the index of the first occurrence of key, or None if absent."""
    return next((index for index, value in enumerate(values) if value == key), None)