"""Search routines over sorted sequences.

Every function returns the index of the value in the sequence, or -1 when
the value is not present.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Any

__all__ = [
    "binary_search",
    "ternary_search",
    "exponential_search",
    "binary_search_par",
]

NOT_FOUND = -1


def _binary_search_range(nums: Sequence[Any], low: int, high: int, n: Any) -> int:
    """Binary search for ``n`` in ``nums[low..high]`` (inclusive bounds)."""
    while low <= high:
        mid = low + (high - low) // 2
        value = nums[mid]
        if value == n:
            return mid
        if value > n:
            high = mid - 1
        else:
            low = mid + 1
    return NOT_FOUND


def binary_search(nums: Sequence[Any], n: Any) -> int:
    """Classic binary search over a sorted sequence."""
    if not nums:
        return NOT_FOUND
    return _binary_search_range(nums, 0, len(nums) - 1, n)


def ternary_search(nums: Sequence[Any], n: Any) -> int:
    """Split the range in three, then binary search the third that can hold ``n``."""
    if not nums:
        return NOT_FOUND
    low, high = 0, len(nums) - 1
    mid1 = low + (high - low) // 3
    mid2 = high - (high - low) // 3

    if nums[mid1] == n:
        return mid1
    if nums[mid2] == n:
        return mid2

    if n < nums[mid1]:
        return _binary_search_range(nums, low, mid1 - 1, n)
    if n > nums[mid2]:
        return _binary_search_range(nums, mid2 + 1, high, n)
    return _binary_search_range(nums, mid1 + 1, mid2 - 1, n)


def exponential_search(nums: Sequence[Any], n: Any) -> int:
    """Double a bound until it passes ``n``, then binary search behind it."""
    if not nums:
        return NOT_FOUND
    size = len(nums)
    bound = 1
    while bound < size and nums[bound] < n:
        bound *= 2
    return _binary_search_range(nums, bound // 2, min(bound + 1, size - 1), n)


def binary_search_par(nums: Sequence[Any], n: Any, number_of_threads: int = 10) -> int:
    """Binary search each of ``number_of_threads`` chunks in its own thread.

    The result of the first chunk, in order, that holds ``n`` is returned.
    """
    if number_of_threads < 1:
        raise ValueError("number_of_threads must be at least 1")
    if not nums:
        return NOT_FOUND

    size = len(nums)
    step = math.ceil(size / number_of_threads)
    chunks = [
        (low, min(low + step - 1, size - 1))
        for low in (i * step for i in range(number_of_threads))
    ]
    chunks = [(low, high) for low, high in chunks if low <= high]

    with ThreadPoolExecutor(max_workers=len(chunks)) as pool:
        futures = [
            pool.submit(_binary_search_range, nums, low, high, n)
            for low, high in chunks
        ]
        results = [future.result() for future in futures]

    return next((r for r in results if r != NOT_FOUND), NOT_FOUND)