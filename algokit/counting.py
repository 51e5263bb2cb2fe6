"""Problems solved by counting elements or keeping a heap of them."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Hashable, Iterable, Sequence


def unique_occurrences(arr: Iterable[Hashable]) -> bool:
    """Tell whether every distinct value occurs a different number of times."""
    counts = Counter(arr).values()
    return len(set(counts)) == len(counts)


def close_strings(word1: str, word2: str) -> bool:
    """Tell whether one word can become the other by swapping characters.

    Two operations are allowed: swapping any two positions, and swapping
    every occurrence of one present character with another present one.
    """
    freq1 = Counter(word1)
    freq2 = Counter(word2)
    return freq1.keys() == freq2.keys() and sorted(freq1.values()) == sorted(
        freq2.values()
    )


def find_kth_largest(nums: Sequence[int], k: int) -> int:
    """Return the ``k``-th largest value of ``nums``, counting duplicates."""
    if not 1 <= k <= len(nums):
        raise ValueError(f"k must be between 1 and {len(nums)}, got {k}")
    return heapq.nlargest(k, nums)[-1]