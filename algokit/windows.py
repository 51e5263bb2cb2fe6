"""Sliding-window and two-pointer scans over sequences."""

from __future__ import annotations

from collections.abc import Sequence

VOWELS = frozenset("aeiou")


def find_max_average(nums: Sequence[int], k: int) -> float:
    """Return the largest mean of ``k`` consecutive values.

    Returns ``0.0`` when there are fewer than ``k`` values.
    """
    if k < 1:
        raise ValueError(f"window length must be positive, got {k}")
    if len(nums) < k:
        return 0.0
    current = best = sum(nums[:k])
    for leaving, entering in zip(nums, nums[k:]):
        current += entering - leaving
        best = max(best, current)
    return best / k


def _longest_with_zeros(nums: Sequence[int], allowed: int) -> int:
    """Length of the longest window holding at most ``allowed`` zeros."""
    left = 0
    zeros = 0
    best = 0
    for right, value in enumerate(nums):
        if value == 0:
            zeros += 1
        while zeros > allowed:
            if nums[left] == 0:
                zeros -= 1
            left += 1
        best = max(best, right - left + 1)
    return best


def longest_ones(nums: Sequence[int], k: int) -> int:
    """Return the longest run of ones after flipping at most ``k`` zeros."""
    return _longest_with_zeros(nums, k)


def longest_subarray(nums: Sequence[int]) -> int:
    """Return the longest run of ones after deleting exactly one element."""
    return max(_longest_with_zeros(nums, 1) - 1, 0)


def max_vowels(s: str, k: int) -> int:
    """Return the most lowercase vowels found in any ``k`` consecutive characters."""
    current = best = sum(ch in VOWELS for ch in s[:k])
    for leaving, entering in zip(s, s[k:]):
        current += (entering in VOWELS) - (leaving in VOWELS)
        best = max(best, current)
    return best


def max_area(height: Sequence[int]) -> int:
    """Return the most water two of the vertical lines can hold."""
    left, right = 0, len(height) - 1
    area = 0
    while left < right:
        area = max(area, (right - left) * min(height[left], height[right]))
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return area


def is_subsequence(s: str, t: str) -> bool:
    """Tell whether ``s`` can be obtained by deleting characters of ``t``."""
    remaining = iter(t)
    return all(ch in remaining for ch in s)