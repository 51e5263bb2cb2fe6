"""String divisibility."""

from __future__ import annotations

from math import gcd


def gcd_of_strings(str1: str, str2: str) -> str:
    """Return the longest string that, repeated, builds both arguments.

    Returns ``""`` when no such string exists.
    """
    if str1 + str2 != str2 + str1:
        return ""
    return str1[: gcd(len(str1), len(str2))]