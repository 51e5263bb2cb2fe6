"""Problems from a 2019 regional contest."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import combinations
from math import dist

NO_PATH = 0
"""Value in ``paths`` meaning a table leads nowhere."""


def insert_ic(name: str) -> str:
    """Insert ``"ic"`` just before the last character of ``name``."""
    if not name:
        raise ValueError("name must not be empty")
    return name[:-1] + "ic" + name[-1]


def _strictly_nested(distance: float, r1: int, r2: int) -> bool:
    small, large = sorted((r1, r2))
    return small < large and distance + small < large


def circles_separate(circles: Sequence[tuple[int, int, int]]) -> bool:
    """Tell whether no two ``(x, y, radius)`` circles touch or cross.

    Circles that meet, even at a single point, or that coincide fail the
    test; a circle lying strictly inside a larger one passes.
    """
    for (x1, y1, r1), (x2, y2, r2) in combinations(circles, 2):
        distance = dist((x1, y1), (x2, y2))
        if distance - r1 - r2 <= 0 and not _strictly_nested(distance, r1, r2):
            return False
    return True


def max_binary_path(
    roquefort: Sequence[int], paths: Sequence[int], length: int
) -> str:
    """Return the largest bit string read along a walk of ``length`` tables.

    Table ``i`` gives bit ``1`` if ``roquefort[i] == 1``, else ``0``, and
    leads to table ``paths[i]`` (counted from 1), or nowhere if that is
    ``NO_PATH``. Walks that end early are ignored; if none lasts, a string
    of zeros is returned.
    """
    if len(roquefort) != len(paths):
        raise ValueError("roquefort and paths must have the same length")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    for target in paths:
        if not NO_PATH <= target <= len(paths):
            raise ValueError(f"path target {target} is not a table")

    best = "0" * length
    for start in range(len(roquefort)):
        bits: list[str] = []
        table = start
        while len(bits) < length and table >= 0:
            bits.append("1" if roquefort[table] == 1 else "0")
            table = paths[table] - 1
        if len(bits) == length:
            best = max(best, "".join(bits))
    return best