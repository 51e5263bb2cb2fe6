"""Problems solved with a stack."""

from __future__ import annotations

from collections.abc import Iterable


def asteroid_collision(asteroids: Iterable[int]) -> list[int]:
    """Return the asteroids left after all collisions.

    The sign gives the direction (positive moves right), the magnitude the
    size. When two meet the smaller explodes; equal ones both explode.
    """
    survivors: list[int] = []
    for asteroid in asteroids:
        alive = True
        while alive and asteroid < 0 and survivors and survivors[-1] > 0:
            top = survivors[-1]
            if top < -asteroid:
                survivors.pop()
            elif top == -asteroid:
                survivors.pop()
                alive = False
            else:
                alive = False
        if alive:
            survivors.append(asteroid)
    return survivors


def decode_string(s: str) -> str:
    """Expand every ``count[text]`` in ``s``, innermost first."""
    pending: list[tuple[str, int]] = []
    current = ""
    number = 0
    for ch in s:
        if ch.isdigit():
            number = number * 10 + int(ch)
        elif ch == "[":
            pending.append((current, number))
            current, number = "", 0
        elif ch == "]":
            if not pending:
                raise ValueError("unbalanced ']' in encoded string")
            prefix, times = pending.pop()
            current = prefix + current * times
        else:
            current += ch
    return current


def remove_stars(s: str) -> str:
    """Let each ``*`` delete itself and the closest kept character to its left."""
    kept: list[str] = []
    for ch in s:
        if ch != "*":
            kept.append(ch)
        elif kept:
            kept.pop()
        else:
            raise ValueError("'*' has no character to its left to remove")
    return "".join(kept)