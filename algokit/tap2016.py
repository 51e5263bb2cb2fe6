"""Problems from a 2016 regional contest."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import Enum


def lacks_letter_i(name: str) -> bool:
    """Tell whether ``name`` contains no ``i`` in either case."""
    return "i" not in name.lower()


def count_unlocked(
    n: int, prerequisites: Iterable[tuple[int, int]], order: Iterable[int]
) -> list[int]:
    """Count the subjects that count as passed after each approval.

    Subjects are numbered from 1 to ``n``. A pair ``(a, b)`` in
    ``prerequisites`` means ``a`` must count before ``b`` can. Subjects
    are approved in the given ``order``; an approved subject counts once
    all its prerequisites count. The total after each approval is returned.
    """
    if n < 0:
        raise ValueError(f"number of subjects must not be negative, got {n}")

    def index(subject: int) -> int:
        if not 1 <= subject <= n:
            raise ValueError(f"subject {subject} is not between 1 and {n}")
        return subject - 1

    pending = [0] * n
    unlocks: list[list[int]] = [[] for _ in range(n)]
    for before, after in prerequisites:
        first, second = index(before), index(after)
        pending[second] += 1
        unlocks[first].append(second)

    approved = [False] * n
    counted = 0
    totals: list[int] = []
    for subject in order:
        current = index(subject)
        approved[current] = True
        if pending[current] == 0:
            stack = [current]
            while stack:
                node = stack.pop()
                counted += 1
                for follower in unlocks[node]:
                    pending[follower] -= 1
                    if pending[follower] == 0 and approved[follower]:
                        stack.append(follower)
        totals.append(counted)
    return totals


class _Tail(Enum):
    NONE = "none"
    OPEN = "open"
    CLOSE = "close"
    CLOSE_OPEN = "close-open"
    OPEN_CLOSE = "open-close"


_ON_OPEN = {
    _Tail.NONE: _Tail.OPEN,
    _Tail.OPEN_CLOSE: _Tail.OPEN,
    _Tail.CLOSE: _Tail.CLOSE_OPEN,
}

# Transitions on a closing letter, and whether they complete a pair.
_ON_CLOSE = {
    _Tail.NONE: (_Tail.CLOSE, False),
    _Tail.OPEN: (_Tail.OPEN_CLOSE, True),
    _Tail.CLOSE_OPEN: (_Tail.CLOSE, True),
}


def _scan_word(word: str) -> tuple[int, _Tail]:
    pairs = 0
    tail = _Tail.NONE
    for letter in word:
        if letter == "D":
            tail = _ON_OPEN.get(tail, tail)
        elif letter == "R":
            if tail in _ON_CLOSE:
                tail, completed = _ON_CLOSE[tail]
                pairs += completed
    return pairs, tail


def count_pairs(words: Iterable[str]) -> int:
    """Return the most ``D``-then-``R`` pairs formed by chaining the words.

    Pairs inside a word count directly; words left open, closed, or both
    are joined with one another to form as many extra pairs as possible.
    Letters other than ``D`` and ``R`` are ignored.
    """
    pairs = 0
    opens = closes = both = 0
    for word in words:
        found, tail = _scan_word(word)
        pairs += found
        if tail is _Tail.CLOSE_OPEN:
            both += 1
        elif tail is _Tail.CLOSE:
            closes += 1
        elif tail is _Tail.OPEN:
            opens += 1
    if both:
        pairs += both - 1
        if opens or closes:
            opens += 1
            closes += 1
    return pairs + min(opens, closes)


def fits_first_row(tests: Sequence[int], row_length: int, capacity: int) -> bool:
    """Tell whether the largest of every ``row_length`` sorted values fits.

    The values are sorted from largest to smallest and split into rows of
    ``row_length``; the first value of each row is summed and compared
    with ``capacity``.
    """
    if row_length < 1:
        raise ValueError(f"row length must be positive, got {row_length}")
    ordered = sorted(tests, reverse=True)
    return sum(ordered[::row_length]) <= capacity


def _descends(side: Sequence[int]) -> bool:
    return all(
        upper not in (1, 2) and lower in (upper - 1, upper - 2)
        for upper, lower in zip(side, side[1:])
    )


def is_valid_path(path: Sequence[int]) -> bool:
    """Tell whether ``path`` can be a path through a tree of node heights.

    From its first highest value the path must fall by one or two at each
    step in both directions, nodes of height 1 or 2 may not be followed,
    and the two neighbours of the peak must differ.
    """
    if not path:
        return True
    peak = path.index(max(path))
    if not (_descends(path[peak:]) and _descends(path[peak::-1])):
        return False
    if 0 < peak < len(path) - 1:
        return path[peak - 1] != path[peak + 1]
    return True