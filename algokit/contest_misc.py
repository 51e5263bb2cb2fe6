"""Assorted short contest problems: queries, greedy choices and sweeps."""

from __future__ import annotations

import heapq
from bisect import bisect_left
from collections.abc import Iterable, Sequence
from math import isqrt
from typing import NamedTuple, Optional

MOD = 1_000_000_007
"""Modulus applied to the divisor sum."""


def is_degenerate_triangle(a: int, b: int, c: int) -> bool:
    """Tell whether the three lengths fail to form a proper triangle.

    That is the case when the two shortest sides together are no longer
    than the longest one.
    """
    shortest, middle, longest = sorted((a, b, c))
    return shortest + middle <= longest


def petal_totals(queries: Iterable[Optional[int]]) -> list[int]:
    """Answer each ``None`` query with the petals recorded so far.

    An integer query records a flower with that many petals.
    """
    totals: list[int] = []
    petals = 0
    for query in queries:
        if query is None:
            totals.append(petals)
        else:
            petals += query
    return totals


def petal_averages(queries: Iterable[Optional[int]]) -> list[float]:
    """Answer each ``None`` query with the mean petal count so far.

    An integer query records a flower with that many petals. Raises
    ``ValueError`` if a question comes before any flower was recorded.
    """
    averages: list[float] = []
    petals = 0
    flowers = 0
    for query in queries:
        if query is None:
            if flowers == 0:
                raise ValueError("no flowers recorded before the query")
            averages.append(petals / flowers)
        else:
            petals += query
            flowers += 1
    return averages


def all_beds_visited(n: int) -> bool:
    """Tell whether hopping 1, 2, 3, ... beds around a ring of ``n`` covers all.

    The walker starts at bed 0 and makes ``2n - 1`` hops.
    """
    if n < 1:
        raise ValueError(f"there must be at least one bed, got {n}")
    position = 0
    visited: set[int] = set()
    for hop in range(1, 2 * n):
        position = (position + hop) % n
        visited.add(position)
    return len(visited) == n


def predecessors(values: Iterable[int]) -> list[Optional[int]]:
    """For each value, after adding it, give the largest smaller value seen.

    ``None`` stands where no smaller value has been seen yet.
    """
    seen: list[int] = []
    answers: list[Optional[int]] = []
    for value in values:
        index = bisect_left(seen, value)
        if index == len(seen) or seen[index] != value:
            seen.insert(index, value)
        answers.append(seen[index - 1] if index > 0 else None)
    return answers


def max_movies(movies: Iterable[tuple[int, int]]) -> int:
    """Return the most ``(start, end)`` movies one can watch back to back.

    A movie can follow another that ends no later than it starts; the
    first one watched must start at time 0 or later.
    """
    watched = 0
    last_end = 0
    for start, end in sorted(movies, key=lambda movie: movie[1]):
        if start >= last_end:
            watched += 1
            last_end = end
    return watched


def longest_unique_run(songs: Sequence[int]) -> int:
    """Return the length of the longest stretch without a repeated song."""
    window: set[int] = set()
    left = 0
    best = 0
    for right, song in enumerate(songs):
        while song in window:
            window.discard(songs[left])
            left += 1
        window.add(song)
        best = max(best, right - left + 1)
    return best


class RoomAllocation(NamedTuple):
    """How many rooms are needed, and the room (from 1) of each customer."""

    count: int
    rooms: list[int]


def allocate_rooms(customers: Sequence[tuple[int, int]]) -> RoomAllocation:
    """Give each ``(arrival, departure)`` customer a room, using as few as possible.

    Two customers share a room only if the first leaves before the second
    arrives. Rooms are listed in the order the customers were given.
    """
    order = sorted(range(len(customers)), key=lambda i: customers[i][0])
    free_at: list[tuple[int, int]] = []
    rooms = [0] * len(customers)
    count = 0
    for customer in order:
        arrival, departure = customers[customer]
        if free_at and free_at[0][0] < arrival:
            _, room = heapq.heappop(free_at)
        else:
            count += 1
            room = count
        rooms[customer] = room
        heapq.heappush(free_at, (departure, room))
    return RoomAllocation(count, rooms)


def sum_of_divisors(n: int) -> int:
    """Return the sum of the divisors of ``n`` modulo ``MOD``."""
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    total = 0
    for small in range(1, isqrt(n) + 1):
        if n % small == 0:
            large = n // small
            total += small if small == large else small + large
    return total % MOD