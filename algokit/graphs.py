"""Depth-first searches over small graphs."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from enum import Enum


class CycleError(ValueError):
    """Raised when a graph that has to be acyclic contains a cycle."""


class _State(Enum):
    NEW = 0
    ACTIVE = 1
    DONE = 2


def can_visit_all_rooms(rooms: Sequence[Sequence[int]]) -> bool:
    """Tell whether every room is reachable from room 0.

    ``rooms[i]`` lists the rooms whose keys lie in room ``i``.
    """
    if not rooms:
        return True
    seen = {0}
    stack = [0]
    while stack:
        room = stack.pop()
        for key in rooms[room]:
            if key not in seen:
                seen.add(key)
                stack.append(key)
    return len(seen) == len(rooms)


def _component(matrix: Sequence[Sequence[int]], start: int) -> Iterator[int]:
    seen = {start}
    stack = [start]
    while stack:
        node = stack.pop()
        yield node
        for other, linked in enumerate(matrix[node]):
            if linked and other not in seen:
                seen.add(other)
                stack.append(other)


def find_circle_num(is_connected: Sequence[Sequence[int]]) -> int:
    """Count the connected groups in an adjacency matrix."""
    visited: set[int] = set()
    provinces = 0
    for city in range(len(is_connected)):
        if city not in visited:
            visited.update(_component(is_connected, city))
            provinces += 1
    return provinces


def topological_sort(graph: Sequence[Sequence[int]]) -> list[int]:
    """Return the nodes of a directed graph in topological order.

    ``graph[i]`` lists the successors of node ``i``. The order is the
    reverse of the depth-first finishing order, starting from node 0 and
    following successors in the order given. Raises ``CycleError`` if the
    graph has a cycle.
    """
    states = [_State.NEW] * len(graph)
    finished: list[int] = []

    for root in range(len(graph)):
        if states[root] is not _State.NEW:
            continue
        states[root] = _State.ACTIVE
        stack = [(root, iter(graph[root]))]
        while stack:
            node, successors = stack[-1]
            for succ in successors:
                if states[succ] is _State.ACTIVE:
                    raise CycleError(f"cycle detected through node {succ}")
                if states[succ] is _State.NEW:
                    states[succ] = _State.ACTIVE
                    stack.append((succ, iter(graph[succ])))
                    break
            else:
                stack.pop()
                states[node] = _State.DONE
                finished.append(node)

    finished.reverse()
    return finished