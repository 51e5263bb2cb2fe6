"""Classic algorithm solutions: graphs, grids, trees, lists, windows, stacks, strings and contest problems."""

__version__ = "0.1.0"

__all__ = [
    "contest_misc",
    "counting",
    "graphs",
    "grids",
    "hashing",
    "linked_lists",
    "stacks",
    "strings",
    "tap2016",
    "tap2019",
    "trees",
    "windows",
]