"""Union Find library initialization."""

from .structures import DisjointSet, OutOfRangeError

__all__ = [
    "DisjointSet",
    "OutOfRangeError",
]
