"""Disjoint-set (union-find) structure over the indices ``0 .. size - 1``."""

from __future__ import annotations

import logging
import operator

import numpy as np


logger = logging.getLogger(__name__)


class OutOfRangeError(IndexError):
    """Raised when an element index falls outside ``[0, size)``."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"index {index} out of range for disjoint set of size {size}")
        self.index = index
        self.size = size


class DisjointSet:
    """Union-find with path compression and union by rank.

    Every element starts as its own representative. When two roots of equal
    rank are merged, the root of the left argument is attached under the root
    of the right argument.
    """

    __slots__ = ("_parent", "_rank", "_set_count")

    def __init__(self, size: int) -> None:
        size = operator.index(size)
        if size < 0:
            raise ValueError("size must be non-negative")
        self._parent = np.arange(size, dtype=np.intp)
        self._rank = np.zeros(size, dtype=np.intp)
        self._set_count = size
        logger.debug("Created disjoint set with %d singleton sets", size)

    def __repr__(self) -> str:
        return f"DisjointSet(size={self.size})"

    def __len__(self) -> int:
        return len(self._parent)

    @property
    def size(self) -> int:
        """Number of elements, fixed at construction."""
        return len(self._parent)

    @property
    def set_count(self) -> int:
        """Number of disjoint sets currently held."""
        return self._set_count

    def find(self, index: int) -> int:
        """Return the representative of the set containing `index`."""

        index = self._check(index)
        parent = self._parent
        root = index
        while parent[root] != root:
            root = parent[root]
        # Point every node on the walked path straight at the root.
        while parent[index] != root:
            parent[index], index = root, parent[index]
        return int(root)

    def union(self, left: int, right: int) -> int:
        """Merge the sets containing `left` and `right` and return the new root."""

        left = self._check(left)
        right = self._check(right)
        root_left = self.find(left)
        root_right = self.find(right)
        if root_left == root_right:
            return root_left

        rank = self._rank
        if rank[root_left] > rank[root_right]:
            root_left, root_right = root_right, root_left
        elif rank[root_left] == rank[root_right]:
            rank[root_right] += 1
        self._parent[root_left] = root_right
        self._set_count -= 1
        logger.debug(
            "Merged root %d under root %d (rank %d, %d sets remain)",
            root_left,
            root_right,
            rank[root_right],
            self._set_count,
        )
        return root_right

    def connected(self, left: int, right: int) -> bool:
        """Return True when `left` and `right` share a representative."""

        return self.find(left) == self.find(right)

    def _check(self, index: int) -> int:
        index = operator.index(index)
        if not 0 <= index < len(self._parent):
            raise OutOfRangeError(index, len(self._parent))
        return index
