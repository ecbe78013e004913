"""
Fixed-size disjoint-set (union-find) structure.

Elements are the integers 0..n_elements-1. find() uses path halving and
union() attaches the smaller tree under the larger one, so both run in
amortized near-constant time.
"""

import numpy as np

from .errors import InvalidArgument


class UnionFind:
    """
    Union-find over a fixed number of elements with path compression and union by size.

    Example:
        uf = UnionFind(4)
        uf.union(0, 1)
        uf.union(1, 2)
        uf.connected(0, 2)   # True
        uf.connected(0, 3)   # False
    """

    def __init__(self, n_elements: int):
        """
        Initialize every element as its own singleton class.

        Args:
            n_elements: Number of elements (must be positive)
        """
        if n_elements <= 0:
            raise InvalidArgument(f"Number of elements must be greater than 0, got {n_elements}")

        self._n = int(n_elements)
        self._parent = np.arange(self._n, dtype=np.int64)
        self._size = np.ones(self._n, dtype=np.int64)
        self._count = self._n

    def __len__(self) -> int:
        return self._n

    @property
    def count(self) -> int:
        """Number of disjoint classes."""
        return self._count

    def _check(self, x: int) -> None:
        if x < 0 or x >= self._n:
            raise InvalidArgument(f"Element {x} is not between 0 and {self._n - 1}")

    def find(self, x: int) -> int:
        """Return the root of the class containing x."""
        self._check(x)
        parent = self._parent
        while parent[x] != x:
            # Path halving
            parent[x] = parent[parent[x]]
            x = parent[x]
        return int(x)

    def union(self, a: int, b: int) -> bool:
        """
        Merge the classes containing a and b.

        Returns:
            False if a and b were already in the same class, True otherwise
        """
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False

        if self._size[root_a] < self._size[root_b]:
            root_a, root_b = root_b, root_a
        self._parent[root_b] = root_a
        self._size[root_a] += self._size[root_b]
        self._count -= 1
        return True

    def connected(self, a: int, b: int) -> bool:
        """Check if a and b are in the same class."""
        return self.find(a) == self.find(b)
