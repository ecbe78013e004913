"""
Site percolation on an n-by-n grid.

Sites are addressed by 1-indexed (row, col). Opening a site connects it to
its open grid neighbours in a union-find structure of n*n + 2 nodes: one per
site plus a virtual top node (id 0) and a virtual bottom node (id n*n + 1).
Every site in the first row is joined to the top node when opened and every
site in the last row to the bottom node, so percolation reduces to a single
connectivity query between the two virtual nodes.
"""

import numpy as np

from .errors import InvalidArgument, is_integer
from .union_find import UnionFind


class SitePercolation:
    """
    n-by-n grid of open/blocked sites with incremental top-to-bottom connectivity.

    All sites start blocked. A grid is single-use: sites can be opened but
    never closed again.
    """

    def __init__(self, n: int):
        """
        Create an n-by-n grid with all sites blocked.

        Args:
            n: Grid side length (must be a positive integer)
        """
        if not is_integer(n) or n <= 0:
            raise InvalidArgument(f"Grid size must be a positive integer, got {n!r}")

        self._n = int(n)
        self._grid = np.zeros((self._n, self._n), dtype=bool)
        self._open_sites = 0
        self.top_id = 0
        self.bottom_id = self._n * self._n + 1
        self._uf = UnionFind(self._n * self._n + 2)

    def __repr__(self) -> str:
        return (f"SitePercolation(n={self._n}, open_sites={self._open_sites}, "
                f"percolates={self.percolates()})")

    @property
    def n(self) -> int:
        return self._n

    def _validate(self, row: int, col: int) -> None:
        """Raise InvalidArgument unless (row, col) lies on the grid."""
        if not (is_integer(row) and is_integer(col)):
            raise InvalidArgument(f"Row and column must be integers, got ({row!r}, {col!r})")
        if row < 1 or row > self._n or col < 1 or col > self._n:
            raise InvalidArgument(
                f"Row and column indices must be between 1 and {self._n}, got ({row}, {col})"
            )

    def _index(self, row: int, col: int) -> int:
        return (row - 1) * self._n + col

    def open(self, row: int, col: int) -> None:
        """
        Open site (row, col) if it is not open already.

        Opening an open site is a no-op.
        """
        self._validate(row, col)
        if self._grid[row - 1, col - 1]:
            return

        self._grid[row - 1, col - 1] = True
        self._open_sites += 1

        site = self._index(row, col)

        # Virtual top and bottom; both apply when n == 1
        if row == 1:
            self._uf.union(site, self.top_id)
        if row == self._n:
            self._uf.union(site, self.bottom_id)

        for r, c in ((row, col - 1), (row, col + 1), (row - 1, col), (row + 1, col)):
            if 1 <= r <= self._n and 1 <= c <= self._n and self._grid[r - 1, c - 1]:
                self._uf.union(self._index(r, c), site)

    def is_open(self, row: int, col: int) -> bool:
        """Is site (row, col) open?"""
        self._validate(row, col)
        return bool(self._grid[row - 1, col - 1])

    def is_full(self, row: int, col: int) -> bool:
        """
        Is site (row, col) connected to the top row?

        Blocked sites are never joined to anything, so they report False
        rather than raising.
        """
        self._validate(row, col)
        return self._uf.connected(self._index(row, col), self.top_id)

    def number_of_open_sites(self) -> int:
        return self._open_sites

    def percolates(self) -> bool:
        """Does the top row connect to the bottom row?"""
        return self._uf.connected(self.top_id, self.bottom_id)
