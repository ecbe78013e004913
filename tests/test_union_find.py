"""Tests for the union-find structure."""

import pytest

from percolation_stats.percolation import UnionFind, InvalidArgument


class TestUnionFind:
    """Tests for UnionFind."""

    def test_initial_singletons(self):
        """Every element starts in its own class."""
        uf = UnionFind(5)

        assert len(uf) == 5
        assert uf.count == 5
        assert all(uf.find(i) == i for i in range(5))

    def test_union_connects(self):
        """Union is transitive through shared members."""
        uf = UnionFind(4)
        uf.union(0, 1)
        uf.union(1, 2)

        assert uf.connected(0, 2)
        assert not uf.connected(0, 3)
        assert uf.count == 2

    def test_union_same_class_returns_false(self):
        uf = UnionFind(3)

        assert uf.union(0, 1) is True
        assert uf.union(1, 0) is False
        assert uf.count == 2

    def test_smaller_tree_goes_under_larger(self):
        """The root of the larger class survives a union."""
        uf = UnionFind(5)
        uf.union(0, 1)
        uf.union(0, 2)
        root = uf.find(0)

        uf.union(3, 0)

        assert uf.find(3) == root

    def test_long_chain_stays_connected(self):
        n = 1000
        uf = UnionFind(n)
        for i in range(n - 1):
            uf.union(i, i + 1)

        assert uf.connected(0, n - 1)
        assert uf.count == 1

    @pytest.mark.parametrize("size", [0, -1])
    def test_invalid_size(self, size):
        with pytest.raises(InvalidArgument):
            UnionFind(size)

    @pytest.mark.parametrize("element", [-1, 3])
    def test_out_of_range_element(self, element):
        uf = UnionFind(3)

        with pytest.raises(InvalidArgument):
            uf.find(element)
        with pytest.raises(InvalidArgument):
            uf.union(0, element)
