"""Disjoint-set forest with union by rank and path compression."""

from __future__ import annotations


class UnionFind:
    """Disjoint sets over the elements 0 .. n-1."""

    def __init__(self, n: int) -> None:
        self._parent = list(range(n))
        self._rank = [0] * n
        self._sets = n

    def _check(self, element: int) -> None:
        if not 0 <= element < len(self._parent):
            raise IndexError(f"element {element} out of range")

    def find(self, element: int) -> int:
        """Return the representative of the set holding ``element``."""
        self._check(element)
        root = element
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[element] != root:
            self._parent[element], element = root, self._parent[element]
        return root

    def union(self, lhs: int, rhs: int) -> None:
        """Merge the sets holding ``lhs`` and ``rhs``."""
        set_lhs = self.find(lhs)
        set_rhs = self.find(rhs)
        if set_lhs == set_rhs:
            return
        if self._rank[set_lhs] < self._rank[set_rhs]:
            self._parent[set_lhs] = set_rhs
        else:
            self._parent[set_rhs] = set_lhs
            if self._rank[set_lhs] == self._rank[set_rhs]:
                self._rank[set_lhs] += 1
        self._sets -= 1

    def set_count(self) -> int:
        """Return the number of disjoint sets."""
        return self._sets