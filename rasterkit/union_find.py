"""Disjoint set forests for union find."""

from __future__ import annotations

from typing import Sequence


class DisjointSetForest:
    """A forest of disjoint sets over the elements 0..count-1."""

    def __init__(self, count: int) -> None:
        if count < 0:
            raise ValueError("count must be non-negative")
        self.count = count
        self.parent: list[int] = list(range(count))
        self.tree_size: list[int] = [1] * count

    @classmethod
    def from_parents(
        cls, parent: Sequence[int], tree_size: Sequence[int]
    ) -> DisjointSetForest:
        """Builds a forest from explicit parent links and tree sizes."""
        if len(parent) != len(tree_size):
            raise ValueError("parent and tree_size must have the same length")
        count = len(parent)
        if any(not 0 <= p < count for p in parent):
            raise ValueError("parent indices must refer to forest elements")
        forest = cls(count)
        forest.parent = list(parent)
        forest.tree_size = list(tree_size)
        return forest

    def _check(self, *indices: int) -> None:
        for i in indices:
            if not 0 <= i < self.count:
                raise IndexError(f"element {i} is not in a forest of {self.count}")

    def num_trees(self) -> int:
        """Returns the number of trees in the forest."""
        return sum(1 for i, p in enumerate(self.parent) if i == p)

    def root(self, i: int) -> int:
        """Returns the root of the tree containing i, compressing the path on the way."""
        self._check(i)
        parent = self.parent
        j = i
        while True:
            p = parent[j]
            parent[j] = parent[p]
            if j == p:
                return j
            j = p

    def find(self, i: int, j: int) -> bool:
        """Returns True if i and j are in the same tree."""
        self._check(i, j)
        return self.root(i) == self.root(j)

    def union(self, i: int, j: int) -> None:
        """Merges the trees containing i and j, attaching the smaller to the larger."""
        self._check(i, j)
        p = self.root(i)
        q = self.root(j)
        if p == q:
            return
        p_size = self.tree_size[p]
        q_size = self.tree_size[q]
        if p_size < q_size:
            self.parent[p] = q
            self.tree_size[q] = p_size + q_size
        else:
            self.parent[q] = p
            self.tree_size[p] = p_size + q_size

    def trees(self) -> list[list[int]]:
        """Returns the elements of each tree, trees ordered by their smallest element."""
        sets: dict[int, list[int]] = {}
        for i in range(self.count):
            sets.setdefault(self.root(i), []).append(i)
        return list(sets.values())