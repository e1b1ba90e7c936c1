"""Disjoint-Set Union with path compression and union by rank."""

from __future__ import annotations

from collections.abc import Iterable


class DisjointSetUnion:
    """Union-find over string keys.

    Keys are mapped once to a dense integer arena; parent and rank live in
    plain lists indexed by that arena.

    Example:
        >>> dsu = DisjointSetUnion(["A", "B", "C"])
        >>> dsu.union("A", "B")
        True
        >>> dsu.connected("A", "B")
        True
        >>> dsu.set_count()
        2
    """

    def __init__(self, elements: Iterable[str] = ()) -> None:
        self._index: dict[str, int] = {}
        self._keys: list[str] = []
        self._parent: list[int] = []
        self._rank: list[int] = []
        self._sets = 0
        for element in elements:
            self.add(element)

    def add(self, element: str) -> bool:
        """Add a singleton set. Returns False if the element already exists."""
        if element in self._index:
            return False
        slot = len(self._keys)
        self._index[element] = slot
        self._keys.append(element)
        self._parent.append(slot)
        self._rank.append(0)
        self._sets += 1
        return True

    def __contains__(self, element: object) -> bool:
        return element in self._index

    def __len__(self) -> int:
        return len(self._keys)

    def _root(self, slot: int) -> int:
        root = slot
        while self._parent[root] != root:
            root = self._parent[root]
        # Path compression: point every node on the chain at the root
        while self._parent[slot] != root:
            self._parent[slot], slot = root, self._parent[slot]
        return root

    def find(self, element: str) -> str:
        """Return the representative of element's set.

        Raises:
            KeyError: If the element was never added.
        """
        return self._keys[self._root(self._index[element])]

    def union(self, a: str, b: str) -> bool:
        """Merge the sets containing a and b.

        The root of lower rank goes under the other. On equal ranks, a's
        root becomes the parent and its rank grows by one.

        Returns:
            True if two sets were merged, False if already joined.
        """
        root_a = self._root(self._index[a])
        root_b = self._root(self._index[b])
        if root_a == root_b:
            return False

        if self._rank[root_a] < self._rank[root_b]:
            self._parent[root_a] = root_b
        elif self._rank[root_a] > self._rank[root_b]:
            self._parent[root_b] = root_a
        else:
            self._parent[root_b] = root_a
            self._rank[root_a] += 1
        self._sets -= 1
        return True

    def connected(self, a: str, b: str) -> bool:
        """Check if a and b are in the same set."""
        return self._root(self._index[a]) == self._root(self._index[b])

    def set_count(self) -> int:
        """Return the number of disjoint sets."""
        return self._sets

    def rank(self, element: str) -> int:
        """Return the rank of element's root."""
        return self._rank[self._root(self._index[element])]


__all__ = ["DisjointSetUnion"]
