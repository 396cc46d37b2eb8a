"""
Weighted quick-union disjoint-set forest with path compression.

Elements are the integers 0..size-1. Union by size keeps trees shallow and
path compression flattens them further on every find, giving amortized
near-constant time per operation.
"""

import numpy as np


class WeightedQuickUnionUF:
    """
    Disjoint-set forest over a fixed universe of integer elements.

    Example:
        uf = WeightedQuickUnionUF(4)
        uf.union(0, 1)
        uf.connected(0, 1)  # True
    """

    def __init__(self, size: int):
        """
        Initialize the forest with every element in its own component.

        Args:
            size: Number of elements (must be positive)
        """
        if size <= 0:
            raise ValueError(f"size must be positive, got {size}")

        self._parent = np.arange(size, dtype=np.int64)
        self._size = np.ones(size, dtype=np.int64)
        self._count = size

    def __len__(self) -> int:
        return len(self._parent)

    @property
    def count(self) -> int:
        """Number of disjoint components."""
        return self._count

    def _validate(self, p: int) -> None:
        n = len(self._parent)
        if p < 0 or p >= n:
            raise IndexError(f"index {p} is not between 0 and {n - 1}")

    def find(self, p: int) -> int:
        """
        Return the root of the component containing p.

        Every node visited on the way up is relinked directly to the root.
        """
        self._validate(p)
        parent = self._parent

        root = p
        while parent[root] != root:
            root = parent[root]

        while p != root:
            nxt = parent[p]
            parent[p] = root
            p = nxt

        return int(root)

    def connected(self, p: int, q: int) -> bool:
        return self.find(p) == self.find(q)

    def union(self, p: int, q: int) -> bool:
        """
        Merge the components containing p and q.

        Returns:
            True if two components were merged, False if already connected
        """
        root_p = self.find(p)
        root_q = self.find(q)
        if root_p == root_q:
            return False

        size = self._size
        # Smaller tree goes under the larger root
        if size[root_p] < size[root_q]:
            root_p, root_q = root_q, root_p
        self._parent[root_q] = root_p
        size[root_p] += size[root_q]
        self._count -= 1
        return True

    def component_size(self, p: int) -> int:
        """Number of elements in the component containing p."""
        return int(self._size[self.find(p)])
