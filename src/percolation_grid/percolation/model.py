"""
Site percolation model on an n-by-n grid.

Sites are addressed with 1-based (row, col) coordinates and start blocked.
The model answers whether a site is open, whether it is full (connected to
the top row through open sites) and whether the system percolates (an open
path joins the top row to the bottom row).

Two disjoint-set forests are kept over the same sites. Both have a virtual
TOP element wired to every site of the first row. Only the first one also
has a virtual BOTTOM element wired to every site of the last row, which makes
percolates() a single connectivity query. Fullness is answered from the
second forest: once the system percolates, every bottom-row site reaches
TOP through BOTTOM in the first forest, so asking it would report sites as
full that have no real path to the top (backwash).
"""

from numbers import Integral

import numpy as np

from .union_find import WeightedQuickUnionUF


class PercolationModel:
    """
    Stateful n-by-n site percolation system.

    Example:
        model = PercolationModel(2)
        model.open(1, 1)
        model.open(2, 1)
        model.percolates()  # True
    """

    def __init__(self, n: int):
        """
        Create an n-by-n grid with all sites blocked.

        Args:
            n: Side length of the grid

        Raises:
            ValueError: if n is not a positive integer
        """
        if isinstance(n, bool) or not isinstance(n, Integral):
            raise ValueError(f"Grid size must be an integer, got {n!r}")
        if n <= 0:
            raise ValueError(f"Grid size must be positive, got {n}")

        self._n = int(n)
        self._open = np.zeros((self._n, self._n), dtype=bool)
        self._open_count = 0

        self._top = 0
        self._bottom = self._n * self._n + 1
        self._grid = WeightedQuickUnionUF(self._n * self._n + 2)
        self._grid_without_bottom = WeightedQuickUnionUF(self._n * self._n + 1)

        for col in range(1, self._n + 1):
            top_site = self._index(1, col)
            self._grid.union(self._top, top_site)
            self._grid_without_bottom.union(self._top, top_site)
            self._grid.union(self._bottom, self._index(self._n, col))

    def __repr__(self) -> str:
        return (f"PercolationModel(n={self._n}, open_sites={self._open_count}, "
                f"percolates={self.percolates()})")

    # --- Properties ---

    @property
    def n(self) -> int:
        return self._n

    @property
    def size(self) -> int:
        """Total number of sites (n squared)."""
        return self._n * self._n

    # --- Mutator ---

    def open(self, row: int, col: int) -> None:
        """
        Open site (row, col) if it is not open already.

        The site is joined with each open neighbour above, below, left and
        right in both forests.
        """
        self._validate(row, col)
        if self._open[row - 1, col - 1]:
            return

        self._open[row - 1, col - 1] = True
        self._open_count += 1

        site = self._index(row, col)
        for nrow, ncol in ((row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1)):
            if not (1 <= nrow <= self._n and 1 <= ncol <= self._n):
                continue
            if not self._open[nrow - 1, ncol - 1]:
                continue
            neighbour = self._index(nrow, ncol)
            self._grid.union(site, neighbour)
            self._grid_without_bottom.union(site, neighbour)

    # --- Queries ---

    def is_open(self, row: int, col: int) -> bool:
        self._validate(row, col)
        return bool(self._open[row - 1, col - 1])

    def is_full(self, row: int, col: int) -> bool:
        """Whether site (row, col) is open and connected to the top row."""
        self._validate(row, col)
        if not self._open[row - 1, col - 1]:
            return False
        return self._grid_without_bottom.connected(self._top, self._index(row, col))

    def number_of_open_sites(self) -> int:
        return self._open_count

    def percolates(self) -> bool:
        """Whether an open path connects the top row to the bottom row."""
        # A 1x1 grid has its only site wired to both TOP and BOTTOM at
        # construction, so the forest alone cannot tell whether it is open.
        if self._n == 1 and not self._open[0, 0]:
            return False
        return self._grid.connected(self._top, self._bottom)

    def open_fraction(self) -> float:
        """Fraction of sites that are open."""
        return self._open_count / self.size

    def open_sites(self) -> np.ndarray:
        """Copy of the open/blocked table, indexed [row - 1, col - 1]."""
        return self._open.copy()

    # --- Helpers ---

    def _index(self, row: int, col: int) -> int:
        """Linear forest index of (row, col); 0 and n*n + 1 are TOP and BOTTOM."""
        return (row - 1) * self._n + col

    def _validate(self, row: int, col: int) -> None:
        for name, value in (('row', row), ('col', col)):
            if isinstance(value, bool) or not isinstance(value, Integral):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if value < 1 or value > self._n:
                raise ValueError(f"{name} {value} is outside [1, {self._n}]")
