"""Uniform grid for finding nearby particles."""

from __future__ import annotations

from pbasim.aabb import AABB
from pbasim.dynamical_state import DynamicalState
from pbasim.vector import Vector


class NeighborSearch:
    """Bins particles into cubic cells of side ``2 * radius`` inside a box.

    Cell indices outside the grid are reported as ``size``.
    """

    def __init__(self, bounds: AABB, radius: float) -> None:
        self.bounds = bounds
        self.radius = radius
        self.cell_size = 2.0 * radius
        self._extent = bounds.urc - bounds.llc
        self._compute_size()

    def _compute_size(self) -> None:
        self.nx = int(self._extent.x / self.cell_size + 1)
        self.ny = int(self._extent.y / self.cell_size + 1)
        self.nz = int(self._extent.z / self.cell_size + 1)
        self.size = self.nx * self.ny * self.nz
        self.grid: list[list[int]] = [[] for _ in range(self.size)]

    def set_cellsize(self, size: float) -> None:
        """Change the cell size and rebuild an empty grid."""
        self.cell_size = size
        self._compute_size()

    def set_bounds(self, bounds: AABB) -> None:
        """Change the bounds and rebuild an empty grid."""
        self.bounds = bounds
        self._extent = bounds.urc - bounds.llc
        self._compute_size()

    def populate(self, state: DynamicalState) -> None:
        """Place every particle of ``state`` that lies inside the bounds."""
        for cell in self.grid:
            cell.clear()
        for p, pos in enumerate(state.attribute("pos")):
            if self.bounds.is_inside(pos):
                index = self.cell_index(pos)
                if index < self.size:
                    self.grid[index].append(p)

    def neighbors(self, pos: Vector) -> list[int]:
        """Particles in the cell holding ``pos`` and the 26 cells around it."""
        index = self.cell_index(pos)
        if index >= self.size:
            return []
        i, j, k = self.cell_coords(index)
        found: list[int] = []
        for kk in range(k - 1, k + 2):
            for jj in range(j - 1, j + 2):
                for ii in range(i - 1, i + 2):
                    if ii < 0 or jj < 0 or kk < 0:
                        continue
                    cell = self.index_of(ii, jj, kk)
                    if cell < self.size:
                        found.extend(self.grid[cell])
        return found

    def cell_index(self, pos: Vector) -> int:
        """Index of the cell holding ``pos``, or ``size`` when outside."""
        rel = pos - self.bounds.llc
        if any(c < 0.0 for c in rel):
            return self.size
        grid_pos = rel / self.cell_size
        if any(c < 0.0 for c in grid_pos):
            return self.size
        return self.index_of(int(grid_pos.x), int(grid_pos.y), int(grid_pos.z))

    def index_of(self, i: int, j: int, k: int) -> int:
        """Flat index of cell ``(i, j, k)``, or ``size`` when out of range."""
        if not (0 <= i < self.nx and 0 <= j < self.ny and 0 <= k < self.nz):
            return self.size
        return i + self.nx * (j + self.ny * k)

    def cell_coords(self, index: int) -> tuple[int, int, int]:
        """Cell coordinates ``(i, j, k)`` of a flat index."""
        k, rest = divmod(index, self.nx * self.ny)
        j, i = divmod(rest, self.nx)
        return i, j, k