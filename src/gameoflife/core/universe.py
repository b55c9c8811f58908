"""Toroidal Game of Life universe."""

from enum import IntEnum
from typing import Iterable, Tuple
import numpy as np
import torch

from .render import render_text
from .timer import Timer

DEFAULT_WIDTH = 128
DEFAULT_HEIGHT = 128


class Cell(IntEnum):
    """State of a single cell, stored as one byte in the buffer."""

    DEAD = 0
    ALIVE = 1


def _check_dimension(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return int(value)


class Universe:
    """A Game of Life grid whose edges wrap around on both axes.

    Cells live in a flat ``uint8`` buffer in row-major order, so the cell at
    (row, col) is at index ``row * width + col``. Every mutating call either
    writes into that buffer or replaces it, which means views handed out by
    :meth:`get_cells` and :meth:`cells_view` must be fetched again after any
    tick, resize, clear or seeding call.
    """

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> None:
        """Create a universe seeded with the default pattern.

        A cell at linear index ``i`` starts alive when ``i`` is divisible by
        2 or by 7.

        Args:
            width: Number of columns
            height: Number of rows

        Raises:
            ValueError: If a dimension is negative
            TypeError: If a dimension is not an integer
        """
        self._width = _check_dimension("Width", width)
        self._height = _check_dimension("Height", height)
        self._generation = 0

        indices = np.arange(self._width * self._height)
        seeded = (indices % 2 == 0) | (indices % 7 == 0)
        self._cells = seeded.astype(np.uint8)

    @classmethod
    def blank(cls, width: int, height: int) -> "Universe":
        """Create a universe with every cell dead.

        Args:
            width: Number of columns
            height: Number of rows

        Returns:
            New all-dead Universe
        """
        universe = cls(width, height)
        universe.clear()
        return universe

    @property
    def width(self) -> int:
        """Number of columns."""
        return self._width

    @property
    def height(self) -> int:
        """Number of rows."""
        return self._height

    @property
    def generation(self) -> int:
        """Ticks since creation or the last resize."""
        return self._generation

    @property
    def population(self) -> int:
        """Number of living cells."""
        return int(np.count_nonzero(self._cells))

    def set_width(self, width: int) -> None:
        """Change the number of columns. Every cell is reset to dead."""
        self._width = _check_dimension("Width", width)
        self._reset()

    def set_height(self, height: int) -> None:
        """Change the number of rows. Every cell is reset to dead."""
        self._height = _check_dimension("Height", height)
        self._reset()

    def _reset(self) -> None:
        self._cells = np.zeros(self._width * self._height, dtype=np.uint8)
        self._generation = 0

    def clear(self) -> None:
        """Set all cells dead, keeping the dimensions."""
        self._cells.fill(Cell.DEAD)

    def get_index(self, row: int, column: int) -> int:
        """Linear buffer index of (row, column)."""
        return row * self._width + column

    def _check_coordinates(self, row: int, column: int) -> None:
        if not (0 <= row < self._height and 0 <= column < self._width):
            raise IndexError(
                f"Coordinates ({row}, {column}) out of bounds for "
                f"{self._height}x{self._width} universe"
            )

    def get_cell(self, row: int, column: int) -> Cell:
        """Get the state of a cell.

        Raises:
            IndexError: If the coordinates are outside the grid
        """
        self._check_coordinates(row, column)
        return Cell(int(self._cells[self.get_index(row, column)]))

    def get_cells(self) -> np.ndarray:
        """Read-only view of the cell buffer.

        The view shares memory with the universe. It goes stale after any
        mutating call; after a tick or resize it refers to the discarded
        buffer.
        """
        view = self._cells.view()
        view.flags.writeable = False
        return view

    def cells_view(self) -> memoryview:
        """Read-only raw bytes of the buffer, one byte per cell, row-major.

        Same invalidation rules as :meth:`get_cells`.
        """
        return memoryview(self._cells).toreadonly()

    def set_cells(self, cells: Iterable[Tuple[int, int]]) -> None:
        """Bring the given cells to life, leaving all others untouched.

        Args:
            cells: (row, column) pairs

        Raises:
            IndexError: If any pair is outside the grid. No cell is changed
                in that case.
        """
        coords = list(cells)
        for row, column in coords:
            self._check_coordinates(row, column)

        for row, column in coords:
            self._cells[self.get_index(row, column)] = Cell.ALIVE

    def live_neighbor_count(self, row: int, column: int) -> int:
        """Count living neighbors of one cell, wrapping at the edges.

        Offsets of ``height - 1`` and ``width - 1`` stand in for -1 under
        modulo arithmetic. On grids with a dimension of 1 or 2 the same
        physical cell can be visited more than once and is counted each time.

        Raises:
            IndexError: If the coordinates are outside the grid
        """
        self._check_coordinates(row, column)

        count = 0
        for delta_row in (self._height - 1, 0, 1):
            for delta_col in (self._width - 1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue

                neighbor_row = (row + delta_row) % self._height
                neighbor_col = (column + delta_col) % self._width
                count += int(self._cells[self.get_index(neighbor_row, neighbor_col)])

        return count

    def count_all_neighbors(self) -> np.ndarray:
        """Count living neighbors of every cell using torch.

        Uses the same offsets as :meth:`live_neighbor_count`, applied as
        whole-grid rolls.

        Returns:
            (height, width) uint8 array of neighbor counts
        """
        if self._width == 0 or self._height == 0:
            return np.zeros((self._height, self._width), dtype=np.uint8)

        current = torch.from_numpy(self._cells.reshape(self._height, self._width))
        counts = torch.zeros_like(current)
        for delta_row in (self._height - 1, 0, 1):
            for delta_col in (self._width - 1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue

                # roll by -delta so that position (r, c) reads (r + dr, c + dc)
                counts += torch.roll(current, shifts=(-delta_row, -delta_col), dims=(0, 1))

        return counts.numpy()

    def tick(self) -> None:
        """Advance the universe by one generation.

        The next generation is computed into a fresh buffer from the current
        one, then replaces it. A grid with no cells is left as is.
        """
        with Timer("Universe.tick"):
            if self._cells.size == 0:
                return

            current = self._cells.reshape(self._height, self._width)
            neighbor_counts = self.count_all_neighbors()

            # Live cell with 2 or 3 neighbors survives
            survive_mask = (current == Cell.ALIVE) & ((neighbor_counts == 2) | (neighbor_counts == 3))

            # Dead cell with exactly 3 neighbors is born
            birth_mask = (current == Cell.DEAD) & (neighbor_counts == 3)

            next_cells = np.zeros_like(current)
            next_cells[survive_mask | birth_mask] = Cell.ALIVE

            self._cells = next_cells.reshape(-1)
            self._generation += 1

    def render(self) -> str:
        """Render the grid as text, one line per row."""
        return render_text(self._cells, self._width, self._height)

    def copy(self) -> "Universe":
        """Return an independent universe with the same dimensions and cells."""
        other = type(self).blank(self._width, self._height)
        other._cells[:] = self._cells
        other._generation = self._generation
        return other

    def __eq__(self, other: object) -> bool:
        """Check if two universes hold the same grid."""
        if not isinstance(other, Universe):
            return False
        return (
            self._width == other._width
            and self._height == other._height
            and np.array_equal(self._cells, other._cells)
        )

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Universe(width={self._width}, height={self._height}, population={self.population})"
