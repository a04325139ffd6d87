"""Fixed-size square grid of color ids.

Cells are stored row-major as ``cells[y, x]``: x is the east axis (column),
y is the south axis (row), and the origin is the top-left cell. Renderers
draw the array as-is, so no transposition happens anywhere.
"""

from __future__ import annotations

import numpy as np

from turmite.domain.errors import OutOfBounds

CELL_DTYPE = np.int64


class Grid:
    """Mutable square array of color ids, zeroed on creation."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("grid size must be >= 1")
        self._cells = np.zeros((size, size), dtype=CELL_DTYPE)

    @classmethod
    def from_array(cls, array: np.ndarray) -> Grid:
        """Build a grid from a square ``(size, size)`` array indexed ``[y, x]``."""
        arr = np.asarray(array)
        if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
            raise ValueError(f"grid array must be square, got shape {arr.shape}")
        if arr.size and not np.issubdtype(arr.dtype, np.integer):
            raise ValueError(f"grid colors must be integers, got dtype {arr.dtype}")
        if arr.size and int(arr.min()) < 0:
            raise ValueError("grid colors must be non-negative")
        grid = cls(arr.shape[0])
        grid._cells[...] = arr
        return grid

    @property
    def size(self) -> int:
        return int(self._cells.shape[0])

    @property
    def center(self) -> tuple[int, int]:
        half = self.size // 2
        return half, half

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the cells, indexed ``[y, x]``."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    def to_array(self) -> np.ndarray:
        return self._cells.copy()

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def get(self, x: int, y: int) -> int:
        if not self.contains(x, y):
            raise OutOfBounds(x, y, self.size)
        return int(self._cells[y, x])

    def set(self, x: int, y: int, color: int) -> None:
        if not self.contains(x, y):
            raise OutOfBounds(x, y, self.size)
        if color < 0:
            raise ValueError(f"color must be non-negative, got {color}")
        self._cells[y, x] = color

    def histogram(self) -> dict[int, int]:
        """Count of cells per color id present on the grid."""
        values, counts = np.unique(self._cells, return_counts=True)
        return {int(v): int(c) for v, c in zip(values, counts, strict=True)}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return bool(np.array_equal(self._cells, other._cells))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Grid(size={self.size})"
