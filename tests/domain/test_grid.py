"""Tests for turmite.domain.grid."""

from __future__ import annotations

import numpy as np
import pytest

from turmite.domain.errors import OutOfBounds
from turmite.domain.grid import Grid


class TestGridCreate:
    def test_zeroed(self) -> None:
        grid = Grid(4)
        assert grid.size == 4
        assert grid.cells.shape == (4, 4)
        assert not grid.cells.any()

    def test_center_uses_integer_division(self) -> None:
        assert Grid(3).center == (1, 1)
        assert Grid(4).center == (2, 2)
        assert Grid(1).center == (0, 0)

    @pytest.mark.parametrize("size", [0, -1])
    def test_rejects_empty_grid(self, size: int) -> None:
        with pytest.raises(ValueError, match="grid size must be >= 1"):
            Grid(size)


class TestGridAccess:
    def test_set_then_get(self) -> None:
        grid = Grid(3)
        grid.set(2, 0, 4)
        assert grid.get(2, 0) == 4
        assert grid.get(0, 2) == 0

    def test_x_is_column_and_y_is_row(self) -> None:
        grid = Grid(3)
        grid.set(2, 0, 1)
        assert grid.cells[0, 2] == 1
        assert grid.cells[2, 0] == 0

    @pytest.mark.parametrize(("x", "y"), [(-1, 0), (0, -1), (3, 0), (0, 3), (5, 5)])
    def test_out_of_range_get_raises(self, x: int, y: int) -> None:
        grid = Grid(3)
        with pytest.raises(OutOfBounds) as info:
            grid.get(x, y)
        assert (info.value.x, info.value.y, info.value.size) == (x, y, 3)

    def test_out_of_range_set_does_not_wrap(self) -> None:
        grid = Grid(3)
        with pytest.raises(OutOfBounds, match=r"\(-1, 1\) is outside the 3x3 grid"):
            grid.set(-1, 1, 1)
        assert not grid.cells.any()

    def test_negative_color_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            Grid(2).set(0, 0, -1)

    def test_contains(self) -> None:
        grid = Grid(2)
        assert grid.contains(0, 0)
        assert grid.contains(1, 1)
        assert not grid.contains(2, 1)
        assert not grid.contains(0, -1)

    def test_cells_view_is_read_only(self) -> None:
        grid = Grid(2)
        with pytest.raises(ValueError):
            grid.cells[0, 0] = 3

    def test_to_array_is_a_copy(self) -> None:
        grid = Grid(2)
        arr = grid.to_array()
        arr[0, 0] = 3
        assert grid.get(0, 0) == 0


class TestGridHelpers:
    def test_histogram(self) -> None:
        grid = Grid(2)
        grid.set(0, 0, 1)
        grid.set(1, 0, 1)
        grid.set(1, 1, 5)
        assert grid.histogram() == {0: 1, 1: 2, 5: 1}

    def test_equality_is_structural(self) -> None:
        a, b = Grid(2), Grid(2)
        assert a == b
        b.set(1, 1, 1)
        assert a != b
        assert Grid(2) != Grid(3)

    def test_from_array(self) -> None:
        grid = Grid.from_array(np.array([[0, 1], [2, 3]]))
        assert grid.get(1, 0) == 1
        assert grid.get(0, 1) == 2

    def test_from_array_rejects_non_square(self) -> None:
        with pytest.raises(ValueError, match="must be square"):
            Grid.from_array(np.zeros((2, 3), dtype=int))

    def test_from_array_rejects_negative(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            Grid.from_array(np.array([[0, -1], [0, 0]]))

    def test_from_array_rejects_fractional_colors(self) -> None:
        with pytest.raises(ValueError, match="must be integers"):
            Grid.from_array(np.array([[0.0, 1.7], [2.2, 0.0]]))

    def test_from_array_accepts_any_integer_dtype(self) -> None:
        grid = Grid.from_array(np.array([[0, 3], [1, 0]], dtype=np.uint8))
        assert grid.get(1, 0) == 3
