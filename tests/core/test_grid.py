"""core.grid の Grid をテスト。"""

from __future__ import annotations

import numpy as np
import pytest

from battlemap.core.cell_type import CellType
from battlemap.core.grid import Grid


@pytest.mark.parametrize("size", [1, 2, 3, 10, 64])
def test_row_and_col_count_equal_size(size: int) -> None:
    grid = Grid(size)
    assert grid.size == size
    assert grid.row_count() == size
    assert grid.col_count() == size


def test_cells_default_to_floor() -> None:
    grid = Grid(4)
    assert all(tag is CellType.FLOOR for _, _, tag in grid.iter_cells())


@pytest.mark.parametrize("size", [0, -3])
def test_non_positive_size_raises(size: int) -> None:
    with pytest.raises(ValueError):
        Grid(size)


def test_non_integer_size_raises() -> None:
    with pytest.raises(TypeError):
        Grid(2.5)  # type: ignore[arg-type]


def test_set_cell_overwrites_exactly_one_cell() -> None:
    grid = Grid(5)
    grid.set_cell(1, 3, CellType.WATER)

    assert grid.cell(1, 3) is CellType.WATER
    for row, col, tag in grid.iter_cells():
        if (row, col) != (1, 3):
            assert tag is CellType.FLOOR


def test_set_cell_is_not_transposed() -> None:
    grid = Grid(3)
    grid.set_cell(0, 2, CellType.WALL)
    assert grid.cell(0, 2) is CellType.WALL
    assert grid.cell(2, 0) is CellType.FLOOR


def test_custom_tag_round_trips() -> None:
    grid = Grid(2)
    grid.set_cell(1, 1, CellType.custom(42))
    assert grid.cell(1, 1) == 1042


def test_set_cell_rejects_reserved_tag_and_keeps_value() -> None:
    grid = Grid(2)
    with pytest.raises(ValueError):
        grid.set_cell(0, 0, 500)
    assert grid.cell(0, 0) is CellType.FLOOR


@pytest.mark.parametrize("size", [1, 2, 7])
def test_out_of_range_access_raises(size: int) -> None:
    grid = Grid(size)
    outside = [(-1, 0), (0, -1), (size, 0), (0, size), (size, size)]
    for row, col in outside:
        with pytest.raises(IndexError):
            grid.cell(row, col)
        with pytest.raises(IndexError):
            grid.set_cell(row, col, CellType.WALL)


def test_negative_index_does_not_wrap() -> None:
    grid = Grid(3)
    grid.set_cell(2, 2, CellType.ROCK)
    with pytest.raises(IndexError):
        grid.cell(-1, -1)


def test_from_rows_sets_initial_tags() -> None:
    grid = Grid.from_rows(
        [
            [CellType.WALL, CellType.FLOOR],
            [CellType.WATER, CellType.custom(3)],
        ]
    )
    assert grid.size == 2
    assert grid.cell(0, 0) is CellType.WALL
    assert grid.cell(1, 0) is CellType.WATER
    assert grid.cell(1, 1) == 1003


def test_from_rows_rejects_non_square() -> None:
    with pytest.raises(ValueError):
        Grid.from_rows([[0, 0], [0]])
    with pytest.raises(ValueError):
        Grid.from_rows([])


def test_view_is_read_only_and_tracks_edits() -> None:
    grid = Grid(3)
    view = grid.view()
    assert view.shape == (3, 3)

    with pytest.raises(ValueError):
        view[0, 0] = int(CellType.WALL)

    grid.set_cell(2, 1, CellType.CLAY)
    assert view[2, 1] == int(CellType.CLAY)
    assert np.count_nonzero(view) == 1


def test_iter_cells_is_row_major() -> None:
    grid = Grid(2)
    coords = [(row, col) for row, col, _ in grid.iter_cells()]
    assert coords == [(0, 0), (0, 1), (1, 0), (1, 1)]
