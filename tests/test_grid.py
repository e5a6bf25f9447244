import itertools

import pytest

from voxelkit.grid import Array2D, Array3D


def test_array2d_fill_value():
    grid = Array2D(3, 2, fill="x")
    assert grid.get(2, 1) == "x"
    assert grid.data == ("x",) * 6


def test_array2d_round_trip_every_cell():
    grid = Array2D(3, 4)
    cells = list(itertools.product(range(3), range(4)))
    for cell in cells:
        grid.set(*cell, cell)
    assert all(grid.get(*cell) == cell for cell in cells)
    assert sorted(grid.data) == sorted(cells)


@pytest.mark.parametrize("x, y", [(3, 0), (0, 2), (-1, 0), (0, -1)])
def test_array2d_out_of_bounds(x, y):
    grid = Array2D(3, 2)
    with pytest.raises(IndexError, match="Array2D"):
        grid.get(x, y)
    with pytest.raises(IndexError):
        grid.set(x, y, 1)


def test_array3d_default_none():
    grid = Array3D(2, 2, 2)
    assert set(grid.data) == {None}
    assert (grid.size_x, grid.size_y, grid.size_z) == (2, 2, 2)


def test_array3d_round_trip_every_cell():
    grid = Array3D(2, 3, 4)
    cells = list(itertools.product(range(2), range(3), range(4)))
    for cell in cells:
        grid.set(*cell, cell)
    assert all(grid.get(*cell) == cell for cell in cells)
    assert sorted(grid.data) == sorted(cells)


def test_array3d_storage_is_x_major():
    grid = Array3D(2, 3, 4)
    cells = list(itertools.product(range(2), range(3), range(4)))
    for cell in cells:
        grid.set(*cell, cell)
    assert list(grid.data) == cells


@pytest.mark.parametrize("x, y, z", [(2, 0, 0), (0, 3, 0), (0, 0, 4), (0, -1, 0)])
def test_array3d_out_of_bounds(x, y, z):
    grid = Array3D(2, 3, 4)
    with pytest.raises(IndexError, match="Array3D"):
        grid.get(x, y, z)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Array3D(-1, 2, 2)