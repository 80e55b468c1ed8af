import numpy as np
import pytest

from smokesim.grid import create_grid


def test_dimensions_are_kept():
    grid = create_grid(7, 4, 1.0, 2.0)
    assert grid.nx == 7
    assert grid.ny == 4
    assert len(grid.x_coords) == 7
    assert len(grid.y_coords) == 4


def test_coordinates_span_domain():
    grid = create_grid(11, 6, 3.0, 2.0)
    assert grid.x_coords[0] == 0.0
    assert grid.y_coords[0] == 0.0
    assert grid.x_coords[-1] == pytest.approx(3.0)
    assert grid.y_coords[-1] == pytest.approx(2.0)


def test_spacing_is_uniform():
    grid = create_grid(9, 5, 1.0, 1.0)
    assert np.allclose(np.diff(grid.x_coords), grid.dx)
    assert np.allclose(np.diff(grid.y_coords), grid.dy)
    assert grid.dx * (grid.nx - 1) == pytest.approx(1.0)


def test_coordinates_are_read_only():
    grid = create_grid(3, 3, 1.0, 1.0)
    with pytest.raises(ValueError):
        grid.x_coords[0] = 5.0
    assert grid.x_coords[0] == 0.0
    assert grid.x_coords[-1] == pytest.approx(1.0)


@pytest.mark.parametrize("nx, ny", [(1, 5), (5, 1), (0, 0)])
def test_too_few_points_raises(nx, ny):
    with pytest.raises(ValueError):
        create_grid(nx, ny, 1.0, 1.0)


def test_describe_header():
    grid = create_grid(5, 3, 1.0, 1.0)
    lines = grid.describe().splitlines()
    assert lines[0] == "Grid Dimensions: 5 x 3"
    assert lines[1].startswith("Grid Spacing: dx = ")
    assert lines[2] == "Grid Coordinates:"


def test_describe_rows_and_points():
    grid = create_grid(4, 3, 1.0, 1.0)
    text = grid.describe()
    assert text.endswith("\n")
    rows = text.splitlines()[3:]
    assert len(rows) == grid.ny
    for row in rows:
        assert row.count("(") == grid.nx


def test_describe_first_point():
    grid = create_grid(2, 2, 1.0, 1.0)
    rows = grid.describe().splitlines()
    assert rows[3].startswith("(0.00, 0.00) ")