"""Uniform rectangular grid covering the simulation domain."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, eq=False)
class Grid:
    """A uniform grid of ``nx`` by ``ny`` points with spacing ``dx``, ``dy``."""

    nx: int
    ny: int
    dx: float
    dy: float
    x_coords: np.ndarray
    y_coords: np.ndarray

    def describe(self) -> str:
        """Return a text report of the grid's size, spacing and coordinates."""
        lines = [
            f"Grid Dimensions: {self.nx} x {self.ny}",
            f"Grid Spacing: dx = {self.dx:.4f}, dy = {self.dy:.4f}",
            "Grid Coordinates:",
        ]
        for y in self.y_coords:
            lines.append("".join(f"({x:.2f}, {y:.2f}) " for x in self.x_coords))
        return "\n".join(lines) + "\n"


def create_grid(nx: int, ny: int, lx: float, ly: float) -> Grid:
    """Create a grid of ``nx`` by ``ny`` points over a domain ``lx`` by ``ly``."""
    if nx < 2 or ny < 2:
        raise ValueError("a grid needs at least two points in each direction")
    dx = lx / (nx - 1)
    dy = ly / (ny - 1)
    x_coords = np.arange(nx) * dx
    y_coords = np.arange(ny) * dy
    x_coords.setflags(write=False)
    y_coords.setflags(write=False)
    return Grid(nx=nx, ny=ny, dx=dx, dy=dy, x_coords=x_coords, y_coords=y_coords)