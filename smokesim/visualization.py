"""Export of simulation fields to legacy VTK files."""

from __future__ import annotations

import os
from pathlib import Path

from .simulation import Simulation

DEFAULT_DIRECTORY = "data"


def write_vtk(
    sim: Simulation,
    filename: str,
    directory: str | os.PathLike[str] = DEFAULT_DIRECTORY,
) -> Path:
    """Write density and velocity to ``directory/filename`` as a structured grid.

    The file holds the grid points (z = 0), the scalar ``density`` and the
    vector ``velocity`` (z component 0), in row-major order. Returns the path
    written. Raises OSError if the file cannot be opened.
    """
    path = Path(directory) / filename
    nx, ny = sim.nx, sim.ny
    num_points = nx * ny
    dx, dy = sim.grid.dx, sim.grid.dy

    with path.open("w", encoding="ascii", newline="\n") as stream:
        stream.write("# vtk DataFile Version 2.0\n")
        stream.write("Smoke Simulation Data\n")
        stream.write("ASCII\n")
        stream.write("DATASET STRUCTURED_GRID\n")
        stream.write(f"DIMENSIONS {nx} {ny} 1\n")
        stream.write(f"POINTS {num_points} float\n")

        for j in range(ny):
            y = j * dy
            stream.writelines(f"{i * dx:f} {y:f} {0.0:f}\n" for i in range(nx))

        stream.write(f"\nPOINT_DATA {num_points}\n")
        stream.write("SCALARS density float 1\n")
        stream.write("LOOKUP_TABLE default\n")
        for row in sim.density:
            stream.writelines(f"{value:f}\n" for value in row)

        stream.write("\nVECTORS velocity float\n")
        for u_row, v_row in zip(sim.u, sim.v):
            stream.writelines(f"{u:f} {v:f} {0.0:f}\n" for u, v in zip(u_row, v_row))

    return path