"""Command that runs a smoke simulation and writes VTK snapshots."""

from __future__ import annotations

import argparse
import dataclasses
import sys
from collections.abc import Sequence

from .config import default_config
from .grid import create_grid
from .simulation import Simulation
from .visualization import DEFAULT_DIRECTORY, write_vtk


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="smokesim",
        description="Run a 2D smoke simulation and write VTK snapshots.",
    )
    parser.add_argument("--nx", type=int, default=100, help="grid points in x")
    parser.add_argument("--ny", type=int, default=100, help="grid points in y")
    parser.add_argument("--lx", type=float, default=1.0, help="domain length in x")
    parser.add_argument("--ly", type=float, default=1.0, help="domain length in y")
    parser.add_argument("--dt", type=float, default=0.005, help="time step size")
    parser.add_argument(
        "--total-time", type=float, default=5.0, help="total simulation time"
    )
    parser.add_argument(
        "--output-interval",
        type=int,
        default=1,
        help="write a snapshot every this many steps",
    )
    parser.add_argument(
        "--output-dir", default=DEFAULT_DIRECTORY, help="directory for VTK files"
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation; return the process exit status."""
    args = _parser().parse_args(argv)
    if args.output_interval <= 0:
        print("Error: output interval must be positive", file=sys.stderr)
        return 1

    try:
        grid = create_grid(args.nx, args.ny, args.lx, args.ly)
    except ValueError as exc:
        print(f"Error creating grid: {exc}", file=sys.stderr)
        return 1

    try:
        config = dataclasses.replace(
            default_config(), dt=args.dt, total_time=args.total_time
        )
        sim = Simulation(grid, config, args.seed)
    except ValueError as exc:
        print(f"Error initializing simulation: {exc}", file=sys.stderr)
        return 1

    step = 0
    while sim.time < sim.total_time:
        if step % args.output_interval == 0:
            filename = f"output_{step // args.output_interval:04d}.vtk"
            try:
                write_vtk(sim, filename, args.output_dir)
            except OSError as exc:
                print(f"Error: cannot write {filename}: {exc}", file=sys.stderr)
        sim.step()
        step += 1
    return 0


if __name__ == "__main__":
    sys.exit(main())