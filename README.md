# smokesim

A small two-dimensional smoke simulation on a regular grid. Each time step
does the following:

- Smoke and heat are pulsed in near the bottom of the domain.
- Density and temperature are carried along the velocity field and diffused.
- The velocity field is diffused.
- Buoyancy, a constant wind and periodic random turbulence are applied.
- Vorticity confinement is applied.
- A Jacobi pressure solve is run, then the velocity field is updated.

The fields are written out as legacy ASCII VTK files. ParaView or any other
VTK-aware viewer can open them.

## Installation

```
pip install .
```

To install it with the test dependencies:

```
pip install ".[test]"
```

## Running the simulation

The output directory is not created for you, so create it first:

```
mkdir data
smokesim
```

With no options the command runs the default scenario:

- a 100 × 100 grid covering a 1 × 1 domain
- a time step of 0.005
- a total time of 5.0

It writes a snapshot named `output_0000.vtk`, `output_0001.vtk` and so on into
the `data` directory. After each step it prints the new simulation time.

If a snapshot cannot be written, for example because the directory does not
exist, the command reports the error on standard error and keeps running.

Options:

| Option | Default | Meaning |
| --- | --- | --- |
| `--nx`, `--ny` | 100 | grid points in x and y (at least 2 each) |
| `--lx`, `--ly` | 1.0 | domain length in x and y |
| `--dt` | 0.005 | time step size |
| `--total-time` | 5.0 | total simulation time |
| `--output-interval` | 1 | write a snapshot every this many steps |
| `--output-dir` | `data` | directory for the VTK files |
| `--seed` | none | seed for the random turbulence |

The command exits with status 1 in these cases:

- the output interval is not positive
- the grid is too small
- the configuration is invalid, for example a non-positive `dt`

## Using it as a library

```python
import dataclasses
from pathlib import Path

from smokesim.config import default_config
from smokesim.grid import create_grid
from smokesim.simulation import Simulation
from smokesim.visualization import write_vtk

grid = create_grid(64, 64, 1.0, 1.0)
config = dataclasses.replace(default_config(), dt=0.005, total_time=0.1)

out = Path("frames")
out.mkdir(exist_ok=True)

sim = Simulation(grid, config, rng=0)
frame = 0
while sim.time < sim.total_time:
    write_vtk(sim, f"frame_{frame:04d}.vtk", out)
    sim.step()
    frame += 1
```

### Building blocks

- **`smokesim.grid`**
  - `create_grid(nx, ny, lx, ly)` returns a frozen `Grid`. The grid holds `nx`, `ny`, the spacing `dx` and `dy`, and read-only `x_coords` and `y_coords` arrays.
  - `create_grid` raises `ValueError` when either dimension is below 2.
  - `Grid.describe()` returns the size, spacing and coordinates as text.
- **`smokesim.config`**
  - `SimulationConfig` is a frozen dataclass. Among its parameters:
    - `dt` and `total_time`
    - diffusion, viscosity and thermal diffusivity
    - pressure tolerance and iteration limit
    - buoyancy, with the ambient temperature
    - wind
    - turbulence
    - vorticity confinement
    - smoke pulses
    - velocity clamping
  - Invalid values raise `ValueError`.
  - `default_config()` returns the defaults. To change fields, use `dataclasses.replace`.
- **`smokesim.simulation`**
  - `Simulation(grid, config=None, rng=None)` holds the `density`, `u`, `v`, `pressure` and `temperature` fields. They are numpy arrays of shape `(ny, nx)`, indexed `[j, i]`.
  - `rng` may be a seed or a `numpy.random.Generator`. The turbulence is drawn from it.
  - Each stage of the step is its own method:
    - `advect_density` and `advect_temperature`
    - `diffuse_density`, `diffuse_velocity` and `diffuse_temperature`
    - `apply_buoyancy`, `apply_wind` and `apply_vorticity_confinement`
    - `inject_turbulence`
    - `solve_pressure` and `update_velocity`
    - `inject_smoke(x0, y0, radius, amount)` and `inject_heat(x0, y0, radius, heat_amount)`, which raise `ValueError` for a non-positive radius
  - `step()` runs one full step, advances `time` by `dt` and prints the new time.
  - `format_density()` returns the density field as text.
- **`smokesim.visualization`**
  - `write_vtk(sim, filename, directory="data")` writes the grid points, the density as a scalar field and the velocity as a vector field.
  - It returns the path it wrote.
  - It raises `OSError` if the file cannot be opened.
- **`smokesim.utils`**
  - `min_array` and `max_array` raise `ValueError` on empty input.
  - `clamp(value, lower, upper)` limits a value to the closed interval.

## What it does not do

The package has no viewer and does no rendering of its own. It only writes VTK
files, which you open in a separate tool. Runs are set up from the command-line
options or in code; there is no configuration file.

## Running the tests

```
pytest
```