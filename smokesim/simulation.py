"""Two-dimensional smoke solver: advection, diffusion, forces and projection."""

from __future__ import annotations

import numpy as np

from .config import SimulationConfig, default_config
from .grid import Grid

_HEAT_PULSE_AMOUNT = 50.0
_SOURCE_ROW = 5


def _interior(field: np.ndarray) -> np.ndarray:
    """View of ``field`` without its outermost ring of cells."""
    return field[1:-1, 1:-1]


class Simulation:
    """State of a smoke simulation on a uniform grid.

    Fields are numpy arrays of shape ``(ny, nx)`` indexed ``[j, i]``.
    """

    def __init__(
        self,
        grid: Grid,
        config: SimulationConfig | None = None,
        rng: np.random.Generator | int | None = None,
    ) -> None:
        self.grid = grid
        self.config = config if config is not None else default_config()
        self.rng = np.random.default_rng(rng)
        self.nx = grid.nx
        self.ny = grid.ny
        self.dt = self.config.dt
        self.total_time = self.config.total_time
        self.time = 0.0

        shape = (self.ny, self.nx)
        self.density = np.zeros(shape)
        self.u = np.zeros(shape)
        self.v = np.zeros(shape)
        self.pressure = np.zeros(shape)
        self.temperature = np.full(shape, float(self.config.ambient_temperature))

    # ------------------------------------------------------------------
    # Advection
    # ------------------------------------------------------------------

    def _advect(self, field: np.ndarray) -> np.ndarray:
        dx, dy, dt = self.grid.dx, self.grid.dy, self.dt
        x = (np.arange(self.nx) * dx)[np.newaxis, :]
        y = (np.arange(self.ny) * dy)[:, np.newaxis]

        x_src = np.clip(x - self.u * dt, 0.0, (self.nx - 1) * dx)
        y_src = np.clip(y - self.v * dt, 0.0, (self.ny - 1) * dy)

        i0 = np.floor(x_src / dx).astype(int)
        j0 = np.floor(y_src / dy).astype(int)
        i1 = np.minimum(i0 + 1, self.nx - 1)
        j1 = np.minimum(j0 + 1, self.ny - 1)
        sx = x_src / dx - i0
        sy = y_src / dy - j0

        return (
            (1 - sx) * (1 - sy) * field[j0, i0]
            + sx * (1 - sy) * field[j0, i1]
            + (1 - sx) * sy * field[j1, i0]
            + sx * sy * field[j1, i1]
        )

    def advect_density(self) -> None:
        """Move the density field along the velocity field (semi-Lagrangian)."""
        self.density = self._advect(self.density)

    def advect_temperature(self) -> None:
        """Move the temperature field along the velocity field (semi-Lagrangian)."""
        self.temperature = self._advect(self.temperature)

    # ------------------------------------------------------------------
    # Diffusion
    # ------------------------------------------------------------------

    @staticmethod
    def _diffused(
        field: np.ndarray, coefficient: float, dt: float, x_denom: float, y_denom: float
    ) -> np.ndarray:
        result = field.copy()
        centre = _interior(field)
        laplacian = (field[1:-1, :-2] - 2 * centre + field[1:-1, 2:]) / x_denom + (
            field[:-2, 1:-1] - 2 * centre + field[2:, 1:-1]
        ) / y_denom
        _interior(result)[...] = centre + dt * coefficient * laplacian
        return result

    def diffuse_density(self) -> None:
        """Explicitly diffuse density in the interior; the boundary is kept."""
        dx, dy = self.grid.dx, self.grid.dy
        self.density = self._diffused(
            self.density, self.config.density_diffusion, self.dt, dx * dy, dy * dy
        )

    def diffuse_velocity(self) -> None:
        """Explicitly diffuse both velocity components; the boundary is kept."""
        dx, dy = self.grid.dx, self.grid.dy
        visc = self.config.velocity_viscosity
        self.u = self._diffused(self.u, visc, self.dt, dx * dx, dy * dy)
        self.v = self._diffused(self.v, visc, self.dt, dx * dx, dy * dy)

    def diffuse_temperature(self) -> None:
        """Explicitly diffuse temperature in the interior; the boundary is kept."""
        dx, dy = self.grid.dx, self.grid.dy
        self.temperature = self._diffused(
            self.temperature, self.config.thermal_diffusivity, self.dt, dx * dx, dy * dy
        )

    # ------------------------------------------------------------------
    # Pressure projection
    # ------------------------------------------------------------------

    def solve_pressure(self) -> None:
        """Jacobi iterations for the pressure Poisson equation with Neumann walls."""
        dx, dy, dt = self.grid.dx, self.grid.dy, self.dt
        tolerance = self.config.pressure_tolerance
        p = self.pressure

        divergence = (self.u[1:-1, 2:] - self.u[1:-1, :-2]) / (2 * dx) + (
            self.v[2:, 1:-1] - self.v[:-2, 1:-1]
        ) / (2 * dy)
        source = (dx * dx / dt) * divergence

        for _ in range(self.config.pressure_max_iter):
            new_values = (p[1:-1, :-2] + p[1:-1, 2:] + p[:-2, 1:-1] + p[2:, 1:-1] - source) / 4.0
            max_change = float(np.max(np.abs(new_values - _interior(p)), initial=0.0))
            _interior(p)[...] = new_values

            p[:, 0] = p[:, 1]
            p[:, -1] = p[:, -2]
            p[0, :] = p[1, :]
            p[-1, :] = p[-2, :]

            if max_change < tolerance:
                break

    def update_velocity(self) -> None:
        """Subtract the pressure gradient, clamp, and apply no-slip walls."""
        dx, dy, dt = self.grid.dx, self.grid.dy, self.dt
        low, high = self.config.velocity_clamp_min, self.config.velocity_clamp_max
        p = self.pressure

        dpdx = (p[1:-1, 2:] - p[1:-1, :-2]) / (2.0 * dx)
        dpdy = (p[2:, 1:-1] - p[:-2, 1:-1]) / (2.0 * dy)

        new_u = np.zeros_like(self.u)
        new_v = np.zeros_like(self.v)
        _interior(new_u)[...] = np.clip(_interior(self.u) - dt * dpdx, low, high)
        _interior(new_v)[...] = np.clip(_interior(self.v) - dt * dpdy, low, high)
        self.u = new_u
        self.v = new_v

    # ------------------------------------------------------------------
    # External forces
    # ------------------------------------------------------------------

    def apply_buoyancy(self) -> None:
        """Push fluid upward in proportion to its excess over ambient temperature."""
        ambient = self.config.ambient_temperature
        self.v += self.dt * self.config.buoyancy_beta * (self.temperature - ambient)

    def apply_wind(self) -> None:
        """Accelerate the interior uniformly by the configured wind."""
        _interior(self.u)[...] += self.config.wind_u * self.dt
        _interior(self.v)[...] += self.config.wind_v * self.dt

    def apply_vorticity_confinement(self) -> None:
        """Amplify small-scale swirls using the vorticity gradient."""
        dx, dy = self.grid.dx, self.grid.dy
        epsilon = self.config.vorticity_epsilon

        curl = np.zeros_like(self.u)
        _interior(curl)[...] = (self.v[1:-1, 2:] - self.v[1:-1, :-2]) / (2 * dx) - (
            self.u[2:, 1:-1] - self.u[:-2, 1:-1]
        ) / (2 * dy)

        if self.nx < 5 or self.ny < 5:
            return

        magnitude = np.abs(curl)
        n_x = (magnitude[2:-2, 3:-1] - magnitude[2:-2, 1:-3]) / (2 * dx)
        n_y = (magnitude[3:-1, 2:-2] - magnitude[1:-3, 2:-2]) / (2 * dy)
        length = np.sqrt(n_x * n_x + n_y * n_y) + 1e-5
        n_x = n_x / length
        n_y = n_y / length

        centre_curl = curl[2:-2, 2:-2]
        self.u[2:-2, 2:-2] += epsilon * (dy * n_y * centre_curl)
        self.v[2:-2, 2:-2] -= epsilon * (dx * n_x * centre_curl)

    def inject_turbulence(self) -> None:
        """Add uniform random perturbations to the interior velocity."""
        magnitude = self.config.turbulence_magnitude
        interior_shape = (max(self.ny - 2, 0), max(self.nx - 2, 0))
        noise = self.rng.random(interior_shape + (2,)) - 0.5
        _interior(self.u)[...] += magnitude * noise[..., 0]
        _interior(self.v)[...] += magnitude * noise[..., 1]

    def _gaussian_blob(self, x0: int, y0: int, radius: int) -> tuple[tuple[slice, slice], np.ndarray]:
        if radius <= 0:
            raise ValueError("radius must be positive")
        sigma = radius / 2.0
        j_start, j_stop = max(y0 - radius, 0), min(y0 + radius + 1, self.ny)
        i_start, i_stop = max(x0 - radius, 0), min(x0 + radius + 1, self.nx)
        window = (slice(j_start, max(j_stop, j_start)), slice(i_start, max(i_stop, i_start)))

        dj = (np.arange(j_start, max(j_stop, j_start)) - y0)[:, np.newaxis]
        di = (np.arange(i_start, max(i_stop, i_start)) - x0)[np.newaxis, :]
        dist = np.sqrt(di * di + dj * dj)
        factor = np.exp(-(dist * dist) / (2 * sigma * sigma))
        return window, np.where(dist <= radius, factor, 0.0)

    def inject_smoke(self, x0: int, y0: int, radius: int, amount: float) -> None:
        """Add smoke in a disc around ``(x0, y0)`` with Gaussian falloff."""
        window, weights = self._gaussian_blob(x0, y0, radius)
        self.density[window] += amount * weights

    def inject_heat(self, x0: int, y0: int, radius: int, heat_amount: float) -> None:
        """Raise temperature in a disc around ``(x0, y0)`` with Gaussian falloff."""
        window, weights = self._gaussian_blob(x0, y0, radius)
        self.temperature[window] += heat_amount * weights

    # ------------------------------------------------------------------
    # Output and stepping
    # ------------------------------------------------------------------

    def format_density(self) -> str:
        """Return the density field as text, one grid row per line."""
        return "".join(
            "".join(f"{value:.2f} " for value in row) + "\n" for row in self.density
        )

    def step(self) -> None:
        """Advance the simulation by one time step."""
        config = self.config
        step_number = int(self.time / self.dt)
        source_x = self.nx // 2

        if step_number % config.smoke_pulse_period < config.smoke_pulse_duration:
            self.inject_smoke(source_x, _SOURCE_ROW, config.smoke_radius, config.smoke_amount)
        if step_number % config.smoke_pulse_period == 0:
            self.inject_heat(source_x, _SOURCE_ROW, config.smoke_radius, _HEAT_PULSE_AMOUNT)

        self.advect_density()
        self.diffuse_density()

        self.advect_temperature()
        self.diffuse_temperature()

        self.diffuse_velocity()

        self.apply_buoyancy()
        self.apply_wind()

        if step_number % config.turbulence_injection_interval == 0:
            self.inject_turbulence()

        self.apply_vorticity_confinement()
        self.solve_pressure()
        self.update_velocity()

        self.time += self.dt
        print(f"Completed simulation step. New time = {self.time:f}")