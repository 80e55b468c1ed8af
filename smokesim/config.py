"""Parameters controlling a smoke simulation run."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SimulationConfig:
    """Physical and numerical settings for a simulation."""

    dt: float = 0.005
    total_time: float = 5.0
    density_diffusion: float = 0.0001
    velocity_viscosity: float = 0.005
    pressure_tolerance: float = 1e-6
    pressure_max_iter: int = 1000
    buoyancy_beta: float = 0.08
    ambient_density: float = 0.01
    wind_u: float = 4.5
    wind_v: float = 3.5
    turbulence_magnitude: float = 0.02
    turbulence_injection_interval: int = 2
    vorticity_epsilon: float = 0.2
    smoke_radius: int = 8
    smoke_amount: float = 0.4
    smoke_pulse_period: int = 10
    smoke_pulse_duration: int = 5
    velocity_clamp_min: float = -5.0
    velocity_clamp_max: float = 5.0
    thermal_diffusivity: float = 0.0001
    ambient_temperature: int = 300

    def __post_init__(self) -> None:
        if self.dt <= 0:
            raise ValueError("dt must be positive")
        if self.pressure_max_iter < 0:
            raise ValueError("pressure_max_iter must not be negative")
        if self.turbulence_injection_interval <= 0:
            raise ValueError("turbulence_injection_interval must be positive")
        if self.smoke_pulse_period <= 0:
            raise ValueError("smoke_pulse_period must be positive")
        if self.smoke_radius < 0:
            raise ValueError("smoke_radius must not be negative")
        if self.velocity_clamp_min > self.velocity_clamp_max:
            raise ValueError("velocity_clamp_min must not exceed velocity_clamp_max")


def default_config() -> SimulationConfig:
    """Return the default simulation configuration."""
    return SimulationConfig()