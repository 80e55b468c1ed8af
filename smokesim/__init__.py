"""Two-dimensional grid-based smoke simulation with VTK output."""

__version__ = "0.1.0"