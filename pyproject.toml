[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "smokesim"
version = "0.1.0"
description = "Two-dimensional grid-based smoke simulation with VTK output"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["smoke", "fluid", "simulation", "cfd", "vtk", "buoyancy"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
smokesim = "smokesim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["smokesim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
