[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vesseltrack"
version = "0.1.0"
description = "Vessel trajectory analysis on map-tile grids: cell geometry, rendering error measures, depth reliability and AIS data tables"
requires-python = ">=3.10"
dependencies = [
    "numpy",
    "shapely",
]
keywords = ["ais", "vessel", "trajectory", "gis", "tiles", "geodesic", "bathymetry"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["vesseltrack"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
ignore_missing_imports = true
