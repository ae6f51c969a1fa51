"""Vessel trajectory analysis on web-map tile grids: cell geometry, error measures and AIS tables."""

__version__ = "0.1.0"

__all__ = [
    "cell",
    "centroid",
    "confidence",
    "csvloader",
    "errors",
    "geodesic",
    "lines",
    "measure",
    "reliability",
    "tables",
    "util",
    "xyzcell",
]