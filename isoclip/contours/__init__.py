"""Contour extraction over gridded scalar fields."""

from .grid import Cell, build_grid, extract_z_values
from .isolines import cell_crossings, cell_segments, isolines, stitch_segments
from .isobands import cell_band_polygons, is_saddle_cell, isobands

__all__ = [
    "Cell",
    "build_grid",
    "extract_z_values",
    "cell_crossings",
    "cell_segments",
    "stitch_segments",
    "isolines",
    "cell_band_polygons",
    "is_saddle_cell",
    "isobands",
]
