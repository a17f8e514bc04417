"""Isolines (contour lines) from a gridded scalar field.

Marching squares: every cell edge whose end values straddle a break value
gets a crossing point by linear interpolation, crossings inside a cell are
paired into chords, and the chords of all cells are stitched into polylines.
"""

import logging
from typing import List, Optional, Sequence, Tuple, Union

from ..geometry import (
    DEFAULT_TOLERANCE,
    Feature,
    FeatureCollection,
    LineString,
    Point,
    points_close,
)
from .grid import Cell, ZValues, build_grid, extract_z_values

logger = logging.getLogger(__name__)

Segment = Tuple[Point, Point]


def straddles(z0: float, z1: float, value: float) -> bool:
    """One end below ``value`` and the other at or above it."""
    return (z0 < value) != (z1 < value)


def interpolate(p0: Point, p1: Point, z0: float, z1: float, value: float) -> Point:
    """Point on ``p0``-``p1`` where the linearly interpolated field equals ``value``.

    The result does not depend on the direction the edge is given in, so
    neighbouring cells agree on the crossings of their shared edge.
    """
    if (p1.x, p1.y) < (p0.x, p0.y):
        p0, p1, z0, z1 = p1, p0, z1, z0
    t = (value - z0) / (z1 - z0)
    return Point(p0.x + t * (p1.x - p0.x), p0.y + t * (p1.y - p0.y))


def cell_crossings(cell: Cell, z_values: ZValues, value: float) -> List[Point]:
    """Crossing points of ``value`` on the cell edges, in the order bottom, right, top, left."""
    corners = cell.corners
    zs = cell.values(z_values)
    crossings = []

    for i in range(4):
        j = (i + 1) % 4
        if straddles(zs[i], zs[j], value):
            crossings.append(interpolate(corners[i], corners[j], zs[i], zs[j], value))

    return crossings


def cell_segments(cell: Cell, z_values: ZValues, value: float) -> List[Segment]:
    """Chords inside one cell: crossings paired as (0, 1), (2, 3)."""
    crossings = cell_crossings(cell, z_values, value)
    return [(crossings[i], crossings[i + 1]) for i in range(0, len(crossings) - 1, 2)]


def stitch_segments(
    segments: Sequence[Segment],
    tolerance: float = DEFAULT_TOLERANCE,
) -> List[LineString]:
    """Join chords sharing endpoints into maximal polylines.

    Each line starts from the first unused chord and grows greedily, at its
    tail first and then at its head, taking chords in either orientation.
    """
    remaining = list(segments)
    lines: List[LineString] = []

    while remaining:
        start, end = remaining.pop(0)
        coords = [start, end]

        found = True
        while found and remaining:
            found = False

            tail = coords[-1]
            for i, (s, e) in enumerate(remaining):
                if points_close(s, tail, tolerance):
                    coords.append(e)
                elif points_close(e, tail, tolerance):
                    coords.append(s)
                else:
                    continue
                del remaining[i]
                found = True
                break

            if found:
                continue

            head = coords[0]
            for i, (s, e) in enumerate(remaining):
                if points_close(e, head, tolerance):
                    coords.insert(0, s)
                elif points_close(s, head, tolerance):
                    coords.insert(0, e)
                else:
                    continue
                del remaining[i]
                found = True
                break

        lines.append(LineString(coords))

    return lines


def isolines(
    points: Sequence[Union[Point, Feature]],
    breaks: Sequence[float],
    z_property: Optional[str] = None,
    tolerance: float = DEFAULT_TOLERANCE,
) -> FeatureCollection:
    """Contour lines of a gridded field, one or more LineString features per break.

    Args:
        points: Grid samples, either points carrying ``z`` or point features.
        breaks: Values to contour. Sorted ascending before use.
        z_property: Feature property holding the value. Falls back to ``z``.
        tolerance: Distance under which chord endpoints are joined.

    Returns:
        FeatureCollection of LineString features with an ``isoline`` property.

    Raises:
        ValueError: Fewer than 4 grid points or no break values.
    """
    if points is None or len(points) < 4:
        raise ValueError("Point grid must contain at least 4 points")
    if breaks is None or len(breaks) < 1:
        raise ValueError("At least one break value must be provided")

    z_values = extract_z_values(points, z_property)
    grid = build_grid(z_values)

    features: List[Feature] = []
    for value in sorted(breaks):
        segments: List[Segment] = []
        for cell in grid:
            segments.extend(cell_segments(cell, z_values, value))

        lines = stitch_segments(segments, tolerance)
        logger.debug("isoline %s: %d chords stitched into %d lines", value, len(segments), len(lines))

        for line in lines:
            features.append(Feature(line, {"isoline": value}))

    return FeatureCollection(features)
