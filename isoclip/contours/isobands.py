"""Isobands (filled contour bands) from a gridded scalar field.

For every band ``[lower, upper)`` each cell contributes the part of its area
where the interpolated field lies in the band: the boundary is walked corner
by corner, keeping in-band corners and the lower/upper crossings met on the
way. The per-cell pieces of a band are then merged with the kernel union.
"""

import logging
from typing import List, Optional, Sequence, Union

from ..geometry import (
    DEFAULT_TOLERANCE,
    Feature,
    FeatureCollection,
    Point,
    Polygon,
    points_close,
    ring_area,
)
from ..geometry.kernel import union_polygons
from .grid import Cell, ZValues, build_grid, extract_z_values
from .isolines import cell_crossings, interpolate, straddles

logger = logging.getLogger(__name__)


def _in_band(z: float, lower: float, upper: float) -> bool:
    return lower <= z < upper


def _walk_band_ring(
    corners: Sequence[Point],
    zs: Sequence[float],
    lower: float,
    upper: float,
    tolerance: float,
) -> Optional[List[Point]]:
    """Closed ring around the in-band part of a convex cell, or None if degenerate.

    The walk starts at the first in-band corner when there is one, otherwise
    at the first crossing. Crossings on one edge are emitted in the order
    they are met along that edge.
    """
    n = len(corners)
    in_band = [_in_band(z, lower, upper) for z in zs]
    start = in_band.index(True) if any(in_band) else 0

    ring: List[Point] = []

    def push(p: Point):
        if not ring or not points_close(p, ring[-1], tolerance):
            ring.append(p)

    for k in range(start, start + n):
        i, j = k % n, (k + 1) % n
        if in_band[i]:
            push(corners[i])

        crossings = []
        for value in (lower, upper):
            if straddles(zs[i], zs[j], value):
                t = (value - zs[i]) / (zs[j] - zs[i])
                crossings.append((t, interpolate(corners[i], corners[j], zs[i], zs[j], value)))
        for _, p in sorted(crossings, key=lambda c: c[0]):
            push(p)

    if len(ring) > 1 and points_close(ring[0], ring[-1], tolerance):
        ring.pop()
    if not ring:
        return None

    ring.append(ring[0])
    if len(ring) < 4:
        return None
    return ring


def _band_polygon(
    corners: Sequence[Point],
    zs: Sequence[float],
    lower: float,
    upper: float,
    tolerance: float,
) -> Optional[Polygon]:
    in_band = sum(1 for z in zs if _in_band(z, lower, upper))

    if in_band == len(corners):
        return Polygon(list(corners) + [corners[0]])

    if in_band == 0:
        any_below = any(z < lower for z in zs)
        any_above = any(z >= upper for z in zs)
        if not (any_below and any_above):
            return None

    ring = _walk_band_ring(corners, zs, lower, upper, tolerance)
    if ring is None or ring_area(ring) == 0.0:
        return None
    return Polygon(ring)


def is_saddle_cell(cell: Cell, z_values: ZValues, breaks: Sequence[float]) -> bool:
    """Whether any break value crosses all four edges of the cell."""
    return any(len(cell_crossings(cell, z_values, value)) == 4 for value in breaks)


def cell_band_polygons(
    cell: Cell,
    z_values: ZValues,
    lower: float,
    upper: float,
    tolerance: float = DEFAULT_TOLERANCE,
    split: Optional[bool] = None,
) -> List[Polygon]:
    """In-band pieces of one cell.

    A split cell is cut into four triangles around its centre, which takes
    the average of the corner values, so the average decides whether
    opposite corners connect. Every band of a cell must use the same
    ``split``, otherwise neighbouring bands disagree on their shared
    boundary. When ``split`` is None the cell is split if ``lower`` or
    ``upper`` makes it a saddle.
    """
    corners = cell.corners
    zs = cell.values(z_values)

    if split is None:
        split = is_saddle_cell(cell, z_values, (lower, upper))

    if not split:
        polygon = _band_polygon(corners, zs, lower, upper, tolerance)
        return [polygon] if polygon is not None else []

    center = Point(
        sum(c.x for c in corners) / 4.0,
        sum(c.y for c in corners) / 4.0,
    )
    z_center = sum(zs) / 4.0

    polygons = []
    for i in range(4):
        j = (i + 1) % 4
        polygon = _band_polygon(
            (corners[i], corners[j], center),
            (zs[i], zs[j], z_center),
            lower,
            upper,
            tolerance,
        )
        if polygon is not None:
            polygons.append(polygon)
    return polygons


def isobands(
    points: Sequence[Union[Point, Feature]],
    breaks: Sequence[float],
    z_property: Optional[str] = None,
    tolerance: float = DEFAULT_TOLERANCE,
) -> FeatureCollection:
    """Filled contour bands between each pair of consecutive breaks.

    Args:
        points: Grid samples, either points carrying ``z`` or point features.
        breaks: Band limits. Sorted ascending before use.
        z_property: Feature property holding the value. Falls back to ``z``.
        tolerance: Distance under which walked boundary points are merged.

    Returns:
        FeatureCollection of Polygon features with ``lower_value`` and
        ``upper_value`` properties. A band made of several disjoint areas
        yields one feature per area.

    Raises:
        ValueError: Fewer than 4 grid points or fewer than 2 break values.
    """
    if points is None or len(points) < 4:
        raise ValueError("Point grid must contain at least 4 points")
    if breaks is None or len(breaks) < 2:
        raise ValueError("At least two break values must be provided")

    z_values = extract_z_values(points, z_property)
    grid = build_grid(z_values)
    ordered = sorted(breaks)
    splits = [is_saddle_cell(cell, z_values, ordered) for cell in grid]

    features: List[Feature] = []
    for lower, upper in zip(ordered, ordered[1:]):
        pieces: List[Polygon] = []
        for cell, split in zip(grid, splits):
            pieces.extend(cell_band_polygons(cell, z_values, lower, upper, tolerance, split))

        merged = union_polygons(pieces)
        logger.debug(
            "isoband [%s, %s): %d cell pieces merged into %d polygons",
            lower, upper, len(pieces), len(merged),
        )

        for polygon in merged:
            features.append(Feature(polygon, {"lower_value": lower, "upper_value": upper}))

    return FeatureCollection(features)
