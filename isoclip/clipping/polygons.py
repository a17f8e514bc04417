"""Sutherland-Hodgman clipping of polygons against a BBox."""

from typing import List, Optional

from ..geometry import BBox, MultiPolygon, Point, Polygon, close_ring
from .outcode import EDGES, bit_code, intersect


def clip_ring(ring: List[Point], box: BBox) -> List[Point]:
    """Clip one ring against the four sides of ``box`` in turn.

    The result is not re-closed and may hold fewer than 4 points.
    """
    result = list(ring)

    for edge in EDGES:
        if not result:
            break

        input_list = result
        result = []

        prev = input_list[-1]
        prev_inside = not (bit_code(prev, box) & edge)

        for point in input_list:
            inside = not (bit_code(point, box) & edge)

            if inside != prev_inside:
                result.append(intersect(prev, point, edge, box))
            if inside:
                result.append(point)

            prev = point
            prev_inside = inside

    return result


def _clip_closed_ring(ring: List[Point], box: BBox) -> Optional[List[Point]]:
    clipped = clip_ring(ring, box)
    if len(clipped) < 4:
        return None
    return close_ring(clipped)


def clip_polygon(polygon: Polygon, box: BBox) -> Polygon:
    """Clip a polygon and each of its holes to ``box``.

    Returns an empty polygon when the exterior does not survive; holes that
    do not survive are dropped.
    """
    exterior = _clip_closed_ring(polygon.exterior, box)
    if exterior is None:
        return Polygon.empty()

    holes = []
    for hole in polygon.holes:
        clipped = _clip_closed_ring(hole, box)
        if clipped is not None:
            holes.append(clipped)

    return Polygon(exterior, holes)


def clip_multi_polygon(polygons: MultiPolygon, box: BBox) -> MultiPolygon:
    clipped = []
    for polygon in polygons.polygons:
        result = clip_polygon(polygon, box)
        if not result.is_empty:
            clipped.append(result)
    return MultiPolygon(clipped)
