"""Ring and coordinate helpers shared by the clipper and the contour builders."""

from typing import List, Union
from .types import MultiPolygon, Point, Polygon

# Two coordinates closer than this are treated as the same vertex.
DEFAULT_TOLERANCE = 1e-8


def points_close(a: Point, b: Point, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """Check whether two points coincide within ``tolerance``."""
    dx = a.x - b.x
    dy = a.y - b.y
    return dx * dx + dy * dy < tolerance * tolerance


def polygon_signed_area(polygon: List[Point]) -> float:
    """Calculate the signed area of a polygon.

    Positive = counter-clockwise, negative = clockwise.
    """
    if len(polygon) < 3:
        return 0.0

    area = 0.0
    n = len(polygon)
    for i in range(n):
        j = (i + 1) % n
        area += polygon[i].x * polygon[j].y
        area -= polygon[j].x * polygon[i].y

    return area / 2.0


def ring_area(ring: List[Point]) -> float:
    return abs(polygon_signed_area(ring))


def is_closed(ring: List[Point]) -> bool:
    """Exact first/last equality, as required for a valid ring."""
    if not ring:
        return False
    first, last = ring[0], ring[-1]
    return first.x == last.x and first.y == last.y


def close_ring(ring: List[Point]) -> List[Point]:
    """Append the first point if the ring is open. Mutates and returns ``ring``."""
    if ring and not is_closed(ring):
        ring.append(ring[0])
    return ring


def point_in_ring(point: Point, ring: List[Point]) -> bool:
    """Check if a point is inside a ring using ray casting."""
    if len(ring) < 3:
        return False

    inside = False
    n = len(ring)

    j = n - 1
    for i in range(n):
        xi, yi = ring[i].x, ring[i].y
        xj, yj = ring[j].x, ring[j].y

        if ((yi > point.y) != (yj > point.y)) and \
           (point.x < (xj - xi) * (point.y - yi) / (yj - yi) + xi):
            inside = not inside

        j = i

    return inside


def point_on_ring(point: Point, ring: List[Point], tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """Check whether a point lies on one of the ring's edges."""
    for a, b in zip(ring, ring[1:]):
        dx, dy = b.x - a.x, b.y - a.y
        length_sq = dx * dx + dy * dy
        if length_sq == 0.0:
            if points_close(point, a, tolerance):
                return True
            continue
        t = ((point.x - a.x) * dx + (point.y - a.y) * dy) / length_sq
        t = max(0.0, min(1.0, t))
        if points_close(point, Point(a.x + t * dx, a.y + t * dy), tolerance):
            return True
    return False


def boolean_point_in_polygon(
    point: Point,
    polygon: Union[Polygon, MultiPolygon],
    ignore_boundary: bool = False,
    tolerance: float = DEFAULT_TOLERANCE,
) -> bool:
    """Whether ``point`` lies inside a polygon or multi-polygon, holes accounted for.

    Points on the boundary count as inside unless ``ignore_boundary`` is set,
    in which case they count as outside.

    Raises:
        ValueError: ``point`` or ``polygon`` is None.
        TypeError: ``polygon`` is neither a Polygon nor a MultiPolygon.
    """
    if point is None:
        raise ValueError("point is required")
    if polygon is None:
        raise ValueError("polygon is required")

    if isinstance(polygon, MultiPolygon):
        return any(
            boolean_point_in_polygon(point, part, ignore_boundary, tolerance)
            for part in polygon.polygons
        )
    if not isinstance(polygon, Polygon):
        raise TypeError(f"Geometry type {type(polygon).__name__} is not a polygon")

    if polygon.is_empty:
        return False

    rings = [polygon.exterior] + list(polygon.holes)
    if any(point_on_ring(point, ring, tolerance) for ring in rings):
        return not ignore_boundary

    if not point_in_ring(point, polygon.exterior):
        return False
    return not any(point_in_ring(point, hole) for hole in polygon.holes)
