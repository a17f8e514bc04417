"""Outcodes and edge intersections for clipping against a BBox."""

from ..geometry import BBox, Point

LEFT = 1
RIGHT = 2
BOTTOM = 4
TOP = 8

# Sutherland-Hodgman pass order: west, east, south, north.
EDGES = (LEFT, RIGHT, BOTTOM, TOP)


def bit_code(p: Point, box: BBox) -> int:
    """Which sides of ``box`` the point lies outside of. 0 means inside or on the boundary."""
    code = 0

    if p.x < box.west:
        code |= LEFT
    elif p.x > box.east:
        code |= RIGHT

    if p.y < box.south:
        code |= BOTTOM
    elif p.y > box.north:
        code |= TOP

    return code


def intersect(a: Point, b: Point, edge: int, box: BBox) -> Point:
    """Point where segment ``a``-``b`` crosses the box side named by ``edge``.

    When ``edge`` has several bits set the side is picked in the order
    top, bottom, right, left.
    """
    if edge & TOP:
        return Point(a.x + (b.x - a.x) * (box.north - a.y) / (b.y - a.y), box.north)
    if edge & BOTTOM:
        return Point(a.x + (b.x - a.x) * (box.south - a.y) / (b.y - a.y), box.south)
    if edge & RIGHT:
        return Point(box.east, a.y + (b.y - a.y) * (box.east - a.x) / (b.x - a.x))
    if edge & LEFT:
        return Point(box.west, a.y + (b.y - a.y) * (box.west - a.x) / (b.x - a.x))
    raise ValueError(f"Invalid clip edge code: {edge}")
