"""Outcode-based clipping of polylines against a BBox."""

from typing import List

from ..geometry import BBox, LineString, MultiLineString, Point
from .outcode import bit_code, intersect


def clip_line_parts(line: LineString, box: BBox) -> List[LineString]:
    """Clip a polyline to ``box``, one LineString per piece that stays inside.

    Consecutive segments are processed in order. An endpoint outside the box
    is moved onto the nearest violated side until the segment is either
    fully inside or fully outside one side. A piece ends where the line
    leaves the box and a new one starts where it comes back in.
    """
    points = line.coords
    n = len(points)
    if n < 2:
        return [line] if n else []

    code_a = bit_code(points[0], box)
    part: List[Point] = []
    parts: List[List[Point]] = []

    for i in range(1, n):
        a = points[i - 1]
        b = points[i]
        code_b = last_code = bit_code(b, box)

        while True:
            if not (code_a | code_b):
                part.append(a)
                if code_b != last_code:
                    # b was moved onto the boundary: the line leaves here
                    part.append(b)
                    if i < n - 1:
                        parts.append(part)
                        part = []
                elif i == n - 1:
                    part.append(b)
                break

            if code_a & code_b:
                break

            if code_a:
                a = intersect(a, b, code_a, box)
                code_a = bit_code(a, box)
            else:
                b = intersect(a, b, code_b, box)
                code_b = bit_code(b, box)

        code_a = last_code

    if part:
        parts.append(part)

    return [LineString(p) for p in parts]


def clip_line_string(line: LineString, box: BBox) -> LineString:
    """Clip a polyline to ``box`` and join every surviving piece into one line.

    Disjoint pieces are concatenated in order, so the result may jump across
    the outside of the box. Use :func:`clip_line_parts` to keep them apart.
    """
    if len(line) < 2:
        return line

    parts = clip_line_parts(line, box)
    if len(parts) == 1:
        return parts[0]
    return LineString([p for part in parts for p in part.coords])


def clip_multi_line_string(lines: MultiLineString, box: BBox) -> MultiLineString:
    """Clip every component, dropping the ones that end up empty."""
    clipped = []
    for line in lines.lines:
        result = clip_line_string(line, box)
        if not result.is_empty:
            clipped.append(result)
    return MultiLineString(clipped)
