"""Geometric operations for graph repair and face decomposition.

This module provides core mathematical utilities for:
- Squared Euclidean distance (nearest-vertex searches)
- Segment-segment interior crossing (parametric cross-product form)
- Signed polygon area (shoelace formula)
- Centroid of a point set

All functions are pure and stateless.
"""

from quiltgraph.domain import Point


def squared_distance(a: Point, b: Point) -> float:
    """Squared Euclidean distance between two points.

    Examples:
        >>> squared_distance(Point(0.0, 0.0), Point(3.0, 4.0))
        25.0
    """
    dx = a.x - b.x
    dy = a.y - b.y
    return dx * dx + dy * dy


def segment_crossing(
    p1: Point,
    p2: Point,
    p3: Point,
    p4: Point,
    epsilon: float = 1e-9,
    parallel_tolerance: float = 0.0,
) -> Point | None:
    """Find the interior crossing point of segments p1-p2 and p3-p4.

    Uses the parametric form ``p1 + t (p2 - p1) = p3 + u (p4 - p3)``. Touching
    at or near an endpoint is not a crossing: both parameters must lie
    strictly inside ``(epsilon, 1 - epsilon)``.

    Args:
        p1: First endpoint of segment 1
        p2: Second endpoint of segment 1
        p3: First endpoint of segment 2
        p4: Second endpoint of segment 2
        epsilon: Margin excluded at both ends of each segment
        parallel_tolerance: Determinant magnitude at or below which the
            segments count as parallel (0.0 is an exact-zero test)

    Returns:
        Point at the crossing, or None

    Examples:
        >>> segment_crossing(Point(0, 10), Point(10, 0), Point(0, 0), Point(10, 10))
        Point(x=5.0, y=5.0)
    """
    den = (p4.y - p3.y) * (p2.x - p1.x) - (p4.x - p3.x) * (p2.y - p1.y)
    if abs(den) <= parallel_tolerance:
        return None

    num_t = (p4.x - p3.x) * (p1.y - p3.y) - (p4.y - p3.y) * (p1.x - p3.x)
    num_u = (p2.x - p1.x) * (p1.y - p3.y) - (p2.y - p1.y) * (p1.x - p3.x)
    t = num_t / den
    u = num_u / den

    upper = 1.0 - epsilon
    if epsilon < t < upper and epsilon < u < upper:
        return Point(p1.x + t * (p2.x - p1.x), p1.y + t * (p2.y - p1.y))

    return None


def signed_area(points: list[Point]) -> float:
    """Calculate signed area of a polygon using the shoelace formula.

    Positive for counter-clockwise order in a y-up frame.

    Args:
        points: List of points forming the polygon boundary

    Returns:
        Signed area in square units. Returns 0.0 for degenerate polygons.
    """
    n = len(points)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += points[i].x * points[j].y
        area -= points[j].x * points[i].y

    return area / 2.0


def centroid(points: list[Point]) -> Point | None:
    """Arithmetic mean of a set of points, or None for an empty set."""
    if not points:
        return None
    n = len(points)
    return Point(sum(p.x for p in points) / n, sum(p.y for p in points) / n)
