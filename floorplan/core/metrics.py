"""Polygon metrics — signed area and centroid."""

from __future__ import annotations

from floorplan.errors import StructuralError
from floorplan.models import Vec2, Polygon


AREA_EPSILON = 1e-9


def _require_polygon(polygon: Polygon) -> None:
    if len(polygon) < 3:
        raise StructuralError(
            f"Polygon needs at least 3 vertices (got {len(polygon)})",
            {"vertices": str(len(polygon))},
        )


def polygon_area(polygon: Polygon) -> float:
    """Signed shoelace area; positive when counter-clockwise."""
    _require_polygon(polygon)
    total = 0.0
    count = len(polygon)
    for i in range(count):
        a = polygon[i]
        b = polygon[(i + 1) % count]
        total += a.x * b.y - b.x * a.y
    return total / 2.0


def polygon_area_and_centroid(
    polygon: Polygon, area_eps: float = AREA_EPSILON,
) -> tuple[float, Vec2]:
    """
    Signed area and centroid of a simple polygon (convex or not).

    Degenerate polygons (|area| < area_eps) fall back to the vertex mean.
    """
    _require_polygon(polygon)
    area2 = 0.0
    cx = 0.0
    cy = 0.0
    count = len(polygon)
    for i in range(count):
        a = polygon[i]
        b = polygon[(i + 1) % count]
        cross = a.x * b.y - b.x * a.y
        area2 += cross
        cx += (a.x + b.x) * cross
        cy += (a.y + b.y) * cross

    area = area2 / 2.0
    if abs(area) < area_eps:
        return area, Vec2(
            x=sum(p.x for p in polygon) / count,
            y=sum(p.y for p in polygon) / count,
        )
    return area, Vec2(x=cx / (6.0 * area), y=cy / (6.0 * area))


def polygon_centroid(polygon: Polygon, area_eps: float = AREA_EPSILON) -> Vec2:
    return polygon_area_and_centroid(polygon, area_eps)[1]
