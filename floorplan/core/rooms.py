"""Room loop resolution — stitch an ordered list of walls into a closed polygon."""

from __future__ import annotations

from floorplan.errors import StructuralError
from floorplan.models import Plan, Room, Wall, Vec2, Polygon, EPSILON


MIN_POLYGON_VERTICES = 3


def stitch_loop(walls: list[Wall], eps: float = EPSILON) -> Polygon | None:
    """
    Greedily chain walls end to end into a closed loop.

    Starts with the first wall oriented p1 -> p2. At each step the first
    unconsumed wall (in list order) with an endpoint within `eps` of the
    path's last vertex is consumed; p1 is tested before p2, and the wall's
    other endpoint is appended. There is no backtracking, so ambiguous
    topologies such as T-junctions can fail even when a loop exists.

    Returns the open polygon (closing vertex dropped), or None when the
    path does not close, leaves a wall unconsumed, or is degenerate.
    """
    if not walls:
        return None

    used = [False] * len(walls)
    used[0] = True
    pts: list[Vec2] = [walls[0].p1, walls[0].p2]

    while True:
        connected = False
        last = pts[-1]
        for i, wall in enumerate(walls):
            if used[i]:
                continue
            if last.near(wall.p1, eps):
                pts.append(wall.p2)
            elif last.near(wall.p2, eps):
                pts.append(wall.p1)
            else:
                continue
            used[i] = True
            connected = True
            break

        if not connected:
            break
        if pts[-1].near(pts[0], eps) and all(used):
            break
        # Safety bound
        if len(pts) > len(walls) + 2:
            break

    if not pts[-1].near(pts[0], eps) or not all(used):
        return None
    pts.pop()
    if len(pts) < MIN_POLYGON_VERTICES:
        return None
    return pts


def resolve_room_polygon(
    room: Room, plan: Plan, eps: float = EPSILON, name: str | None = None,
) -> Polygon:
    """
    Authoritative polygon for a room.

    An explicit polygon with at least three vertices wins; otherwise the
    room's `by_loop` is stitched. Every failure is a StructuralError.
    """
    name = name or room.id or "(unnamed)"
    if room.polygon and len(room.polygon) >= MIN_POLYGON_VERTICES:
        return room.polygon

    if not room.by_loop:
        if room.polygon:
            raise StructuralError(
                f"Room {name} polygon needs at least {MIN_POLYGON_VERTICES} vertices "
                f"(got {len(room.polygon)})",
                {"room_id": room.id or ""},
            )
        raise StructuralError(
            f"Room {name} has neither a polygon nor a wall loop",
            {"room_id": room.id or ""},
        )

    walls: list[Wall] = []
    missing: list[str] = []
    for wall_id in room.by_loop:
        wall = plan.get_wall(wall_id)
        if wall is None:
            missing.append(wall_id)
        else:
            walls.append(wall)
    if missing:
        raise StructuralError(
            f"Room {name} references unknown wall(s): {', '.join(missing)}",
            {"room_id": room.id or "", "missing": ",".join(missing)},
        )

    polygon = stitch_loop(walls, eps)
    if polygon is None:
        raise StructuralError(
            f"Room {name} wall loop [{', '.join(room.by_loop)}] does not close",
            {"room_id": room.id or ""},
        )
    return polygon
