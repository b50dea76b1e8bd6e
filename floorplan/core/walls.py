"""Wall geometry — centerline + thickness + justification to a footprint quad."""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict

from floorplan.errors import StructuralError
from floorplan.models import Wall, Justify, Vec2, Polygon, direction_from_points


MIN_WALL_LENGTH = 1e-12


def band_offsets(thickness: float, justify: Justify) -> tuple[float, float]:
    """Transverse (lo, hi) offsets of the solid band along the left-hand normal."""
    if justify == Justify.LEFT:
        return 0.0, thickness
    if justify == Justify.RIGHT:
        return -thickness, 0.0
    half = thickness / 2.0
    return -half, half


class WallFrame(BaseModel):
    """Local frame of a wall: origin p1, axis u, left-hand normal n."""
    model_config = ConfigDict(frozen=True)

    origin: Vec2
    direction: Vec2
    normal: Vec2
    length: float
    thickness: float
    justify: Justify

    @property
    def band(self) -> tuple[float, float]:
        return band_offsets(self.thickness, self.justify)

    def point_at(self, along: float, across: float = 0.0) -> Vec2:
        """Point `along` mm from p1 on the axis, shifted `across` mm on the normal."""
        return self.origin + self.direction * along + self.normal * across

    def strip(self, start: float, end: float) -> Polygon:
        """Rectangle spanning [start, end] along the axis over the full band."""
        lo, hi = self.band
        return [
            self.point_at(start, lo),
            self.point_at(end, lo),
            self.point_at(end, hi),
            self.point_at(start, hi),
        ]


def resolve_frame(wall: Wall) -> WallFrame:
    """Resolve the wall's local frame. Degenerate walls are a StructuralError."""
    delta = direction_from_points(wall.p1, wall.p2)
    length = delta.length()
    if length < MIN_WALL_LENGTH:
        raise StructuralError(
            f"Wall {wall.id or '(unnamed)'} has zero length",
            {"wall_id": wall.id or ""},
        )
    u = Vec2(x=delta.x / length, y=delta.y / length)
    return WallFrame(
        origin=wall.p1,
        direction=u,
        normal=u.perpendicular(),
        length=length,
        thickness=wall.thickness,
        justify=wall.justify,
    )


def wall_footprint(wall: Wall) -> Polygon:
    """
    Footprint quad of a wall, ordered a1, b1, b2, a2.

    a* sit at p1, b* at p2; *1 on the low side of the band, *2 on the high
    side. For a positive thickness the quad winds counter-clockwise.
    """
    frame = resolve_frame(wall)
    lo, hi = frame.band
    n = frame.normal
    return [wall.p1 + n * lo, wall.p2 + n * lo, wall.p2 + n * hi, wall.p1 + n * hi]
