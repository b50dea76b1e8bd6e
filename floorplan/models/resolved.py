"""Resolved geometry output models."""

from __future__ import annotations
from pydantic import BaseModel

from .building import OpeningType
from .geometry import Vec2
from .plan import Plan


class WallGeometry(BaseModel):
    """Footprint quad of one wall (a1, b1, b2, a2)."""
    wall_id: str
    layer: str
    footprint: list[Vec2]


class OpeningGeometry(BaseModel):
    """Cutout rectangle of one opening."""
    opening_id: str
    wall_id: str
    kind: OpeningType
    cutout: list[Vec2]


class RoomGeometry(BaseModel):
    room_id: str
    label: str | None = None
    polygon: list[Vec2]
    area: float         # Signed, mm^2 (positive = counter-clockwise)
    centroid: Vec2


class ResolvedPlan(BaseModel):
    """A validated plan plus all geometry a renderer needs."""
    plan: Plan
    walls: list[WallGeometry]
    openings: list[OpeningGeometry]
    rooms: list[RoomGeometry]
    stats: PlanStats = None  # type: ignore[assignment]

    def model_post_init(self, __context: object) -> None:
        if self.stats is None:
            self.stats = PlanStats.from_geometry(self.walls, self.openings, self.rooms)


class PlanStats(BaseModel):
    """Summary statistics for a resolved plan."""
    walls: int = 0
    doors: int = 0
    windows: int = 0
    other_openings: int = 0
    rooms: int = 0
    total_room_area: float = 0.0   # mm^2, absolute

    @classmethod
    def from_geometry(
        cls,
        walls: list[WallGeometry],
        openings: list[OpeningGeometry],
        rooms: list[RoomGeometry],
    ) -> PlanStats:
        doors = sum(1 for o in openings if o.kind == OpeningType.DOOR)
        windows = sum(1 for o in openings if o.kind == OpeningType.WINDOW)
        return cls(
            walls=len(walls),
            doors=doors,
            windows=windows,
            other_openings=len(openings) - doors - windows,
            rooms=len(rooms),
            total_room_area=sum(abs(r.area) for r in rooms),
        )
