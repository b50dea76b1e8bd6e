"""Building element models — walls, openings, rooms, labels."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field

from .geometry import Vec2


class Justify(str, Enum):
    """Where a wall's thickness sits relative to its centerline."""
    CENTER = "center"
    LEFT = "left"      # Solid on the +normal side of p1 -> p2
    RIGHT = "right"    # Solid on the -normal side


class OpeningType(str, Enum):
    DOOR = "door"
    WINDOW = "window"
    OPENING = "opening"


class OpeningRef(str, Enum):
    """Measurement frame for an opening's `at` offset."""
    CENTERLINE = "centerline"
    INNER_FACE = "inner_face"
    OUTER_FACE = "outer_face"


class Layer(BaseModel):
    name: str
    visible: bool = True
    style: dict[str, str] = {}


class Wall(BaseModel):
    """A straight wall segment defined by its centerline endpoints."""
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    id: str | None = None
    p1: Vec2
    p2: Vec2
    thickness: float = Field(default=100.0, ge=0)   # mm
    justify: Justify = Justify.CENTER
    layer: str = "walls"

    @property
    def length(self) -> float:
        return self.p1.distance_to(self.p2)


class Opening(BaseModel):
    """A door or window cut through a wall.

    `at` and `width` are measured along the wall from p1. `ref` stays a
    plain string so unknown frames surface as validation violations.
    """
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    id: str | None = None
    wall_id: str
    at: float           # Offset along the wall from p1 (mm)
    width: float        # Clear width (mm)
    kind: OpeningType = OpeningType.DOOR
    swing: str | None = None
    sill: float | None = None   # Elevation only
    head: float | None = None   # Elevation only
    ref: str | None = None


class Room(BaseModel):
    """A room bounded by an explicit polygon or by a loop of wall ids."""
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    id: str | None = None
    label: str | None = None
    polygon: list[Vec2] | None = None
    by_loop: list[str] | None = None
    layer: str = "rooms"
    fill: str | None = None


class Label(BaseModel):
    """Free text annotation placed on the plan."""
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    text: str
    at: Vec2
    rotation: float = 0.0   # Degrees
    layer: str = "annotations"
    style: dict[str, str] = {}
