"""The Plan — owner of every entity in a floor plan."""

from __future__ import annotations
from pydantic import BaseModel, Field

from .building import Wall, Opening, Room, Label, Layer
from .units import Unit


def _default_layers() -> dict[str, Layer]:
    return {
        "walls": Layer(name="walls"),
        "rooms": Layer(name="rooms"),
        "annotations": Layer(name="annotations"),
    }


class Plan(BaseModel):
    """
    A complete floor plan in canonical millimeters.

    Entities reference each other by id only (`Opening.wall_id`,
    `Room.by_loop`). `units` is the display unit chosen by the author;
    stored coordinates are always millimeters.
    """
    units: Unit = Unit.MILLIMETERS
    origin: str = "lower_left"
    scale: float | None = None
    theme: str = "default"
    layers: dict[str, Layer] = Field(default_factory=_default_layers)

    walls: list[Wall] = []
    openings: list[Opening] = []
    rooms: list[Room] = []
    labels: list[Label] = []

    def get_wall(self, wall_id: str) -> Wall | None:
        """First wall declared with this id."""
        for w in self.walls:
            if w.id is not None and w.id == wall_id:
                return w
        return None

    def openings_for(self, wall_id: str) -> list[Opening]:
        return [o for o in self.openings if o.wall_id == wall_id]

    def ensure_layer(self, name: str) -> Layer:
        if name not in self.layers:
            self.layers[name] = Layer(name=name)
        return self.layers[name]
