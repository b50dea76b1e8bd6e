"""Plan builder — cursor-style authoring of walls, openings and rooms.

Lengths given to the builder are canonical millimeters; use the unit
constructors (`m`, `cm`, `mm`) to write them in other units:

    b = PlanBuilder(units=Unit.METERS)
    b.walls(thickness=m(0.2))
    b.start(at=(0, 0))
    b.go("east", m(4), id="w1")
    b.go("north", m(3), id="w2")
    b.go("west", m(4), id="w3")
    b.close_path(id="w4")
    b.room("living", by_loop=["w1", "w2", "w3", "w4"], label="Living")
    plan = b.build()
"""

from __future__ import annotations
import math
from typing import Sequence

from floorplan.errors import PlanBuildError
from floorplan.models import (
    Plan, Wall, Opening, OpeningType, Room, Label, Layer, Vec2,
    Justify, Unit, WallDefaults,
)


PointLike = Sequence[float] | Vec2

_COMPASS: dict[str, tuple[float, float]] = {
    "east": (1.0, 0.0),
    "west": (-1.0, 0.0),
    "north": (0.0, 1.0),
    "south": (0.0, -1.0),
}


class PlanBuilder:
    """Accumulates entities into a fresh Plan."""

    def __init__(
        self,
        units: Unit | str = Unit.MILLIMETERS,
        origin: str = "lower_left",
        scale: float | None = None,
        theme: str = "default",
    ) -> None:
        self._plan = Plan(units=Unit(units), origin=origin, scale=scale, theme=theme)
        self._defaults = WallDefaults()
        self._cursor: Vec2 | None = None
        self._path_start: Vec2 | None = None

    @property
    def defaults(self) -> WallDefaults:
        return self._defaults

    # Plan settings

    def layer(self, name: str, visible: bool = True, style: dict[str, str] | None = None) -> None:
        self._plan.layers[name] = Layer(name=name, visible=visible, style=style or {})

    def walls(
        self,
        thickness: float | None = None,
        justify: Justify | str | None = None,
        layer: str | None = None,
    ) -> WallDefaults:
        """Change the defaults for walls created afterwards."""
        update: dict[str, object] = {}
        if thickness is not None:
            update["thickness"] = float(thickness)
        if justify is not None:
            update["justify"] = Justify(justify)
        if layer is not None:
            update["layer"] = layer
        self._defaults = WallDefaults(**{**self._defaults.model_dump(), **update})
        return self._defaults

    # Cursor

    def start(self, at: PointLike) -> None:
        self._cursor = Vec2.of(at)
        self._path_start = self._cursor

    def line(
        self,
        from_: PointLike,
        to: PointLike,
        id: str | None = None,
        thickness: float | None = None,
        justify: Justify | str | None = None,
        layer: str | None = None,
    ) -> Wall:
        p2 = Vec2.of(to)
        wall = self._add_wall(Vec2.of(from_), p2, id, thickness, justify, layer)
        self._cursor = p2
        return wall

    def go(
        self,
        direction: str | float,
        length: float,
        id: str | None = None,
        thickness: float | None = None,
        justify: Justify | str | None = None,
        layer: str | None = None,
    ) -> Wall:
        """Draw a wall from the cursor.

        `direction` is a compass name or an angle in degrees,
        counter-clockwise from +x.
        """
        if self._cursor is None:
            raise PlanBuildError("start point not set (call start(at=(x, y)) first)")

        dx, dy = self._unit_step(direction)
        p1 = self._cursor
        p2 = Vec2(x=p1.x + dx * length, y=p1.y + dy * length)
        wall = self._add_wall(p1, p2, id, thickness, justify, layer)
        self._cursor = p2
        return wall

    def close_path(
        self,
        id: str | None = None,
        thickness: float | None = None,
        justify: Justify | str | None = None,
        layer: str | None = None,
    ) -> Wall:
        """Draw a wall from the cursor back to the last start point."""
        if self._cursor is None or self._path_start is None:
            raise PlanBuildError("no path to close (call start() then go())")
        wall = self._add_wall(self._cursor, self._path_start, id, thickness, justify, layer)
        self._cursor = self._path_start
        self._path_start = None
        return wall

    # Entities

    def opening(
        self,
        wall: str,
        at: float,
        width: float,
        kind: OpeningType | str = OpeningType.DOOR,
        swing: str | None = None,
        sill: float | None = None,
        head: float | None = None,
        id: str | None = None,
        ref: str | None = None,
    ) -> Opening:
        opening = Opening(
            id=id, wall_id=wall, at=float(at), width=float(width),
            kind=OpeningType(kind), swing=swing, sill=sill, head=head, ref=ref,
        )
        self._plan.openings.append(opening)
        return opening

    def room(
        self,
        id: str | None,
        by_loop: list[str] | None = None,
        polygon: list[PointLike] | None = None,
        label: str | None = None,
        layer: str = "rooms",
        fill: str | None = None,
    ) -> Room:
        self._plan.ensure_layer(layer)
        room = Room(
            id=id,
            label=label,
            polygon=[Vec2.of(p) for p in polygon] if polygon is not None else None,
            by_loop=list(by_loop) if by_loop is not None else None,
            layer=layer,
            fill=fill,
        )
        self._plan.rooms.append(room)
        return room

    def label(
        self,
        text: str,
        at: PointLike,
        rotation: float = 0.0,
        layer: str = "annotations",
        style: dict[str, str] | None = None,
    ) -> Label:
        self._plan.ensure_layer(layer)
        label = Label(text=text, at=Vec2.of(at), rotation=float(rotation), layer=layer, style=style or {})
        self._plan.labels.append(label)
        return label

    def build(self) -> Plan:
        """Snapshot of the plan built so far; later calls do not affect it."""
        return self._plan.model_copy(deep=True)

    # Helpers

    def _unit_step(self, direction: str | float) -> tuple[float, float]:
        if isinstance(direction, str):
            step = _COMPASS.get(direction.lower())
            if step is not None:
                return step
            try:
                direction = float(direction)
            except ValueError:
                raise PlanBuildError(f"Unknown direction {direction!r}") from None
        angle = math.radians(direction)
        return math.cos(angle), math.sin(angle)

    def _add_wall(
        self,
        p1: Vec2,
        p2: Vec2,
        id: str | None,
        thickness: float | None,
        justify: Justify | str | None,
        layer: str | None,
    ) -> Wall:
        d = self._defaults
        wall = Wall(
            id=id,
            p1=p1,
            p2=p2,
            thickness=d.thickness if thickness is None else float(thickness),
            justify=d.justify if justify is None else Justify(justify),
            layer=d.layer if layer is None else layer,
        )
        self._plan.ensure_layer(wall.layer)
        self._plan.walls.append(wall)
        return wall
