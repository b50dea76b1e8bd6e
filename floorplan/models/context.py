"""Validation context — accumulates state during one validation pass."""

from __future__ import annotations
from pydantic import BaseModel, Field

from .building import Wall, Opening
from .geometry import Vec2
from .parameters import ValidationConfig
from .plan import Plan
from .violations import Violation


class ValidationContext(BaseModel):
    """
    Holds all state during a single validation pass.

    The analyzer indexes walls and openings.
    Checks add violations and resolved room polygons.
    The validator orchestrates the flow and builds the resulting plan.
    """
    # Input
    plan: Plan
    config: ValidationConfig = Field(default_factory=ValidationConfig)

    # Analysis results (populated by the analyzer)
    wall_index: dict[str, Wall] = {}
    openings_by_wall: dict[str, list[tuple[int, Opening]]] = {}
    dangling_openings: list[tuple[int, Opening]] = []

    # Output (populated by checks)
    violations: list[Violation] = []
    room_polygons: dict[int, list[Vec2]] = {}   # Keyed by room position

    def add_violations(self, violations: list[Violation]) -> None:
        self.violations.extend(violations)

    def get_wall(self, wall_id: str) -> Wall | None:
        return self.wall_index.get(wall_id)

    def resolved_plan(self) -> Plan:
        """Copy of the input plan with every resolved room polygon filled in."""
        rooms = [
            room.model_copy(update={"polygon": self.room_polygons[i]})
            if i in self.room_polygons else room
            for i, room in enumerate(self.plan.rooms)
        ]
        return self.plan.model_copy(update={"rooms": rooms}, deep=True)
