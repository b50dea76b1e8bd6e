"""Every room must resolve to a closed polygon."""

from __future__ import annotations
import logging

from floorplan.errors import StructuralError
from floorplan.rules.base import PlanCheck
from floorplan.models import (
    ValidationContext, Violation, ViolationKind, EntityKind, entity_name,
)
from floorplan.core.rooms import resolve_room_polygon

logger = logging.getLogger(__name__)


class RoomLoopCheck(PlanCheck):
    """Resolves each room polygon and records it on the context."""

    priority = 40
    dependencies = ["wall.length"]

    def get_id(self) -> str:
        return "room.loop"

    def get_name(self) -> str:
        return "Room Loop Closure"

    def applies(self, context: ValidationContext) -> bool:
        return len(context.plan.rooms) > 0

    def run(self, context: ValidationContext) -> list[Violation]:
        violations: list[Violation] = []
        for i, room in enumerate(context.plan.rooms):
            name = entity_name(room.id, i)
            try:
                polygon = resolve_room_polygon(
                    room, context.plan, context.config.epsilon, name=name,
                )
            except StructuralError as exc:
                logger.debug("Room %s unresolved: %s", name, exc.message)
                violations.append(self.violation(
                    ViolationKind.STRUCTURAL, EntityKind.ROOM, name, exc.message,
                ))
                continue
            context.room_polygons[i] = polygon
        return violations
