"""Every wall must have a positive centerline length."""

from __future__ import annotations

from floorplan.rules.base import PlanCheck
from floorplan.models import (
    ValidationContext, Violation, ViolationKind, EntityKind, entity_name,
)
from floorplan.core.walls import MIN_WALL_LENGTH


class WallLengthCheck(PlanCheck):

    priority = 10  # Everything downstream assumes usable wall frames

    def get_id(self) -> str:
        return "wall.length"

    def get_name(self) -> str:
        return "Wall Length"

    def applies(self, context: ValidationContext) -> bool:
        return len(context.plan.walls) > 0

    def run(self, context: ValidationContext) -> list[Violation]:
        violations: list[Violation] = []
        for i, wall in enumerate(context.plan.walls):
            if wall.length < MIN_WALL_LENGTH:
                name = entity_name(wall.id, i)
                violations.append(self.violation(
                    ViolationKind.STRUCTURAL, EntityKind.WALL, name,
                    f"Wall {name} has zero length",
                ))
        return violations
