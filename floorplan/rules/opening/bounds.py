"""Openings must sit on an existing wall, inside its extent."""

from __future__ import annotations

from floorplan.rules.base import PlanCheck
from floorplan.models import (
    Opening, Wall, ValidationContext, Violation, ViolationKind, EntityKind, entity_name,
)
from floorplan.core.openings import RECOGNIZED_REFS, canonical_offset


class OpeningBoundsCheck(PlanCheck):
    """Wall reference, width, reference frame, and placement per opening."""

    priority = 20

    def get_id(self) -> str:
        return "opening.bounds"

    def get_name(self) -> str:
        return "Opening Bounds"

    def applies(self, context: ValidationContext) -> bool:
        return len(context.plan.openings) > 0

    def run(self, context: ValidationContext) -> list[Violation]:
        violations: list[Violation] = []
        for wall_id, openings in context.openings_by_wall.items():
            wall = context.get_wall(wall_id)
            for index, opening in openings:
                violations.extend(self._check_opening(index, opening, wall, context))

        for index, opening in context.dangling_openings:
            name = entity_name(opening.id, index)
            violations.append(self.violation(
                ViolationKind.STRUCTURAL, EntityKind.OPENING, name,
                f"Opening {name} references unknown wall {opening.wall_id}",
            ))
        return violations

    def _check_opening(
        self, index: int, opening: Opening, wall: Wall, context: ValidationContext,
    ) -> list[Violation]:
        violations: list[Violation] = []
        name = entity_name(opening.id, index)
        eps = context.config.epsilon

        if opening.width <= 0:
            violations.append(self.violation(
                ViolationKind.BOUNDS, EntityKind.OPENING, name,
                f"Opening {name} width must be > 0 (got {opening.width:g})",
            ))

        ref_ok = opening.ref is None or opening.ref in RECOGNIZED_REFS
        if not ref_ok:
            violations.append(self.violation(
                ViolationKind.CONFIG, EntityKind.OPENING, name,
                f"Opening {name} has unrecognized ref {opening.ref!r} "
                f"(expected one of {', '.join(RECOGNIZED_REFS)})",
            ))

        if opening.at < 0:
            violations.append(self.violation(
                ViolationKind.BOUNDS, EntityKind.OPENING, name,
                f"Opening {name} offset must be >= 0 (got {opening.at:g})",
            ))

        if not ref_ok:
            return violations

        start = canonical_offset(opening, wall)
        end = start + opening.width
        if opening.at >= 0 and start < -eps:
            violations.append(self.violation(
                ViolationKind.BOUNDS, EntityKind.OPENING, name,
                f"Opening {name} starts {-start:g} before the start of wall {opening.wall_id}",
            ))
        if end > wall.length + eps:
            violations.append(self.violation(
                ViolationKind.BOUNDS, EntityKind.OPENING, name,
                f"Opening {name} extends past the end of wall {opening.wall_id} "
                f"({end:g} > {wall.length:g})",
            ))
        return violations
