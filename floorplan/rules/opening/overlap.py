"""Openings on one wall must not collide."""

from __future__ import annotations

from floorplan.rules.base import PlanCheck
from floorplan.models import (
    ValidationContext, Violation, ViolationKind, EntityKind, entity_name,
)
from floorplan.core.openings import RECOGNIZED_REFS, canonical_offset


class OpeningOverlapCheck(PlanCheck):
    """Consecutive openings (by start offset) may touch but not overlap."""

    priority = 30
    dependencies = ["opening.bounds"]

    def get_id(self) -> str:
        return "opening.overlap"

    def get_name(self) -> str:
        return "Opening Overlap"

    def applies(self, context: ValidationContext) -> bool:
        return len(context.plan.openings) > 1

    def run(self, context: ValidationContext) -> list[Violation]:
        violations: list[Violation] = []
        eps = context.config.epsilon

        for wall_id, openings in context.openings_by_wall.items():
            wall = context.get_wall(wall_id)
            if wall is None:
                continue

            intervals: list[tuple[float, float, str]] = []
            for index, opening in openings:
                if opening.ref is not None and opening.ref not in RECOGNIZED_REFS:
                    continue
                start = canonical_offset(opening, wall)
                intervals.append((start, start + opening.width, entity_name(opening.id, index)))

            intervals.sort(key=lambda iv: iv[0])
            for prev, nxt in zip(intervals, intervals[1:]):
                if nxt[0] < prev[1] - eps:
                    violations.append(self.violation(
                        ViolationKind.OVERLAP, EntityKind.OPENING, nxt[2],
                        f"Openings {prev[2]} and {nxt[2]} overlap on wall {wall_id}",
                    ))
        return violations
