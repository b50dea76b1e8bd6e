"""Plan analysis — id lookups and per-wall opening groups."""

from __future__ import annotations

from floorplan.models import Opening, ValidationContext, Wall


class PlanAnalyzer:
    """Indexes walls by id and groups openings under the wall they cut."""

    def analyze(self, context: ValidationContext) -> None:
        """Run all analysis passes and populate the context."""
        context.wall_index = self._index_walls(context.plan.walls)
        context.openings_by_wall, context.dangling_openings = self._group_openings(
            context.plan.openings, context.wall_index,
        )

    def _index_walls(self, walls: list[Wall]) -> dict[str, Wall]:
        """First declaration of an id wins, matching Plan.get_wall."""
        index: dict[str, Wall] = {}
        for wall in walls:
            if wall.id is not None and wall.id not in index:
                index[wall.id] = wall
        return index

    def _group_openings(
        self, openings: list[Opening], wall_index: dict[str, Wall],
    ) -> tuple[dict[str, list[tuple[int, Opening]]], list[tuple[int, Opening]]]:
        # Groups follow wall declaration order
        grouped: dict[str, list[tuple[int, Opening]]] = {wid: [] for wid in wall_index}
        dangling: list[tuple[int, Opening]] = []

        for i, opening in enumerate(openings):
            if opening.wall_id in grouped:
                grouped[opening.wall_id].append((i, opening))
            else:
                dangling.append((i, opening))

        return {wid: ops for wid, ops in grouped.items() if ops}, dangling
