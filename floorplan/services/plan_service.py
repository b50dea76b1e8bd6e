"""High-level plan resolution service — facade for the API layer."""

from __future__ import annotations
import logging

from floorplan.errors import StructuralError
from floorplan.models import (
    Plan, ValidationConfig, ResolvedPlan, WallGeometry, OpeningGeometry,
    RoomGeometry, entity_name,
)
from floorplan.core.validator import PlanValidator
from floorplan.core.registry import CheckRegistry, create_default_registry
from floorplan.core.walls import wall_footprint
from floorplan.core.openings import opening_cutout
from floorplan.core.metrics import polygon_area_and_centroid

logger = logging.getLogger(__name__)


class PlanService:
    """Validates input, then resolves all geometry a renderer needs."""

    def __init__(self, registry: CheckRegistry | None = None) -> None:
        self.registry = registry or create_default_registry()
        self.validator = PlanValidator(self.registry)

    def resolve(self, plan: Plan, config: ValidationConfig | None = None) -> ResolvedPlan:
        if config is None:
            config = ValidationConfig()

        resolved = self.validator.resolve_and_validate(plan, config)

        walls = [
            WallGeometry(
                wall_id=entity_name(w.id, i),
                layer=w.layer,
                footprint=wall_footprint(w),
            )
            for i, w in enumerate(resolved.walls)
        ]

        openings: list[OpeningGeometry] = []
        for i, o in enumerate(resolved.openings):
            wall = resolved.get_wall(o.wall_id)
            if wall is None:
                raise StructuralError(
                    f"Opening {entity_name(o.id, i)} references unknown wall {o.wall_id}",
                    {"wall_id": o.wall_id},
                )
            openings.append(OpeningGeometry(
                opening_id=entity_name(o.id, i),
                wall_id=o.wall_id,
                kind=o.kind,
                cutout=opening_cutout(wall, o, config.epsilon),
            ))

        rooms: list[RoomGeometry] = []
        for i, r in enumerate(resolved.rooms):
            if not r.polygon:
                continue  # room.loop disabled
            area, centroid = polygon_area_and_centroid(r.polygon, config.area_epsilon)
            rooms.append(RoomGeometry(
                room_id=entity_name(r.id, i),
                label=r.label,
                polygon=r.polygon,
                area=area,
                centroid=centroid,
            ))

        result = ResolvedPlan(plan=resolved, walls=walls, openings=openings, rooms=rooms)
        logger.info(
            "Resolved plan: %d walls, %d openings, %d rooms, %.0f mm2 of rooms",
            result.stats.walls, len(openings), result.stats.rooms,
            result.stats.total_room_area,
        )
        return result

    def list_checks(self) -> list[dict[str, str]]:
        return [
            {"id": c.get_id(), "name": c.get_name()}
            for c in self.registry.list_checks()
        ]
