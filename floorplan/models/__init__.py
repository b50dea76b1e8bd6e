from .geometry import Vec2, Polygon, EPSILON, direction_from_points
from .units import Unit, to_canonical, mm, cm, m
from .building import Wall, Opening, OpeningType, OpeningRef, Justify, Room, Label, Layer
from .plan import Plan
from .parameters import ValidationConfig, WallDefaults
from .violations import Violation, ViolationKind, EntityKind, entity_name
from .resolved import WallGeometry, OpeningGeometry, RoomGeometry, ResolvedPlan, PlanStats
from .context import ValidationContext

__all__ = [
    "Vec2", "Polygon", "EPSILON", "direction_from_points",
    "Unit", "to_canonical", "mm", "cm", "m",
    "Wall", "Opening", "OpeningType", "OpeningRef", "Justify", "Room", "Label", "Layer",
    "Plan",
    "ValidationConfig", "WallDefaults",
    "Violation", "ViolationKind", "EntityKind", "entity_name",
    "WallGeometry", "OpeningGeometry", "RoomGeometry", "ResolvedPlan", "PlanStats",
    "ValidationContext",
]
