"""Violation records collected by the validation engine."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel

from floorplan.errors import (
    FloorplanError, StructuralError, BoundsError, OverlapError, ConfigError,
)


class ViolationKind(str, Enum):
    STRUCTURAL = "structural"
    BOUNDS = "bounds"
    OVERLAP = "overlap"
    CONFIG = "config"


class EntityKind(str, Enum):
    WALL = "wall"
    OPENING = "opening"
    ROOM = "room"


_ERROR_CLASSES: dict[ViolationKind, type[FloorplanError]] = {
    ViolationKind.STRUCTURAL: StructuralError,
    ViolationKind.BOUNDS: BoundsError,
    ViolationKind.OVERLAP: OverlapError,
    ViolationKind.CONFIG: ConfigError,
}


class Violation(BaseModel):
    """One broken invariant, attributed to the entity that broke it."""
    kind: ViolationKind
    entity: EntityKind
    entity_id: str
    message: str
    check_id: str = ""

    def to_exception(self) -> FloorplanError:
        cls = _ERROR_CLASSES[self.kind]
        return cls(self.message, {"entity": self.entity.value, "entity_id": self.entity_id})


def entity_name(entity_id: str | None, index: int) -> str:
    """Id of an entity, or a positional placeholder when it has none."""
    if entity_id:
        return entity_id
    return f"(unnamed #{index})"
