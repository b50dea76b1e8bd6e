"""Exception hierarchy for the floorplan engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from floorplan.models.violations import Violation


class FloorplanError(Exception):
    """Base exception for all floorplan errors."""

    def __init__(self, message: str, details: dict[str, str] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class GeometryError(FloorplanError):
    """Base class for geometry that cannot be resolved."""
    pass


class StructuralError(GeometryError):
    """Zero-length wall, unresolved room loop or dangling wall reference."""
    pass


class BoundsError(GeometryError):
    """Opening outside its wall's extent, negative offset or bad width."""
    pass


class OverlapError(GeometryError):
    """Two openings collide on the same wall."""
    pass


class ConfigError(FloorplanError):
    """Unrecognized symbol or invalid configuration."""
    pass


class PlanBuildError(FloorplanError):
    """Raised when the plan builder is driven out of order."""
    pass


class ValidationError(FloorplanError):
    """Aggregate of every violation found in one validation pass."""

    def __init__(self, violations: list[Violation]) -> None:
        self.violations = list(violations)
        lines = [f"Plan validation failed with {len(self.violations)} violation(s):"]
        lines.extend(f"- {v.message}" for v in self.violations)
        super().__init__("\n".join(lines), {"count": str(len(self.violations))})

    def errors(self) -> list[FloorplanError]:
        """Violations as individual typed exceptions."""
        return [v.to_exception() for v in self.violations]
