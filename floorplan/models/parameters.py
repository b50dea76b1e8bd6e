"""Validation parameters and authoring defaults."""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field

from .building import Justify


class ValidationConfig(BaseModel):
    """Tolerances and check selection for a validation pass."""
    epsilon: float = Field(default=1e-6, gt=0)        # Endpoint / interval tolerance (mm)
    area_epsilon: float = Field(default=1e-9, gt=0)   # Below this a polygon is degenerate (mm^2)
    enabled_checks: list[str] = []    # Empty = run every registered check
    disabled_checks: list[str] = []   # Explicitly skip specific checks


class WallDefaults(BaseModel):
    """Settings applied to walls that do not spell them out."""
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    thickness: float = Field(default=100.0, ge=0)   # mm
    justify: Justify = Justify.CENTER
    layer: str = "walls"
