"""API request/response schemas."""

from __future__ import annotations
from pydantic import BaseModel

from floorplan.models import Plan, ValidationConfig, ResolvedPlan, Violation


class ResolveRequest(BaseModel):
    """Request body for the /resolve endpoint."""
    plan: Plan
    config: ValidationConfig = ValidationConfig()


class ResolveResponse(BaseModel):
    """Response from the /resolve endpoint."""
    resolved: ResolvedPlan
    check_count: int


class ValidationFailure(BaseModel):
    """Body returned when a plan does not validate."""
    error: str
    message: str
    violations: list[Violation]


class CheckInfo(BaseModel):
    id: str
    name: str
