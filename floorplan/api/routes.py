"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter

from floorplan.services.plan_service import PlanService
from floorplan.api.schemas import (
    ResolveRequest, ResolveResponse, ValidationFailure, CheckInfo,
)

router = APIRouter()

# Shared service instance; holds only the stateless check registry
_service = PlanService()


@router.post(
    "/resolve",
    response_model=ResolveResponse,
    responses={422: {"model": ValidationFailure}},
)
async def resolve_plan(request: ResolveRequest) -> ResolveResponse:
    """Validate a plan and return its resolved geometry."""
    resolved = _service.resolve(request.plan, request.config)

    return ResolveResponse(
        resolved=resolved,
        check_count=len(_service.list_checks()),
    )


@router.get("/checks", response_model=list[CheckInfo])
async def list_checks() -> list[CheckInfo]:
    """List all available plan checks."""
    return [CheckInfo(**c) for c in _service.list_checks()]


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
