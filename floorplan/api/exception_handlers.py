"""FastAPI exception handlers for floorplan errors."""

from __future__ import annotations
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from floorplan.errors import FloorplanError, ValidationError

logger = logging.getLogger(__name__)


async def validation_exception_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Invalid plans list every violation."""
    logger.info("Rejected plan with %d violation(s)", len(exc.violations))
    return JSONResponse(
        status_code=422,
        content={
            "error": type(exc).__name__,
            "message": exc.message,
            "violations": [v.model_dump(mode="json") for v in exc.violations],
        },
    )


async def floorplan_exception_handler(request: Request, exc: FloorplanError) -> JSONResponse:
    """Geometry or configuration errors raised outside validation."""
    logger.warning("Floorplan error: %s - %s", type(exc).__name__, exc.message)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": type(exc).__name__,
            "message": exc.message,
            "details": exc.details,
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationError, validation_exception_handler)
    app.add_exception_handler(FloorplanError, floorplan_exception_handler)
