"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from floorplan.api.routes import router
from floorplan.api.exception_handlers import register_exception_handlers


def create_app() -> FastAPI:
    app = FastAPI(
        title="Floorplan Resolver",
        description="Resolves and validates declarative 2D floor plans",
        version="0.1.0",
    )

    # CORS — allow a local preview page
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router, prefix="/api")
    register_exception_handlers(app)

    return app


app = create_app()
