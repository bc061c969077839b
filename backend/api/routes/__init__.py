"""API route modules."""

from fastapi import FastAPI

from . import config, map_view
from ..state import init_api_state


def register_routes(app: FastAPI, sio):
    """Register all API routers. Call after app and sio are created."""
    init_api_state(sio)

    app.include_router(map_view.router, prefix="/api/map", tags=["map"])
    app.include_router(config.router, prefix="/api/config", tags=["config"])
