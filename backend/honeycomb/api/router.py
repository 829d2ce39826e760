"""Master API router: mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from honeycomb.api import canvas, footprint, health

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(footprint.router)
api_router.include_router(canvas.router)
