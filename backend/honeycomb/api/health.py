"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from honeycomb.engine.registry import get_fill_chain
from honeycomb.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        fill_strategies_registered=get_fill_chain().count,
    )
