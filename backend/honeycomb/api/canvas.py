"""GET /api/canvas.svg -- blank cluster canvas from the layout preset."""

from __future__ import annotations

from fastapi import APIRouter, Response

from honeycomb.engine.layout import CANVAS_LAYOUT
from honeycomb.svg.render import render_canvas_svg

router = APIRouter()


@router.get("/canvas.svg")
async def canvas_svg() -> Response:
    return Response(content=render_canvas_svg(CANVAS_LAYOUT), media_type="image/svg+xml")
