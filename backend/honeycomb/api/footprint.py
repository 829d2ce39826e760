"""Client footprint endpoints -- composed view, SVG, engagement overlay, pointer events."""

from __future__ import annotations

import logging
from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException, Response

from honeycomb.dependencies import get_store
from honeycomb.engine.view import area_summary, engagement_summary
from honeycomb.models.requests import CellEngagementRequest, EngagementUpdateRequest, PointerEventRequest
from honeycomb.models.responses import EngagementResponse, FootprintResponse, PointerEventResponse
from honeycomb.store import FootprintStore
from honeycomb.svg.render import render_footprint_svg

router = APIRouter(prefix="/clients/{client_id}")
logger = logging.getLogger(__name__)


def _footprint_response(store: FootprintStore, client_id: str) -> FootprintResponse:
    view = store.view(client_id)
    template = store.get_template(client_id)
    cells = store.enriched_cells(client_id)
    hovered, selected = store.pointer_state(client_id)
    return FootprintResponse.model_validate({
        "client_id": view.client_id,
        "template_id": view.template_id,
        "generated_date": template.generated_date if template else "",
        "cells": [asdict(c) for c in view.cells],
        "clusters": [asdict(c) for c in view.clusters],
        "viewport": asdict(view.viewport),
        "legend": [asdict(e) for e in view.legend],
        "summary": engagement_summary(cells),
        "areas": [asdict(row) for row in area_summary(cells, store.catalog)],
        "hovered": hovered,
        "selected": selected,
    })


@router.get("/footprint", response_model=FootprintResponse)
async def get_footprint(client_id: str, store: FootprintStore = Depends(get_store)) -> FootprintResponse:
    store.get_or_load(client_id)
    return _footprint_response(store, client_id)


@router.post("/reload", response_model=FootprintResponse)
async def reload_footprint(client_id: str, store: FootprintStore = Depends(get_store)) -> FootprintResponse:
    store.load(client_id)
    return _footprint_response(store, client_id)


@router.get("/footprint.svg")
async def footprint_svg(client_id: str, store: FootprintStore = Depends(get_store)) -> Response:
    view = store.view(client_id)
    return Response(
        content=render_footprint_svg(view, font_size=store.config.label_font_size),
        media_type="image/svg+xml",
    )


@router.put("/engagement", response_model=EngagementResponse)
async def replace_engagement(
    client_id: str,
    req: EngagementUpdateRequest,
    store: FootprintStore = Depends(get_store),
) -> EngagementResponse:
    overlay = store.replace_engagement(client_id, [r.to_domain() for r in req.records])
    return EngagementResponse(client_id=client_id, records=len(overlay))


@router.patch("/engagement/{cell_id}", response_model=EngagementResponse)
async def update_cell_engagement(
    client_id: str,
    cell_id: str,
    req: CellEngagementRequest,
    store: FootprintStore = Depends(get_store),
) -> EngagementResponse:
    store.update_cell_engagement(client_id, req.to_domain(cell_id))
    return EngagementResponse(client_id=client_id, records=len(store.engagement(client_id)))


@router.delete("/engagement", response_model=EngagementResponse)
async def clear_engagement(client_id: str, store: FootprintStore = Depends(get_store)) -> EngagementResponse:
    store.clear_engagement(client_id)
    return EngagementResponse(client_id=client_id, records=0)


@router.post("/pointer", response_model=PointerEventResponse)
async def pointer_event(
    client_id: str,
    req: PointerEventRequest,
    store: FootprintStore = Depends(get_store),
) -> PointerEventResponse:
    point = (req.x, req.y) if req.x is not None and req.y is not None else None
    try:
        cell_id = store.handle_pointer(client_id, req.event, cell_id=req.cell_id, point=point)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown cell: {req.cell_id}")
    hovered, selected = store.pointer_state(client_id)
    logger.debug("Pointer %s on %s for %s", req.event, cell_id, client_id)
    return PointerEventResponse(event=req.event, cell_id=cell_id, hovered=hovered, selected=selected)
