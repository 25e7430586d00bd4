"""GET /api/v1/map: the rendered board."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from scrap_hunter.api.dependencies import get_engine_manager
from scrap_hunter.api.engine_manager import EngineManager
from scrap_hunter.api.schemas import MapResponse

router = APIRouter()


@router.get("/map", response_model=MapResponse)
def get_map(manager: EngineManager = Depends(get_engine_manager)) -> MapResponse:
    snap = manager.get_snapshot()
    if snap is None:
        raise HTTPException(status_code=503, detail="Simulation not initialized yet.")
    return MapResponse(width=snap.width, height=snap.height, map_name=snap.map_name, rows=list(snap.rows))
