"""GET /api/v1/state: HUD numbers, player, pursuers and recent events."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from scrap_hunter.api.dependencies import get_engine_manager
from scrap_hunter.api.engine_manager import EngineManager
from scrap_hunter.api.schemas import (
    DayReportSchema,
    EventSchema,
    PlayerSchema,
    PursuerSchema,
    WorldStateResponse,
)
from scrap_hunter.utils.event_log import SimEvent

router = APIRouter()


def serialize_event(ev: SimEvent) -> EventSchema:
    return EventSchema(tick=ev.tick, category=ev.category, message=ev.message,
                       entity_ids=list(ev.entity_ids))


@router.get("/state", response_model=WorldStateResponse)
def get_state(
    since_tick: int = Query(0, ge=0, description="Only return events from this tick onward"),
    limit: int = Query(50, ge=1, le=500),
    manager: EngineManager = Depends(get_engine_manager),
) -> WorldStateResponse:
    snap = manager.get_snapshot()
    if snap is None:
        raise HTTPException(status_code=503, detail="Simulation not initialized yet.")

    p = snap.player
    events = manager.event_log.since_tick(since_tick)[-limit:]
    return WorldStateResponse(
        tick=snap.tick,
        day=snap.day,
        quota=snap.quota,
        total_banked=snap.total_banked,
        entrance_x=snap.entrance.x,
        entrance_y=snap.entrance.y,
        player=PlayerSchema(x=p.pos.x, y=p.pos.y, hp=p.hp, max_hp=p.max_hp,
                            carried=p.carried, alive=p.alive),
        pursuers=[
            PursuerSchema(id=e.id, kind=e.kind, x=e.pos.x, y=e.pos.y,
                          symbol=e.symbol, state=e.ai_state.name.lower())
            for e in snap.pursuers
        ],
        events=[serialize_event(ev) for ev in events],
        over=snap.over,
        end_reason=snap.end_reason,
    )


@router.get("/days", response_model=list[DayReportSchema])
def get_days(manager: EngineManager = Depends(get_engine_manager)) -> list[DayReportSchema]:
    return [
        DayReportSchema(day=r.day, map_name=r.map_name, banked=r.banked,
                        deaths=r.deaths, exited=r.exited)
        for r in manager.history
    ]
