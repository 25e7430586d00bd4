"""GET /api/v1/config: expose simulation configuration."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from scrap_hunter.api.dependencies import get_engine_manager
from scrap_hunter.api.engine_manager import EngineManager
from scrap_hunter.api.schemas import SimulationConfigResponse

router = APIRouter()


@router.get("/config", response_model=SimulationConfigResponse)
def get_config(
    manager: EngineManager = Depends(get_engine_manager),
) -> SimulationConfigResponse:
    cfg = manager.config
    return SimulationConfigResponse(
        world_seed=cfg.world_seed,
        grid_width=cfg.grid_width,
        grid_height=cfg.grid_height,
        player_max_hp=cfg.player_max_hp,
        pursuer_damage=cfg.pursuer_damage,
        chase_radius=cfg.chase_radius,
        wander_idle_chance=cfg.wander_idle_chance,
        starting_quota=cfg.starting_quota,
        quota_cycle_days=cfg.quota_cycle_days,
        quota_growth=cfg.quota_growth,
        quota_bonus=cfg.quota_bonus,
        map_files=list(cfg.map_files),
    )
