"""Pydantic response models for the REST API."""

from __future__ import annotations

from pydantic import BaseModel, Field


# --- Entities ---

class PlayerSchema(BaseModel):
    x: int
    y: int
    hp: int
    max_hp: int
    carried: int
    alive: bool


class PursuerSchema(BaseModel):
    id: int
    kind: str
    x: int
    y: int
    symbol: str
    state: str


# --- Map ---

class MapResponse(BaseModel):
    width: int
    height: int
    map_name: str = ""
    rows: list[str] = Field(description="Grid rows with the player drawn as '@'")


# --- World State ---

class EventSchema(BaseModel):
    tick: int
    category: str
    message: str
    entity_ids: list[int] = Field(default_factory=list)


class WorldStateResponse(BaseModel):
    tick: int
    day: int
    quota: int
    total_banked: int
    entrance_x: int
    entrance_y: int
    player: PlayerSchema
    pursuers: list[PursuerSchema]
    events: list[EventSchema]
    over: bool
    end_reason: str = ""


class DayReportSchema(BaseModel):
    day: int
    map_name: str
    banked: int
    deaths: int
    exited: bool


# --- Control ---

class CommandResponse(BaseModel):
    status: str
    outcome: str
    tick: int
    day: int
    notices: list[EventSchema] = Field(default_factory=list)


class ControlResponse(BaseModel):
    status: str
    message: str
    tick: int


# --- Config ---

class SimulationConfigResponse(BaseModel):
    world_seed: int
    grid_width: int
    grid_height: int
    player_max_hp: int
    pursuer_damage: int
    chase_radius: int
    wander_idle_chance: float
    starting_quota: int
    quota_cycle_days: int
    quota_growth: float
    quota_bonus: int
    map_files: list[str]
