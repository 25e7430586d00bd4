"""Core data models and world representation."""

from scrap_hunter.core.enums import AIState, ActionType, Command, Direction, Domain, StepOutcome, Tile
from scrap_hunter.core.models import Actor, Entity, Vector2
from scrap_hunter.core.grid import Grid
from scrap_hunter.core.map_loader import MapData, MapLoadError, load_map, parse_map
from scrap_hunter.core.world_state import WorldState
from scrap_hunter.core.snapshot import Snapshot

__all__ = [
    "AIState",
    "ActionType",
    "Actor",
    "Command",
    "Direction",
    "Domain",
    "Entity",
    "Grid",
    "MapData",
    "MapLoadError",
    "Snapshot",
    "StepOutcome",
    "Tile",
    "Vector2",
    "WorldState",
    "load_map",
    "parse_map",
]
