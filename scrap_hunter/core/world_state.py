"""Mutable authoritative world state for one day."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterator

from scrap_hunter.core.enums import Tile
from scrap_hunter.core.grid import Grid
from scrap_hunter.core.map_loader import MapData, MapLoadError, load_map
from scrap_hunter.core.models import Entity, Vector2

if TYPE_CHECKING:
    from scrap_hunter.config import SimulationConfig
    from scrap_hunter.core.map_loader import MapSource

logger = logging.getLogger(__name__)

STALKER_KIND = "stalker"


class WorldState:
    """The grid, its pursuers and the entrance: the single source of truth."""

    __slots__ = ("config", "grid", "entities", "entrance", "source", "_next_entity_id")

    def __init__(self, config: SimulationConfig, grid: Grid | None = None) -> None:
        self.config = config
        self.grid: Grid = grid or Grid(config.grid_width, config.grid_height, Tile.BLANK)
        self.entities: dict[int, Entity] = {}
        self.entrance: Vector2 = Vector2(config.default_entrance_x, config.default_entrance_y)
        self.source: str = ""
        self._next_entity_id: int = 1

    @classmethod
    def from_map(cls, data: MapData, config: SimulationConfig) -> WorldState:
        world = cls(config)
        world._install(data)
        return world

    def load(self, source: MapSource) -> bool:
        """Replace grid, pursuers and entrance from *source*.

        Returns False (keeping the previous state) if the source is unreadable.
        """
        try:
            data = load_map(source, self.config.grid_width, self.config.grid_height)
        except MapLoadError as exc:
            logger.warning("Map load failed: %s", exc)
            return False
        self._install(data)
        return True

    def _install(self, data: MapData) -> None:
        self.grid = data.grid
        self.entities = {}
        self._next_entity_id = 1
        self.source = data.name
        if data.entrance is None:
            self.entrance = Vector2(self.config.default_entrance_x, self.config.default_entrance_y)
            logger.warning("Map %s has no entrance; using %s", data.name or "<lines>", self.entrance)
        else:
            self.entrance = data.entrance
        for pos in data.spawns:
            self.add_entity(Entity(id=self.allocate_entity_id(), kind=STALKER_KIND, pos=pos))

    # -- entities --

    def allocate_entity_id(self) -> int:
        eid = self._next_entity_id
        self._next_entity_id += 1
        return eid

    def add_entity(self, entity: Entity) -> None:
        self.entities[entity.id] = entity

    def pursuers(self) -> Iterator[Entity]:
        """Entities in spawn order."""
        return iter(list(self.entities.values()))

    def move_entity(self, entity_id: int, new_pos: Vector2) -> None:
        """Move an entity, vacating its old cell to floor and stamping its glyph."""
        entity = self.entities.get(entity_id)
        if entity is None:
            return
        self.grid.set(entity.pos, Tile.FLOOR)
        entity.pos = new_pos
        self.grid.set(new_pos, entity.symbol)
