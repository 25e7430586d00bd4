"""Core data models: Vector2, Entity, Actor."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from scrap_hunter.core.enums import AIState, Command, Direction, Tile

if TYPE_CHECKING:
    from scrap_hunter.core.grid import Grid

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Vector2:
    """Immutable 2D integer coordinate."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def manhattan(self, other: Vector2) -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def __repr__(self) -> str:
        return f"({self.x}, {self.y})"


# y grows downward: NORTH is one row up
DIRECTION_OFFSETS: dict[int, Vector2] = {
    Direction.NORTH: Vector2(0, -1),
    Direction.SOUTH: Vector2(0, 1),
    Direction.WEST: Vector2(-1, 0),
    Direction.EAST: Vector2(1, 0),
}

COMMAND_OFFSETS: dict[Command, Vector2] = {
    Command.UP: DIRECTION_OFFSETS[Direction.NORTH],
    Command.DOWN: DIRECTION_OFFSETS[Direction.SOUTH],
    Command.LEFT: DIRECTION_OFFSETS[Direction.WEST],
    Command.RIGHT: DIRECTION_OFFSETS[Direction.EAST],
}


@dataclass(slots=True)
class Entity:
    """An autonomous grid resident. Its AI keeps no memory between ticks."""

    id: int
    kind: str
    pos: Vector2
    symbol: str = Tile.PURSUER.value
    ai_state: AIState = AIState.IDLE   # last state picked, for inspection only

    def copy(self) -> Entity:
        return Entity(id=self.id, kind=self.kind, pos=self.pos,
                      symbol=self.symbol, ai_state=self.ai_state)


@dataclass(slots=True)
class Actor:
    """The player: position, health and the scrap carried this day."""

    pos: Vector2
    hp: int = 100
    max_hp: int = 100
    carried: int = 0

    @property
    def alive(self) -> bool:
        return self.hp > 0

    def take_damage(self, amount: int) -> None:
        self.hp = max(0, self.hp - amount)

    def move(self, command: Command, grid: Grid) -> bool:
        """Step one cell; returns True if the actor actually moved.

        Only walls (and out-of-bounds cells) block the player. Stepping on a
        resource picks it up and turns the cell into floor.
        """
        offset = COMMAND_OFFSETS.get(command)
        if offset is None:
            return False
        target = self.pos + offset
        if grid.is_wall(target):
            logger.debug("Player blocked by wall at %s", target)
            return False
        self.pos = target
        if grid.get(target) == Tile.RESOURCE:
            self.carried += 1
            grid.set(target, Tile.FLOOR)
        return True

    def respawn(self) -> None:
        """Recover from death in place: full health, empty bag."""
        self.hp = self.max_hp
        self.carried = 0

    def begin_day(self, entrance: Vector2) -> None:
        self.pos = entrance
        self.carried = 0

    def copy(self) -> Actor:
        return Actor(pos=self.pos, hp=self.hp, max_hp=self.max_hp, carried=self.carried)
