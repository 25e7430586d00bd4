"""Enumerations used throughout the engine."""

from __future__ import annotations

from enum import Enum, IntEnum, unique


@unique
class Tile(str, Enum):
    """Cell glyphs stored in the grid (and read from map files)."""

    WALL = "#"
    FLOOR = "."
    RESOURCE = "$"
    ENTRANCE = "E"
    PURSUER = "M"
    BLANK = " "


PLAYER_GLYPH = "@"


@unique
class Command(str, Enum):
    """Single-character player commands."""

    UP = "w"
    DOWN = "s"
    LEFT = "a"
    RIGHT = "d"
    EXIT = "e"
    QUIT = "q"
    NONE = ""

    @classmethod
    def parse(cls, raw: str | Command) -> Command:
        """Map raw input to a command; anything unrecognised is NONE."""
        if isinstance(raw, Command):
            return raw
        key = raw.strip()[:1].lower()
        try:
            return cls(key)
        except ValueError:
            return cls.NONE

    @property
    def is_movement(self) -> bool:
        return self in (Command.UP, Command.DOWN, Command.LEFT, Command.RIGHT)


@unique
class ActionType(IntEnum):
    """Types of actions an entity can propose."""

    REST = 0
    MOVE = 1
    ATTACK = 2


@unique
class AIState(IntEnum):
    """Finite-state-machine states for pursuer AI."""

    IDLE = 0
    WANDER = 1
    CHASE = 2


@unique
class Direction(IntEnum):
    """Cardinal movement directions, in wander roll order."""

    NORTH = 0
    SOUTH = 1
    WEST = 2
    EAST = 3


@unique
class Domain(IntEnum):
    """RNG domains for deterministic randomness isolation."""

    AI_DECISION = 0
    WANDER_DIRECTION = 1
    MAP_SELECT = 2


@unique
class StepOutcome(IntEnum):
    """Result of resolving one command."""

    CONTINUE = 0
    DIED = 1
    EXITED = 2
    QUIT = 3
