"""Immutable snapshot of a session for renderers and the API."""

from __future__ import annotations

from dataclasses import dataclass

from scrap_hunter.core.enums import PLAYER_GLYPH
from scrap_hunter.core.models import Actor, Entity, Vector2
from scrap_hunter.core.world_state import WorldState


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Read-only view of the world plus the day/quota HUD numbers."""

    tick: int
    day: int
    quota: int
    total_banked: int
    player: Actor
    entrance: Vector2
    pursuers: tuple[Entity, ...]
    rows: tuple[str, ...]
    map_name: str = ""
    over: bool = False
    end_reason: str = ""

    @classmethod
    def from_world(
        cls,
        world: WorldState,
        actor: Actor,
        tick: int,
        *,
        day: int = 1,
        quota: int = 0,
        total_banked: int = 0,
        over: bool = False,
        end_reason: str = "",
    ) -> Snapshot:
        return cls(
            tick=tick,
            day=day,
            quota=quota,
            total_banked=total_banked,
            player=actor.copy(),
            entrance=world.entrance,
            pursuers=tuple(e.copy() for e in world.entities.values()),
            rows=tuple(render_rows(world, actor)),
            map_name=world.source,
            over=over,
            end_reason=end_reason,
        )

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        return len(self.rows)


def render_rows(world: WorldState, actor: Actor) -> list[str]:
    """Grid rows with the player glyph drawn over its cell."""
    rows = world.grid.rows()
    px, py = actor.pos.x, actor.pos.y
    if 0 <= py < len(rows) and 0 <= px < len(rows[py]):
        line = rows[py]
        rows[py] = line[:px] + PLAYER_GLYPH + line[px + 1:]
    return rows
