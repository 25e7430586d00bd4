"""Replay serialization: records tick-by-tick state for deterministic replay."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from scrap_hunter.core.enums import Command, StepOutcome
    from scrap_hunter.core.models import Actor
    from scrap_hunter.core.world_state import WorldState

logger = logging.getLogger(__name__)


class ReplayRecorder:
    """Accumulates resolved ticks and flushes them to a JSON replay file."""

    __slots__ = ("_path", "_ticks", "_seed")

    def __init__(self, path: str | Path, seed: int) -> None:
        self._path = Path(path)
        self._seed = seed
        self._ticks: list[dict[str, Any]] = []

    @property
    def ticks(self) -> list[dict[str, Any]]:
        return self._ticks

    def record_tick(
        self,
        tick: int,
        day: int,
        command: Command,
        outcome: StepOutcome,
        actor: Actor,
        world: WorldState,
    ) -> None:
        self._ticks.append(
            {
                "tick": tick,
                "day": day,
                "command": command.name,
                "outcome": outcome.name,
                "player": {
                    "pos": [actor.pos.x, actor.pos.y],
                    "hp": actor.hp,
                    "carried": actor.carried,
                },
                "pursuers": [
                    {"id": e.id, "pos": [e.pos.x, e.pos.y], "state": e.ai_state.name}
                    for e in world.entities.values()
                ],
            }
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": "1.0",
            "seed": self._seed,
            "total_ticks": len(self._ticks),
            "ticks": self._ticks,
        }

    def flush(self) -> None:
        """Write accumulated data to disk."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")
        logger.info("Replay saved to %s (%d ticks)", self._path, len(self._ticks))
