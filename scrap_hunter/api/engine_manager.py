"""EngineManager: owns the live GameSession behind the API.

Commands are applied one at a time under a lock (the engine is strictly
turn-based); readers get the latest immutable Snapshot, swapped atomically
after every command.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from scrap_hunter.core.enums import Command, StepOutcome
from scrap_hunter.core.snapshot import Snapshot
from scrap_hunter.engine.session import DayReport, GameSession
from scrap_hunter.systems.rng import DeterministicRNG
from scrap_hunter.utils.event_log import EventLog, SimEvent

if TYPE_CHECKING:
    from scrap_hunter.config import SimulationConfig

logger = logging.getLogger(__name__)


class EngineManager:
    """Thread-safe wrapper around a single GameSession."""

    def __init__(self, config: SimulationConfig) -> None:
        self._config = config
        self.config = config

        self._command_lock = threading.Lock()
        self._snapshot_lock = threading.Lock()
        self._latest_snapshot: Snapshot | None = None
        self._event_log = EventLog()
        self._session: GameSession | None = None

        self._build()

    # -- public properties --

    @property
    def event_log(self) -> EventLog:
        return self._event_log

    @property
    def history(self) -> list[DayReport]:
        return list(self._session.history) if self._session else []

    @property
    def over(self) -> bool:
        return self._session is None or self._session.over

    # -- snapshot access --

    def get_snapshot(self) -> Snapshot | None:
        with self._snapshot_lock:
            return self._latest_snapshot

    # -- commands --

    def submit(self, command: Command) -> tuple[StepOutcome, list[SimEvent]]:
        """Apply one command; raises SessionOverError once the session has ended."""
        with self._command_lock:
            assert self._session is not None
            outcome = self._session.handle(command)
            notices = list(self._session.notices)
            self._publish()
        return outcome, notices

    def reset(self) -> None:
        """Throw the current session away and start a fresh one."""
        with self._command_lock:
            self._event_log.clear()
            self._build()
        logger.info("EngineManager reset.")

    # -- internals --

    def _build(self) -> None:
        cfg = self._config
        self._session = GameSession(cfg, DeterministicRNG(cfg.world_seed), event_log=self._event_log)
        self._session.begin()
        self._publish()

    def _publish(self) -> None:
        assert self._session is not None
        snap = self._session.snapshot()
        with self._snapshot_lock:
            self._latest_snapshot = snap
