"""GameSession: the day/quota loop around SimulationStep.

A session runs day after day.  Each day loads a randomly chosen map, places
the player on its entrance and feeds commands to SimulationStep until the
player exits (banking the scrap carried) or quits.  Every
``quota_cycle_days`` days the banked total is reviewed against the quota:
meeting it resets the total and raises the quota, missing it ends the run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from scrap_hunter.ai.brain import AIBrain
from scrap_hunter.core.enums import Command, Domain, StepOutcome
from scrap_hunter.core.models import Actor, Vector2
from scrap_hunter.core.snapshot import Snapshot
from scrap_hunter.core.world_state import WorldState
from scrap_hunter.engine.simulation_step import SimulationStep
from scrap_hunter.systems.rng import DeterministicRNG
from scrap_hunter.utils.event_log import EventLog, SimEvent

if TYPE_CHECKING:
    from scrap_hunter.config import SimulationConfig
    from scrap_hunter.utils.replay import ReplayRecorder

logger = logging.getLogger(__name__)


class SessionOverError(RuntimeError):
    """Raised when a command is sent to a session that has ended."""


@dataclass(frozen=True, slots=True)
class DayReport:
    """What one finished day produced."""

    day: int
    map_name: str
    banked: int
    deaths: int
    exited: bool


class GameSession:
    """Owns the player, the current day's world and the quota bookkeeping."""

    def __init__(
        self,
        config: SimulationConfig,
        rng: DeterministicRNG | None = None,
        event_log: EventLog | None = None,
        recorder: ReplayRecorder | None = None,
    ) -> None:
        self.config = config
        self.rng = rng or DeterministicRNG(config.world_seed)
        self.event_log = event_log if event_log is not None else EventLog()
        self.actor = Actor(
            pos=Vector2(config.default_entrance_x, config.default_entrance_y),
            hp=config.player_max_hp,
            max_hp=config.player_max_hp,
        )
        self.world = WorldState(config)
        self._step = SimulationStep(
            config, self.world, self.actor, self.rng,
            brain=AIBrain(config, self.rng),
            event_log=self.event_log,
            recorder=recorder,
        )

        self.day: int = 1
        self.quota: int = config.starting_quota
        self.total_banked: int = 0
        self.deaths_today: int = 0
        self.history: list[DayReport] = []
        self.notices: list[SimEvent] = []
        self.over: bool = False
        self.end_reason: str = ""
        self._started: bool = False

    @property
    def tick(self) -> int:
        return self._step.tick

    # -- lifecycle --

    def begin(self) -> bool:
        """Start day 1. Returns False if the session could not start."""
        if not self._started:
            self._started = True
            self.notices = []
            self._start_day()
        return not self.over

    def handle(self, command: Command | str) -> StepOutcome:
        """Feed one command through the engine and apply day-level consequences."""
        if self.over:
            raise SessionOverError(f"session ended ({self.end_reason})")
        if not self._started:
            self.begin()
            if self.over:
                raise SessionOverError(f"session ended ({self.end_reason})")

        outcome = self._step.advance(command)
        self.notices = list(self._step.last_events)

        match outcome:
            case StepOutcome.QUIT:
                self._end("quit")
            case StepOutcome.EXITED:
                self._finish_day()
            case StepOutcome.DIED:
                self.deaths_today += 1
                self.actor.respawn()
            case _:
                pass
        return outcome

    def snapshot(self) -> Snapshot:
        return Snapshot.from_world(
            self.world, self.actor, self.tick,
            day=self.day, quota=self.quota, total_banked=self.total_banked,
            over=self.over, end_reason=self.end_reason,
        )

    # -- days --

    def _finish_day(self) -> None:
        banked = self.actor.carried
        self.total_banked += banked
        self.history.append(DayReport(
            day=self.day, map_name=self.world.source, banked=banked,
            deaths=self.deaths_today, exited=True,
        ))
        logger.info("Day %d ended: banked %d (total %d/%d)",
                    self.day, banked, self.total_banked, self.quota)
        self._emit("day_end", f"Day {self.day} ended. {banked} scrap saved.")
        self.day += 1
        self._start_day()

    def _start_day(self) -> None:
        if not self._review_quota():
            return
        name = self._pick_map()
        if not self.world.load(self.config.map_path(name)):
            logger.error("Cannot start day %d: map %s unreadable", self.day, name)
            self._end("map_unreadable")
            return
        self.actor.begin_day(self.world.entrance)
        self.deaths_today = 0
        self._step.day = self.day
        logger.info("Day %d started on %s (%d pursuers)", self.day, name, len(self.world.entities))
        self._emit("day_start", f"Day {self.day} started on {name}")

    def _review_quota(self) -> bool:
        """Quota check due before this day; False means the player is fired."""
        cfg = self.config
        if self.day <= 1 or (self.day - 1) % cfg.quota_cycle_days != 0:
            return True
        if self.total_banked >= self.quota:
            old = self.quota
            self.total_banked = 0
            self.quota = int(self.quota * cfg.quota_growth) + cfg.quota_bonus
            logger.info("Quota %d met; next quota %d", old, self.quota)
            self._emit("quota_met", f"Quota met! Next quota: {self.quota}")
            return True
        self._emit("fired", f"Fired: banked {self.total_banked}/{self.quota}")
        self._end("fired")
        return False

    def _pick_map(self) -> str:
        files = self.config.map_files
        idx = self.rng.next_int(Domain.MAP_SELECT, 0, self.day, 0, len(files) - 1)
        return files[idx]

    def _end(self, reason: str) -> None:
        self.over = True
        self.end_reason = reason
        logger.info("Session over on day %d: %s", self.day, reason)

    def _emit(self, category: str, message: str) -> None:
        event = SimEvent(tick=self.tick, category=category, message=message)
        self.notices.append(event)
        self.event_log.append(event)
