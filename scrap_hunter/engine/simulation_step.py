"""SimulationStep: resolves exactly one player command per tick.

Tick sequence:
  1. Command: QUIT ends immediately; EXIT on the entrance ends the day.
  2. Player movement (walls block, resources are picked up).
  3. Every pursuer in spawn order: decide → validate → apply.  Each move
     mutates the grid before the next pursuer decides.
  4. Death check.

Rejected moves are silent; nothing in a tick raises.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from scrap_hunter.actions.attack import AttackAction
from scrap_hunter.actions.move import MoveAction
from scrap_hunter.ai.brain import AIBrain
from scrap_hunter.core.enums import ActionType, Command, StepOutcome
from scrap_hunter.utils.event_log import SimEvent

if TYPE_CHECKING:
    from scrap_hunter.actions.base import ActionProposal
    from scrap_hunter.config import SimulationConfig
    from scrap_hunter.core.models import Actor
    from scrap_hunter.core.world_state import WorldState
    from scrap_hunter.systems.rng import DeterministicRNG
    from scrap_hunter.utils.event_log import EventLog
    from scrap_hunter.utils.replay import ReplayRecorder

logger = logging.getLogger(__name__)


class SimulationStep:
    """Per-tick orchestration over one world and one actor."""

    __slots__ = (
        "_config",
        "_world",
        "_actor",
        "_brain",
        "_attack",
        "_event_log",
        "_recorder",
        "tick",
        "day",
        "last_events",
    )

    def __init__(
        self,
        config: SimulationConfig,
        world: WorldState,
        actor: Actor,
        rng: DeterministicRNG,
        brain: AIBrain | None = None,
        event_log: EventLog | None = None,
        recorder: ReplayRecorder | None = None,
    ) -> None:
        self._config = config
        self._world = world
        self._actor = actor
        self._brain = brain or AIBrain(config, rng)
        self._attack = AttackAction(config)
        self._event_log = event_log
        self._recorder = recorder
        self.tick: int = 0
        self.day: int = 1
        self.last_events: list[SimEvent] = []

    @property
    def world(self) -> WorldState:
        return self._world

    @property
    def actor(self) -> Actor:
        return self._actor

    def advance(self, command: Command | str) -> StepOutcome:
        """Resolve one command and return what happened."""
        command = Command.parse(command)
        self.last_events = []
        actor, world = self._actor, self._world

        if command == Command.QUIT:
            return StepOutcome.QUIT

        if command == Command.EXIT and actor.pos == world.entrance:
            self._emit("exit", f"Returned to the entrance with {actor.carried} scrap")
            self._record(command, StepOutcome.EXITED)
            return StepOutcome.EXITED

        if command.is_movement:
            carried = actor.carried
            actor.move(command, world.grid)
            if actor.carried > carried:
                self._emit("pickup", f"Picked up scrap at {actor.pos} ({actor.carried} carried)")

        for entity in world.pursuers():
            proposal = self._brain.decide(entity, world, actor.pos, self.tick)
            self._apply(proposal)

        self.tick += 1

        if actor.alive:
            outcome = StepOutcome.CONTINUE
        else:
            outcome = StepOutcome.DIED
            logger.warning("Player died on day %d at %s", self.day, actor.pos)
            self._emit("death", f"Player died at {actor.pos}, losing {actor.carried} scrap")

        self._record(command, outcome)
        return outcome

    # -- internals --

    def _apply(self, proposal: ActionProposal) -> None:
        match proposal.verb:
            case ActionType.MOVE:
                if MoveAction.validate(proposal, self._world):
                    MoveAction.apply(proposal, self._world)
            case ActionType.ATTACK:
                if self._attack.validate(proposal, self._actor):
                    lost = self._attack.apply(proposal, self._actor)
                    self._emit("damage", f"Stalker {proposal.actor_id} hits player for {lost}",
                               (proposal.actor_id,))
            case _:
                pass

    def _emit(self, category: str, message: str, entity_ids: tuple[int, ...] = ()) -> None:
        event = SimEvent(tick=self.tick, category=category, message=message, entity_ids=entity_ids)
        self.last_events.append(event)
        if self._event_log is not None:
            self._event_log.append(event)

    def _record(self, command: Command, outcome: StepOutcome) -> None:
        if self._recorder is not None:
            self._recorder.record_tick(self.tick, self.day, command, outcome, self._actor, self._world)
