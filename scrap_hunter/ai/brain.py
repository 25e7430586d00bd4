"""AIBrain: stateless decision engine for every autonomous entity.

Two registries keep SimulationStep independent of entity kinds:
  1. KIND_TRANSITIONS maps an entity kind to a function choosing its
     AIState for this tick.
  2. STATE_HANDLERS (``ai.states``) maps that state to the handler that
     produces the proposal.
A new kind of entity registers a transition (and new handlers if needed).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from scrap_hunter.actions.base import ActionProposal
from scrap_hunter.ai.states import AIContext, IdleHandler, STATE_HANDLERS
from scrap_hunter.core.enums import AIState
from scrap_hunter.core.world_state import STALKER_KIND

if TYPE_CHECKING:
    from scrap_hunter.config import SimulationConfig
    from scrap_hunter.core.models import Entity, Vector2
    from scrap_hunter.core.world_state import WorldState
    from scrap_hunter.systems.rng import DeterministicRNG

logger = logging.getLogger(__name__)

_FALLBACK = IdleHandler()


def stalker_transition(ctx: AIContext) -> AIState:
    dist = ctx.distance
    if 0 < dist < ctx.config.chase_radius:
        return AIState.CHASE
    return AIState.WANDER


KIND_TRANSITIONS: dict[str, Callable[[AIContext], AIState]] = {
    STALKER_KIND: stalker_transition,
}


class AIBrain:
    """Dispatches entity AI decisions. Fully stateless."""

    __slots__ = ("_config", "_rng")

    def __init__(self, config: SimulationConfig, rng: DeterministicRNG) -> None:
        self._config = config
        self._rng = rng

    def decide(self, actor: Entity, world: WorldState, player_pos: Vector2, tick: int) -> ActionProposal:
        """Pick *actor*'s state for this tick and return its proposal."""
        ctx = AIContext(
            actor=actor,
            world=world,
            player_pos=player_pos,
            config=self._config,
            rng=self._rng,
            tick=tick,
        )
        transition = KIND_TRANSITIONS.get(actor.kind)
        state = transition(ctx) if transition else AIState.IDLE
        handler = STATE_HANDLERS.get(state, _FALLBACK)
        new_state, proposal = handler.handle(ctx)
        actor.ai_state = new_state
        logger.debug("Entity %d (%s) %s: %s", actor.id, actor.kind, new_state.name, proposal.reason)
        return proposal
