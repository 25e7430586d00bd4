"""AI state handlers: class-based and stateless.

Architecture:
  - AIContext bundles all data a handler needs (actor, world, player
    position, config, rng, tick).
  - Each handler is a class implementing ``handle``; it only proposes.
    Validation and application happen in SimulationStep.
  - Handlers are registered in STATE_HANDLERS by AIState key.
  - Transitions are picked per entity kind (see ``ai.brain``) and depend
    only on the current tick's distances.

Stalker state machine (recomputed every tick, no hysteresis):
  dist == 0 or dist >= chase_radius → WANDER
  0 < dist < chase_radius           → CHASE
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from scrap_hunter.actions.base import ActionProposal
from scrap_hunter.core.enums import AIState, ActionType, Direction, Domain
from scrap_hunter.core.models import DIRECTION_OFFSETS, Entity, Vector2

if TYPE_CHECKING:
    from scrap_hunter.config import SimulationConfig
    from scrap_hunter.core.world_state import WorldState
    from scrap_hunter.systems.rng import DeterministicRNG


# =====================================================================
# AI Context
# =====================================================================

@dataclass(slots=True)
class AIContext:
    """All data a state handler might need."""

    actor: Entity
    world: WorldState
    player_pos: Vector2
    config: SimulationConfig
    rng: DeterministicRNG
    tick: int

    @property
    def distance(self) -> int:
        return self.actor.pos.manhattan(self.player_pos)


# =====================================================================
# Shared helpers
# =====================================================================

def step_toward(origin: Vector2, target: Vector2) -> Vector2:
    """One single-axis step reducing the larger delta; ties go to the y axis."""
    dx = target.x - origin.x
    dy = target.y - origin.y
    if abs(dx) > abs(dy):
        return Vector2(origin.x + (1 if dx > 0 else -1), origin.y)
    return Vector2(origin.x, origin.y + (1 if dy > 0 else -1))


def rest(actor: Entity, reason: str) -> ActionProposal:
    return ActionProposal(actor_id=actor.id, verb=ActionType.REST, reason=reason)


# =====================================================================
# Handlers
# =====================================================================

class StateHandler(ABC):
    @abstractmethod
    def handle(self, ctx: AIContext) -> tuple[AIState, ActionProposal]:
        ...


class IdleHandler(StateHandler):
    def handle(self, ctx: AIContext) -> tuple[AIState, ActionProposal]:
        return AIState.IDLE, rest(ctx.actor, "Idle")


class ChaseHandler(StateHandler):
    def handle(self, ctx: AIContext) -> tuple[AIState, ActionProposal]:
        actor = ctx.actor
        dest = step_toward(actor.pos, ctx.player_pos)
        if dest == ctx.player_pos:
            return AIState.CHASE, ActionProposal(
                actor_id=actor.id, verb=ActionType.ATTACK, target=dest,
                reason="Player adjacent → attacking")
        return AIState.CHASE, ActionProposal(
            actor_id=actor.id, verb=ActionType.MOVE, target=dest,
            reason="Player nearby → chasing")


class WanderHandler(StateHandler):
    def handle(self, ctx: AIContext) -> tuple[AIState, ActionProposal]:
        actor, rng, tick = ctx.actor, ctx.rng, ctx.tick
        if rng.next_bool(Domain.AI_DECISION, actor.id, tick, ctx.config.wander_idle_chance):
            return AIState.WANDER, rest(actor, "Wandering (idle)")
        direction = Direction(rng.next_int(Domain.WANDER_DIRECTION, actor.id, tick, 0, 3))
        dest = actor.pos + DIRECTION_OFFSETS[direction]
        return AIState.WANDER, ActionProposal(
            actor_id=actor.id, verb=ActionType.MOVE, target=dest,
            reason=f"Wandering {direction.name.lower()}")


# =====================================================================
# Registry
# =====================================================================

STATE_HANDLERS: dict[AIState, StateHandler] = {
    AIState.IDLE: IdleHandler(),
    AIState.WANDER: WanderHandler(),
    AIState.CHASE: ChaseHandler(),
}
