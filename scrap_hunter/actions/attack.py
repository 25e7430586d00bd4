"""AttackAction: a pursuer strikes the player instead of stepping onto it."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from scrap_hunter.actions.base import ActionProposal
from scrap_hunter.core.enums import ActionType

if TYPE_CHECKING:
    from scrap_hunter.config import SimulationConfig
    from scrap_hunter.core.models import Actor


logger = logging.getLogger(__name__)


class AttackAction:
    """Applies a fixed amount of damage to the player."""

    __slots__ = ("_damage",)

    def __init__(self, config: SimulationConfig) -> None:
        self._damage = config.pursuer_damage

    def validate(self, proposal: ActionProposal, actor: Actor) -> bool:
        if proposal.verb != ActionType.ATTACK:
            return False
        return actor.alive and proposal.target == actor.pos

    def apply(self, proposal: ActionProposal, actor: Actor) -> int:
        """Damage the actor; returns the hp actually lost."""
        before = actor.hp
        actor.take_damage(self._damage)
        lost = before - actor.hp
        logger.debug("Entity %d hits player for %d (hp %d -> %d)",
                     proposal.actor_id, lost, before, actor.hp)
        return lost
