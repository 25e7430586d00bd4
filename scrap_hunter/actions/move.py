"""MoveAction: validates and applies pursuer movement proposals.

Pursuers only ever step onto plain floor.  Resources, the entrance and
other pursuers' cells all block them, unlike the player who is stopped by
walls alone.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from scrap_hunter.actions.base import ActionProposal
from scrap_hunter.core.enums import ActionType
from scrap_hunter.core.models import Vector2

if TYPE_CHECKING:
    from scrap_hunter.core.world_state import WorldState

logger = logging.getLogger(__name__)


class MoveAction:
    """Stateless handler for MOVE proposals."""

    @staticmethod
    def validate(proposal: ActionProposal, world: WorldState) -> bool:
        if proposal.verb != ActionType.MOVE:
            return False

        if proposal.actor_id not in world.entities:
            return False

        target: Vector2 = proposal.target
        if world.grid.is_wall(target):
            logger.debug("Entity %d blocked by wall at %s", proposal.actor_id, target)
            return False

        if not world.grid.is_floor(target):
            logger.debug("Entity %d blocked by %r at %s",
                         proposal.actor_id, world.grid.get(target), target)
            return False

        return True

    @staticmethod
    def apply(proposal: ActionProposal, world: WorldState) -> None:
        world.move_entity(proposal.actor_id, proposal.target)
