"""Action proposals and their validators."""

from scrap_hunter.actions.attack import AttackAction
from scrap_hunter.actions.base import ActionProposal
from scrap_hunter.actions.move import MoveAction

__all__ = ["ActionProposal", "AttackAction", "MoveAction"]
