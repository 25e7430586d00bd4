"""Base action proposal, the currency between the AI and the world."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from scrap_hunter.core.enums import ActionType


@dataclass(frozen=True, slots=True)
class ActionProposal:
    """An intent produced by the AI for one entity.

    SimulationStep validates and applies (or rejects) each proposal.
    """

    actor_id: int
    verb: ActionType
    target: Any = None
    reason: str = ""

    def __repr__(self) -> str:
        return f"Proposal(entity={self.actor_id}, {self.verb.name}, target={self.target}, reason={self.reason!r})"
