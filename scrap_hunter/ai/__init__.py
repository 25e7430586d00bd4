"""AI layer: state machines and decision-making."""

from scrap_hunter.ai.brain import AIBrain, KIND_TRANSITIONS
from scrap_hunter.ai.states import STATE_HANDLERS, AIContext

__all__ = ["AIBrain", "AIContext", "KIND_TRANSITIONS", "STATE_HANDLERS"]
