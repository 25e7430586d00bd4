"""Engine layer: per-tick step and the day/quota session."""

from scrap_hunter.engine.session import DayReport, GameSession, SessionOverError
from scrap_hunter.engine.simulation_step import SimulationStep

__all__ = ["DayReport", "GameSession", "SessionOverError", "SimulationStep"]
