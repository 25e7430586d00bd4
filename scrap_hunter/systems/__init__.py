"""Engine systems: deterministic RNG."""

from scrap_hunter.systems.rng import DeterministicRNG

__all__ = ["DeterministicRNG"]
