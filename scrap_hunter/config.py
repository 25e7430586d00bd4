"""Simulation configuration with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

BUNDLED_MAP_DIR = Path(__file__).resolve().parent / "data" / "maps"


@dataclass(frozen=True)
class SimulationConfig:
    """Immutable configuration for a Scrap Hunter run."""

    # World
    world_seed: int = 42
    grid_width: int = 40
    grid_height: int = 14
    default_entrance_x: int = 1            # Used when a map has no 'E' marker
    default_entrance_y: int = 1

    # Player
    player_max_hp: int = 100

    # Pursuers
    pursuer_damage: int = 25
    chase_radius: int = 6                  # Chase while 0 < distance < chase_radius
    wander_idle_chance: float = 0.5        # Chance a wandering pursuer skips its tick

    # Quota
    starting_quota: int = 5
    quota_cycle_days: int = 3              # Quota is reviewed every N days
    quota_growth: float = 1.5
    quota_bonus: int = 2                   # new quota = int(quota * growth) + bonus

    # Maps
    map_dir: str = ""                      # Empty -> bundled maps
    map_files: tuple = ("map1.txt", "map2.txt", "map3.txt")

    # Terminal pacing (the engine itself never sleeps)
    load_pause_seconds: float = 1.0
    day_end_pause_seconds: float = 2.0
    death_pause_seconds: float = 3.0
    quota_pause_seconds: float = 3.0
    tick_delay_seconds: float = 0.05

    # Logging
    log_level: str = "INFO"
    replay_file: str = "replay.json"

    def map_path(self, name: str) -> Path:
        """Resolve a map file name against the configured map directory."""
        base = Path(self.map_dir) if self.map_dir else BUNDLED_MAP_DIR
        return base / name
