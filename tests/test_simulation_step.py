"""Tests for per-tick orchestration: command handling, outcomes, events, replay."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from scrap_hunter.config import SimulationConfig
from scrap_hunter.core.enums import Command, StepOutcome, Tile
from scrap_hunter.core.models import Actor, Vector2
from scrap_hunter.core.world_state import WorldState
from scrap_hunter.engine.simulation_step import SimulationStep
from scrap_hunter.systems.rng import DeterministicRNG
from scrap_hunter.utils.event_log import EventLog
from scrap_hunter.utils.replay import ReplayRecorder

ROWS = [
    "##########",
    "#E.$.....#",
    "#........#",
    "#.....M..#",
    "##########",
]


def _make_step(rows=ROWS, player=None, hp=100, event_log=None, recorder=None) -> SimulationStep:
    cfg = SimulationConfig(grid_width=len(rows[0]), grid_height=len(rows))
    world = WorldState(cfg)
    assert world.load(rows)
    pos = Vector2(*player) if player else world.entrance
    actor = Actor(pos=pos, hp=hp, max_hp=cfg.player_max_hp)
    return SimulationStep(cfg, world, actor, DeterministicRNG(1),
                          event_log=event_log, recorder=recorder)


class TestCommands:
    def test_quit_stops_before_anything_moves(self):
        step = _make_step()
        before_rows = step.world.grid.rows()
        assert step.advance(Command.QUIT) == StepOutcome.QUIT
        assert step.tick == 0
        assert step.world.grid.rows() == before_rows

    def test_exit_on_entrance_ends_day(self):
        step = _make_step()
        assert step.advance("e") == StepOutcome.EXITED
        assert step.tick == 0

    def test_exit_away_from_entrance_is_an_ordinary_tick(self):
        step = _make_step(player=(2, 1))
        assert step.advance(Command.EXIT) == StepOutcome.CONTINUE
        assert step.tick == 1
        assert step.actor.pos == Vector2(2, 1)

    def test_unknown_command_still_advances_pursuers(self):
        step = _make_step(player=(5, 2))
        step.advance("x")
        assert step.tick == 1
        # pursuer at (6,3) is 2 away; the diagonal tie breaks toward y
        assert step.world.entities[1].pos == Vector2(6, 2)

    def test_movement_then_pursuers(self):
        step = _make_step(player=(3, 3))
        # player steps right to (4,3); pursuer at (6,3) then chases to (5,3)
        assert step.advance(Command.RIGHT) == StepOutcome.CONTINUE
        assert step.actor.pos == Vector2(4, 3)
        assert step.world.entities[1].pos == Vector2(5, 3)
        # next tick the pursuer is adjacent and attacks
        step.advance(Command.NONE)
        assert step.actor.hp == 75
        assert step.world.entities[1].pos == Vector2(5, 3)


class TestOutcomes:
    def test_died_outcome(self):
        step = _make_step(player=(5, 3), hp=25)
        assert step.advance(Command.NONE) == StepOutcome.DIED
        assert step.actor.hp == 0

    def test_continue_while_alive(self):
        step = _make_step(player=(5, 3), hp=26)
        assert step.advance(Command.NONE) == StepOutcome.CONTINUE
        assert step.actor.hp == 1

    def test_pickup_through_step(self):
        step = _make_step(player=(2, 1))
        step.advance(Command.RIGHT)
        assert step.actor.carried == 1
        assert step.world.grid.get(Vector2(3, 1)) == Tile.FLOOR


class TestEvents:
    def test_pickup_and_damage_events(self):
        log = EventLog()
        step = _make_step(player=(2, 1), event_log=log)
        step.advance(Command.RIGHT)
        assert "pickup" in log.categories()

        # pursuer chased to (5,3) on the first tick
        step.actor.pos = Vector2(4, 3)
        step.advance(Command.NONE)
        assert "damage" in log.categories()
        damage = [e for e in step.last_events if e.category == "damage"]
        assert damage[0].entity_ids == (1,)

    def test_death_event(self):
        log = EventLog()
        step = _make_step(player=(5, 3), hp=25, event_log=log)
        step.advance(Command.NONE)
        assert log.categories()[-1] == "death"

    def test_last_events_reset_each_tick(self):
        step = _make_step(player=(2, 1))
        step.advance(Command.RIGHT)
        assert step.last_events
        step.advance(Command.RIGHT)
        assert all(e.category != "pickup" for e in step.last_events)


class TestReplay:
    def test_records_each_resolved_tick(self, tmp_path):
        recorder = ReplayRecorder(tmp_path / "replay.json", seed=1)
        step = _make_step(player=(2, 1), recorder=recorder)
        step.advance(Command.RIGHT)
        step.advance(Command.LEFT)
        step.advance(Command.QUIT)
        assert len(recorder.ticks) == 2
        first = recorder.ticks[0]
        assert first["command"] == "RIGHT"
        assert first["outcome"] == "CONTINUE"
        assert first["player"] == {"pos": [3, 1], "hp": 100, "carried": 1}
        assert first["pursuers"][0]["id"] == 1

        recorder.flush()
        assert (tmp_path / "replay.json").exists()
