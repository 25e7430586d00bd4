"""Tests for ASCII map parsing and WorldState loading."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from scrap_hunter.config import SimulationConfig
from scrap_hunter.core.enums import Tile
from scrap_hunter.core.map_loader import MapLoadError, load_map, parse_map
from scrap_hunter.core.models import Vector2
from scrap_hunter.core.world_state import STALKER_KIND, WorldState


class TestParseMap:
    def test_short_lines_padded_with_blanks(self):
        data = parse_map(["#.", "#"], width=4, height=2)
        assert data.grid.rows() == ["#.  ", "#   "]

    def test_long_lines_truncated(self):
        data = parse_map(["#....#####"], width=4, height=1)
        assert data.grid.rows() == ["#..."]

    def test_extra_rows_ignored(self):
        data = parse_map(["##", "..", "$$", "MM"], width=2, height=2)
        assert data.grid.rows() == ["##", ".."]
        assert data.spawns == []

    def test_missing_rows_blank_filled(self):
        data = parse_map(["###"], width=3, height=3)
        assert data.grid.rows() == ["###", "   ", "   "]

    def test_line_endings_stripped(self):
        data = parse_map(["#E#\n", "#.#\r\n"], width=3, height=2)
        assert data.grid.rows() == ["#E#", "#.#"]

    def test_first_entrance_wins(self):
        data = parse_map(["#..E", "E..."], width=4, height=2)
        assert data.entrance == Vector2(3, 0)

    def test_no_entrance(self):
        data = parse_map(["#..#"], width=4, height=1)
        assert data.entrance is None

    def test_spawns_in_row_major_order_and_kept_in_grid(self):
        data = parse_map(["#.M.", "M..M"], width=4, height=2)
        assert data.spawns == [Vector2(2, 0), Vector2(0, 1), Vector2(3, 1)]
        assert data.grid.get(Vector2(2, 0)) == Tile.PURSUER


class TestLoadMap:
    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(MapLoadError):
            load_map(tmp_path / "nope.txt", 4, 4)

    def test_directory_raises(self, tmp_path):
        with pytest.raises(MapLoadError):
            load_map(tmp_path, 4, 4)

    def test_file_loads(self, tmp_path):
        path = tmp_path / "room.txt"
        path.write_text("####\n#EM#\n####\n", encoding="utf-8")
        data = load_map(path, 4, 3)
        assert data.name == "room.txt"
        assert data.entrance == Vector2(1, 1)
        assert data.spawns == [Vector2(2, 1)]

    def test_string_path_accepted(self, tmp_path):
        path = tmp_path / "room.txt"
        path.write_text("#E#\n", encoding="utf-8")
        data = load_map(str(path), 3, 1)
        assert data.entrance == Vector2(1, 0)

    def test_iterable_of_lines_accepted(self):
        data = load_map(iter(["#E.#", "#..#"]), 4, 2)
        assert data.entrance == Vector2(1, 0)

    def test_undecodable_open_file_raises(self, tmp_path):
        path = tmp_path / "garbled.txt"
        path.write_bytes(b"#\xff\xfe#\n")
        with open(path, encoding="utf-8") as fh:
            with pytest.raises(MapLoadError):
                load_map(fh, 4, 1)


class TestWorldStateLoad:
    def _config(self, **kw) -> SimulationConfig:
        return SimulationConfig(grid_width=5, grid_height=3, **kw)

    def test_spawns_become_stalkers_in_order(self):
        world = WorldState(self._config())
        assert world.load(["#####", "#EMM#", "#M..#"])
        assert list(world.entities) == [1, 2, 3]
        assert [e.pos for e in world.pursuers()] == [Vector2(2, 1), Vector2(3, 1), Vector2(1, 2)]
        assert all(e.kind == STALKER_KIND for e in world.pursuers())

    def test_failed_load_keeps_previous_state(self, tmp_path):
        world = WorldState(self._config())
        assert world.load(["#####", "#E.M#", "#####"])
        before_rows = world.grid.rows()
        before_ids = list(world.entities)

        assert world.load(tmp_path / "missing.txt") is False
        assert world.grid.rows() == before_rows
        assert list(world.entities) == before_ids
        assert world.entrance == Vector2(1, 1)

    def test_reload_replaces_entities(self):
        world = WorldState(self._config())
        world.load(["#####", "#EMM#", "#####"])
        world.load(["#####", "#E.M#", "#####"])
        assert list(world.entities) == [1]
        assert world.entities[1].pos == Vector2(3, 1)

    def test_missing_entrance_uses_default(self):
        world = WorldState(self._config(default_entrance_x=2, default_entrance_y=1))
        assert world.load(["#####", "#...#", "#####"])
        assert world.entrance == Vector2(2, 1)

    def test_undecodable_open_file_returns_false(self, tmp_path):
        world = WorldState(self._config())
        path = tmp_path / "garbled.txt"
        path.write_bytes(b"#\xff\xfe#\n")
        with open(path, encoding="utf-8") as fh:
            assert world.load(fh) is False
        assert world.source == ""

    def test_from_map_builds_world(self):
        data = parse_map(["#####", "#E.M#", "#####"], 5, 3, name="inline")
        world = WorldState.from_map(data, self._config())
        assert world.source == "inline"
        assert world.entrance == Vector2(1, 1)
        assert [e.pos for e in world.pursuers()] == [Vector2(3, 1)]


class TestBundledMaps:
    @pytest.mark.parametrize("name", SimulationConfig().map_files)
    def test_bundled_map_is_well_formed(self, name):
        cfg = SimulationConfig()
        data = load_map(cfg.map_path(name), cfg.grid_width, cfg.grid_height)
        rows = data.grid.rows()
        assert len(rows) == cfg.grid_height
        assert all(len(r) == cfg.grid_width for r in rows)
        assert data.entrance is not None
        assert sum(r.count(Tile.ENTRANCE) for r in rows) == 1
        assert not data.grid.is_wall(data.entrance)
        assert data.spawns, "every map should have pursuers"
        assert any(Tile.RESOURCE in r for r in rows)
