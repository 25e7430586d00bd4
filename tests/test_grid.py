"""Tests for the Grid: bounds, wall semantics, blank reads, row rendering."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from scrap_hunter.core.enums import Tile
from scrap_hunter.core.grid import Grid
from scrap_hunter.core.models import Vector2


def _room() -> Grid:
    return Grid.from_rows([
        "#####",
        "#..$#",
        "#.E.#",
        "#####",
    ])


class TestBounds:
    def test_out_of_bounds_is_wall(self):
        g = _room()
        for y in range(-3, g.height + 3):
            for x in range(-3, g.width + 3):
                pos = Vector2(x, y)
                if not g.in_bounds(pos):
                    assert g.is_wall(pos), f"{pos} outside bounds must be a wall"

    def test_out_of_bounds_reads_blank(self):
        g = _room()
        assert g.get(Vector2(-1, 0)) == Tile.BLANK
        assert g.get(Vector2(0, 99)) == " "

    def test_out_of_bounds_set_is_noop(self):
        g = _room()
        before = g.rows()
        g.set(Vector2(5, 0), Tile.FLOOR)
        g.set(Vector2(-1, -1), Tile.FLOOR)
        assert g.rows() == before

    def test_wall_cell_is_wall(self):
        g = _room()
        assert g.is_wall(Vector2(0, 0))
        assert not g.is_wall(Vector2(1, 1))
        assert not g.is_wall(Vector2(3, 1))   # resource
        assert not g.is_wall(Vector2(2, 2))   # entrance


class TestAccess:
    def test_set_accepts_tile_or_glyph(self):
        g = Grid(3, 3, Tile.FLOOR)
        g.set(Vector2(1, 1), Tile.RESOURCE)
        g.set(Vector2(2, 2), "M")
        assert g.get(Vector2(1, 1)) == "$"
        assert g.get(Vector2(2, 2)) == Tile.PURSUER

    def test_is_floor_is_strict(self):
        g = _room()
        assert g.is_floor(Vector2(1, 1))
        assert not g.is_floor(Vector2(3, 1))
        assert not g.is_floor(Vector2(2, 2))
        assert not g.is_floor(Vector2(-1, 1))

    def test_default_fill_is_blank(self):
        g = Grid(4, 2)
        assert g.rows() == ["    ", "    "]

    def test_from_rows_pads_short_rows(self):
        g = Grid.from_rows(["###", "#"])
        assert g.width == 3
        assert g.rows() == ["###", "#  "]

    def test_copy_is_independent(self):
        g = _room()
        c = g.copy()
        c.set(Vector2(1, 1), Tile.WALL)
        assert g.get(Vector2(1, 1)) == Tile.FLOOR
        assert c.is_wall(Vector2(1, 1))
