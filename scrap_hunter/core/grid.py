"""Grid / map system."""

from __future__ import annotations

from scrap_hunter.core.enums import Tile
from scrap_hunter.core.models import Vector2


def _glyph(value: str) -> str:
    return value.value if isinstance(value, Tile) else value


class Grid:
    """Fixed-size 2D glyph grid backed by a flat list.

    Cells hold single-character strings (see ``Tile``). Out-of-bounds
    coordinates are walls for movement and blanks for rendering.
    """

    __slots__ = ("width", "height", "_tiles")

    def __init__(self, width: int, height: int, default: str = Tile.BLANK) -> None:
        self.width = width
        self.height = height
        self._tiles: list[str] = [_glyph(default)] * (width * height)

    # -- access --

    def _idx(self, x: int, y: int) -> int:
        return y * self.width + x

    def in_bounds(self, pos: Vector2) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def get(self, pos: Vector2) -> str:
        if not self.in_bounds(pos):
            return Tile.BLANK.value
        return self._tiles[self._idx(pos.x, pos.y)]

    def set(self, pos: Vector2, glyph: str) -> None:
        if self.in_bounds(pos):
            self._tiles[self._idx(pos.x, pos.y)] = _glyph(glyph)

    def is_wall(self, pos: Vector2) -> bool:
        if not self.in_bounds(pos):
            return True
        return self._tiles[self._idx(pos.x, pos.y)] == Tile.WALL

    def is_floor(self, pos: Vector2) -> bool:
        return self.get(pos) == Tile.FLOOR

    # -- rows --

    def row(self, y: int) -> str:
        start = y * self.width
        return "".join(self._tiles[start:start + self.width])

    def rows(self) -> list[str]:
        return [self.row(y) for y in range(self.height)]

    @classmethod
    def from_rows(cls, rows: list[str], default: str = Tile.BLANK) -> Grid:
        """Build a grid sized to *rows*; short rows are padded with *default*."""
        height = len(rows)
        width = max((len(r) for r in rows), default=0)
        grid = cls(width, height, default)
        for y, line in enumerate(rows):
            for x, ch in enumerate(line):
                grid._tiles[grid._idx(x, y)] = ch
        return grid

    # -- copy --

    def copy(self) -> Grid:
        new = Grid.__new__(Grid)
        new.width = self.width
        new.height = self.height
        new._tiles = list(self._tiles)
        return new
