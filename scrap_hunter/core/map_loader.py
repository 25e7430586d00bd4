"""ASCII map parsing.

A map source is a sequence of text lines, one per row.  Rows beyond the
grid height are ignored, short lines are padded with blanks, and rows the
source does not provide are blank-filled.  The first 'E' in row-major order
is the entrance; every 'M' is a pursuer spawn and stays in the grid as that
pursuer's glyph.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from itertools import islice
from typing import Iterable, Union

from scrap_hunter.core.enums import Tile
from scrap_hunter.core.grid import Grid
from scrap_hunter.core.models import Vector2

logger = logging.getLogger(__name__)

MapSource = Union[str, os.PathLike, Iterable[str]]


class MapLoadError(Exception):
    """Raised when a map source cannot be opened or read."""


@dataclass(slots=True)
class MapData:
    """Parsed map: the grid plus the markers found in it."""

    grid: Grid
    entrance: Vector2 | None = None
    spawns: list[Vector2] = field(default_factory=list)
    name: str = ""


def parse_map(lines: Iterable[str], width: int, height: int, name: str = "") -> MapData:
    grid = Grid(width, height, Tile.BLANK)
    entrance: Vector2 | None = None
    spawns: list[Vector2] = []

    for y, raw in enumerate(islice(lines, height)):
        line = raw.rstrip("\r\n")
        for x, ch in enumerate(line[:width]):
            pos = Vector2(x, y)
            grid.set(pos, ch)
            if ch == Tile.ENTRANCE and entrance is None:
                entrance = pos
            elif ch == Tile.PURSUER:
                spawns.append(pos)

    return MapData(grid=grid, entrance=entrance, spawns=spawns, name=name)


def load_map(source: MapSource, width: int, height: int) -> MapData:
    """Load a map from a path or an iterable of lines.

    Raises MapLoadError if the source cannot be opened or decoded.
    """
    if isinstance(source, (str, os.PathLike)):
        path = os.fspath(source)
        try:
            with open(path, encoding="utf-8") as fh:
                data = parse_map(fh, width, height, name=os.path.basename(path))
        except (OSError, UnicodeDecodeError) as exc:
            raise MapLoadError(f"cannot read map {path!r}: {exc}") from exc
    else:
        try:
            data = parse_map(source, width, height, name=getattr(source, "name", ""))
        except (OSError, UnicodeDecodeError) as exc:
            raise MapLoadError(f"cannot read map source: {exc}") from exc

    logger.info("Loaded map %s (%d pursuers, entrance %s)",
                data.name or "<lines>", len(data.spawns), data.entrance)
    return data
