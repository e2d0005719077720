"""Loading a level map from a file and checking that it is playable."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Sequence, Union

from .linereader import read_lines
from .strings import split

VALID_TILES = frozenset("PEC01")


class InvalidMapError(ValueError):
    """The map breaks one of the level rules."""


@dataclass(frozen=True)
class MapCounts:
    """How many players, exits and collectibles a map holds."""

    players: int
    exits: int
    collectibles: int


def read_map(path: Union[str, os.PathLike]) -> list[str]:
    """Read a map file into its rows; blank lines are dropped.

    Raises OSError when the file cannot be opened.
    """
    with open(path, encoding="utf-8", newline="") as stream:
        content = "".join(read_lines(stream))
    return split(content, "\n")


def is_rectangular(rows: Sequence[str]) -> bool:
    """True when there are rows and all share the width of the first."""
    if not rows:
        return False
    width = len(rows[0])
    return all(len(row) == width for row in rows[1:])


def is_walled(rows: Sequence[str]) -> bool:
    """True when the first and last rows and columns are all walls."""
    if not rows:
        return False
    top, bottom = rows[0], rows[-1]
    if any(a != "1" or b != "1" for a, b in zip(top, bottom)):
        return False
    if len(rows) < 2:
        return bool(top)
    width = len(rows[1])
    for row in rows[1:]:
        if not row or row[0] != "1" or len(row) < width or row[width - 1] != "1":
            return False
    return True


def count_pieces(rows: Sequence[str]) -> MapCounts:
    """Count the players, exits and collectibles in ``rows``."""
    text = "".join(rows)
    return MapCounts(
        players=text.count("P"),
        exits=text.count("E"),
        collectibles=text.count("C"),
    )


def has_only_valid_tiles(rows: Sequence[str]) -> bool:
    """True when every tile is one of P, E, C, 0 or 1."""
    return all(tile in VALID_TILES for row in rows for tile in row)


def check_map(rows: Sequence[str]) -> MapCounts:
    """Validate a map and return its piece counts.

    Raises InvalidMapError on the first rule the map breaks.
    """
    if not is_rectangular(rows):
        raise InvalidMapError("map is not rectangular")
    if not is_walled(rows):
        raise InvalidMapError("map is not enclosed by walls")
    counts = count_pieces(rows)
    if counts.players != 1 or counts.exits != 1 or counts.collectibles == 0:
        raise InvalidMapError(
            "map needs exactly one player, exactly one exit and at least one collectible"
        )
    if not has_only_valid_tiles(rows):
        raise InvalidMapError("map holds an unknown tile")
    return counts