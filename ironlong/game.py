"""Game state: the tile grid, the player, and the rules for moving."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence

from .mapfile import check_map

WALL = "1"
EMPTY = "0"
PLAYER = "P"
COLLECTIBLE = "C"
EXIT = "E"

KEY_W = 119
KEY_S = 115
KEY_D = 100
KEY_A = 97
KEY_ESC = 65307
KEY_Q = 113
ARROW_UP = 65362
ARROW_DOWN = 65364
ARROW_RIGHT = 65363
ARROW_LEFT = 65361


class Direction(Enum):
    """A step on the grid, as (dx, dy)."""

    UP = (0, -1)
    DOWN = (0, 1)
    RIGHT = (1, 0)
    LEFT = (-1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


class MoveResult(Enum):
    """What a move attempt did."""

    MOVED = "moved"
    BLOCKED = "blocked"
    WON = "won"


_KEY_DIRECTIONS = {
    KEY_W: Direction.UP,
    ARROW_UP: Direction.UP,
    KEY_S: Direction.DOWN,
    ARROW_DOWN: Direction.DOWN,
    KEY_D: Direction.RIGHT,
    ARROW_RIGHT: Direction.RIGHT,
    KEY_A: Direction.LEFT,
    ARROW_LEFT: Direction.LEFT,
}

QUIT_KEYS = frozenset({KEY_ESC, KEY_Q})


def key_direction(keycode: int) -> Optional[Direction]:
    """The direction a key moves the player, or None for other keys."""
    return _KEY_DIRECTIONS.get(keycode)


def is_quit_key(keycode: int) -> bool:
    """True for the keys that end the game."""
    return keycode in QUIT_KEYS


@dataclass
class Game:
    """A level being played."""

    rows: list[list[str]]
    player_x: int
    player_y: int
    collectibles: int
    moves: int = 0
    finished: bool = False
    facing: Direction = field(default=Direction.UP)

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Game":
        """Start a game on a map; raises InvalidMapError for a bad map."""
        counts = check_map(rows)
        grid = [list(row) for row in rows]
        x, y = next(
            (x, y)
            for y, row in enumerate(grid)
            for x, tile in enumerate(row)
            if tile == PLAYER
        )
        return cls(rows=grid, player_x=x, player_y=y, collectibles=counts.collectibles)

    @property
    def width(self) -> int:
        return len(self.rows[0])

    @property
    def height(self) -> int:
        return len(self.rows)

    def tile(self, x: int, y: int) -> str:
        """The tile at column ``x`` of row ``y``."""
        if not (0 <= y < len(self.rows) and 0 <= x < len(self.rows[y])):
            raise IndexError(f"no tile at ({x}, {y})")
        return self.rows[y][x]

    def move(self, direction: Direction) -> MoveResult:
        """Try to step the player one tile in ``direction``."""
        if self.finished:
            return MoveResult.BLOCKED
        self.facing = direction
        x = self.player_x + direction.dx
        y = self.player_y + direction.dy
        target = self.tile(x, y)
        if target == EXIT and self.collectibles == 0:
            self.rows[self.player_y][self.player_x] = EMPTY
            self.player_x, self.player_y = x, y
            self.moves += 1
            self.finished = True
            return MoveResult.WON
        if target in (WALL, EXIT):
            return MoveResult.BLOCKED
        if target == COLLECTIBLE:
            self.collectibles -= 1
        self.rows[y][x] = PLAYER
        self.rows[self.player_y][self.player_x] = EMPTY
        self.player_x, self.player_y = x, y
        self.moves += 1
        return MoveResult.MOVED

    def render_text(self) -> str:
        """The current grid, one row per line."""
        return "\n".join("".join(row) for row in self.rows)