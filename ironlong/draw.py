"""Drawing a game onto a pygame surface."""

from __future__ import annotations

import os
from enum import Enum
from typing import Iterator, Mapping, Optional, Sequence, Sized

import pygame

from .game import COLLECTIBLE, EXIT, PLAYER, WALL, Direction, Game

TILE_SIZE = 32


class Sprite(Enum):
    """The images a level is drawn with, by file path."""

    BACKGROUND = "images/background.xpm"
    WALL = "images/wall.xpm"
    PLAYER_FORWARD = "images/iron_man2.xpm"
    PLAYER_BACK = "images/iron_man1.xpm"
    COLLECTIBLE = "images/colect.xpm"
    EXIT_CLOSED = "images/exit_close.xpm"
    EXIT_OPEN = "images/exit_open.xpm"


def window_size(rows: Sequence[Sized], tile_size: int = TILE_SIZE) -> tuple[int, int]:
    """Pixel width and height of a window showing ``rows``."""
    return len(rows[0]) * tile_size, len(rows) * tile_size


def _player_sprite(facing: Direction) -> Sprite:
    if facing in (Direction.DOWN, Direction.LEFT):
        return Sprite.PLAYER_BACK
    return Sprite.PLAYER_FORWARD


def tiles(game: Game) -> Iterator[tuple[int, int, Sprite]]:
    """Yield (x, y, sprite) in drawing order: background, then what stands on it."""
    for y, row in enumerate(game.rows):
        for x, tile in enumerate(row):
            yield x, y, Sprite.BACKGROUND
            if tile == WALL:
                yield x, y, Sprite.WALL
            elif tile == PLAYER:
                yield x, y, _player_sprite(game.facing)
            elif tile == COLLECTIBLE:
                yield x, y, Sprite.COLLECTIBLE
            elif tile == EXIT:
                yield x, y, (
                    Sprite.EXIT_OPEN if game.collectibles == 0 else Sprite.EXIT_CLOSED
                )


def _load_images(base_dir: str) -> dict[Sprite, pygame.Surface]:
    return {
        sprite: pygame.image.load(os.path.join(base_dir, sprite.value))
        for sprite in Sprite
    }


class Renderer:
    """Draws a game with one image per sprite."""

    def __init__(
        self,
        game: Game,
        images: Optional[Mapping[Sprite, pygame.Surface]] = None,
        tile_size: int = TILE_SIZE,
        base_dir: str = ".",
    ) -> None:
        if images is None:
            images = _load_images(base_dir)
        missing = set(Sprite) - set(images)
        if missing:
            names = ", ".join(sorted(sprite.name for sprite in missing))
            raise ValueError(f"missing images for: {names}")
        self.game = game
        self.images = dict(images)
        self.tile_size = tile_size

    def draw(self, surface: pygame.Surface) -> None:
        """Draw every tile of the game onto ``surface``."""
        for x, y, sprite in tiles(self.game):
            surface.blit(self.images[sprite], (x * self.tile_size, y * self.tile_size))