"""The playable program: argument checks, key handling and the window loop."""

from __future__ import annotations

import os
import sys
from typing import Optional, Sequence, Union

import pygame

from .draw import Renderer, window_size
from .game import (
    ARROW_DOWN,
    ARROW_LEFT,
    ARROW_RIGHT,
    ARROW_UP,
    KEY_ESC,
    Game,
    MoveResult,
    is_quit_key,
    key_direction,
)
from .mapfile import InvalidMapError, read_map

_MOVES_LABEL = "\033[1;33mMoves: \033[0m"
_TITLE = "ironlong"
_FPS = 60


def has_ber_extension(path: Union[str, os.PathLike]) -> bool:
    """True when the path ends in ``.ber``."""
    return os.fspath(path).endswith(".ber")


def format_moves(moves: int) -> str:
    """The move counter line printed after each key press."""
    return f"{_MOVES_LABEL}{moves}\n"


def load_game(path: Union[str, os.PathLike]) -> Game:
    """Read and validate a map file; raises InvalidMapError when it is unusable."""
    try:
        rows = read_map(path)
    except (OSError, UnicodeDecodeError) as exc:
        raise InvalidMapError(f"cannot read map: {exc}") from exc
    game = Game.from_rows(rows)
    if not has_ber_extension(path):
        raise InvalidMapError("map file must end in .ber")
    return game


def handle_key(game: Game, keycode: int) -> bool:
    """Apply a key press; return False when the game should end."""
    if is_quit_key(keycode):
        return False
    if game.finished:
        return False
    direction = key_direction(keycode)
    if direction is not None and game.move(direction) is MoveResult.WON:
        return False
    sys.stdout.write(format_moves(game.moves))
    sys.stdout.flush()
    return True


def _keycode(key: int) -> int:
    special = {
        pygame.K_ESCAPE: KEY_ESC,
        pygame.K_UP: ARROW_UP,
        pygame.K_DOWN: ARROW_DOWN,
        pygame.K_LEFT: ARROW_LEFT,
        pygame.K_RIGHT: ARROW_RIGHT,
    }
    return special.get(key, key)


def run(game: Game) -> None:
    """Open a window and play until the player quits or wins."""
    pygame.init()
    try:
        surface = pygame.display.set_mode(window_size(game.rows))
        pygame.display.set_caption(_TITLE)
        renderer = Renderer(game)
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                    break
                if event.type == pygame.KEYDOWN and not handle_key(
                    game, _keycode(event.key)
                ):
                    running = False
                    break
            renderer.draw(surface)
            pygame.display.flip()
            clock.tick(_FPS)
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play the map named on the command line; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        sys.stdout.write("Error\nInvalid Syntax")
        sys.stdout.flush()
        return 1
    try:
        game = load_game(args[0])
    except InvalidMapError:
        sys.stdout.write("Error\nInvalid Map")
        sys.stdout.flush()
        return 1
    run(game)
    return 0