from collections import defaultdict

import pygame
import pytest

from ironlong.draw import TILE_SIZE, Renderer, Sprite, tiles, window_size
from ironlong.game import Direction, Game

MAP = ["1111111", "1P0C0E1", "1111111"]
SIZE = 4

COLORS = {
    Sprite.BACKGROUND: (10, 10, 10),
    Sprite.WALL: (200, 0, 0),
    Sprite.PLAYER_FORWARD: (0, 200, 0),
    Sprite.PLAYER_BACK: (0, 100, 0),
    Sprite.COLLECTIBLE: (0, 0, 200),
    Sprite.EXIT_CLOSED: (200, 200, 0),
    Sprite.EXIT_OPEN: (0, 200, 200),
}


def _images():
    images = {}
    for sprite, color in COLORS.items():
        surface = pygame.Surface((SIZE, SIZE))
        surface.fill(color)
        images[sprite] = surface
    return images


def _layers(game):
    layers = defaultdict(list)
    for x, y, sprite in tiles(game):
        layers[(x, y)].append(sprite)
    return layers


def _pixel(surface, x, y):
    return tuple(surface.get_at((x * SIZE, y * SIZE)))[:3]


def test_window_size():
    assert window_size(MAP) == (len(MAP[0]) * TILE_SIZE, len(MAP) * TILE_SIZE)
    assert window_size(MAP, SIZE) == (len(MAP[0]) * SIZE, len(MAP) * SIZE)


def test_every_cell_starts_with_background():
    game = Game.from_rows(MAP)
    layers = _layers(game)
    assert len(layers) == len(MAP) * len(MAP[0])
    assert all(stack[0] is Sprite.BACKGROUND for stack in layers.values())


def test_tile_sprites():
    game = Game.from_rows(MAP)
    layers = _layers(game)
    assert layers[(0, 0)] == [Sprite.BACKGROUND, Sprite.WALL]
    assert layers[(1, 1)] == [Sprite.BACKGROUND, Sprite.PLAYER_FORWARD]
    assert layers[(2, 1)] == [Sprite.BACKGROUND]
    assert layers[(3, 1)] == [Sprite.BACKGROUND, Sprite.COLLECTIBLE]
    assert layers[(5, 1)] == [Sprite.BACKGROUND, Sprite.EXIT_CLOSED]


def test_exit_opens_when_all_collected():
    game = Game.from_rows(MAP)
    game.move(Direction.RIGHT)
    game.move(Direction.RIGHT)
    assert _layers(game)[(5, 1)][-1] is Sprite.EXIT_OPEN


def test_player_sprite_follows_facing():
    game = Game.from_rows(MAP)
    game.move(Direction.RIGHT)
    game.move(Direction.LEFT)
    assert _layers(game)[(game.player_x, game.player_y)][-1] is Sprite.PLAYER_BACK


def test_renderer_draws_pixels():
    game = Game.from_rows(MAP)
    renderer = Renderer(game, _images(), tile_size=SIZE)
    surface = pygame.Surface(window_size(MAP, SIZE))
    renderer.draw(surface)
    assert _pixel(surface, 0, 0) == COLORS[Sprite.WALL]
    assert _pixel(surface, 1, 1) == COLORS[Sprite.PLAYER_FORWARD]
    assert _pixel(surface, 2, 1) == COLORS[Sprite.BACKGROUND]
    assert _pixel(surface, 3, 1) == COLORS[Sprite.COLLECTIBLE]
    assert _pixel(surface, 5, 1) == COLORS[Sprite.EXIT_CLOSED]


def test_renderer_redraw_after_move():
    game = Game.from_rows(MAP)
    renderer = Renderer(game, _images(), tile_size=SIZE)
    surface = pygame.Surface(window_size(MAP, SIZE))
    game.move(Direction.RIGHT)
    renderer.draw(surface)
    assert _pixel(surface, 1, 1) == COLORS[Sprite.BACKGROUND]
    assert _pixel(surface, 2, 1) == COLORS[Sprite.PLAYER_FORWARD]


def test_renderer_requires_all_images():
    images = _images()
    del images[Sprite.WALL]
    with pytest.raises(ValueError, match="WALL"):
        Renderer(Game.from_rows(MAP), images, tile_size=SIZE)