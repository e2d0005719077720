# ironlong

ironlong is a small tile-based puzzle game. You move a hero around a walled map
and pick up every collectible. When all of them are collected, the exit opens.
Step onto it to win, and the window closes.

## Installing

```
pip install .
```

## Playing

```
ironlong path/to/level.ber
```

The map must be a file whose name ends in `.ber`. If the file is missing,
cannot be read, is not valid, or has a different extension, the game prints
`Error` and `Invalid Map` and exits with status 1. If you give the wrong
number of arguments, it prints `Error` and `Invalid Syntax` and exits with
status 1.

After every key press that does not end the game, the current move count is
printed to the terminal as `Moves: N`. Only steps that succeed raise the
count. Bumping into a wall, or into the exit while collectibles remain, does
not.

### Sprites

The window draws each tile with an image loaded through `pygame.image.load`.
The images are read from an `images/` directory relative to the current
working directory:

- `images/background.xpm`
- `images/wall.xpm`
- `images/iron_man2.xpm` (player facing up or right)
- `images/iron_man1.xpm` (player facing down or left)
- `images/colect.xpm`
- `images/exit_close.xpm`
- `images/exit_open.xpm`

These images are not included in the package. You must provide them before
you start the game.

### Controls

| Key               | Action     |
|-------------------|------------|
| `W` / Up arrow    | move up    |
| `S` / Down arrow  | move down  |
| `A` / Left arrow  | move left  |
| `D` / Right arrow | move right |
| `Esc` / `Q`       | quit       |

Closing the window also ends the game.

## Map format

A map is plain text with one row per line. Blank lines are ignored. A map uses
these characters:

- `1` wall
- `0` empty floor
- `P` player start (exactly one)
- `E` exit (exactly one)
- `C` collectible (at least one)

Every row must have the same length, and walls must enclose the map. Any other
character makes the map invalid.

```
1111111
1P0C0E1
1111111
```

## Using it as a library

```python
from ironlong.mapfile import read_map, check_map
from ironlong.game import Game, Direction, MoveResult

rows = read_map("level.ber")      # raises OSError if the file cannot be opened
counts = check_map(rows)          # MapCounts; raises InvalidMapError if invalid
game = Game.from_rows(rows)       # also validates the map
result = game.move(Direction.RIGHT)   # MoveResult.MOVED, BLOCKED or WON
print(game.moves, game.collectibles, game.finished)
print(game.render_text())
```

The modules are:

- `ironlong.app`:
  - `load_game(path)` reads and checks a `.ber` file in one call.
  - `handle_key(game, keycode)` applies a key press.
  - `run(game)` opens the pygame window.
  - `main(argv=None)` is the `ironlong` command.
- `ironlong.game`:
  - `Game`, `Direction` and `MoveResult`.
  - `key_direction(keycode)` and `is_quit_key(keycode)`.
- `ironlong.mapfile`:
  - `read_map`, `check_map` and the individual rule checks `is_rectangular`, `is_walled`, `count_pieces` and `has_only_valid_tiles`.
  - `InvalidMapError` and `MapCounts`.
- `ironlong.draw`:
  - `Renderer` draws a game onto a pygame surface. You can pass your own images as a mapping from `Sprite` to surface, or give a `base_dir`.
  - `tiles(game)` yields the drawing order.
  - `window_size(rows)` gives the window size in pixels.
- `ironlong.linereader`:
  - `LineReader` and `read_lines(stream, buffer_size)` read a text or binary stream line by line through a fixed-size buffer.
- `ironlong.chars`, `ironlong.strings`, `ironlong.memory` and `ironlong.output` are small helpers:
  - character classes, `atoi` and `itoa`
  - string search, splitting and trimming
  - byte-buffer copy, move and compare
  - writing characters, strings and numbers to a stream

## Running the tests

```
pip install .[test]
pytest
```