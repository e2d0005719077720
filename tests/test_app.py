import pytest

from ironlong.app import format_moves, handle_key, has_ber_extension, load_game, main
from ironlong.game import KEY_D, KEY_ESC, KEY_Q, KEY_W, Game
from ironlong.mapfile import InvalidMapError

MAP = ["1111111", "1P0C0E1", "1111111"]


@pytest.fixture
def map_file(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text("\n".join(MAP) + "\n")
    return path


def test_has_ber_extension():
    assert has_ber_extension("maps/level.ber")
    assert not has_ber_extension("maps/level.txt")
    assert not has_ber_extension("ber")


def test_format_moves():
    assert format_moves(3) == "\033[1;33mMoves: \033[0m3\n"


def test_load_game(map_file):
    game = load_game(map_file)
    assert game.render_text() == "\n".join(MAP)


def test_load_game_wrong_extension(tmp_path):
    path = tmp_path / "level.txt"
    path.write_text("\n".join(MAP))
    with pytest.raises(InvalidMapError):
        load_game(path)


def test_load_game_missing_file(tmp_path):
    with pytest.raises(InvalidMapError):
        load_game(tmp_path / "absent.ber")


def test_handle_key_quit():
    game = Game.from_rows(MAP)
    assert handle_key(game, KEY_ESC) is False
    assert handle_key(game, KEY_Q) is False


def test_handle_key_move_prints_count(capsys):
    game = Game.from_rows(MAP)
    assert handle_key(game, KEY_D) is True
    assert capsys.readouterr().out == format_moves(game.moves)
    assert game.moves == 1


def test_handle_key_blocked_still_prints(capsys):
    game = Game.from_rows(MAP)
    assert handle_key(game, KEY_W) is True
    assert capsys.readouterr().out == format_moves(0)


def test_handle_key_win_ends_game(capsys):
    game = Game.from_rows(MAP)
    for _ in range(3):
        handle_key(game, KEY_D)
    capsys.readouterr()
    assert handle_key(game, KEY_D) is False
    assert game.finished
    assert capsys.readouterr().out == ""


def test_main_wrong_argument_count(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == "Error\nInvalid Syntax"
    assert main(["a.ber", "b.ber"]) == 1


def test_main_invalid_map(tmp_path, capsys):
    path = tmp_path / "bad.ber"
    path.write_text("1111\n1P01\n1111\n")
    assert main([str(path)]) == 1
    assert capsys.readouterr().out == "Error\nInvalid Map"


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.ber")]) == 1
    assert capsys.readouterr().out == "Error\nInvalid Map"