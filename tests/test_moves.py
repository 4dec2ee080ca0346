import pytest

from solong.game_map import Position, parse_map
from solong.moves import (
    KEY_A,
    KEY_D,
    KEY_DOWN,
    KEY_ESC,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_S,
    KEY_UP,
    KEY_W,
    Direction,
    Game,
    MoveResult,
    direction_for_key,
)

LINE = "111111\n1PC0E1\n111111"
EXIT_FIRST = "11111\n1PEC1\n11111"
COLUMN = "111\n1P1\n101\n1C1\n1E1\n111"


def new_game(text):
    return Game.from_map(parse_map(text))


@pytest.mark.parametrize(
    "key, direction",
    [
        (KEY_A, Direction.LEFT),
        (KEY_LEFT, Direction.LEFT),
        (KEY_D, Direction.RIGHT),
        (KEY_RIGHT, Direction.RIGHT),
        (KEY_W, Direction.UP),
        (KEY_UP, Direction.UP),
        (KEY_S, Direction.DOWN),
        (KEY_DOWN, Direction.DOWN),
    ],
)
def test_direction_for_key(key, direction):
    assert direction_for_key(key) is direction


def test_unknown_key():
    assert direction_for_key(KEY_ESC) is None
    game = new_game(LINE)
    assert game.handle_key(ord("r")) is MoveResult.IGNORED
    assert game.moves == 0


def test_from_map_copies_rows():
    game_map = parse_map(LINE)
    game = Game.from_map(game_map)
    assert ["".join(row) for row in game.grid] == list(game_map.rows)
    game.move(Direction.RIGHT)
    assert game_map.rows == tuple(LINE.split("\n"))


def test_wall_blocks(capsys):
    game = new_game(LINE)
    start = game.player
    assert game.move(Direction.LEFT) is MoveResult.BLOCKED
    assert game.move(Direction.UP) is MoveResult.BLOCKED
    assert game.player == start
    assert game.moves == 0
    assert capsys.readouterr().out == ""


def test_collect_item(capsys):
    game = new_game(LINE)
    start = game.player
    items = game.items
    assert game.handle_key(KEY_D) is MoveResult.MOVED
    assert game.items == items - 1
    assert game.player == Position(start.x + 1, start.y)
    assert game.grid[start.y][start.x] == "0"
    assert game.grid[game.player.y][game.player.x] == "P"
    assert capsys.readouterr().out == "moves: 1\n"


def test_finish_on_exit(capsys):
    game = new_game(LINE)
    assert game.move(Direction.RIGHT) is MoveResult.MOVED
    assert game.move(Direction.RIGHT) is MoveResult.MOVED
    assert game.move(Direction.RIGHT) is MoveResult.FINISHED
    assert game.finished
    assert game.moves == 3
    assert capsys.readouterr().out.endswith("Total moves: 3\n")
    assert game.move(Direction.LEFT) is MoveResult.FINISHED
    assert game.moves == 3


def test_exit_with_items_left_is_walked_over():
    game = new_game(EXIT_FIRST)
    assert game.move(Direction.RIGHT) is MoveResult.MOVED
    assert game.player == game.exit
    assert game.grid[game.exit.y][game.exit.x] == "E"
    assert game.move(Direction.RIGHT) is MoveResult.MOVED
    assert game.items == 0
    assert game.grid[game.exit.y][game.exit.x] == "E"
    assert game.move(Direction.LEFT) is MoveResult.FINISHED
    assert game.moves == 3


def test_vertical_moves():
    game = new_game(COLUMN)
    start = game.player
    assert game.handle_key(KEY_S) is MoveResult.MOVED
    assert game.player == Position(start.x, start.y + 1)
    assert game.handle_key(KEY_W) is MoveResult.MOVED
    assert game.player == start
    assert game.handle_key(KEY_W) is MoveResult.BLOCKED


def test_escape_quits():
    game = new_game(LINE)
    assert game.handle_key(KEY_ESC) is MoveResult.QUIT
    assert game.moves == 0


def test_score_text():
    game = new_game(LINE)
    assert game.score_text() == "Score: 0"
    game.move(Direction.RIGHT)
    assert game.score_text() == "Score: 1"


def test_grid_keeps_one_player():
    game = new_game(COLUMN)
    for key in (KEY_S, KEY_S, KEY_W, KEY_A, KEY_D):
        game.handle_key(key)
        cells = [c for row in game.grid for c in row]
        assert cells.count("P") == (0 if game.player == game.exit else 1)
        assert cells.count("E") == 1