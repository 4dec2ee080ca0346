"""Game state and player movement."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from .game_map import GameMap, Position, Tile
from .printf import printf

KEY_A = 97
KEY_S = 115
KEY_D = 100
KEY_W = 119
KEY_ESC = 65307
KEY_LEFT = 65361
KEY_RIGHT = 65363
KEY_DOWN = 65364
KEY_UP = 65362


class Direction(Enum):
    """A step the player can take."""

    LEFT = 4
    RIGHT = 6
    UP = 8
    DOWN = 2

    @property
    def delta(self) -> tuple[int, int]:
        """Change of column and row for one step."""
        return _DELTAS[self]


_DELTAS = {
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
}

_KEY_DIRECTIONS = {
    KEY_A: Direction.LEFT,
    KEY_LEFT: Direction.LEFT,
    KEY_D: Direction.RIGHT,
    KEY_RIGHT: Direction.RIGHT,
    KEY_W: Direction.UP,
    KEY_UP: Direction.UP,
    KEY_S: Direction.DOWN,
    KEY_DOWN: Direction.DOWN,
}


class MoveResult(Enum):
    """What a key press or a step did."""

    BLOCKED = auto()
    MOVED = auto()
    FINISHED = auto()
    QUIT = auto()
    IGNORED = auto()


def direction_for_key(key: int) -> Optional[Direction]:
    """The direction a key code stands for, or None."""
    return _KEY_DIRECTIONS.get(key)


@dataclass
class Game:
    """A game in progress: the grid, the player, the items left and the moves made."""

    grid: list[list[str]]
    player: Position
    exit: Position
    items: int
    moves: int = 0
    finished: bool = False

    @classmethod
    def from_map(cls, game_map: GameMap) -> "Game":
        """Start a game on *game_map*."""
        return cls(
            grid=[list(row) for row in game_map.rows],
            player=game_map.player,
            exit=game_map.exit,
            items=game_map.items,
        )

    @property
    def width(self) -> int:
        return len(self.grid[0])

    @property
    def height(self) -> int:
        return len(self.grid)

    def move(self, direction: Direction) -> MoveResult:
        """Take one step; walls block, items are collected, the exit ends the game once empty."""
        if self.finished:
            return MoveResult.FINISHED
        dx, dy = direction.delta
        target = Position(self.player.x + dx, self.player.y + dy)
        tile = self.grid[target.y][target.x]
        if tile == Tile.WALL.value:
            return MoveResult.BLOCKED
        if tile == Tile.ITEM.value:
            self.items -= 1
        elif tile == Tile.EXIT.value and self.items == 0:
            self.moves += 1
            printf("Total moves: %d\n", self.moves)
            self.finished = True
            return MoveResult.FINISHED
        self.moves += 1
        printf("moves: %d\n", self.moves)
        left_behind = Tile.EXIT if self.player == self.exit else Tile.FLOOR
        self.grid[self.player.y][self.player.x] = left_behind.value
        self.player = target
        if target != self.exit:
            self.grid[target.y][target.x] = Tile.PLAYER.value
        return MoveResult.MOVED

    def handle_key(self, key: int) -> MoveResult:
        """React to a key code: escape quits, movement keys step, others are ignored."""
        if key == KEY_ESC:
            return MoveResult.QUIT
        direction = direction_for_key(key)
        if direction is None:
            return MoveResult.IGNORED
        return self.move(direction)

    def score_text(self) -> str:
        """The score line shown in the window."""
        return f"Score: {self.moves}"