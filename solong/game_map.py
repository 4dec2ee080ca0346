"""Loading and validating game maps.

A map is a rectangle of tiles, closed by walls, holding exactly one player,
exactly one exit and at least one collectible, all reachable from the player.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from os import PathLike
from typing import Iterable, Sequence, Union

from .lines import read_lines
from .strings import split

MAP_EXTENSION = ".ber"


class MapError(Exception):
    """Raised for a map that cannot be loaded or played."""


class Tile(str, Enum):
    """The characters a map is made of."""

    WALL = "1"
    FLOOR = "0"
    PLAYER = "P"
    ITEM = "C"
    EXIT = "E"


_ALLOWED = frozenset(tile.value for tile in Tile) | {"\n"}


@dataclass(frozen=True)
class Position:
    """A cell of the map: column *x*, row *y*."""

    x: int
    y: int


@dataclass(frozen=True)
class GameMap:
    """A validated map with the places of the player and the exit."""

    rows: tuple[str, ...]
    player: Position
    exit: Position
    items: int

    @property
    def width(self) -> int:
        return len(self.rows[0])

    @property
    def height(self) -> int:
        return len(self.rows)

    def tile(self, position: Position) -> Tile:
        """The tile at *position*."""
        if not (0 <= position.y < self.height and 0 <= position.x < self.width):
            raise IndexError(f"position {position} is outside the map")
        return Tile(self.rows[position.y][position.x])


def check_extension(path: Union[str, PathLike]) -> None:
    """Raise MapError unless *path* names a map file."""
    if not str(path).endswith(MAP_EXTENSION):
        raise MapError("Your map's extension should be '.ber'")


def check_walls(rows: Sequence[str]) -> None:
    """Raise MapError unless every row has the same width and the border is all wall."""
    if not rows:
        raise MapError("The map is empty!")
    width = len(rows[0])
    wall = Tile.WALL.value
    for index, row in enumerate(rows):
        if len(row) != width:
            raise MapError("Invalid Map Width!")
        if index == 0:
            bottom = rows[-1][:width]
            if (
                len(bottom) < width
                or any(c != wall for c in rows[0])
                or any(c != wall for c in bottom)
            ):
                raise MapError("Invalid Map WALL!")
        if row[0] != wall or row[-1] != wall:
            raise MapError("Invalid Map WALL!")


def check_characters(rows: Iterable[str]) -> None:
    """Raise MapError if any row holds a character that is not a tile."""
    for row in rows:
        if any(c not in _ALLOWED for c in row):
            raise MapError("Unknown Character!")


def locate_characters(rows: Sequence[str]) -> tuple[Position, Position, int]:
    """Return the player's position, the exit's position and the number of items.

    Raises MapError unless there is exactly one player, exactly one exit and
    at least one item.
    """
    players: list[Position] = []
    exits: list[Position] = []
    items = 0
    for y, row in enumerate(rows):
        for x, c in enumerate(row):
            if c == Tile.ITEM.value:
                items += 1
            elif c == Tile.PLAYER.value:
                players.append(Position(x, y))
            elif c == Tile.EXIT.value:
                exits.append(Position(x, y))
    if len(exits) != 1 or len(players) != 1 or items < 1:
        raise MapError("Check Map Characters!")
    return players[0], exits[0], items


def flood_fill(rows: Sequence[str], start: Position) -> frozenset[Position]:
    """Every non-wall cell reachable from *start* through up, down, left and right steps."""
    if not rows:
        return frozenset()
    width, height = len(rows[0]), len(rows)
    reached: set[Position] = set()
    pending = [start]
    while pending:
        cell = pending.pop()
        if not (0 <= cell.x < width and 0 <= cell.y < height):
            continue
        if cell in reached or rows[cell.y][cell.x] == Tile.WALL.value:
            continue
        reached.add(cell)
        pending.extend(
            (
                Position(cell.x, cell.y - 1),
                Position(cell.x, cell.y + 1),
                Position(cell.x - 1, cell.y),
                Position(cell.x + 1, cell.y),
            )
        )
    return frozenset(reached)


def check_playable(rows: Sequence[str], start: Position) -> None:
    """Raise MapError if an item, exit or player cannot be reached from *start*."""
    reached = flood_fill(rows, start)
    open_tiles = (Tile.WALL.value, Tile.FLOOR.value)
    for y, row in enumerate(rows):
        for x, c in enumerate(row):
            if c not in open_tiles and Position(x, y) not in reached:
                raise MapError("The map layout is not OK for playing.")


def parse_map(text: str) -> GameMap:
    """Validate the text of a map and return it as a GameMap."""
    if not text:
        raise MapError("The map is empty!")
    if text.startswith("\n") or "\n\n" in text or text.endswith("\n"):
        raise MapError("The map is not rectengular!")
    rows = tuple(split(text, "\n"))
    check_walls(rows)
    check_characters(rows)
    player, exit_position, items = locate_characters(rows)
    check_playable(rows, player)
    return GameMap(rows=rows, player=player, exit=exit_position, items=items)


def load_map(path: Union[str, PathLike]) -> GameMap:
    """Read, validate and return the map stored at *path*."""
    check_extension(path)
    try:
        with open(path, encoding="utf-8", newline="") as stream:
            text = "".join(read_lines(stream))
    except OSError as exc:
        raise MapError("Check to map path!") from exc
    return parse_map(text)