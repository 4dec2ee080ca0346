"""Command line entry point: load a map and play it."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .game_map import MapError, load_map
from .moves import Game
from .printf import printf
from .render import Renderer

MAX_HEIGHT = 20
MAX_WIDTH = 40
IMAGE_DIR = "images"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play the map named by the single argument; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        printf("Check to parameters!\n")
        return 1
    try:
        game_map = load_map(args[0])
    except MapError as exc:
        printf("%s", str(exc))
        return 1
    if game_map.height > MAX_HEIGHT or game_map.width > MAX_WIDTH:
        printf("The map size is so big!")
        return 1
    game = Game.from_map(game_map)
    try:
        renderer = Renderer(game, IMAGE_DIR)
    except FileNotFoundError as exc:
        printf("%s", str(exc))
        return 1
    renderer.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())