"""Drawing a game in a window and running its event loop."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .game_map import Position, Tile  # noqa: E402
from .moves import (  # noqa: E402
    KEY_DOWN,
    KEY_ESC,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_UP,
    Game,
    MoveResult,
)

TILE_SIZE = 64
WINDOW_TITLE = " S O _ L O N G "
SCORE_POSITION = (44, 44)
SCORE_COLOUR = pygame.Color((5028824 >> 16) & 0xFF, (5028824 >> 8) & 0xFF, 5028824 & 0xFF)

# Sprite names and their image files, in the order they are loaded.
SPRITE_FILES = {
    "player": "stitch.xpm",
    "exit": "lilo.xpm",
    "item": "cookie.xpm",
    "floor": "grass.xpm",
    "wall": "wall.xpm",
    "reunion": "l-a-s.xpm",
}

_MISSING_MESSAGES = {
    "wall": "wall file cannot be found",
    "reunion": "wall file cannot be found",
}

_TILE_SPRITES = {
    Tile.FLOOR.value: "floor",
    Tile.WALL.value: "wall",
    Tile.PLAYER.value: "player",
    Tile.ITEM.value: "item",
}

_PYGAME_KEYS = {
    pygame.K_ESCAPE: KEY_ESC,
    pygame.K_LEFT: KEY_LEFT,
    pygame.K_RIGHT: KEY_RIGHT,
    pygame.K_UP: KEY_UP,
    pygame.K_DOWN: KEY_DOWN,
}

_ENDING_RESULTS = (MoveResult.QUIT, MoveResult.FINISHED)


def sprite_for(game: Game, position: Position) -> Optional[str]:
    """Name of the sprite drawn at *position*, or None for a cell with no sprite.

    The exit shows the player standing on it while the player is there.
    """
    if not (0 <= position.y < game.height and 0 <= position.x < game.width):
        raise IndexError(f"position {position} is outside the map")
    tile = game.grid[position.y][position.x]
    if tile == Tile.EXIT.value:
        return "reunion" if game.player == game.exit else "exit"
    return _TILE_SPRITES.get(tile)


class Renderer:
    """Shows a game in a window, one 64-pixel square per tile, with the score on top."""

    def __init__(self, game: Game, image_dir: Union[str, os.PathLike] = "images") -> None:
        self.game = game
        directory = Path(image_dir)
        paths = {name: directory / filename for name, filename in SPRITE_FILES.items()}
        for name, path in paths.items():
            if not path.is_file():
                raise FileNotFoundError(_MISSING_MESSAGES.get(name, "IMG file cannot be found"))
        self._images = {name: pygame.image.load(str(path)) for name, path in paths.items()}
        self._screen: Optional[pygame.Surface] = None
        self._font: Optional[pygame.font.Font] = None

    def _ensure_window(self) -> pygame.Surface:
        if self._screen is None:
            pygame.init()
            self._screen = pygame.display.set_mode(
                (self.game.width * TILE_SIZE, self.game.height * TILE_SIZE)
            )
            pygame.display.set_caption(WINDOW_TITLE)
            self._font = pygame.font.Font(None, 24)
        return self._screen

    def draw(self) -> None:
        """Draw every tile and the score, then show the frame."""
        screen = self._ensure_window()
        for y, row in enumerate(self.game.grid):
            for x in range(len(row)):
                name = sprite_for(self.game, Position(x, y))
                if name is not None:
                    screen.blit(self._images[name], (x * TILE_SIZE, y * TILE_SIZE))
        if self._font is not None:
            text = self._font.render(self.game.score_text(), True, SCORE_COLOUR)
            screen.blit(text, SCORE_POSITION)
        pygame.display.flip()

    def run(self) -> MoveResult:
        """Play until the window is closed, escape is pressed or the game is won."""
        result = MoveResult.IGNORED
        try:
            self.draw()
            while result not in _ENDING_RESULTS:
                event = pygame.event.wait()
                if event.type == pygame.QUIT:
                    result = MoveResult.QUIT
                elif event.type == pygame.KEYDOWN:
                    result = self.game.handle_key(_PYGAME_KEYS.get(event.key, event.key))
                    if result not in _ENDING_RESULTS:
                        self.draw()
        finally:
            pygame.quit()
            self._screen = None
            self._font = None
        return result