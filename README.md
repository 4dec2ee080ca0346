# solong

A small top-down puzzle game. Each level is a map. You walk the player around it,
pick up every collectible, and then step onto the exit. The game counts your moves.

## Installing

```
pip install .
```

The game window is drawn with pygame, which is installed along with the package.

## Playing

```
solong path/to/level.ber
```

Give exactly one argument: the path to a map file whose name ends in `.ber`.
With any other number of arguments the command prints `Check to parameters!`
and exits with status 1.

The game loads its sprites from a directory named `images` in the current
working directory. It must hold these files:

| File          | Drawn for                        |
|---------------|----------------------------------|
| `stitch.xpm`  | the player                       |
| `lilo.xpm`    | the exit                         |
| `cookie.xpm`  | a collectible                    |
| `grass.xpm`   | floor                            |
| `wall.xpm`    | wall                             |
| `l-a-s.xpm`   | the player standing on the exit  |

If one of them is missing, the command prints a message and exits with status 1.
Each tile is drawn as a 64 × 64 pixel square, and the current score
(`Score: N`) is drawn near the top-left corner of the window.

Controls:

- `W` / `A` / `S` / `D` or the arrow keys move the player
- `Esc`, or closing the window, quits

Every move that is allowed prints the running count to standard output, for
example `moves: 3`. Walking into a wall is not a move. The game ends when you
step onto the exit after collecting every item. It then prints `Total moves: N`.
You may walk over the exit before that point, and the game goes on.

## Map format

A map is a rectangle of characters, one row per line:

| Char | Meaning     |
|------|-------------|
| `1`  | wall        |
| `0`  | floor       |
| `P`  | player      |
| `C`  | collectible |
| `E`  | exit        |

Example:

```
1111111
1P0C0E1
1111111
```

A map is accepted only if all of the following hold:

- The file name ends in `.ber`.
- The map has no empty lines: none at the start, none in the middle, and no
  trailing newline. Note that many editors add a newline at the end of a file;
  such a file is rejected.
- Every row has the same width.
- The map is closed on every side by walls.
- It uses only the characters listed above.
- It has exactly one `P`, exactly one `E`, and at least one `C`.
- The player can reach every collectible and the exit.
- It is at most 20 rows high and 40 columns wide.

If a map fails any check, the command prints a message and exits with status 1.

## Using it as a library

```python
from solong.game_map import parse_map
from solong.moves import Game, Direction

game = Game.from_map(parse_map("1111111\n1P0C0E1\n1111111"))
game.move(Direction.RIGHT)   # prints "moves: 1", returns MoveResult.MOVED
print(game.score_text())     # Score: 1
```

- `solong.game_map` — `parse_map(text)` checks the text of a map and returns a
  `GameMap`; `load_map(path)` does the same for a file. Both raise `MapError`
  for an invalid map. The separate checks (`check_extension`, `check_walls`,
  `check_characters`, `locate_characters`, `check_playable`) and `flood_fill`
  can also be called on their own.
- `solong.moves` — `Game` holds the grid, the player, the items left and the
  move count. `Game.move(direction)` and `Game.handle_key(key)` return a
  `MoveResult`: `BLOCKED`, `MOVED`, `FINISHED`, `QUIT` or `IGNORED`.
- `solong.render` — `Renderer(game, image_dir)` draws a game with pygame;
  `Renderer.run()` plays until the game ends and returns the final `MoveResult`.
- `solong.cli` — `main(argv=None)` is the `solong` command; it returns the
  exit status.

Helper modules used by the game:

- `solong.lines` — `LineReader` and `read_lines` read a text or binary stream
  line by line in fixed-size chunks.
- `solong.printf` — `format(template, *args)` and `printf(template, *args)`
  support the conversions `%c %s %p %d %i %u %x %X %%`.
- `solong.strings`, `solong.chars`, `solong.memory`, `solong.output` — small
  string, character, byte-buffer and stream-writing helpers.

## Running the tests

```
pip install .[test]
pytest
```