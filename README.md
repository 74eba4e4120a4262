# solong

A small tile-based game. You walk a character around a walled map, pick up
every collectable, and then step onto the exit. Obstacle tiles end the game
if you walk into them. Maps are plain text files with the `.ber` extension.

## Installing

```
pip install .
```

This installs the `solong` command and its one dependency, pygame.

## Playing

```
solong maps/level.ber
solong maps/level.ber sea
```

The first argument is the map file. The optional second argument picks a
theme: a name starting with `sea` or `Sea` selects the sea theme; a name
starting with `winion`, `Winion`, `island` or `Island` selects the default
theme ("Winion island"). Any other name prints a notice and falls back to
the default theme. Giving no map, or more than two arguments, prints an
error and exits with status 1.

Move with the arrow keys or `W` `A` `S` `D`. A key pressed while the player
is still sliding to the next tile is remembered and carried out once the
step finishes. `Esc` or closing the window ends the game. On exit the
number of steps taken is printed if every collectable was picked up,
otherwise the number of collectables left. Walking into an obstacle prints a
short farewell instead.

The window shows the step count and the number of collectables left in its
top-left corner. Once every collectable is taken, the exit tile animates.

## What is not included

The package ships no images. Textures are loaded with `pygame.image.load`
from paths under `assets/textures/` (default theme) and `assets/themes/Sea/`
(sea theme), relative to the current directory. If any image is missing or
cannot be read, the game reports an error and exits with status 1. The tile
size is taken from the floor image.

## Map format

Each line is one row; every row must have the same length, and empty rows
are rejected. Allowed characters:

| Char | Meaning             |
|------|---------------------|
| `0`  | floor               |
| `1`  | wall                |
| `P`  | player start (one)  |
| `C`  | collectable (1+)    |
| `E`  | exit (exactly one)  |
| `O`  | obstacle            |

The map must be fully enclosed by walls. Every collectable must be reachable
from the player without passing through walls, obstacles or the exit, and
the exit must be reachable too.

```
1111111
1P0C0E1
1111111
```

A map that breaks any rule is rejected with an error message on standard
error and exit status 1.

## Using it as a library

```python
from solong.mapfile import read_map
from solong.game import Action, Game, GameOver

game_map = read_map("maps/level.ber")
game = Game(game_map, 64, 64, 8)
game.key_press(Action.RIGHT)
try:
    while game.moving:
        game.tick()
except GameOver as over:
    print(over.message)
print(game.status_lines())
```

- `solong.mapfile` — `read_map`, `parse_lines`, `validate_map` and the
  individual checks (`check_filetype`, `check_enclosed`, `find_player`,
  `find_exit`, `count_collectables`, `flood_fill`, `goals_reachable`);
  failures raise `solong.errors.SoLongError`, whose `kind` is an
  `ErrorKind`.
- `solong.game` — `Game` holds the rules without any drawing: `key_press`,
  `move_player`, `tick`, `advance`, `status_lines`, `end_message`. The end of
  a game is signalled by raising `GameOver`.
- `solong.themes` — `select_theme` and the `Theme` image lists.
- `solong.render` — `Renderer` draws a `Game` onto a pygame surface.
- `solong.printf` — `format_printf` and `ft_printf`, a small printf with the
  `%c %s %p %d %i %u %x %X %%` conversions.
- `solong.app` — `main`, the command-line entry point.

## Running the tests

```
pip install ".[test]"
pytest
```