"""Reading, parsing and validating ``.ber`` map files."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from .errors import ErrorKind, SoLongError

WALL = "1"
FLOOR = "0"
PLAYER = "P"
EXIT = "E"
COLLECTABLE = "C"
OBSTACLE = "O"
FILLED = "X"

ALLOWED = frozenset({FLOOR, WALL, PLAYER, EXIT, COLLECTABLE, OBSTACLE})
_BLOCKING = frozenset({WALL, FILLED, OBSTACLE})


@dataclass
class GameMap:
    """A validated map with the positions the game needs."""

    grid: list[list[str]]
    player: tuple[int, int]
    exit: tuple[int, int]
    collectables: int

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    @property
    def height(self) -> int:
        return len(self.grid)


def check_filetype(path: str) -> bool:
    """Return True when the path ends in ``.ber`` and is long enough."""
    start = len(path) - 4
    return start >= 5 and path[start:start + 4] == ".ber"


def _strip_line_end(line: str) -> str:
    if len(line) < 2:
        return line
    last = len(line) - 1
    if line[last] in "\r\n":
        line = line[:last]
    if line[last - 1] in "\r\n":
        line = line[:last - 1]
    return line


def parse_lines(lines: Iterable[str]) -> list[str]:
    """Strip line endings and check characters and rectangularity."""
    rows: list[str] = []
    expected: int | None = None
    for raw in lines:
        row = _strip_line_end(raw)
        if any(char not in ALLOWED for char in row):
            raise SoLongError(ErrorKind.BAD_CHARACTER)
        if not row:
            raise SoLongError(ErrorKind.FORMAT)
        if expected is None:
            expected = len(row)
        if len(row) != expected:
            raise SoLongError(ErrorKind.UNEVEN)
        rows.append(row)
    if not rows:
        raise SoLongError(ErrorKind.FORMAT)
    return rows


def read_map(path: str) -> GameMap:
    """Read a map file, validate it and return the playable map."""
    if not check_filetype(str(path)):
        raise SoLongError(ErrorKind.BAD_INPUT)
    try:
        with open(path, "rb") as handle:
            lines = [line.decode("latin-1") for line in handle]
    except OSError as exc:
        raise SoLongError(ErrorKind.BAD_INPUT) from exc
    return validate_map(parse_lines(lines))


def _positions(grid: Sequence[Sequence[str]], target: str):
    for y, row in enumerate(grid):
        for x, cell in enumerate(row):
            if cell == target:
                yield x, y


def find_player(grid: Sequence[Sequence[str]]) -> tuple[int, int]:
    """Return the single player's (x, y); raise if absent or repeated."""
    found = list(_positions(grid, PLAYER))
    if len(found) != 1:
        raise SoLongError(ErrorKind.PLAYER)
    return found[0]


def find_exit(grid: Sequence[Sequence[str]]) -> tuple[int, int]:
    """Return the first exit's (x, y); raise if there is none."""
    for position in _positions(grid, EXIT):
        return position
    raise SoLongError(ErrorKind.PLAYER)


def count_collectables(grid: Sequence[Sequence[str]]) -> int:
    """Count collectables, requiring at least one and exactly one exit."""
    cells = [cell for row in grid for cell in row]
    collectables = cells.count(COLLECTABLE)
    exits = cells.count(EXIT)
    if collectables == 0 or exits != 1:
        raise SoLongError(ErrorKind.GOALS)
    return collectables


def check_enclosed(grid: Sequence[Sequence[str]]) -> None:
    """Raise unless the map is surrounded by walls."""
    if not grid:
        raise SoLongError(ErrorKind.FORMAT)
    end = len(grid[0])
    last = len(grid) - 1
    for index, row in enumerate(grid):
        if index in (0, last):
            if len(row) < end or any(cell != WALL for cell in row[:end]):
                raise SoLongError(ErrorKind.NOT_ENCLOSED)
        elif len(row) < end or row[0] != WALL or row[end - 1] != WALL:
            raise SoLongError(ErrorKind.NOT_ENCLOSED)


def flood_fill(grid: list[list[str]], x: int, y: int, stop: str) -> None:
    """Mark with 'X' every cell reachable from (x, y), in place.

    Walls, obstacles, already filled cells and ``stop`` cells block the fill.
    """
    height = len(grid)
    width = len(grid[0]) if grid else 0
    pending = [(x, y)]
    while pending:
        cx, cy = pending.pop()
        if not (0 <= cx < width and 0 <= cy < height):
            continue
        row = grid[cy]
        if cx >= len(row):
            continue
        cell = row[cx]
        if cell in _BLOCKING or cell == stop:
            continue
        row[cx] = FILLED
        pending.extend(
            ((cx + 1, cy), (cx - 1, cy), (cx, cy + 1), (cx, cy - 1))
        )


def goals_reachable(grid: Sequence[Sequence[str]], target: str) -> bool:
    """Return True when no cell still holds ``target`` after a fill."""
    return all(target not in row for row in grid)


def validate_map(grid: Sequence[Sequence[str]]) -> GameMap:
    """Check that the map is enclosed, complete and solvable."""
    rows = [list(row) for row in grid]
    check_enclosed(rows)
    player = find_player(rows)
    exit_position = find_exit(rows)
    collectables = count_collectables(rows)

    filled = [row[:] for row in rows]
    flood_fill(filled, player[0], player[1], EXIT)
    if not goals_reachable(filled, COLLECTABLE):
        raise SoLongError(ErrorKind.GOALS)

    filled = [row[:] for row in rows]
    flood_fill(filled, player[0], player[1], " ")
    if not goals_reachable(filled, EXIT):
        raise SoLongError(ErrorKind.GOALS)

    return GameMap(rows, player, exit_position, collectables)