"""Game state: player movement, smooth stepping, animation and endings."""

from __future__ import annotations

from enum import Enum

from .mapfile import COLLECTABLE, EXIT, FLOOR, OBSTACLE, WALL, GameMap
from .printf import format_printf

_WIN_TEXT = (
    "\033[0;32mEpic Saga Complete!\033[0;37m\n"
    "Only took like [\033[1;33m%d\033[0;37m] steps!\n"
)
_LOSE_TEXT = (
    "Saga not completed.. :(\n"
    "You only had [\033[1;33m%d\033[0;37m] Fruits left...\n"
)
_DEATH_TEXT = (
    "\033[1;31mPenelope, why?\n"
    "You know I'm too shy and terrified\033[0m\n"
)


class Direction(Enum):
    """Facing of the player; the value selects its row of sprite frames."""

    DOWN = 0
    LEFT = 1
    RIGHT = 2
    UP = 3

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]


_DELTAS = {
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.UP: (0, -1),
}


class Action(Enum):
    """What a key press asks the game to do."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ESCAPE = "escape"

    @property
    def direction(self) -> Direction | None:
        return _ACTION_DIRECTIONS.get(self)


_ACTION_DIRECTIONS = {
    Action.UP: Direction.UP,
    Action.DOWN: Direction.DOWN,
    Action.LEFT: Direction.LEFT,
    Action.RIGHT: Direction.RIGHT,
}


class GameOver(Exception):
    """Raised when the game ends; carries the farewell text."""

    def __init__(self, message: str, won: bool) -> None:
        super().__init__(message)
        self.message = message
        self.won = won


class Game:
    """The state of one play-through of a map."""

    ANIM_TICKS = 950
    EXIT_ANIM_TICKS = 1200
    FRAMES_PER_DIRECTION = 3

    def __init__(
        self,
        game_map: GameMap,
        tile_width: int,
        tile_height: int,
        move_speed: int = 8,
    ) -> None:
        if move_speed <= 0:
            raise ValueError("move_speed must be positive")
        self.grid = [list(row) for row in game_map.grid]
        self.tile_width = tile_width
        self.tile_height = tile_height
        self.move_speed = move_speed
        self.player = game_map.player
        self.last_player = game_map.player
        self.exit = game_map.exit
        self.collectables = game_map.collectables
        self.moves = 0
        self.direction = Direction.DOWN
        self.anim_frame = 0
        self.anim_tick = 0
        self.moving = False
        self.smooth_x = self.player[0] * tile_width
        self.smooth_y = self.player[1] * tile_height
        self.target_x = self.smooth_x
        self.target_y = self.smooth_y
        self.last_action: Action | None = None
        self.exit_frame = 0
        self.exit_anim_tick = 0
        self._collect_pending = False
        self._death_pending = False
        self._step_logged = True

    @property
    def frame_index(self) -> int:
        """Index of the player sprite to draw right now."""
        return self.direction.value * self.FRAMES_PER_DIRECTION + self.anim_frame

    def key_press(self, action: Action) -> None:
        """Handle a key; while a step is under way the key is buffered."""
        if self.moving:
            self.last_action = action
            return
        if action is Action.ESCAPE:
            raise GameOver(self.end_message(), self.collectables == 0)
        direction = action.direction
        if direction is not None:
            self.move_player(*direction.delta, direction)

    def move_player(self, dx: int, dy: int, direction: Direction) -> None:
        """Start a step by (dx, dy) unless a wall or a closed exit is there."""
        nx, ny = self.player[0] + dx, self.player[1] + dy
        cell = self.grid[ny][nx]
        if cell == WALL:
            self.direction = direction
            self.anim_frame = 0
            return
        if cell == EXIT and self.collectables:
            return
        if cell == COLLECTABLE:
            self._collect_pending = True
        elif cell == OBSTACLE:
            self._death_pending = True
        elif cell == EXIT:
            self.moves += 1
            raise GameOver(self.end_message(), True)
        self.last_player = self.player
        self.player = (nx, ny)
        self.target_x = nx * self.tile_width
        self.target_y = ny * self.tile_height
        self.anim_frame = 0
        self.anim_tick = 1
        self.moving = True
        self._step_logged = False
        self.direction = direction

    def check_last_key(self) -> None:
        """Replay a buffered key once the player has settled on a tile."""
        if (self.smooth_x, self.smooth_y) != (self.target_x, self.target_y):
            return
        action = self.last_action
        self.last_action = None
        if action is None:
            return
        direction = action.direction
        if direction is not None:
            self.move_player(*direction.delta, direction)

    def advance(self) -> bool:
        """Slide the sprite toward its target; True when a step completes."""
        speed = self.move_speed
        if self.smooth_x < self.target_x:
            self.smooth_x += speed
        elif self.smooth_x > self.target_x:
            self.smooth_x -= speed
        if self.smooth_y < self.target_y:
            self.smooth_y += speed
        elif self.smooth_y > self.target_y:
            self.smooth_y -= speed
        if (
            abs(self.target_x - self.smooth_x) > speed
            or abs(self.target_y - self.smooth_y) > speed
        ):
            return False
        self.moving = False
        self.smooth_x = self.target_x
        self.smooth_y = self.target_y
        self._check_step()
        if self._step_logged:
            return False
        self._step_logged = True
        self.moves += 1
        return True

    def _check_step(self) -> None:
        x, y = self.player
        if self._collect_pending:
            self._collect_pending = False
            self.collectables -= 1
            self.grid[y][x] = FLOOR
        if self._death_pending:
            self._death_pending = False
            self.grid[y][x] = FLOOR
            raise GameOver(format_printf(_DEATH_TEXT), False)

    def tick(self) -> bool:
        """Run one pass of the game loop; True when a step completed."""
        completed = False
        if self.moving:
            self.anim_tick += 1
            if self.anim_tick >= self.ANIM_TICKS:
                self.anim_tick = 0
                self.anim_frame = (self.anim_frame + 1) % self.FRAMES_PER_DIRECTION
                completed = self.advance()
        if self.last_action is not None:
            self.check_last_key()
        if not self.collectables:
            self.exit_anim_tick += 1
            if self.exit_anim_tick >= self.EXIT_ANIM_TICKS:
                self.exit_anim_tick = 0
                self.exit_frame = 1 - self.exit_frame
        return completed

    def status_lines(self) -> list[str]:
        """The two lines of the on-screen status display."""
        return [
            f"moves : {self.moves}",
            f"collectables : {self.collectables}",
        ]

    def end_message(self) -> str:
        """The text printed when the game closes."""
        if not self.collectables:
            return format_printf(_WIN_TEXT, self.moves)
        return format_printf(_LOSE_TEXT, self.collectables)