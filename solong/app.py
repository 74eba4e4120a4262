"""Command-line entry point: load a map and play it in a window."""

from __future__ import annotations

import sys
from typing import Sequence

import pygame

from .errors import ErrorKind, SoLongError
from .game import Action, Game, GameOver
from .mapfile import read_map
from .render import WALL_TILE, Renderer
from .themes import Theme, select_theme

_HEADER = "\033[1;31mError\033[0;31m"
_TITLE = "EPIC: The Game"
_FPS = 60
_TICKS_PER_FRAME = 950
_STATUS_COLORS = ((0xFF, 0xFF, 0x00), (0xFF, 0x2E, 0x2E))
_STATUS_ROWS = (20, 35)
_STATUS_X = 20

_KEYS = {
    pygame.K_ESCAPE: Action.ESCAPE,
    pygame.K_UP: Action.UP,
    pygame.K_w: Action.UP,
    pygame.K_LEFT: Action.LEFT,
    pygame.K_a: Action.LEFT,
    pygame.K_DOWN: Action.DOWN,
    pygame.K_s: Action.DOWN,
    pygame.K_RIGHT: Action.RIGHT,
    pygame.K_d: Action.RIGHT,
}


class UsageError(Exception):
    """Raised when the command line holds too few or too many arguments."""


def check_arguments(argv: Sequence[str]) -> tuple[str, str | None]:
    """Return (map path, theme name or None) from the arguments."""
    args = list(argv)
    if not args:
        raise UsageError("This ain't the piscine btw, add a program argument")
    if len(args) > 2:
        raise UsageError("Too many arguments!! At least 2 is needed.")
    return args[0], args[1] if len(args) == 2 else None


def _load_theme(
    theme: Theme,
) -> tuple[list[pygame.Surface], list[pygame.Surface]]:
    cache: dict[str, pygame.Surface] = {}

    def load(path: str) -> pygame.Surface:
        if path not in cache:
            try:
                cache[path] = pygame.image.load(path)
            except (pygame.error, OSError) as exc:
                raise SoLongError(ErrorKind.SPRITE) from exc
        return cache[path]

    frames = [load(path) for path in theme.frames]
    textures = [load(path) for path in theme.tile_paths()]
    for path in theme.obstacles:
        load(path)
    return textures, frames


def _draw_status(renderer: Renderer, font, game: Game) -> None:
    for x in range(3):
        renderer.draw_tile(WALL_TILE, x, 0)
    if font is None:
        return
    for line, color, y in zip(game.status_lines(), _STATUS_COLORS, _STATUS_ROWS):
        renderer.surface.blit(font.render(line, True, color), (_STATUS_X, y))


def _play(game: Game, renderer: Renderer, font) -> str:
    clock = pygame.time.Clock()
    try:
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return game.end_message()
                if event.type == pygame.KEYDOWN:
                    action = _KEYS.get(event.key)
                    if action is not None:
                        game.key_press(action)
            for _ in range(_TICKS_PER_FRAME):
                game.tick()
            renderer.draw_map(game)
            _draw_status(renderer, font, game)
            pygame.display.flip()
            clock.tick(_FPS)
    except GameOver as over:
        return over.message


def run(map_path: str, theme_name: str | None = None) -> int:
    """Play the map at ``map_path``; return the exit status."""
    game_map = read_map(map_path)
    theme = select_theme(theme_name)
    pygame.init()
    try:
        textures, frames = _load_theme(theme)
        tile_width, tile_height = textures[0].get_size()
        try:
            surface = pygame.display.set_mode(
                (tile_width * game_map.width, tile_height * game_map.height)
            )
        except pygame.error as exc:
            raise SoLongError(ErrorKind.SPRITE) from exc
        pygame.display.set_caption(_TITLE)
        game = Game(game_map, tile_width, tile_height)
        renderer = Renderer(surface, textures, frames, tile_width, tile_height)
        font = pygame.font.Font(None, 18) if pygame.font.get_init() else None
        message = _play(game, renderer, font)
    finally:
        pygame.quit()
    sys.stdout.write(message)
    sys.stdout.flush()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game from the command line and return the exit status."""
    args = sys.argv[1:] if argv is None else argv
    try:
        map_path, theme_name = check_arguments(args)
        return run(map_path, theme_name)
    except UsageError as exc:
        sys.stderr.write(f"{_HEADER}\n{exc}\n")
        return 1
    except SoLongError as exc:
        exc.report()
        return 1


if __name__ == "__main__":
    sys.exit(main())