"""Drawing the map and the player onto a pygame surface."""

from __future__ import annotations

from typing import Sequence

import pygame

from .game import Game
from .mapfile import COLLECTABLE, EXIT, OBSTACLE, WALL

FLOOR_TILE = 0
WALL_TILE = 1
PLAYER_TILE = 2
COLLECTABLE_TILE = 3
EXIT_TILE = 4
OBSTACLE_TILE = 5
EXIT_OPEN_TILES = (6, 7)
TILE_COUNT = 8
FRAME_COUNT = 12

_TILE_INDEX = {
    WALL: WALL_TILE,
    COLLECTABLE: COLLECTABLE_TILE,
    EXIT: EXIT_TILE,
    OBSTACLE: OBSTACLE_TILE,
}


def tile_index(cell: str) -> int:
    """Return the texture drawn over the floor for a map cell (0 for none)."""
    return _TILE_INDEX.get(cell, FLOOR_TILE)


class Renderer:
    """Draws tiles and the animated player onto a surface."""

    def __init__(
        self,
        surface: pygame.Surface,
        textures: Sequence[pygame.Surface],
        frames: Sequence[pygame.Surface],
        tile_width: int,
        tile_height: int,
    ) -> None:
        if len(textures) < TILE_COUNT:
            raise ValueError(f"expected {TILE_COUNT} tile textures")
        if len(frames) < FRAME_COUNT:
            raise ValueError(f"expected {FRAME_COUNT} player frames")
        self.surface = surface
        self.textures = list(textures)
        self.frames = list(frames)
        self.tile_width = tile_width
        self.tile_height = tile_height

    def draw_tile(self, tile: int, x: int, y: int) -> None:
        """Draw texture ``tile`` on map cell (x, y)."""
        self.surface.blit(
            self.textures[tile], (x * self.tile_width, y * self.tile_height)
        )

    def draw_map(self, game: Game) -> None:
        """Clear the surface and draw every cell, then the player."""
        self.surface.fill((0, 0, 0))
        for y, row in enumerate(game.grid):
            for x, cell in enumerate(row):
                self.draw_tile(FLOOR_TILE, x, y)
                index = tile_index(cell)
                if index == EXIT_TILE and not game.collectables:
                    index = EXIT_OPEN_TILES[game.exit_frame]
                if index:
                    self.draw_tile(index, x, y)
        self.draw_player(game)

    def draw_player(self, game: Game) -> None:
        """Redraw the player's cell and the current sprite frame."""
        x, y = game.player
        self.draw_tile(FLOOR_TILE, x, y)
        index = tile_index(game.grid[y][x])
        if index:
            self.draw_tile(index, x, y)
        self.surface.blit(
            self.frames[game.frame_index], (game.smooth_x, game.smooth_y)
        )