import pygame
import pytest

from solong.game import Direction, Game
from solong.mapfile import validate_map
from solong.render import Renderer, tile_index

TILE = 4
TEXTURE_COLORS = [
    (10, 10, 10),
    (200, 0, 0),
    (0, 200, 0),
    (0, 0, 200),
    (200, 200, 0),
    (0, 200, 200),
    (200, 0, 200),
    (120, 60, 30),
]
FRAME_COLORS = [(20 + i * 10, 100, 50) for i in range(12)]


def _solid(color):
    surface = pygame.Surface((TILE, TILE))
    surface.fill(color)
    return surface


def _pixel(surface, x, y):
    return tuple(surface.get_at((x, y)))[:3]


@pytest.fixture
def setup():
    game_map = validate_map(["11111", "1PCE1", "11111"])
    game = Game(game_map, TILE, TILE)
    surface = pygame.Surface((TILE * game_map.width, TILE * game_map.height))
    renderer = Renderer(
        surface,
        [_solid(c) for c in TEXTURE_COLORS],
        [_solid(c) for c in FRAME_COLORS],
        TILE,
        TILE,
    )
    return game, surface, renderer


@pytest.mark.parametrize(
    "cell, expected", [("1", 1), ("C", 3), ("E", 4), ("O", 5), ("0", 0), ("P", 0)]
)
def test_tile_index(cell, expected):
    assert tile_index(cell) == expected


def test_draw_tile_places_texture(setup):
    _, surface, renderer = setup
    renderer.draw_tile(3, 2, 1)
    assert _pixel(surface, 2 * TILE, 1 * TILE) == TEXTURE_COLORS[3]
    assert _pixel(surface, 2 * TILE + TILE - 1, TILE + TILE - 1) == TEXTURE_COLORS[3]
    assert _pixel(surface, 0, 0) == (0, 0, 0)


def test_draw_map_cells(setup):
    game, surface, renderer = setup
    renderer.draw_map(game)
    assert _pixel(surface, 0, 0) == TEXTURE_COLORS[1]
    assert _pixel(surface, 2 * TILE, TILE) == TEXTURE_COLORS[3]
    assert _pixel(surface, 3 * TILE, TILE) == TEXTURE_COLORS[4]
    assert _pixel(surface, TILE, TILE) == FRAME_COLORS[0]


def test_draw_player_uses_direction_frame(setup):
    game, surface, renderer = setup
    game.move_player(1, 0, Direction.RIGHT)
    renderer.draw_map(game)
    assert _pixel(surface, TILE, TILE) == FRAME_COLORS[game.frame_index]
    assert game.frame_index == Direction.RIGHT.value * 3
    assert _pixel(surface, 2 * TILE, TILE) == TEXTURE_COLORS[3]


def test_open_exit_frames(setup):
    game, surface, renderer = setup
    game.collectables = 0
    renderer.draw_map(game)
    assert _pixel(surface, 3 * TILE, TILE) == TEXTURE_COLORS[6]
    game.exit_frame = 1
    renderer.draw_map(game)
    assert _pixel(surface, 3 * TILE, TILE) == TEXTURE_COLORS[7]


def test_too_few_textures_rejected():
    surface = pygame.Surface((TILE, TILE))
    with pytest.raises(ValueError):
        Renderer(surface, [_solid(TEXTURE_COLORS[0])], [], TILE, TILE)
    with pytest.raises(ValueError):
        Renderer(
            surface, [_solid(c) for c in TEXTURE_COLORS], [], TILE, TILE
        )