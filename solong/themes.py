"""Sprite themes: the image files each look of the game is drawn from."""

from __future__ import annotations

from dataclasses import dataclass

from .printf import ft_printf

_FACINGS = ("Front", "Left", "Right", "Back")
_FRAMES_PER_FACING = 3


def _frame_paths(root: str) -> tuple[str, ...]:
    return tuple(
        f"{root}/{facing}/{facing}{index}.xpm"
        for facing in _FACINGS
        for index in range(_FRAMES_PER_FACING)
    )


@dataclass(frozen=True)
class Theme:
    """The image paths of one theme.

    ``frames`` holds three walking frames per facing, in the order
    front, left, right, back, matching the player's directions.
    """

    name: str
    frames: tuple[str, ...]
    floor: str
    wall: str
    player: str
    collectable: str
    exit: str
    exit_open: tuple[str, str]
    obstacles: tuple[str, ...]

    def tile_paths(self) -> tuple[str, ...]:
        """Tile images in renderer order: floor, wall, player, collectable,
        exit, obstacle, then the two open-exit frames."""
        return (
            self.floor,
            self.wall,
            self.player,
            self.collectable,
            self.exit,
            self.obstacles[0],
            *self.exit_open,
        )

    def all_paths(self) -> tuple[str, ...]:
        """Every image the theme needs, each listed once, in load order."""
        return tuple(
            dict.fromkeys((*self.frames, *self.tile_paths(), *self.obstacles))
        )


DEFAULT_THEME = Theme(
    name="Winion island",
    frames=_frame_paths("assets/textures"),
    floor="assets/textures/floor.xpm",
    wall="assets/textures/wall.xpm",
    player="assets/textures/Front/Front0.xpm",
    collectable="assets/textures/collectable.xpm",
    exit="assets/textures/exit.xpm",
    exit_open=("assets/textures/exit_1.xpm", "assets/textures/exit_2.xpm"),
    obstacles=("assets/textures/obstacle.xpm",) * 4,
)

SEA_THEME = Theme(
    name="sea",
    frames=_frame_paths("assets/themes/Sea"),
    floor="assets/themes/Sea/floor.xpm",
    wall="assets/themes/Sea/wall.xpm",
    player="assets/themes/Sea/Front/Front0.xpm",
    collectable="assets/themes/Sea/collectable.xpm",
    exit="assets/themes/Sea/exit.xpm",
    exit_open=("assets/textures/exit_1.xpm", "assets/textures/exit_2.xpm"),
    obstacles=tuple(f"assets/themes/Sea/Obstacle{index}.xpm" for index in range(4)),
)

_SEA_PREFIXES = ("sea", "Sea")
_DEFAULT_PREFIXES = ("winion", "Winion", "Winion island", "island", "Island")


def select_theme(name: str | None) -> Theme:
    """Pick the theme a name asks for; unknown names fall back to default."""
    if name is None:
        return DEFAULT_THEME
    if name.startswith(_SEA_PREFIXES):
        return SEA_THEME
    if name.startswith(_DEFAULT_PREFIXES):
        return DEFAULT_THEME
    ft_printf('Unknown Theme. Using default: "Winion island"\n')
    return DEFAULT_THEME