"""Error kinds raised while loading and validating a map."""

from __future__ import annotations

import sys
from enum import Enum

_HEADER = "\033[1;31mError\033[0;31m"


class ErrorKind(Enum):
    """Every failure the game reports, keyed by its one-letter sign."""

    BAD_INPUT = ("D", "Invalid Map. Bad input? Typo? Perhaps a SKILL ISSUE")
    SPRITE = ("S", "Got the right .xpm format m8?")
    MEMORY = ("M", "Woops, something died. Prolly allocation failure.")
    FORMAT = ("H", "Ur not slick, get the map format rite.")
    BAD_CHARACTER = ("L", "Wrong character found in map. get it rite!11!1!!")
    UNEVEN = ("X", "Map length uneven. Go back to Kindergarten.")
    NOT_ENCLOSED = ("1", "Map isn't boxed properly, check your ones again")
    PLAYER = (
        "P",
        "Play the game bro its free Wallahi there's no transactions",
    )
    GOALS = ("G", "Ur goals are just a teensy bit out of your reach.")

    @property
    def sign(self) -> str:
        return self.value[0]

    @property
    def message(self) -> str:
        return self.value[1]


class SoLongError(Exception):
    """A fatal error in the game, carrying the kind of failure."""

    def __init__(self, kind: ErrorKind) -> None:
        super().__init__(kind.message)
        self.kind = kind

    def report(self) -> str:
        """Write the error banner and message to stderr and return the text."""
        text = f"{_HEADER}\n{self.kind.message}\n"
        sys.stderr.write(text)
        sys.stderr.flush()
        return text