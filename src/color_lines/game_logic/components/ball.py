import random
from collections.abc import Sequence
from enum import IntEnum


class BallColor(IntEnum):
    """Palette of ball colors. The value is the palette index used on the board and in save files."""

    RED = 0
    GREEN = 1
    YELLOW = 2
    BLUE = 3
    MAGENTA = 4
    CYAN = 5
    WHITE = 6

    @classmethod
    def create_random(
        cls, palette: Sequence["BallColor"] | None = None, rng: random.Random | None = None
    ) -> "BallColor":
        rng = rng or random.Random()
        return rng.choice(palette or list(cls))

    @property
    def symbol(self) -> str:
        return str(self.value)
