from typing import NamedTuple

import numpy as np
from numpy.typing import NDArray

from color_lines.game_logic.components import BallColor, Position


class BoardChangedMessage(NamedTuple):
    board: NDArray[np.int8]
    selection: Position | None
    next_colors: tuple[BallColor, ...]


class LinesClearedMessage(NamedTuple):
    positions: list[Position]
    bonus_positions: list[Position]
    points: int
    spawn_triggered: bool


class GameOverMessage(NamedTuple):
    score: int
    high_score: int


class ScoreMessage(NamedTuple):
    score: int
    high_score: int
