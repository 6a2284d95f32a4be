from abc import ABC, abstractmethod
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from color_lines.game_logic.components import BallColor, Position


@dataclass
class UiElements:
    """Elements to be drawn on the UI."""

    board: NDArray[np.int8]
    selection: Position | None = None
    next_colors: tuple[BallColor, ...] = ()
    score: int = 0
    high_score: int = 0
    last_cleared: list[Position] = field(default_factory=list)
    last_points: int = 0
    game_over: bool = False


class UI(ABC):
    @abstractmethod
    def initialize(self, board_size: int) -> None: ...

    @abstractmethod
    def draw(self, elements: UiElements) -> None: ...
