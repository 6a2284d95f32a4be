from dataclasses import dataclass
from pathlib import Path

from color_lines.game_logic.components.ball import BallColor

DEFAULT_SAVE_FILE = Path("game_save.json")


@dataclass(frozen=True, slots=True)
class GameConfig:
    board_size: int = 9
    connect_count: int = 5  # length of a line of equal balls that gets cleared
    balls_per_turn: int = 3
    num_colors: int = len(BallColor)
    points_per_ball: int = 2
    points_per_bonus_ball: int = 8

    def __post_init__(self) -> None:
        if self.board_size < 1:
            msg = f"board_size has to be >= 1, got {self.board_size}"
            raise ValueError(msg)

        if not 2 <= self.connect_count <= self.board_size:  # noqa: PLR2004
            msg = f"connect_count has to be in range 2-{self.board_size} (board_size), got {self.connect_count}"
            raise ValueError(msg)

        if not 1 <= self.balls_per_turn <= self.board_size**2:
            msg = f"balls_per_turn has to be in range 1-{self.board_size**2}, got {self.balls_per_turn}"
            raise ValueError(msg)

        if not 1 <= self.num_colors <= len(BallColor):
            msg = f"num_colors has to be in range 1-{len(BallColor)}, got {self.num_colors}"
            raise ValueError(msg)

        if self.points_per_ball < 0 or self.points_per_bonus_ball < 0:
            msg = "points_per_ball and points_per_bonus_ball have to be >= 0"
            raise ValueError(msg)

    @property
    def palette(self) -> tuple[BallColor, ...]:
        return tuple(BallColor)[: self.num_colors]
