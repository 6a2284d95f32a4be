from color_lines.game_logic.components.ball import BallColor
from color_lines.game_logic.components.board import Board, Position

__all__ = ["BallColor", "Board", "Position"]
