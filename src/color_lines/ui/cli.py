import sys
from typing import TextIO

from ansi import color, cursor
from ansi.colour.base import Graphic

from color_lines.game_logic.components import BallColor, Board, Position
from color_lines.game_logic.interfaces.ui import UI, UiElements

_BALL_COLORS = {
    BallColor.RED: color.fg.brightred,
    BallColor.GREEN: color.fg.brightgreen,
    BallColor.YELLOW: color.fg.brightyellow,
    BallColor.BLUE: color.fg.brightblue,
    BallColor.MAGENTA: color.fg.brightmagenta,
    BallColor.CYAN: color.fg.brightcyan,
    BallColor.WHITE: color.fg.brightwhite,
}


class CLI(UI):
    BALL_CHAR = "●"
    EMPTY_CHAR = "·"

    def __init__(self, *, out: TextIO | None = None, clear_screen: bool = True, use_colors: bool = True) -> None:
        self._out = out or sys.stdout
        self._clear_screen = clear_screen
        self._use_colors = use_colors
        self._board_size: int | None = None

    def initialize(self, board_size: int) -> None:
        self._board_size = board_size

    def draw(self, elements: UiElements) -> None:
        assert self._board_size is not None, "draw() called before initialize()!"

        prefix = cursor.erase("") + cursor.goto(1, 1) if self._clear_screen else ""
        print(prefix + self.render(elements), file=self._out)
        self._out.flush()

    def render(self, elements: UiElements) -> str:
        board_size = len(elements.board)
        lines = ["   " + " ".join(str(col) for col in range(board_size))]
        for row, values in enumerate(elements.board):
            cells = (
                self._render_cell(int(value), selected=Position(row, col) == elements.selection)
                for col, value in enumerate(values)
            )
            lines.append(f"{row:>2} " + " ".join(cells))

        lines.append("")
        next_balls = (self._render_cell(int(next_color), selected=False) for next_color in elements.next_colors)
        lines.append("Next: " + " ".join(next_balls))
        lines.append(f"Score: {elements.score}   High score: {elements.high_score}")
        if elements.last_points:
            lines.append(f"+{elements.last_points} points for {len(elements.last_cleared)} balls!")
        if elements.game_over:
            lines.append(self._styled(color.fx.bold, "Game Over! No more moves available."))

        return "\n".join(lines)

    def _render_cell(self, value: int, *, selected: bool) -> str:
        if value == Board.EMPTY_CELL_VALUE:
            return self.EMPTY_CHAR

        if not self._use_colors:
            return "*" if selected else BallColor(value).symbol

        ball = _BALL_COLORS[BallColor(value)](self.BALL_CHAR)
        return color.fx.negative(ball) if selected else ball

    def _styled(self, graphic: Graphic, text: str) -> str:
        return graphic(text) if self._use_colors else text
