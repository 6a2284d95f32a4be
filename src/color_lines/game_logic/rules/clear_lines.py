"""Detection and removal of lines of equally colored balls, including the cross bonus pattern."""

from typing import NamedTuple

import numpy as np
from numpy.typing import NDArray

from color_lines.game_logic.components import Board, Position

# right, down, down-right, up-right
LINE_DIRECTIONS: tuple[tuple[int, int], ...] = ((0, 1), (1, 0), (1, 1), (-1, 1))


class ClearResult(NamedTuple):
    cleared: NDArray[np.bool_]
    bonus: NDArray[np.bool_]

    @property
    def num_cleared(self) -> int:
        return int(np.count_nonzero(self.cleared))

    @property
    def num_bonus(self) -> int:
        return int(np.count_nonzero(self.bonus))

    def cleared_positions(self) -> list[Position]:
        return [Position(int(row), int(col)) for row, col in np.argwhere(self.cleared)]

    def bonus_positions(self) -> list[Position]:
        return [Position(int(row), int(col)) for row, col in np.argwhere(self.bonus)]


def find_lines(
    board_array: NDArray[np.int8], connect_count: int, empty_value: int = Board.EMPTY_CELL_VALUE
) -> NDArray[np.bool_]:
    """Mark every cell that is part of `connect_count` equally colored balls in a row.

    Each of the 4 directions is checked as a window of exactly `connect_count` cells starting at every cell where the
    window fits onto the board. Longer lines are therefore found as several overlapping windows; cells covered by more
    than one window are still only marked once.
    """
    size = board_array.shape[0]
    to_clear = np.zeros(board_array.shape, dtype=bool)
    reach = connect_count - 1

    for d_row, d_col in LINE_DIRECTIONS:
        # range of window origins such that the whole window fits onto the board
        row_start = reach if d_row < 0 else 0
        row_stop = size - reach if d_row > 0 else size
        col_stop = size - reach if d_col > 0 else size
        height, width = row_stop - row_start, col_stop
        if height <= 0 or width <= 0:
            continue

        origin = board_array[row_start:row_stop, :col_stop]
        is_line = origin != empty_value
        for step in range(1, connect_count):
            row = row_start + step * d_row
            col = step * d_col
            is_line &= board_array[row : row + height, col : col + width] == origin

        for step in range(connect_count):
            row = row_start + step * d_row
            col = step * d_col
            to_clear[row : row + height, col : col + width] |= is_line

    return to_clear


def find_crosses(to_clear: NDArray[np.bool_]) -> NDArray[np.bool_]:
    """Mark every plus-shaped group of five cells in `to_clear`.

    The centre of a plus must be an interior cell; the centre and its 4 orthogonal neighbours are all marked.
    """
    bonus = np.zeros(to_clear.shape, dtype=bool)

    centres = (
        to_clear[1:-1, 1:-1]
        & to_clear[:-2, 1:-1]  # above
        & to_clear[2:, 1:-1]  # below
        & to_clear[1:-1, :-2]  # left
        & to_clear[1:-1, 2:]  # right
    )

    bonus[1:-1, 1:-1] |= centres
    bonus[:-2, 1:-1] |= centres
    bonus[2:, 1:-1] |= centres
    bonus[1:-1, :-2] |= centres
    bonus[1:-1, 2:] |= centres

    return bonus


def compute_points(num_cleared: int, num_bonus: int, points_per_ball: int = 2, points_per_bonus_ball: int = 8) -> int:
    return num_cleared * points_per_ball + num_bonus * points_per_bonus_ball


class ClearLinesRule:
    def __init__(self, connect_count: int = 5) -> None:
        self._connect_count = connect_count

    @property
    def connect_count(self) -> int:
        return self._connect_count

    def apply(self, board: Board) -> ClearResult | None:
        """Clear all lines on the board. Return what was cleared, or None if there was no line."""
        to_clear = find_lines(board.as_array(), self._connect_count)
        if not to_clear.any():
            return None

        result = ClearResult(cleared=to_clear, bonus=find_crosses(to_clear))
        board.clear_cells(result.cleared)
        return result
