from collections import deque
from typing import NamedTuple, Self

import numpy as np
from numpy.typing import NDArray

from color_lines.game_logic.components.ball import BallColor
from color_lines.game_logic.components.exceptions import CellOccupiedError, EmptyCellError, InvalidPositionError


class Position(NamedTuple):
    row: int
    col: int


# orthogonal neighbours: up, down, left, right
NEIGHBOUR_OFFSETS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


class Board:
    EMPTY_CELL_VALUE: int = -1

    def __init__(self, board_array: NDArray[np.int8]) -> None:
        if board_array.ndim != 2 or board_array.shape[0] != board_array.shape[1]:  # noqa: PLR2004
            msg = f"Board must be a square 2D array, got shape {board_array.shape}"
            raise ValueError(msg)

        self._board: NDArray[np.int8] = board_array

    @classmethod
    def create_empty(cls, size: int) -> Self:
        return cls(np.full((size, size), cls.EMPTY_CELL_VALUE, dtype=np.int8))

    @classmethod
    def from_string_representation(cls, string: str) -> Self:
        """Create a board from lines of '.' (empty) and digits (palette index), one line per row."""
        allowed = {".", " ", "\n"} | {color.symbol for color in BallColor}
        if not set(string) <= allowed:
            msg = (
                "Invalid string representation of board! "
                f"Must consist of only '.', digits 0-{len(BallColor) - 1}, spaces, and newlines, "
                f"but found {set(string) - allowed}"
            )
            raise ValueError(msg)

        rows: list[list[int]] = []
        for line in string.strip().splitlines():
            line = line.strip()  # noqa: PLW2901
            if rows and len(line) != len(rows[0]):
                msg = "Invalid string representation of board (all lines must have the same width)"
                raise ValueError(msg)

            rows.append([cls.EMPTY_CELL_VALUE if c == "." else int(c) for c in line])

        return cls(np.array(rows, dtype=np.int8))

    def __str__(self) -> str:
        return "\n".join(
            "".join("." if value == self.EMPTY_CELL_VALUE else str(value) for value in line) for line in self._board
        )

    @property
    def size(self) -> int:
        return self._board.shape[0]

    def as_array(self) -> NDArray[np.int8]:
        """Read-only view of the cells: palette index per cell, EMPTY_CELL_VALUE for empty cells."""
        view = self._board.view()
        view.flags.writeable = False
        return view

    def set_from_array(self, array: NDArray[np.int8]) -> None:
        if array.shape != self._board.shape:
            msg = f"Array shape {array.shape} does not match board shape {self._board.shape}"
            raise ValueError(msg)

        self._board[...] = array

    def __getitem__(self, position: tuple[int, int]) -> BallColor | None:
        self._ensure_in_bounds(position)
        value = int(self._board[position])
        return None if value == self.EMPTY_CELL_VALUE else BallColor(value)

    def in_bounds(self, position: tuple[int, int]) -> bool:
        row, col = position
        return 0 <= row < self.size and 0 <= col < self.size

    def is_empty(self, position: tuple[int, int]) -> bool:
        self._ensure_in_bounds(position)
        return bool(self._board[position] == self.EMPTY_CELL_VALUE)

    def place(self, position: tuple[int, int], color: BallColor) -> None:
        if not self.is_empty(position):
            msg = f"Cannot place a ball on occupied cell {position}"
            raise CellOccupiedError(msg)

        self._board[position] = int(color)

    def remove(self, position: tuple[int, int]) -> BallColor:
        color = self[position]
        if color is None:
            msg = f"Cannot remove a ball from empty cell {position}"
            raise EmptyCellError(msg)

        self._board[position] = self.EMPTY_CELL_VALUE
        return color

    def move_ball(self, from_position: tuple[int, int], to_position: tuple[int, int]) -> None:
        """Move a ball without checking for a free path; see `has_path`."""
        if not self.is_empty(to_position):
            msg = f"Cannot move a ball onto occupied cell {to_position}"
            raise CellOccupiedError(msg)

        self.place(to_position, self.remove(from_position))

    def clear(self) -> None:
        self._board[...] = self.EMPTY_CELL_VALUE

    def clear_cells(self, mask: NDArray[np.bool_]) -> int:
        """Empty all cells selected by the mask. Return how many balls were removed."""
        num_removed = int(np.count_nonzero(mask & (self._board != self.EMPTY_CELL_VALUE)))
        self._board[mask] = self.EMPTY_CELL_VALUE
        return num_removed

    def empty_positions(self) -> list[Position]:
        return [Position(int(row), int(col)) for row, col in np.argwhere(self._board == self.EMPTY_CELL_VALUE)]

    def count_empty(self) -> int:
        return int(np.count_nonzero(self._board == self.EMPTY_CELL_VALUE))

    def is_full(self) -> bool:
        return self.count_empty() == 0

    def has_path(self, from_position: tuple[int, int], to_position: tuple[int, int]) -> bool:
        """Return whether to_position can be reached from from_position by stepping over empty cells only.

        Steps are orthogonal. The origin itself does not need to be empty.
        """
        self._ensure_in_bounds(from_position)
        self._ensure_in_bounds(to_position)

        start, target = Position(*from_position), Position(*to_position)
        visited = np.zeros_like(self._board, dtype=bool)
        visited[start] = True
        queue = deque([start])

        while queue:
            current = queue.popleft()
            if current == target:
                return True

            for d_row, d_col in NEIGHBOUR_OFFSETS:
                neighbour = Position(current.row + d_row, current.col + d_col)
                if (
                    self.in_bounds(neighbour)
                    and not visited[neighbour]
                    and self._board[neighbour] == self.EMPTY_CELL_VALUE
                ):
                    visited[neighbour] = True
                    queue.append(neighbour)

        return False

    def _ensure_in_bounds(self, position: tuple[int, int]) -> None:
        if not self.in_bounds(position):
            msg = f"Position {position} is out of bounds (0-{self.size - 1})"
            raise InvalidPositionError(msg)
