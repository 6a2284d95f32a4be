from dataclasses import dataclass
from typing import Any, Self

from color_lines.config import GameConfig
from color_lines.exceptions import BaseColorLinesError

SAVE_FORMAT_VERSION = 1
EMPTY_INDEX = -1


class PersistenceError(BaseColorLinesError):
    pass


class InvalidSaveError(PersistenceError):
    pass


@dataclass(frozen=True, slots=True)
class SaveState:
    """Everything needed to continue a game later. The selection is deliberately not part of it."""

    board_colors: tuple[tuple[int, ...], ...]  # palette index per cell, EMPTY_INDEX for empty cells
    next_colors: tuple[int, ...]
    score: int
    high_score: int

    def to_dict(self, config: GameConfig) -> dict[str, Any]:
        return {
            "version": SAVE_FORMAT_VERSION,
            "boardSize": config.board_size,
            "paletteSize": config.num_colors,
            "boardColors": [list(row) for row in self.board_colors],
            "nextColors": list(self.next_colors),
            "score": self.score,
            "highScore": self.high_score,
        }

    @classmethod
    def from_dict(cls, data: Any, config: GameConfig) -> Self:  # noqa: ANN401
        """Validate and convert a record as written by `to_dict`.

        Raises InvalidSaveError for anything that does not fit the given config exactly.
        """
        if not isinstance(data, dict):
            msg = f"Save record must be a JSON object, got {type(data).__name__}"
            raise InvalidSaveError(msg)

        missing = {"version", "boardSize", "paletteSize", "boardColors", "nextColors", "score", "highScore"} - set(data)
        if missing:
            msg = f"Save record is missing the keys {sorted(missing)}"
            raise InvalidSaveError(msg)

        if data["version"] != SAVE_FORMAT_VERSION or not _is_int(data["version"]):
            msg = f"Unsupported save format version: {data['version']!r}"
            raise InvalidSaveError(msg)

        if data["boardSize"] != config.board_size or not _is_int(data["boardSize"]):
            msg = f"Saved board size {data['boardSize']!r} does not match board size {config.board_size}"
            raise InvalidSaveError(msg)

        if data["paletteSize"] != config.num_colors or not _is_int(data["paletteSize"]):
            msg = f"Saved palette size {data['paletteSize']!r} does not match palette size {config.num_colors}"
            raise InvalidSaveError(msg)

        board_colors = data["boardColors"]
        if (
            not isinstance(board_colors, list)
            or len(board_colors) != config.board_size
            or any(not isinstance(row, list) or len(row) != config.board_size for row in board_colors)
        ):
            msg = f"boardColors must be a {config.board_size}x{config.board_size} array"
            raise InvalidSaveError(msg)

        cells = (value for row in board_colors for value in row)
        if not all(_is_color_index(value, config.num_colors, allow_empty=True) for value in cells):
            msg = "boardColors contains values that are neither a palette index nor empty"
            raise InvalidSaveError(msg)

        next_colors = data["nextColors"]
        if (
            not isinstance(next_colors, list)
            or len(next_colors) != config.balls_per_turn
            or not all(_is_color_index(value, config.num_colors, allow_empty=False) for value in next_colors)
        ):
            msg = f"nextColors must be a list of {config.balls_per_turn} palette indices"
            raise InvalidSaveError(msg)

        score, high_score = data["score"], data["highScore"]
        if not (_is_int(score) and _is_int(high_score)) or score < 0 or high_score < 0:
            msg = f"score and highScore must be non-negative integers, got {score!r} and {high_score!r}"
            raise InvalidSaveError(msg)

        return cls(
            board_colors=tuple(tuple(row) for row in board_colors),
            next_colors=tuple(next_colors),
            score=score,
            high_score=max(score, high_score),
        )


def _is_int(value: object) -> bool:
    # JSON booleans are parsed as bool, which is a subclass of int
    return isinstance(value, int) and not isinstance(value, bool)


def _is_color_index(value: object, num_colors: int, *, allow_empty: bool) -> bool:
    if not _is_int(value):
        return False
    return 0 <= value < num_colors or (allow_empty and value == EMPTY_INDEX)  # type: ignore[operator]
