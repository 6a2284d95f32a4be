import functools
import re
from collections.abc import Callable
from pathlib import Path
from typing import Any

import click

from color_lines.config import DEFAULT_SAVE_FILE, GameConfig
from color_lines.game_logic.components import Position
from color_lines.game_logic.game import Game
from color_lines.persistence import JsonFileStore

_COORDINATE_PATTERN = re.compile(r"^\s*(-?\d+)\s*[, ]\s*(-?\d+)\s*$")


class Coordinate(click.ParamType):
    name = "coordinate"

    def __init__(self, board_size: int = GameConfig().board_size) -> None:
        self._board_size = board_size

    def convert(
        self,
        value: str | tuple[int, int],
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> Position:
        if isinstance(value, tuple):
            return Position(*value)

        match = _COORDINATE_PATTERN.match(value)
        if match is None:
            self.fail(f"Expected a row and a column separated by ',' or ' ' (e.g. '4,2'), got {value!r}.", param, ctx)

        row, col = int(match.group(1)), int(match.group(2))
        if not (0 <= row < self._board_size and 0 <= col < self._board_size):
            self.fail(f"Row and column need to be in range 0-{self._board_size - 1}.", param, ctx)

        return Position(row, col)


def game_options(command: Callable[..., Any]) -> Callable[..., Any]:
    """Add the options needed to set up a Game, and pass the assembled Game on to the command."""

    @click.option(
        "--save-file",
        type=click.Path(dir_okay=False, path_type=Path),
        default=DEFAULT_SAVE_FILE,
        show_default=True,
        help="Where the game is saved after every move, and loaded from on startup.",
    )
    @click.option(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random ball colors and positions. Random if not specified.",
    )
    @functools.wraps(command)
    def wrapper(*args: Any, save_file: Path, seed: int | None, **kwargs: Any) -> Any:  # noqa: ANN401
        game = Game(GameConfig(), store=JsonFileStore(save_file), seed=seed)
        return command(*args, game=game, **kwargs)

    return wrapper
