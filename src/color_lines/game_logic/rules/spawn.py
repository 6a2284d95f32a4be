import logging
import random
from collections.abc import Callable, Sequence
from functools import partial

from color_lines.game_logic.components import BallColor, Board, Position
from color_lines.game_logic.components.exceptions import CannotSpawnBallsError

LOGGER = logging.getLogger(__name__)


class SpawnRule:
    """Keeps the preview of upcoming ball colors and places them onto random empty cells."""

    def __init__(
        self,
        balls_per_turn: int = 3,
        *,
        palette: Sequence[BallColor] | None = None,
        rng: random.Random | None = None,
        select_color_fn: Callable[[], BallColor] | None = None,
    ) -> None:
        self._balls_per_turn = balls_per_turn
        self._rng = rng or random.Random()
        self._select_color_fn = select_color_fn or self.truly_random_selection_fn(palette, self._rng)
        self._next_colors: tuple[BallColor, ...] = ()
        self.generate_next_colors()

    @property
    def balls_per_turn(self) -> int:
        return self._balls_per_turn

    @property
    def next_colors(self) -> tuple[BallColor, ...]:
        return self._next_colors

    @next_colors.setter
    def next_colors(self, value: Sequence[BallColor]) -> None:
        if len(value) != self._balls_per_turn:
            msg = f"Expected {self._balls_per_turn} next colors, got {len(value)}"
            raise ValueError(msg)
        self._next_colors = tuple(BallColor(color) for color in value)

    def generate_next_colors(self) -> None:
        self._next_colors = tuple(self._select_color_fn() for _ in range(self._balls_per_turn))

    def apply(self, board: Board, rng: random.Random | None = None) -> list[Position]:
        """Place the next colors onto the board. Return the positions of the new balls.

        Either all balls are placed or, if there are not enough empty cells, none of them. The cells are picked with
        `rng` if given, otherwise with the rule's own random number generator.
        """
        empty_positions = board.empty_positions()
        if len(empty_positions) < len(self._next_colors):
            msg = f"Cannot spawn {len(self._next_colors)} balls with only {len(empty_positions)} empty cells left"
            raise CannotSpawnBallsError(msg)

        (rng or self._rng).shuffle(empty_positions)
        spawn_positions = empty_positions[: len(self._next_colors)]
        for position, color in zip(spawn_positions, self._next_colors, strict=True):
            board.place(position, color)

        LOGGER.debug("Spawned %s at %s", [color.name for color in self._next_colors], spawn_positions)
        return spawn_positions

    @staticmethod
    def truly_random_selection_fn(
        palette: Sequence[BallColor] | None = None, rng: random.Random | None = None
    ) -> Callable[[], BallColor]:
        return partial(BallColor.create_random, palette=palette, rng=rng or random.Random())
