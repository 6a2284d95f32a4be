import logging
import random

import numpy as np

from color_lines.config import GameConfig
from color_lines.game_logic.components import BallColor, Board, Position
from color_lines.game_logic.components.exceptions import CannotSpawnBallsError
from color_lines.game_logic.interfaces.pub_sub import Publisher
from color_lines.game_logic.rules.clear_lines import ClearLinesRule, ClearResult, compute_points
from color_lines.game_logic.rules.messages import BoardChangedMessage, GameOverMessage, LinesClearedMessage
from color_lines.game_logic.rules.scoring import ScoreTracker
from color_lines.game_logic.rules.spawn import SpawnRule
from color_lines.persistence import PersistenceError, SaveState, SaveStore

LOGGER = logging.getLogger(__name__)


class Game(Publisher):
    """The board engine: selection, moves, line clearing, spawning, and game over detection.

    Illegal input (occupied target, no free path, invalid coordinates, ...) is ignored silently; the UI is expected to
    only offer legal moves anyway.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        *,
        board: Board | None = None,
        score_tracker: ScoreTracker | None = None,
        spawn_rule: SpawnRule | None = None,
        store: SaveStore | None = None,
        seed: int | None = None,
    ) -> None:
        super().__init__()

        self._config = config or GameConfig()
        self._board = board or Board.create_empty(self._config.board_size)
        if self._board.size != self._config.board_size:
            msg = f"Board size {self._board.size} does not match configured board size {self._config.board_size}"
            raise ValueError(msg)

        self._rng = random.Random(seed)
        self._score_tracker = score_tracker or ScoreTracker()
        self._spawn_rule = spawn_rule or SpawnRule(
            self._config.balls_per_turn, palette=self._config.palette, rng=self._rng
        )
        self._clear_lines_rule = ClearLinesRule(self._config.connect_count)
        self._store = store

        self._selection: Position | None = None
        self._game_over = False

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def board(self) -> Board:
        return self._board

    @property
    def selection(self) -> Position | None:
        return self._selection

    @property
    def next_colors(self) -> tuple[BallColor, ...]:
        return self._spawn_rule.next_colors

    @property
    def score_tracker(self) -> ScoreTracker:
        return self._score_tracker

    @property
    def game_over(self) -> bool:
        return self._game_over

    def click(self, row: int, col: int) -> None:
        """Handle a click on a cell: select a ball, switch the selection, or move the selected ball."""
        target = self._to_position((row, col))
        if self._game_over or target is None:
            LOGGER.debug("Ignoring click on (%r, %r)", row, col)
            return

        if not self._board.is_empty(target):
            if target != self._selection:
                self._selection = target
                self._notify_board_changed()
            return

        if self._selection is None:
            return

        selection = self._selection
        if not self.move(selection, target):
            self._selection = None
            self._notify_board_changed()

    def move(self, from_position: tuple[int, int], to_position: tuple[int, int]) -> bool:
        """Move a ball along a free path and play out the rest of the turn. Return whether the move was made."""
        origin, target = self._to_position(from_position), self._to_position(to_position)
        if self._game_over or origin is None or target is None:
            return False

        if self._board.is_empty(origin) or not self._board.is_empty(target) or not self._board.has_path(origin, target):
            LOGGER.debug("Illegal move from %s to %s", origin, target)
            return False

        self._board.move_ball(origin, target)
        self._selection = None
        LOGGER.debug("Moved ball from %s to %s", origin, target)

        can_continue = True
        if self._clear_lines(spawn_triggered=False):
            # no new balls on a turn in which the player cleared a line
            self._spawn_rule.generate_next_colors()
        else:
            can_continue = self._spawn_and_clear_lines()

        self._finish_turn(can_continue=can_continue)
        return True

    def start_new_game(self) -> None:
        LOGGER.info("Starting new game")
        self._score_tracker.reset()
        self._board.clear()
        self._selection = None
        self._game_over = False
        self._spawn_rule.generate_next_colors()

        self._finish_turn(can_continue=self._spawn_and_clear_lines())

    def load(self) -> bool:
        """Restore the saved game. Return False (leaving the game untouched) if there is no usable save."""
        if self._store is None:
            return False

        state = self._store.load(self._config)
        if state is None:
            return False

        self.apply_save_state(state)
        LOGGER.info("Loaded saved game (score %d, high score %d)", state.score, state.high_score)
        return True

    def load_or_start_new_game(self) -> None:
        if not self.load():
            self.start_new_game()

    def save(self) -> bool:
        """Persist the current state. Failures are logged but never interrupt the game."""
        if self._store is None:
            return False

        try:
            self._store.save(self.to_save_state(), self._config)
        except PersistenceError:
            LOGGER.exception("Could not save the game")
            return False
        return True

    def to_save_state(self) -> SaveState:
        return SaveState(
            board_colors=tuple(tuple(int(value) for value in row) for row in self._board.as_array()),
            next_colors=tuple(int(color) for color in self.next_colors),
            score=self._score_tracker.score,
            high_score=self._score_tracker.high_score,
        )

    def apply_save_state(self, state: SaveState) -> None:
        self._board.set_from_array(np.array(state.board_colors, dtype=np.int8))
        self._spawn_rule.next_colors = [BallColor(index) for index in state.next_colors]
        self._score_tracker.score = state.score
        self._score_tracker.high_score = state.high_score
        self._selection = None
        # a full board can only come from a save written right at the end of a game
        self._game_over = self._board.is_full()
        self._notify_board_changed()
        if self._game_over:
            self._notify_game_over()

    def _spawn_and_clear_lines(self) -> bool:
        """Spawn the next balls and clear lines they complete. Return False if the game cannot go on."""
        try:
            self._spawn_rule.apply(self._board, self._rng)
        except CannotSpawnBallsError:
            LOGGER.info("Not enough space to spawn %d balls", len(self.next_colors))
            return False

        self._spawn_rule.generate_next_colors()
        self._clear_lines(spawn_triggered=True)
        return not self._board.is_full()

    def _clear_lines(self, *, spawn_triggered: bool) -> bool:
        result = self._clear_lines_rule.apply(self._board)
        if result is None:
            return False

        self._award_points(result, spawn_triggered=spawn_triggered)
        return True

    def _award_points(self, result: ClearResult, *, spawn_triggered: bool) -> None:
        points = compute_points(
            result.num_cleared,
            result.num_bonus,
            points_per_ball=self._config.points_per_ball,
            points_per_bonus_ball=self._config.points_per_bonus_ball,
        )
        LOGGER.info("Cleared %d balls (%d bonus) for %d points", result.num_cleared, result.num_bonus, points)

        self._score_tracker.add(points)
        self._score_tracker.update_high_score()

        self.notify_subscribers(
            LinesClearedMessage(
                positions=result.cleared_positions(),
                bonus_positions=result.bonus_positions(),
                points=points,
                spawn_triggered=spawn_triggered,
            )
        )

    def _finish_turn(self, *, can_continue: bool) -> None:
        self._game_over = not can_continue
        self._notify_board_changed()
        self.save()

        if self._game_over:
            LOGGER.info("Game over with score %d", self._score_tracker.score)
            self._notify_game_over()

    def _notify_game_over(self) -> None:
        self.notify_subscribers(
            GameOverMessage(score=self._score_tracker.score, high_score=self._score_tracker.high_score)
        )

    def _notify_board_changed(self) -> None:
        self.notify_subscribers(
            BoardChangedMessage(board=self._board.as_array(), selection=self._selection, next_colors=self.next_colors)
        )

    def _to_position(self, value: object) -> Position | None:
        """Convert a (row, col) pair into a Position on this board, or None if it is not one."""
        if not isinstance(value, tuple) or len(value) != 2:  # noqa: PLR2004
            return None

        row, col = value
        if not all(isinstance(index, int | np.integer) and not isinstance(index, bool) for index in (row, col)):
            return None

        position = Position(int(row), int(col))
        return position if self._board.in_bounds(position) else None
