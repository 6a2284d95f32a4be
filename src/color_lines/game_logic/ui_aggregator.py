from typing import NamedTuple

import numpy as np
from numpy.typing import NDArray

from color_lines.game_logic.interfaces.pub_sub import Publisher, Subscriber
from color_lines.game_logic.interfaces.ui import UiElements
from color_lines.game_logic.rules.messages import (
    BoardChangedMessage,
    GameOverMessage,
    LinesClearedMessage,
    ScoreMessage,
)


class UiAggregator(Subscriber):
    """Subscriber to all UI-relevant events, aggregating them into UiElements."""

    def __init__(self, board: NDArray[np.int8]) -> None:
        super().__init__()
        self._ui_elements = UiElements(board=board)

    @property
    def ui_elements(self) -> UiElements:
        return self._ui_elements

    def should_be_subscribed_to(self, publisher: Publisher) -> bool:
        from color_lines.game_logic.game import Game
        from color_lines.game_logic.rules.scoring import ScoreTracker

        return isinstance(publisher, Game | ScoreTracker)

    def verify_subscriptions(self, publishers: list[Publisher]) -> None:
        from color_lines.game_logic.game import Game
        from color_lines.game_logic.rules.scoring import ScoreTracker

        if not any(isinstance(publisher, Game) for publisher in publishers):
            msg = f"{type(self).__name__} has no subscription to a Game."
            raise RuntimeError(msg)

        if not any(isinstance(publisher, ScoreTracker) for publisher in publishers):
            msg = f"{type(self).__name__} has no subscription to a ScoreTracker."
            raise RuntimeError(msg)

    def notify(self, message: NamedTuple) -> None:
        match message:
            case BoardChangedMessage(board=board, selection=selection, next_colors=next_colors):
                self._ui_elements.board = board
                self._ui_elements.selection = selection
                self._ui_elements.next_colors = next_colors
                self._ui_elements.game_over = False
            case LinesClearedMessage(positions=positions, points=points):
                self._ui_elements.last_cleared = positions
                self._ui_elements.last_points = points
            case ScoreMessage(score=score, high_score=high_score):
                self._ui_elements.score = score
                self._ui_elements.high_score = high_score
            case GameOverMessage():
                self._ui_elements.game_over = True
            case _:
                pass

    def start_turn(self) -> None:
        """Forget about the lines cleared in the previous turn."""
        self._ui_elements.last_cleared = []
        self._ui_elements.last_points = 0
