import logging

from color_lines.game_logic.interfaces.pub_sub import Publisher
from color_lines.game_logic.rules.messages import ScoreMessage

LOGGER = logging.getLogger(__name__)


class ScoreTracker(Publisher):
    def __init__(self, score: int = 0, high_score: int = 0) -> None:
        super().__init__()

        self._score = 0
        self._high_score = 0

        self.score = score
        self.high_score = high_score

    @property
    def score(self) -> int:
        return self._score

    @score.setter
    def score(self, value: int) -> None:
        if value < 0:
            msg = f"Score must not be negative, got {value}"
            raise ValueError(msg)
        self._score = value
        self._notify_subscribers_about_score()

    @property
    def high_score(self) -> int:
        return self._high_score

    @high_score.setter
    def high_score(self, value: int) -> None:
        if value < 0:
            msg = f"High score must not be negative, got {value}"
            raise ValueError(msg)
        self._high_score = value
        self._notify_subscribers_about_score()

    def add(self, points: int) -> None:
        if points < 0:
            msg = f"Cannot add a negative number of points ({points})"
            raise ValueError(msg)
        self._score += points
        self._notify_subscribers_about_score()

    def reset(self) -> None:
        """Set the score back to zero. The high score is kept."""
        self._score = 0
        self._notify_subscribers_about_score()

    def update_high_score(self) -> None:
        if self._score > self._high_score:
            LOGGER.info("New high score: %d (previously %d)", self._score, self._high_score)
            self._high_score = self._score
            self._notify_subscribers_about_score()

    def _notify_subscribers_about_score(self) -> None:
        self.notify_subscribers(ScoreMessage(score=self._score, high_score=self._high_score))
