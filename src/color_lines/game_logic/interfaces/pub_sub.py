"""Message passing from the engine (`Game`, `ScoreTracker`) to whatever displays it.

Both sides register with `DEPENDENCY_MANAGER` on construction. Nothing is delivered before
`DEPENDENCY_MANAGER.wire_up()` has matched every subscriber with the publishers it asks for.
"""

import logging
from abc import ABC, abstractmethod
from typing import NamedTuple

from color_lines.game_logic.interfaces.dependency_manager import DEPENDENCY_MANAGER

LOGGER = logging.getLogger(__name__)


class Subscriber(ABC):
    def __init__(self) -> None:
        super().__init__()

        DEPENDENCY_MANAGER.all_subscribers.append(self)

    @abstractmethod
    def notify(self, message: NamedTuple) -> None: ...

    @abstractmethod
    def should_be_subscribed_to(self, publisher: "Publisher") -> bool: ...

    def verify_subscriptions(self, publishers: list["Publisher"]) -> None:
        if len(publishers) == 0:
            LOGGER.warning("%s is not subscribed to any publisher", type(self).__name__)


class Publisher:
    def __init__(self) -> None:
        super().__init__()

        self._subscribers: list[Subscriber] = []

        DEPENDENCY_MANAGER.all_publishers.append(self)

    def add_subscriber(self, subscriber: Subscriber) -> None:
        # wire_up may run more than once in a session
        if subscriber in self._subscribers:
            return
        self._subscribers.append(subscriber)

    def notify_subscribers(self, message: NamedTuple) -> None:
        LOGGER.debug("%s publishes %s", type(self).__name__, type(message).__name__)
        for subscriber in self._subscribers:
            subscriber.notify(message)
