from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from color_lines.game_logic.interfaces.pub_sub import Publisher, Subscriber


class DependencyManager:
    """Collects publishers and subscribers as they are created, and connects them on `wire_up`."""

    def __init__(self) -> None:
        self.all_subscribers: list[Subscriber] = []
        self.all_publishers: list[Publisher] = []

    def wire_up(self) -> None:
        for subscriber in self.all_subscribers:
            subscriptions: list[Publisher] = []

            for publisher in self.all_publishers:
                if subscriber.should_be_subscribed_to(publisher):
                    publisher.add_subscriber(subscriber)
                    subscriptions.append(publisher)

            subscriber.verify_subscriptions(subscriptions)

        self.reset()

    def reset(self) -> None:
        self.all_subscribers = []
        self.all_publishers = []


DEPENDENCY_MANAGER = DependencyManager()
