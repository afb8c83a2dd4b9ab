"""
Per-instance notification channels.

Each game owns its own channels, so two sessions living in the same process
never see each other's events.
"""

from typing import Callable, List


class EventChannel:
    """
    Ordered list of subscriber callbacks.

    Usage:
        channel = EventChannel("updated")

        @channel.subscribe
        def refresh():
            ...

        channel.publish()
    """

    def __init__(self, name: str = ""):
        self.name = name
        self._subscribers: List[Callable[..., None]] = []

    def subscribe(self, callback: Callable[..., None]) -> Callable[..., None]:
        """
        Add a subscriber.

        Args:
            callback: Called with the published arguments

        Returns:
            The callback, so this can be used as a decorator
        """
        self._subscribers.append(callback)
        return callback

    def unsubscribe(self, callback: Callable[..., None]) -> None:
        """Remove a subscriber. Unknown callbacks are ignored."""
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    def publish(self, *args) -> None:
        """Call every subscriber, in subscription order."""
        # Copy so a subscriber may unsubscribe itself while being notified
        for callback in list(self._subscribers):
            callback(*args)

    def clear(self) -> None:
        """Remove all subscribers."""
        self._subscribers.clear()

    def __len__(self) -> int:
        return len(self._subscribers)

    def __repr__(self) -> str:
        return f"EventChannel({self.name!r}, subscribers={len(self._subscribers)})"
