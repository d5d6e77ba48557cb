"""
Falling Objects Simulation - Observer Interface

A minimal publish/subscribe event used by the clock and the series engine
to notify collaborators (renderers, graphs) of state transitions.

Subscribing never replays a current value: a subscriber that needs the
present state reads it from the publisher before (or after) subscribing.
"""

from typing import Callable, List


class Event:
    """A named event with an ordered list of subscriber callbacks."""

    def __init__(self, name: str):
        self.name = name
        self._callbacks: List[Callable] = []

    def subscribe(self, callback: Callable) -> Callable[[], None]:
        """
        Register a callback, called with the emitted arguments.

        Returns:
            A function that removes the subscription
        """
        self._callbacks.append(callback)

        def unsubscribe():
            self.unsubscribe(callback)

        return unsubscribe

    def unsubscribe(self, callback: Callable) -> None:
        if callback in self._callbacks:
            self._callbacks.remove(callback)

    def emit(self, *args) -> None:
        """Call every subscriber in subscription order."""
        # Snapshot so callbacks may unsubscribe themselves
        for callback in list(self._callbacks):
            callback(*args)

    def __len__(self) -> int:
        return len(self._callbacks)

    def __repr__(self) -> str:
        return f"Event({self.name!r}, subscribers={len(self._callbacks)})"
