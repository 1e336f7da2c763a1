"""Replay-latest change notification channels."""
import logging
from collections import deque
from enum import Enum
from typing import Any, Callable, Deque, Generic, List, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

Subscriber = Callable[[T], None]


class Channel(str, Enum):
    """Observable aggregates of the data manager."""

    GROUPS = "groups"
    FAVORITES = "favorites"
    ORDERS = "orders"


class Subscription:
    """Handle returned by ``subscribe``; call ``unsubscribe`` to stop delivery."""

    def __init__(self, channel: "CurrentValueChannel[Any]", callback: Subscriber):
        self._channel = channel
        self._callback = callback
        self.active = True

    def unsubscribe(self) -> None:
        if not self.active:
            return
        self.active = False
        self._channel._remove(self._callback)


class CurrentValueChannel(Generic[T]):
    """Holds the latest value and pushes every new value to its subscribers.

    A new subscriber is called immediately with the current value. Delivery
    is synchronous and in publish order: a value published by a subscriber
    while a delivery is running is queued until every subscriber has seen
    the value before it.
    """

    def __init__(self, name: str, initial: T):
        self.name = name
        self._value = initial
        self._subscribers: List[Subscriber] = []
        self._pending: Deque[T] = deque()
        self._delivering = False

    def subscribe(self, callback: Subscriber) -> Subscription:
        self._subscribers.append(callback)
        subscription = Subscription(self, callback)
        self._deliver(callback, self._value)
        return subscription

    def publish(self, value: T) -> None:
        self._value = value
        self._pending.append(value)
        if self._delivering:
            return

        self._delivering = True
        try:
            while self._pending:
                current = self._pending.popleft()
                for callback in list(self._subscribers):
                    self._deliver(callback, current)
        finally:
            self._delivering = False

    def _remove(self, callback: Subscriber) -> None:
        try:
            self._subscribers.remove(callback)
        except ValueError:
            pass

    def _deliver(self, callback: Subscriber, value: T) -> None:
        try:
            callback(value)
        except Exception as e:
            logger.error(
                f"[NOTIFY] Subscriber on '{self.name}' failed - {type(e).__name__}: {str(e)}",
                exc_info=True,
            )
