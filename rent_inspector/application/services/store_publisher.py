"""Store publisher — in-process observer list for full-collection snapshots."""

import logging
from collections.abc import Callable

from rent_inspector.domain.entities import StoreSnapshot

logger = logging.getLogger(__name__)

SnapshotCallback = Callable[[StoreSnapshot], None]


class Subscription:
    """Handle returned by ``StorePublisher.subscribe``; cancel to stop receiving."""

    def __init__(self, publisher: "StorePublisher", callback: SnapshotCallback) -> None:
        self._publisher = publisher
        self.callback = callback
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        if self._active:
            self._active = False
            self._publisher.unsubscribe(self)


class StorePublisher:
    """Holds the last snapshot and pushes every new one to all subscribers.

    Delivery is synchronous, in subscription order, on the caller's task.
    Each subscriber receives its own detached copy; there is no buffering
    and no coalescing.
    """

    def __init__(self) -> None:
        self._subscriptions: list[Subscription] = []
        self._snapshot = StoreSnapshot()
        self._emission_count = 0

    def subscribe(self, callback: SnapshotCallback, *, replay: bool = False) -> Subscription:
        """Register a callback. With ``replay`` it first receives the current snapshot."""
        subscription = Subscription(self, callback)
        self._subscriptions.append(subscription)
        if replay:
            self._deliver(subscription, self._snapshot)
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        if subscription in self._subscriptions:
            self._subscriptions.remove(subscription)
        subscription._active = False

    def publish(self, snapshot: StoreSnapshot) -> None:
        """Replace the current snapshot and emit it to every subscriber."""
        self._snapshot = snapshot
        self._emission_count += 1
        for subscription in list(self._subscriptions):
            # A callback earlier in this loop may have cancelled it
            if not subscription.active:
                continue
            self._deliver(subscription, snapshot)

    def republish(self) -> None:
        """Emit the current snapshot again, unchanged."""
        self.publish(self._snapshot)

    @property
    def current(self) -> StoreSnapshot:
        return self._snapshot.detached()

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)

    @property
    def emission_count(self) -> int:
        return self._emission_count

    def _deliver(self, subscription: Subscription, snapshot: StoreSnapshot) -> None:
        try:
            subscription.callback(snapshot.detached())
        except Exception:
            logger.exception("Snapshot subscriber raised, continuing with the rest")
