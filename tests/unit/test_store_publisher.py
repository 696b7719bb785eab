"""Unit tests for the StorePublisher — delivery order, detachment and cancellation."""

from rent_inspector.application.services.store_publisher import StorePublisher
from rent_inspector.domain.entities import Record, StoreSnapshot


def _snapshot(*titles: str) -> StoreSnapshot:
    return StoreSnapshot(records=[Record(title=t) for t in titles])


def test_publish_delivers_to_subscribers_in_order():
    publisher = StorePublisher()
    calls: list[tuple[str, list[str]]] = []
    publisher.subscribe(lambda s: calls.append(("a", [r.title for r in s.records])))
    publisher.subscribe(lambda s: calls.append(("b", [r.title for r in s.records])))

    publisher.publish(_snapshot("one"))

    assert calls == [("a", ["one"]), ("b", ["one"])]
    assert publisher.emission_count == 1


def test_each_subscriber_gets_its_own_copy():
    publisher = StorePublisher()
    received: list[StoreSnapshot] = []
    publisher.subscribe(received.append)
    publisher.subscribe(received.append)

    publisher.publish(_snapshot("one"))
    received[0].records[0].title = "mutated"

    assert received[1].records[0].title == "one"
    assert publisher.current.records[0].title == "one"


def test_current_is_detached():
    publisher = StorePublisher()
    publisher.publish(_snapshot("one"))

    publisher.current.records.clear()

    assert len(publisher.current.records) == 1


def test_replay_delivers_current_snapshot_immediately():
    publisher = StorePublisher()
    publisher.publish(_snapshot("existing"))
    received: list[StoreSnapshot] = []

    publisher.subscribe(received.append, replay=True)

    assert [r.title for r in received[0].records] == ["existing"]
    assert publisher.emission_count == 1


def test_cancelled_subscription_stops_receiving():
    publisher = StorePublisher()
    received: list[StoreSnapshot] = []
    subscription = publisher.subscribe(received.append)

    subscription.cancel()
    publisher.publish(_snapshot("one"))

    assert received == []
    assert not subscription.active
    assert publisher.subscriber_count == 0


def test_subscriber_cancelled_mid_publish_misses_that_emission():
    publisher = StorePublisher()
    received: list[StoreSnapshot] = []
    later = None

    def cancel_later(snapshot: StoreSnapshot) -> None:
        later.cancel()

    publisher.subscribe(cancel_later)
    later = publisher.subscribe(received.append)

    publisher.publish(_snapshot("one"))

    assert received == []
    assert publisher.subscriber_count == 1


def test_failing_subscriber_does_not_block_others():
    publisher = StorePublisher()
    received: list[StoreSnapshot] = []

    def broken(_snapshot):
        raise RuntimeError("boom")

    publisher.subscribe(broken)
    publisher.subscribe(received.append)

    publisher.publish(_snapshot("one"))

    assert len(received) == 1


def test_republish_emits_unchanged_snapshot():
    publisher = StorePublisher()
    received: list[StoreSnapshot] = []
    publisher.publish(_snapshot("one"))
    publisher.subscribe(received.append)

    publisher.republish()

    assert [r.title for r in received[0].records] == ["one"]
    assert publisher.emission_count == 2
