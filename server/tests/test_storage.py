import threading
from concurrent.futures import ThreadPoolExecutor

import pytest
from services.storage import TelemetryStore

from tests.conftest import make_reading


def test_empty_store_has_no_latest() -> None:
    store = TelemetryStore(capacity=3)
    assert store.latest() is None
    assert store.recent(10) == []
    assert len(store) == 0


def test_capacity_must_be_positive() -> None:
    with pytest.raises(ValueError):
        TelemetryStore(capacity=0)


def test_append_updates_latest_and_history() -> None:
    store = TelemetryStore(capacity=3)
    first, second = make_reading(1), make_reading(2)

    store.append(first)
    store.append(second)

    assert store.latest() == second
    assert store.recent(3) == [first, second]


def test_fifo_eviction_keeps_last_capacity_readings() -> None:
    store = TelemetryStore(capacity=100)
    readings = [make_reading(i) for i in range(250)]

    for r in readings:
        store.append(r)

    assert len(store) == 100
    assert store.recent(100) == readings[-100:]
    assert store.latest() == readings[-1]


def test_insertion_order_wins_over_timestamp_order() -> None:
    store = TelemetryStore(capacity=5)
    late = make_reading(1, timestamp="2030-01-01T00:00:00Z")
    early = make_reading(2, timestamp="2001-01-01T00:00:00Z")

    store.append(late)
    store.append(early)

    assert store.recent(2) == [late, early]
    assert store.latest() == early


def test_recent_bounds() -> None:
    store = TelemetryStore(capacity=5)
    readings = [make_reading(i) for i in range(4)]
    for r in readings:
        store.append(r)

    assert store.recent(2) == readings[-2:]
    assert store.recent(50) == readings
    assert store.recent(0) == readings[-1:]
    assert store.recent(-3) == readings[-1:]


def test_recent_returns_a_copy() -> None:
    store = TelemetryStore(capacity=5)
    store.append(make_reading(1))

    snapshot = store.recent(5)
    store.append(make_reading(2))

    assert len(snapshot) == 1


def test_reads_are_idempotent() -> None:
    store = TelemetryStore(capacity=5)
    for i in range(7):
        store.append(make_reading(i))

    assert store.latest() == store.latest()
    assert store.recent(4) == store.recent(4)


def test_round_trip_preserves_fields() -> None:
    store = TelemetryStore()
    reading = make_reading(7, depth=3, note="as submitted")

    store.append(reading)

    assert store.latest() == make_reading(7, depth=3, note="as submitted")


def test_concurrent_appends_have_no_gaps_or_duplicates() -> None:
    store = TelemetryStore(capacity=100)
    readings = [make_reading(i) for i in range(80)]
    barrier = threading.Barrier(8)

    def worker(chunk):
        barrier.wait()
        for r in chunk:
            store.append(r)

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(worker, [readings[i::8] for i in range(8)]))

    stored = store.recent(80)
    assert sorted(r["seq"] for r in stored) == list(range(80))
    assert store.latest() == stored[-1]


def test_concurrent_readers_see_consistent_latest() -> None:
    store = TelemetryStore(capacity=10)
    stop = threading.Event()
    mismatches = []

    def writer():
        for i in range(2000):
            store.append(make_reading(i))
        stop.set()

    def reader():
        while not stop.is_set():
            history = store.recent(10)
            latest = store.latest()
            # latest can only move forward after the snapshot was taken
            if history and latest["seq"] < history[-1]["seq"]:
                mismatches.append((history[-1]["seq"], latest["seq"]))

    threads = [threading.Thread(target=writer)] + [threading.Thread(target=reader) for _ in range(3)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert mismatches == []
    assert len(store) == 10
    assert store.latest()["seq"] == 1999


def test_mutating_returned_readings_does_not_change_history() -> None:
    store = TelemetryStore(capacity=5)
    submitted = make_reading(1)
    store.append(submitted)

    submitted["depth"] = 29.0
    store.latest()["depth"] = 28.0
    store.recent(5)[0]["depth"] = 27.0

    assert store.latest()["depth"] == 10.5
    assert store.recent(5) == [make_reading(1)]
