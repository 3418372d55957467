import threading

import pytest

from interviewkit.event_buffer import CircularBuffer, Event, ProcessHandler


def test_full_buffer_keeps_only_newest_items():
    buffer = CircularBuffer(3)
    for value in range(1, 6):
        buffer.insert(value)
    assert len(buffer) == 3
    assert [buffer.remove(timeout=0) for _ in range(3)] == [3, 4, 5]
    assert len(buffer) == 0


def test_items_come_out_in_insertion_order():
    buffer = CircularBuffer(10)
    values = list("abcdef")
    for value in values:
        buffer.insert(value)
    assert [buffer.remove(timeout=0) for _ in values] == values


def test_remove_times_out_when_empty():
    buffer = CircularBuffer(2)
    with pytest.raises(TimeoutError):
        buffer.remove(timeout=0.01)


def test_remove_waits_for_an_insert_from_another_thread():
    buffer = CircularBuffer(2)
    timer = threading.Timer(0.05, buffer.insert, ["late"])
    timer.start()
    try:
        assert buffer.remove(timeout=5) == "late"
    finally:
        timer.cancel()


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        CircularBuffer(0)


def test_max_events_must_be_positive():
    with pytest.raises(ValueError):
        ProcessHandler(4, 0)


def test_processor_sees_only_last_events_after_overflow():
    handler = ProcessHandler(3, 5, generate_interval=0, process_interval=0)
    handler.generate_events()
    seen: list[Event] = []
    count = handler.process_events(seen.append, timeout=0.01)
    assert count == 3
    assert [event.event_id for event in seen] == ["ID2", "ID3", "ID4"]
    assert str(seen[0]) == "ID2: Event messages"


def test_concurrent_producer_and_consumer_preserve_order():
    total = 20
    handler = ProcessHandler(4, total, generate_interval=0.001, process_interval=0.003)
    producer = threading.Thread(target=handler.generate_events)
    producer.start()
    seen: list[Event] = []
    count = handler.process_events(seen.append, timeout=0.5)
    producer.join(timeout=5)
    assert not producer.is_alive()
    numbers = [int(event.event_id[2:]) for event in seen]
    assert count == len(seen)
    assert numbers == sorted(set(numbers))
    assert numbers[-1] == total - 1