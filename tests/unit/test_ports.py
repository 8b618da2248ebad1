from app.domains.documents.ports import MemoryStorage, TimestampIdGenerator, CounterIdGenerator


def test_memory_storage():
    storage = MemoryStorage()
    assert storage.get_item("k") is None

    storage.set_item("k", "v")
    assert storage.get_item("k") == "v"
    assert "k" in storage

    storage.remove_item("k")
    storage.remove_item("k")
    assert storage.get_item("k") is None


def test_timestamp_ids_are_milliseconds():
    generator = TimestampIdGenerator(clock=lambda: 1712000000.5)
    assert generator() == "1712000000500"


def test_timestamp_ids_stay_monotonic_within_same_millisecond():
    generator = TimestampIdGenerator(clock=lambda: 1.0)
    assert [generator(), generator(), generator()] == ["1000", "1001", "1002"]


def test_counter_ids():
    generator = CounterIdGenerator()
    assert generator() == "doc-1"
    assert generator() == "doc-2"
