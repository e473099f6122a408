import threading

import pytest

from quadstore import BoundaryViolation, MemoryStore, PointNotFound, Rectangle, SerializedIndex, SpatialIndex
from quadstore.core.settings import Settings

BOUNDARY = (50.0, 50.0, 50.0, 50.0)


def test_reopening_reuses_root_and_content(tmp_path):
    path = tmp_path / "db"
    with SpatialIndex.open(path, BOUNDARY, capacity=2) as index:
        first_root = index.root_id
        for v in (10.0, 20.0, 30.0):
            index.insert(v, v, {"v": v})

    with SpatialIndex.open(path, Rectangle(0.0, 0.0, 1.0, 1.0), capacity=2) as index:
        assert index.root_id == first_root
        assert [p.payload for p in index.range(0, 0, 100, 100)] == [{"v": 10.0}, {"v": 20.0}, {"v": 30.0}]
        index.insert(90.0, 90.0, "late")

    with SpatialIndex.open(path, BOUNDARY) as index:
        assert index.nearest(88.0, 88.0).payload == "late"


def test_facade_operations(tmp_path):
    with SpatialIndex.open(tmp_path / "index.sqlite3", Rectangle(50.0, 50.0, 50.0, 50.0)) as index:
        index.insert(10.0, 10.0, "a")
        index.insert(20.0, 20.0, "b")

        assert index.update(20.0, 20.0, "B")
        assert index.find(20.0, 20.0).payload == "B"
        assert index.nearest(12.0, 12.0).payload == "a"
        with pytest.raises(PointNotFound):
            index.update(30.0, 30.0, "c")
        with pytest.raises(BoundaryViolation):
            index.insert(150.0, 10.0, "out")


def test_from_settings_opens_configured_store(tmp_path):
    settings = Settings(db_path=str(tmp_path / "db"), capacity=1, boundary=(0.0, 0.0, 10.0, 10.0))

    with SpatialIndex.from_settings(settings) as index:
        index.insert(-10.0, 10.0, "corner")
        index.insert(5.0, 5.0, "inner")
        assert index.tree.capacity == 1
        assert [p.payload for p in index.range(-10, -10, 10, 10)] == ["corner", "inner"]


def test_attach_with_memory_store():
    index = SpatialIndex.attach(MemoryStore(), BOUNDARY, id_factory=lambda: "root")

    assert index.root_id == "root"
    assert index.range(0, 0, 100, 100) == []


def test_serialized_index_under_threads():
    index = SerializedIndex(SpatialIndex.attach(MemoryStore(), BOUNDARY, capacity=2))

    def worker(offset):
        for i in range(50):
            index.insert(offset + i * 0.1, offset + i * 0.1, (offset, i))

    threads = [threading.Thread(target=worker, args=(offset,)) for offset in (10.0, 30.0, 50.0, 70.0)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(index.range(0, 0, 100, 100)) == 200
    assert index.update(10.0, 10.0, "first")
    assert index.find(10.0, 10.0).payload == "first"
