from quadstore.index import MemoryStore, Point, Rectangle, SpatialIndex


def main() -> None:
    index = SpatialIndex.attach(MemoryStore(), Rectangle(50.0, 50.0, 50.0, 50.0), capacity=4)
    for x in range(5):
        for y in range(5):
            index.insert(x * 10.0, y * 10.0, payload=f"p{x}{y}")

    found = index.range(0.0, 0.0, 15.0, 15.0)
    nearest = index.nearest(21.0, 19.0)

    assert len(found) == 4
    assert nearest is not None and nearest.payload == "p22"

    index.update(20.0, 20.0, "center")
    assert index.find(20.0, 20.0).payload == "center"

    assert Rectangle(5.0, 5.0, 5.0, 5.0).contains(Point(10.0, 10.0))


if __name__ == "__main__":
    main()
