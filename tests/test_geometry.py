import dataclasses

import pytest

from quadstore.index.geometry import QUADRANTS, Point, Rectangle


def test_contains_is_closed_on_edges():
    box = Rectangle(50.0, 50.0, 50.0, 50.0)

    assert box.contains(Point(0.0, 0.0))
    assert box.contains(Point(100.0, 100.0))
    assert box.contains(Point(50.0, 100.0))
    assert not box.contains(Point(100.0000001, 50.0))
    assert not box.contains(Point(50.0, -0.5))


def test_intersects_counts_touching_edges():
    left = Rectangle(25.0, 50.0, 25.0, 50.0)
    right = Rectangle(75.0, 50.0, 25.0, 50.0)
    far = Rectangle(200.0, 50.0, 10.0, 10.0)

    assert left.intersects(right)
    assert right.intersects(left)
    assert not left.intersects(far)
    assert Rectangle(50.0, 50.0, 50.0, 50.0).intersects(Rectangle(50.0, 50.0, 1.0, 1.0))


def test_from_bounds_converts_corners():
    box = Rectangle.from_bounds(0.0, 10.0, 20.0, 50.0)

    assert box == Rectangle(10.0, 30.0, 10.0, 20.0)


def test_quadrants_follow_compass_offsets():
    parent = Rectangle(50.0, 50.0, 50.0, 50.0)

    assert parent.quadrant("ne") == Rectangle(75.0, 25.0, 25.0, 25.0)
    assert parent.quadrant("nw") == Rectangle(25.0, 25.0, 25.0, 25.0)
    assert parent.quadrant("se") == Rectangle(75.0, 75.0, 25.0, 25.0)
    assert parent.quadrant("sw") == Rectangle(25.0, 75.0, 25.0, 25.0)
    assert QUADRANTS == ("ne", "nw", "se", "sw")


def test_quadrant_rejects_unknown_tag():
    with pytest.raises(ValueError):
        Rectangle(0.0, 0.0, 1.0, 1.0).quadrant("up")


def test_point_location_match_is_exact():
    p = Point(10.0, 20.0, {"id": "a"})

    assert p.same_location(10.0, 20.0)
    assert p.same_location(10, 20)
    assert not p.same_location(10.000000001, 20.0)
    assert p.distance_sq(13.0, 24.0) == 25.0


def test_point_record_uses_data_key():
    p = Point.from_dict({"x": 1, "y": 2, "data": [1, 2]})

    assert p == Point(1.0, 2.0, [1, 2])
    assert p.to_dict() == {"x": 1.0, "y": 2.0, "data": [1, 2]}


def test_point_coordinates_are_read_only():
    p = Point(1.0, 2.0, "old")

    with pytest.raises(dataclasses.FrozenInstanceError):
        p.x = 5.0

    q = p.with_payload("new")
    assert (q.x, q.y, q.payload) == (1.0, 2.0, "new")
    assert p.payload == "old"
