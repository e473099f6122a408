from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Tuple

QUADRANTS: Tuple[str, ...] = ("ne", "nw", "se", "sw")


@dataclass(frozen=True)
class Point:
    x: float
    y: float
    payload: Any = None

    def with_payload(self, payload: Any) -> "Point":
        return replace(self, payload=payload)

    def same_location(self, x: float, y: float) -> bool:
        return self.x == x and self.y == y

    def distance_sq(self, x: float, y: float) -> float:
        dx = self.x - x
        dy = self.y - y
        return dx * dx + dy * dy

    def to_dict(self) -> Dict[str, Any]:
        return {"x": self.x, "y": self.y, "data": self.payload}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Point":
        return cls(float(data["x"]), float(data["y"]), data.get("data"))


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned box stored as center ``(x, y)`` and half extents ``(w, h)``.

    Edges are closed: a point exactly on the boundary is contained, and two
    boxes that only touch along an edge intersect.
    """

    x: float
    y: float
    w: float
    h: float

    @classmethod
    def from_bounds(cls, min_x: float, min_y: float, max_x: float, max_y: float) -> "Rectangle":
        return cls(
            (min_x + max_x) / 2.0,
            (min_y + max_y) / 2.0,
            (max_x - min_x) / 2.0,
            (max_y - min_y) / 2.0,
        )

    def contains(self, p: Point) -> bool:
        return abs(p.x - self.x) <= self.w and abs(p.y - self.y) <= self.h

    def contains_xy(self, x: float, y: float) -> bool:
        return abs(x - self.x) <= self.w and abs(y - self.y) <= self.h

    def intersects(self, other: "Rectangle") -> bool:
        return not (
            other.x - other.w > self.x + self.w
            or other.x + other.w < self.x - self.w
            or other.y - other.h > self.y + self.h
            or other.y + other.h < self.y - self.h
        )

    def quadrant(self, tag: str) -> "Rectangle":
        if tag not in QUADRANTS:
            raise ValueError(f"Unknown quadrant: {tag}")
        hw = self.w / 2.0
        hh = self.h / 2.0
        dx = hw if "e" in tag else -hw
        dy = hh if "s" in tag else -hh
        return Rectangle(self.x + dx, self.y + dy, hw, hh)

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y, "w": self.w, "h": self.h}

    @classmethod
    def from_dict(cls, data: Dict[str, float]) -> "Rectangle":
        return cls(float(data["x"]), float(data["y"]), float(data["w"]), float(data["h"]))
