"""Quadtree algorithms over individually persisted nodes.

Every operation starts from the stored root id and loads one node record
per step; nothing is cached between calls, so the key/value store is the
only copy of the tree. Descents use an explicit loop or stack rather than
recursion, and insertion depth is capped by ``max_depth``.

The engine takes no locks. Callers that share a tree between threads wrap
it in :class:`~quadstore.index.locking.SerializedIndex`.
"""

from __future__ import annotations

from typing import Any, List, Optional, Tuple

from ..core import logger
from ..core.settings import DEFAULT_CAPACITY, DEFAULT_MAX_DEPTH
from .errors import BoundaryViolation, DepthLimitExceeded, PointNotFound, StructuralError
from .geometry import QUADRANTS, Point, Rectangle
from .store import Node, NodeStore

DEFAULT_NEAREST_RADIUS = 100.0


class QuadTree:
    def __init__(
        self,
        nodes: NodeStore,
        root_id: str,
        capacity: int = DEFAULT_CAPACITY,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.nodes = nodes
        self.root_id = root_id
        self.capacity = capacity
        self.max_depth = max_depth

    def insert(self, x: float, y: float, payload: Any = None) -> Point:
        self.nodes.check_payload(payload)
        point = Point(float(x), float(y), payload)
        node = self.nodes.load(self.root_id)
        if not node.boundary.contains(point):
            raise BoundaryViolation(x, y, node.boundary)

        depth = 0
        while True:
            if not node.divided and len(node.points) < self.capacity:
                node.points.append(point)
                self.nodes.save(node)
                return point

            if depth >= self.max_depth:
                raise DepthLimitExceeded(self.max_depth)
            if not node.divided:
                self._subdivide(node)

            node = self._child_containing(node, point)
            depth += 1

    def _child_containing(self, node: Node, point: Point) -> Node:
        for tag in QUADRANTS:
            child = self.nodes.load(node.children[tag])
            if child.boundary.contains(point):
                return child
        raise StructuralError(
            f"No child of node {node.id} accepts ({point.x}, {point.y}) inside {node.boundary}"
        )

    def _subdivide(self, node: Node) -> None:
        children = {}
        for tag in QUADRANTS:
            child = self.nodes.create(node.boundary.quadrant(tag))
            children[tag] = child.id
        node.children = children
        self.nodes.save(node)
        logger.logger.debug("Subdivided node %s holding %d points", node.id, len(node.points))

    def range(self, min_x: float, min_y: float, max_x: float, max_y: float) -> List[Point]:
        return self.query(Rectangle.from_bounds(min_x, min_y, max_x, max_y))

    def query(self, area: Rectangle) -> List[Point]:
        """Points inside ``area``, node before children, children in ne/nw/se/sw order."""
        found: List[Point] = []
        stack = [self.root_id]
        while stack:
            node = self.nodes.load(stack.pop())
            if not node.boundary.intersects(area):
                continue

            for p in node.points:
                if area.contains(p):
                    found.append(p)

            if node.divided:
                stack.extend(node.children[tag] for tag in reversed(QUADRANTS))
        return found

    def nearest(self, x: float, y: float, radius: float = DEFAULT_NEAREST_RADIUS) -> Optional[Point]:
        # Bounded search: a closer point outside the square is never considered.
        candidates = self.range(x - radius, y - radius, x + radius, y + radius)
        if not candidates:
            return None
        candidates.sort(key=lambda p: p.distance_sq(x, y))
        return candidates[0]

    def find(self, x: float, y: float) -> Optional[Point]:
        located = self._locate(x, y)
        if located is None:
            return None
        node, index = located
        return node.points[index]

    def update(self, x: float, y: float, payload: Any) -> bool:
        located = self._locate(x, y)
        if located is None:
            raise PointNotFound(x, y)

        node, index = located
        node.points[index] = node.points[index].with_payload(payload)
        self.nodes.save(node)
        logger.logger.debug("Updated payload at (%s, %s) in node %s", x, y, node.id)
        return True

    def _locate(self, x: float, y: float) -> Optional[Tuple[Node, int]]:
        stack = [self.root_id]
        while stack:
            node = self.nodes.load(stack.pop())
            if not node.boundary.contains_xy(x, y):
                continue

            for index, p in enumerate(node.points):
                if p.same_location(x, y):
                    return node, index

            if node.divided:
                stack.extend(node.children[tag] for tag in reversed(QUADRANTS))
        return None
