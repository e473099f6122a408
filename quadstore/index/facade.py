from __future__ import annotations

from pathlib import Path
from typing import Any, List, Optional, Sequence, Union

from ..core import logger
from ..core.settings import DEFAULT_CAPACITY, DEFAULT_MAX_DEPTH, Settings
from .geometry import Point, Rectangle
from .kvstore import SqliteStore
from .store import NodeStore
from .tree import DEFAULT_NEAREST_RADIUS, QuadTree

BoundaryLike = Union[Rectangle, Sequence[float]]


def _as_rectangle(boundary: BoundaryLike) -> Rectangle:
    if isinstance(boundary, Rectangle):
        return boundary
    x, y, w, h = boundary
    return Rectangle(float(x), float(y), float(w), float(h))


class SpatialIndex:
    """Public entry point: a quadtree bound to one opened key/value store.

    ``capacity`` and ``max_depth`` belong to the process, not the store, so
    reopening an existing store with a different capacity only affects nodes
    touched from then on.
    """

    def __init__(self, kv, tree: QuadTree) -> None:
        self.kv = kv
        self.tree = tree

    @classmethod
    def attach(
        cls,
        kv,
        boundary: BoundaryLike,
        capacity: int = DEFAULT_CAPACITY,
        max_depth: int = DEFAULT_MAX_DEPTH,
        id_factory=None,
    ) -> "SpatialIndex":
        nodes = NodeStore(kv) if id_factory is None else NodeStore(kv, id_factory=id_factory)
        root_id = nodes.bootstrap(_as_rectangle(boundary))
        return cls(kv, QuadTree(nodes, root_id, capacity=capacity, max_depth=max_depth))

    @classmethod
    def open(
        cls,
        path: Union[str, Path],
        boundary: BoundaryLike,
        capacity: int = DEFAULT_CAPACITY,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> "SpatialIndex":
        kv = SqliteStore(path)
        try:
            return cls.attach(kv, boundary, capacity=capacity, max_depth=max_depth)
        except Exception:
            kv.close()
            raise

    @classmethod
    def from_settings(cls, settings: Settings) -> "SpatialIndex":
        logger.set_debug(settings.debug)
        return cls.open(
            settings.db_path,
            settings.boundary,
            capacity=settings.capacity,
            max_depth=settings.max_depth,
        )

    @property
    def root_id(self) -> str:
        return self.tree.root_id

    def insert(self, x: float, y: float, payload: Any = None) -> Point:
        return self.tree.insert(x, y, payload)

    def range(self, min_x: float, min_y: float, max_x: float, max_y: float) -> List[Point]:
        return self.tree.range(min_x, min_y, max_x, max_y)

    def nearest(self, x: float, y: float, radius: float = DEFAULT_NEAREST_RADIUS) -> Optional[Point]:
        return self.tree.nearest(x, y, radius)

    def find(self, x: float, y: float) -> Optional[Point]:
        return self.tree.find(x, y)

    def update(self, x: float, y: float, payload: Any) -> bool:
        return self.tree.update(x, y, payload)

    def close(self) -> None:
        self.kv.close()

    def __enter__(self) -> "SpatialIndex":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
