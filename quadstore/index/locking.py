from __future__ import annotations

import threading
from typing import Any, List, Optional

from .geometry import Point
from .tree import DEFAULT_NEAREST_RADIUS


class SerializedIndex:
    """Single-writer wrapper: one lock held across each whole operation.

    Inserts and updates are load-modify-store sequences over several node
    records; they must not interleave with any other operation on the tree.
    """

    def __init__(self, index, lock: Optional[threading.RLock] = None) -> None:
        self.index = index
        self.lock = lock if lock is not None else threading.RLock()

    @property
    def root_id(self) -> str:
        return self.index.root_id

    def insert(self, x: float, y: float, payload: Any = None) -> Point:
        with self.lock:
            return self.index.insert(x, y, payload)

    def range(self, min_x: float, min_y: float, max_x: float, max_y: float) -> List[Point]:
        with self.lock:
            return self.index.range(min_x, min_y, max_x, max_y)

    def nearest(self, x: float, y: float, radius: float = DEFAULT_NEAREST_RADIUS) -> Optional[Point]:
        with self.lock:
            return self.index.nearest(x, y, radius)

    def find(self, x: float, y: float) -> Optional[Point]:
        with self.lock:
            return self.index.find(x, y)

    def update(self, x: float, y: float, payload: Any) -> bool:
        with self.lock:
            return self.index.update(x, y, payload)

    def close(self) -> None:
        with self.lock:
            self.index.close()

    def __enter__(self) -> "SerializedIndex":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
