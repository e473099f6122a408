from .errors import (
    BoundaryViolation,
    DepthLimitExceeded,
    InvalidRecordError,
    MissingNodeError,
    PointNotFound,
    QuadStoreError,
    RecordNotFound,
    StructuralError,
)
from .facade import SpatialIndex
from .geometry import QUADRANTS, Point, Rectangle
from .kvstore import MemoryStore, SqliteStore
from .locking import SerializedIndex
from .store import Node, NodeStore, new_node_id
from .tree import QuadTree

__all__ = [
    "BoundaryViolation",
    "DepthLimitExceeded",
    "InvalidRecordError",
    "MissingNodeError",
    "MemoryStore",
    "Node",
    "NodeStore",
    "Point",
    "PointNotFound",
    "QUADRANTS",
    "QuadStoreError",
    "QuadTree",
    "Rectangle",
    "RecordNotFound",
    "SerializedIndex",
    "SpatialIndex",
    "SqliteStore",
    "StructuralError",
    "new_node_id",
]
