__version__ = "0.1.0"

from .index import (
    BoundaryViolation,
    MemoryStore,
    Point,
    PointNotFound,
    QuadStoreError,
    Rectangle,
    SerializedIndex,
    SpatialIndex,
    SqliteStore,
)

__all__ = [
    "BoundaryViolation",
    "MemoryStore",
    "Point",
    "PointNotFound",
    "QuadStoreError",
    "Rectangle",
    "SerializedIndex",
    "SpatialIndex",
    "SqliteStore",
]
