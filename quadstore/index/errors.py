class QuadStoreError(Exception):
    """Base class for every error raised by the index."""


class RecordNotFound(QuadStoreError, KeyError):
    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Record not found: {self.key}"


class MissingNodeError(QuadStoreError):
    def __init__(self, node_id: str) -> None:
        super().__init__(f"Node record missing from store: {node_id}")
        self.node_id = node_id


class InvalidRecordError(QuadStoreError, ValueError):
    pass


class PointNotFound(QuadStoreError, LookupError):
    def __init__(self, x: float, y: float) -> None:
        super().__init__(f"Point not found: ({x}, {y})")
        self.x = x
        self.y = y


class BoundaryViolation(QuadStoreError, ValueError):
    def __init__(self, x: float, y: float, boundary) -> None:
        super().__init__(f"Point ({x}, {y}) lies outside the index boundary {boundary}")
        self.x = x
        self.y = y
        self.boundary = boundary


class StructuralError(QuadStoreError):
    pass


class DepthLimitExceeded(QuadStoreError):
    def __init__(self, max_depth: int) -> None:
        super().__init__(f"Descent exceeded maximum depth of {max_depth}")
        self.max_depth = max_depth
