from __future__ import annotations

import json
import uuid
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from ..core import logger
from .errors import InvalidRecordError, MissingNodeError, RecordNotFound
from .geometry import QUADRANTS, Point, Rectangle

ROOT_KEY = "meta:root"
NODE_PREFIX = "node:"


def new_node_id() -> str:
    return uuid.uuid4().hex


def node_key(node_id: str) -> str:
    return f"{NODE_PREFIX}{node_id}"


@dataclass
class Node:
    """One persisted quadrant.

    A leaf has ``children is None``. Once divided, ``children`` maps each
    quadrant tag to a child id and ``points`` keeps whatever the node held at
    the moment it split; those residual points are never pushed down.
    """

    id: str
    boundary: Rectangle
    points: List[Point] = field(default_factory=list)
    children: Optional[Dict[str, str]] = None

    @property
    def divided(self) -> bool:
        return self.children is not None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "boundary": self.boundary.to_dict(),
            "points": [p.to_dict() for p in self.points],
            "divided": self.divided,
        }
        if self.children is not None:
            data["children"] = dict(self.children)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Node":
        try:
            children = None
            if data.get("divided"):
                raw_children = data["children"]
                children = {tag: str(raw_children[tag]) for tag in QUADRANTS}
            return cls(
                id=str(data["id"]),
                boundary=Rectangle.from_dict(data["boundary"]),
                points=[Point.from_dict(p) for p in data.get("points", [])],
                children=children,
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise InvalidRecordError(f"Malformed node record: {exc}") from exc


class NodeStore:
    """Maps node ids to records in a key/value store and owns the root pointer."""

    def __init__(self, kv, id_factory: Callable[[], str] = new_node_id) -> None:
        self.kv = kv
        self.id_factory = id_factory

    def load(self, node_id: str) -> Node:
        try:
            data = self.kv.get(node_key(node_id))
        except RecordNotFound:
            raise MissingNodeError(node_id) from None
        return Node.from_dict(data)

    def check_payload(self, payload: Any) -> None:
        """Encode ``payload`` without storing it; a TypeError here means no record was written."""
        json.dumps(payload)

    def save(self, node: Node) -> None:
        self.kv.put(node_key(node.id), node.to_dict())

    def create(self, boundary: Rectangle) -> Node:
        node = Node(id=self.id_factory(), boundary=boundary)
        self.save(node)
        return node

    def root_id(self) -> Optional[str]:
        try:
            return str(self.kv.get(ROOT_KEY))
        except RecordNotFound:
            return None

    def bootstrap(self, boundary: Rectangle) -> str:
        existing = self.root_id()
        if existing is not None:
            logger.logger.info("Reusing quadtree root %s", existing)
            return existing

        # Root node goes in first so meta:root never points at a missing record.
        root = self.create(boundary)
        self.kv.put(ROOT_KEY, root.id)
        logger.logger.info("Created quadtree root %s", root.id)
        return root.id
