from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional, Tuple

DEFAULT_DB_PATH = "./data/db"
DEFAULT_CAPACITY = 4
DEFAULT_BOUNDARY = (0.0, 0.0, 100.0, 100.0)
DEFAULT_MAX_DEPTH = 64

_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    """Runtime configuration for an index and the command shell.

    ``boundary`` is the universe rectangle in center/half-extent form
    ``(x, y, w, h)``.
    """

    db_path: str = DEFAULT_DB_PATH
    capacity: int = DEFAULT_CAPACITY
    boundary: Tuple[float, float, float, float] = field(default=DEFAULT_BOUNDARY)
    max_depth: int = DEFAULT_MAX_DEPTH
    debug: bool = False

    def __post_init__(self) -> None:
        if self.capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {self.capacity}")
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be >= 1, got {self.max_depth}")
        if len(self.boundary) != 4:
            raise ValueError("boundary must have four values: x, y, w, h")
        if self.boundary[2] < 0 or self.boundary[3] < 0:
            raise ValueError("boundary half extents must be non-negative")


def load_settings(env: Optional[Mapping[str, str]] = None, **overrides) -> Settings:
    if env is None:
        env = os.environ

    values = {
        "db_path": env.get("QUADSTORE_DB_PATH") or DEFAULT_DB_PATH,
        "capacity": _parse_int(env, "QUADSTORE_CAPACITY", DEFAULT_CAPACITY),
        "boundary": _parse_boundary(env.get("QUADSTORE_BOUNDARY")),
        "max_depth": _parse_int(env, "QUADSTORE_MAX_DEPTH", DEFAULT_MAX_DEPTH),
        "debug": (env.get("QUADSTORE_DEBUG") or "").strip().lower() in _TRUE_VALUES,
    }
    values.update({key: value for key, value in overrides.items() if value is not None})
    return Settings(**values)


def _parse_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _parse_boundary(raw: Optional[str]) -> Tuple[float, float, float, float]:
    if raw is None or not raw.strip():
        return DEFAULT_BOUNDARY
    parts = [p for p in raw.replace(" ", "").split(",") if p]
    if len(parts) != 4:
        raise ValueError(f"QUADSTORE_BOUNDARY must be 'x,y,w,h', got {raw!r}")
    try:
        x, y, w, h = (float(p) for p in parts)
    except ValueError:
        raise ValueError(f"QUADSTORE_BOUNDARY must be numeric, got {raw!r}") from None
    return (x, y, w, h)
