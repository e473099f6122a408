from __future__ import annotations

import argparse
import json
import sys
from typing import Callable, Dict, Iterable, List, Optional, TextIO

from .core import logger
from .core.settings import load_settings
from .index import SpatialIndex

log = logger.get_logger("shell")

_EXIT_COMMANDS = ("exit", "quit")
_ERROR_PREFIX = "Error: "


def _floats(args: List[str], count: int, usage: str) -> List[float]:
    if len(args) != count:
        raise ValueError(f"usage: {usage}")
    try:
        return [float(a) for a in args]
    except ValueError:
        raise ValueError(f"usage: {usage}") from None


def _insert(index: SpatialIndex, args: List[str]) -> str:
    if len(args) != 3:
        raise ValueError("usage: insert <id> <x> <y>")
    x, y = _floats(args[1:], 2, "insert <id> <x> <y>")
    index.insert(x, y, {"id": args[0]})
    return "Inserted"


def _range(index: SpatialIndex, args: List[str]) -> str:
    min_x, min_y, max_x, max_y = _floats(args, 4, "range <minX> <minY> <maxX> <maxY>")
    found = index.range(min_x, min_y, max_x, max_y)
    return json.dumps([p.payload for p in found])


def _nearest(index: SpatialIndex, args: List[str]) -> str:
    x, y = _floats(args, 2, "nearest <x> <y>")
    point = index.nearest(x, y)
    return "None" if point is None else json.dumps(point.payload)


def _update(index: SpatialIndex, args: List[str]) -> str:
    if len(args) != 3:
        raise ValueError("usage: update <id> <x> <y>")
    x, y = _floats(args[1:], 2, "update <id> <x> <y>")
    index.update(x, y, {"id": args[0]})
    return "Updated"


_HANDLERS: Dict[str, Callable[[SpatialIndex, List[str]], str]] = {
    "insert": _insert,
    "range": _range,
    "nearest": _nearest,
    "update": _update,
}


def execute(index: SpatialIndex, line: str) -> Optional[str]:
    """Run one command line and return the text to print (None for blank lines)."""
    parts = line.split()
    if not parts:
        return None

    name, args = parts[0], parts[1:]
    handler = _HANDLERS.get(name)
    if handler is None:
        return "Unknown command"

    try:
        return handler(index, args)
    except Exception as exc:
        log.debug("%s failed", name, exc_info=True)
        return f"{_ERROR_PREFIX}{exc}"


def run(
    index: SpatialIndex,
    lines: Iterable[str],
    out: TextIO,
    prompt: str = "",
    err: Optional[TextIO] = None,
) -> None:
    if err is None:
        err = sys.stderr
    if prompt:
        out.write(prompt)
        out.flush()
    for line in lines:
        if line.strip() in _EXIT_COMMANDS:
            break
        result = execute(index, line)
        if result is not None:
            stream = err if result.startswith(_ERROR_PREFIX) else out
            stream.write(result + "\n")
        if prompt:
            out.write(prompt)
            out.flush()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="quadstore", description="Interactive shell for a persistent quadtree")
    parser.add_argument("--db", dest="db_path", help="store path (default: $QUADSTORE_DB_PATH or ./data/db)")
    parser.add_argument("--capacity", type=int, help="points per leaf before it subdivides")
    parser.add_argument("--debug", action="store_true", default=None, help="enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = load_settings(db_path=args.db_path, capacity=args.capacity, debug=args.debug)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    with SpatialIndex.from_settings(settings) as index:
        prompt = "> " if sys.stdin.isatty() else ""
        run(index, sys.stdin, sys.stdout, prompt=prompt)
    return 0
