from __future__ import annotations

import json
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import IO, Any


def rows(parts: Iterable[str], start: int = 0) -> Iterator[dict[str, Any]]:
    """Number ``parts`` as ``{"index", "text"}`` rows."""
    return ({"index": i, "text": part} for i, part in enumerate(parts, start))


def _serialize(items: Iterable[dict[str, Any]]) -> Iterator[str]:
    """Serialize dictionaries to JSON lines."""
    return (json.dumps(r, ensure_ascii=False) for r in items)


def _write(path: str | Path, lines: Iterable[str]) -> None:
    """Write ``lines`` to ``path`` with trailing newlines."""
    path_obj = Path(path)
    path_obj.parent.mkdir(parents=True, exist_ok=True)
    with path_obj.open("w", encoding="utf-8") as f:
        f.writelines(f"{line}\n" for line in lines)


def write(parts: Iterable[str], path: str | Path) -> None:
    """Write ``parts`` to JSONL at ``path``."""
    _write(path, _serialize(rows(parts)))


def dump(parts: Iterable[str], stream: IO[str]) -> None:
    """Write ``parts`` as JSONL rows to an open text ``stream``."""
    stream.writelines(f"{line}\n" for line in _serialize(rows(parts)))


__all__ = ["dump", "rows", "write"]
