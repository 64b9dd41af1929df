from __future__ import annotations

from math import ceil

from string_splitter.errors import ConfigError


def chunk(text: str, size: int) -> list[str]:
    """Split ``text`` into consecutive pieces of at most ``size`` characters."""

    if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
        raise ConfigError(f"chunk size must be a positive integer, got {size!r}")
    return [text[i * size : (i + 1) * size] for i in range(ceil(len(text) / size))]


__all__ = ["chunk"]
