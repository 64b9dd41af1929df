"""Text file IO adapter feeding the scanner and the carry-over session.

Files are decoded without newline translation, so ``\\r\\n`` reaches the
scanner as written on disk.
"""

from __future__ import annotations

import codecs
import logging
from collections.abc import Iterator
from pathlib import Path

from string_splitter.carry_over import split_chunks
from string_splitter.errors import ConfigError
from string_splitter.options import SplitConfig
from string_splitter.scanner import scan

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_BYTES = 64 * 1024


def read_text(path: str | Path, encoding: str = "utf-8") -> str:
    """Return the full contents of ``path`` decoded with ``encoding``."""

    return Path(path).read_bytes().decode(encoding)


def split_file(path: str | Path, config: SplitConfig, encoding: str = "utf-8") -> list[str]:
    """Read ``path`` in one go and split it."""

    return list(scan(read_text(path, encoding), config).parts)


def iter_text_chunks(
    path: str | Path,
    encoding: str = "utf-8",
    chunk_bytes: int = DEFAULT_CHUNK_BYTES,
) -> Iterator[str]:
    """Yield decoded text from ``path`` read ``chunk_bytes`` at a time.

    An incremental decoder holds back partial multi-byte sequences, so a
    character split across two reads is emitted whole with the later chunk.
    """

    if chunk_bytes <= 0:
        raise ValueError(f"chunk_bytes must be positive, got {chunk_bytes}")
    decoder = codecs.getincrementaldecoder(encoding)()
    with Path(path).open("rb") as fh:
        for block in iter(lambda: fh.read(chunk_bytes), b""):
            text = decoder.decode(block)
            if text:
                yield text
    tail = decoder.decode(b"", final=True)
    if tail:
        yield tail


def iter_char_chunks(path: str | Path, chunk_size: int, encoding: str = "utf-8") -> Iterator[str]:
    """Yield the text of ``path`` in pieces of ``chunk_size`` characters."""

    if isinstance(chunk_size, bool) or not isinstance(chunk_size, int) or chunk_size <= 0:
        raise ConfigError(f"chunk size must be a positive integer, got {chunk_size!r}")
    with Path(path).open("r", encoding=encoding, newline="") as fh:
        yield from iter(lambda: fh.read(chunk_size), "")


def split_file_stream(
    path: str | Path,
    config: SplitConfig,
    encoding: str = "utf-8",
    chunk_bytes: int = DEFAULT_CHUNK_BYTES,
) -> Iterator[list[str]]:
    """Stream batches of parts from ``path`` without loading it whole."""

    logger.debug("streaming %s in %d byte blocks", path, chunk_bytes)
    return split_chunks(iter_text_chunks(path, encoding, chunk_bytes), config)


def split_file_chunks(
    path: str | Path,
    config: SplitConfig,
    chunk_size: int,
    encoding: str = "utf-8",
) -> Iterator[list[str]]:
    """Stream batches of parts from ``path`` read ``chunk_size`` characters at a time."""

    logger.debug("streaming %s in %d character chunks", path, chunk_size)
    return split_chunks(iter_char_chunks(path, chunk_size, encoding), config)


__all__ = [
    "DEFAULT_CHUNK_BYTES",
    "iter_char_chunks",
    "iter_text_chunks",
    "read_text",
    "split_file",
    "split_file_chunks",
    "split_file_stream",
]
