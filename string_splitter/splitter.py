"""Convenience entry points for splitting raw text values.

Note: when splitting on line breaks, list ``"\\r\\n"`` before ``"\\n"`` so
Windows line endings do not leave a stray ``"\\r"`` at the end of parts.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from string_splitter.carry_over import asplit_chunks, split_chunks
from string_splitter.chunking import chunk
from string_splitter.options import SplitConfig
from string_splitter.scanner import scan


def split(
    text: str,
    splitters: Iterable[str],
    delimiters: Iterable[Any] | None = None,
    *,
    remove_splitters: bool = True,
    trim_parts: bool = False,
    legacy_boundary: bool = False,
) -> list[str]:
    """Split ``text`` at every splitter occurring outside delimited regions.

    ``delimiters`` may mix plain strings (same opening and closing marker)
    and ``(opening, closing)`` pairs.
    """

    config = SplitConfig.build(
        splitters,
        delimiters,
        remove_splitters=remove_splitters,
        trim_parts=trim_parts,
        legacy_boundary=legacy_boundary,
    )
    return list(scan(text, config).parts)


def split_stream(
    text: str,
    splitters: Iterable[str],
    delimiters: Iterable[Any] | None = None,
    *,
    chunk_size: int,
    remove_splitters: bool = True,
    trim_parts: bool = False,
    legacy_boundary: bool = False,
) -> Iterator[list[str]]:
    """Split ``text`` in ``chunk_size`` pieces, yielding a batch per piece."""

    config = SplitConfig.build(
        splitters,
        delimiters,
        remove_splitters=remove_splitters,
        trim_parts=trim_parts,
        legacy_boundary=legacy_boundary,
    )
    chunks = chunk(text, chunk_size)
    return split_chunks(chunks, config, chunk_count=len(chunks) or None)


__all__ = ["asplit_chunks", "chunk", "split", "split_chunks", "split_stream"]
