"""Incremental splitting across chunks of a larger text.

A :class:`CarryOverSession` owns the only state that lives between chunks:
the text left undecided at the end of the previous chunk and the running
chunk counter. Sessions are not thread-safe; submit one chunk at a time and
wait for its batch before submitting the next.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterable, AsyncIterator, Iterable, Iterator

from string_splitter.errors import ConfigError
from string_splitter.options import SplitConfig
from string_splitter.patterns import compile_patterns
from string_splitter.scanner import scan

logger = logging.getLogger(__name__)

_FIRST_CHUNK = 1


class CarryOverSession:
    """Feed chunks in order with :meth:`advance` and finish with :meth:`close`.

    When ``total_chunks`` is given, the chunk with that index is treated as
    final without the caller flagging it. After a final chunk the counter
    starts again from the first chunk, so the same session can split another
    text with the same configuration.
    """

    def __init__(self, config: SplitConfig, total_chunks: int | None = None) -> None:
        if total_chunks is not None and total_chunks <= 0:
            raise ConfigError(f"total_chunks must be positive, got {total_chunks}")
        compile_patterns(config)
        self.config = config
        self.total_chunks = total_chunks
        self.chunk_index = _FIRST_CHUNK
        self.pending_leftover: str | None = None

    def _is_final(self, flagged: bool) -> bool:
        return flagged or (self.total_chunks is not None and self.chunk_index >= self.total_chunks)

    def advance(self, chunk: str, is_final: bool = False) -> list[str]:
        """Split ``chunk`` after any pending leftover and return its parts."""

        buffer = f"{self.pending_leftover or ''}{chunk}"
        self.pending_leftover = None
        final = self._is_final(is_final)
        result = scan(buffer, self.config, allow_carry_over=not final)
        if final:
            self.chunk_index = _FIRST_CHUNK
        else:
            self.pending_leftover = result.leftover
            self.chunk_index += 1
        return list(result.parts)

    def close(self) -> list[str] | None:
        """Flush pending leftover as a last batch; ``None`` when nothing is pending."""

        leftover, self.pending_leftover = self.pending_leftover, None
        self.chunk_index = _FIRST_CHUNK
        if leftover is None:
            return None
        logger.debug("carry-over: flushing %d chars on close", len(leftover))
        return list(scan(leftover, self.config).parts)


def _drive(session: CarryOverSession, chunks: Iterable[str]) -> Iterator[list[str]]:
    for piece in chunks:
        yield session.advance(piece)
    tail = session.close()
    if tail is not None:
        yield tail


async def _adrive(
    session: CarryOverSession, chunks: AsyncIterable[str]
) -> AsyncIterator[list[str]]:
    async for piece in chunks:
        yield session.advance(piece)
    tail = session.close()
    if tail is not None:
        yield tail


def split_chunks(
    chunks: Iterable[str],
    config: SplitConfig,
    chunk_count: int | None = None,
) -> Iterator[list[str]]:
    """Yield one batch of parts per chunk, then any flushed leftover.

    The configuration is validated before the first chunk is pulled.
    """

    return _drive(CarryOverSession(config, chunk_count), chunks)


def asplit_chunks(
    chunks: AsyncIterable[str],
    config: SplitConfig,
    chunk_count: int | None = None,
) -> AsyncIterator[list[str]]:
    """Asynchronous counterpart of :func:`split_chunks`."""

    return _adrive(CarryOverSession(config, chunk_count), chunks)


__all__ = ["CarryOverSession", "asplit_chunks", "split_chunks"]
