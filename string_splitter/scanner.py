"""Single-pass scan that cuts a buffer into parts at splitter matches.

The scanner walks ``buffer`` once from left to right. At each position it
first tests the delimiters (opening markers while outside a delimited
region, closing markers inside one), then, outside delimited regions, the
splitters. Both lists are tested in declared order and the first match
wins.

With ``allow_carry_over`` the scan only decides positions at which every
configured marker fits inside the buffer. Text from the start of the
current part onwards is handed back as ``leftover`` so the caller can
prepend it to the next chunk and scan it again with more context. A part
always starts outside a delimited region, so re-scanning the leftover from a
clean state reproduces the decisions of a scan over the whole text.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from string_splitter.options import SplitConfig
from string_splitter.patterns import CompiledPattern, CompiledPatterns, compile_patterns

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PartsResult:
    """Parts completed by one scan plus any text left undecided."""

    parts: tuple[str, ...]
    leftover: str | None = None


@dataclass
class ScanState:
    position: int = 0
    delimited: bool = False
    slice_start: int = 0
    parts: list[str] = field(default_factory=list)


def _matcher(buffer: str, legacy_boundary: bool):
    """Return a match predicate honouring the configured boundary rule."""

    size = len(buffer)
    if not legacy_boundary:
        return lambda p, i: p.matches(buffer, i)
    # Legacy rule: a match must end strictly before the end of the buffer.
    return lambda p, i: i + len(p) < size and p.matches(buffer, i)


def _decision_limit(buffer: str, patterns: CompiledPatterns, allow_carry_over: bool) -> int:
    """Return the first position the scan must not decide."""

    if not allow_carry_over or patterns.legacy_boundary:
        return len(buffer)
    return len(buffer) - patterns.max_length + 1


def _first(candidates, matches, position: int) -> CompiledPattern | None:
    return next((p for p in candidates if matches(p, position)), None)


def _capture(
    state: ScanState, buffer: str, patterns: CompiledPatterns, splitter: CompiledPattern
) -> None:
    """Append the part ending at ``splitter`` and move past it."""

    end = state.position + len(splitter)
    stop = state.position if patterns.remove_splitters else end
    state.parts.append(patterns.trim(buffer[state.slice_start : stop]))
    state.slice_start = end
    state.position = end


def scan(
    buffer: str,
    patterns: CompiledPatterns | SplitConfig,
    allow_carry_over: bool = False,
) -> PartsResult:
    """Split ``buffer`` into parts according to ``patterns``.

    ``patterns`` may be a :class:`SplitConfig`, in which case it is compiled
    for this call. When ``allow_carry_over`` is false the unconsumed
    remainder becomes the final part; otherwise it is returned as
    ``leftover``.
    """

    compiled = compile_patterns(patterns) if isinstance(patterns, SplitConfig) else patterns
    matches = _matcher(buffer, compiled.legacy_boundary)
    limit = _decision_limit(buffer, compiled, allow_carry_over)
    state = ScanState()

    while state.position < limit:
        i = state.position
        delimiter = _first((d.pattern(state.delimited) for d in compiled.delimiters), matches, i)
        if delimiter is not None:
            state.position += len(delimiter)
            state.delimited = not state.delimited
            continue
        if state.delimited:
            state.position += 1
            continue
        splitter = _first(compiled.splitters, matches, i)
        if splitter is None:
            state.position += 1
            continue
        _capture(state, buffer, compiled, splitter)

    remainder = buffer[state.slice_start :]
    if allow_carry_over:
        if remainder:
            logger.debug("scan: deferring %d chars to the next chunk", len(remainder))
        return PartsResult(tuple(state.parts), remainder or None)
    if remainder:
        state.parts.append(compiled.trim(remainder))
    logger.debug("scan: %d chars -> %d parts", len(buffer), len(state.parts))
    return PartsResult(tuple(state.parts))


__all__ = ["PartsResult", "ScanState", "scan"]
