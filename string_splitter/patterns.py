"""Compile configured markers into fixed-length patterns for the scanner.

Patterns are rebuilt for every scan rather than cached on the config, so a
session always matches against exactly the markers it was given.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from string_splitter.errors import ConfigError
from string_splitter.options import Delimiter, SplitConfig, as_delimiter


@dataclass(frozen=True)
class CompiledPattern:
    """A configured marker, matched code point by code point."""

    text: str

    @classmethod
    def of(cls, marker: str, *, role: str = "marker") -> CompiledPattern:
        if not isinstance(marker, str):
            raise ConfigError(f"{role} must be a string, got {type(marker).__name__}")
        if not marker:
            raise ConfigError(f"{role} must not be empty")
        return cls(marker)

    def __len__(self) -> int:
        return len(self.text)

    def matches(self, buffer: str, position: int) -> bool:
        """Return True when the pattern occurs in ``buffer`` at ``position``."""

        return buffer.startswith(self.text, position)


@dataclass(frozen=True)
class CompiledDelimiter:
    opening: CompiledPattern
    closing: CompiledPattern

    def pattern(self, delimited: bool) -> CompiledPattern:
        return self.closing if delimited else self.opening


@dataclass(frozen=True)
class CompiledPatterns:
    """Everything the scanner needs from a :class:`SplitConfig`."""

    splitters: tuple[CompiledPattern, ...]
    delimiters: tuple[CompiledDelimiter, ...]
    remove_splitters: bool
    trim_parts: bool
    legacy_boundary: bool

    @property
    def max_length(self) -> int:
        """Length of the longest marker the scanner may test at one position."""

        lengths = [len(s) for s in self.splitters]
        lengths += [len(p) for d in self.delimiters for p in (d.opening, d.closing)]
        return max(lengths)

    def trim(self, part: str) -> str:
        return part.strip() if self.trim_parts else part


def compile_splitters(splitters: Iterable[str]) -> tuple[CompiledPattern, ...]:
    compiled = tuple(CompiledPattern.of(s, role="splitter") for s in splitters)
    if not compiled:
        raise ConfigError("at least one splitter is required")
    return compiled


def compile_delimiter(delimiter: Delimiter) -> CompiledDelimiter:
    resolved = as_delimiter(delimiter)
    opening = CompiledPattern.of(resolved.opening, role="opening delimiter")
    closing = CompiledPattern.of(resolved.closing, role="closing delimiter")
    return CompiledDelimiter(opening, closing)


def compile_patterns(config: SplitConfig) -> CompiledPatterns:
    """Return compiled splitters and delimiters for ``config`` in declared order."""

    return CompiledPatterns(
        splitters=compile_splitters(config.splitters),
        delimiters=tuple(compile_delimiter(d) for d in config.delimiters),
        remove_splitters=config.remove_splitters,
        trim_parts=config.trim_parts,
        legacy_boundary=config.legacy_boundary,
    )


__all__ = [
    "CompiledDelimiter",
    "CompiledPattern",
    "CompiledPatterns",
    "compile_delimiter",
    "compile_patterns",
    "compile_splitters",
]
