"""Immutable split configuration and the delimiter variants it carries."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any, Union

from string_splitter.errors import ConfigError


@dataclass(frozen=True)
class Symmetric:
    """A delimiter that opens and closes with the same ``marker``."""

    marker: str

    @property
    def opening(self) -> str:
        return self.marker

    @property
    def closing(self) -> str:
        return self.marker


@dataclass(frozen=True)
class Paired:
    """A delimiter with distinct ``opening`` and ``closing`` markers."""

    opening: str
    closing: str


Delimiter = Union[Symmetric, Paired]


def as_delimiter(value: Any) -> Delimiter:
    """Normalise a raw string or two-item sequence into a delimiter variant."""

    if isinstance(value, (Symmetric, Paired)):
        return value
    if isinstance(value, str):
        return Symmetric(value)
    if isinstance(value, Sequence) and len(value) == 2 and all(isinstance(v, str) for v in value):
        opening, closing = value
        return Paired(opening, closing)
    raise ConfigError(f"Invalid delimiter: {value!r}")


@dataclass(frozen=True)
class SplitConfig:
    """Resolved configuration shared by every scan of one split operation."""

    splitters: tuple[str, ...]
    delimiters: tuple[Delimiter, ...] = ()
    remove_splitters: bool = True
    trim_parts: bool = False
    legacy_boundary: bool = False

    @classmethod
    def build(
        cls,
        splitters: Iterable[str],
        delimiters: Iterable[Any] | None = None,
        *,
        remove_splitters: bool = True,
        trim_parts: bool = False,
        legacy_boundary: bool = False,
    ) -> SplitConfig:
        """Instantiate a config from loosely typed caller arguments."""

        if isinstance(splitters, str):
            raise ConfigError("splitters must be a sequence of strings, not a string")
        if isinstance(delimiters, str):
            raise ConfigError("delimiters must be a sequence, not a string")
        return cls(
            tuple(splitters),
            tuple(as_delimiter(d) for d in (delimiters or ())),
            bool(remove_splitters),
            bool(trim_parts),
            bool(legacy_boundary),
        )


__all__ = ["Delimiter", "Paired", "SplitConfig", "Symmetric", "as_delimiter"]
