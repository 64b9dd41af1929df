"""Exception types raised by :mod:`string_splitter`."""

from __future__ import annotations


class ConfigError(ValueError):
    """Raised when splitter, delimiter or chunk configuration is unusable."""


__all__ = ["ConfigError"]
