"""Split text at marker sequences, in one pass or chunk by chunk."""

from string_splitter.carry_over import CarryOverSession, asplit_chunks, split_chunks
from string_splitter.chunking import chunk
from string_splitter.errors import ConfigError
from string_splitter.options import Delimiter, Paired, SplitConfig, Symmetric
from string_splitter.patterns import CompiledPatterns, compile_patterns
from string_splitter.scanner import PartsResult, scan
from string_splitter.splitter import split, split_stream

__all__ = [
    "CarryOverSession",
    "CompiledPatterns",
    "ConfigError",
    "Delimiter",
    "Paired",
    "PartsResult",
    "SplitConfig",
    "Symmetric",
    "asplit_chunks",
    "chunk",
    "compile_patterns",
    "scan",
    "split",
    "split_chunks",
    "split_stream",
]
