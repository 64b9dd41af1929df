import os

_TRUTHY = {"true", "1", "yes", "on"}


def env_flag(name: str, default: bool = False) -> bool:
    """Return the boolean value of environment variable ``name``."""
    val = os.getenv(name)
    if val is None:
        return default
    return val.strip().lower() in _TRUTHY


def debug_logging() -> bool:
    """Return True if STRING_SPLITTER_DEBUG asks for debug-level logging."""
    return env_flag("STRING_SPLITTER_DEBUG")
