from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Callable

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from string_splitter.options import SplitConfig  # noqa: E402


@pytest.fixture
def config() -> Callable[..., SplitConfig]:
    return lambda splitters, delimiters=None, **flags: SplitConfig.build(
        splitters, delimiters, **flags
    )


@pytest.fixture
def text_file(tmp_path: Path) -> Callable[..., Path]:
    def _write(content: str, encoding: str = "utf-8", name: str = "input.txt") -> Path:
        path = tmp_path / name
        path.write_bytes(content.encode(encoding))
        return path

    return _write


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer STRING_SPLITTER* variables out of the tests."""
    tuple(
        monkeypatch.delenv(key, raising=False)
        for key in list(os.environ)
        if key.upper().startswith("STRING_SPLITTER")
    )
