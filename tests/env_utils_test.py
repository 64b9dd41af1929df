import pytest

from string_splitter.env_utils import debug_logging, env_flag


@pytest.mark.parametrize(
    "value,expected",
    [
        (None, False),
        ("true", True),
        ("1", True),
        (" Yes ", True),
        ("false", False),
        ("0", False),
        ("off", False),
    ],
)
def test_debug_logging(monkeypatch, value, expected):
    if value is None:
        monkeypatch.delenv("STRING_SPLITTER_DEBUG", raising=False)
    else:
        monkeypatch.setenv("STRING_SPLITTER_DEBUG", value)
    assert debug_logging() is expected


def test_env_flag_default(monkeypatch):
    monkeypatch.delenv("STRING_SPLITTER_UNSET", raising=False)
    assert env_flag("STRING_SPLITTER_UNSET", default=True) is True
