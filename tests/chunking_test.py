import pytest

from string_splitter import ConfigError, chunk


@pytest.mark.parametrize(
    "text,size,expected",
    [
        ("abcdefg", 3, ["abc", "def", "g"]),
        ("abcdef", 3, ["abc", "def"]),
        ("abc", 5, ["abc"]),
        ("abc", 1, ["a", "b", "c"]),
        ("", 3, []),
    ],
)
def test_chunk(text, size, expected):
    assert chunk(text, size) == expected


def test_chunks_rejoin_to_input():
    text = "héllo wörld, €uro\n" * 7
    assert "".join(chunk(text, 4)) == text
    assert all(len(piece) <= 4 for piece in chunk(text, 4))


@pytest.mark.parametrize("size", [0, -1, True, 1.5, None])
def test_chunk_rejects_non_positive_sizes(size):
    with pytest.raises(ConfigError, match="chunk size"):
        chunk("abc", size)
