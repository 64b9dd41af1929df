import logging

import pytest

from string_splitter import ConfigError, SplitConfig, compile_patterns, scan, split


def test_quoted_region_is_kept_whole():
    text = '1/ 2/ 3/ 4/ 5/ "6/ 7/ 8"/ 9/ 10'
    parts = split(text, splitters=["/"], delimiters=['"'], trim_parts=True)
    assert len(parts) == 8
    assert parts[5] == '"6/ 7/ 8"'
    assert parts == ["1", "2", "3", "4", "5", '"6/ 7/ 8"', "9", "10"]


def test_adjacent_splitters_yield_empty_part():
    assert split("a,b,,c", [","], remove_splitters=True, trim_parts=False) == [
        "a",
        "b",
        "",
        "c",
    ]


def test_kept_splitters_stay_attached_to_parts():
    assert split("a,b,c", [","], remove_splitters=False) == ["a,", "b,", "c"]


def test_paired_delimiters_hide_splitters():
    assert split("a/<b/c>/d", ["/"], [("<", ">")]) == ["a", "<b/c>", "d"]


def test_mixed_delimiters_are_tried_in_order():
    text = 'k=<a;b>;q="x;y";z'
    assert split(text, [";"], ['"', ("<", ">")]) == ["k=<a;b>", 'q="x;y"', "z"]


@pytest.mark.parametrize(
    "splitters,expected",
    [
        (["a", "ab"], ["x", "by"]),
        (["ab", "a"], ["x", "y"]),
    ],
)
def test_first_declared_splitter_wins(splitters, expected):
    assert split("xaby", splitters) == expected


def test_unclosed_delimiter_suppresses_rest_of_text():
    assert split('a,"b,c', [","], ['"']) == ["a", '"b,c']


def test_trim_parts():
    assert split(" a , b ,\tc\n", [","], trim_parts=True) == ["a", "b", "c"]


def test_whitespace_remainder_trims_to_empty_part():
    assert split("a,  ", [","], trim_parts=True) == ["a", ""]


def test_empty_text_has_no_parts():
    assert split("", [","]) == []
    assert scan("", SplitConfig((",",))).parts == ()


def test_text_without_splitters_is_one_part():
    assert split("abc", [","]) == ["abc"]


def test_multi_character_markers():
    assert split("one\r\ntwo\nthree", ["\r\n", "\n"]) == ["one", "two", "three"]
    assert split("a<<b;c>>;d", [";"], [("<<", ">>")]) == ["a<<b;c>>", "d"]


def test_splitter_at_end_of_text_is_recognised():
    assert split("a,b,", [","]) == ["a", "b"]
    assert split(",", [","]) == [""]
    assert split("a,b,", [","], remove_splitters=False) == ["a,", "b,"]


def test_legacy_boundary_ignores_splitter_at_end_of_text():
    assert split("a,b,", [","], legacy_boundary=True) == ["a", "b,"]
    assert split(",", [","], legacy_boundary=True) == [","]


def test_legacy_boundary_after_closing_delimiter():
    assert split('a,"b",', [","], ['"'], legacy_boundary=True) == ["a", '"b",']
    assert split('a,"b",', [","], ['"']) == ["a", '"b"']
    assert split('"b",c', [","], ['"'], legacy_boundary=True) == ['"b"', "c"]


def test_carry_over_returns_undecided_tail():
    cfg = SplitConfig.build([","])
    result = scan("a,b,c", cfg, allow_carry_over=True)
    assert result.parts == ("a", "b")
    assert result.leftover == "c"


def test_carry_over_without_tail_has_no_leftover():
    result = scan("a,", SplitConfig.build([","]), allow_carry_over=True)
    assert result.parts == ("a",)
    assert result.leftover is None


def test_carry_over_defers_positions_longer_markers_could_reach():
    cfg = SplitConfig.build([",", ";;"])
    result = scan("a,b,", cfg, allow_carry_over=True)
    assert result.parts == ("a",)
    assert result.leftover == "b,"


def test_carry_over_leftover_starts_before_open_delimiter():
    cfg = SplitConfig.build([","], ['"'])
    result = scan('a,"b,c', cfg, allow_carry_over=True)
    assert result.parts == ("a",)
    assert result.leftover == '"b,c'


def test_scan_accepts_compiled_patterns():
    compiled = compile_patterns(SplitConfig.build([","], trim_parts=True))
    assert scan(" a, b", compiled).parts == ("a", "b")


@pytest.mark.parametrize(
    "splitters,delimiters",
    [
        ([], None),
        ([""], None),
        ([","], [""]),
        ([","], [("<", "")]),
        ([","], [("", ">")]),
    ],
)
def test_invalid_configuration_raises(splitters, delimiters):
    cfg = SplitConfig.build(splitters, delimiters)
    with pytest.raises(ConfigError):
        scan("a,b", cfg)


@pytest.mark.parametrize("delimiter", [("<", ">", "!"), ("<",), 5, ("<", 1)])
def test_invalid_delimiter_pair_raises(delimiter):
    with pytest.raises(ConfigError, match="Invalid delimiter"):
        split("a,b", [","], [delimiter])


def test_bare_string_arguments_are_rejected():
    with pytest.raises(ConfigError):
        split("a,b", ",")
    with pytest.raises(ConfigError):
        split("a,b", [","], '"')


def test_config_error_is_a_value_error():
    with pytest.raises(ValueError):
        split("a", [])


def test_scan_logs_summary(caplog):
    caplog.set_level(logging.DEBUG, logger="string_splitter.scanner")
    split("a,b", [","])
    assert any("3 chars -> 2 parts" in rec.message for rec in caplog.records)
