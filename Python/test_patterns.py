import pytest

from errors import MalformedLineError, MalformedPatternError
from patterns import format_segment_set, parse_line, parse_segment_set, read_lines

LINE = "acedgfb cdfbe gcdfa fbcad dab cefabd cdfgeb eafb cagedb ab | cdfeb fcadb cdfeb cdbaf"


def test_parse_segment_set():
    assert parse_segment_set("dab") == frozenset({"a", "b", "d"})


def test_parse_segment_set_ignores_order():
    assert parse_segment_set("cdfeb") == parse_segment_set("cdfbe")


def test_parse_segment_set_is_case_insensitive():
    assert parse_segment_set("CdFbE") == frozenset("bcdef")


def test_parse_segment_set_rejects_unknown_segment():
    with pytest.raises(MalformedPatternError):
        parse_segment_set("abh")


def test_parse_segment_set_rejects_empty_token():
    with pytest.raises(MalformedPatternError):
        parse_segment_set("")


def test_format_parse_is_idempotent():
    segments = parse_segment_set("gcdfa")
    assert format_segment_set(segments) == "acdfg"
    assert parse_segment_set(format_segment_set(segments)) == segments


def test_parse_line():
    cipher, outputs = parse_line(LINE)
    assert len(cipher) == 10
    assert cipher[0] == frozenset("abcdefg")
    assert cipher[-1] == frozenset("ab")
    assert outputs == (frozenset("bcdef"), frozenset("abcdf"), frozenset("bcdef"), frozenset("abcdf"))


def test_parse_line_tolerates_extra_whitespace():
    cipher, outputs = parse_line("  " + LINE.replace(" | ", "  |   ") + "\n")
    assert (cipher, outputs) == parse_line(LINE)


@pytest.mark.parametrize("line", [
    LINE.replace("|", ""),
    LINE + " | ab",
    "acedgfb cdfbe gcdfa fbcad dab cefabd cdfgeb eafb cagedb | cdfeb fcadb cdfeb cdbaf",
    "acedgfb cdfbe gcdfa fbcad dab cefabd cdfgeb eafb cagedb ab | cdfeb fcadb cdfeb",
    "acedgfb cdfbe gcdfa fbcad dab cefabd cdfgeb eafb cagedb ab | cdfeb fcadb cdfeb cdbaf ab",
])
def test_parse_line_rejects_wrong_shape(line):
    with pytest.raises(MalformedLineError):
        parse_line(line)


def test_parse_line_rejects_bad_pattern():
    with pytest.raises(MalformedPatternError):
        parse_line(LINE.replace("dab", "dax"))


def test_read_lines_skips_blank_lines():
    entries = list(read_lines(["", LINE, "   ", LINE]))
    assert len(entries) == 2


def test_read_lines_reports_line_number():
    with pytest.raises(MalformedLineError) as e_info:
        list(read_lines([LINE, "", "ab | cd"]))
    assert str(e_info.value).startswith("line 3:")
