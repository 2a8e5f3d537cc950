import pytest

from aoc2108 import EXAMPLE
from decoder import count_unique, decode_line, decode_output, sum_outputs
from errors import MalformedLineError, UnknownPatternError
from patterns import parse_line, read_lines
from solver import solve

LINE = "acedgfb cdfbe gcdfa fbcad dab cefabd cdfgeb eafb cagedb ab | cdfeb fcadb cdfeb cdbaf"


def test_decode_line():
    assert decode_line(LINE) == 5353


def test_decode_output_with_leading_zero():
    cipher, _ = parse_line(LINE)
    decoding = solve(cipher)
    outputs = [frozenset(p) for p in ("cagedb", "ab", "cagedb", "eafb")]
    assert decode_output(outputs, decoding) == 104


def test_decode_output_unknown_pattern():
    cipher, _ = parse_line(LINE)
    decoding = solve(cipher)
    outputs = [frozenset(p) for p in ("ab", "ab", "abc", "ab")]
    with pytest.raises(UnknownPatternError):
        decode_output(outputs, decoding)


def test_decode_example_lines():
    lines = EXAMPLE.splitlines()
    assert decode_line(lines[0]) == 8394
    assert decode_line(lines[1]) == 9781


def test_sum_two_lines():
    assert sum_outputs(read_lines(EXAMPLE.splitlines()[:2])) == 18175


def test_count_unique_example():
    assert count_unique(read_lines(EXAMPLE.splitlines())) == 26


def test_sum_outputs_example():
    assert sum_outputs(read_lines(EXAMPLE.splitlines())) == 61229


def test_count_unique_single_line():
    assert count_unique([parse_line(LINE)]) == 0


def test_aggregation_fails_fast():
    lines = EXAMPLE.splitlines()
    lines.insert(1, "ab | cd")
    with pytest.raises(MalformedLineError):
        sum_outputs(read_lines(lines))


def test_decode_output_accepts_plain_sets():
    cipher, _ = parse_line(LINE)
    decoding = solve(cipher)
    outputs = [set("cdfeb"), set("fcadb"), set("cdfeb"), set("cdbaf")]
    assert decode_output(outputs, decoding) == 5353


def test_decode_output_unknown_plain_set():
    cipher, _ = parse_line(LINE)
    decoding = solve(cipher)
    with pytest.raises(UnknownPatternError):
        decode_output([set("ab"), set("ab"), set("abc"), set("ab")], decoding)
