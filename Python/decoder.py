import logging
from functools import reduce

from errors import UnknownPatternError
from patterns import format_segment_set, parse_line
from segments import lookup_unique
from solver import solve

logger = logging.getLogger(__name__)


def decode_output(outputs, decoding):
    """Read the four output patterns as one decimal number"""
    try:
        digits = [decoding[frozenset(pattern)] for pattern in outputs]
    except KeyError as e:
        raise UnknownPatternError("output pattern {} is not among the signal patterns".format(
            format_segment_set(e.args[0]))) from None
    return reduce(lambda number, digit: number * 10 + digit, digits, 0)


def decode_line(line):
    cipher, outputs = parse_line(line)
    return decode_output(outputs, solve(cipher))


def count_unique(entries):
    """Part 1: how many output patterns are identified by their size alone"""
    count = 0
    n_lines = 0
    for _cipher, outputs in entries:
        count += sum(1 for pattern in outputs if lookup_unique(pattern) is not None)
        n_lines += 1
    logger.info("counted %d uniquely sized outputs in %d lines", count, n_lines)
    return count


def sum_outputs(entries):
    """Part 2: the sum of all decoded output numbers"""
    total = 0
    n_lines = 0
    for cipher, outputs in entries:
        total += decode_output(outputs, solve(cipher))
        n_lines += 1
    logger.info("decoded %d lines, total %d", n_lines, total)
    return total
