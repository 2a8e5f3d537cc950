from errors import DecodeError, MalformedLineError, MalformedPatternError
from segments import SEGMENTS

N_CIPHER = 10
N_OUTPUT = 4


def parse_segment_set(token):
    """Turn a pattern like "cdfbe" into the set of segments it lights"""
    if not token:
        raise MalformedPatternError("empty pattern")
    segments = frozenset(token.lower())
    bad = segments.difference(SEGMENTS)
    if bad:
        raise MalformedPatternError(
            "invalid segment(s) {} in pattern {!r}".format(''.join(sorted(bad)), token))
    return segments


def format_segment_set(segments):
    return ''.join(sorted(segments))


def parse_line(line):
    parts = line.split('|')
    if len(parts) != 2:
        raise MalformedLineError("expected exactly one '|' in {!r}".format(line))

    cipher, outputs = (tuple(map(parse_segment_set, part.split())) for part in parts)

    if len(cipher) != N_CIPHER:
        raise MalformedLineError("expected {} signal patterns, got {}".format(N_CIPHER, len(cipher)))
    if len(outputs) != N_OUTPUT:
        raise MalformedLineError("expected {} output patterns, got {}".format(N_OUTPUT, len(outputs)))

    return cipher, outputs


def read_lines(lines):
    """Parse raw input lines into (cipher, outputs) pairs, skipping blank lines.

    Errors are re-raised with the line number in front of the message.
    """
    for number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            yield parse_line(line)
        except DecodeError as e:
            raise type(e)("line {}: {}".format(number, e)) from e
