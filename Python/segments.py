"""
The seven-segment display.

      aaaa
     b    c
     b    c
      dddd
     e    f
     e    f
      gggg

Every digit lights a fixed set of segments. The table never changes; only the
wiring between signal wires and segments is scrambled.
"""

from collections import Counter

SEGMENTS = "abcdefg"

DIGITS = {
    0: frozenset("abcefg"),
    1: frozenset("cf"),
    2: frozenset("acdeg"),
    3: frozenset("acdfg"),
    4: frozenset("bcdf"),
    5: frozenset("abdfg"),
    6: frozenset("abdefg"),
    7: frozenset("acf"),
    8: frozenset("abcdefg"),
    9: frozenset("abcdfg"),
}

CIPHER_SIZES = tuple(sorted(len(segs) for segs in DIGITS.values()))


def _unique_sizes(digits):
    sizes = Counter(len(segs) for segs in digits.values())
    return {len(segs): d for d, segs in digits.items() if sizes[len(segs)] == 1}


# {2: 1, 3: 7, 4: 4, 7: 8}; sizes 5 and 6 are shared by three digits each
UNIQUE_SIZES = _unique_sizes(DIGITS)


def lookup_unique(segments):
    """Digit identified by the number of lit segments alone, or None"""
    return UNIQUE_SIZES.get(len(segments))
