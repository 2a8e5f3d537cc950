"""
Deduce which scrambled pattern shows which digit.

The deduction is written as a relational program: every digit is a logic
variable, and each goal binds one of them to the single cipher pattern that
satisfies a containment rule given the digits bound so far.

    1, 7, 4, 8   have unique sizes (2, 3, 4, 7)
    3            is the size-5 pattern containing 1
    9            is the size-6 pattern containing 3
    0            is the remaining size-6 pattern containing 7
    6            is the last size-6 pattern
    5            is the remaining size-5 pattern containing 4 - 1
    2            is the last size-5 pattern
"""

import itertools
import logging
from collections import Counter

from core import variables
from errors import InvalidCipherError
from goals import make_goal, membero, run, same
from patterns import format_segment_set
from segments import CIPHER_SIZES, DIGITS, SEGMENTS

logger = logging.getLogger(__name__)

DIGIT_VARS = variables("zero, one, two, three, four, five, six, seven, eight, nine")
zero, one, two, three, four, five, six, seven, eight, nine = DIGIT_VARS


@make_goal
def the_one(s, var, candidates, predicate, *args):
    """goal that binds var to the only free candidate satisfying predicate.

    The predicate receives the candidate followed by the walked args. Zero or
    several matches mean the cipher is inconsistent.
    """
    taken = s.values()
    args = [s.walk_deep(a) for a in args]
    matches = [c for c in candidates if c not in taken and predicate(c, *args)]
    if len(matches) != 1:
        raise InvalidCipherError("{} candidates for {}: {}".format(
            len(matches), var, ' '.join(map(format_segment_set, matches))))
    yield from membero(var, matches)(s)


def sizeo(var, candidates, n):
    return the_one(var, candidates, lambda p: len(p) == n)


def deduction(cipher):
    return (
        sizeo(one, cipher, 2),
        sizeo(seven, cipher, 3),
        sizeo(four, cipher, 4),
        sizeo(eight, cipher, 7),
        the_one(three, cipher, lambda p, o: len(p) == 5 and p >= o, one),
        the_one(nine, cipher, lambda p, t: len(p) == 6 and p >= t, three),
        the_one(zero, cipher, lambda p, sv: len(p) == 6 and p >= sv, seven),
        sizeo(six, cipher, 6),
        the_one(five, cipher, lambda p, f, o: len(p) == 5 and p >= f - o, four, one),
        sizeo(two, cipher, 5),
    )


def validate_cipher(cipher):
    if len(set(cipher)) != len(cipher):
        duplicates = [p for p, n in Counter(cipher).items() if n > 1]
        raise InvalidCipherError("duplicate patterns: {}".format(
            ' '.join(map(format_segment_set, duplicates))))

    sizes = tuple(sorted(map(len, cipher)))
    if sizes != CIPHER_SIZES:
        raise InvalidCipherError("pattern sizes {} do not match a seven-segment display".format(sizes))


def solve(cipher):
    """Map each of the ten cipher patterns to the digit it displays"""
    cipher = tuple(cipher)
    validate_cipher(cipher)

    patterns = next(run(1, DIGIT_VARS, *deduction(cipher)))

    for digit, pattern in enumerate(patterns):
        logger.debug("%d <- %s", digit, format_segment_set(pattern))

    return {pattern: digit for digit, pattern in enumerate(patterns)}


@make_goal
def permute_wires(s, wiring, cipher):
    """goal that succeeds for every wire permutation turning the cipher into the digit table"""
    cipher = s.walk_deep(cipher)
    digits = set(DIGITS.values())
    for perm in itertools.permutations(SEGMENTS):
        table = dict(zip(SEGMENTS, perm))
        if all(frozenset(table[w] for w in pattern) in digits for pattern in cipher):
            yield from same(wiring, perm)(s)


def solve_wiring(cipher):
    """Recover the wire permutation by trying all of them.

    Returns a mapping from each scrambled wire label to the segment it drives.
    """
    cipher = tuple(cipher)
    validate_cipher(cipher)

    wiring = variables("wiring")
    for perm in run(1, wiring, permute_wires(wiring, cipher)):
        return dict(zip(SEGMENTS, perm))
    raise InvalidCipherError("no wiring explains patterns {}".format(
        ' '.join(map(format_segment_set, cipher))))
