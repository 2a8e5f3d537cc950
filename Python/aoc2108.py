# https://adventofcode.com/2021/day/8

import argparse
import logging
import sys

from decoder import count_unique, sum_outputs
from errors import DecodeError
from patterns import read_lines

EXAMPLE = """be cfbegad cbdgef fgaecd cgeb fdcge agebfd fecdb fabcd edb | fdgacbe cefdb cefbgd gcbe
edbfga begcd cbg gc gcadebf fbgde acbgfd abcde gfcbed gfec | fcgedb cgb dgebacf gc
fgaebd cg bdaec gdafb agbcfd gdcbef bgcad gfac gcb cdgabef | cg cg fdcagb cbg
fbegcd cbd adcefb dageb afcb bc aefdc ecdab fgdeca fcdbega | efabcd cedba gadfec cb
aecbfdg fbg gf bafeg dbefa fcge gcbea fcaegb dgceab fcbdga | gecf egdcabf bgf bfgea
fgeab ca afcebg bdacfeg cfaedg gcfdb baec bfadeg bafgc acf | gebdcfa ecba ca fadegcb
dbcfg fgd bdegcaf fgec aegbdf ecdfab fbedc dacgb gdcebf gf | cefg dcbef fcge gbcadfe
bdfegc cbegaf gecbf dfcage bdacg ed bedf ced adcbefg gebcd | ed bcgafe cdgba cbgef
egadfb cdbfeg cegd fecab cgb gbdefca cg fgcdab egfdb bfceg | gbdfcae bgc cg cgb
gcafb gcf dcaebfg ecagb gf abcdeg gaef cafbge fdbac fegbdc | fgae cfgab fg bagce"""


def parse_args(argv):
    parser = argparse.ArgumentParser(description="Decode scrambled seven-segment displays.")
    parser.add_argument("input", nargs="?", default="-",
                        help="puzzle input file, '-' for stdin (default)")
    parser.add_argument("--example", action="store_true",
                        help="use the example from the puzzle text instead of an input file")
    parser.add_argument("--part", type=int, choices=(1, 2),
                        help="only run one part")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def load(args):
    if args.example:
        return EXAMPLE.splitlines()
    if args.input == "-":
        return sys.stdin.read().splitlines()
    with open(args.input) as f:
        return f.read().splitlines()


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        entries = list(read_lines(load(args)))
        if args.part in (None, 1):
            print(count_unique(entries))
        if args.part in (None, 2):
            print(sum_outputs(entries))
    except (DecodeError, OSError, UnicodeDecodeError) as e:
        print("error: {}".format(e), file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
