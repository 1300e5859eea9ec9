# AoC 2021 - Bingo Solver for Day 4 (command line)
# Created:      2026-10-18
# Modified:     2026-10-18

import argparse
import logging
import sys

from bingo.config import DEFAULT_INPUT, LOG_FORMAT
from bingo.errors import NoWinnerError, ParseError, InputUnavailableError
from bingo.parser import parse_file
from bingo.scorer import part_one, part_two

logger = logging.getLogger("bingo")


def main(argv=None):
    parser = argparse.ArgumentParser(prog="bingo", description="Score the first and last bingo boards to win")
    parser.add_argument("input_file", nargs="?", default=DEFAULT_INPUT,
                        help=f"puzzle input (default: {DEFAULT_INPUT})")
    parser.add_argument("-v", "--verbose", action="store_true", help="log the simulation")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format=LOG_FORMAT, stream=sys.stderr)

    try:
        parsed = parse_file(args.input_file)
    except (InputUnavailableError, ParseError) as exc:
        logger.error("%s", exc)
        return 1

    for part, solver in ((1, part_one), (2, part_two)):
        try:
            print(f'Part {part}: {solver(parsed)}')
        except NoWinnerError as exc:
            logger.warning("part %d: %s", part, exc)
            print(f'Part {part}: incomplete')

    return 0


if __name__ == '__main__':
    sys.exit(main())
