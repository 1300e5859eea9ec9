# AoC 2021 - Bingo Solver for Day 4 (input parser)
# Created:      2026-10-18
# Modified:     2026-10-18

"""
Parser for the bingo input.

The first line holds the called numbers, comma separated. After that come the
boards: BOARD_SIZE lines of whitespace-separated numbers each, with blank lines
in between.

    7,4,9,5,11

    22 13 17 11  0
     8  2 23  4 24
    ...
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Tuple

from bingo.board import Board
from bingo.config import BOARD_SIZE
from bingo.errors import InputUnavailableError, MalformedInputError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParsedInput:
    called_numbers: Tuple[int, ...]
    boards: Tuple[Board, ...]


def parse_number(token: str, line_no: int, line: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise MalformedInputError(f"'{token}' is not an integer", line_no, line) from None


def parse_called_numbers(line: str) -> Tuple[int, ...]:
    if not line.strip():
        raise MalformedInputError("expected comma-separated called numbers", 1, line)
    return tuple(parse_number(token.strip(), 1, line) for token in line.split(','))


def parse_lines(lines: Iterable[str], size: int = BOARD_SIZE) -> ParsedInput:
    lines = iter(lines)

    first = next(lines, None)
    if first is None:
        raise MalformedInputError("input is empty", 1)
    called_numbers = parse_called_numbers(first.rstrip('\r\n'))

    boards = []
    rows = []
    start_line_no = None

    def close_board(line_no):
        if len(rows) != size:
            raise MalformedInputError(
                f"board starting on line {start_line_no} has {len(rows)} rows, expected {size}",
                line_no,
            )
        boards.append(Board(tuple(rows)))
        rows.clear()

    line_no = 1
    for line_no, line in enumerate(lines, start=2):
        line = line.rstrip('\r\n')
        if not line.strip():
            if rows:
                close_board(line_no)
            continue

        if not rows:
            start_line_no = line_no
        elif len(rows) == size:
            # board ran past `size` rows without a blank line
            raise MalformedInputError(
                f"board starting on line {start_line_no} has more than {size} rows", line_no, line
            )

        row = tuple(parse_number(token, line_no, line) for token in line.split())
        if len(row) != size:
            raise MalformedInputError(f"row has {len(row)} numbers, expected {size}", line_no, line)
        rows.append(row)

    if rows:
        close_board(line_no)

    logger.debug("parsed %d called numbers and %d boards", len(called_numbers), len(boards))
    return ParsedInput(called_numbers, tuple(boards))


def parse_text(text: str, size: int = BOARD_SIZE) -> ParsedInput:
    return parse_lines(text.splitlines(), size)


def parse_file(path, size: int = BOARD_SIZE) -> ParsedInput:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return parse_lines(f, size)
    except UnicodeDecodeError as exc:
        raise MalformedInputError(f"input is not valid UTF-8: {exc.reason}") from exc
    except OSError as exc:
        raise InputUnavailableError(path, exc.strerror) from exc
