# AoC 2021 - Bingo Solver for Day 4
# Created:      2026-10-18
# Modified:     2026-10-18

from bingo.board import Board, BoardSession
from bingo.errors import (
    BingoError,
    InputUnavailableError,
    MalformedInputError,
    NoWinnerError,
    ParseError,
)
from bingo.parser import ParsedInput, parse_file, parse_lines, parse_text
from bingo.scorer import Win, part_one, part_two, play, solve

__all__ = [
    "Board",
    "BoardSession",
    "BingoError",
    "InputUnavailableError",
    "MalformedInputError",
    "NoWinnerError",
    "ParseError",
    "ParsedInput",
    "parse_file",
    "parse_lines",
    "parse_text",
    "Win",
    "part_one",
    "part_two",
    "play",
    "solve",
]
