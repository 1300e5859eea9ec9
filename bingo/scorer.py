# AoC 2021 - Bingo Solver for Day 4 (scoring)
# Created:      2026-10-18
# Modified:     2026-10-18

import logging
from dataclasses import dataclass
from typing import Iterator, Tuple

from bingo.board import BoardSession
from bingo.errors import NoWinnerError
from bingo.parser import ParsedInput

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Win:
    board_index: int
    step: int
    number: int
    score: int


def build_index(parsed: ParsedInput):
    # called number -> indices of the boards holding it
    index = {}
    for b_idx, board in enumerate(parsed.boards):
        for number in board.positions:
            index.setdefault(number, []).append(b_idx)
    return index


def play(parsed: ParsedInput) -> Iterator[Win]:
    """
    Call the numbers in order and yield every board's first win.

    Wins come out ordered by step, and by board index within a step. Each call
    starts from unmarked boards, and nothing past the last consumed win is
    simulated.
    """
    sessions = [BoardSession(board) for board in parsed.boards]
    index = build_index(parsed)
    finished = set()

    for step, number in enumerate(parsed.called_numbers):
        for b_idx in index.get(number, ()):
            if b_idx in finished:
                continue
            session = sessions[b_idx]
            if session.call(number):
                finished.add(b_idx)
                win = Win(b_idx, step, number, session.unmarked_sum() * number)
                logger.debug("board %d won on step %d (number %d), score %d",
                             b_idx, step, number, win.score)
                yield win


def part_one(parsed: ParsedInput) -> int:
    win = next(play(parsed), None)
    if win is None:
        raise NoWinnerError(1, len(parsed.called_numbers), len(parsed.boards))
    logger.debug("first winner: board %d", win.board_index)
    return win.score


def part_two(parsed: ParsedInput) -> int:
    last = None
    for win in play(parsed):
        # wins arrive in (step, index) order, so only a later step replaces
        if last is None or win.step > last.step:
            last = win
    if last is None:
        raise NoWinnerError(2, len(parsed.called_numbers), len(parsed.boards))
    logger.debug("last winner: board %d", last.board_index)
    return last.score


def solve(parsed: ParsedInput) -> Tuple[int, int]:
    return part_one(parsed), part_two(parsed)
