# AoC 2021 - Bingo Solver for Day 4 (settings)
# Created:      2026-10-18
# Modified:     2026-10-18

# boards are square, BOARD_SIZE rows of BOARD_SIZE numbers
BOARD_SIZE = 5

DEFAULT_INPUT = "input.txt"

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
