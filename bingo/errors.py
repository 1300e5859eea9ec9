# AoC 2021 - Bingo Solver for Day 4 (errors)
# Created:      2026-10-18
# Modified:     2026-10-18


class BingoError(Exception):
    """Base class for everything the solver raises."""


class InputUnavailableError(BingoError):
    """The input file could not be opened or read."""

    def __init__(self, path, reason=None):
        self.path = str(path)
        self.reason = reason
        msg = f"cannot read input file '{self.path}'"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class ParseError(BingoError):
    """Error parsing the puzzle input."""


class MalformedInputError(ParseError, ValueError):
    """The input does not follow the called-numbers / boards layout."""

    def __init__(self, message: str, line_no: int | None = None, line: str | None = None):
        self.line_no = line_no
        self.line = line
        if line_no is not None:
            message = f"line {line_no}: {message}"
        if line is not None:
            message += f" ({line!r})"
        super().__init__(message)


class NoWinnerError(BingoError):
    """Every number was called and no board satisfied the win condition."""

    def __init__(self, part: int, num_called: int, num_boards: int):
        self.part = part
        super().__init__(
            f"no board won after {num_called} called numbers across {num_boards} boards"
        )
