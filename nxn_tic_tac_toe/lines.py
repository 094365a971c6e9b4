"""Winning line enumeration.

A winning line is a run of ``min_run`` contiguous cells along a row, a column,
a down-right diagonal or a down-left diagonal. Runs longer than ``min_run``
contribute one line per starting offset.

Lines are returned in generation order: rows, columns, down-right diagonals,
down-left diagonals, each in increasing offset/start order. The game engine
relies on this order to decide which line is reported when several lines are
completed by the same move.
"""

import logging
from itertools import chain

from nxn_tic_tac_toe.board import Line
from nxn_tic_tac_toe.exception import ConfigError

logger = logging.getLogger(__name__)


def validate_config(board_size: int, min_run: int) -> None:
    if board_size <= 0:
        msg = f"Board size must be positive, got {board_size}."
        raise ConfigError(msg)
    if min_run <= 0:
        msg = f"Minimum run must be positive, got {min_run}."
        raise ConfigError(msg)
    if min_run > board_size:
        msg = f"Minimum run ({min_run}) can't be larger than the board size ({board_size})."
        raise ConfigError(msg)


def row_lines(board_size: int, min_run: int) -> list[Line]:
    return [
        tuple((row, col + i) for i in range(min_run))
        for row in range(board_size)
        for col in range(board_size - min_run + 1)
    ]


def column_lines(board_size: int, min_run: int) -> list[Line]:
    return [
        tuple((row + i, col) for i in range(min_run))
        for col in range(board_size)
        for row in range(board_size - min_run + 1)
    ]


def diagonal_lines(board_size: int, min_run: int) -> list[Line]:
    """Down-right runs, grouped by the constant ``col - row`` offset."""
    lines: list[Line] = []
    span = board_size - min_run
    for offset in range(-span, span + 1):
        first_row = max(0, -offset)
        length = board_size - abs(offset)
        for start in range(length - min_run + 1):
            row = first_row + start
            col = row + offset
            lines.append(tuple((row + i, col + i) for i in range(min_run)))
    return lines


def anti_diagonal_lines(board_size: int, min_run: int) -> list[Line]:
    """Down-left runs, grouped by the constant ``row + col`` sum."""
    lines: list[Line] = []
    last = board_size - 1
    for total in range(min_run - 1, 2 * board_size - min_run):
        first_row = max(0, total - last)
        length = min(total, 2 * last - total) + 1
        for start in range(length - min_run + 1):
            row = first_row + start
            col = total - row
            lines.append(tuple((row + i, col - i) for i in range(min_run)))
    return lines


def generate_lines(board_size: int, min_run: int) -> tuple[Line, ...]:
    """Return every winning line of the board, deduplicated, in generation order.

    Raises:
        ConfigError: if the board size or the minimum run is invalid.
    """
    validate_config(board_size, min_run)

    candidates = chain(
        row_lines(board_size, min_run),
        column_lines(board_size, min_run),
        diagonal_lines(board_size, min_run),
        anti_diagonal_lines(board_size, min_run),
    )
    # dict keeps the first occurrence of each canonical line
    lines = tuple(dict.fromkeys(tuple(sorted(line)) for line in candidates))

    logger.debug(
        "Generated %d winning lines for a %dx%d board (min run %d)", len(lines), board_size, board_size, min_run
    )
    return lines
