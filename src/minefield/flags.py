"""Flag management for Minesweeper."""
import logging

from .board import Board
from .state import derive_phase


logger = logging.getLogger(__name__)


def toggle_flag(board: Board, row: int, col: int) -> Board:
    """
    Toggle the flag on a hidden cell.

    Flagging a revealed cell, or any cell once the game is over, does
    nothing. No other cell and no game phase is affected.

    Raises:
        OutOfBoundsError: If the position is outside the grid.
    """
    cell = board.cell(row, col)

    phase = derive_phase(board)
    if phase.is_terminal:
        logger.debug("Flag at (%d, %d) ignored: game %s",
                     row, col, phase.name.lower())
        return board

    if not cell.toggle_flag():
        logger.debug("Flag at (%d, %d) ignored: cell revealed", row, col)
    return board


def flag_count(board: Board) -> int:
    """Count flagged cells."""
    return sum(1 for _, _, cell in board.cells() if cell.is_flagged)
