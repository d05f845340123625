"""
Reveal logic for Minesweeper.

Implements the flood-fill reveal: opening a cell with no adjacent
mines opens its whole connected zero region plus the numbered cells
bordering it.
"""
import logging
from typing import List, NamedTuple, Set

from .board import Board, Position
from .state import GamePhase, derive_phase, require_playing


logger = logging.getLogger(__name__)


class RevealResult(NamedTuple):
    """Board after a reveal, and the phase it left the game in."""

    board: Board
    phase: GamePhase


def flood_fill(board: Board, row: int, col: int) -> List[Position]:
    """
    Reveal the region connected to (row, col).

    Uses an explicit stack and a visited set, so every cell is handled
    at most once and large boards do not hit the recursion limit.
    Cells with a nonzero count are revealed but do not expand.

    Returns:
        Positions revealed by this call, in the order they were opened.
    """
    stack: List[Position] = [(row, col)]
    visited: Set[Position] = set()
    opened: List[Position] = []

    while stack:
        position = stack.pop()
        if position in visited:
            continue
        visited.add(position)

        cell = board.cell(*position)
        if not cell.reveal():
            continue
        opened.append(position)

        if cell.adjacent_mines == 0 and not cell.is_mine:
            for neighbor in board.neighbors(*position):
                neighbor_cell = board.cell(*neighbor)
                if neighbor_cell.is_hidden and neighbor not in visited:
                    stack.append(neighbor)

    return opened


def reveal(board: Board, row: int, col: int) -> RevealResult:
    """
    Reveal a cell at the given position.

    The board is updated in place and returned with the resulting
    phase. Revealing a flagged or already revealed cell changes
    nothing. Revealing a mine opens only that one cell and loses the
    game; the other mines stay hidden.

    Args:
        board: Board to act on.
        row: Row index to reveal.
        col: Column index to reveal.

    Returns:
        RevealResult with the board and its phase after the reveal.

    Raises:
        OutOfBoundsError: If the position is outside the grid.
        TerminalStateError: If the game is already won or lost.
    """
    cell = board.cell(row, col)
    require_playing(board)

    if not cell.is_hidden:
        logger.debug("Reveal of (%d, %d) ignored: cell is %s",
                     row, col, cell.state.name.lower())
        return RevealResult(board, GamePhase.PLAYING)

    if cell.is_mine:
        cell.reveal()
        logger.debug("Mine revealed at (%d, %d); game lost", row, col)
        return RevealResult(board, GamePhase.LOST)

    opened = flood_fill(board, row, col)
    phase = derive_phase(board)
    logger.debug("Reveal of (%d, %d) opened %d cells; phase %s",
                 row, col, len(opened), phase.name)
    return RevealResult(board, phase)
