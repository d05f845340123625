"""
Game phase derivation for Minesweeper.

The phase is never stored: it is read off the board contents, so a
board snapshot always carries its own phase.
"""
from enum import Enum, auto

from .board import Board
from .errors import TerminalStateError


class GamePhase(Enum):
    """Possible phases of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()

    @property
    def is_terminal(self) -> bool:
        """Won and lost games accept no further commands."""
        return self is not GamePhase.PLAYING


def derive_phase(board: Board) -> GamePhase:
    """
    Derive the current phase from the board.

    Lost if any mine is revealed, won if every non-mine cell is
    revealed, playing otherwise. Mines need not be flagged to win.
    """
    all_safe_revealed = True
    for _, _, cell in board.cells():
        if cell.is_mine:
            if cell.is_revealed:
                return GamePhase.LOST
        elif not cell.is_revealed:
            all_safe_revealed = False

    if all_safe_revealed:
        return GamePhase.WON
    return GamePhase.PLAYING


def is_terminal(phase: GamePhase) -> bool:
    """Check if phase is won or lost."""
    return phase.is_terminal


def require_playing(board: Board) -> None:
    """
    Ensure the board still accepts commands.

    Raises:
        TerminalStateError: If the game is already won or lost.
    """
    phase = derive_phase(board)
    if phase.is_terminal:
        raise TerminalStateError(f"Game is over ({phase.name.lower()})")


def hidden_count(board: Board) -> int:
    """Count cells that are not revealed (flagged cells included)."""
    return sum(1 for _, _, cell in board.cells() if not cell.is_revealed)
