"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their state
(hidden/revealed/flagged) and content (mine/number).
"""
from enum import Enum, auto
from dataclasses import dataclass
from typing import Any, Dict

from .errors import InvalidConfigError


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    A single state field keeps "revealed" and "flagged" mutually
    exclusive, and no method moves a revealed cell back to hidden.

    Attributes:
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8). Set
            once when the board is generated.
        state: Current visual state (hidden, revealed, or flagged).
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if cell was successfully revealed, False if already
            revealed or flagged.
        """
        if self.state != CellState.HIDDEN:
            return False
        self.state = CellState.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.HIDDEN
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden (neither revealed nor flagged)."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    def to_observation(self) -> int:
        """
        Convert cell to an integer observation value.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (game over state)
        """
        if self.state == CellState.HIDDEN:
            return -1
        if self.state == CellState.FLAGGED:
            return -2
        if self.is_mine:
            return 9
        return self.adjacent_mines

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for snapshots."""
        return {
            "is_mine": self.is_mine,
            "is_revealed": self.is_revealed,
            "is_flagged": self.is_flagged,
            "adjacent_mines": self.adjacent_mines,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Cell":
        """
        Rebuild a cell from a snapshot produced by to_dict.

        Raises:
            InvalidConfigError: If the snapshot marks the cell as both
                revealed and flagged, or the count is out of range.
        """
        revealed = bool(data["is_revealed"])
        flagged = bool(data["is_flagged"])
        if revealed and flagged:
            raise InvalidConfigError("Cell cannot be both revealed and flagged")

        adjacent = int(data["adjacent_mines"])
        if not 0 <= adjacent <= 8:
            raise InvalidConfigError(
                f"Adjacent mine count must be in [0, 8], got {adjacent}"
            )

        if revealed:
            state = CellState.REVEALED
        elif flagged:
            state = CellState.FLAGGED
        else:
            state = CellState.HIDDEN
        return cls(is_mine=bool(data["is_mine"]), adjacent_mines=adjacent,
                   state=state)
