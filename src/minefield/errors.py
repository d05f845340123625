"""
Error types raised by the Minesweeper engine.

All errors are local and recoverable: callers are expected to catch
them and either ignore them or show a message to the player.
"""


class MinesweeperError(Exception):
    """Base class for all engine errors."""


class InvalidConfigError(MinesweeperError, ValueError):
    """Board construction parameters are invalid."""


class OutOfBoundsError(MinesweeperError, IndexError):
    """A row/column pair lies outside the grid."""

    def __init__(self, row: int, col: int, rows: int, cols: int) -> None:
        super().__init__(
            f"Position ({row}, {col}) is outside the {rows}x{cols} board"
        )
        self.row = row
        self.col = col


class TerminalStateError(MinesweeperError):
    """A mutating command was issued after the game was won or lost."""
