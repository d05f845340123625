"""
Board module for Minesweeper game.

Holds the board configuration, difficulty presets, and the grid of
cells together with neighbor, snapshot and rendering helpers. Game
rules live in the generator, reveal, flags and state modules.
"""
import copy
import numbers
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Tuple

import numpy as np

from .cell import Cell, CellState
from .errors import InvalidConfigError, OutOfBoundsError


Position = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        mine_count: Total mines to place.
    """

    rows: int = 9
    cols: int = 9
    mine_count: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        for name in ("rows", "cols", "mine_count"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise InvalidConfigError(
                    f"{name} must be an integer, got {value!r}"
                )
        if self.rows < 1 or self.cols < 1:
            raise InvalidConfigError("Board dimensions must be positive")
        if self.mine_count < 0:
            raise InvalidConfigError("Number of mines cannot be negative")
        max_mines = self.total_cells - 1
        if self.mine_count > max_mines:
            raise InvalidConfigError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.rows * self.cols

    @property
    def safe_cells(self) -> int:
        """Number of cells without a mine."""
        return self.total_cells - self.mine_count


# Preset difficulty levels
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(16, 30, 99)
DEFAULT = BoardConfig(12, 18, 35)

PRESETS: Dict[str, BoardConfig] = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
    "default": DEFAULT,
}


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    A fixed rows x cols grid of cells. A new board is built for every
    game; it is never resized in place.
    """

    config: BoardConfig = field(default_factory=lambda: BoardConfig())
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        if not self._grid:
            self._init_grid()

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._grid = [
            [Cell() for _ in range(self.config.cols)]
            for _ in range(self.config.rows)
        ]

    # ========================================================================
    # Dimensions and Neighbors (Low-level)
    # ========================================================================

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def cols(self) -> int:
        return self.config.cols

    @property
    def mine_count(self) -> int:
        return self.config.mine_count

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def check_bounds(self, row: int, col: int) -> None:
        """Raise OutOfBoundsError if position is outside the grid."""
        if not self.in_bounds(row, col):
            raise OutOfBoundsError(row, col, self.rows, self.cols)

    def neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Neighbors are clipped at the grid edges; there is no wraparound.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for valid neighbors.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.in_bounds(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    # ========================================================================
    # Cell Access (Mid-level)
    # ========================================================================

    def cell(self, row: int, col: int) -> Cell:
        """
        Get cell at position.

        Raises:
            OutOfBoundsError: If position is outside the grid.
        """
        self.check_bounds(row, col)
        return self._grid[row][col]

    def cells(self) -> Iterator[Tuple[int, int, Cell]]:
        """Iterate over (row, col, cell) in row-major order."""
        for row, line in enumerate(self._grid):
            for col, cell in enumerate(line):
                yield row, col, cell

    def mine_positions(self) -> List[Position]:
        """Positions of every mine on the board."""
        return [(row, col) for row, col, cell in self.cells() if cell.is_mine]

    def get_valid_actions(self) -> List[Position]:
        """
        Get list of cells that a reveal would act on.

        Returns:
            List of (row, col) positions that are hidden and unflagged.
        """
        return [
            (row, col) for row, col, cell in self.cells()
            if cell.state == CellState.HIDDEN
        ]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D numpy array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.rows, self.cols), dtype=np.int8)
        for row, col, cell in self.cells():
            obs[row, col] = cell.to_observation()
        return obs

    # ========================================================================
    # Snapshots (High-level)
    # ========================================================================

    def copy(self) -> "Board":
        """Return an independent deep copy of this board."""
        return copy.deepcopy(self)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary holding the config and per-cell fields."""
        return {
            "rows": self.rows,
            "cols": self.cols,
            "mine_count": self.mine_count,
            "cells": [[cell.to_dict() for cell in line] for line in self._grid],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Board":
        """
        Rebuild a board from a snapshot produced by to_dict.

        Raises:
            InvalidConfigError: If the snapshot is malformed or
                inconsistent with its own configuration.
        """
        try:
            config = BoardConfig(data["rows"], data["cols"], data["mine_count"])
            rows_data = list(data["cells"])
        except (KeyError, TypeError) as error:
            raise InvalidConfigError(f"Malformed board snapshot: {error!r}") from error

        if len(rows_data) != config.rows or any(
            len(line) != config.cols for line in rows_data
        ):
            raise InvalidConfigError(
                f"Snapshot grid does not match {config.rows}x{config.cols}"
            )

        try:
            grid = [[Cell.from_dict(item) for item in line] for line in rows_data]
        except InvalidConfigError:
            raise
        except (KeyError, TypeError, ValueError) as error:
            raise InvalidConfigError(f"Malformed cell snapshot: {error!r}") from error
        mines = sum(cell.is_mine for line in grid for cell in line)
        if mines != config.mine_count:
            raise InvalidConfigError(
                f"Snapshot holds {mines} mines, expected {config.mine_count}"
            )
        return cls(config, grid)

    # ========================================================================
    # Rendering
    # ========================================================================

    def render(self, coordinates: bool = False, show_mines: bool = False) -> str:
        """
        Render board as ASCII string.

        Hidden cells are ".", flags "F", revealed mines "*", empty
        revealed cells a blank and numbered cells their count.

        Args:
            coordinates: Prefix rows and columns with their indices.
            show_mines: Draw hidden mines as "*" too, for an end-of-game
                view. Flagged mines keep their flag.
        """
        symbols = {-1: ".", -2: "F", 9: "*", 0: " "}
        lines = []
        width = len(str(max(self.rows, self.cols) - 1))

        if coordinates:
            header = " " * (width + 1) + " ".join(
                str(col).rjust(width) for col in range(self.cols)
            )
            lines.append(header)

        for row in range(self.rows):
            row_str = " ".join(
                symbols.get(value, str(value)).rjust(width)
                for value in (
                    9 if show_mines and cell.is_mine and cell.is_hidden
                    else cell.to_observation()
                    for cell in self._grid[row]
                )
            )
            if coordinates:
                row_str = f"{str(row).rjust(width)} {row_str}"
            lines.append(row_str)

        return "\n".join(lines)
