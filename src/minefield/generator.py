"""
Board generation for Minesweeper.

Places mines at distinct random positions and computes each cell's
adjacent-mine count. The random source is always passed in, so a
seeded generator reproduces the same layout.
"""
import logging
from enum import Enum, auto
from typing import Iterable, List, Set

import numpy as np

from .board import Board, BoardConfig, Position
from .errors import InvalidConfigError


logger = logging.getLogger(__name__)


class MinePlacement(Enum):
    """
    Strategies for choosing mine positions.

    REJECTION draws random cells until enough distinct ones are found.
    It needs more and more draws as the density approaches 1. SHUFFLE
    takes a prefix of a random permutation and does bounded work at
    any density. Both pick every mine set with equal probability.
    """

    REJECTION = auto()
    SHUFFLE = auto()


# ============================================================================
# Mine Placement (Low-level)
# ============================================================================

def _sample_rejection(config: BoardConfig, rng: np.random.Generator) -> List[Position]:
    """Draw random cells, skipping repeats, until mine_count are chosen."""
    chosen: Set[int] = set()
    draws = 0
    while len(chosen) < config.mine_count:
        chosen.add(int(rng.integers(config.total_cells)))
        draws += 1
    logger.debug(
        "Placed %d mines in %d draws", config.mine_count, draws
    )
    return [divmod(index, config.cols) for index in chosen]


def _sample_shuffle(config: BoardConfig, rng: np.random.Generator) -> List[Position]:
    """Take the first mine_count entries of a random permutation."""
    indices = rng.permutation(config.total_cells)[:config.mine_count]
    return [divmod(int(index), config.cols) for index in indices]


def compute_adjacency(board: Board) -> None:
    """
    Calculate adjacent mine counts for all non-mine cells.

    Called once, right after mines are placed. Mine cells keep a count
    of 0; their count is never read by the game rules.
    """
    for row, col, cell in board.cells():
        if cell.is_mine:
            continue
        cell.adjacent_mines = sum(
            1 for neighbor_row, neighbor_col in board.neighbors(row, col)
            if board.cell(neighbor_row, neighbor_col).is_mine
        )


# ============================================================================
# Board Construction (High-level)
# ============================================================================

def board_from_mines(config: BoardConfig, mines: Iterable[Position]) -> Board:
    """
    Build a board with mines at the given positions.

    Args:
        config: Board configuration; mine_count must match the number
            of positions.
        mines: Distinct (row, col) positions of the mines.

    Returns:
        New board with adjacency counts filled in.

    Raises:
        InvalidConfigError: If a position is out of range, repeated, or
            the number of positions differs from config.mine_count.
    """
    positions = [(int(row), int(col)) for row, col in mines]
    if len(set(positions)) != len(positions):
        raise InvalidConfigError("Mine positions must be distinct")
    if len(positions) != config.mine_count:
        raise InvalidConfigError(
            f"Expected {config.mine_count} mine positions, got {len(positions)}"
        )

    board = Board(config)
    for row, col in positions:
        if not board.in_bounds(row, col):
            raise InvalidConfigError(
                f"Mine position ({row}, {col}) is outside the board"
            )
        board.cell(row, col).is_mine = True

    compute_adjacency(board)
    return board


def create_board(
    config: BoardConfig,
    rng: np.random.Generator,
    strategy: MinePlacement = MinePlacement.REJECTION,
) -> Board:
    """
    Create a board with randomly placed mines.

    Args:
        config: Board configuration.
        rng: Random source used for mine placement.
        strategy: How mine positions are sampled.

    Returns:
        New board in the playing phase with every cell hidden.
    """
    if strategy == MinePlacement.SHUFFLE:
        positions = _sample_shuffle(config, rng)
    else:
        positions = _sample_rejection(config, rng)

    board = board_from_mines(config, positions)
    logger.debug(
        "Created %dx%d board with %d mines",
        config.rows, config.cols, config.mine_count,
    )
    return board


def new_game(
    rows: int,
    cols: int,
    mine_count: int,
    rng: np.random.Generator,
) -> Board:
    """
    Start a new game.

    Raises:
        InvalidConfigError: If rows or cols is not positive, or
            mine_count is outside [0, rows * cols).
    """
    return create_board(BoardConfig(rows, cols, mine_count), rng)
