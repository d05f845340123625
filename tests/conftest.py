"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

import numpy as np

# Add src to path for imports, and the root for main.py
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent.parent))

from minefield import Board, BoardConfig, Cell, board_from_mines


# ============================================================================
# Random Source Fixtures
# ============================================================================

@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random source for reproducible boards."""
    return np.random.default_rng(1234)


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def corner_board() -> Board:
    """
    3x3 board with a single mine at (0, 0).

        * 1 0
        1 1 0
        0 0 0
    """
    return board_from_mines(BoardConfig(3, 3, 1), [(0, 0)])


@pytest.fixture
def empty_board() -> Board:
    """5x5 board with no mines for cascade testing."""
    return board_from_mines(BoardConfig(5, 5, 0), [])


@pytest.fixture
def wall_board() -> Board:
    """
    5x5 board with a column of mines splitting it in two.

        0 2 * 2 0
        0 3 * 3 0
        0 3 * 3 0
        0 3 * 3 0
        0 2 * 2 0
    """
    mines = [(row, 2) for row in range(5)]
    return board_from_mines(BoardConfig(5, 5, 5), mines)


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
