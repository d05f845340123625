"""
Minesweeper game engine.

Provides board generation, the flood-fill reveal, flagging and
win/loss tracking, plus a game session and a Gymnasium environment.
"""
from .errors import (
    MinesweeperError,
    InvalidConfigError,
    OutOfBoundsError,
    TerminalStateError,
)
from .cell import Cell, CellState
from .board import (
    Board,
    BoardConfig,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    DEFAULT,
    PRESETS,
)
from .generator import (
    MinePlacement,
    board_from_mines,
    compute_adjacency,
    create_board,
    new_game,
)
from .state import GamePhase, derive_phase, hidden_count, is_terminal
from .reveal import RevealResult, flood_fill, reveal
from .flags import flag_count, toggle_flag
from .game import Game
from .environment import MinesweeperEnv

phase = derive_phase

__all__ = [
    "MinesweeperError",
    "InvalidConfigError",
    "OutOfBoundsError",
    "TerminalStateError",
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "DEFAULT",
    "PRESETS",
    "MinePlacement",
    "board_from_mines",
    "compute_adjacency",
    "create_board",
    "new_game",
    "GamePhase",
    "derive_phase",
    "phase",
    "hidden_count",
    "is_terminal",
    "RevealResult",
    "flood_fill",
    "reveal",
    "flag_count",
    "toggle_flag",
    "Game",
    "MinesweeperEnv",
]
