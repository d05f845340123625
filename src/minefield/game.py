"""
Game session for Minesweeper.

Wraps a board with the counters a player interface shows (mines left,
hidden cells, moves) and a reset that deals a fresh board.
"""
import logging
from typing import Optional

import numpy as np

from .board import Board, BoardConfig, DEFAULT
from .flags import flag_count, toggle_flag
from .generator import MinePlacement, create_board
from .reveal import reveal
from .state import GamePhase, derive_phase, hidden_count


logger = logging.getLogger(__name__)


class Game:
    """
    A single player's game.

    Owns one board at a time and replaces it wholesale on reset. The
    random source is created once, so a seeded game deals the same
    sequence of boards across resets.
    """

    def __init__(
        self,
        config: BoardConfig = DEFAULT,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
        strategy: MinePlacement = MinePlacement.REJECTION,
    ) -> None:
        """
        Initialize the game and deal the first board.

        Args:
            config: Board configuration.
            rng: Random source for mine placement.
            seed: Seed for a new random source when rng is not given.
            strategy: Mine placement strategy.
        """
        self.config = config
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.strategy = strategy
        self.board = create_board(config, self.rng, strategy)
        self._moves = 0

    # ========================================================================
    # Commands
    # ========================================================================

    def reveal(self, row: int, col: int) -> GamePhase:
        """Reveal a cell; see minefield.reveal.reveal."""
        before = self.board.cell(row, col).state
        result = reveal(self.board, row, col)
        if self.board.cell(row, col).state != before:
            self._moves += 1
        return result.phase

    def toggle_flag(self, row: int, col: int) -> None:
        """Toggle a flag; see minefield.flags.toggle_flag."""
        before = self.board.cell(row, col).state
        toggle_flag(self.board, row, col)
        if self.board.cell(row, col).state != before:
            self._moves += 1

    def reset(self, config: Optional[BoardConfig] = None) -> Board:
        """
        Deal a new board, optionally with a different configuration.

        Returns:
            The new board.
        """
        if config is not None:
            self.config = config
        self.board = create_board(self.config, self.rng, self.strategy)
        self._moves = 0
        logger.debug("Game reset")
        return self.board

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def phase(self) -> GamePhase:
        return derive_phase(self.board)

    @property
    def is_over(self) -> bool:
        return self.phase.is_terminal

    @property
    def hidden_count(self) -> int:
        return hidden_count(self.board)

    @property
    def flags_used(self) -> int:
        return flag_count(self.board)

    @property
    def mines_remaining(self) -> int:
        """Mines minus flags placed; negative when over-flagged."""
        return self.config.mine_count - self.flags_used

    @property
    def moves(self) -> int:
        """Commands that changed the board since the last reset."""
        return self._moves

    def render(self, coordinates: bool = True) -> str:
        return self.board.render(coordinates=coordinates)
