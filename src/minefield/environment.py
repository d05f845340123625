"""
Gymnasium environment wrapper for Minesweeper.

Exposes the engine through the standard Gymnasium interface so that
scripted or automated drivers can play it.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig, BEGINNER
from .generator import create_board
from .reveal import reveal
from .state import GamePhase, derive_phase, hidden_count


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size rows * cols.
        Action i reveals the cell at (i // cols, i % cols).

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for a no-op (cell already revealed or flagged)

    Mines are placed from the environment's own seeded generator, so
    reset(seed=...) reproduces a board exactly.
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BEGINNER
        self.render_mode = render_mode
        self.board: Optional[Board] = None

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.rows, self.config.cols),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(self.config.total_cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.board = create_board(self.config, self.np_random)
        self._steps = 0

        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Cell index to reveal (row * cols + col).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).

        Raises:
            TerminalStateError: If called after the episode terminated.
        """
        if self.board is None:
            raise RuntimeError("Call reset() before step()")

        row, col = self._action_to_position(action)
        reward = self._calculate_reward(row, col)
        self._steps += 1

        observation = self.board.get_observation()
        terminated = derive_phase(self.board).is_terminal
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, col) position."""
        row, col = divmod(int(action), self.config.cols)
        return row, col

    def _calculate_reward(self, row: int, col: int) -> float:
        """Reveal a cell and score the outcome."""
        was_hidden = self.board.cell(row, col).is_hidden
        phase = reveal(self.board, row, col).phase

        if not was_hidden:
            return -0.1
        if phase == GamePhase.WON:
            return 10.0
        if phase == GamePhase.LOST:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        hidden = hidden_count(self.board)
        return {
            "steps": self._steps,
            "revealed": self.config.total_cells - hidden,
            "hidden": hidden,
            "total_safe": self.config.safe_cells,
            "game_state": derive_phase(self.board).name,
            "valid_actions": len(self.board.get_valid_actions()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.board is None:
            return None
        if self.render_mode == "ansi":
            return self.board.render()
        if self.render_mode == "human":
            print(self.board.render())
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of actions that would change the board.

        Returns:
            int8 array where 1 = hidden, unflagged cell. The dtype
            matches what Discrete.sample(mask=...) expects.
        """
        if self.board is None:
            raise RuntimeError("Call reset() before get_action_mask()")

        mask = np.zeros(self.action_space.n, dtype=np.int8)
        for row, col in self.board.get_valid_actions():
            mask[row * self.config.cols + col] = 1
        return mask
