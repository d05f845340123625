"""
Unit tests for the Game session.

Tests counters, reset, and how commands pass through to the engine.
"""
import pytest
import numpy as np
from minefield import (
    BEGINNER,
    DEFAULT,
    Board,
    BoardConfig,
    Game,
    GamePhase,
    MinePlacement,
    TerminalStateError,
)


@pytest.fixture
def game(corner_board: Board) -> Game:
    """Game whose board is the 3x3 corner-mine layout."""
    session = Game(BoardConfig(3, 3, 1), seed=0)
    session.board = corner_board
    return session


class TestGameSetup:
    """Test construction of a session."""

    def test_default_config_matches_classic_board(self) -> None:
        """The default board is 12x18 with 35 mines."""
        session = Game(seed=1)
        assert session.config is DEFAULT
        assert (session.board.rows, session.board.cols) == (12, 18)
        assert len(session.board.mine_positions()) == 35

    def test_new_game_counters(self) -> None:
        """A fresh game has everything hidden and no flags."""
        session = Game(BEGINNER, seed=1)
        assert session.phase == GamePhase.PLAYING
        assert session.hidden_count == 81
        assert session.flags_used == 0
        assert session.mines_remaining == 10
        assert session.moves == 0

    def test_seed_reproduces_boards(self) -> None:
        """Equal seeds deal equal boards, including after reset."""
        first = Game(BEGINNER, seed=42)
        second = Game(BEGINNER, seed=42)
        assert first.board.mine_positions() == second.board.mine_positions()

        first.reset()
        second.reset()
        assert first.board.mine_positions() == second.board.mine_positions()

    def test_injected_rng_is_used(self) -> None:
        """An explicit random source takes priority over a seed."""
        rng = np.random.default_rng(5)
        session = Game(BEGINNER, rng=rng, seed=999)
        assert session.rng is rng

    def test_shuffle_strategy(self) -> None:
        """The placement strategy is honored on every deal."""
        session = Game(BoardConfig(4, 4, 15), seed=3,
                       strategy=MinePlacement.SHUFFLE)
        assert len(session.board.mine_positions()) == 15
        session.reset()
        assert len(session.board.mine_positions()) == 15


class TestGameCommands:
    """Test reveal and flag through the session."""

    def test_reveal_returns_phase(self, game: Game) -> None:
        """Clearing the board reports a win."""
        assert game.reveal(2, 2) == GamePhase.WON
        assert game.is_over is True
        assert game.hidden_count == 1

    def test_flag_counters(self, game: Game) -> None:
        """Flags reduce the remaining-mines counter."""
        game.toggle_flag(0, 0)
        game.toggle_flag(1, 1)
        assert game.flags_used == 2
        assert game.mines_remaining == -1

    def test_moves_count_only_changes(self, game: Game) -> None:
        """No-op commands are not counted as moves."""
        game.toggle_flag(1, 1)
        game.reveal(1, 1)
        game.toggle_flag(1, 1)
        game.reveal(1, 1)
        game.reveal(1, 1)
        game.toggle_flag(1, 1)
        assert game.moves == 3

    def test_reveal_after_loss_raises(self, game: Game) -> None:
        """Terminal-state errors reach the caller."""
        assert game.reveal(0, 0) == GamePhase.LOST
        with pytest.raises(TerminalStateError):
            game.reveal(2, 2)


class TestGameReset:
    """Test dealing a new board."""

    def test_reset_returns_to_playing(self, game: Game) -> None:
        """Reset after a loss starts a fresh game."""
        game.reveal(0, 0)
        old_board = game.board

        new_board = game.reset()

        assert new_board is game.board
        assert new_board is not old_board
        assert game.phase == GamePhase.PLAYING
        assert game.hidden_count == 9
        assert game.moves == 0

    def test_reset_with_new_config(self, game: Game) -> None:
        """Reset can change the board size."""
        game.reset(BEGINNER)
        assert game.config is BEGINNER
        assert (game.board.rows, game.board.cols) == (9, 9)
        assert game.mines_remaining == 10

    def test_render_has_coordinates(self, game: Game) -> None:
        """The session renders with row and column indices."""
        assert game.render().splitlines()[0] == "  0 1 2"
