"""
Game session for 3D Minesweeper.

Wraps the board operations with the rules of a single game: deferred
mine placement on the first reveal, flagging, and win/lose detection.
"""
import random
from enum import Enum, auto
from typing import List, Optional, Tuple

import numpy as np

from .board import BEGINNER, Board, Coordinate, GameConfig, create_board
from .cell import Cell
from .reveal import is_won, reveal_all_mines, reveal_cell, toggle_flag
from .seeding import place_mines


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    IDLE = auto()
    PLAYING = auto()
    WON = auto()
    LOST = auto()


# ============================================================================
# Game Class
# ============================================================================

class Game:
    """
    3D Minesweeper game session.

    Holds the current board snapshot and replaces it with the result of
    each core operation, so earlier snapshots returned by ``board`` stay
    untouched.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize a new game.

        Args:
            config: Board configuration (default: beginner preset).
            seed: Random seed for mine placement.
        """
        self.config = config or BEGINNER
        self.rng = random.Random(seed)
        self.reset()

    # ========================================================================
    # Game Actions
    # ========================================================================

    def reveal(self, layer: int, row: int, col: int) -> bool:
        """
        Reveal a cell at the given position.

        On first reveal, places mines around a safe zone at this cell.
        Revealing a mine loses the game and exposes every mine.

        Args:
            layer: Layer index to reveal.
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            True if reveal was performed, False otherwise.
        """
        if not self._can_reveal(layer, row, col):
            return False

        if self._state == GameState.IDLE:
            self._handle_first_click(layer, row, col)

        if self._board[layer, row, col].is_mine:
            self._board = reveal_all_mines(self._board)
            self._state = GameState.LOST
            return True

        self._board = reveal_cell(self._board, layer, row, col, self.config)
        self._check_win_condition()
        return True

    def _can_reveal(self, layer: int, row: int, col: int) -> bool:
        """Check if a cell can be revealed."""
        if self.is_over:
            return False
        cell = self._board.get_cell(layer, row, col)
        return cell is not None and cell.is_hidden

    def _handle_first_click(self, layer: int, row: int, col: int) -> None:
        """Handle first click: place mines and start the game."""
        self._board = place_mines(
            self._board, self.config, (layer, row, col), rng=self.rng
        )
        self._state = GameState.PLAYING

    def _check_win_condition(self) -> None:
        """Check if all non-mine cells are revealed."""
        if is_won(self._board, self.config):
            self._state = GameState.WON

    def flag(self, layer: int, row: int, col: int) -> bool:
        """
        Toggle flag on a cell.

        Returns:
            True if flag was toggled, False otherwise.
        """
        if self.is_over:
            return False
        cell = self._board.get_cell(layer, row, col)
        if cell is None or cell.is_revealed:
            return False
        self._board = toggle_flag(self._board, layer, row, col)
        return True

    def reset(self) -> None:
        """Reset to an empty, unseeded board for a new game."""
        self._board = create_board(self.config)
        self._state = GameState.IDLE

    def new_game(self, config: GameConfig) -> None:
        """Switch to another configuration and start over."""
        self.config = config
        self.reset()

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def board(self) -> Board:
        """Current board snapshot."""
        return self._board

    @property
    def game_state(self) -> GameState:
        return self._state

    @property
    def is_playing(self) -> bool:
        """Check if game has not ended (including before the first reveal)."""
        return self._state in (GameState.IDLE, GameState.PLAYING)

    @property
    def is_over(self) -> bool:
        return self._state in (GameState.WON, GameState.LOST)

    @property
    def is_won(self) -> bool:
        return self._state == GameState.WON

    @property
    def is_lost(self) -> bool:
        return self._state == GameState.LOST

    @property
    def flags_used(self) -> int:
        return self._board.flag_count

    @property
    def flags_remaining(self) -> int:
        """Mines not yet accounted for by a flag, never below zero."""
        return max(0, self.config.mines - self.flags_used)

    def get_cell(self, layer: int, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        return self._board.get_cell(layer, row, col)

    def get_observation(self) -> np.ndarray:
        """Get board state as a (depth, rows, cols) int8 array."""
        return self._board.to_observation()

    def get_valid_actions(self) -> List[Coordinate]:
        """
        Get list of valid cells to reveal.

        Returns:
            List of (layer, row, col) positions that can be revealed.
        """
        return self._board.hidden_positions()

    @property
    def shape(self) -> Tuple[int, int, int]:
        return self.config.depth, self.config.rows, self.config.cols
