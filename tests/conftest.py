"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import Callable, Iterable, Tuple

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mines3d import (
    Board,
    Cell,
    Game,
    GameConfig,
    GameState,
    create_board,
    place_mines_at,
)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> GameConfig:
    """Create a valid 5x5x5 configuration."""
    return GameConfig(5, 5, 5, 15)


@pytest.fixture
def cube_config() -> GameConfig:
    """Mine-free 3x3x3 configuration for hand-built layouts."""
    return GameConfig(3, 3, 3, 0)


@pytest.fixture
def line_config() -> GameConfig:
    """A single row of 7 cells, for one-dimensional flood fill checks."""
    return GameConfig(rows=1, cols=7, depth=1, mines=0)


@pytest.fixture
def slab_config() -> GameConfig:
    """3x3 layers stacked 5 deep."""
    return GameConfig(rows=3, cols=3, depth=5, mines=0)


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def empty_board(valid_config: GameConfig) -> Board:
    """Unseeded 5x5x5 board."""
    return create_board(valid_config)


@pytest.fixture
def single_mine_board() -> Tuple[Board, GameConfig]:
    """5x5x5 board with its only mine in the far corner."""
    config = GameConfig(5, 5, 5, 1)
    return place_mines_at(create_board(config), [(4, 4, 4)]), config


@pytest.fixture
def slab_wall_board(slab_config: GameConfig) -> Board:
    """5-layer board whose middle layer is entirely mined."""
    wall = [(2, row, col) for row in range(3) for col in range(3)]
    return place_mines_at(create_board(slab_config), wall)


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell(1, 2, 3)


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def make_game() -> Callable[[GameConfig, Iterable[Tuple[int, int, int]]], Game]:
    """Build a game already in progress with mines at fixed positions."""

    def _make(config: GameConfig, mines: Iterable[Tuple[int, int, int]]) -> Game:
        game = Game(config)
        game._board = place_mines_at(game.board, mines)
        game._state = GameState.PLAYING
        return game

    return _make
