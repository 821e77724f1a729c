"""
3D Minesweeper game module.

Provides core game logic: board creation, deferred mine placement,
26-neighbor counts and flood-fill reveals on a cube of cells.
"""
from .cell import Cell, CellState
from .board import (
    Board,
    Coordinate,
    GameConfig,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    DIFFICULTIES,
    create_board,
)
from .seeding import place_mines, place_mines_at
from .reveal import reveal_cell, toggle_flag, reveal_all_mines, is_won
from .game import Game, GameState
from .environment import Minesweeper3DEnv

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "Coordinate",
    "GameConfig",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "DIFFICULTIES",
    "create_board",
    "place_mines",
    "place_mines_at",
    "reveal_cell",
    "toggle_flag",
    "reveal_all_mines",
    "is_won",
    "Game",
    "GameState",
    "Minesweeper3DEnv",
]
