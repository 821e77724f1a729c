"""
Board module for 3D Minesweeper.

Defines the game configuration, difficulty presets, the 3D board value
and the board factory.
"""
from dataclasses import dataclass, field
from itertools import product
from typing import Iterator, List, NamedTuple, Optional, Tuple

import numpy as np

from .cell import Cell, CellState


# ============================================================================
# Constants
# ============================================================================

# Number of cells in the 3x3x3 cube kept mine-free around the first click
SAFE_ZONE_VOLUME = 27

# All 26 (layer, row, col) offsets of the 3D Moore neighborhood
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int, int], ...] = tuple(
    offset for offset in product((-1, 0, 1), repeat=3) if offset != (0, 0, 0)
)


class Coordinate(NamedTuple):
    """Position of a cell inside the cube."""

    layer: int
    row: int
    col: int


@dataclass
class GameConfig:
    """
    Configuration for a 3D Minesweeper board.

    Attributes:
        rows: Number of rows per layer.
        cols: Number of columns per row.
        depth: Number of layers.
        mines: Total mines to place.
    """

    rows: int = 5
    cols: int = 5
    depth: int = 5
    mines: int = 15

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1 or self.depth < 1:
            raise ValueError("Board dimensions must be positive")
        if self.mines < 0:
            raise ValueError("Number of mines cannot be negative")
        # Room for the safe zone plus at least one revealable cell
        max_mines = max(0, self.volume - SAFE_ZONE_VOLUME - 1)
        if self.mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def volume(self) -> int:
        """Total number of cells."""
        return self.rows * self.cols * self.depth

    @property
    def safe_cells(self) -> int:
        """Number of cells that must be revealed to win."""
        return self.volume - self.mines


# Preset difficulty levels
BEGINNER = GameConfig(5, 5, 5, 15)
INTERMEDIATE = GameConfig(7, 7, 7, 50)
EXPERT = GameConfig(10, 10, 10, 150)

DIFFICULTIES = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
}


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    3D grid of cells indexed ``[layer][row][col]``.

    Boards are treated as values: the core operations copy a board
    before changing it, so snapshots held by callers never change.
    """

    _grid: List[List[List[Cell]]] = field(default_factory=list, repr=False)
    seeded: bool = False

    # ========================================================================
    # Dimensions
    # ========================================================================

    @property
    def depth(self) -> int:
        return len(self._grid)

    @property
    def rows(self) -> int:
        return len(self._grid[0]) if self._grid else 0

    @property
    def cols(self) -> int:
        return len(self._grid[0][0]) if self.rows else 0

    @property
    def shape(self) -> Tuple[int, int, int]:
        """(depth, rows, cols) of the board."""
        return self.depth, self.rows, self.cols

    @property
    def volume(self) -> int:
        return self.depth * self.rows * self.cols

    @property
    def layers(self) -> List[List[List[Cell]]]:
        """Raw nested grid, one entry per layer."""
        return self._grid

    # ========================================================================
    # Cell Access
    # ========================================================================

    def in_bounds(self, layer: int, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return (
            0 <= layer < self.depth
            and 0 <= row < self.rows
            and 0 <= col < self.cols
        )

    def get_cell(self, layer: int, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.in_bounds(layer, row, col):
            return None
        return self._grid[layer][row][col]

    def __getitem__(self, position: Tuple[int, int, int]) -> Cell:
        layer, row, col = position
        if not self.in_bounds(layer, row, col):
            raise IndexError(f"Position {tuple(position)} is outside the board")
        return self._grid[layer][row][col]

    def cells(self) -> Iterator[Cell]:
        """Iterate over every cell, layer by layer."""
        for layer in self._grid:
            for row in layer:
                yield from row

    def neighbors(self, layer: int, row: int, col: int) -> List[Coordinate]:
        """
        Get valid neighboring cell positions.

        Args:
            layer: Layer index of center cell.
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            In-bounds positions among the 26 surrounding cells.
        """
        neighbors = []
        for delta_layer, delta_row, delta_col in NEIGHBOR_OFFSETS:
            position = Coordinate(
                layer + delta_layer, row + delta_row, col + delta_col
            )
            if self.in_bounds(*position):
                neighbors.append(position)
        return neighbors

    # ========================================================================
    # Counters
    # ========================================================================

    @property
    def mine_count(self) -> int:
        return sum(1 for cell in self.cells() if cell.is_mine)

    @property
    def revealed_count(self) -> int:
        return sum(1 for cell in self.cells() if cell.is_revealed)

    @property
    def flag_count(self) -> int:
        return sum(1 for cell in self.cells() if cell.is_flagged)

    # ========================================================================
    # Snapshots
    # ========================================================================

    def copy(self) -> "Board":
        """Return a deep structural copy of the board."""
        grid = [
            [[cell.copy() for cell in row] for row in layer]
            for layer in self._grid
        ]
        return Board(grid, self.seeded)

    def to_observation(self) -> np.ndarray:
        """
        Get board state as numpy array for an agent.

        Returns:
            3D numpy array of shape (depth, rows, cols) where:
                -1 = hidden
                -2 = flagged
                0-26 = revealed with neighbor count
                27 = revealed mine
        """
        obs = np.zeros(self.shape, dtype=np.int8)
        for cell in self.cells():
            obs[cell.layer, cell.row, cell.col] = cell.to_observation()
        return obs

    def hidden_positions(self) -> List[Coordinate]:
        """Positions of cells that can still be revealed."""
        return [
            Coordinate(*cell.position)
            for cell in self.cells()
            if cell.state == CellState.HIDDEN
        ]


# ============================================================================
# Board Factory
# ============================================================================

def create_board(config: GameConfig) -> Board:
    """
    Create an empty board for a configuration.

    Every cell knows its own position, holds no mine, is hidden
    and has a neighbor count of 0. Mines are placed later by
    ``place_mines``.

    Args:
        config: Board dimensions and mine count.

    Returns:
        New unseeded board of shape (depth, rows, cols).
    """
    grid = [
        [
            [Cell(layer, row, col) for col in range(config.cols)]
            for row in range(config.rows)
        ]
        for layer in range(config.depth)
    ]
    return Board(grid)
