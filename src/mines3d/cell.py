"""
Cell module for 3D Minesweeper.

Represents individual cells of the cube with their position,
state (hidden/revealed/flagged) and content (mine/number).
"""
from enum import Enum, auto
from dataclasses import dataclass, replace


# ============================================================================
# Constants
# ============================================================================

# Largest possible neighbor count in a 26-connected neighborhood
MAX_NEIGHBORS = 26

# Observation values for non-numeric cells
HIDDEN_OBSERVATION = -1
FLAGGED_OBSERVATION = -2
MINE_OBSERVATION = MAX_NEIGHBORS + 1


class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the 3D Minesweeper grid.

    A single ``state`` field backs both ``is_revealed`` and ``is_flagged``,
    so a cell can never be revealed and flagged at once.

    Attributes:
        layer: Depth index of the cell.
        row: Row index of the cell.
        col: Column index of the cell.
        is_mine: Whether this cell contains a mine.
        neighbor_mines: Count of mines among the 26 neighbors (0-26).
        state: Current visual state (hidden, revealed, or flagged).
    """

    layer: int = 0
    row: int = 0
    col: int = 0
    is_mine: bool = False
    neighbor_mines: int = 0
    state: CellState = CellState.HIDDEN

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if cell was successfully revealed, False if already
            revealed or flagged.
        """
        if self.state != CellState.HIDDEN:
            return False
        self.state = CellState.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.HIDDEN
        return True

    def copy(self) -> "Cell":
        """Return an independent copy of this cell."""
        return replace(self)

    @property
    def position(self) -> tuple:
        """(layer, row, col) position of the cell."""
        return self.layer, self.row, self.col

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    def to_observation(self) -> int:
        """
        Convert cell to observation value for an agent.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-26: Revealed cell with neighbor mine count
            27: Revealed mine (game over state)
        """
        if self.state == CellState.HIDDEN:
            return HIDDEN_OBSERVATION
        if self.state == CellState.FLAGGED:
            return FLAGGED_OBSERVATION
        if self.is_mine:
            return MINE_OBSERVATION
        return self.neighbor_mines
