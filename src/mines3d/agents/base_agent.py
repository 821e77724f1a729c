"""
Base agent interface for 3D Minesweeper.

Defines the abstract interface that all agents must implement.
"""
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np

from ..cell import HIDDEN_OBSERVATION


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """
    Abstract base class for 3D Minesweeper agents.

    All agents must implement the select_action method to choose
    which cell to reveal based on the current observation.
    """

    def __init__(self, depth: int, rows: int, cols: int) -> None:
        """
        Initialize the agent.

        Args:
            depth: Number of layers in the board.
            rows: Number of rows per layer.
            cols: Number of columns per row.
        """
        self.depth = depth
        self.rows = rows
        self.cols = cols
        self.total_cells = depth * rows * cols

    @abstractmethod
    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select an action based on the current observation.

        Args:
            observation: 3D array of cell states.
            valid_actions: Optional mask of valid actions.

        Returns:
            Action index ((layer * rows + row) * cols + col).
        """

    def action_to_position(self, action: int) -> Tuple[int, int, int]:
        """Convert flat action index to (layer, row, col) position."""
        layer, rest = divmod(int(action), self.rows * self.cols)
        row, col = divmod(rest, self.cols)
        return layer, row, col

    def position_to_action(self, layer: int, row: int, col: int) -> int:
        """Convert (layer, row, col) position to flat action index."""
        return (layer * self.rows + row) * self.cols + col

    def get_valid_actions_from_obs(self, observation: np.ndarray) -> np.ndarray:
        """
        Get valid actions mask from observation.

        Args:
            observation: 3D array of cell states.

        Returns:
            Boolean mask where True = valid action.
        """
        return observation.flatten() == HIDDEN_OBSERVATION

    def reset(self) -> None:
        """Reset agent state for new episode."""
