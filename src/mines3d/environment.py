"""
Gymnasium environment wrapper for 3D Minesweeper.

Provides a standard RL interface over a game session.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import GameConfig
from .cell import FLAGGED_OBSERVATION, HIDDEN_OBSERVATION, MINE_OBSERVATION
from .game import Game


# ============================================================================
# Minesweeper Environment
# ============================================================================

class Minesweeper3DEnv(gym.Env):
    """
    Gymnasium environment for 3D Minesweeper.

    Observation:
        3D array of shape (depth, rows, cols) where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-26 = revealed cell with neighbor mine count
        - 27 = revealed mine

    Actions:
        Discrete action space of size depth * rows * cols.
        Action i corresponds to cell (layer, row, col) with
        i = (layer * rows + row) * cols + col.

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for invalid action (already revealed/flagged)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the environment.

        Args:
            config: Board configuration (default: beginner preset).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.game = Game(config)
        self.config = self.game.config
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=FLAGGED_OBSERVATION,
            high=MINE_OBSERVATION,
            shape=self.game.shape,
            dtype=np.int8,
        )

        # One action per cell
        self.action_space = spaces.Discrete(self.config.volume)

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
            seed: Random seed for mine placement.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        if seed is not None:
            self.game.rng.seed(seed)
        self.game.reset()
        self._steps = 0

        return self.game.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Cell index to reveal.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        layer, row, col = self.action_to_position(action)
        self._steps += 1

        reward = self._calculate_reward(layer, row, col)
        observation = self.game.get_observation()
        terminated = self.game.is_over

        return observation, reward, terminated, False, self._get_info()

    def action_to_position(self, action: int) -> Tuple[int, int, int]:
        """Convert flat action index to (layer, row, col) position."""
        layer, rest = divmod(int(action), self.config.rows * self.config.cols)
        row, col = divmod(rest, self.config.cols)
        return layer, row, col

    def position_to_action(self, layer: int, row: int, col: int) -> int:
        """Convert (layer, row, col) position to flat action index."""
        return (layer * self.config.rows + row) * self.config.cols + col

    def _calculate_reward(self, layer: int, row: int, col: int) -> float:
        """Reveal a cell and score the outcome."""
        if not self.game.reveal(layer, row, col):
            return -0.1
        if self.game.is_won:
            return 10.0
        if self.game.is_lost:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.game.board.revealed_count,
            "total_safe": self.config.safe_cells,
            "game_state": self.game.game_state.name,
            "valid_actions": len(self.game.get_valid_actions()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return self._render_ansi()
        if self.render_mode == "human":
            print(self._render_ansi())
        return None

    def _render_ansi(self) -> str:
        """Render board as text, one block per layer."""
        return render_layers(self.game.get_observation())

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = valid action.
        """
        return (self.game.get_observation() == HIDDEN_OBSERVATION).flatten()


# ============================================================================
# Text Rendering
# ============================================================================

def render_layer(layer_obs: np.ndarray) -> str:
    """Render one (rows, cols) observation slice as text."""
    lines = []
    for row in layer_obs:
        cells = []
        for val in row:
            if val == HIDDEN_OBSERVATION:
                cells.append(" .")
            elif val == FLAGGED_OBSERVATION:
                cells.append(" F")
            elif val == MINE_OBSERVATION:
                cells.append(" *")
            elif val == 0:
                cells.append("  ")
            else:
                cells.append(f"{val:2d}")
        lines.append(" ".join(cells))
    return "\n".join(lines)


def render_layers(obs: np.ndarray) -> str:
    """Render a (depth, rows, cols) observation, one titled block per layer."""
    blocks = []
    for index, layer_obs in enumerate(obs):
        blocks.append(f"Layer {index}\n{render_layer(layer_obs)}")
    return "\n\n".join(blocks)
