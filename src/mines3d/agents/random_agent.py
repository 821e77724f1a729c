"""
Random agent for 3D Minesweeper.

Serves as a baseline by picking any hidden cell of the cube.
"""
from typing import Optional

import numpy as np

from .base_agent import BaseAgent


# ============================================================================
# Random Agent
# ============================================================================

class RandomAgent(BaseAgent):
    """
    Agent that reveals a uniformly random hidden cell.

    Each episode draws from its own child generator, so the moves of one
    game do not depend on how long the previous games lasted.
    """

    def __init__(
        self,
        depth: int = 5,
        rows: int = 5,
        cols: int = 5,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the random agent.

        Args:
            depth: Number of layers in the cube.
            rows: Number of rows per layer.
            cols: Number of columns per row.
            seed: Root seed for the per-episode generators.
        """
        super().__init__(depth, rows, cols)
        self._seeds = np.random.SeedSequence(seed)
        self.episodes = 0
        self.rng = self._next_generator()

    def _next_generator(self) -> np.random.Generator:
        return np.random.default_rng(self._seeds.spawn(1)[0])

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Pick a flat cell index among the valid ones.

        Falls back to 0 when nothing is left to reveal; the environment
        scores that as an invalid move.
        """
        if valid_actions is None:
            valid_actions = self.get_valid_actions_from_obs(observation)

        candidates = np.flatnonzero(valid_actions)
        if candidates.size == 0:
            return 0
        return int(candidates[self.rng.integers(candidates.size)])

    def reset(self) -> None:
        """Switch to a fresh generator for the next episode."""
        self.episodes += 1
        self.rng = self._next_generator()
