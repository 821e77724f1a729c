"""
3D Minesweeper agents module.

Provides agents for playing 3D Minesweeper:
- RandomAgent: Baseline random selection
"""
from .base_agent import BaseAgent
from .random_agent import RandomAgent

__all__ = [
    "BaseAgent",
    "RandomAgent",
]
