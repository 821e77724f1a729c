"""
Mine placement for 3D Minesweeper.

Mines are placed lazily on the first reveal, keeping the 3x3x3 cube
around the first click free so the opening move is always safe.
"""
import random
from typing import Iterable, List, Optional, Tuple

from .board import Board, Coordinate, GameConfig


# ============================================================================
# Safe Zone
# ============================================================================

def in_safe_zone(
    position: Tuple[int, int, int], first_click: Tuple[int, int, int]
) -> bool:
    """Check if a position lies within one step of the first click on every axis."""
    return all(abs(a - b) <= 1 for a, b in zip(position, first_click))


def get_valid_mine_positions(
    board: Board, first_click: Tuple[int, int, int]
) -> List[Coordinate]:
    """Get all positions outside the first click's safe zone."""
    positions = []
    for layer in range(board.depth):
        for row in range(board.rows):
            for col in range(board.cols):
                if not in_safe_zone((layer, row, col), first_click):
                    positions.append(Coordinate(layer, row, col))
    return positions


# ============================================================================
# Placement
# ============================================================================

def place_mines(
    board: Board,
    config: GameConfig,
    first_click: Tuple[int, int, int],
    rng: Optional[random.Random] = None,
) -> Board:
    """
    Place mines randomly, keeping the first click's neighborhood clear.

    Args:
        board: Unseeded board from ``create_board``.
        config: Configuration the board was created with.
        first_click: (layer, row, col) of the player's first reveal.
        rng: Random source; the module-level generator when omitted.

    Returns:
        New board with ``config.mines`` mines and neighbor counts set.

    Raises:
        ValueError: If the board is already seeded or there are not
            enough cells outside the safe zone.
    """
    if board.seeded:
        raise ValueError("Mines have already been placed on this board")

    positions = get_valid_mine_positions(board, first_click)
    if config.mines > len(positions):
        raise ValueError(
            f"Cannot place {config.mines} mines: only {len(positions)} "
            "cells lie outside the safe zone"
        )

    rng = rng or random
    mine_positions = rng.sample(positions, config.mines)
    return place_mines_at(board, mine_positions)


def place_mines_at(
    board: Board, positions: Iterable[Tuple[int, int, int]]
) -> Board:
    """
    Place mines at fixed positions and compute neighbor counts.

    Args:
        board: Unseeded board.
        positions: (layer, row, col) positions to mine.

    Returns:
        New seeded board.

    Raises:
        ValueError: If the board is already seeded or a position repeats.
    """
    if board.seeded:
        raise ValueError("Mines have already been placed on this board")

    positions = [tuple(position) for position in positions]
    if len(set(positions)) != len(positions):
        raise ValueError("Mine positions must not repeat")

    seeded = board.copy()
    for position in positions:
        seeded[position].is_mine = True
    _calculate_neighbor_mines(seeded)
    seeded.seeded = True
    return seeded


# ============================================================================
# Neighbor Counts
# ============================================================================

def _calculate_neighbor_mines(board: Board) -> None:
    """Calculate neighbor mine counts for all non-mine cells."""
    for cell in board.cells():
        if not cell.is_mine:
            cell.neighbor_mines = count_neighbor_mines(
                board, cell.layer, cell.row, cell.col
            )


def count_neighbor_mines(board: Board, layer: int, row: int, col: int) -> int:
    """Count mines among the in-bounds neighbors of a cell."""
    count = 0
    for position in board.neighbors(layer, row, col):
        if board[position].is_mine:
            count += 1
    return count
