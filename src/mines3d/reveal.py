"""
Reveal propagation for 3D Minesweeper.

Revealing a cell with no neighboring mines opens every cell reachable
through a chain of such cells across all 26 directions.
"""
from .board import Board, GameConfig


def reveal_cell(
    board: Board, layer: int, row: int, col: int, config: GameConfig
) -> Board:
    """
    Reveal a cell and flood-fill through zero-count neighbors.

    The fill uses an explicit stack, so its depth does not grow with
    the size of the opened region. Flagged cells block the fill and mines
    are never revealed by it; revealing a mine directly reveals only that
    cell.

    Args:
        board: Seeded board.
        layer: Layer index to reveal.
        row: Row index to reveal.
        col: Column index to reveal.
        config: Configuration the board was created with.

    Returns:
        New board with the opened region revealed, or ``board`` itself
        when the target is already revealed or flagged.

    Raises:
        IndexError: If the target lies outside the board.
    """
    if not (
        0 <= layer < config.depth
        and 0 <= row < config.rows
        and 0 <= col < config.cols
    ):
        raise IndexError(f"Position {(layer, row, col)} is outside the board")

    target = board[layer, row, col]
    if target.is_revealed or target.is_flagged:
        return board

    revealed = board.copy()
    start = revealed[layer, row, col]
    start.reveal()
    if start.is_mine or start.neighbor_mines != 0:
        return revealed

    stack = [start.position]
    while stack:
        for position in revealed.neighbors(*stack.pop()):
            neighbor = revealed[position]
            if neighbor.is_mine or not neighbor.reveal():
                continue
            if neighbor.neighbor_mines == 0:
                stack.append(position)

    return revealed


def toggle_flag(board: Board, layer: int, row: int, col: int) -> Board:
    """
    Flag or unflag a hidden cell.

    Revealed cells cannot be flagged; the input board is returned
    unchanged for them.
    """
    if board[layer, row, col].is_revealed:
        return board
    flagged = board.copy()
    flagged[layer, row, col].toggle_flag()
    return flagged


def reveal_all_mines(board: Board) -> Board:
    """Reveal every unflagged mine, as shown when a game is lost."""
    exposed = board.copy()
    for cell in exposed.cells():
        if cell.is_mine:
            cell.reveal()
    return exposed


def is_won(board: Board, config: GameConfig) -> bool:
    """Check if every non-mine cell has been revealed."""
    revealed_safe = sum(
        1 for cell in board.cells() if cell.is_revealed and not cell.is_mine
    )
    return revealed_safe == config.safe_cells
