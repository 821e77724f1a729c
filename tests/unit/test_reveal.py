"""
Unit tests for reveal propagation.

Tests flood fill closure, guards, flags and the helper operations
used by the game session.
"""
import pytest
from mines3d import (
    Board,
    GameConfig,
    create_board,
    is_won,
    place_mines_at,
    reveal_all_mines,
    reveal_cell,
    toggle_flag,
)


def revealed_positions(board: Board) -> set:
    return {cell.position for cell in board.cells() if cell.is_revealed}


# ============================================================================
# Flood Fill Tests
# ============================================================================

class TestFloodFill:
    """Test zero-count flood fill."""

    def test_mine_free_board_opens_completely(self, cube_config: GameConfig) -> None:
        """With no mines, one reveal opens the whole cube."""
        board = place_mines_at(create_board(cube_config), [])
        opened = reveal_cell(board, 1, 1, 1, cube_config)
        assert opened.revealed_count == 27

    def test_fill_stops_at_numbered_cells_in_a_line(
        self, line_config: GameConfig
    ) -> None:
        """Fill reveals the numbered border but not what lies beyond it."""
        board = place_mines_at(create_board(line_config), [(0, 0, 3)])
        opened = reveal_cell(board, 0, 0, 0, line_config)
        assert revealed_positions(opened) == {(0, 0, 0), (0, 0, 1), (0, 0, 2)}
        assert opened[0, 0, 2].neighbor_mines == 1

    def test_wall_of_mines_bounds_the_fill(
        self, slab_wall_board: Board, slab_config: GameConfig
    ) -> None:
        """A mined layer keeps the fill on its own side."""
        opened = reveal_cell(slab_wall_board, 0, 1, 1, slab_config)
        expected = {
            (layer, row, col)
            for layer in (0, 1)
            for row in range(3)
            for col in range(3)
        }
        assert revealed_positions(opened) == expected

    def test_numbered_cell_reveals_only_itself(
        self, slab_wall_board: Board, slab_config: GameConfig
    ) -> None:
        """A cell next to a mine does not propagate."""
        opened = reveal_cell(slab_wall_board, 3, 0, 0, slab_config)
        assert revealed_positions(opened) == {(3, 0, 0)}

    def test_fill_crosses_layers(self, cube_config: GameConfig) -> None:
        """Fill spreads diagonally through the third dimension."""
        board = place_mines_at(create_board(cube_config), [(0, 0, 0)])
        opened = reveal_cell(board, 2, 2, 2, cube_config)
        assert opened.revealed_count == 26
        assert opened[0, 0, 0].is_revealed is False

    def test_single_far_mine_opens_every_safe_cell(self, single_mine_board) -> None:
        """5x5x5 with one corner mine: first reveal opens all 124 safe cells."""
        board, config = single_mine_board
        opened = reveal_cell(board, 0, 0, 0, config)
        assert opened.revealed_count == 124
        assert opened[4, 4, 4].is_revealed is False
        numbered = [cell for cell in opened.cells() if cell.neighbor_mines]
        assert len(numbered) == 7
        assert all(cell.is_revealed for cell in numbered)
        assert is_won(opened, config)

    def test_fill_never_reveals_mines(self, slab_wall_board: Board, slab_config: GameConfig) -> None:
        """Mines stay hidden however large the opened region is."""
        opened = reveal_cell(slab_wall_board, 4, 0, 0, slab_config)
        assert not any(cell.is_revealed for cell in opened.cells() if cell.is_mine)

    def test_direct_mine_reveal_does_not_propagate(
        self, slab_wall_board: Board, slab_config: GameConfig
    ) -> None:
        """Revealing a mine directly reveals that cell alone."""
        opened = reveal_cell(slab_wall_board, 2, 1, 1, slab_config)
        assert revealed_positions(opened) == {(2, 1, 1)}

    def test_large_region_does_not_recurse(self) -> None:
        """A wide empty board opens without hitting recursion limits."""
        config = GameConfig(20, 20, 20, 0)
        board = place_mines_at(create_board(config), [])
        assert reveal_cell(board, 0, 0, 0, config).revealed_count == 20 ** 3

    def test_input_board_not_mutated(self, slab_wall_board: Board, slab_config: GameConfig) -> None:
        """Reveal returns a new board and leaves the input untouched."""
        before = slab_wall_board.copy()
        reveal_cell(slab_wall_board, 0, 0, 0, slab_config)
        assert slab_wall_board == before

    def test_out_of_bounds_raises(self, slab_wall_board: Board, slab_config: GameConfig) -> None:
        """Targets outside the board are rejected."""
        with pytest.raises(IndexError):
            reveal_cell(slab_wall_board, 5, 0, 0, slab_config)


# ============================================================================
# Guard Tests
# ============================================================================

class TestRevealGuards:
    """Test revealed and flagged targets are left alone."""

    def test_revealed_target_returns_same_board(
        self, slab_wall_board: Board, slab_config: GameConfig
    ) -> None:
        """Revealing a revealed cell changes nothing."""
        opened = reveal_cell(slab_wall_board, 0, 0, 0, slab_config)
        again = reveal_cell(opened, 1, 1, 1, slab_config)
        assert again is opened
        assert again == opened

    def test_flagged_target_returns_same_board(
        self, slab_wall_board: Board, slab_config: GameConfig
    ) -> None:
        """Revealing a flagged cell changes nothing."""
        flagged = toggle_flag(slab_wall_board, 0, 0, 0)
        assert reveal_cell(flagged, 0, 0, 0, slab_config) == flagged

    def test_flag_blocks_fill(self, line_config: GameConfig) -> None:
        """Fill does not pass through or reveal a flagged cell."""
        board = place_mines_at(create_board(line_config), [])
        board = toggle_flag(board, 0, 0, 3)
        opened = reveal_cell(board, 0, 0, 0, line_config)
        assert revealed_positions(opened) == {(0, 0, 0), (0, 0, 1), (0, 0, 2)}
        assert opened[0, 0, 3].is_flagged is True
        assert opened[0, 0, 3].is_revealed is False

    def test_no_cell_is_revealed_and_flagged(
        self, slab_wall_board: Board, slab_config: GameConfig
    ) -> None:
        """Flags placed before a fill survive it without being revealed."""
        board = toggle_flag(slab_wall_board, 1, 1, 1)
        board = toggle_flag(board, 0, 2, 2)
        opened = reveal_cell(board, 0, 0, 0, slab_config)
        assert opened.flag_count == 2
        assert not any(cell.is_revealed and cell.is_flagged for cell in opened.cells())


# ============================================================================
# Flag And Mine Helper Tests
# ============================================================================

class TestHelpers:
    """Test flag toggling, mine exposure and win detection."""

    def test_toggle_flag_returns_new_board(self, slab_wall_board: Board) -> None:
        """Flagging copies the board."""
        flagged = toggle_flag(slab_wall_board, 0, 0, 0)
        assert flagged[0, 0, 0].is_flagged
        assert not slab_wall_board[0, 0, 0].is_flagged

    def test_toggle_flag_on_revealed_is_ignored(
        self, slab_wall_board: Board, slab_config: GameConfig
    ) -> None:
        """Revealed cells cannot be flagged."""
        opened = reveal_cell(slab_wall_board, 0, 0, 0, slab_config)
        assert toggle_flag(opened, 0, 0, 0) is opened

    def test_reveal_all_mines(self, slab_wall_board: Board) -> None:
        """Every unflagged mine is exposed; flagged mines stay flagged."""
        board = toggle_flag(slab_wall_board, 2, 0, 0)
        exposed = reveal_all_mines(board)
        mines = [cell for cell in exposed.cells() if cell.is_mine]
        assert sum(cell.is_revealed for cell in mines) == 8
        assert exposed[2, 0, 0].is_flagged
        assert exposed.revealed_count == 8

    def test_is_won_requires_every_safe_cell(
        self, slab_wall_board: Board
    ) -> None:
        """Win needs all 36 safe cells revealed."""
        config = GameConfig(rows=3, cols=3, depth=5, mines=9)
        board = reveal_cell(slab_wall_board, 0, 0, 0, config)
        assert not is_won(board, config)
        board = reveal_cell(board, 4, 0, 0, config)
        assert is_won(board, config)
