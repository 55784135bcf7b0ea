"""
Unit tests for the hint advisor.

Board used throughout (mines at the corners):
    * 1 0
    1 2 1
    0 1 *
"""
import pytest
import numpy as np
from sweeper import Board, HintAdvisor


@pytest.fixture
def corner_board(board_factory) -> Board:
    return board_factory(3, 3, [(0, 0), (2, 2)])


@pytest.fixture
def advisor(rng: np.random.Generator) -> HintAdvisor:
    return HintAdvisor(rng)


# ============================================================================
# Deduction Tests
# ============================================================================

class TestIsDeductivelySafe:
    """Test the single-number safety check."""

    def test_nothing_revealed_proves_nothing(
        self, advisor: HintAdvisor, corner_board: Board
    ) -> None:
        for row, col in corner_board.iter_positions():
            assert advisor.is_deductively_safe(corner_board, row, col) is False

    def test_satisfied_number_proves_neighbors_safe(
        self, advisor: HintAdvisor, corner_board: Board
    ) -> None:
        corner_board.get_cell(0, 1).reveal()
        corner_board.get_cell(0, 0).toggle_flag()
        for position in [(0, 2), (1, 0), (1, 1), (1, 2)]:
            assert advisor.is_deductively_safe(corner_board, *position) is True
        assert advisor.is_deductively_safe(corner_board, 2, 0) is False

    def test_unflagged_number_proves_nothing(
        self, advisor: HintAdvisor, corner_board: Board
    ) -> None:
        corner_board.get_cell(0, 1).reveal()
        assert advisor.is_deductively_safe(corner_board, 0, 2) is False

    def test_too_many_flags_proves_nothing(
        self, advisor: HintAdvisor, corner_board: Board
    ) -> None:
        corner_board.get_cell(0, 1).reveal()
        corner_board.get_cell(0, 0).toggle_flag()
        corner_board.get_cell(1, 0).toggle_flag()
        assert advisor.is_deductively_safe(corner_board, 0, 2) is False

    def test_zero_neighbor_proves_nothing(
        self, advisor: HintAdvisor, corner_board: Board
    ) -> None:
        corner_board.get_cell(0, 2).reveal()
        assert advisor.is_deductively_safe(corner_board, 1, 2) is False

    def test_hidden_number_proves_nothing(
        self, advisor: HintAdvisor, corner_board: Board
    ) -> None:
        corner_board.get_cell(0, 0).toggle_flag()
        assert advisor.is_deductively_safe(corner_board, 0, 2) is False


# ============================================================================
# Safe Move Selection Tests
# ============================================================================

class TestFindSafeMove:
    """Test candidate pools and selection."""

    @pytest.mark.parametrize("seed", range(20))
    def test_prefers_deduced_cells(self, corner_board: Board, seed: int) -> None:
        corner_board.get_cell(0, 1).reveal()
        corner_board.get_cell(0, 0).toggle_flag()
        move = HintAdvisor(np.random.default_rng(seed)).find_safe_move(corner_board)
        assert move in {(0, 2), (1, 0), (1, 1), (1, 2)}

    @pytest.mark.parametrize("seed", range(20))
    def test_falls_back_to_any_safe_cell(self, corner_board: Board, seed: int) -> None:
        move = HintAdvisor(np.random.default_rng(seed)).find_safe_move(corner_board)
        assert move is not None
        assert corner_board.get_cell(*move).is_mine is False

    def test_fallback_reaches_every_safe_cell(self, corner_board: Board) -> None:
        advisor = HintAdvisor(np.random.default_rng(0))
        seen = {advisor.find_safe_move(corner_board) for _ in range(300)}
        assert seen == {(0, 1), (0, 2), (1, 0), (1, 1), (1, 2), (2, 0), (2, 1)}

    def test_skips_flagged_and_revealed_cells(
        self, advisor: HintAdvisor, corner_board: Board
    ) -> None:
        for position in [(0, 1), (0, 2), (1, 0), (1, 1), (1, 2), (2, 0)]:
            corner_board.get_cell(*position).reveal()
        corner_board.get_cell(2, 1).toggle_flag()
        assert advisor.find_safe_move(corner_board) is None

    def test_returns_none_when_cleared(
        self, advisor: HintAdvisor, corner_board: Board
    ) -> None:
        for position in [(0, 1), (0, 2), (1, 0), (1, 1), (1, 2), (2, 0), (2, 1)]:
            corner_board.get_cell(*position).reveal()
        assert advisor.find_safe_move(corner_board) is None

    def test_safe_candidates(self, advisor: HintAdvisor, corner_board: Board) -> None:
        corner_board.get_cell(0, 1).reveal()
        corner_board.get_cell(2, 0).toggle_flag()
        assert advisor.safe_candidates(corner_board) == [(0, 2), (1, 0), (1, 1), (1, 2), (2, 1)]
