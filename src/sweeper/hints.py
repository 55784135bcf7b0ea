"""
Hint advisor for Minesweeper.

Suggests a safe unrevealed cell, preferring cells that can be proven
safe from the revealed numbers and the player's flags.
"""
from typing import List, Optional

import numpy as np

from .board import Board, Position


MAX_HINTS = 3


# ============================================================================
# Hint Advisor
# ============================================================================

class HintAdvisor:
    """
    Picks a safe cell to suggest to the player.

    Strategy:
        1. Collect unrevealed, unflagged, non-mine cells that touch a
           revealed number whose flags already account for all of its
           mines (every other hidden neighbor of that number is safe).
        2. If none qualify, fall back to any unrevealed, unflagged,
           non-mine cell.
        3. Choose uniformly at random from whichever pool is non-empty.

    Each number is checked on its own, so cells that only follow from
    combining several numbers are not detected. The advisor can see
    where the mines are; the deduction only decides which safe cells
    are preferred.
    """

    def __init__(self, rng: Optional[np.random.Generator] = None) -> None:
        """
        Initialize the advisor.

        Args:
            rng: Random generator used to choose among candidates.
        """
        self.rng = rng if rng is not None else np.random.default_rng()

    def find_safe_move(self, board: Board) -> Optional[Position]:
        """
        Find a safe cell to suggest.

        Args:
            board: Board with mines already placed.

        Returns:
            (row, col) of a safe cell, or None if no safe cell is hidden.
        """
        candidates = self.safe_candidates(board)
        deduced = [
            (row, col) for row, col in candidates
            if self.is_deductively_safe(board, row, col)
        ]
        pool = deduced or candidates
        if not pool:
            return None
        return pool[int(self.rng.integers(len(pool)))]

    def safe_candidates(self, board: Board) -> List[Position]:
        """All unrevealed, unflagged, non-mine positions."""
        candidates = []
        for row, col in board.iter_positions():
            cell = board.get_cell(row, col)
            if cell.is_hidden and not cell.is_mine:
                candidates.append((row, col))
        return candidates

    def is_deductively_safe(self, board: Board, row: int, col: int) -> bool:
        """
        Check whether a neighboring number proves this cell safe.

        True iff some neighbor is revealed, not a mine, shows a nonzero
        count, and has exactly that many flagged neighbors.
        """
        for neighbor_row, neighbor_col in board.neighbors(row, col):
            neighbor = board.get_cell(neighbor_row, neighbor_col)
            if not neighbor.is_revealed or neighbor.is_mine:
                continue
            if neighbor.adjacent_mines == 0:
                continue
            flags = board.count_adjacent_flags(neighbor_row, neighbor_col)
            if flags == neighbor.adjacent_mines:
                return True
        return False
