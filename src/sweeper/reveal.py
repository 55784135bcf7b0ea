"""
Reveal engine for the Minesweeper board.

Opens cells, flood-filling connected regions of zero-count cells.
"""
from dataclasses import dataclass, field
from typing import List

from .board import Board, Position


@dataclass
class RevealResult:
    """
    Outcome of a reveal.

    Attributes:
        revealed: Positions newly revealed, in reveal order.
        hit_mine: Whether a mine was revealed.
    """

    revealed: List[Position] = field(default_factory=list)
    hit_mine: bool = False

    @property
    def changed(self) -> bool:
        return bool(self.revealed)


def reveal_cell(board: Board, row: int, col: int) -> RevealResult:
    """
    Reveal a cell and flood-fill outward from zero-count cells.

    Out-of-bounds, revealed and flagged positions are skipped, so the
    revealed state doubles as the visited set for the traversal. Cells
    with a nonzero count are revealed but not expanded. Expansion stops
    as soon as a mine is revealed.

    Args:
        board: Board with mines and counts already placed.
        row: Row index to reveal.
        col: Column index to reveal.

    Returns:
        RevealResult listing the newly revealed positions.
    """
    result = RevealResult()
    stack: List[Position] = [(row, col)]

    while stack:
        current_row, current_col = stack.pop()
        cell = board.get_cell(current_row, current_col)
        if cell is None or not cell.reveal():
            continue

        result.revealed.append((current_row, current_col))

        if cell.is_mine:
            result.hit_mine = True
            break

        if cell.adjacent_mines == 0:
            stack.extend(board.neighbors(current_row, current_col))

    return result


def reveal_all_mines(board: Board) -> List[Position]:
    """
    Reveal every mine, including flagged ones.

    Returns:
        Positions of all mines on the board.
    """
    positions = board.mine_positions()
    for row, col in positions:
        board.get_cell(row, col).force_reveal()
    return positions
