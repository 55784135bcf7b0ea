"""
Board module for the Minesweeper engine.

Implements the cell grid with mine placement, adjacency counting,
and neighbor queries.
"""
from typing import Iterator, List, Optional, Tuple

import numpy as np

from .cell import Cell, CellView


Position = Tuple[int, int]


# ============================================================================
# Board Class
# ============================================================================

class Board:
    """
    Minesweeper board grid.

    A freshly created board has no mines; they are placed later by
    ``place_mines`` so the first revealed cell can be excluded.
    """

    def __init__(self, rows: int, cols: int) -> None:
        """
        Create an empty grid of hidden, mine-free cells.

        Args:
            rows: Number of rows.
            cols: Number of columns.
        """
        if rows < 1 or cols < 1:
            raise ValueError("Board dimensions must be positive")
        self.rows = rows
        self.cols = cols
        self._grid: List[List[Cell]] = [
            [Cell() for _ in range(cols)]
            for _ in range(rows)
        ]

    def __repr__(self) -> str:
        return f"Board(rows={self.rows}, cols={self.cols}, mines={self.count_mines()})"

    @property
    def total_cells(self) -> int:
        return self.rows * self.cols

    # ========================================================================
    # Mine Placement (Low-level)
    # ========================================================================

    def place_mines(
        self,
        exclude_row: int,
        exclude_col: int,
        mine_count: int,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        """
        Place mines at uniformly random positions, skipping one cell.

        Draws positions over the whole grid and retries whenever a draw
        lands on an existing mine or on the excluded cell.

        Args:
            exclude_row: Row of the cell to keep mine-free.
            exclude_col: Column of the cell to keep mine-free.
            mine_count: Number of mines to place.
            rng: Random generator (default: a fresh unseeded one).

        Raises:
            ValueError: If mine_count is negative or leaves no room for
                the excluded cell.
        """
        if mine_count < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.total_cells - 1
        if mine_count > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

        rng = rng if rng is not None else np.random.default_rng()
        placed = 0
        while placed < mine_count:
            row = int(rng.integers(self.rows))
            col = int(rng.integers(self.cols))
            if (row, col) == (exclude_row, exclude_col):
                continue
            cell = self._grid[row][col]
            if cell.is_mine:
                continue
            cell.is_mine = True
            placed += 1

    def calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all non-mine cells."""
        for row, col in self.iter_positions():
            cell = self._grid[row][col]
            if not cell.is_mine:
                cell.adjacent_mines = self._count_adjacent_mines(row, col)

    def _count_adjacent_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for neighbor_row, neighbor_col in self.neighbors(row, col):
            if self._grid[neighbor_row][neighbor_col].is_mine:
                count += 1
        return count

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples clipped to the board bounds.
        """
        result = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.is_valid_position(new_row, new_col):
                    result.append((new_row, new_col))
        return result

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def iter_positions(self) -> Iterator[Position]:
        """Yield every (row, col) in row-major order."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield row, col

    def count_adjacent_flags(self, row: int, col: int) -> int:
        """Count flagged cells adjacent to position."""
        count = 0
        for neighbor_row, neighbor_col in self.neighbors(row, col):
            if self._grid[neighbor_row][neighbor_col].is_flagged:
                count += 1
        return count

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.is_valid_position(row, col):
            return None
        return self._grid[row][col]

    def get_cell_view(self, row: int, col: int) -> Optional[CellView]:
        """Get a read-only snapshot of a cell, or None if invalid."""
        cell = self.get_cell(row, col)
        return cell.to_view() if cell is not None else None

    def count_mines(self) -> int:
        """Number of mines currently on the board."""
        return sum(1 for row, col in self.iter_positions() if self._grid[row][col].is_mine)

    def mine_positions(self) -> List[Position]:
        """Positions of every mine."""
        return [
            (row, col) for row, col in self.iter_positions()
            if self._grid[row][col].is_mine
        ]

    def all_safe_cells_revealed(self) -> bool:
        """Check if every non-mine cell is revealed. Flags are ignored."""
        for row, col in self.iter_positions():
            cell = self._grid[row][col]
            if not cell.is_mine and not cell.is_revealed:
                return False
        return True

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array of display codes.

        Returns:
            2D int8 array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.rows, self.cols), dtype=np.int8)
        for row, col in self.iter_positions():
            obs[row, col] = self._grid[row][col].to_observation()
        return obs
