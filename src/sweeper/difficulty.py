"""
Difficulty presets for the Minesweeper engine.

Maps preset names to immutable board configurations.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


# ============================================================================
# Board Configuration
# ============================================================================

@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        num_mines: Total mines to place.
    """

    rows: int = 5
    cols: int = 5
    num_mines: int = 6

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise ValueError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        if self.num_mines > self.max_mines:
            raise ValueError(f"Too many mines (max {self.max_mines})")

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.rows * self.cols

    @property
    def max_mines(self) -> int:
        """Largest mine count that still leaves room for the first click."""
        return self.total_cells - 1


# ============================================================================
# Presets
# ============================================================================

DIFFICULTIES: Mapping[str, BoardConfig] = MappingProxyType({
    "baby": BoardConfig(2, 2, 1),
    "tiny": BoardConfig(3, 3, 2),
    "small": BoardConfig(4, 4, 4),
    "easy": BoardConfig(5, 5, 6),
    "medium": BoardConfig(6, 6, 9),
    "challenging": BoardConfig(7, 7, 13),
    "hard": BoardConfig(8, 8, 18),
    "expert": BoardConfig(9, 9, 23),
    "master": BoardConfig(10, 10, 30),
})

DEFAULT_DIFFICULTY = "easy"


def get_difficulty(key: str) -> BoardConfig:
    """
    Look up a preset by name.

    Raises:
        ValueError: If the name is not a known preset.
    """
    try:
        return DIFFICULTIES[key]
    except KeyError:
        known = ", ".join(DIFFICULTIES)
        raise ValueError(f"Unknown difficulty {key!r} (expected one of: {known})") from None
