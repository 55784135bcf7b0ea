"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import Callable, Iterable, List, Tuple

import numpy as np

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sweeper import Board, Cell, GameSession


# ============================================================================
# Helpers
# ============================================================================

class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingListener:
    """Session listener that records every event it receives."""

    def __init__(self) -> None:
        self.events: List[tuple] = []

    def on_board_changed(self) -> None:
        self.events.append(("board_changed",))

    def on_game_ended(self, won: bool) -> None:
        self.events.append(("game_ended", won))

    def on_hint_granted(self, row: int, col: int) -> None:
        self.events.append(("hint_granted", row, col))

    def on_timer_tick(self, elapsed_seconds: int) -> None:
        self.events.append(("tick", elapsed_seconds))

    def named(self, name: str) -> List[tuple]:
        return [event for event in self.events if event[0] == name]


def build_board(
    rows: int, cols: int, mines: Iterable[Tuple[int, int]]
) -> Board:
    """Create a board with mines at fixed positions and counts filled in."""
    board = Board(rows, cols)
    for row, col in mines:
        board.get_cell(row, col).is_mine = True
    board.calculate_adjacent_mines()
    return board


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def board_factory() -> Callable[..., Board]:
    """Factory for boards with mines at given positions."""
    return build_board


@pytest.fixture
def wall_board() -> Board:
    """5x5 board with a full column of mines down the middle."""
    return build_board(5, 5, [(row, 2) for row in range(5)])


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return build_board(5, 5, [])


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random generator."""
    return np.random.default_rng(1234)


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def listener() -> RecordingListener:
    return RecordingListener()


@pytest.fixture
def fixed_mines(monkeypatch: pytest.MonkeyPatch) -> Callable[[Iterable[Tuple[int, int]]], None]:
    """Make every session place mines at the given positions."""

    def install(positions: Iterable[Tuple[int, int]]) -> None:
        positions = list(positions)

        def place(board, exclude_row, exclude_col, mine_count, rng=None):
            for row, col in positions:
                board.get_cell(row, col).is_mine = True

        monkeypatch.setattr(Board, "place_mines", place)

    return install


@pytest.fixture
def session_factory(clock: FakeClock, rng: np.random.Generator) -> Callable[..., GameSession]:
    """Factory for sessions on a fake clock with no tick thread."""
    sessions: List[GameSession] = []

    def make(difficulty: str = "baby") -> GameSession:
        session = GameSession(difficulty, rng=rng, clock=clock, tick_interval=None)
        sessions.append(session)
        return session

    yield make

    for session in sessions:
        session.close()


@pytest.fixture
def tiny_session(
    session_factory: Callable[..., GameSession],
    fixed_mines: Callable[[Iterable[Tuple[int, int]]], None],
    listener: RecordingListener,
) -> GameSession:
    """
    3x3 session with mines at the corners (0, 0) and (2, 2).

    Counts:
        * 1 0
        1 2 1
        0 1 *
    """
    fixed_mines([(0, 0), (2, 2)])
    session = session_factory("tiny")
    session.add_listener(listener)
    return session
