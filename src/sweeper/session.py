"""
Game session for the Minesweeper engine.

Owns the board, sequences player actions, detects wins and losses,
manages the timer and hint charges, and notifies listeners.
"""
import logging
import time
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, List, Optional

import numpy as np

from .board import Board, Position
from .cell import CellView
from .difficulty import DEFAULT_DIFFICULTY, get_difficulty
from .hints import MAX_HINTS, HintAdvisor
from .reveal import reveal_all_mines, reveal_cell
from .timer import TICK_INTERVAL_SECONDS, GameTimer


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of a game."""

    NOT_STARTED = auto()
    ACTIVE = auto()
    WON = auto()
    LOST = auto()


@dataclass(frozen=True)
class GameStats:
    """Counters shown alongside the board."""

    mine_count: int
    flagged_count: int
    hints_remaining: int
    elapsed_seconds: int


@dataclass(frozen=True)
class GameSummary:
    """Result of a finished game."""

    won: bool
    elapsed_seconds: int

    @property
    def title(self) -> str:
        return "Victory!" if self.won else "Game Over"

    @property
    def message(self) -> str:
        if self.won:
            return "Congratulations! You cleared all mines!"
        return "You hit a mine!"


# ============================================================================
# Listener Interface
# ============================================================================

class SessionListener:
    """
    Receives session events.

    Every method is a no-op by default; presentation layers override
    the ones they care about.
    """

    def on_board_changed(self) -> None:
        pass

    def on_game_ended(self, won: bool) -> None:
        pass

    def on_hint_granted(self, row: int, col: int) -> None:
        pass

    def on_timer_tick(self, elapsed_seconds: int) -> None:
        """Called from the timer thread; must not mutate the session."""
        pass


# ============================================================================
# Game Session
# ============================================================================

class GameSession:
    """
    A single-player Minesweeper game.

    Lifecycle:
        NOT_STARTED -> ACTIVE on the first accepted reveal (mines are
        placed around the clicked cell and the timer starts), then
        ACTIVE -> WON or LOST. ``new_game`` and ``reset`` return to
        NOT_STARTED from any state.

    Player commands never raise for disallowed input; they return False
    (or None for hints) and leave the session unchanged.
    """

    def __init__(
        self,
        difficulty: str = DEFAULT_DIFFICULTY,
        rng: Optional[np.random.Generator] = None,
        clock: Callable[[], float] = time.monotonic,
        tick_interval: Optional[float] = TICK_INTERVAL_SECONDS,
    ) -> None:
        """
        Initialize the session and start a fresh game.

        Args:
            difficulty: Preset name from DIFFICULTIES.
            rng: Random generator for mine placement and hints.
            clock: Monotonic time source for the timer.
            tick_interval: Seconds between timer ticks; None disables
                the tick thread (elapsed time is still tracked).
        """
        self._rng = rng if rng is not None else np.random.default_rng()
        self._advisor = HintAdvisor(self._rng)
        self._listeners: List[SessionListener] = []
        self._timer = GameTimer(
            on_tick=self._emit_timer_tick,
            interval=tick_interval,
            clock=clock,
        )
        self._summary: Optional[GameSummary] = None
        self.new_game(difficulty)

    # ========================================================================
    # Listeners
    # ========================================================================

    def add_listener(self, listener: SessionListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: SessionListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _emit_board_changed(self) -> None:
        for listener in list(self._listeners):
            listener.on_board_changed()

    def _emit_game_ended(self, won: bool) -> None:
        for listener in list(self._listeners):
            listener.on_game_ended(won)

    def _emit_hint_granted(self, row: int, col: int) -> None:
        for listener in list(self._listeners):
            listener.on_hint_granted(row, col)

    def _emit_timer_tick(self, elapsed_seconds: int) -> None:
        for listener in list(self._listeners):
            listener.on_timer_tick(elapsed_seconds)

    # ========================================================================
    # Commands
    # ========================================================================

    def new_game(self, difficulty: Optional[str] = None) -> None:
        """
        Discard the current board and start over.

        Args:
            difficulty: Preset name; None keeps the current one.

        Raises:
            ValueError: If the preset name is unknown.
        """
        key = difficulty if difficulty is not None else self.difficulty
        config = get_difficulty(key)

        self._timer.reset()
        self.difficulty = key
        self.config = config
        self.board = Board(config.rows, config.cols)
        self._state = GameState.NOT_STARTED
        self.flagged_count = 0
        self.hints_remaining = MAX_HINTS
        self._summary = None

        self._emit_board_changed()

    def reset(self) -> None:
        """Restart on a fresh board at the current difficulty."""
        self.hints_remaining = MAX_HINTS
        self.new_game()

    def reveal(self, row: int, col: int) -> bool:
        """
        Reveal a cell.

        The first accepted reveal places the mines away from the clicked
        cell and starts the timer.

        Returns:
            True if anything was revealed, False if the action was rejected.
        """
        if self.game_over:
            return False
        cell = self.board.get_cell(row, col)
        if cell is None or not cell.is_hidden:
            return False

        if self._state == GameState.NOT_STARTED:
            self._start(row, col)

        result = reveal_cell(self.board, row, col)

        if result.hit_mine:
            self._end_game(won=False)
        elif self.board.all_safe_cells_revealed():
            self._end_game(won=True)
        else:
            self._emit_board_changed()
        return result.changed

    def toggle_flag(self, row: int, col: int) -> bool:
        """
        Toggle a flag on an unrevealed cell.

        Returns:
            True if the flag was toggled, False if the action was rejected.
        """
        if self.game_over:
            return False
        cell = self.board.get_cell(row, col)
        if cell is None or not cell.toggle_flag():
            return False

        self.flagged_count += 1 if cell.is_flagged else -1
        self._emit_board_changed()
        return True

    def request_hint(self) -> Optional[Position]:
        """
        Spend a hint charge to get a safe cell.

        Returns:
            (row, col) of a safe cell, or None if hints are unavailable
            or no safe cell remains. No charge is spent on None.
        """
        if not self.hint_available:
            return None

        move = self._advisor.find_safe_move(self.board)
        if move is None:
            return None

        self.hints_remaining -= 1
        logger.debug("Hint granted at %s, %d left", move, self.hints_remaining)
        self._emit_hint_granted(*move)
        return move

    def _start(self, row: int, col: int) -> None:
        """Place mines around the first click and start the clock."""
        self.board.place_mines(row, col, self.config.num_mines, self._rng)
        self.board.calculate_adjacent_mines()
        self._state = GameState.ACTIVE
        self._timer.start()
        logger.debug(
            "Game started on %s (%dx%d, %d mines), first click %s",
            self.difficulty, self.config.rows, self.config.cols,
            self.config.num_mines, (row, col),
        )

    def _end_game(self, won: bool) -> None:
        """Move to a terminal state and show every mine."""
        self._state = GameState.WON if won else GameState.LOST
        self._timer.stop()
        self.hints_remaining = MAX_HINTS
        reveal_all_mines(self.board)
        self._summary = GameSummary(won=won, elapsed_seconds=self._timer.elapsed_seconds)

        logger.info(
            "Game %s on %s after %ds",
            "won" if won else "lost", self.difficulty, self._summary.elapsed_seconds,
        )
        self._emit_board_changed()
        self._emit_game_ended(won)

    # ========================================================================
    # Queries
    # ========================================================================

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def game_over(self) -> bool:
        """Check if the game has ended, won or lost."""
        return self._state in (GameState.WON, GameState.LOST)

    @property
    def game_won(self) -> bool:
        return self._state == GameState.WON

    @property
    def first_click_pending(self) -> bool:
        return self._state == GameState.NOT_STARTED

    @property
    def hint_available(self) -> bool:
        """Check if a hint could be granted right now."""
        return (
            self.hints_remaining > 0
            and self._state == GameState.ACTIVE
            and self.flagged_count < self.config.num_mines
        )

    @property
    def summary(self) -> Optional[GameSummary]:
        """Result of the finished game, or None while in play."""
        return self._summary

    @property
    def elapsed_seconds(self) -> int:
        return self._timer.elapsed_seconds

    @property
    def timer_running(self) -> bool:
        return self._timer.running

    def get_cell_view(self, row: int, col: int) -> Optional[CellView]:
        """Get a read-only snapshot of a cell, or None if out of bounds."""
        return self.board.get_cell_view(row, col)

    def get_stats(self) -> GameStats:
        return GameStats(
            mine_count=self.config.num_mines,
            flagged_count=self.flagged_count,
            hints_remaining=self.hints_remaining,
            elapsed_seconds=self.elapsed_seconds,
        )

    def get_observation(self) -> np.ndarray:
        """Board display codes as a 2D int8 array."""
        return self.board.get_observation()

    def close(self) -> None:
        """Stop the timer thread."""
        self._timer.stop()
