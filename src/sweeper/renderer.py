"""
Text renderer for a Minesweeper session.

Draws the board and counters as plain text, driven only by session
events and queries.
"""
import time
from typing import Callable, Optional

import numpy as np

from .board import Position
from .cell import FLAGGED_CODE, HIDDEN_CODE, MINE_CODE
from .session import GameSession, SessionListener


HINT_HIGHLIGHT_SECONDS = 2.0


def format_elapsed(seconds: int) -> str:
    """Format whole seconds as m:ss."""
    minutes, secs = divmod(max(0, int(seconds)), 60)
    return f"{minutes}:{secs:02d}"


def cell_symbol(code: int) -> str:
    """Map a board display code to a single character."""
    if code == HIDDEN_CODE:
        return "."
    if code == FLAGGED_CODE:
        return "F"
    if code == MINE_CODE:
        return "*"
    if code == 0:
        return " "
    return str(code)


class TextRenderer(SessionListener):
    """
    Renders a session as text.

    Subscribes itself to the session on construction and keeps the most
    recent frame in ``frame``. A granted hint is shown as ``?`` until
    the highlight expires or the board changes.
    """

    def __init__(
        self,
        session: GameSession,
        highlight_seconds: float = HINT_HIGHLIGHT_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.session = session
        self.highlight_seconds = highlight_seconds
        self._clock = clock
        self._hint: Optional[Position] = None
        self._hint_expires = 0.0
        self.timer_text = format_elapsed(0)
        self.frame = ""
        session.add_listener(self)
        self.refresh()

    # ========================================================================
    # Session Events
    # ========================================================================

    def on_board_changed(self) -> None:
        self._hint = None
        self.refresh()

    def on_game_ended(self, won: bool) -> None:
        self.refresh()

    def on_hint_granted(self, row: int, col: int) -> None:
        self._hint = (row, col)
        self._hint_expires = self._clock() + self.highlight_seconds
        self.refresh()

    def on_timer_tick(self, elapsed_seconds: int) -> None:
        """Redraw only the header; runs on the timer thread."""
        self.timer_text = format_elapsed(elapsed_seconds)
        lines = self.frame.split("\n", 1)
        lines[0] = self.render_header()
        self.frame = "\n".join(lines)

    # ========================================================================
    # Rendering
    # ========================================================================

    @property
    def highlighted(self) -> Optional[Position]:
        """Currently highlighted hint cell, if it has not expired."""
        if self._hint is None or self._clock() >= self._hint_expires:
            return None
        return self._hint

    def refresh(self) -> str:
        """Re-render the whole frame."""
        if self.highlighted is None:
            self._hint = None
        self.timer_text = format_elapsed(self.session.elapsed_seconds)
        parts = [self.render_header(), self.render_board()]
        summary = self.render_summary()
        if summary:
            parts.append(summary)
        self.frame = "\n".join(parts)
        return self.frame

    def render_header(self) -> str:
        stats = self.session.get_stats()
        return (
            f"Mines: {stats.mine_count}  Flags: {stats.flagged_count}  "
            f"Hints: {stats.hints_remaining}  Time: {self.timer_text}"
        )

    def render_board(self) -> str:
        """Render the grid with row and column indices."""
        obs: np.ndarray = self.session.get_observation()
        rows, cols = obs.shape
        highlighted = self.highlighted

        lines = ["   " + " ".join(str(col % 10) for col in range(cols))]
        for row in range(rows):
            symbols = []
            for col in range(cols):
                if (row, col) == highlighted:
                    symbols.append("?")
                else:
                    symbols.append(cell_symbol(int(obs[row, col])))
            lines.append(f"{row:>2} " + " ".join(symbols))
        return "\n".join(lines)

    def render_summary(self) -> str:
        summary = self.session.summary
        if summary is None:
            return ""
        return (
            f"*** {summary.title} ***\n"
            f"{summary.message} Time: {format_elapsed(summary.elapsed_seconds)}"
        )

    def close(self) -> None:
        """Unsubscribe from the session."""
        self.session.remove_listener(self)
