"""
Game timer.

Tracks elapsed play time from a monotonic start anchor and optionally
runs a periodic tick callback on a background thread.
"""
import threading
import time
from typing import Callable, Optional


TICK_INTERVAL_SECONDS = 1.0


class GameTimer:
    """
    Elapsed-time tracker with an optional repeating tick task.

    The tick callback receives whole elapsed seconds and must not touch
    game state. At most one tick thread runs per timer: ``start`` stops
    any previous run first, and ``stop`` may be called any number of
    times.
    """

    def __init__(
        self,
        on_tick: Optional[Callable[[int], None]] = None,
        interval: Optional[float] = TICK_INTERVAL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Initialize the timer.

        Args:
            on_tick: Called every interval while running.
            interval: Seconds between ticks; None disables the tick thread.
            clock: Monotonic time source in seconds.
        """
        self._on_tick = on_tick
        self._interval = interval
        self._clock = clock
        self._start_time: Optional[float] = None
        self._stop_time: Optional[float] = None
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._start_time is not None and self._stop_time is None

    @property
    def elapsed(self) -> float:
        """Seconds since start, frozen once stopped; 0 if never started."""
        if self._start_time is None:
            return 0.0
        end = self._stop_time if self._stop_time is not None else self._clock()
        return max(0.0, end - self._start_time)

    @property
    def elapsed_seconds(self) -> int:
        return int(self.elapsed)

    def start(self) -> None:
        """Anchor the start time and launch the tick thread if configured."""
        self.stop()
        self._start_time = self._clock()
        self._stop_time = None

        if self._on_tick is None or self._interval is None:
            return

        self._stop_event = threading.Event()
        self._thread = threading.Thread(
            target=self._run,
            args=(self._stop_event,),
            name="game-timer",
            daemon=True,
        )
        self._thread.start()

    def stop(self) -> None:
        """Freeze elapsed time and cancel the tick thread. Idempotent."""
        if self.running:
            self._stop_time = self._clock()

        thread = self._thread
        self._thread = None
        self._stop_event.set()
        if thread is not None and thread is not threading.current_thread():
            thread.join()

    def reset(self) -> None:
        """Stop and clear the start anchor."""
        self.stop()
        self._start_time = None
        self._stop_time = None

    def _run(self, stop_event: threading.Event) -> None:
        while not stop_event.wait(self._interval):
            self._on_tick(self.elapsed_seconds)
