"""Background ticker that drives a quiz countdown outside of a Qt event loop.

Used by headless callers of ``QuizSession.start_countdown``; the PySide6 panel
ticks the session from a ``QTimer``.
"""

from __future__ import annotations

from collections.abc import Callable
import logging
from threading import Event, Thread

from classroom_tutor.constants.quiz_constants import TIMER_INTERVAL_SECONDS

logger = logging.getLogger(__name__)


class CountdownTimer:
    """Calls ``on_tick`` once per interval on a daemon thread.

    The timer stops when ``on_tick`` returns False, when it raises, or when
    ``stop()`` is called.
    """

    def __init__(
        self,
        on_tick: Callable[[], bool],
        interval: float = TIMER_INTERVAL_SECONDS,
        name: str = "QuizCountdown",
    ) -> None:
        if interval <= 0:
            raise ValueError("Timer interval must be positive.")
        self._on_tick = on_tick
        self._interval = interval
        self._name = name
        self._stop_event = Event()
        self._thread: Thread | None = None

    def start(self) -> None:
        if self.is_running():
            return
        self._stop_event.clear()
        self._thread = Thread(target=self._run, name=self._name, daemon=True)
        self._thread.start()

    def stop(self, timeout: float | None = None) -> None:
        self._stop_event.set()
        thread = self._thread
        if thread is not None and thread.is_alive():
            thread.join(timeout)

    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def _run(self) -> None:
        while not self._stop_event.wait(self._interval):
            try:
                keep_going = self._on_tick()
            except Exception:
                logger.exception("Countdown tick failed; stopping timer")
                return
            if not keep_going:
                return
