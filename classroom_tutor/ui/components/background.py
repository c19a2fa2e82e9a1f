"""Runs blocking session calls off the GUI thread."""

from __future__ import annotations

from collections.abc import Callable
import logging
from threading import Thread
from typing import Any

from PySide6.QtCore import QObject, Signal, Slot

logger = logging.getLogger(__name__)


class BackgroundRunner(QObject):
    """Executes a task on a daemon thread and hands its result back on the GUI thread.

    Results travel through a queued Qt signal, so ``on_done`` always runs on the
    thread that owns this object.
    """

    finished = Signal(object, object)

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._pending = 0
        self.finished.connect(self._deliver)

    def run(
        self,
        task: Callable[[], Any],
        on_done: Callable[[Any], None] | None = None,
        name: str = "ClassroomTutorWorker",
    ) -> None:
        self._pending += 1

        def work() -> None:
            try:
                result = task()
            except Exception:
                logger.exception("Background task %s failed", name)
                result = None
            self.finished.emit(on_done, result)

        Thread(target=work, name=name, daemon=True).start()

    def is_busy(self) -> bool:
        return self._pending > 0

    @Slot(object, object)
    def _deliver(self, on_done: Callable[[Any], None] | None, result: Any) -> None:
        self._pending -= 1
        if on_done is not None:
            on_done(result)
