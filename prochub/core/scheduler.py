"""Startup auto-check: one deferred, silent update check per session."""

import logging
from typing import Callable

logger = logging.getLogger(__name__)


def _qt_timer_factory():
    """Single-shot QTimer; imported lazily so the core stays Qt-free."""
    from PyQt6.QtCore import QTimer
    timer = QTimer()
    timer.setSingleShot(True)
    return timer


class DeferredCheck:
    """A scheduled one-shot check. cancel() is for tests and shutdown only."""

    def __init__(self, timer, delay_ms: int):
        self.timer = timer
        self.delay_ms = delay_ms
        self.fired = False
        self.cancelled = False

    def cancel(self):
        if not self.fired and not self.cancelled:
            self.cancelled = True
            self.timer.stop()


class AutoCheckScheduler:
    """Fires the check flow once, delay_ms after schedule_once() is called.

    run_check is called as run_check(show_latest_message=False,
    show_error_message=False). Whatever it raises is logged and dropped.
    """

    def __init__(self, run_check: Callable[..., object], timer_factory=None):
        self._run_check = run_check
        self._timer_factory = timer_factory or _qt_timer_factory
        self._task: DeferredCheck | None = None

    @property
    def task(self) -> DeferredCheck | None:
        return self._task

    def schedule_once(self, delay_ms: int = 5000):
        if self._task is not None:
            logger.info("Auto update check already scheduled, ignoring")
            return

        timer = self._timer_factory()
        task = DeferredCheck(timer, max(0, int(delay_ms)))
        timer.timeout.connect(lambda: self._fire(task))
        self._task = task
        timer.start(task.delay_ms)
        logger.info("Auto update check scheduled in %d ms", task.delay_ms)

    def _fire(self, task: DeferredCheck):
        if task.fired or task.cancelled:
            return
        task.fired = True
        logger.info("Running startup update check")
        try:
            self._run_check(show_latest_message=False, show_error_message=False)
        except Exception:
            logger.exception("Startup update check failed")
