"""Cancellable periodic task running on a daemon thread."""

import logging
import threading
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class PeriodicTask:
    """
    Calls ``func`` every ``interval`` seconds until stopped.

    The first call happens one interval after ``start()``. Exceptions from
    ``func`` are logged and do not end the schedule.
    """

    def __init__(self, interval: float, func: Callable[[], None], name: str = "periodic-task"):
        if interval <= 0:
            raise ValueError("interval must be positive")
        self._interval = interval
        self._func = func
        self._name = name
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.running:
            raise RuntimeError(f"{self._name} is already running")
        self._stop_event = threading.Event()
        self._thread = threading.Thread(target=self._run, name=self._name, daemon=True)
        self._thread.start()

    def stop(self, timeout: Optional[float] = 5.0) -> None:
        """Cancel future runs and wait for an in-flight run to finish."""
        self._stop_event.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)
        self._thread = None

    def _run(self) -> None:
        stop_event = self._stop_event
        while not stop_event.wait(self._interval):
            try:
                self._func()
            except Exception:
                logger.exception("%s run failed", self._name)
