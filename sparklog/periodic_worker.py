"""A background thread that calls a function at a fixed interval."""

from __future__ import annotations

import threading
from collections.abc import Callable
from datetime import timedelta


class PeriodicWorker:
    """Calls ``callback`` every ``interval`` until stopped or it returns False."""

    def __init__(
        self, callback: Callable[[], bool], interval: float | timedelta
    ) -> None:
        seconds = (
            interval.total_seconds() if isinstance(interval, timedelta) else float(interval)
        )
        if seconds <= 0:
            raise ValueError("PeriodicWorker: the interval cannot be zero")
        self._callback = callback
        self._interval = seconds
        self._stopping = threading.Event()
        self._failure: BaseException | None = None
        self._thread = threading.Thread(
            target=self._run, name="periodic-worker", daemon=True
        )
        self._thread.start()

    @property
    def interval(self) -> float:
        """The interval between calls, in seconds."""
        return self._interval

    @property
    def running(self) -> bool:
        """Whether the worker thread is still alive."""
        return self._thread.is_alive()

    def _run(self) -> None:
        while not self._stopping.wait(self._interval):
            try:
                if not self._callback():
                    return
            except BaseException as exc:  # raised again by stop()
                self._failure = exc
                return

    def stop(self) -> None:
        """Stop the worker and wait for its thread to finish."""
        self._stopping.set()
        if self._thread is not threading.current_thread():
            self._thread.join()
        failure, self._failure = self._failure, None
        if failure is not None:
            raise RuntimeError("PeriodicWorker: worker thread failed") from failure

    def __enter__(self) -> PeriodicWorker:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()