"""The logger: filters records and passes them to its sinks."""

from __future__ import annotations

import threading
import weakref
from collections.abc import Callable, Iterable
from datetime import timedelta

from sparklog.periodic_worker import PeriodicWorker
from sparklog.record import Level, LevelFilter, Record
from sparklog.sink import ErrorHandler, Sink, check_logger_name, default_error_handler


class Logger:
    """Passes records that pass its level filter to each of its sinks in turn.

    Sinks may be flushed automatically after records that pass the flush
    level filter, periodically, or both.
    """

    def __init__(
        self,
        name: str | None = None,
        sinks: Iterable[Sink] = (),
        level_filter: LevelFilter | None = None,
        flush_level_filter: LevelFilter | None = None,
        error_handler: ErrorHandler | None = None,
    ) -> None:
        if name is not None:
            check_logger_name(name)
        self._name = name
        self.sinks: list[Sink] = list(sinks)
        self.level_filter = (
            level_filter
            if level_filter is not None
            else LevelFilter.more_severe_equal(Level.INFO)
        )
        self.flush_level_filter = (
            flush_level_filter if flush_level_filter is not None else LevelFilter.off()
        )
        self.error_handler = error_handler
        self._flusher_lock = threading.Lock()
        self._flusher: PeriodicWorker | None = None

    @property
    def name(self) -> str | None:
        """The logger name, or None if it has none."""
        return self._name

    def set_name(self, name: str | None) -> None:
        """Rename the logger; raises LoggerNameError for an invalid name."""
        if name is not None:
            check_logger_name(name)
        self._name = name

    @property
    def flush_period(self) -> float | None:
        """The automatic flush interval in seconds, or None if disabled."""
        with self._flusher_lock:
            return self._flusher.interval if self._flusher is not None else None

    def should_log(self, level: Level) -> bool:
        """Return whether a record at ``level`` would be logged."""
        return self.level_filter.test(level)

    def log(self, record: Record) -> None:
        """Pass ``record`` to the sinks if it passes the level filter."""
        if not self.should_log(record.level):
            return
        for sink in self.sinks:
            if sink.should_log(record.level):
                try:
                    sink.log(record)
                except Exception as err:
                    self._handle_error(err)
        if self.flush_level_filter.test(record.level):
            self.flush()

    def flush(self) -> None:
        """Flush every sink."""
        self._flush_sinks()

    def _flush_sinks(self) -> None:
        for sink in self.sinks:
            try:
                sink.flush()
            except Exception as err:
                self._handle_error(err)

    def _handle_error(self, err: BaseException) -> None:
        if self.error_handler is not None:
            self.error_handler(err)
        else:
            name = self._name if self._name is not None else "*no name*"
            default_error_handler(f"Logger ({name})", err)

    def set_flush_period(self, interval: float | timedelta | None) -> None:
        """Flush the sinks every ``interval`` in a background thread, or stop doing so."""
        with self._flusher_lock:
            old, self._flusher = self._flusher, None
            if old is not None:
                old.stop()
            if interval is None:
                return
            ref = weakref.ref(self)

            def tick() -> bool:
                logger = ref()
                if logger is None:
                    return False
                logger._flush_sinks()
                return True

            self._flusher = PeriodicWorker(tick, interval)

    def set_error_handler(self, handler: ErrorHandler | None) -> None:
        """Set the handler called for errors raised by sinks."""
        self.error_handler = handler

    def _clone_lossy(self) -> Logger:
        return Logger(
            name=self._name,
            sinks=self.sinks,
            level_filter=self.level_filter,
            flush_level_filter=self.flush_level_filter,
            error_handler=self.error_handler,
        )

    def fork_with(self, modifier: Callable[[Logger], None]) -> Logger:
        """Return a separate copy of this logger, configured by ``modifier``."""
        period = self.flush_period
        new = self._clone_lossy()
        modifier(new)
        if period is not None:
            new.set_flush_period(period)
        return new

    def fork_with_name(self, new_name: str | None) -> Logger:
        """Return a separate copy of this logger with a different name."""
        return self.fork_with(lambda new: new.set_name(new_name))

    def close(self) -> None:
        """Stop periodic flushing, if any."""
        self.set_flush_period(None)

    def __enter__(self) -> Logger:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __copy__(self) -> Logger:
        if self.flush_period is not None:
            raise RuntimeError(
                "cannot copy a Logger with a flush period; use fork_with instead"
            )
        return self._clone_lossy()

    def __repr__(self) -> str:
        return (
            f"Logger(name={self._name!r}, level_filter={self.level_filter!r}, "
            f"sinks={[sink.level_filter for sink in self.sinks]!r}, "
            f"flush_level_filter={self.flush_level_filter!r}, "
            f"flush_period={self.flush_period!r})"
        )