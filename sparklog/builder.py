"""A chainable builder for :class:`~sparklog.logger.Logger`."""

from __future__ import annotations

from collections.abc import Iterable

from sparklog.logger import Logger
from sparklog.record import Level, LevelFilter
from sparklog.sink import ErrorHandler, Sink


class LoggerBuilder:
    """Collects logger settings and builds a :class:`Logger` from them.

    Defaults: no name, no sinks, level filter ``more_severe_equal(INFO)``,
    flush level filter ``off`` and no error handler (errors go to the
    default error handler).
    """

    def __init__(self) -> None:
        self._name: str | None = None
        self._level_filter = LevelFilter.more_severe_equal(Level.INFO)
        self._sinks: list[Sink] = []
        self._flush_level_filter = LevelFilter.off()
        self._error_handler: ErrorHandler | None = None

    def name(self, name: str) -> LoggerBuilder:
        """Set the logger name; it is validated by :meth:`build`."""
        self._name = name
        return self

    def level_filter(self, level_filter: LevelFilter) -> LoggerBuilder:
        """Set the log level filter."""
        self._level_filter = level_filter
        return self

    def sink(self, sink: Sink) -> LoggerBuilder:
        """Add one sink."""
        self._sinks.append(sink)
        return self

    def sinks(self, sinks: Iterable[Sink]) -> LoggerBuilder:
        """Add several sinks, in order."""
        self._sinks.extend(sinks)
        return self

    def flush_level_filter(self, level_filter: LevelFilter) -> LoggerBuilder:
        """Set the filter of records after which the sinks are flushed."""
        self._flush_level_filter = level_filter
        return self

    def error_handler(self, handler: ErrorHandler) -> LoggerBuilder:
        """Set the handler called for errors raised by sinks."""
        self._error_handler = handler
        return self

    def build(self) -> Logger:
        """Build a logger; raises LoggerNameError if the name is invalid."""
        return Logger(
            name=self._name,
            sinks=list(self._sinks),
            level_filter=self._level_filter,
            flush_level_filter=self._flush_level_filter,
            error_handler=self._error_handler,
        )

    def __repr__(self) -> str:
        return (
            f"LoggerBuilder(name={self._name!r}, level_filter={self._level_filter!r}, "
            f"sinks={len(self._sinks)}, flush_level_filter={self._flush_level_filter!r})"
        )


def builder() -> LoggerBuilder:
    """Return a :class:`LoggerBuilder` with default settings."""
    return LoggerBuilder()