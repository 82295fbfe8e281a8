"""Convenience functions that build a record and pass it to a logger."""

from __future__ import annotations

import inspect
import sys
from typing import Any

from sparklog.logger import Logger
from sparklog.record import Level, Record, SourceLocation


def _emit(
    logger: Logger,
    level: Level,
    message: str,
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
) -> None:
    if not logger.should_log(level):
        return
    payload = message.format(*args, **kwargs) if args or kwargs else message
    # Frames: _emit, the public function, then its caller.
    frame = sys._getframe(2)
    module = inspect.getmodule(frame)
    location = SourceLocation(
        module_path=module.__name__ if module is not None else "",
        file=frame.f_code.co_filename,
        line=frame.f_lineno,
    )
    logger.log(Record(level, payload, source_location=location, logger_name=logger.name))


def log(logger: Logger, level: Level, message: str, *args: Any, **kwargs: Any) -> None:
    """Log ``message`` at ``level``.

    With positional or keyword arguments the message is formatted with
    :meth:`str.format`; formatting only happens if the level would be logged.
    """
    _emit(logger, level, message, args, kwargs)


def critical(logger: Logger, message: str, *args: Any, **kwargs: Any) -> None:
    """Log ``message`` at the critical level."""
    _emit(logger, Level.CRITICAL, message, args, kwargs)


def error(logger: Logger, message: str, *args: Any, **kwargs: Any) -> None:
    """Log ``message`` at the error level."""
    _emit(logger, Level.ERROR, message, args, kwargs)


def warn(logger: Logger, message: str, *args: Any, **kwargs: Any) -> None:
    """Log ``message`` at the warn level."""
    _emit(logger, Level.WARN, message, args, kwargs)


def info(logger: Logger, message: str, *args: Any, **kwargs: Any) -> None:
    """Log ``message`` at the info level."""
    _emit(logger, Level.INFO, message, args, kwargs)


def debug(logger: Logger, message: str, *args: Any, **kwargs: Any) -> None:
    """Log ``message`` at the debug level."""
    _emit(logger, Level.DEBUG, message, args, kwargs)


def trace(logger: Logger, message: str, *args: Any, **kwargs: Any) -> None:
    """Log ``message`` at the trace level."""
    _emit(logger, Level.TRACE, message, args, kwargs)