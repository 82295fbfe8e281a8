"""The sink base class, logger-name validation and the fallback error handler."""

from __future__ import annotations

import sys
from collections.abc import Callable
from datetime import datetime
from typing import TextIO

from sparklog.record import Level, LevelFilter, Record

ErrorHandler = Callable[[BaseException], None]

_FORBIDDEN_NAME_CHARS = frozenset(",=*?${}\"';")


class LoggerNameError(ValueError):
    """Raised when a logger name contains characters that are not allowed."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"invalid logger name {name!r}: it must not contain any of "
            "`, = * ? $ { } \" ' ;` and must not start or end with a space"
        )
        self.name = name


def check_logger_name(name: str) -> None:
    """Raise :class:`LoggerNameError` if ``name`` is not a valid logger name."""
    if (
        any(ch in _FORBIDDEN_NAME_CHARS for ch in name)
        or name.startswith(" ")
        or name.endswith(" ")
    ):
        raise LoggerNameError(name)


def _format_time(moment: datetime) -> str:
    local = moment.astimezone()
    return f"{local:%Y-%m-%d %H:%M:%S}.{local.microsecond // 1000:03d}"


def default_error_handler(origin: str, error: BaseException) -> None:
    """Report an error that has no handler of its own to standard error."""
    print(
        f"[*** sparklog unhandled error ***] [{_format_time(datetime.now())}] "
        f"[{origin}] {error}",
        file=sys.stderr,
    )


class Sink:
    """Writes formatted records to a text stream.

    Subclasses override :meth:`log` and :meth:`flush` to send records
    elsewhere; the level filter is shared by all sinks.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        level_filter: LevelFilter | None = None,
    ) -> None:
        self.stream = stream
        self.level_filter = level_filter if level_filter is not None else LevelFilter.all()

    def _target(self) -> TextIO:
        return self.stream if self.stream is not None else sys.stderr

    def should_log(self, level: Level) -> bool:
        """Return whether this sink accepts records at ``level``."""
        return self.level_filter.test(level)

    def format(self, record: Record) -> str:
        """Render ``record`` as one line of text, line ending included."""
        parts = [f"[{_format_time(record.time)}]"]
        if record.logger_name is not None:
            parts.append(f"[{record.logger_name}]")
        parts.append(f"[{record.level.label}]")
        if record.source_location is not None:
            loc = record.source_location
            parts.append(f"[{loc.module_path}, {loc.file_name}:{loc.line}]")
        return " ".join(parts) + f" {record.payload}\n"

    def log(self, record: Record) -> None:
        """Write ``record`` to the stream."""
        self._target().write(self.format(record))

    def flush(self) -> None:
        """Flush the stream."""
        self._target().flush()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(level_filter={self.level_filter!r})"