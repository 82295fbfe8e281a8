"""Log levels, level filters, source locations and log records."""

from __future__ import annotations

import dataclasses
import enum
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import PurePath


class Level(enum.IntEnum):
    """Severity of a log record; a lower value is more severe."""

    CRITICAL = 0
    ERROR = 1
    WARN = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5

    @property
    def label(self) -> str:
        """The lower-case name of the level, e.g. ``"info"``."""
        return self.name.lower()

    @property
    def short_label(self) -> str:
        """The one-letter name of the level, e.g. ``"I"``."""
        return self.name[0]

    @classmethod
    def from_str(cls, text: str) -> Level:
        """Parse a level name, ignoring case."""
        try:
            return cls[text.strip().upper()]
        except KeyError:
            raise ValueError(f"unknown log level: {text!r}") from None

    def __str__(self) -> str:
        return self.label


class FilterKind(enum.Enum):
    """The comparison a :class:`LevelFilter` performs."""

    OFF = "off"
    EQUAL = "equal"
    NOT_EQUAL = "not_equal"
    MORE_SEVERE = "more_severe"
    MORE_SEVERE_EQUAL = "more_severe_equal"
    MORE_VERBOSE = "more_verbose"
    MORE_VERBOSE_EQUAL = "more_verbose_equal"
    ALL = "all"


_NEEDS_LEVEL = frozenset(FilterKind) - {FilterKind.OFF, FilterKind.ALL}


@dataclass(frozen=True)
class LevelFilter:
    """Decides whether a record of a given level passes."""

    kind: FilterKind
    level: Level | None = None

    def __post_init__(self) -> None:
        if self.kind in _NEEDS_LEVEL and self.level is None:
            raise ValueError(f"filter {self.kind.value} requires a level")
        if self.kind not in _NEEDS_LEVEL and self.level is not None:
            raise ValueError(f"filter {self.kind.value} takes no level")

    def test(self, level: Level) -> bool:
        """Return whether a record at ``level`` passes this filter."""
        kind, ref = self.kind, self.level
        if kind is FilterKind.OFF:
            return False
        if kind is FilterKind.ALL:
            return True
        if kind is FilterKind.EQUAL:
            return level == ref
        if kind is FilterKind.NOT_EQUAL:
            return level != ref
        if kind is FilterKind.MORE_SEVERE:
            return level < ref
        if kind is FilterKind.MORE_SEVERE_EQUAL:
            return level <= ref
        if kind is FilterKind.MORE_VERBOSE:
            return level > ref
        return level >= ref

    @classmethod
    def off(cls) -> LevelFilter:
        return cls(FilterKind.OFF)

    @classmethod
    def all(cls) -> LevelFilter:
        return cls(FilterKind.ALL)

    @classmethod
    def equal(cls, level: Level) -> LevelFilter:
        return cls(FilterKind.EQUAL, level)

    @classmethod
    def not_equal(cls, level: Level) -> LevelFilter:
        return cls(FilterKind.NOT_EQUAL, level)

    @classmethod
    def more_severe(cls, level: Level) -> LevelFilter:
        return cls(FilterKind.MORE_SEVERE, level)

    @classmethod
    def more_severe_equal(cls, level: Level) -> LevelFilter:
        return cls(FilterKind.MORE_SEVERE_EQUAL, level)

    @classmethod
    def more_verbose(cls, level: Level) -> LevelFilter:
        return cls(FilterKind.MORE_VERBOSE, level)

    @classmethod
    def more_verbose_equal(cls, level: Level) -> LevelFilter:
        return cls(FilterKind.MORE_VERBOSE_EQUAL, level)


@dataclass(frozen=True)
class SourceLocation:
    """Where in the code a log record was produced."""

    module_path: str
    file: str
    line: int
    column: int = 0

    @property
    def file_name(self) -> str:
        """The last component of :attr:`file`."""
        return PurePath(self.file).name


_tid_cache = threading.local()


def current_tid() -> int:
    """Return the operating-system id of the calling thread."""
    tid = getattr(_tid_cache, "tid", None)
    if tid is None:
        tid = threading.get_native_id()
        _tid_cache.tid = tid
    return tid


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Record:
    """A single log record passed from a logger to its sinks."""

    level: Level
    payload: str
    source_location: SourceLocation | None = None
    logger_name: str | None = None
    time: datetime = field(default_factory=_now)
    tid: int = field(default_factory=current_tid)

    def replace_payload(self, new: str) -> Record:
        """Return a copy of this record carrying a different payload."""
        return dataclasses.replace(self, payload=new)