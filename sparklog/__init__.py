"""Configurable logging with loggers, stream sinks, level filters and flushing policies."""

__version__ = "0.4.3"

__all__ = ["builder", "logger", "macros", "periodic_worker", "record", "sink"]