# sparklog

A small, configurable logging library built around three ideas:

- **Loggers** receive records and pass them to each of their sinks in turn.
- **Sinks** decide, by their own level filter, whether to write a record.
- **Level filters** describe which levels pass, such as "at least as
  severe as `INFO`", "exactly `DEBUG`", "all" or "off".

Loggers also support two automatic flushing policies that work together:
flushing whenever a record passes a flush level filter, and flushing on a
fixed period from a background thread.

## Installation

```
pip install sparklog
```

## Usage

```python
import sys

from sparklog.builder import builder
from sparklog.macros import info, warn
from sparklog.record import Level, LevelFilter
from sparklog.sink import Sink

logger = (
    builder()
    .name("app")
    .level_filter(LevelFilter.more_severe_equal(Level.DEBUG))
    .sink(Sink(sys.stdout))
    .flush_level_filter(LevelFilter.more_severe_equal(Level.WARN))
    .build()
)

info(logger, "connected to port {} at {} Mb/s", 40, 3.2)
warn(logger, "retrying")          # logs, then flushes the sinks
```

The functions in `sparklog.macros` (`log`, `critical`, `error`, `warn`,
`info`, `debug`, `trace`) take the logger as their first argument. With
extra arguments the message is formatted with `str.format`, and only when
the level would be logged. Each record carries the caller's module, file
and line as a `SourceLocation`.

### Levels and filters

`Level` runs from `CRITICAL` (most severe) through `ERROR`, `WARN`,
`INFO`, `DEBUG` to `TRACE`; `Level.from_str` parses a name ignoring case.
`LevelFilter` is built with `off()`, `all()`, `equal(level)`,
`not_equal(level)`, `more_severe(level)`, `more_severe_equal(level)`,
`more_verbose(level)` or `more_verbose_equal(level)`, and `test(level)`
says whether a level passes.

```python
logger.level_filter = LevelFilter.more_severe(Level.INFO)
logger.should_log(Level.INFO)   # False
logger.should_log(Level.WARN)   # True
```

### Sinks

`sparklog.sink.Sink(stream=None, level_filter=None)` writes each record as
one line to `stream` (standard error if none is given) and accepts all
levels by default. A line looks like

```
[2024-01-01 12:00:00.000] [app] [info] [mymodule, main.py:12] connected
```

Subclass `Sink` and override `log` and `flush` (or `format`) to send
records elsewhere.

### Periodic flushing

```python
logger.set_flush_period(10.0)   # flush every 10 seconds (float or timedelta)
logger.flush_period             # 10.0
logger.set_flush_period(None)   # stop
logger.close()                  # stop the background thread
```

A `Logger` is also a context manager that calls `close` on exit. Copying
a logger with `copy.copy` raises `RuntimeError` while a flush period is
set; use forking instead.

`sparklog.periodic_worker.PeriodicWorker(callback, interval)` is the
thread behind this: it calls `callback` every `interval` until `stop()`
is called or the callback returns `False`.

### Forking

A fork is a separate logger that starts with the same settings,
including any flush period:

```python
cat = logger.fork_with_name("cat")
dog = logger.fork_with(lambda new: new.sinks.append(other_sink))
```

### Logger names

A name may not contain any of `, = * ? $ { } " ' ;` and may not start
or end with a space. Invalid names raise `sparklog.sink.LoggerNameError`,
from `LoggerBuilder.build`, `Logger(...)`, `Logger.set_name` and
`Logger.fork_with_name`.

### Errors

When a sink raises while logging or flushing, the logger's error handler
(set with `LoggerBuilder.error_handler` or `Logger.set_error_handler`) is
called with the exception. Without one, the error is printed to standard
error and otherwise ignored.

## What it does not do

There is no global default logger: every logging call names its logger.
Logger levels are not preset from environment variables. The only sink
provided writes to a text stream; there are no file, rotating-file or
asynchronous sinks, and no pattern or JSON formatters.