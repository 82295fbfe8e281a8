import inspect

import pytest

from sparklog import macros
from sparklog.logger import Logger
from sparklog.record import Level, LevelFilter
from sparklog.sink import Sink


class CollectingSink(Sink):
    def __init__(self):
        super().__init__()
        self.records = []

    def log(self, record):
        self.records.append(record)

    def flush(self):
        pass


class Exploding:
    def __format__(self, spec):
        raise AssertionError("formatted although filtered out")


def make_logger(level_filter=None, name=None):
    sink = CollectingSink()
    logger = Logger(name=name, sinks=[sink], level_filter=level_filter or LevelFilter.all())
    return logger, sink


@pytest.mark.parametrize(
    "func, level",
    [
        (macros.critical, Level.CRITICAL),
        (macros.error, Level.ERROR),
        (macros.warn, Level.WARN),
        (macros.info, Level.INFO),
        (macros.debug, Level.DEBUG),
    ],
)
def test_level_functions_use_their_level(func, level):
    logger, sink = make_logger()
    func(logger, "message")
    assert [r.level for r in sink.records] == [level]
    assert sink.records[0].payload == "message"


def test_log_at_most_verbose_level():
    logger, sink = make_logger()
    macros.log(logger, Level.TRACE, "x is {}", "positive")
    assert [(r.level, r.payload) for r in sink.records] == [(Level.TRACE, "x is positive")]


def test_log_formats_positional_and_keyword_arguments():
    logger, sink = make_logger()
    macros.log(logger, Level.INFO, "Received data: {}, {}", 42, "Forty-two")
    macros.log(logger, Level.WARN, "Warning! {what}!", what="Invalid Input")
    assert [r.payload for r in sink.records] == [
        "Received data: 42, Forty-two",
        "Warning! Invalid Input!",
    ]


def test_message_without_arguments_is_kept_verbatim():
    logger, sink = make_logger()
    macros.info(logger, "{not a field}")
    assert sink.records[0].payload == "{not a field}"


def test_filtered_records_are_not_formatted():
    logger, sink = make_logger(LevelFilter.more_severe_equal(Level.INFO))
    macros.debug(logger, "{}", Exploding())
    macros.log(logger, Level.TRACE, "{}", Exploding())
    assert sink.records == []


def test_logger_name_is_attached():
    logger, sink = make_logger(name="app_events")
    macros.error(logger, "App Error: {}, Port: {}", "No connection", 22)
    record = sink.records[0]
    assert record.logger_name == "app_events"
    assert record.payload == "App Error: No connection, Port: 22"


def test_source_location_points_at_caller():
    logger, sink = make_logger()
    macros.info(logger, "here")
    expected_line = inspect.currentframe().f_lineno - 1
    location = sink.records[0].source_location
    assert location.file == __file__
    assert location.module_path == __name__
    assert location.line == expected_line


def test_source_location_through_log():
    logger, sink = make_logger()
    macros.log(logger, Level.CRITICAL, "here")
    expected_line = inspect.currentframe().f_lineno - 1
    assert sink.records[0].source_location.line == expected_line
    assert sink.records[0].source_location.file == __file__


def test_off_filter_logs_nothing():
    logger, sink = make_logger(LevelFilter.off())
    for func in (macros.critical, macros.error, macros.info):
        func(logger, "dropped")
    assert sink.records == []