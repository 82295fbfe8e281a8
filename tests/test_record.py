import dataclasses
import threading

import pytest

from sparklog.record import (
    FilterKind,
    Level,
    LevelFilter,
    Record,
    SourceLocation,
    current_tid,
)


def test_more_severe_info_filter():
    f = LevelFilter.more_severe(Level.INFO)
    assert f.test(Level.DEBUG) is False
    assert f.test(Level.INFO) is False
    assert f.test(Level.WARN) is True
    assert f.test(Level.ERROR) is True


def test_all_and_off_filters():
    for level in Level:
        assert LevelFilter.all().test(level) is True
        assert LevelFilter.off().test(level) is False


@pytest.mark.parametrize(
    "factory, passing",
    [
        (LevelFilter.equal, {Level.WARN}),
        (LevelFilter.not_equal, set(Level) - {Level.WARN}),
        (LevelFilter.more_severe, {Level.CRITICAL, Level.ERROR}),
        (LevelFilter.more_severe_equal, {Level.CRITICAL, Level.ERROR, Level.WARN}),
        (LevelFilter.more_verbose, {Level.INFO, Level.DEBUG, Level.TRACE}),
        (LevelFilter.more_verbose_equal, {Level.WARN, Level.INFO, Level.DEBUG, Level.TRACE}),
    ],
)
def test_filters_against_warn(factory, passing):
    f = factory(Level.WARN)
    assert {level for level in Level if f.test(level)} == passing


def test_filter_equality_and_kind():
    assert LevelFilter.more_severe_equal(Level.INFO) == LevelFilter(
        FilterKind.MORE_SEVERE_EQUAL, Level.INFO
    )
    assert LevelFilter.all().level is None


def test_filter_level_required():
    with pytest.raises(ValueError):
        LevelFilter(FilterKind.EQUAL)
    with pytest.raises(ValueError):
        LevelFilter(FilterKind.OFF, Level.INFO)


def test_level_from_str_ignores_case():
    assert Level.from_str("deBug") is Level.DEBUG
    assert Level.from_str("tRace") is Level.TRACE
    assert Level.from_str(Level.ERROR.label) is Level.ERROR
    with pytest.raises(ValueError):
        Level.from_str("loud")


def test_level_labels_round_trip():
    for level in Level:
        assert Level.from_str(str(level)) is level
        assert level.short_label == level.label[0].upper()


def test_record_defaults_to_current_thread():
    record = Record(Level.INFO, "hello")
    assert record.tid == threading.get_native_id()
    assert record.logger_name is None
    assert record.source_location is None
    assert record.time.tzinfo is not None


def test_current_tid_matches_native_id_in_each_thread():
    seen = []
    t = threading.Thread(
        target=lambda: seen.append((current_tid(), threading.get_native_id()))
    )
    t.start()
    t.join()
    other_tid, other_native = seen[0]
    assert other_tid == other_native
    assert current_tid() == threading.get_native_id()
    assert other_tid != current_tid()


def test_replace_payload_keeps_other_fields():
    loc = SourceLocation("app.mod", "src/app/mod.py", 10, 4)
    record = Record(Level.WARN, "old", loc, "cat")
    new = record.replace_payload("new")
    assert new.payload == "new"
    assert record.payload == "old"
    assert (new.level, new.source_location, new.logger_name, new.time, new.tid) == (
        record.level,
        record.source_location,
        record.logger_name,
        record.time,
        record.tid,
    )


def test_record_is_immutable():
    record = Record(Level.INFO, "x")
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.payload = "y"
    assert record.payload == "x"


def test_source_location_file_name():
    loc = SourceLocation("app.mod", "src/app/mod.py", 3)
    assert loc.file_name == "mod.py"
    assert loc.column == 0