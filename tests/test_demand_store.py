import sqlite3
from datetime import datetime, timedelta

import pytest

from meritkit.database import DatabaseError
from meritkit.demand_store import DemandRecord, DemandStore
from meritkit.weather import HOURS_PER_YEAR


def _stamps(count):
    start = datetime(2010, 1, 1)
    return [
        (start + timedelta(hours=i)).strftime("%Y-%m-%d %H:%M:%S")
        for i in range(count)
    ]


@pytest.fixture
def connection():
    conn = sqlite3.connect(":memory:")
    conn.execute("CREATE TABLE energy (ref TEXT, tot REAL, to_datetime TEXT)")
    full = [("office", float(i % 24), stamp) for i, stamp in enumerate(_stamps(HOURS_PER_YEAR))]
    conn.executemany("INSERT INTO energy VALUES (?, ?, ?)", full)
    partial = [("house", 2.5, stamp) for stamp in _stamps(48)]
    conn.executemany("INSERT INTO energy VALUES (?, ?, ?)", partial)
    yield conn
    conn.close()


def test_full_profile_values_and_dates(connection):
    record = DemandStore(connection).load("office")
    assert record.name == "office"
    assert len(record) == HOURS_PER_YEAR
    assert record.values[:3] == [0.0, 1.0, 2.0]
    assert record.dates[0] == "2010-01-01 00:00:00"
    assert record.dates[-1] == "2010-12-31 23:00:00"


def test_full_profile_temporal_parameters(connection):
    temporal = DemandStore(connection).load("office").temporal
    assert temporal.start_days[0] == 1
    assert temporal.start_days == sorted(temporal.end_days)
    assert temporal.end_days[0] == temporal.start_days[-1]
    assert temporal.hour_steps == [1]


def test_partial_profile_is_padded(connection):
    record = DemandStore(connection).load("house")
    assert len(record.values) == HOURS_PER_YEAR
    assert len(record.dates) == HOURS_PER_YEAR
    assert record.values[:48] == [2.5] * 48
    assert set(record.values[48:]) == {0.0}
    assert set(record.dates[48:]) == {""}


def test_partial_profile_has_no_temporal_parameters(connection):
    record = DemandStore(connection).load("house")
    assert record.dates[0] == "2010-01-01 00:00:00"
    assert record.dates[HOURS_PER_YEAR - 1] == ""
    with pytest.raises(ValueError):
        _ = record.temporal


def test_unknown_profile_is_all_zero(connection):
    record = DemandStore(connection).load("missing")
    assert record.values == [0.0] * HOURS_PER_YEAR
    assert record.dates == [""] * HOURS_PER_YEAR


def test_null_values_become_zero(connection):
    connection.execute("INSERT INTO energy VALUES ('blank', NULL, NULL)")
    record = DemandStore(connection).load("blank")
    assert record.values[0] == 0.0
    assert record.dates[0] == ""


def test_too_many_rows_raise(connection):
    rows = [("big", 1.0, stamp) for stamp in _stamps(HOURS_PER_YEAR + 1)]
    connection.executemany("INSERT INTO energy VALUES (?, ?, ?)", rows)
    with pytest.raises(DatabaseError):
        DemandStore(connection).load("big")


def test_missing_table_raises():
    conn = sqlite3.connect(":memory:")
    try:
        with pytest.raises(DatabaseError):
            DemandStore(conn).load("office")
    finally:
        conn.close()


def test_record_temporal_from_given_dates():
    dates = _stamps(HOURS_PER_YEAR)
    record = DemandRecord(name="x", values=[0.0] * HOURS_PER_YEAR, dates=dates)
    assert record.temporal.hour_steps == [1]
    assert len(record.temporal.start_days) == len(record.temporal.end_days)