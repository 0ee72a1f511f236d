from __future__ import annotations

import dataclasses

import pytest

from lib_syslog_async.domain import CLOSE, CloseSignal, DeliveryStats, Facility, LogRecord, Severity
from tests.os_markers import OS_AGNOSTIC

pytestmark = [OS_AGNOSTIC]


def test_log_record_is_immutable() -> None:
    record = LogRecord(Facility.USER | Severity.INFO, "hello")
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.message = "changed"  # type: ignore[misc]


def test_log_record_normalises_enum_priority_to_int() -> None:
    record = LogRecord(Severity.ERR, "oops")
    assert type(record.priority) is int
    assert record.priority == 3


def test_close_signal_is_a_distinct_variant() -> None:
    assert isinstance(CLOSE, CloseSignal)
    assert not isinstance(CLOSE, LogRecord)
    assert CloseSignal() == CLOSE


def test_delivery_stats_snapshot_tracks_counters() -> None:
    stats = DeliveryStats()
    stats.record_delivered()
    stats.record_delivered()
    stats.record_dropped()
    stats.record_failure(OSError("socket gone"))

    snapshot = stats.snapshot()

    assert snapshot.delivered == 2
    assert snapshot.dropped == 1
    assert snapshot.failed == 1
    assert snapshot.last_error == "OSError('socket gone')"
