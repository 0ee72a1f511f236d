from __future__ import annotations

import logging
import threading
from collections.abc import Iterator

import pytest

from lib_syslog_async.adapters.channel import RendezvousChannel
from lib_syslog_async.adapters.logging_bridge import SessionLogHandler
from lib_syslog_async.application.session import Session
from lib_syslog_async.domain import Facility, Severity
from tests.fakes import RecordingSink
from tests.os_markers import OS_AGNOSTIC

pytestmark = [OS_AGNOSTIC]


@pytest.fixture
def bridged_logger(session: Session) -> Iterator[logging.Logger]:
    logger = logging.getLogger("tests.bridge")
    handler = SessionLogHandler(session, facility=Facility.LOCAL3)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    try:
        yield logger
    finally:
        logger.removeHandler(handler)
        logger.propagate = True


def test_handler_forwards_formatted_records(session: Session, sink: RecordingSink, bridged_logger: logging.Logger) -> None:
    session.open("bridge")

    bridged_logger.warning("disk %d%% full", 91)
    bridged_logger.debug("detail")
    session.close()
    assert session.join(timeout=5.0)

    assert sink.writes == [
        ("write", Facility.LOCAL3 | Severity.WARNING, "tests.bridge: disk 91% full"),
        ("write", Facility.LOCAL3 | Severity.DEBUG, "tests.bridge: detail"),
    ]


def test_handler_is_silent_while_session_inactive(sink: RecordingSink, bridged_logger: logging.Logger) -> None:
    bridged_logger.error("nobody listening")

    assert sink.calls == []


def test_handler_ignores_records_from_delivery_thread(session: Session, sink: RecordingSink) -> None:
    handler = SessionLogHandler(session)
    worker_logger = logging.getLogger("lib_syslog_async.application.use_cases.delivery")
    worker_logger.addHandler(handler)
    sink.fail_on.add("boom")
    try:
        session.open("bridge")
        session.emit(Severity.INFO, "boom")
        session.emit(Severity.INFO, "after")
        session.close()
        assert session.join(timeout=5.0)
    finally:
        worker_logger.removeHandler(handler)

    assert [call[2] for call in sink.writes] == ["after"]
    assert session.stats.failed == 1


def test_failed_sink_open_is_reported_through_root_handler_without_blocking(caplog: pytest.LogCaptureFixture) -> None:
    class BrokenOpenSink(RecordingSink):
        def open(self, ident: str, options: int, facility: int) -> None:
            raise OSError("cannot open")

    sink = BrokenOpenSink()
    session = Session(sink=sink, channel_factory=RendezvousChannel)
    handler = SessionLogHandler(session, level=logging.WARNING)
    root = logging.getLogger()
    root.addHandler(handler)
    opened = threading.Event()

    def open_session() -> None:
        session.open("bridge")
        opened.set()

    try:
        with caplog.at_level(logging.WARNING, logger="lib_syslog_async.application.session"):
            opener = threading.Thread(target=open_session, daemon=True)
            opener.start()
            assert opened.wait(timeout=5.0)
    finally:
        root.removeHandler(handler)
        if opened.is_set():
            session.close()

    assert session.join(timeout=5.0)
    assert [call[2] for call in sink.writes if call[2].startswith("Syslog sink failed to open")]
