from __future__ import annotations

from collections.abc import Iterator

import pytest

from lib_syslog_async import runtime
from lib_syslog_async.adapters.channel import RendezvousChannel
from lib_syslog_async.application.session import Session
from tests.fakes import RecordingSink


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def session(sink: RecordingSink) -> Iterator[Session]:
    instance = Session(sink=sink, channel_factory=RendezvousChannel)
    try:
        yield instance
    finally:
        instance.close()
        instance.join(timeout=5.0)


@pytest.fixture
def reset_default_session() -> Iterator[None]:
    runtime.reset()
    try:
        yield
    finally:
        runtime.reset()
