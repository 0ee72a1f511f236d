"""Delivery worker loop forwarding records to the sink.

Purpose
-------
Own the receive end of the channel and every ``write``/``close`` call on the
sink, so the sink is only ever touched from one thread.

Contents
--------
* :func:`create_delivery_worker` - factory returning the worker callable.
* :func:`emit_diagnostic` - guarded invocation of the optional diagnostic hook.

System Role
-----------
Runs on the background thread started by
:meth:`lib_syslog_async.application.session.Session.open`. Write failures are
fire-and-forget from the caller's perspective: they are counted in
:class:`~lib_syslog_async.domain.diagnostics.DeliveryStats`, logged, and
reported through the hook, but never retried or raised.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Optional

from lib_syslog_async.application.ports import ChannelClosedError, ChannelPort, SinkPort
from lib_syslog_async.domain import CloseSignal, DeliveryStats, LogRecord

logger = logging.getLogger(__name__)

DiagnosticHook = Optional[Callable[[str, dict[str, Any]], None]]


def emit_diagnostic(hook: DiagnosticHook, name: str, payload: dict[str, Any]) -> None:
    """Invoke ``hook`` while guarding against callback failures."""

    if hook is None:
        return
    try:
        hook(name, payload)
    except Exception as exc:  # noqa: BLE001
        logger.error("Diagnostic hook raised while reporting %s", name, exc_info=exc)


def create_delivery_worker(
    *,
    channel: ChannelPort,
    sink: SinkPort,
    stats: DeliveryStats,
    diagnostic: DiagnosticHook = None,
) -> Callable[[], None]:
    """Return the loop the delivery thread runs until it receives a close signal.

    The loop states are *running* and *terminated*. While running it forwards
    each :class:`LogRecord` in receive order. A :class:`CloseSignal` (or the
    channel being closed underneath it) terminates the loop; the channel is
    then closed so late senders are released, and the sink is closed exactly
    once.

    Examples
    --------
    >>> from lib_syslog_async.adapters.channel import RendezvousChannel
    >>> from lib_syslog_async.domain import CLOSE
    >>> import threading
    >>> class Sink:
    ...     def __init__(self): self.calls = []
    ...     def open(self, ident, options, facility): pass
    ...     def write(self, priority, message): self.calls.append((priority, message))
    ...     def close(self): self.calls.append("close")
    ...     def set_mask(self, mask): return 0xFF
    >>> sink, channel = Sink(), RendezvousChannel()
    >>> worker = threading.Thread(target=create_delivery_worker(channel=channel, sink=sink, stats=DeliveryStats()))
    >>> worker.start()
    >>> channel.put(LogRecord(6, "hello")); channel.put(CLOSE); worker.join()
    >>> sink.calls
    [(6, 'hello'), 'close']
    """

    def deliver(record: LogRecord) -> None:
        try:
            sink.write(record.priority, record.message)
        except Exception as exc:  # noqa: BLE001
            stats.record_failure(exc)
            logger.error("Syslog sink rejected a record; continuing", exc_info=exc)
            emit_diagnostic(
                diagnostic,
                "sink_write_error",
                {"priority": record.priority, "exception": repr(exc)},
            )
        else:
            stats.record_delivered()

    def release() -> None:
        channel.close()
        try:
            sink.close()
        except Exception as exc:  # noqa: BLE001
            logger.error("Syslog sink failed to close", exc_info=exc)
            emit_diagnostic(diagnostic, "sink_close_error", {"exception": repr(exc)})

    def run() -> None:
        """Forward records until the close signal arrives, then release the sink."""
        while True:
            try:
                item = channel.get()
            except ChannelClosedError:
                break
            if isinstance(item, CloseSignal):
                break
            deliver(item)
        release()
        logger.debug("Syslog delivery worker terminated")

    return run


__all__ = ["DiagnosticHook", "create_delivery_worker", "emit_diagnostic"]
