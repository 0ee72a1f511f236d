"""Session controller enforcing the open -> emit* -> close lifecycle.

Purpose
-------
Let many caller threads hand records to one delivery worker without ever
blocking on the sink write itself, while keeping the session state (channel
handle plus active flag) consistent under concurrent use.

Contents
--------
* :class:`Session` - lifecycle operations ``open``, ``emit``, ``emitf``,
  ``close``, ``set_log_mask`` plus ``join`` and statistics.
* :class:`SessionAlreadyOpenError` - raised when opening an active session.

System Role
-----------
Application-layer orchestrator. Adapters are injected (sink instance and a
channel factory) by :mod:`lib_syslog_async.runtime`, which also keeps the
process-wide default session.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from types import TracebackType
from typing import Any

from lib_syslog_async.domain import CLOSE, DeliverySnapshot, DeliveryStats, Facility, LogRecord, render_message

from .ports import ChannelClosedError, ChannelPort, SinkPort
from .use_cases.delivery import DiagnosticHook, create_delivery_worker, emit_diagnostic

logger = logging.getLogger(__name__)

WORKER_THREAD_NAME = "lib_syslog_async-delivery"


class SessionAlreadyOpenError(RuntimeError):
    """Raised by :meth:`Session.open` while the session is still active."""


class Session:
    """Asynchronous front end to a single syslog sink.

    A session is *active* between :meth:`open` and :meth:`close`; exactly
    then a channel exists and a delivery worker is consuming it. Records
    emitted while inactive are ignored. A closed session may be opened again.

    Examples
    --------
    >>> from lib_syslog_async.adapters.channel import RendezvousChannel
    >>> from lib_syslog_async.domain import Severity
    >>> class Sink:
    ...     def __init__(self): self.calls = []
    ...     def open(self, ident, options, facility): self.calls.append(("open", ident))
    ...     def write(self, priority, message): self.calls.append(("write", message))
    ...     def close(self): self.calls.append(("close",))
    ...     def set_mask(self, mask): return 0xFF
    >>> sink = Sink()
    >>> with Session(sink=sink, channel_factory=RendezvousChannel) as session:
    ...     session.open("myapp")
    ...     session.emitf(Severity.DEBUG, "count=%d", 5)
    >>> sink.calls
    [('open', 'myapp'), ('write', 'count=5'), ('close',)]
    """

    def __init__(
        self,
        *,
        sink: SinkPort,
        channel_factory: Callable[[], ChannelPort],
        diagnostic: DiagnosticHook = None,
    ) -> None:
        self._sink = sink
        self._channel_factory = channel_factory
        self._diagnostic = diagnostic
        self._lock = threading.Lock()
        self._channel: ChannelPort | None = None
        self._thread: threading.Thread | None = None
        self._stats = DeliveryStats()

    @property
    def sink(self) -> SinkPort:
        return self._sink

    @property
    def active(self) -> bool:
        """Return ``True`` between :meth:`open` and :meth:`close`."""
        with self._lock:
            return self._channel is not None

    @property
    def stats(self) -> DeliverySnapshot:
        """Return delivery counters for the most recent open/close cycle."""
        with self._lock:
            stats = self._stats
        return stats.snapshot()

    def open(self, ident: str, options: int = 0, facility: int = Facility.USER) -> None:
        """Open the sink and start the delivery worker.

        Parameters
        ----------
        ident:
            Identity prepended to every message by the system logger.
        options:
            Bitwise combination of :class:`~lib_syslog_async.domain.Option`.
        facility:
            Default facility for records whose priority carries none.

        Raises
        ------
        SessionAlreadyOpenError
            When the session is already active; the running worker and sink
            are left untouched.

        Notes
        -----
        A failing ``sink.open`` is logged and reported as ``sink_open_error``
        but not raised; the session starts regardless.
        """

        open_error: Exception | None = None
        while True:
            with self._lock:
                if self._channel is not None:
                    raise SessionAlreadyOpenError("syslog session is already open; call close() first")
                previous = self._thread
                if previous is None or not previous.is_alive():
                    open_error = self._start(ident, options, facility)
                    break
            # The previous worker must finish closing the sink before it is reopened.
            previous.join()
        if open_error is not None:
            logger.warning("Syslog sink failed to open for %r; continuing best-effort", ident, exc_info=open_error)
            emit_diagnostic(self._diagnostic, "sink_open_error", {"ident": ident, "exception": repr(open_error)})
        logger.debug("Syslog session opened for %r", ident)

    def _start(self, ident: str, options: int, facility: int) -> Exception | None:
        """Open the sink and launch a worker; caller holds ``self._lock``.

        Returns the exception raised by ``sink.open`` so the caller can report
        it once the lock is released.
        """
        open_error: Exception | None = None
        try:
            self._sink.open(ident, int(options), int(facility))
        except Exception as exc:  # noqa: BLE001
            open_error = exc
        channel = self._channel_factory()
        stats = DeliveryStats()
        worker = create_delivery_worker(channel=channel, sink=self._sink, stats=stats, diagnostic=self._diagnostic)
        thread = threading.Thread(target=worker, name=WORKER_THREAD_NAME, daemon=True)
        self._channel = channel
        self._stats = stats
        self._thread = thread
        thread.start()
        return open_error

    def emit(self, priority: int, message: str) -> None:
        """Hand ``message`` to the delivery worker at ``priority``.

        Blocks only until the worker accepts the record, never for the sink
        write. Does nothing when the session is inactive. Records racing
        :meth:`close` are either delivered before the sink closes or dropped
        and counted in :attr:`stats`.
        """

        if self.in_delivery_thread():
            # The worker cannot hand a record to itself.
            with self._lock:
                stats = self._stats
            stats.record_dropped()
            return
        with self._lock:
            channel = self._channel
            stats = self._stats
        if channel is None:
            return
        try:
            channel.put(LogRecord(priority, message))
        except ChannelClosedError:
            stats.record_dropped()

    def emitf(self, priority: int, fmt: str, *args: Any) -> None:
        """Format ``args`` into ``fmt`` with ``%`` interpolation and :meth:`emit` it."""
        self.emit(priority, render_message(fmt, args))

    def close(self) -> bool:
        """Deactivate the session and hand the close signal to the worker.

        Returns ``False`` without side effects when the session is not
        active. Otherwise blocks until the worker accepts the signal (not
        until the sink is closed; use :meth:`join` for that) and returns
        ``True``.
        """

        with self._lock:
            channel = self._channel
            if channel is None:
                return False
            self._channel = None
        try:
            channel.put(CLOSE)
        except ChannelClosedError:
            logger.debug("Syslog delivery worker already stopped before close signal")
        logger.debug("Syslog session closed")
        return True

    def join(self, timeout: float | None = None) -> bool:
        """Wait for the delivery worker to finish; ``True`` when it has."""
        with self._lock:
            thread = self._thread
        if thread is None:
            return True
        thread.join(timeout)
        return not thread.is_alive()

    def set_log_mask(self, mask: int) -> int:
        """Install ``mask`` on the sink immediately and return the previous mask.

        Not routed through the channel, so it is unordered relative to records
        still waiting to be delivered.
        """
        return int(self._sink.set_mask(int(mask)))

    def in_delivery_thread(self) -> bool:
        """Return ``True`` when called from this session's delivery worker.

        Lock-free so it is safe from logging handlers running on the worker.
        """
        thread = self._thread
        return thread is not None and threading.current_thread() is thread

    def __enter__(self) -> "Session":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
        self.join()


__all__ = ["Session", "SessionAlreadyOpenError", "WORKER_THREAD_NAME"]
