from __future__ import annotations

import threading


class RecordingSink:
    """Sink fake recording every call in order.

    ``gate`` (when set up via :meth:`hold_writes`) makes ``write`` wait so
    tests can observe backpressure; ``fail_on`` makes writes of matching
    messages raise.
    """

    def __init__(self) -> None:
        self.calls: list[tuple] = []
        self.mask = 0xFF
        self.fail_on: set[str] = set()
        self.write_started = threading.Event()
        self._gate: threading.Event | None = None
        self._lock = threading.Lock()

    def hold_writes(self) -> threading.Event:
        self._gate = threading.Event()
        return self._gate

    def open(self, ident: str, options: int, facility: int) -> None:
        with self._lock:
            self.calls.append(("open", ident, options, facility))

    def write(self, priority: int, message: str) -> None:
        self.write_started.set()
        if self._gate is not None:
            self._gate.wait(timeout=5.0)
        if message in self.fail_on:
            raise OSError(f"rejected {message}")
        with self._lock:
            self.calls.append(("write", priority, message))

    def close(self) -> None:
        with self._lock:
            self.calls.append(("close",))

    def set_mask(self, mask: int) -> int:
        with self._lock:
            previous, self.mask = self.mask, mask
            self.calls.append(("set_mask", mask))
            return previous

    @property
    def writes(self) -> list[tuple]:
        with self._lock:
            return [call for call in self.calls if call[0] == "write"]

    @property
    def closes(self) -> int:
        with self._lock:
            return sum(1 for call in self.calls if call[0] == "close")

    def names(self) -> list[str]:
        with self._lock:
            return [call[0] for call in self.calls]


__all__ = ["RecordingSink"]
