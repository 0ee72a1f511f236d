"""Use cases driving the delivery pipeline."""

from __future__ import annotations

from .delivery import DiagnosticHook, create_delivery_worker

__all__ = ["DiagnosticHook", "create_delivery_worker"]
