"""Protocols the application layer depends on."""

from __future__ import annotations

from .channel import ChannelClosedError, ChannelPort
from .sink import SinkPort

__all__ = ["ChannelClosedError", "ChannelPort", "SinkPort"]
