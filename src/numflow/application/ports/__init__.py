"""Protocols that adapters implement for the application layer."""

from __future__ import annotations

from .observer import NumberObserverPort
from .reader import NumberReaderPort, ReadReport
from .sink import LogSinkPort

__all__ = ["LogSinkPort", "NumberObserverPort", "NumberReaderPort", "ReadReport"]
