"""Observers notified by the number pipeline."""

from __future__ import annotations

from .count import CountObserver
from .printing import PrintObserver

__all__ = ["CountObserver", "PrintObserver"]
