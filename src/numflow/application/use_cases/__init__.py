"""Use cases orchestrating ports into runnable callables."""

from __future__ import annotations

from .process_numbers import RunSummary, create_process_numbers

__all__ = ["RunSummary", "create_process_numbers"]
