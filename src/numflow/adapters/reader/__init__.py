"""Number readers."""

from __future__ import annotations

from .file_reader import FileNumberReader

__all__ = ["FileNumberReader"]
