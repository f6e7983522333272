"""Shared stderr reporter used when a sink cannot deliver a line."""

from __future__ import annotations

from typing import Callable

from rich.console import Console

Reporter = Callable[[str], None]

_STDERR = Console(stderr=True, highlight=False, emoji=False)


def stderr_reporter(message: str) -> None:
    _STDERR.print(message, markup=False, highlight=False, soft_wrap=True)


__all__ = ["Reporter", "stderr_reporter"]
