from __future__ import annotations

from collections.abc import Callable
from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console


def _console(*, stderr: bool = False) -> Console:
    return Console(file=StringIO(), width=200, color_system=None, stderr=stderr)


@pytest.fixture
def record_console() -> Console:
    """Console writing into a ``StringIO`` read back through ``console.file``."""

    return _console()


@pytest.fixture
def error_console() -> Console:
    return _console(stderr=True)


@pytest.fixture
def numbers_file(tmp_path: Path) -> Callable[[str], Path]:
    """Write ``content`` to a fresh numbers file and return its path."""

    def _write(content: str, name: str = "numbers.txt") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def lines_of() -> Callable[[Console], list[str]]:
    def _lines(console: Console) -> list[str]:
        return console.file.getvalue().splitlines()

    return _lines
