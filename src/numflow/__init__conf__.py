"""Static package metadata surfaced by the CLI ``info`` command."""

from __future__ import annotations

import sys
from typing import Callable

name = "numflow"
title = "File-driven number filtering and a switchable-sink logger"
version = "0.1.0"
author = "numflow maintainers"
shell_command = "numflow"


def print_info(writer: Callable[[str], None] | None = None) -> None:
    """Write the metadata banner through ``writer``.

    Examples
    --------
    >>> lines = []
    >>> print_info(writer=lines.append)
    >>> lines[0]
    'Info for numflow:\\n'
    """

    write = writer if writer is not None else sys.stdout.write
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("author", author),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    write(f"Info for {name}:\n")
    write("\n")
    for label, value in fields:
        write(f"    {label.ljust(pad)} = {value}\n")
