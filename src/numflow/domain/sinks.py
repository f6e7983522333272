"""Sink selector enumerating the logging destinations."""

from __future__ import annotations

from enum import Enum


class SinkKind(Enum):
    """Destinations the logging facility can route formatted lines to."""

    CONSOLE = "console"
    FILE = "file"
    NONE = "none"

    @classmethod
    def from_name(cls, name: str) -> "SinkKind":
        """Return the kind matching ``name`` case-insensitively.

        Examples
        --------
        >>> SinkKind.from_name(" File ")
        <SinkKind.FILE: 'file'>
        """
        normalized = name.strip().lower()
        for kind in cls:
            if kind.value == normalized:
                return kind
        raise ValueError(f"Unknown sink kind: {name!r}")

    @classmethod
    def parse_or_default(cls, name: str | None, default: "SinkKind | None" = None) -> "SinkKind":
        """Resolve ``name``, using ``default`` (console when omitted) for ``None`` or anything unrecognised.

        >>> SinkKind.parse_or_default("loud")
        <SinkKind.CONSOLE: 'console'>
        >>> SinkKind.parse_or_default("loud", SinkKind.NONE)
        <SinkKind.NONE: 'none'>
        >>> SinkKind.parse_or_default(None, SinkKind.NONE)
        <SinkKind.NONE: 'none'>
        """
        fallback = default if default is not None else cls.CONSOLE
        if name is None:
            return fallback
        try:
            return cls.from_name(name)
        except ValueError:
            return fallback


__all__ = ["SinkKind"]
