"""Environment-driven configuration with optional ``.env`` support.

Purpose
-------
Resolve the handful of knobs the CLI exposes (log file location, default sink)
from the process environment, optionally seeded from the nearest ``.env``
file via python-dotenv.

Contents
--------
* :data:`DOTENV_ENV_VAR`, :data:`LOG_FILE_ENV_VAR`, :data:`LOG_SINK_ENV_VAR`.
* :func:`should_use_dotenv` / :func:`enable_dotenv` - ``.env`` toggling.
* :class:`LoggingSettings` - frozen settings consumed by the log facility.

Precedence
----------
Explicit arguments beat environment variables; real environment variables
beat ``.env`` entries (``load_dotenv`` never overrides).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from dotenv import find_dotenv, load_dotenv

from numflow.adapters.sinks.file import DEFAULT_LOG_PATH
from numflow.domain.sinks import SinkKind

logger = logging.getLogger(__name__)

DOTENV_ENV_VAR = "NUMFLOW_USE_DOTENV"
LOG_FILE_ENV_VAR = "NUMFLOW_LOG_FILE"
LOG_SINK_ENV_VAR = "NUMFLOW_LOG_SINK"

_TRUTHY = {"1", "true", "yes", "on"}

_LOADED_DOTENV: Path | None = None


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Decide whether ``.env`` loading is active.

    An explicit CLI choice wins; otherwise the environment toggle decides.

    Examples
    --------
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(env_value="yes")
    True
    >>> should_use_dotenv()
    False
    """

    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUTHY


def enable_dotenv(search_from: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` without overriding existing variables.

    Returns the resolved path that was loaded, or ``None`` when no file was
    found. Repeated calls reuse the first successfully loaded file.
    """

    global _LOADED_DOTENV
    if _LOADED_DOTENV is not None:
        return _LOADED_DOTENV

    if search_from is not None:
        candidate = _search_upwards(search_from)
    else:
        found = find_dotenv(usecwd=True)
        candidate = Path(found) if found else None
    if candidate is None:
        logger.debug("no .env file found")
        return None

    resolved = candidate.resolve()
    load_dotenv(resolved, override=False)
    _LOADED_DOTENV = resolved
    logger.debug("loaded environment from %s", resolved)
    return resolved


def _search_upwards(start: Path) -> Path | None:
    directory = start.resolve()
    if directory.is_file():
        directory = directory.parent
    for folder in (directory, *directory.parents):
        candidate = folder / ".env"
        if candidate.is_file():
            return candidate
    return None


def _reset_dotenv_state_for_testing() -> None:
    global _LOADED_DOTENV
    _LOADED_DOTENV = None


@dataclass(slots=True, frozen=True)
class LoggingSettings:
    """Resolved settings for the logging facility."""

    log_path: Path = DEFAULT_LOG_PATH
    default_sink: SinkKind = SinkKind.CONSOLE

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        log_path: Path | str | None = None,
    ) -> "LoggingSettings":
        """Build settings from ``environ`` (defaults to :data:`os.environ`).

        Examples
        --------
        >>> settings = LoggingSettings.from_env({"NUMFLOW_LOG_FILE": "x.log", "NUMFLOW_LOG_SINK": "FILE"})
        >>> settings.log_path.name, settings.default_sink.value
        ('x.log', 'file')
        """

        env = os.environ if environ is None else environ
        raw_path = log_path if log_path is not None else env.get(LOG_FILE_ENV_VAR) or DEFAULT_LOG_PATH
        raw_sink = env.get(LOG_SINK_ENV_VAR)
        return cls(
            log_path=Path(raw_path),
            default_sink=SinkKind.parse_or_default(raw_sink),
        )


__all__ = [
    "DOTENV_ENV_VAR",
    "LOG_FILE_ENV_VAR",
    "LOG_SINK_ENV_VAR",
    "LoggingSettings",
    "enable_dotenv",
    "should_use_dotenv",
]
