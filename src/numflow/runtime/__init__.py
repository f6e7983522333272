"""Runtime façade for the switchable logging facility.

Purpose
-------
Expose the explicitly constructed :class:`LogFacility` together with the
sink-construction table and the scripted demo used by the CLI, so callers
never import adapter modules directly.
"""

from __future__ import annotations

from ._composition import SINK_BUILDERS, build_sink, describe_switch
from ._demo import logdemo
from ._facility import LogFacility

__all__ = ["LogFacility", "SINK_BUILDERS", "build_sink", "describe_switch", "logdemo"]
