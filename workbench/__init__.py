"""Workbench - command-line front-end for a long-running editor server.

Turns an argument vector into a typed configuration and decides whether the
invocation should be handed to an instance that is already running. It provides:

- A strict option parser with typed values and clustered short flags
- Default data directories and log level resolution across flags and environment
- Instance routing through a hand-off file and a socket liveness probe

Key Components:
    parse: argument vector -> ParsedArgs
    set_defaults: ParsedArgs -> ResolvedConfig
    InstanceRouter: ResolvedConfig -> ForwardTo | Standalone

Example:
    >>> from workbench import parse
    >>> parse(["--auth", "none", "src/"]).positional
    ['src/']

Architecture:
    argv → parse → set_defaults → InstanceRouter → (forward | start service)

"""

from __future__ import annotations

__version__ = "1.0.0"

from .defaults import set_defaults
from .errors import ParseError
from .models import ForwardTo, ParsedArgs, ResolvedConfig, Standalone
from .parser import parse
from .router import InstanceRouter, route

__all__ = [
    "parse",
    "set_defaults",
    "route",
    "InstanceRouter",
    "ParsedArgs",
    "ResolvedConfig",
    "ForwardTo",
    "Standalone",
    "ParseError",
]
