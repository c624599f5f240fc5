"""Fill in computed defaults and settle the log level.

Log level precedence, highest first:

1. ``--verbose``: trace
2. ``--log LEVEL``
3. the ``LOG_LEVEL`` environment variable, when it names a known level
4. nothing: no level is recorded and the caller keeps its own default

Whatever level wins is written back to ``LOG_LEVEL`` so child processes agree,
and applied to the loguru sink.
"""

from __future__ import annotations

import os

from loguru import logger

from . import logs
from .config import data_dir, load_settings
from .constants import DEFAULTS, ENV
from .models import Level, ParsedArgs, ResolvedConfig

__all__ = ["set_defaults", "resolve_level"]

_LEVELS = {level.value for level in Level}


async def set_defaults(args: ParsedArgs) -> ResolvedConfig:
    """Return a copy of ``args`` with defaults filled in; ``args`` is left untouched."""
    settings = load_settings()
    config = ResolvedConfig(values=dict(args.values), positional=list(args.positional))

    base = data_dir(settings)
    config.values.setdefault("user-data-dir", str(base))
    config.values.setdefault("extensions-dir", str(base / DEFAULTS["extensions_subdir"]))

    level = resolve_level(config, settings.log_level)
    if level is not None:
        config["log"] = level.value
        config["verbose"] = level is Level.TRACE
        os.environ[ENV["log_level"]] = level.value
        logs.set_level(level)
        logger.debug(f"Log level set to {level.value}")

    return config


def resolve_level(args: ParsedArgs, env_level: str | None = None) -> Level | None:
    """Pick the log level from flags first, then ``env_level``."""
    if args.get("verbose"):
        return Level.TRACE
    if "log" in args:
        return Level(args["log"])
    if env_level in _LEVELS:
        return Level(env_level)
    if env_level:
        logger.debug(f"Ignoring unknown {ENV['log_level']}={env_level!r}")
    return None
