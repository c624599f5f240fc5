"""Workbench command-line entry point."""

from __future__ import annotations

import json
import sys
from collections.abc import Sequence

import anyio
from loguru import logger

from . import __version__
from .defaults import set_defaults
from .errors import ParseError
from .logs import configure_logging
from .models import ForwardTo, Level, ResolvedConfig, RoutingDecision
from .options import option_descriptions
from .parser import parse
from .router import InstanceRouter

__all__ = ["main", "run", "usage", "cli_entrypoint"]


def usage() -> str:
    """Return the full ``--help`` text."""
    lines = [
        f"workbench {__version__}",
        "",
        "Usage: workbench [options] [path]",
        "",
        "Options",
    ]
    lines.extend(f"  {line}" for line in option_descriptions())
    return "\n".join(lines)


def version_text(as_json: bool = False) -> str:
    if as_json:
        return json.dumps({"workbench": __version__})
    return f"workbench {__version__}"


def describe(decision: RoutingDecision) -> dict[str, str]:
    if isinstance(decision, ForwardTo):
        return {"route": "forward", "endpoint": decision.endpoint}
    return {"route": "standalone", "reason": decision.reason}


async def run(
    argv: Sequence[str], router: InstanceRouter | None = None
) -> tuple[ResolvedConfig, RoutingDecision]:
    """Parse ``argv``, fill in defaults and decide where the invocation goes.

    Raises ``ParseError`` for a malformed command line.
    """
    config = await set_defaults(parse(argv))
    decision = await (router or InstanceRouter()).route(config)
    return config, decision


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for workbench."""
    argv = sys.argv[1:] if argv is None else list(argv)
    configure_logging(Level.INFO)

    try:
        args = parse(argv)
    except ParseError as e:
        logger.error(str(e))
        return 1

    config = anyio.run(set_defaults, args)
    if config.get("help"):
        print(usage())
        return 0
    if config.get("version"):
        print(version_text(bool(config.get("json"))))
        return 0

    decision = anyio.run(InstanceRouter().route, config)
    if isinstance(decision, ForwardTo):
        logger.info(f"Forwarding to running instance at {decision.endpoint}")
    else:
        logger.debug(f"Starting standalone: {decision.reason}")

    if config.get("json"):
        print(json.dumps(describe(decision)))
    return 0


def cli_entrypoint() -> None:
    """Console entry point (kept tiny so tests can patch sys.exit)."""
    sys.exit(main())


if __name__ == "__main__":
    cli_entrypoint()
