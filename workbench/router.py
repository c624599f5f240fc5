"""Decide whether an invocation belongs to an instance that is already running."""

from __future__ import annotations

import os
import re
from pathlib import Path

import anyio
from anyio.abc import ByteStream
from loguru import logger

from .config import handoff_path, load_settings
from .constants import DEFAULTS, ENV
from .models import ForwardTo, ParsedArgs, RoutingDecision, Standalone

__all__ = ["InstanceRouter", "route", "probe"]

_PORT = re.compile(r"[0-9]+")


class InstanceRouter:
    """Choose between forwarding to a running instance and starting a new one.

    Nothing here raises for a missing, unreadable or stale hand-off file; those
    all mean there is no instance to forward to.
    """

    def __init__(
        self,
        handoff: Path | str | None = None,
        probe_timeout: float = DEFAULTS["probe_timeout"],
    ) -> None:
        self.handoff = Path(handoff) if handoff is not None else handoff_path()
        self.probe_timeout = probe_timeout

    async def route(self, config: ParsedArgs) -> RoutingDecision:
        hook = load_settings().ipc_hook_cli
        if hook:
            # Launched from a running instance's terminal; flags cannot override.
            return ForwardTo(hook)

        if config.get("reuse-window") or config.get("new-window"):
            endpoint = await self.read_handoff()
            if endpoint is None:
                return Standalone(f"{self.handoff} is missing or empty")
            return ForwardTo(endpoint)

        if "port" in config:
            return Standalone("an explicit port was requested")
        if not config.positional:
            return Standalone("nothing to open")

        endpoint = await self.read_handoff()
        if endpoint is None:
            return Standalone(f"{self.handoff} is missing or empty")
        if await probe(endpoint, self.probe_timeout):
            return ForwardTo(endpoint)
        return Standalone(f"nothing is listening at {endpoint}")

    async def read_handoff(self) -> str | None:
        """Return the endpoint published in the hand-off file, if any."""
        try:
            contents = await anyio.Path(self.handoff).read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"Could not read {self.handoff}: {e}")
            return None
        return contents.strip() or None


async def route(config: ParsedArgs, handoff: Path | str | None = None) -> RoutingDecision:
    """Route ``config`` with a default ``InstanceRouter``."""
    return await InstanceRouter(handoff).route(config)


async def probe(endpoint: str, timeout: float = DEFAULTS["probe_timeout"]) -> bool:
    """Return True if ``endpoint`` accepts a connection within ``timeout`` seconds.

    The connection is closed straight away; no data is exchanged.
    """
    # connect_tcp reports per-address failures as an ExceptionGroup.
    with anyio.move_on_after(timeout):
        try:
            stream = await _connect(endpoint)
        except (OSError, ValueError, OverflowError, ExceptionGroup) as e:
            logger.debug(f"No listener at {endpoint}: {e!r}")
            return False
        with anyio.CancelScope(shield=True):
            await stream.aclose()
        return True

    logger.debug(f"Timed out after {timeout}s probing {endpoint}")
    return False


async def _connect(endpoint: str) -> ByteStream:
    """Connect to a ``host:port`` TCP endpoint or a Unix socket path."""
    host, sep, port = endpoint.rpartition(":")
    if sep and host and _PORT.fullmatch(port) and os.sep not in endpoint and "/" not in endpoint:
        number = int(port)
        if not 0 < number <= 65535:
            raise ValueError(f"port {number} is out of range")
        return await anyio.connect_tcp(host.strip("[]"), number)
    return await anyio.connect_unix(endpoint)
