"""
Runtime environment for workbench startup

Provides the Pydantic-based view of the environment variables consulted at
startup, plus the filesystem locations derived from it:

1. Environment (WorkbenchSettings):
   - VSCODE_IPC_HOOK_CLI: endpoint of the instance whose terminal we run in
   - LOG_LEVEL: requested log level override
   - WORKBENCH_DATA_DIR: override for the per-user data directory

2. Locations:
   - data_dir(): base directory for user data and extensions
   - handoff_path(): hand-off file published by a running instance

Settings are read fresh on every call so that changes to ``os.environ`` made
earlier in the process (or by tests) are observed.
"""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Optional

from platformdirs import user_data_path
from pydantic import Field
from pydantic_settings import BaseSettings

from .constants import APP_NAME, ENV, HANDOFF_FILE

__all__ = [
    "WorkbenchSettings",
    "load_settings",
    "data_dir",
    "handoff_path",
]


class WorkbenchSettings(BaseSettings):
    """
    Environment consulted while resolving defaults and routing.

    Every field is an optional plain string: startup must never fail because
    of the environment, so validation of the values happens at the call site.
    """
    ipc_hook_cli: Optional[str] = Field(
        default=None,
        validation_alias=ENV["ipc_hook"],
    )
    log_level: Optional[str] = Field(
        default=None,
        validation_alias=ENV["log_level"],
    )
    data_dir: Optional[str] = Field(
        default=None,
        validation_alias=ENV["data_dir"],
    )


def load_settings() -> WorkbenchSettings:
    """Read the current environment."""
    return WorkbenchSettings()


def data_dir(settings: WorkbenchSettings | None = None) -> Path:
    """Return the absolute base data directory."""
    settings = settings or load_settings()
    if settings.data_dir:
        return Path(settings.data_dir).expanduser().resolve()
    return user_data_path(APP_NAME)


def handoff_path() -> Path:
    return Path(tempfile.gettempdir()) / HANDOFF_FILE
