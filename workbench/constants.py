"""
Project-wide constants

This module contains constant definitions used throughout workbench:

1. APP_NAME: Name used for the per-user data directory
2. ENV: Environment variables read and written at startup
3. HANDOFF_FILE: Name of the hand-off file published by a running instance
4. DEFAULTS: Default values for startup behaviour
5. ERROR: Standard error message templates

Note: option names are string literals in the registry itself; they are the
user-facing interface and already self-documenting.
"""

APP_NAME = "workbench"

# Environment variables
ENV = {
    # Set by a running instance for processes launched from its terminal.
    "ipc_hook": "VSCODE_IPC_HOOK_CLI",
    "log_level": "LOG_LEVEL",
    "data_dir": "WORKBENCH_DATA_DIR",
}

# Lives in the system temp directory; written by the running service.
HANDOFF_FILE = "vscode-ipc"

DEFAULTS = {
    # Seconds to wait for a liveness probe before treating it as dead
    "probe_timeout": 1.0,
    "log_level": "info",
    "extensions_subdir": "extensions",
}

# Error message templates
ERROR = {
    "unknown_option": "Unknown option {}",
    "requires_value": "--{} requires a value",
    "no_value": "--{} does not take a value",
    "valid_values": "--{} valid values: [{}]",
    "not_a_number": "--{} must be a number",
}
