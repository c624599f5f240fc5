# workbench/models.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, TypeAlias

__all__ = [
    "Level",
    "AuthType",
    "OptionalValue",
    "ArgValue",
    "ParsedArgs",
    "ResolvedConfig",
    "ForwardTo",
    "Standalone",
    "RoutingDecision",
]


class Level(str, Enum):
    """Log levels, most verbose first."""

    TRACE = "trace"
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"


class AuthType(str, Enum):
    """Supported authentication types."""

    PASSWORD = "password"
    NONE = "none"


@dataclass(frozen=True)
class OptionalValue:
    """An optional-value option that was given; ``value`` is None when it was given bare."""

    value: str | None = None


ArgValue: TypeAlias = bool | str | int | float | OptionalValue | list[str]


@dataclass
class ParsedArgs:
    """Options exactly as they appeared on the command line.

    A name is present in ``values`` only if its flag occurred; nothing is
    defaulted here.
    """

    values: dict[str, ArgValue] = field(default_factory=dict)
    positional: list[str] = field(default_factory=list)

    def __contains__(self, name: object) -> bool:
        return name in self.values

    def __getitem__(self, name: str) -> ArgValue:
        return self.values[name]

    def __setitem__(self, name: str, value: ArgValue) -> None:
        self.values[name] = value

    def get(self, name: str, default: Any = None) -> Any:
        return self.values.get(name, default)

    def append(self, name: str, value: str) -> None:
        """Add ``value`` to a repeatable option, creating its list on first use."""
        existing = self.values.setdefault(name, [])
        if not isinstance(existing, list):
            raise TypeError(f"--{name} already holds a single value")
        existing.append(value)


@dataclass
class ResolvedConfig(ParsedArgs):
    """Parsed options after default injection and log level resolution."""

    @property
    def user_data_dir(self) -> str:
        return self.values["user-data-dir"]

    @property
    def extensions_dir(self) -> str:
        return self.values["extensions-dir"]

    @property
    def log_level(self) -> Level | None:
        level = self.values.get("log")
        return Level(level) if level is not None else None

    @property
    def verbose(self) -> bool:
        return bool(self.values.get("verbose", False))


@dataclass(frozen=True)
class ForwardTo:
    """Hand the invocation to the instance listening at ``endpoint``."""

    endpoint: str


@dataclass(frozen=True)
class Standalone:
    """Start a new instance. ``reason`` is informational only."""

    reason: str = field(default="", compare=False)


RoutingDecision: TypeAlias = ForwardTo | Standalone
