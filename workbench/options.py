"""The static table of recognised command-line options.

Every option is described by an immutable ``OptionSpec``. Lookups go through
``lookup`` (long names) and ``lookup_short`` (single letters); both raise
``UnknownOption`` for anything not registered.

Short letters may be shared between boolean options that differ in how many
times the letter has to appear within one token: ``-v`` selects ``version``
while ``-vv`` or ``-vvv`` selects ``verbose``.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from .constants import ERROR
from .errors import UnknownOption
from .models import AuthType, Level

__all__ = [
    "Arity",
    "Kind",
    "OptionSpec",
    "OPTIONS",
    "lookup",
    "lookup_short",
    "option_descriptions",
]


class Arity(str, Enum):
    """How many values an option consumes."""

    BOOLEAN = "boolean"
    REQUIRED = "required"
    OPTIONAL = "optional"
    REPEATABLE = "repeatable"


class Kind(str, Enum):
    """How an option's value is validated and stored."""

    STRING = "string"
    NUMBER = "number"
    ENUM = "enum"
    PATH = "path"


@dataclass(frozen=True)
class OptionSpec:
    name: str
    arity: Arity = Arity.BOOLEAN
    kind: Kind = Kind.STRING
    short: str | None = None
    # Minimum repeats of ``short`` in a single token that select this option.
    short_count: int = 1
    choices: tuple[str, ...] = ()
    description: str = ""

    @property
    def takes_value(self) -> bool:
        return self.arity is not Arity.BOOLEAN

    @property
    def short_form(self) -> str:
        return f"-{self.short * self.short_count}" if self.short else ""


def _choices(enum: type[Enum]) -> tuple[str, ...]:
    return tuple(member.value for member in enum)


_SPECS: tuple[OptionSpec, ...] = (
    OptionSpec(
        "auth",
        Arity.REQUIRED,
        Kind.ENUM,
        choices=_choices(AuthType),
        description="The type of authentication to use.",
    ),
    OptionSpec(
        "cert",
        Arity.OPTIONAL,
        Kind.PATH,
        description="Path to certificate. Generated if no path is provided.",
    ),
    OptionSpec(
        "cert-key",
        Arity.REQUIRED,
        Kind.PATH,
        description="Path to certificate key when using non-generated cert.",
    ),
    OptionSpec("disable-telemetry", description="Disable telemetry."),
    OptionSpec("disable-updates", description="Disable automatic updates."),
    OptionSpec("help", short="h", description="Show this output."),
    OptionSpec("json"),
    OptionSpec("open", description="Open in browser on startup. Does not work remotely."),
    OptionSpec("bind-addr", Arity.REQUIRED, description="Address to bind to in host:port."),
    # Superseded by bind-addr; kept for existing scripts.
    OptionSpec("host", Arity.REQUIRED),
    OptionSpec("port", Arity.REQUIRED, Kind.NUMBER),
    OptionSpec(
        "socket",
        Arity.REQUIRED,
        Kind.PATH,
        description="Path to a socket (bind-addr will be ignored).",
    ),
    OptionSpec("version", short="v", description="Display version information."),
    OptionSpec(
        "user-data-dir",
        Arity.REQUIRED,
        Kind.PATH,
        description="Path to the user data directory.",
    ),
    OptionSpec(
        "extensions-dir",
        Arity.REQUIRED,
        Kind.PATH,
        description="Path to the extensions directory.",
    ),
    OptionSpec("builtin-extensions-dir", Arity.REQUIRED, Kind.PATH),
    OptionSpec("extra-extensions-dir", Arity.REPEATABLE, Kind.PATH),
    OptionSpec("extra-builtin-extensions-dir", Arity.REPEATABLE, Kind.PATH),
    OptionSpec("list-extensions", description="List installed extensions."),
    OptionSpec("force", description="Avoid prompts when installing extensions."),
    OptionSpec(
        "install-extension",
        Arity.REPEATABLE,
        description="Install or update an extension by id or vsix.",
    ),
    OptionSpec(
        "uninstall-extension",
        Arity.REPEATABLE,
        description="Uninstall an extension by id.",
    ),
    OptionSpec("show-versions", description="Show extension versions."),
    OptionSpec(
        "proxy-domain",
        Arity.REPEATABLE,
        description="Domain used for proxying ports.",
    ),
    OptionSpec("new-window", short="n", description="Force to open a new window."),
    OptionSpec(
        "reuse-window",
        short="r",
        description="Force to open a file or folder in an already opened window.",
    ),
    OptionSpec("locale", Arity.REQUIRED),
    OptionSpec(
        "log",
        Arity.REQUIRED,
        Kind.ENUM,
        choices=_choices(Level),
        description="Log level to use.",
    ),
    OptionSpec(
        "verbose",
        short="v",
        short_count=2,
        description="Enable verbose logging.",
    ),
)


def _index(specs: Iterable[OptionSpec]) -> tuple[dict[str, OptionSpec], dict[str, list[OptionSpec]]]:
    by_name: dict[str, OptionSpec] = {}
    by_short: dict[str, list[OptionSpec]] = {}
    for spec in specs:
        if spec.name in by_name:
            raise ValueError(f"Duplicate option name: {spec.name}")
        by_name[spec.name] = spec
        if spec.short is None:
            continue
        if spec.takes_value:
            raise ValueError(f"Short flag -{spec.short} must map to a boolean option")
        shared = by_short.setdefault(spec.short, [])
        if any(other.short_count == spec.short_count for other in shared):
            raise ValueError(f"Duplicate short flag: {spec.short_form}")
        shared.append(spec)
    for shared in by_short.values():
        shared.sort(key=lambda spec: spec.short_count)
    return by_name, by_short


OPTIONS, _SHORT = _index(_SPECS)


def lookup(name: str) -> OptionSpec:
    """Return the option registered under the long ``name`` (no dashes)."""
    try:
        return OPTIONS[name]
    except KeyError:
        raise UnknownOption(ERROR["unknown_option"].format(f"--{name}"), f"--{name}") from None


def lookup_short(letter: str, count: int = 1) -> OptionSpec:
    """Return the option selected by ``letter`` seen ``count`` times in one token."""
    selected = None
    for spec in _SHORT.get(letter, ()):
        if spec.short_count <= count:
            selected = spec
    if selected is None:
        raise UnknownOption(ERROR["unknown_option"].format(f"-{letter}"), f"-{letter}")
    return selected


def option_descriptions() -> list[str]:
    """Render one aligned help line per described option."""
    described = [spec for spec in _SPECS if spec.description]
    short_width = max(len(spec.short_form) for spec in described)
    long_width = max(len(spec.name) for spec in described)

    lines = []
    for spec in described:
        line = f"{spec.short_form:>{short_width}} --{spec.name:<{long_width}}  {spec.description}"
        if spec.kind is Kind.ENUM:
            line += f" [{', '.join(spec.choices)}]"
        lines.append(line)
    return lines
