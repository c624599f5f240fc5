"""Exceptions raised while turning an argument vector into a configuration."""

from __future__ import annotations

__all__ = [
    "WorkbenchError",
    "ParseError",
    "UnknownOption",
    "MissingValue",
    "InvalidEnumValue",
    "InvalidNumber",
    "UnexpectedValue",
]


class WorkbenchError(Exception):
    """Base exception for workbench operations."""


class ParseError(WorkbenchError):
    """The argument vector could not be parsed.

    ``option`` is the offending token or option name, when one is known.
    """

    def __init__(self, message: str, option: str | None = None) -> None:
        super().__init__(message)
        self.option = option


class UnknownOption(ParseError):
    """An option-like token has no match in the registry."""


class MissingValue(ParseError):
    """A value-taking option was given nothing, an empty string or another flag."""


class InvalidEnumValue(ParseError):
    """A value is not one of the option's declared choices."""


class InvalidNumber(ParseError):
    """A value for a number option does not parse as a finite number."""


class UnexpectedValue(ParseError):
    """A boolean option was given an ``=value`` suffix."""
