"""Turn an argument vector into ``ParsedArgs``.

Parsing is strict and left to right. Values are validated against the option
registry as they are read, and the first problem aborts the whole parse with a
``ParseError``. Nothing is defaulted here: a name only appears in the result if
its flag was given, which lets ``set_defaults`` tell user choices apart from
computed ones.
"""

from __future__ import annotations

import math
import os
import re
from collections import Counter
from collections.abc import Sequence

from .constants import ERROR
from .errors import (
    InvalidEnumValue,
    InvalidNumber,
    MissingValue,
    UnexpectedValue,
    UnknownOption,
)
from .models import OptionalValue, ParsedArgs
from .options import Arity, Kind, OptionSpec, lookup, lookup_short

__all__ = ["parse"]

END_OF_OPTIONS = "--"

# ASCII decimal literals only.
_NUMBER = re.compile(
    r"[+-]?(?:(?P<integer>[0-9]+)|[0-9]+\.[0-9]*|\.[0-9]+|[0-9]+(?:\.[0-9]*)?[eE][+-]?[0-9]+)"
)


def parse(argv: Sequence[str]) -> ParsedArgs:
    """Parse ``argv`` (without the program name)."""
    args = ParsedArgs()
    ended = False
    i = 0
    while i < len(argv):
        token = argv[i]
        i += 1

        if ended or not token.startswith("-"):
            args.positional.append(token)
        elif token == END_OF_OPTIONS:
            ended = True
        elif token.startswith("--"):
            i = _parse_long(token, argv, i, args)
        else:
            _parse_short(token, args)

    return args


def _parse_long(token: str, argv: Sequence[str], i: int, args: ParsedArgs) -> int:
    """Handle ``--name`` or ``--name=value``; return the index of the next unread token."""
    name, sep, inline = token[2:].partition("=")
    spec = lookup(name)

    if spec.arity is Arity.BOOLEAN:
        if sep:
            raise UnexpectedValue(ERROR["no_value"].format(name), name)
        args[name] = True
        return i

    if sep:
        value: str | None = inline
    elif i < len(argv) and not argv[i].startswith("-"):
        value = argv[i]
        i += 1
    else:
        value = None

    if not value:
        if spec.arity is Arity.OPTIONAL:
            args[name] = OptionalValue()
            return i
        raise MissingValue(ERROR["requires_value"].format(name), name)

    coerced = _coerce(spec, value)
    if spec.arity is Arity.REPEATABLE:
        args.append(name, coerced)
    elif spec.arity is Arity.OPTIONAL:
        args[name] = OptionalValue(coerced)
    else:
        args[name] = coerced
    return i


def _parse_short(token: str, args: ParsedArgs) -> None:
    """Handle a ``-xyz`` cluster of boolean short flags.

    Letters are tallied within the token only, so ``-vv`` and ``-v -v`` differ.
    """
    letters = token[1:]
    if not letters:
        raise UnknownOption(ERROR["unknown_option"].format(token), token)

    selected = []
    for letter, count in Counter(letters).items():
        try:
            selected.append(lookup_short(letter, count))
        except UnknownOption:
            raise UnknownOption(ERROR["unknown_option"].format(token), token) from None

    for spec in selected:
        args[spec.name] = True


def _coerce(spec: OptionSpec, value: str):
    if spec.kind is Kind.ENUM:
        if value not in spec.choices:
            raise InvalidEnumValue(
                ERROR["valid_values"].format(spec.name, ", ".join(spec.choices)), spec.name
            )
        return value
    if spec.kind is Kind.NUMBER:
        return _to_number(spec, value)
    if spec.kind is Kind.PATH:
        return os.path.abspath(value)
    return value


def _to_number(spec: OptionSpec, value: str) -> int | float:
    match = _NUMBER.fullmatch(value)
    if match is None:
        raise InvalidNumber(ERROR["not_a_number"].format(spec.name), spec.name)
    if match["integer"]:
        return int(value)
    number = float(value)
    # Literals such as 1e999 overflow to infinity.
    if not math.isfinite(number):
        raise InvalidNumber(ERROR["not_a_number"].format(spec.name), spec.name)
    return number
