"""
Tests for the option registry and help rendering.
"""

import pytest

from workbench.errors import UnknownOption
from workbench.options import OPTIONS, Arity, Kind, lookup, lookup_short, option_descriptions


def test_short_flags_map_to_boolean_options():
    for spec in OPTIONS.values():
        if spec.short:
            assert spec.arity is Arity.BOOLEAN, spec.name


def test_short_flag_pairs_are_unique():
    pairs = [(spec.short, spec.short_count) for spec in OPTIONS.values() if spec.short]
    assert len(pairs) == len(set(pairs))


def test_enum_choices_follow_declaration_order():
    assert lookup("auth").choices == ("password", "none")
    assert lookup("log").choices == ("trace", "debug", "info", "warn", "error")


def test_lookup_unknown():
    with pytest.raises(UnknownOption, match="Unknown option --nope"):
        lookup("nope")


@pytest.mark.parametrize(
    "letter, count, expected",
    [
        ("v", 1, "version"),
        ("v", 2, "verbose"),
        ("v", 5, "verbose"),
        ("h", 1, "help"),
        ("h", 3, "help"),
        ("n", 1, "new-window"),
        ("r", 1, "reuse-window"),
    ],
)
def test_lookup_short(letter, count, expected):
    assert lookup_short(letter, count).name == expected


def test_lookup_short_unknown():
    with pytest.raises(UnknownOption):
        lookup_short("q")


def test_path_options():
    paths = {name for name, spec in OPTIONS.items() if spec.kind is Kind.PATH}
    assert paths == {
        "cert",
        "cert-key",
        "socket",
        "user-data-dir",
        "extensions-dir",
        "builtin-extensions-dir",
        "extra-extensions-dir",
        "extra-builtin-extensions-dir",
    }


def test_option_descriptions():
    lines = option_descriptions()
    by_name = {line.split("--", 1)[1].split()[0]: line for line in lines}

    assert "json" not in by_name
    assert "host" not in by_name
    assert by_name["auth"].endswith("The type of authentication to use. [password, none]")
    assert by_name["log"].endswith("[trace, debug, info, warn, error]")
    assert by_name["help"].lstrip().startswith("-h --help")
    assert by_name["verbose"].startswith("-vv --verbose")

    # Long names line up in one column.
    assert len({line.index("--") for line in lines}) == 1
