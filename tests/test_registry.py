from __future__ import annotations

import pytest

from cmdparse.parser.errors import OptionError
from cmdparse.parser.optparser import Option
from cmdparse.parser.optparser import OptionRegistry


def test_short_name_defaults_to_long_name() -> None:
    option = Option("option1", "1")
    assert option.short_name == "option1"
    assert option.value == ""
    assert not option.supplied


def test_blank_long_name_is_rejected() -> None:
    with pytest.raises(OptionError):
        Option("  ", "1", "x")


def test_distinct_declarations_all_succeed() -> None:
    registry = OptionRegistry()
    names = ["alpha", "Beta", "gamma", "DELTA", "epsilon"]
    assert all(registry.declare(Option(name)) for name in names)
    assert len(registry) == len(names)
    assert not registry.has_errors()


def test_duplicate_differing_only_by_case_is_rejected() -> None:
    registry = OptionRegistry()
    assert registry.declare(Option("BufferSize", "1000", "b"))
    assert not registry.declare(Option("buffersize", "5", "x"))

    assert len(registry) == 1
    assert registry.errors == ["Option already exists: buffersize"]
    kept = registry.get("BUFFERSIZE")
    assert kept.default_value == "1000"
    assert kept.short_name == "b"


@pytest.mark.parametrize("name", ["buffersize", "BUFFERSIZE", "BufferSize", "bufferSIZE"])
def test_exists_is_case_insensitive(name: str) -> None:
    registry = OptionRegistry([Option("BufferSize", "1000", "b")])
    assert registry.exists(name)
    assert name in registry


def test_exists_unknown_name() -> None:
    registry = OptionRegistry([Option("BufferSize", "1000", "b")])
    assert not registry.exists("NotAnOption")
    assert registry.get("NotAnOption") is None


def test_get_returns_independent_copies() -> None:
    registry = OptionRegistry([Option("BufferSize", "1000", "b")])
    first = registry.get("BufferSize")
    second = registry.get("BufferSize")
    assert first == second
    assert first is not second

    first.value = "changed"
    assert registry.get("BufferSize").value == ""


def test_declare_stores_a_copy() -> None:
    option = Option("BufferSize", "1000", "b")
    registry = OptionRegistry([option])
    option.value = "changed"
    assert registry.get("BufferSize").value == ""


def test_resolve_short_is_case_sensitive() -> None:
    registry = OptionRegistry([Option("OutputFile", "output.txt", "o")])
    assert registry.resolve_short("o") == "OutputFile"
    assert registry.resolve_short("O") == ""


def test_resolve_short_first_declared_wins() -> None:
    registry = OptionRegistry([Option("zeta", "", "x"), Option("alpha", "", "x")])
    assert registry.resolve_short("x") == "zeta"


def test_update_value_marks_option_supplied() -> None:
    registry = OptionRegistry([Option("BufferSize", "1000", "b")])
    assert registry.update_value("buffersize", "23")

    option = registry.get("BufferSize")
    assert option.value == "23"
    assert option.supplied
    assert option.default_value == "1000"


def test_update_value_unknown_name_logs_error() -> None:
    registry = OptionRegistry()
    assert not registry.update_value("missing", "1")
    assert registry.errors == ["Option not found: missing"]


def test_errors_persist_until_cleared() -> None:
    registry = OptionRegistry([Option("a")])
    registry.declare(Option("A"))
    registry.declare(Option("b"))
    assert len(registry.errors) == 1

    registry.clear_errors()
    assert not registry.has_errors()


def test_sorted_options_ignores_case_and_declaration_order() -> None:
    registry = OptionRegistry([Option("charlie"), Option("Alpha"), Option("bravo")])
    assert [o.long_name for o in registry.sorted_options()] == ["Alpha", "bravo", "charlie"]
    assert [o.long_name for o in registry] == ["charlie", "Alpha", "bravo"]
