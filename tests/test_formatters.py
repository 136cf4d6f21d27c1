from __future__ import annotations

import io

from cmdparse.parser.formatters import IndentedHelpFormatter
from cmdparse.parser.formatters import PlainHelpFormatter
from cmdparse.parser.optparser import ArgumentParser
from cmdparse.parser.optparser import Option


def _parser(**kwargs) -> ArgumentParser:
    return ArgumentParser(
        [Option("OutputFile", "output.txt", "o"), Option("bufferSize", "1000", "b")],
        **kwargs,
    )


def test_plain_help_lists_options_alphabetically() -> None:
    parser = _parser()
    assert parser.init(1, ["MyApplication.exe"])
    assert parser.format_help() == (
        "MyApplication.exe [options]\n"
        "where options are:\n"
        "    -b, --bufferSize\n"
        "    -o, --OutputFile\n"
        "\n\n(version 1.0)"
    )


def test_long_first_and_custom_version() -> None:
    parser = _parser(prog="app", version="2.3", formatter=PlainHelpFormatter(short_first=False))
    assert parser.format_help().splitlines()[2:4] == [
        "    --bufferSize, -b",
        "    --OutputFile, -o",
    ]
    assert parser.format_help().endswith("(version 2.3)")


def test_no_version_marker() -> None:
    parser = _parser(prog="app", version="")
    assert parser.format_help().endswith("--OutputFile\n")


def test_indented_help_aligns_defaults() -> None:
    parser = _parser(prog="app", formatter=IndentedHelpFormatter())
    parser.add_option(Option("flag", "", "f"))
    lines = parser.format_help().splitlines()
    assert lines[:2] == ["app [options]", "where options are:"]
    assert lines[2] == "  -b, --bufferSize  (default: 1000)"
    assert lines[3] == "  -f, --flag        (default: none)"
    assert lines[4] == "  -o, --OutputFile  (default: output.txt)"


def test_indented_help_wraps_long_names() -> None:
    formatter = IndentedHelpFormatter(max_help_position=12)
    parser = ArgumentParser([Option("VeryLongOptionName", "7", "v")], prog="app", formatter=formatter)
    lines = parser.format_help().splitlines()
    assert lines[2] == "  -v, --VeryLongOptionName"
    assert lines[3] == "            (default: 7)"


def test_print_help_writes_to_file() -> None:
    parser = _parser(prog="app")
    out = io.StringIO()
    parser.print_help(out)
    assert out.getvalue() == parser.format_help() + "\n"
