from __future__ import annotations

import sys

from dataclasses import dataclass
from dataclasses import field
from typing import Iterable, Sequence

from cmdparse.parser.optparser import ArgumentParser
from cmdparse.parser.optparser import Option
from cmdparse.strings import to_lower


@dataclass
class Parsed:
    ok: bool
    prog: str
    values: dict[str, str] = field(default_factory=dict)
    options: list[Option] = field(default_factory=list)
    arguments: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    def __getitem__(self, name: str) -> str:
        for option in self.options:
            if option.key == to_lower(name):
                return self.values[option.long_name]
        raise KeyError(name)


def parse(
    options: Iterable[Option | tuple[str, ...]],
    argv: Sequence[str] | None = None,
    lenient: bool = False,
) -> Parsed:
    """
    Declare ``options``, parse ``argv`` (default: sys.argv) and collect
    the outcome.

    Each entry of ``options`` is an Option or a tuple of Option
    constructor arguments, e.g. ("BufferSize", "1000", "b"). Values in
    the result fall back to each option's default when nothing usable
    was supplied.
    """
    if argv is None:
        argv = sys.argv

    parser = ArgumentParser(lenient=lenient)
    for option in options:
        if isinstance(option, Option):
            parser.add_option(option)
        else:
            parser.add_option(*option)

    ok = parser.init(len(argv), argv)
    declared = parser.registry.sorted_options()
    return Parsed(
        ok=ok,
        prog=parser.get_prog_name(),
        values={option.long_name: option.value_or_default() for option in declared},
        options=declared,
        arguments=parser.get_arguments(),
        errors=parser.get_errors(),
    )
