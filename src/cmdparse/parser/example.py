from __future__ import annotations

import logging
import sys

from typing import Sequence

from cmdparse.parser.errors import OptionValueError
from cmdparse.parser.formatters import IndentedHelpFormatter
from cmdparse.parser.optparser import ArgumentParser
from cmdparse.parser.optparser import Option


def main(argv: Sequence[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    parser = ArgumentParser(
        [
            Option("BufferSize", "1000", "b"),
            Option("OutputFile", "output.txt", "o"),
            Option("Ratio", "0.5", "r"),
            Option("Verbose", "no", "v"),
            Option("Help", "", "h"),
        ],
        formatter=IndentedHelpFormatter(),
    )

    if not parser.init(len(argv), argv):
        for error in parser.get_errors():
            print(f"{parser.get_prog_name()}: error: {error}", file=sys.stderr)
        parser.print_help(sys.stderr)
        return 2

    if parser.get_option("Help").supplied:
        parser.print_help()
        return 0

    # Flags given without a value count as "on".
    verbose = parser.get_option("Verbose")
    if verbose.supplied and verbose.is_value_blank():
        verbose.value = "yes"

    try:
        buffer_size = int(parser.get_option("BufferSize").value_or_default())
        ratio = float(parser.get_option("Ratio").value_or_default())
        chatty = verbose.supplied and verbose.get_value(bool)
    except (OptionValueError, ValueError) as err:
        print(f"{parser.get_prog_name()}: error: {err}", file=sys.stderr)
        return 2

    print("Buffer size:", buffer_size)
    print("Output file:", parser.get_option("OutputFile").value_or_default())
    print("Ratio:", ratio)
    print("Verbose:", ("yes" if chatty else "no"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
