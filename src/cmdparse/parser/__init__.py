from __future__ import annotations

from cmdparse.parser.api import Parsed
from cmdparse.parser.api import parse
from cmdparse.parser.errors import BadOptionError
from cmdparse.parser.errors import NoArgumentsError
from cmdparse.parser.errors import OptionConflictError
from cmdparse.parser.errors import OptionError
from cmdparse.parser.errors import OptionValueError
from cmdparse.parser.errors import OptParseError
from cmdparse.parser.formatters import HelpFormatter
from cmdparse.parser.formatters import IndentedHelpFormatter
from cmdparse.parser.formatters import PlainHelpFormatter
from cmdparse.parser.optparser import ArgumentParser
from cmdparse.parser.optparser import Option
from cmdparse.parser.optparser import OptionRegistry
from cmdparse.parser.optparser import ParseState


__all__ = [
    "ArgumentParser",
    "BadOptionError",
    "HelpFormatter",
    "IndentedHelpFormatter",
    "NoArgumentsError",
    "OptParseError",
    "Option",
    "OptionConflictError",
    "OptionError",
    "OptionRegistry",
    "OptionValueError",
    "ParseState",
    "Parsed",
    "PlainHelpFormatter",
    "parse",
]
