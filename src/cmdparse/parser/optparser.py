from __future__ import annotations

import copy
import logging
import os
import sys

from dataclasses import dataclass
from enum import Enum
from typing import IO, TYPE_CHECKING, Any, Callable, Iterable, Iterator, Sequence

from cmdparse.parser.errors import BadOptionError
from cmdparse.parser.errors import NoArgumentsError
from cmdparse.parser.errors import OptionConflictError
from cmdparse.parser.errors import OptionError
from cmdparse.parser.errors import OptionValueError
from cmdparse.parser.formatters import PlainHelpFormatter
from cmdparse.strings import is_blank
from cmdparse.strings import is_boolean
from cmdparse.strings import ltrim
from cmdparse.strings import to_lower
from cmdparse.strings import trim

if TYPE_CHECKING:
    from cmdparse.parser.formatters import HelpFormatter


_LOGGER = logging.getLogger(__name__)

# Characters that end an option name inside a span.
SEPARATORS: tuple[str, ...] = (" ", ":", "=")


def _repr(self):
    return f"<{self.__class__.__name__} at 0x{id(self):x}: {self}>"


def _parse_num(val: str, type_):
    lowered = val.strip().lower()
    sign = lowered[:1] if lowered[:1] in ("-", "+") else ""
    digits = lowered[len(sign):]
    if digits[:2] == "0x":  # hexadecimal
        radix = 16
    elif digits[:2] == "0b":  # binary
        radix = 2
    elif digits[:2] == "0o":  # octal
        radix = 8
    else:  # decimal
        radix = 10

    return type_(lowered, radix)


def _parse_int(val: str) -> int:
    return _parse_num(val, int)


def _parse_bool(val: str) -> bool:
    convertible, value = is_boolean(val)
    if not convertible:
        raise ValueError(val)
    return value


_builtin_cvt: dict[type, tuple[Callable[[str], Any], str]] = {
    int: (_parse_int, "integer"),
    float: (float, "floating-point"),
    bool: (_parse_bool, "boolean"),
    str: (str, "text"),
}


def check_builtin(option: Option, kind: type, value: str) -> Any:
    try:
        (cvt, what) = _builtin_cvt[kind]
    except KeyError:
        raise TypeError(f"unsupported value type: {kind!r}") from None
    try:
        return cvt(value)
    except ValueError:
        raise OptionValueError(
            f"option {option}: invalid {what} value: {value!r}"
        ) from None


@dataclass
class Option:
    """
    A single declarable command-line option.

    Instance attributes:
      long_name : string
        canonical name, compared case-insensitively ("--BufferSize")
      short_name : string
        alias used with a single dash ("-b"); defaults to long_name
      default_value : string
        fallback for callers when nothing was supplied
      value : string
        the text captured from the command line, "" until parsed
      supplied : bool
        true once a parse pass wrote a value, even an empty one
    """

    long_name: str
    default_value: str = ""
    short_name: str = ""
    value: str = ""
    supplied: bool = False

    def __post_init__(self) -> None:
        if is_blank(self.long_name):
            raise OptionError("long name must not be blank", self)
        if is_blank(self.short_name):
            self.short_name = self.long_name

    def __str__(self) -> str:
        return f"-{self.short_name}/--{self.long_name}"

    __repr__ = _repr

    @property
    def key(self) -> str:
        return to_lower(self.long_name)

    def get_value(self, kind: type = str) -> Any:
        """
        Convert the captured value to ``kind`` (int, float, bool or str).

        Raises OptionValueError if the text is not a valid literal for
        ``kind``. This never touches the parser's error list.
        """
        return check_builtin(self, kind, self.value)

    def is_value_blank(self) -> bool:
        return is_blank(self.value)

    def has_value(self) -> bool:
        """
        True when the stored value is blank.

        The name is historical: this is the same test as
        is_value_blank(). Use ``supplied`` to ask whether the command
        line mentioned the option at all.
        """
        return self.is_value_blank()

    def value_or_default(self) -> str:
        if self.supplied and not self.is_value_blank():
            return self.value
        return self.default_value

    def copy(self) -> Option:
        return copy.copy(self)


class OptionRegistry:
    """
    The set of options a program accepts, keyed by lower-cased long name.

    Instance attributes:
      _options : { string : Option }
        lower-cased long name -> Option, in declaration order
      errors : [string]
        accumulated error messages; only clear_errors() empties it
    """

    def __init__(self, options: Iterable[Option] | None = None) -> None:
        self._options: dict[str, Option] = {}
        self.errors: list[str] = []
        if options:
            self.declare_all(options)

    def __len__(self) -> int:
        return len(self._options)

    def __contains__(self, name: str) -> bool:
        return self.exists(name)

    def __iter__(self) -> Iterator[Option]:
        return iter(self._options.values())

    # -- Error log -----------------------------------------------------

    def log_error(self, error: Exception | str) -> None:
        message = str(error)
        _LOGGER.debug("%s: %s", type(self).__name__, message)
        self.errors.append(message)

    def has_errors(self) -> bool:
        return bool(self.errors)

    def clear_errors(self) -> None:
        self.errors.clear()

    # -- Declaration and lookup ----------------------------------------

    def declare(self, option: Option) -> bool:
        if option.key in self._options:
            self.log_error(OptionConflictError(option))
            return False

        self._options[option.key] = option.copy()
        return True

    def declare_all(self, options: Iterable[Option]) -> bool:
        results = [self.declare(option) for option in options]
        return all(results)

    def exists(self, name: str) -> bool:
        return to_lower(name) in self._options

    def get(self, name: str) -> Option | None:
        option = self._options.get(to_lower(name))
        if option is None:
            return None
        return option.copy()

    def resolve_short(self, short_name: str) -> str:
        """
        Return the long name of the first declared option whose short
        alias is exactly ``short_name``, or "" if there is none.
        """
        for option in self._options.values():
            if option.short_name == short_name:
                return option.long_name
        return ""

    def update_value(self, long_name: str, value: str) -> bool:
        option = self._options.get(to_lower(long_name))
        if option is None:
            self.log_error(BadOptionError(long_name))
            return False

        option.value = value
        option.supplied = True
        return True

    def sorted_options(self) -> list[Option]:
        return [self._options[key].copy() for key in sorted(self._options)]


class ParseState(Enum):
    SEEKING_START = "seeking_start"
    SEEKING_END = "seeking_end"
    DONE = "done"
    FAILED = "failed"


def is_option_token(token: str) -> bool:
    return token[:1] == "-"


def join_span(tokens: Sequence[str]) -> str:
    """
    Concatenate the tokens of one span.

    A space goes between two tokens only when neither side of the seam
    already carries a separator, so ["--name", "value"] and
    ["--name", "=value"] both come out as one name/value pair.
    """
    span = tokens[0]
    for token in tokens[1:]:
        if span[-1:] in SEPARATORS or token[:1] in SEPARATORS:
            span += token
        else:
            span += " " + token
    return span


def split_span(span: str) -> tuple[str, str, bool]:
    """
    Split a span into ``(name, value, is_long)``.

    The name ends at the first separator; everything after it is the
    value. A value wrapped in one pair of double quotes loses them.
    """
    is_long = span[:2] == "--"
    body = ltrim(span, "-")
    cut = len(body)
    for i, ch in enumerate(body):
        if ch in SEPARATORS:
            cut = i
            break

    name = trim(body[:cut])
    value = trim(body[cut + 1:])
    if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
        value = value[1:-1]
    return name, value, is_long


class ArgumentParser:
    """
    Class attributes:
      standard_option_list : [Option]
        options accepted by every instance of this parser class
        (intended to be overridden by subclasses).

    Instance attributes:
      registry : OptionRegistry
        the declared options and the shared error log
      prog : string
        the program name; captured from argv[0] by init() unless given
      version : string
        shown at the end of the help text
      formatter : HelpFormatter
        renders format_help()
      lenient : bool = false
        if false, the first unresolvable option fails the whole parse
        and the remaining tokens are left unprocessed. If true, the
        error is logged, that span is skipped and parsing continues;
        the pass still reports failure.
      state : ParseState
        where the last parse pass stopped
    """

    standard_option_list: list[Option] = []

    def __init__(
        self,
        options: Iterable[Option] | None = None,
        prog: str | None = None,
        version: str = "1.0",
        formatter: HelpFormatter | None = None,
        lenient: bool = False,
    ) -> None:
        self.registry = OptionRegistry()
        self.prog = prog
        self.version = version
        if formatter is None:
            formatter = PlainHelpFormatter()
        self.formatter = formatter
        self.formatter.set_parser(self)
        self.lenient = lenient
        self.state = ParseState.SEEKING_START
        self._arguments: list[str] = []

        if self.standard_option_list:
            self.registry.declare_all(self.standard_option_list)
        if options:
            self.registry.declare_all(options)

    # -- Option-adding methods -----------------------------------------

    def add_option(self, *args, **kwargs) -> bool:
        """add_option(Option)
        add_option(long_name, default_value="", short_name="")
        """
        if isinstance(args[0], str):
            option = Option(*args, **kwargs)
        elif len(args) == 1 and not kwargs:
            option = args[0]
            if not isinstance(option, Option):
                raise TypeError(f"not an Option instance: {option!r}")
        else:
            raise TypeError("invalid arguments")

        return self.registry.declare(option)

    def add_options(self, option_list: Iterable[Option]) -> bool:
        return self.registry.declare_all(option_list)

    # -- Option query methods ------------------------------------------

    def get_option_count(self) -> int:
        return len(self.registry)

    def has_option(self, name: str) -> bool:
        return self.registry.exists(name)

    def get_option(self, name: str) -> Option | None:
        return self.registry.get(name)

    def get_arguments(self) -> list[str]:
        """Return the raw arguments given to init(), minus argv[0]."""
        return self._arguments[:]

    # -- Error methods -------------------------------------------------

    def has_errors(self) -> bool:
        return self.registry.has_errors()

    def get_errors(self) -> list[str]:
        return self.registry.errors[:]

    def clear_errors(self) -> None:
        self.registry.clear_errors()

    # -- Option-parsing methods ----------------------------------------

    def init(self, argc: int, argv: Sequence[str]) -> bool:
        """
        Capture the program's argument vector and parse it.

        Declare every supported option before calling. ``argv[0]`` is
        kept as the program name; the first ``argc`` entries are used.
        """
        if argc <= 0:
            self.registry.log_error(NoArgumentsError())
            self.state = ParseState.FAILED
            return False

        if self.prog is None:
            self.prog = argv[0]
        self._arguments = [trim(arg) for arg in argv[1:argc]]

        return self._process_args(self._arguments)

    def parse_args(self, args: Iterable[str] | None = None) -> bool:
        """
        parse_args(args : [string] = sys.argv[1:]) -> bool

        Parse an explicit token list that does not include the program
        name. Returns false if any option could not be resolved.
        """
        if args is None:
            args = sys.argv[1:]
        self._arguments = [trim(arg) for arg in args]
        return self._process_args(self._arguments)

    def _process_args(self, rargs: list[str]) -> bool:
        """
        Walk ``rargs`` span by span, committing each option's value.

        A span runs from one option token up to (not including) the
        next one:

          ["--first", "=1234", "-s", "--second"]
            ^-----------------^ ^--^ ^--------^
        """
        self.state = ParseState.SEEKING_START
        failed = False
        cursor = 0
        while True:
            start = self._find_option_token(rargs, cursor)
            if start == len(rargs):
                self.state = ParseState.DONE
                break

            self.state = ParseState.SEEKING_END
            end = self._find_option_token(rargs, start + 1)
            span = join_span(rargs[start:end])
            cursor = end

            try:
                self._process_span(span)
            except BadOptionError as err:
                self.registry.log_error(err)
                failed = True
                if not self.lenient:
                    break

            self.state = ParseState.SEEKING_START

        if failed:
            self.state = ParseState.FAILED
        return not failed

    @staticmethod
    def _find_option_token(rargs: list[str], begin: int) -> int:
        for i in range(begin, len(rargs)):
            if is_option_token(rargs[i]):
                return i
        return len(rargs)

    def _process_span(self, span: str) -> None:
        name, value, is_long = split_span(span)
        if is_long:
            long_name = name
        else:
            long_name = self.registry.resolve_short(name)
            if not long_name:
                raise BadOptionError(name)

        if not self.registry.exists(long_name):
            raise BadOptionError(long_name)

        _LOGGER.debug("%r -> option %r, value %r", span, long_name, value)
        self.registry.update_value(long_name, value)

    # -- Feedback methods ----------------------------------------------

    def get_prog_name(self) -> str:
        if self.prog is None:
            return os.path.basename(sys.argv[0])
        return self.prog

    def format_help(self, formatter: HelpFormatter | None = None) -> str:
        if formatter is None:
            formatter = self.formatter
        return formatter.format_help(
            self.get_prog_name(), self.registry.sorted_options(), self.version
        )

    def print_help(self, file: IO[str] | None = None) -> None:
        """print_help(file : file = stdout)

        Print the usage line and the list of options to 'file'
        (default stdout).
        """
        if file is None:
            file = sys.stdout
        file.write(self.format_help() + "\n")
