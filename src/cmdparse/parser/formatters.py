from __future__ import annotations

from abc import ABC
from abc import abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cmdparse.parser.optparser import ArgumentParser, Option


class HelpFormatter(ABC):
    """
    Abstract base class for formatting option help.  ArgumentParser
    instances should use one of the HelpFormatter subclasses for
    formatting help; by default PlainHelpFormatter is used.

    Instance attributes:
      parser : ArgumentParser
        the controlling ArgumentParser instance
      indent_increment : int
        the number of columns to indent per nesting level
      current_indent : int
        current indentation level (in columns)
      short_first : bool
        list "-b, --BufferSize" rather than "--BufferSize, -b"
      option_strings : { string : str }
        maps lower-cased long names to the snippet of help text naming
        that option, e.g. "-b, --BufferSize"
    """

    def __init__(self, indent_increment: int, short_first: bool) -> None:
        self.parser: ArgumentParser | None = None
        self.indent_increment: int = indent_increment
        self.current_indent: int = 0
        self.short_first = short_first
        self.option_strings: dict[str, str] = {}

    def set_parser(self, parser: ArgumentParser) -> None:
        self.parser = parser

    def indent(self) -> None:
        self.current_indent += self.indent_increment

    def dedent(self) -> None:
        self.current_indent -= self.indent_increment
        assert self.current_indent >= 0, "Indent decreased below 0."

    @abstractmethod
    def format_usage(self, prog: str) -> str:
        raise NotImplementedError("subclasses must implement")

    @abstractmethod
    def format_heading(self, heading: str) -> str:
        raise NotImplementedError("subclasses must implement")

    def format_epilog(self, version: str | None = None) -> str:
        if version:
            return f"\n\n(version {version})"
        return ""

    def format_option_strings(self, option: Option) -> str:
        """Return the comma-separated short and long forms of an option."""
        short_opt = "-" + option.short_name
        long_opt = "--" + option.long_name
        if self.short_first:
            return f"{short_opt}, {long_opt}"
        return f"{long_opt}, {short_opt}"

    def store_option_strings(self, options: list[Option]) -> int:
        max_len = 0
        for option in options:
            strings = self.format_option_strings(option)
            self.option_strings[option.key] = strings
            max_len = max(max_len, len(strings))
        return max_len

    def format_option(self, option: Option) -> str:
        return "%*s%s\n" % (self.current_indent, "", self.option_strings[option.key])

    def format_help(self, prog: str, options: list[Option], version: str | None) -> str:
        """Render usage, one line per option (in the given order) and version."""
        self.store_option_strings(options)
        result = [self.format_usage(prog), self.format_heading("where options are")]
        self.indent()
        result.extend(self.format_option(option) for option in options)
        self.dedent()
        result.append(self.format_epilog(version))
        return "".join(result)


class PlainHelpFormatter(HelpFormatter):
    """Format help as a bare list of option names:

    prog [options]
    where options are:
        -b, --BufferSize
        -o, --OutputFile
    """

    def __init__(self, indent_increment: int = 4, short_first: bool = True) -> None:
        super().__init__(indent_increment, short_first)

    def format_usage(self, prog: str) -> str:
        return "%s [options]\n" % prog

    def format_heading(self, heading: str) -> str:
        return "%*s%s:\n" % (self.current_indent, "", heading)


class IndentedHelpFormatter(PlainHelpFormatter):
    """Format help with each option's default value in an aligned column."""

    NO_DEFAULT_VALUE: str = "none"

    def __init__(
        self,
        indent_increment: int = 2,
        short_first: bool = True,
        max_help_position: int = 32,
    ) -> None:
        super().__init__(indent_increment, short_first)
        self.max_help_position = max_help_position
        self.help_position = max_help_position

    def store_option_strings(self, options: list[Option]) -> int:
        max_len = super().store_option_strings(options)
        self.help_position = min(
            max_len + self.indent_increment + 2, self.max_help_position
        )
        return max_len

    def format_option(self, option: Option) -> str:
        opts = self.option_strings[option.key]
        default_value = option.default_value or self.NO_DEFAULT_VALUE
        opt_width = self.help_position - self.current_indent - 2
        if len(opts) > opt_width:
            # Put the default on its own line, aligned with the others.
            return "%*s%s\n%*s(default: %s)\n" % (
                self.current_indent, "", opts,
                self.help_position, "", default_value,
            )
        return "%*s%-*s  (default: %s)\n" % (
            self.current_indent, "", opt_width, opts, default_value
        )
