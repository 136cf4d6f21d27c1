from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from cmdparse.parser.optparser import Option


class OptParseError(Exception):
    def __init__(self, msg: str) -> None:
        self.msg = msg

    def __str__(self) -> str:
        return self.msg


class OptionError(OptParseError):
    """
    Raised if an Option instance is created with invalid or
    inconsistent arguments.
    """

    def __init__(self, msg: str, option: Option) -> None:
        self.msg = msg
        self.option_id = str(option)

    def __str__(self) -> str:
        if self.option_id:
            return f"option {self.option_id}: {self.msg}"
        return self.msg


class OptionConflictError(OptionError):
    """
    Raised if an option whose long name is already declared (ignoring
    case) is added to an OptionRegistry.
    """

    def __init__(self, option: Option) -> None:
        super().__init__("Option already exists", option)
        self.long_name = option.long_name

    def __str__(self) -> str:
        return f"{self.msg}: {self.long_name}"


class OptionValueError(OptParseError):
    """
    Raised if a stored option value cannot be converted to the
    requested type.
    """


class BadOptionError(OptParseError):
    """
    Raised if the command line names an option that was never declared.
    """

    def __init__(self, opt_str: str) -> None:
        self.opt_str = opt_str

    def __str__(self) -> str:
        return f"Option not found: {self.opt_str}"


class NoArgumentsError(OptParseError):
    """
    Raised if the program was started without even an executable name.
    """

    def __init__(self) -> None:
        super().__init__("No arguments given to application")
