from __future__ import annotations


_TRUE_WORDS = ("true", "yes", "1")
_FALSE_WORDS = ("false", "no", "0")


def ltrim(s: str, char: str | None = None) -> str:
    """Strip leading whitespace, or every leading ``char`` if one is given."""
    if char is None:
        return s.lstrip()
    return s.lstrip(char)


def rtrim(s: str, char: str | None = None) -> str:
    if char is None:
        return s.rstrip()
    return s.rstrip(char)


def trim(s: str, char: str | None = None) -> str:
    return rtrim(ltrim(s, char), char)


def to_lower(s: str) -> str:
    return s.lower()


def is_blank(s: str) -> bool:
    """True for the empty string and for strings made only of whitespace."""
    return not s or s.isspace()


def is_boolean(s: str) -> tuple[bool, bool]:
    """
    Test whether ``s`` spells a boolean.

    Returns a ``(convertible, value)`` pair; ``value`` is meaningless when
    ``convertible`` is false.
    """
    word = to_lower(trim(s))
    if word in _TRUE_WORDS:
        return True, True
    if word in _FALSE_WORDS:
        return True, False
    return False, False
