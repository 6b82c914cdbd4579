from __future__ import annotations

import enum

from typing import NamedTuple


class QuoteState(enum.IntEnum):
    Unquoted = 0
    SingleQuoted = enum.auto()
    DoubleQuoted = enum.auto()


class Statement(str):
    """
    A single clause of the input, delimited by an unquoted line break or an unquoted `&&`.
    """


class Assignment(NamedTuple):
    """
    A decoded variable assignment. The `name` is never empty; the `value` has all quotes and
    escape characters removed.
    """
    name: str
    value: str

    def __str__(self):
        return F'{self.name}={self.value}'


class Role(enum.IntEnum):
    """
    The lexical role of a single character as determined by `fromposix.lib.posix.cursor`.
    """
    Plain = 0
    """
    The character is neither quoted nor escaped; only these characters can act as separators.
    """
    Quoted = enum.auto()
    """
    Literal content of a single or double quoted string.
    """
    Escaped = enum.auto()
    """
    Literal content that follows an escaping backslash.
    """
    Delimiter = enum.auto()
    """
    A quote character that opens or closes a quoted string.
    """
    Escape = enum.auto()
    """
    A backslash that escapes the character after it.
    """


class Scanned(NamedTuple):
    offset: int
    char: str
    role: Role

    @property
    def active(self) -> bool:
        return self.role is Role.Plain

    @property
    def literal(self) -> bool:
        return self.role <= Role.Escaped
