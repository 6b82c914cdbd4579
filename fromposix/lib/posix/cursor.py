"""
The quote-aware scanning primitive that is shared by the statement splitter, the assignment
tokenizer, and the value decoder. Every decision about whether a character separates two things
is made by consulting the `fromposix.lib.posix.model.Role` that this cursor assigns to it.

The quoting rules follow POSIX:

- Outside of quotes, a backslash escapes whatever character follows it. A cursor can be
  restricted to a set of escapable characters; a backslash before any other character is then
  an ordinary character.
- Inside single quotes, nothing is special except the closing single quote.
- Inside double quotes, a backslash only escapes one of the characters in
  `fromposix.lib.posix.const.DQ_ESCAPABLE` and is literal otherwise.
"""
from __future__ import annotations

import io

from typing import Callable, ClassVar, Collection, Generator

from fromposix.lib.posix.const import (
    BACKSLASH,
    DQ_ESCAPABLE,
    QUOTE_DOUBLE,
    QUOTE_SINGLE,
    WHITESPACE,
)
from fromposix.lib.posix.model import QuoteState, Role, Scanned

__all__ = [
    'QuoteCursor',
    'find',
    'split',
    'strip',
]


class QuoteCursor:
    """
    Iterating a cursor yields one `fromposix.lib.posix.model.Scanned` item for every character of
    the input text. Each iteration starts over at the beginning of the text in unquoted state. After
    an iteration has completed, the `state` attribute contains the quote state at the end of the
    input; it is not `QuoteState.Unquoted` when a quoted string was left open.
    """

    text: str
    offset: int
    state: QuoteState
    escapable: Collection[str] | None

    class _register:
        # A handler is given the current character. It consumes at least that character and
        # yields the classification of each consumed character.
        handlers: ClassVar[dict[QuoteState, Callable[
            [QuoteCursor, str], Generator[Scanned, None, None]
        ]]] = {}

        def __init__(self, *states: QuoteState):
            self.states = states

        def __call__(self, handler):
            for state in self.states:
                self.handlers[state] = handler
            return handler

    def __init__(self, text: str, escapable: Collection[str] | None = None):
        self.text = text
        self.escapable = escapable
        self.reset()

    def reset(self):
        self.offset = 0
        self.state = QuoteState.Unquoted

    @property
    def eof(self) -> bool:
        return self.offset >= len(self.text)

    def __iter__(self) -> Generator[Scanned, None, None]:
        self.reset()
        handlers = self._register.handlers
        while not self.eof:
            yield from handlers[self.state](self, self.text[self.offset])

    def _take(self, role: Role) -> Scanned:
        offset = self.offset
        self.offset = offset + 1
        return Scanned(offset, self.text[offset], role)

    @_register(QuoteState.Unquoted)
    def _unquoted(self, char: str):
        if char == BACKSLASH:
            escaped = self.text[self.offset + 1:self.offset + 2]
            if not escaped:
                # a trailing backslash has nothing to escape and stays literal
                yield self._take(Role.Escaped)
            elif self.escapable is not None and escaped not in self.escapable:
                yield self._take(Role.Plain)
            else:
                yield self._take(Role.Escape)
                yield self._take(Role.Escaped)
        elif char == QUOTE_SINGLE:
            self.state = QuoteState.SingleQuoted
            yield self._take(Role.Delimiter)
        elif char == QUOTE_DOUBLE:
            self.state = QuoteState.DoubleQuoted
            yield self._take(Role.Delimiter)
        else:
            yield self._take(Role.Plain)

    @_register(QuoteState.SingleQuoted)
    def _single_quoted(self, char: str):
        if char == QUOTE_SINGLE:
            self.state = QuoteState.Unquoted
            yield self._take(Role.Delimiter)
        else:
            yield self._take(Role.Quoted)

    @_register(QuoteState.DoubleQuoted)
    def _double_quoted(self, char: str):
        if char == QUOTE_DOUBLE:
            self.state = QuoteState.Unquoted
            yield self._take(Role.Delimiter)
        elif char == BACKSLASH and self.text[self.offset + 1:self.offset + 2] in DQ_ESCAPABLE:
            yield self._take(Role.Escape)
            yield self._take(Role.Escaped)
        else:
            yield self._take(Role.Quoted)


def find(text: str, char: str) -> int:
    """
    Return the offset of the first occurrence of `char` in `text` that is neither quoted nor
    escaped, or `-1` if there is none.
    """
    for offset, c, role in QuoteCursor(text):
        if c == char and role is Role.Plain:
            return offset
    return -1


def strip(text: str) -> str:
    """
    Remove leading and trailing whitespace unless it is quoted or escaped.
    """
    start = end = None
    for offset, char, role in QuoteCursor(text):
        if role is Role.Plain and char in WHITESPACE:
            continue
        if start is None:
            start = offset
        end = offset + 1
    if start is None:
        return ''
    return text[start:end]


def split(
    text: str,
    is_separator: Callable[[str], bool] = WHITESPACE.__contains__
) -> Generator[str, None, None]:
    """
    Split `text` at every unquoted, unescaped character for which `is_separator` returns true.
    Empty pieces are not generated.
    """
    with io.StringIO() as piece:
        for _, char, role in QuoteCursor(text):
            if role is Role.Plain and is_separator(char):
                if token := piece.getvalue():
                    yield token
                piece.seek(0)
                piece.truncate()
                continue
            piece.write(char)
        if token := piece.getvalue():
            yield token
