from __future__ import annotations

from typing import Generator

from fromposix.lib.environment import logger
from fromposix.lib.posix.const import AMPERSAND, LINEBREAK, QUOTES
from fromposix.lib.posix.cursor import QuoteCursor, strip
from fromposix.lib.posix.model import Role, Statement

__all__ = ['StatementSplitter', 'split']

log = logger(__name__)


class StatementSplitter:
    """
    Splits input text into statements at every line break and every `&&` that is not quoted. At
    this stage, a backslash only escapes a quote character; a line break or `&&` that follows a
    backslash still ends the statement. The separators are not part of any statement. Statements
    are stripped of their surrounding whitespace and empty statements are discarded. A quoted
    string that is still open at the end of the input becomes part of the last statement.

    The splitter is lazy and can be iterated any number of times.
    """

    def __init__(self, text: str):
        self.text = text

    def __iter__(self) -> Generator[Statement, None, None]:
        text = self.text
        start = 0
        skip = False
        for offset, char, role in QuoteCursor(text, QUOTES):
            if skip:
                skip = False
                continue
            if role is not Role.Plain:
                continue
            if char == LINEBREAK:
                resume = offset + 1
            elif char == AMPERSAND and text[offset + 1:offset + 2] == AMPERSAND:
                resume = offset + 2
                skip = True
            else:
                continue
            if statement := self._statement(text[start:offset]):
                yield statement
            start = resume
        if statement := self._statement(text[start:]):
            yield statement

    @staticmethod
    def _statement(chunk: str) -> Statement | None:
        if chunk := strip(chunk):
            log.debug(F'statement: {chunk!r}')
            return Statement(chunk)
        return None


def split(text: str) -> StatementSplitter:
    return StatementSplitter(text)
