from __future__ import annotations

from typing import Generator

from fromposix.lib.environment import logger
from fromposix.lib.posix.const import EQUALS, KEYWORD_EXPORT, WHITESPACE
from fromposix.lib.posix.cursor import find, split, strip
from fromposix.lib.posix.decoder import decode
from fromposix.lib.posix.model import Assignment

__all__ = ['ExportParser', 'parse']

log = logger(__name__)


class ExportParser:
    """
    Extracts the assignments from a single statement of the form

        export NAME=VALUE [NAME=VALUE ...]

    Statements that do not start with the `export` keyword produce no assignments. Tokens that do
    not contain an unquoted equals sign are skipped, as are tokens where that equals sign is the
    first character. The value of each assignment is decoded with `fromposix.lib.posix.decoder`.
    """

    def __init__(self, statement: str):
        self.statement = statement

    def body(self) -> str | None:
        """
        Return the part of the statement that follows the `export` keyword, or `None` if the
        statement is not an export statement.
        """
        statement = strip(self.statement)
        if not statement.startswith(KEYWORD_EXPORT):
            return None
        body = statement[len(KEYWORD_EXPORT):]
        if body[:1] not in WHITESPACE:
            return None
        return body

    def __iter__(self) -> Generator[Assignment, None, None]:
        if (body := self.body()) is None:
            log.debug(F'not an export statement: {self.statement!r}')
            return
        for token in split(body):
            equals = find(token, EQUALS)
            if equals < 0:
                log.debug(F'skipping token without value: {token!r}')
                continue
            if equals == 0:
                log.debug(F'skipping token without name: {token!r}')
                continue
            yield Assignment(token[:equals], decode(token[equals + 1:]))


def parse(statement: str) -> list[Assignment]:
    return list(ExportParser(statement))
