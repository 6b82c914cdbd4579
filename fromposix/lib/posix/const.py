from __future__ import annotations

AMPERSAND = '&'
BACKSLASH = '\\'
BACKTICK = '`'
DOLLAR = '$'
EQUALS = '='
LINEBREAK = '\n'
QUOTE_DOUBLE = '"'
QUOTE_SINGLE = "'"

KEYWORD_EXPORT = 'export'

WHITESPACE = frozenset(' \t\n\r\v\f')

DQ_ESCAPABLE = frozenset((
    QUOTE_DOUBLE,
    BACKSLASH,
    BACKTICK,
    DOLLAR,
    LINEBREAK,
))
"""
The characters that a backslash escapes inside a double quoted string. Any other character that
follows a backslash in this context leaves the backslash in place.
"""

QUOTES = frozenset((QUOTE_SINGLE, QUOTE_DOUBLE))
"""
The only characters that an unquoted backslash escapes when the input is split into statements.
"""
