"""
## Export Statements

The input is a sequence of statements that are separated by line breaks or by `&&`:

    export FOO=bar && export BAZ=qux
    export PATH="/usr/bin:/bin"

Separators only count when they are not quoted; the following is a single
statement:

    export A='x && y'

Each statement that starts with the `export` keyword can declare any number of variables:

    export FOO=bar BAZ=qux

It is parsed as follows:

- The keyword has to be followed by whitespace, otherwise the statement is ignored.
- The rest of the statement is split at whitespace, respecting quotes and escapes.
- Every token is split at its first unquoted equals symbol.
- The LHS is the variable name. Tokens without an equals symbol, like `export FOO`, only mark a
  variable for export and are ignored.
- The RHS is decoded, then becomes the variable content.

Decoding removes quotes and resolves escapes the way a POSIX shell would, without expanding any
variables or commands:

    > export A='it'\\''s' B="say \\"hi\\"" C=a\\ b
    A: it's
    B: say "hi"
    C: a b

Any other statement produces no assignment at all. None of the functions in this package raise an
exception for malformed input.
"""
from __future__ import annotations

from typing import Generator

from .cursor import QuoteCursor
from .decoder import decode
from .model import Assignment, QuoteState, Statement
from .parser import ExportParser, parse
from .splitter import StatementSplitter, split

__all__ = [
    'Assignment',
    'ExportParser',
    'QuoteCursor',
    'QuoteState',
    'Statement',
    'StatementSplitter',
    'decode',
    'exports',
    'parse',
    'split',
]


def exports(text: str) -> Generator[Assignment, None, None]:
    """
    Generate all assignments from the given text in the order of their declaration. Assignments
    to the same variable are all reported.
    """
    for statement in split(text):
        yield from parse(statement)
