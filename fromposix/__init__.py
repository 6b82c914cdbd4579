R"""
Convert POSIX shell `export` statements into a sequence of environment variable assignments:

    >>> from fromposix import parse_posix_exports
    >>> parse_posix_exports('export FOO=bar && export PATH="/usr/bin:/bin"')
    [Assignment(name='FOO', value='bar'), Assignment(name='PATH', value='/usr/bin:/bin')]

The assignments can be rendered for Nushell:

    >>> from fromposix import convert
    >>> print(convert("export FOO=bar MESSAGE='hello world'"))
    $env.FOO = bar
    $env.MESSAGE = "hello world"

The parsing rules are documented in `fromposix.lib.posix`; the command line interface is provided
by `fromposix.cli`.
"""
from __future__ import annotations

__version__ = '0.1.0'
__distribution__ = 'from-posix'

from fromposix.lib.nushell import exports_to_nushell, render_json
from fromposix.lib.posix import Assignment, exports
from fromposix.lib.tools import UnsupportedInput, normalize_input

__all__ = [
    'Assignment',
    'UnsupportedInput',
    'convert',
    'exports_to_nushell',
    'parse_posix_exports',
    'render_json',
]


def parse_posix_exports(data) -> list[Assignment]:
    """
    Parse all export statements in `data`, which can be a string, a bytes-like object, or a list
    of strings. Only an input of any other type causes an `UnsupportedInput` exception.
    """
    return list(exports(normalize_input(data)))


def convert(data) -> str:
    """
    Convert all export statements in `data` to Nushell assignments.
    """
    return exports_to_nushell(parse_posix_exports(data))
