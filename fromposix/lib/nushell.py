"""
Render assignments as Nushell environment assignments:

    $env.FOO = bar
    $env.MESSAGE = "hello world"
"""
from __future__ import annotations

import json
import re

from typing import Iterable

from fromposix.lib.posix.model import Assignment

__all__ = [
    'exports_to_nushell',
    'nushell_assignment',
    'nushell_value',
    'render_json',
]

_NEEDS_QUOTES = frozenset(' \t\n\r"\'$\\#;|()[]{}`')

_LITERAL = re.compile(
    R'(?i)true|false|null'
    R'|[+-]?(?:\d[\d_]*(?:\.\d*)?|\.\d+)(?:e[+-]?\d+)?[a-z]*'  # numbers, file sizes, durations
    R'|[+-]?(?:inf|nan)'
    R'|0x[0-9a-f_]+|0o[0-7_]+|0b[01_]+'
    R'|\d{4}-\d{2}-\d{2}\S*'
)

_ESCAPES = {
    '\\': '\\\\',
    '"': '\\"',
    '\n': '\\n',
    '\t': '\\t',
    '\r': '\\r',
}


def nushell_value(value: str) -> str:
    """
    Values are emitted bare unless they are empty, contain characters that Nushell would
    interpret, or would be parsed as a number, boolean, or date; those are emitted as double
    quoted strings.
    """
    if not value:
        return '""'
    if _NEEDS_QUOTES.isdisjoint(value) and not _LITERAL.fullmatch(value):
        return value
    escaped = ''.join(_ESCAPES.get(char, char) for char in value)
    return F'"{escaped}"'


def nushell_assignment(assignment: Assignment) -> str:
    return F'$env.{assignment.name} = {nushell_value(assignment.value)}'


def exports_to_nushell(assignments: Iterable[Assignment]) -> str:
    return '\n'.join(nushell_assignment(a) for a in assignments)


def render_json(assignments: Iterable[Assignment], indent: int | None = None) -> str:
    return json.dumps([
        {'name': a.name, 'value': a.value} for a in assignments
    ], indent=indent)
