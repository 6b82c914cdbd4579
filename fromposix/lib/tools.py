"""
Miscellaneous helpers for the glue around the parser.
"""
from __future__ import annotations

import codecs

from fromposix.lib.environment import environment, logger
from fromposix.lib.types import asbuffer, buf

__all__ = [
    'UnsupportedInput',
    'is_text_encoding',
    'normalize_input',
    'text_from_buffer',
]


class UnsupportedInput(TypeError):
    """
    Raised when the input to the converter is neither a string, a bytes-like object, nor a list
    of strings.
    """
    def __init__(self, data):
        super().__init__(F'expected string input, got {type(data).__name__}')
        self.data = data


def is_text_encoding(encoding: str) -> bool:
    try:
        info = codecs.lookup(encoding)
    except LookupError:
        return False
    return getattr(info, '_is_text_encoding', True)


def text_from_buffer(data: buf, encoding: str | None = None) -> str:
    """
    Decode a binary input buffer. The encoding defaults to the value of the `FROMPOSIX_ENCODING`
    environment variable; an unknown codec or one that does not decode bytes to text is replaced
    by UTF-8. A byte order mark at the beginning of the buffer is removed. Data that cannot be
    decoded is decoded as Latin-1 instead, which never fails.
    """
    view = asbuffer(data)
    if view is None:
        raise UnsupportedInput(data)
    if encoding is None:
        encoding = environment.encoding.value
    if not is_text_encoding(encoding):
        logger(__name__).warning(F'{encoding} is not a known text encoding, using utf8')
        encoding = 'utf8'
    try:
        text = codecs.decode(view, encoding)
    except UnicodeError as error:
        logger(__name__).warning(
            F'input is not valid {encoding}, falling back to latin1: {error!s}')
        text = codecs.decode(view, 'latin1')
    if text.startswith('\ufeff'):
        text = text[1:]
    return text


def normalize_input(data) -> str:
    """
    Convert the input to the converter into a single string. Lists and tuples of strings are
    joined with line breaks.
    """
    if isinstance(data, str):
        return data
    if isinstance(data, (list, tuple)):
        return '\n'.join(normalize_input(item) for item in data)
    return text_from_buffer(data)
