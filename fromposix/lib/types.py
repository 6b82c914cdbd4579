"""
Type aliases that are primarily used for type hints.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from typing import Union

    buf = Union[bytes, bytearray, memoryview]

else:
    buf = Any


__all__ = [
    'asbuffer',
    'buf',
]


def asbuffer(obj) -> memoryview | None:
    """
    Attempts to acquire a memoryview of the given object. The return value is `None` for objects
    that do not support the buffer protocol.
    """
    try:
        return memoryview(obj)
    except TypeError:
        return None
