from __future__ import annotations

import io

from fromposix.lib.environment import logger
from fromposix.lib.posix.cursor import QuoteCursor
from fromposix.lib.posix.model import QuoteState

__all__ = ['decode']

log = logger(__name__)


def decode(raw: str) -> str:
    """
    Decode the raw text of a value: Quotes are removed, escape sequences are resolved, and
    everything else is kept verbatim. This function never fails; a quoted string that is left
    open at the end of the input is treated as if it was closed.
    """
    cursor = QuoteCursor(raw)
    with io.StringIO() as decoded:
        for scanned in cursor:
            if scanned.literal:
                decoded.write(scanned.char)
        if (state := cursor.state) is not QuoteState.Unquoted:
            log.debug(F'implicitly closing {state.name} value: {raw!r}')
        return decoded.getvalue()
