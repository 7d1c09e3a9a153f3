from __future__ import annotations
import logging
import os

from . import config as CFG

log = logging.getLogger(__name__)


def read_document(path: str | os.PathLike,
                  *,
                  encoding: str | None = None,
                  errors: str | None = None) -> str:
    """
    Read a whole text file into one string.

    Line endings are kept exactly as stored (no "\\r\\n" -> "\\n" translation),
    because context strings reproduce the document verbatim.
    FileNotFoundError / OSError / UnicodeDecodeError propagate to the caller.
    """
    path = os.fspath(path)
    enc = encoding or CFG.ENCODING
    errs = errors or CFG.ENCODING_ERRORS
    with open(path, "r", encoding=enc, errors=errs, newline="") as f:
        text = f.read()
    if CFG.VERBOSE:
        log.info("Read %s (%d chars, encoding=%s)", path, len(text), enc)
    return text
