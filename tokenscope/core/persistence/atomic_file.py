"""
Atomic text files — write to a temp file, rename on success.

Both pipelines produce their output through ``atomic_text_writer``.  If
the body of the ``with`` block raises, the temp file is removed and the
target path is never created, so a failed run leaves nothing behind.

Temp files are hidden (leading dot) and end in ``.tmp``, so they never
match the reader's discovery pattern.
"""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TextIO

logger = logging.getLogger(__name__)

TEMP_PREFIX = ".tokenscope_"
TEMP_SUFFIX = ".tmp"


@contextmanager
def atomic_text_writer(path: Path, encoding: str = "utf-8") -> Iterator[TextIO]:
    """Open a UTF-8 text stream whose content lands at ``path`` on success.

    The parent directory is created if needed.  An existing file at
    ``path`` is replaced (truncate-or-create semantics).

    Args:
        path: Final location of the file.
        encoding: Text encoding of the stream.

    Yields:
        A writable text stream backed by a temp file next to ``path``.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_path = tempfile.mkstemp(dir=path.parent, prefix=TEMP_PREFIX, suffix=TEMP_SUFFIX)
    tmp = Path(tmp_path)
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as stream:
            yield stream
        os.replace(tmp, path)
        logger.debug("Wrote %s", path)
    except Exception:
        tmp.unlink(missing_ok=True)
        logger.debug("Discarded partial output for %s", path)
        raise
