"""
Report writer — renders the analysis report and mirrors it.

Layout:

    Processing file: generated_data_2024-01-02_00-00-00.txt
    Total items found: 3
    Analysis Date: 2024-01-02 00:00:05
    =====================================================

    Item: hello
    Type: Alphabetical String

    ...

The file copy carries one blank line after the divider; the mirrored
copy does not.  Fields that are blank after trimming are counted in the
header but get no block.

Fields are read with ``iter_fields`` in fixed-size chunks, so the data
file is never held in memory as a whole.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from datetime import datetime
from typing import TextIO

from tokenscope.core.config.settings import HEADER_STAMP_FORMAT
from tokenscope.core.models.token import Category
from tokenscope.core.services.classifier import classify

DIVIDER = "=" * 53
DEFAULT_CHUNK_SIZE = 64 * 1024


def iter_fields(
    stream: TextIO,
    separator: str = ",",
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> Iterator[str]:
    """Yield the raw separator-delimited fields of ``stream``.

    Behaves like ``stream.read().split(separator)`` without the read():
    an empty stream yields a single empty field, consecutive separators
    yield empty fields.
    """
    pending = ""
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            break
        pending += chunk
        *complete, pending = pending.split(separator)
        yield from complete
    yield pending


def count_fields(
    stream: TextIO,
    separator: str = ",",
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> int:
    """Number of fields ``iter_fields`` would yield."""
    return sum(1 for _ in iter_fields(stream, separator, chunk_size))


def _discard(_text: str) -> None:
    pass


class ReportWriter:
    """Writes the report to ``out`` and every piece of it to ``mirror``."""

    def __init__(self, out: TextIO, mirror: Callable[[str], None] | None = None) -> None:
        self._out = out
        self._mirror = mirror or _discard

    def write_header(self, source_name: str, field_count: int, analyzed_at: datetime) -> None:
        header = (
            f"Processing file: {source_name}\n"
            f"Total items found: {field_count}\n"
            f"Analysis Date: {analyzed_at.strftime(HEADER_STAMP_FORMAT)}\n"
            f"{DIVIDER}\n"
        )
        self._out.write(header + "\n")
        self._mirror(header)

    def write_item(self, field: str) -> Category | None:
        """Classify and write one field.

        Returns:
            The category, or None when the field was blank and skipped.
        """
        item = field.strip()
        if not item:
            return None

        category = classify(item)
        block = f"Item: {item}\nType: {category}\n\n"
        self._out.write(block)
        self._mirror(block)
        return category
