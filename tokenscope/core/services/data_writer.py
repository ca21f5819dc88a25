"""
Data writer — streams random tokens into a file until it is big enough.

The size check runs before each token, so the file ends at or just past
the target, never below it.  Sizes are counted in UTF-8 bytes.
"""

from __future__ import annotations

import logging
from collections import Counter
from datetime import datetime
from pathlib import Path

from tokenscope.core.config.settings import TARGET_FILE_SIZE, Settings
from tokenscope.core.models.results import GenerationResult
from tokenscope.core.persistence.atomic_file import atomic_text_writer
from tokenscope.core.services.token_factory import TokenFactory

logger = logging.getLogger(__name__)


def data_file_path(settings: Settings, now: datetime | None = None) -> Path:
    """Path of a new data file, ``<cwd>/data/generated_data_<stamp>.txt``.

    Creates the data directory if it does not exist yet.
    """
    data_dir = settings.data_directory()
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / settings.data_file_name(now or datetime.now())


def write_data_file(
    path: Path,
    factory: TokenFactory,
    target_size: int = TARGET_FILE_SIZE,
    separator: str = ",",
) -> GenerationResult:
    """Write separator-joined random tokens to ``path``.

    Args:
        path: Destination; replaced if it exists.
        factory: Token source.
        target_size: Stop once this many bytes have been written.
        separator: Written between tokens, never after the last one.

    Returns:
        GenerationResult with the byte size and per-kind token counts.
    """
    separator_size = len(separator.encode("utf-8"))
    kinds: Counter = Counter()
    size = 0
    count = 0

    logger.info("Generating %s (target %d bytes)", path, target_size)

    with atomic_text_writer(path) as out:
        while size < target_size:
            kind, token = factory.next_token()

            if count:
                out.write(separator)
                size += separator_size

            out.write(token)
            size += len(token.encode("utf-8"))
            kinds[kind] += 1
            count += 1

    logger.info("Generated %d tokens, %d bytes", count, size)
    return GenerationResult(
        path=str(path),
        size_bytes=size,
        token_count=count,
        kind_counts=dict(kinds),
    )
