"""
File selector — picks the data file the reader should analyze.

Policy: among files in the data directory matching the generator's
naming pattern, take the one modified most recently.  Equal mtimes are
broken by name (highest wins) so the answer is stable.
"""

from __future__ import annotations

import logging
from pathlib import Path

from tokenscope.core.config.settings import DATA_FILE_PREFIX, DATA_FILE_SUFFIX
from tokenscope.core.errors import DataDirectoryNotFoundError, DataFileNotFoundError

logger = logging.getLogger(__name__)


def list_data_files(data_dir: Path, pattern: str) -> list[Path]:
    """Regular files in ``data_dir`` matching ``pattern``, newest first."""
    candidates = [p for p in data_dir.glob(pattern) if p.is_file()]
    candidates.sort(key=lambda p: (p.stat().st_mtime_ns, p.name), reverse=True)
    return candidates


def find_latest_data_file(
    data_dir: Path,
    pattern: str = f"{DATA_FILE_PREFIX}*{DATA_FILE_SUFFIX}",
) -> Path:
    """Return the most recently modified data file.

    Raises:
        DataDirectoryNotFoundError: ``data_dir`` does not exist.
        DataFileNotFoundError: no file in it matches ``pattern``.
    """
    if not data_dir.is_dir():
        raise DataDirectoryNotFoundError(f"Data directory not found at: {data_dir}")

    candidates = list_data_files(data_dir, pattern)
    if not candidates:
        raise DataFileNotFoundError("No data files found in the data directory.")

    latest = candidates[0]
    logger.info("Selected %s (%d candidates)", latest.name, len(candidates))
    return latest.resolve()
