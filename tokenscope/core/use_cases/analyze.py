"""
Analyze use case — classify every token of the newest data file.

Steps:
    1. find the newest ``generated_data_*.txt`` under ``<cwd>/data``
    2. count its fields (streaming pass, for the header)
    3. stream it again, classifying and writing one block per field
       to ``<app-base-dir>/output/analysis_<stamp>.txt`` and mirroring
       everything to the reporter
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from tokenscope.core.config.settings import Settings
from tokenscope.core.errors import DataFileNotFoundError, TokenscopeError
from tokenscope.core.models.results import AnalysisSummary
from tokenscope.core.observability.reporter import NullReporter, Reporter
from tokenscope.core.persistence.atomic_file import atomic_text_writer
from tokenscope.core.services.file_selector import find_latest_data_file
from tokenscope.core.services.report_writer import ReportWriter, count_fields, iter_fields

logger = logging.getLogger(__name__)

# Invalid byte sequences are replaced, not fatal; a BOM is dropped.
_READ_ENCODING = "utf-8-sig"
_READ_ERRORS = "replace"


@dataclass
class AnalyzeResult:
    """Outcome of ``run_analysis``: either a summary or an error."""

    summary: AnalysisSummary | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.summary is not None

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dictionary."""
        if self.error:
            return {"error": self.error}
        return self.summary.model_dump(mode="json") if self.summary else {}


def _open_source(path: Path):
    return path.open("r", encoding=_READ_ENCODING, errors=_READ_ERRORS, newline="")


def analyze_file(
    source: Path,
    report_path: Path,
    settings: Settings | None = None,
    reporter: Reporter | None = None,
    now: datetime | None = None,
) -> AnalysisSummary:
    """Classify ``source`` into a report at ``report_path``.

    Raises:
        DataFileNotFoundError: ``source`` does not exist.
        OSError: reading or writing failed; no report is left behind.
    """
    settings = settings or Settings()
    reporter = reporter or NullReporter()

    if not source.is_file():
        raise DataFileNotFoundError(f"File not found: {source}")

    sep, chunk = settings.separator, settings.read_chunk_size

    with _open_source(source) as stream:
        field_count = count_fields(stream, sep, chunk)
    logger.info("%s: %d fields", source.name, field_count)

    categories: Counter = Counter()
    with atomic_text_writer(report_path) as out, _open_source(source) as stream:
        writer = ReportWriter(out, mirror=reporter.echo)
        writer.write_header(source.name, field_count, now or datetime.now())
        for field in iter_fields(stream, sep, chunk):
            category = writer.write_item(field)
            if category is not None:
                categories[category] += 1

    item_count = sum(categories.values())
    logger.info("Classified %d items (%d blank fields skipped)", item_count, field_count - item_count)
    return AnalysisSummary(
        source_path=str(source),
        report_path=str(report_path),
        field_count=field_count,
        item_count=item_count,
        category_counts=dict(categories),
    )


def run_analysis(
    settings: Settings | None = None,
    reporter: Reporter | None = None,
    now: datetime | None = None,
) -> AnalyzeResult:
    """Analyze the newest data file and write a report.

    Args:
        settings: Pipeline constants (default: the production ones).
        reporter: Receives progress lines and the mirrored report.
        now: Timestamp for the report name and header.

    Returns:
        AnalyzeResult; ``error`` is set instead of raising on failure.
    """
    settings = settings or Settings()
    reporter = reporter or NullReporter()
    now = now or datetime.now()
    result = AnalyzeResult()

    reporter.info("File Reader Starting...")

    try:
        source = find_latest_data_file(settings.data_directory(), settings.data_file_pattern)
        output_dir = settings.output_directory()
        output_dir.mkdir(parents=True, exist_ok=True)
        report_path = output_dir / settings.report_file_name(now)

        result.summary = analyze_file(source, report_path, settings, reporter, now)
    except (TokenscopeError, OSError) as e:
        logger.debug("Analysis failed", exc_info=True)
        result.error = str(e)

    return result
