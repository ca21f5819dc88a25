"""
Generate use case — produce one data file of random tokens.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from datetime import datetime

from tokenscope.core.config.settings import Settings
from tokenscope.core.errors import TokenscopeError
from tokenscope.core.models.results import GenerationResult
from tokenscope.core.observability.reporter import NullReporter, Reporter
from tokenscope.core.services.data_writer import data_file_path, write_data_file
from tokenscope.core.services.token_factory import TokenFactory

logger = logging.getLogger(__name__)


@dataclass
class GenerateResult:
    """Outcome of ``run_generate``: either a generation or an error."""

    generation: GenerationResult | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.generation is not None

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dictionary."""
        if self.error:
            return {"error": self.error}
        return self.generation.model_dump(mode="json") if self.generation else {}


def run_generate(
    settings: Settings | None = None,
    rng: random.Random | None = None,
    reporter: Reporter | None = None,
    now: datetime | None = None,
) -> GenerateResult:
    """Write a new ``generated_data_<stamp>.txt`` under ``<cwd>/data``.

    Args:
        settings: Pipeline constants (default: the production ones).
        rng: Random source; pass a seeded instance for a reproducible file.
        reporter: Receives progress lines.
        now: Timestamp used in the file name (default: current local time).

    Returns:
        GenerateResult; ``error`` is set instead of raising on failure.
    """
    settings = settings or Settings()
    reporter = reporter or NullReporter()
    result = GenerateResult()

    try:
        path = data_file_path(settings, now)
        reporter.info(f"Generating file at: {path}")
        result.generation = write_data_file(
            path,
            TokenFactory(rng),
            target_size=settings.target_size,
            separator=settings.separator,
        )
    except (TokenscopeError, OSError) as e:
        logger.debug("Generation failed", exc_info=True)
        result.error = str(e)

    return result
