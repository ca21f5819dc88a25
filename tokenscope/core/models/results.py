"""
Run summaries — what each pipeline reports back once it has finished.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from tokenscope.core.models.token import Category, TokenKind


class GenerationResult(BaseModel):
    """Outcome of one generator run."""

    path: str
    size_bytes: int = 0
    token_count: int = 0
    kind_counts: dict[TokenKind, int] = Field(default_factory=dict)

    @property
    def size_mib(self) -> float:
        """File size in MiB (the unit shown to the user as "MB")."""
        return self.size_bytes / 1024.0 / 1024.0


class AnalysisSummary(BaseModel):
    """Outcome of one reader run."""

    source_path: str
    report_path: str
    field_count: int = 0            # raw separator-delimited fields
    item_count: int = 0             # non-empty fields actually classified
    category_counts: dict[Category, int] = Field(default_factory=dict)

    @property
    def skipped_count(self) -> int:
        """Fields that were blank after trimming."""
        return self.field_count - self.item_count
