"""
Domain models for tokenscope.

All models are re-exported here for convenient access:

    from tokenscope.core.models import Category, TokenKind, GenerationResult
"""

from tokenscope.core.models.results import AnalysisSummary, GenerationResult
from tokenscope.core.models.token import Category, TokenKind

__all__ = [
    # results.py
    "AnalysisSummary",
    # token.py
    "Category",
    "GenerationResult",
    "TokenKind",
]
