"""
Error types shared by both pipelines.

Use cases catch these (plus ``OSError``) and turn them into a result
carrying an error message. The CLI never sees a traceback.
"""

from __future__ import annotations


class TokenscopeError(Exception):
    """Base class for expected, user-facing failures."""


class DataDirectoryNotFoundError(TokenscopeError):
    """Raised when the data directory does not exist at read time."""


class DataFileNotFoundError(TokenscopeError):
    """Raised when no generated data file can be found, or a given path is missing."""
