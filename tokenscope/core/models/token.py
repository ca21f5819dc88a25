"""
Token enums — the two closed vocabularies of the system.

``TokenKind`` is what the generator can produce.  ``Category`` is what the
classifier can answer.  Both are closed: code that dispatches on them uses
an exhaustive ``match`` rather than an open ``if`` chain.
"""

from __future__ import annotations

from enum import StrEnum


class TokenKind(StrEnum):
    """Shapes of token the generator synthesizes."""

    ALPHABETIC = "alphabetic"
    REAL = "real"
    INTEGER = "integer"
    ALPHANUMERIC = "alphanumeric"


class Category(StrEnum):
    """Classification result.  The value is the label printed in reports."""

    EMPTY = "Empty"
    INTEGER = "Integer"
    REAL_NUMBER = "Real Number"
    ALPHABETICAL = "Alphabetical String"
    ALPHANUMERIC = "Alphanumeric"
    UNKNOWN = "Unknown"
