"""
Token classifier — assigns exactly one ``Category`` to a token.

Rules are evaluated in order; the first match wins:

    1. empty / whitespace only          → Empty
    2. signed 32-bit integer            → Integer
    3. floating-point number            → Real Number
    4. letters only                     → Alphabetical String
    5. at least one letter and digit    → Alphanumeric
    6. anything else                    → Unknown

An all-digit token that overflows 32 bits is not an Integer; it falls
through to rule 3 and comes out as a Real Number.
"""

from __future__ import annotations

import re
from typing import Callable

from tokenscope.core.models.token import Category

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_INTEGER_RE = re.compile(r"\s*[+-]?[0-9]+\s*")
_FLOAT_RE = re.compile(
    r"""\s*[+-]?
        (?: [0-9]+\.?[0-9]* | \.[0-9]+ )
        (?: [eE][+-]?[0-9]+ )?
        \s*""",
    re.VERBOSE,
)
# Symbolic values accepted by invariant-culture float parsing
_FLOAT_SYMBOL_RE = re.compile(r"\s*(?:nan|[+-]?infinity)\s*", re.IGNORECASE)


def is_empty(token: str) -> bool:
    return not token or token.isspace()


def is_integer(token: str) -> bool:
    """Whole-token signed integer that fits in 32 bits."""
    if not _INTEGER_RE.fullmatch(token):
        return False
    digits = token.strip().lstrip("+-").lstrip("0")
    # Bail out before int() on very long digit runs
    if len(digits) > 10:
        return False
    return INT32_MIN <= int(token) <= INT32_MAX


def is_real_number(token: str) -> bool:
    """Whole-token decimal/exponent number, or NaN/Infinity."""
    return bool(_FLOAT_RE.fullmatch(token) or _FLOAT_SYMBOL_RE.fullmatch(token))


def is_alphabetical(token: str) -> bool:
    return bool(token) and all(ch.isalpha() for ch in token)


def is_alphanumeric(token: str) -> bool:
    return any(ch.isalpha() for ch in token) and any(ch.isdecimal() for ch in token)


# Precedence order; a token matching none of these is Unknown.
RULES: tuple[tuple[Category, Callable[[str], bool]], ...] = (
    (Category.EMPTY, is_empty),
    (Category.INTEGER, is_integer),
    (Category.REAL_NUMBER, is_real_number),
    (Category.ALPHABETICAL, is_alphabetical),
    (Category.ALPHANUMERIC, is_alphanumeric),
)


def classify(token: str) -> Category:
    """Classify a single (normally already trimmed) token."""
    for category, matches in RULES:
        if matches(token):
            return category
    return Category.UNKNOWN
