"""
Token factory — synthesizes one random token at a time.

Four shapes, picked with equal probability:

    alphabetic     lowercase letters, length in [5, 15)
    real           random() * randrange(-1000, 1000), six decimals
    integer        randrange(-1_000_000, 1_000_000)
    alphanumeric   letters/digits, length in [5, 15), padded with
                   0-10 spaces on each side

The random source is injected so a run can be replayed from a seed.
"""

from __future__ import annotations

import random
import string

from tokenscope.core.models.token import TokenKind

_KINDS: tuple[TokenKind, ...] = tuple(TokenKind)

MIN_LENGTH = 5
MAX_LENGTH = 15      # exclusive
MAX_PADDING = 10     # inclusive


class TokenFactory:
    """Produces random tokens from an injected ``random.Random``."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    @property
    def rng(self) -> random.Random:
        return self._rng

    def next_kind(self) -> TokenKind:
        """Draw one of the four kinds uniformly."""
        return _KINDS[self._rng.randrange(len(_KINDS))]

    def next_token(self) -> tuple[TokenKind, str]:
        """Draw a kind, then render a token of that kind."""
        kind = self.next_kind()
        return kind, self.generate(kind)

    def generate(self, kind: TokenKind) -> str:
        """Render one token of the given kind."""
        match kind:
            case TokenKind.ALPHABETIC:
                return self.alphabetic()
            case TokenKind.REAL:
                return self.real_number()
            case TokenKind.INTEGER:
                return self.integer()
            case TokenKind.ALPHANUMERIC:
                return self.alphanumeric()

    # ── Individual shapes ────────────────────────────────────────

    def alphabetic(self) -> str:
        length = self._rng.randrange(MIN_LENGTH, MAX_LENGTH)
        return "".join(self._letter() for _ in range(length))

    def real_number(self) -> str:
        # Product of two draws; skewed toward zero, |value| < 1000.
        value = self._rng.random() * self._rng.randrange(-1000, 1000)
        return f"{value:.6f}"

    def integer(self) -> str:
        return str(self._rng.randrange(-1_000_000, 1_000_000))

    def alphanumeric(self) -> str:
        length = self._rng.randrange(MIN_LENGTH, MAX_LENGTH)
        value = "".join(
            self._letter() if self._rng.randrange(2) == 0 else self._digit()
            for _ in range(length)
        )
        before = self._rng.randint(0, MAX_PADDING)
        after = self._rng.randint(0, MAX_PADDING)
        return " " * before + value + " " * after

    def _letter(self) -> str:
        return self._rng.choice(string.ascii_lowercase)

    def _digit(self) -> str:
        return self._rng.choice(string.digits)
