"""
Pydantic models for the parser: tokens, grammar profiles and results.

Tokens and profiles are frozen: they are produced once and shared freely,
nothing downstream is allowed to patch them in place.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


# ─── Token Kinds ────────────────────────────────────────────────────


class TokenKind(str, Enum):
    """Semantic category of a single word."""

    ZERO = "ZERO"
    UNIT = "UNIT"  # one .. nine
    TEEN = "TEEN"  # ten .. nineteen
    TENS = "TENS"  # twenty, thirty, .. ninety
    HUNDRED = "HUNDRED"
    SCALE = "SCALE"  # thousand, million, billion, trillion
    AND = "AND"
    DOLLARS = "DOLLARS"
    CENTS = "CENTS"
    UNKNOWN = "UNKNOWN"
    END = "END"  # synthetic, never produced from text


# ─── Token ──────────────────────────────────────────────────────────


class Token(BaseModel):
    """One typed word of the input."""

    kind: TokenKind
    text: str  # The word as it appeared after normalization
    value: int = 0  # Numeric weight; 0 when the kind carries none

    model_config = {"frozen": True}


END_TOKEN = Token(kind=TokenKind.END, text="")


# ─── Grammar Profiles ───────────────────────────────────────────────


class GrammarProfile(BaseModel):
    """Switches for the grammar edges that differ between plain and money input.

    Both profiles run the same state machine; only these flags change
    which transitions are legal.
    """

    name: str
    currency: bool = False  # Recognise dollar/cent markers
    teen_hundreds: bool = False  # Accept "eleven hundred" style amounts
    skip_unknown_words: bool = False  # Ignore stray words near the markers

    model_config = {"frozen": True}


PLAIN = GrammarProfile(name="plain")

CURRENCY = GrammarProfile(
    name="currency",
    currency=True,
    teen_hundreds=True,
    skip_unknown_words=True,
)

PROFILES: dict[str, GrammarProfile] = {p.name: p for p in (PLAIN, CURRENCY)}


# ─── Results ────────────────────────────────────────────────────────


class ParseErrorInfo(BaseModel):
    """Serializable description of a parse failure."""

    code: str  # Machine-readable, e.g. "GRAMMAR_VIOLATION"
    message: str  # Human-readable explanation
    token: Optional[str] = None  # The offending word
    after: Optional[str] = None  # The word it followed, if any
    details: dict = Field(default_factory=dict)


class ParseResult(BaseModel):
    """Outcome of one conversion: exactly one of ``value`` / ``error`` is set."""

    text: str
    profile: str
    value: Optional[int] = None  # Plain integer, or cents for the currency profile
    error: Optional[ParseErrorInfo] = None

    @property
    def ok(self) -> bool:
        return self.error is None
