"""
Public entry points — orchestrates Normalizer → Tokenizer → Parser.

Flow:
  ┌────────────┐
  │ Raw phrase │
  └─────┬──────┘
        │
  ┌─────▼──────┐
  │ Normalizer │   ← lowercase, drop commas, hyphens → spaces
  └─────┬──────┘
        │
  ┌─────▼──────┐
  │ Tokenizer  │   ← lexicon lookup, unknown words kept as tokens
  └─────┬──────┘
        │
  ┌─────▼──────┐
  │   Parser   │   ← state machine, first error wins
  └─────┬──────┘
        │
  ┌─────▼──────┐
  │ int / error│
  └────────────┘

Every call builds its own token list and parser; nothing is cached between
calls, so the functions here are safe to call from any number of threads.
"""

from __future__ import annotations

import logging

from .exceptions import NumberParseError
from .models import CURRENCY, PLAIN, GrammarProfile, ParseErrorInfo, ParseResult
from .parser import parse_tokens
from .tokenizer import tokenize

logger = logging.getLogger(__name__)


def convert(text: str, profile: GrammarProfile = PLAIN) -> int:
    """Convert a number phrase under the given grammar profile.

    Args:
        text: e.g. "Four thousand, four hundred thirty-two"
        profile: PLAIN for bare integers, CURRENCY for dollar/cent amounts

    Returns:
        The integer value (cents for currency profiles).

    Raises:
        NumberParseError: If the phrase breaks the number-word grammar.
    """
    tokens = tokenize(text, currency=profile.currency)
    logger.debug(
        "Parsing %r with profile %s: %s",
        text,
        profile.name,
        [f"{t.kind.value}:{t.text}" for t in tokens],
    )
    try:
        value = parse_tokens(tokens, profile)
    except NumberParseError as exc:
        logger.debug("Rejected %r (%s): %s", text, exc.code, exc)
        raise
    logger.debug("Accepted %r → %d", text, value)
    return value


def parse(text: str) -> int:
    """Convert a plain number phrase: "three thousand four hundred" → 3400."""
    return convert(text, PLAIN)


def parse_currency(text: str) -> int:
    """Convert a money phrase to cents: "forty five dollars and one cent" → 4501."""
    return convert(text, CURRENCY)


def try_convert(text: str, profile: GrammarProfile = PLAIN) -> ParseResult:
    """Like :func:`convert`, but report failures as a value instead of raising."""
    try:
        value = convert(text, profile)
    except NumberParseError as exc:
        return ParseResult(
            text=text,
            profile=profile.name,
            error=ParseErrorInfo(
                code=exc.code,
                message=str(exc),
                token=exc.token,
                after=exc.after,
                details=exc.details,
            ),
        )
    return ParseResult(text=text, profile=profile.name, value=value)
