"""
Static vocabulary of English cardinal-number words.

Every recognised word maps to a (kind, value) pair.  Common misspellings are
listed as plain aliases of the canonical entry: there is no fuzzy matching,
a word is either in the table or it is unknown.

The tables are built once at import time and exposed read-only, so any
number of concurrent parses can share them.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping

from .models import Token, TokenKind

# ─── Word Lookup Tables ──────────────────────────────────────────────

_UNITS: dict[str, int] = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}

_TEENS: dict[str, int] = {
    "ten": 10,
    "eleven": 11,
    "twelve": 12,
    "thirteen": 13,
    "fourteen": 14,
    "fifteen": 15,
    "sixteen": 16,
    "seventeen": 17,
    "eighteen": 18,
    "nineteen": 19,
}

_TENS: dict[str, int] = {
    "twenty": 20,
    "thirty": 30,
    "forty": 40,
    "fifty": 50,
    "sixty": 60,
    "seventy": 70,
    "eighty": 80,
    "ninety": 90,
}

_SCALES: dict[str, int] = {
    "thousand": 1_000,
    "million": 1_000_000,
    "billion": 1_000_000_000,
    "trillion": 1_000_000_000_000,
}

# Misspelling → canonical word
_ALIASES: dict[str, str] = {
    "fourty": "forty",
    "ninty": "ninety",
    "ninteen": "nineteen",
    "fourten": "fourteen",
    "eightteen": "eighteen",
}

HUNDRED = 100

# Dollar/cent markers tolerate one trailing punctuation mark ("dollars.", "cents;")
_DOLLARS_RE = re.compile(r"^dollars?[^\w\s]?$")
_CENTS_RE = re.compile(r"^cents?[^\w\s]?$")


def _build_lexicon() -> dict[str, tuple[TokenKind, int]]:
    table: dict[str, tuple[TokenKind, int]] = {
        "zero": (TokenKind.ZERO, 0),
        "hundred": (TokenKind.HUNDRED, HUNDRED),
        "and": (TokenKind.AND, 0),
    }
    for kind, words in (
        (TokenKind.UNIT, _UNITS),
        (TokenKind.TEEN, _TEENS),
        (TokenKind.TENS, _TENS),
        (TokenKind.SCALE, _SCALES),
    ):
        for word, value in words.items():
            table[word] = (kind, value)
    for alias, canonical in _ALIASES.items():
        table[alias] = table[canonical]
    return table


LEXICON: Mapping[str, tuple[TokenKind, int]] = MappingProxyType(_build_lexicon())


# ─── Lookup ──────────────────────────────────────────────────────────


def lookup(word: str, currency: bool = False) -> Token:
    """Classify one normalized word.

    Never raises: a word outside the vocabulary becomes an UNKNOWN token and
    the parser decides whether its position makes it an error.
    """
    if currency:
        if _DOLLARS_RE.match(word):
            return Token(kind=TokenKind.DOLLARS, text=word)
        if _CENTS_RE.match(word):
            return Token(kind=TokenKind.CENTS, text=word)

    entry = LEXICON.get(word)
    if entry is None:
        return Token(kind=TokenKind.UNKNOWN, text=word)
    kind, value = entry
    return Token(kind=kind, text=word, value=value)
