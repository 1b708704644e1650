"""
Numerizer — strict English number-phrase to integer conversion.

Architecture: Normalizer → Tokenizer → State-machine parser
Philosophy:  A phrase either follows the grammar or it is rejected. No guessing.
"""

from .exceptions import (
    EmptyInputError,
    GrammarError,
    MagnitudeError,
    NumberParseError,
    UnknownWordError,
)
from .models import CURRENCY, PLAIN, PROFILES, GrammarProfile, ParseResult
from .pipeline import convert, parse, parse_currency, try_convert

__version__ = "1.0.0"

__all__ = [
    "CURRENCY",
    "PLAIN",
    "PROFILES",
    "EmptyInputError",
    "GrammarError",
    "GrammarProfile",
    "MagnitudeError",
    "NumberParseError",
    "ParseResult",
    "UnknownWordError",
    "convert",
    "parse",
    "parse_currency",
    "try_convert",
]
