"""
Custom exception hierarchy for number-phrase parsing.

Each exception type maps to one category of parse failure, so callers can
branch on the type (or on the machine-readable ``code``) instead of matching
message text.  The base class is a ``ValueError``: a phrase that is not a
number is a bad value, and ``except ValueError`` keeps working for callers
that don't care which rule was broken.
"""

from __future__ import annotations


class NumberParseError(ValueError):
    """Base exception for all number-phrase parse failures."""

    def __init__(
        self,
        code: str,
        message: str,
        token: str | None = None,
        after: str | None = None,
        details: dict | None = None,
    ):
        self.code = code
        self.token = token
        self.after = after
        self.details = details or {}
        super().__init__(message)


class EmptyInputError(NumberParseError):
    """The phrase holds no number words at all."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("EMPTY_INPUT", message, details=details)


class UnknownWordError(NumberParseError):
    """An unrecognised word sits where a number word or terminator was required."""

    def __init__(self, message: str, token: str, after: str | None = None):
        super().__init__("UNKNOWN_WORD", message, token=token, after=after)


class GrammarError(NumberParseError):
    """A known word appears in a position the grammar forbids."""

    def __init__(self, message: str, token: str, after: str | None = None):
        super().__init__("GRAMMAR_VIOLATION", message, token=token, after=after)


class MagnitudeError(NumberParseError):
    """The accumulated value no longer fits a signed 64-bit integer."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("MAGNITUDE_OVERFLOW", message, details=details)
