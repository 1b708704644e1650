"""Turn a raw phrase into the typed token stream the parser walks."""

from __future__ import annotations

from .lexicon import lookup
from .models import Token
from .normalizer import normalize


def tokenize(text: str, currency: bool = False) -> list[Token]:
    """Normalize ``text`` and classify every word.

    Args:
        text: e.g. "Forty-Five Dollars"
        currency: recognise dollar/cent markers (otherwise they are unknown words)

    Returns:
        One Token per word, in input order.  Never raises.
    """
    return [lookup(word, currency=currency) for word in normalize(text)]
