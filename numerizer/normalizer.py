"""Input cleanup: case, commas and hyphens are cosmetic in number phrases."""

from __future__ import annotations


def normalize(text: str) -> list[str]:
    """Split a phrase into lowercase raw words.

    "Four thousand, four hundred thirty-two" → ["four", "thousand", "four",
    "hundred", "thirty", "two"]
    """
    cleaned = text.lower().replace(",", "").replace("-", " ")
    return cleaned.split()
