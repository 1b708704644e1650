#!/usr/bin/env python3
"""
Numerizer — Entry Point
=======================

Converts number phrases given on the command line, or runs a short demo.

Usage:
    python main.py "forty five"                            # → 45
    python main.py --currency "ten dollars and two cents"  # → $10.02
    python main.py                                         # Demo phrases
    NUMERIZER_LOG_LEVEL=debug python main.py "six hundred" # Token trace
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from numerizer.models import CURRENCY, PLAIN, GrammarProfile, ParseResult
from numerizer.pipeline import try_convert

# ─── Load .env if available (optional dependency) ────────────────────
try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass


# ─── Demo Phrases (a few of them wrong on purpose) ──────────────────

DEMO_PHRASES: list[tuple[str, GrammarProfile]] = [
    ("forty-five", PLAIN),
    ("four thousand, four hundred thirty-two", PLAIN),
    ("three thousand and four hundred", PLAIN),
    ("nine hundred ninety nine billion", PLAIN),
    ("twelve seventeen", PLAIN),
    ("six thousand hundred", PLAIN),
    ("two hundred four dollars and eighteen cents", CURRENCY),
    ("seventeen hundred dollars", CURRENCY),
    ("zero dollars and thirty four cents", CURRENCY),
]


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_GREEN = "\033[92m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"


# ─── Pretty Printer ─────────────────────────────────────────────────


def format_value(result: ParseResult) -> str:
    """Render a successful result: plain integers with separators, money as $d.cc."""
    assert result.value is not None
    if result.profile == CURRENCY.name:
        dollars, cents = divmod(result.value, 100)
        return f"${dollars:,}.{cents:02d}"
    return f"{result.value:,}"


def print_result(result: ParseResult) -> None:
    print(f"  {_DIM}[{result.profile}]{_RESET} {result.text!r}")
    if result.error is None:
        print(f"    {_GREEN}{_BOLD}{format_value(result)}{_RESET}")
    else:
        print(f"    {_RED}[{result.error.code}]{_RESET} {result.error.message}")


# ─── Main ────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Convert each phrase and print the outcome.

    Returns:
        0 if every phrase parsed, 1 otherwise.
    """
    parser = argparse.ArgumentParser(description="Convert English number phrases to integers.")
    parser.add_argument("phrases", nargs="*", help="phrases to convert (demo list when omitted)")
    parser.add_argument("--currency", action="store_true", help="read phrases as dollar amounts")
    parser.add_argument("-v", "--verbose", action="store_true", help="log the token stream")
    args = parser.parse_args(argv)

    level = "DEBUG" if args.verbose else os.getenv("NUMERIZER_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if args.phrases:
        profile = CURRENCY if args.currency else PLAIN
        jobs = [(phrase, profile) for phrase in args.phrases]
    else:
        jobs = DEMO_PHRASES

    results = [try_convert(text, profile) for text, profile in jobs]
    for result in results:
        print_result(result)

    return 0 if all(r.error is None for r in results) else 1


if __name__ == "__main__":
    sys.exit(main())
