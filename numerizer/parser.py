"""
Finite-state parser for English number phrases.

THIS IS THE CORE OF THE PACKAGE.

The parser walks the token stream exactly once.  Each state names the kind
of token sitting under the cursor; its transition consumes that token,
updates the accumulators, peeks at the successor and returns the next state.
Any successor the grammar does not allow sends the machine to ERROR, and the
first error wins: there is no recovery and no partial result.

Accumulators:
    prev    the current group, not yet multiplied by a pending scale word
    total   completed groups, already multiplied by their scale
    dollars frozen whole-dollar amount once a dollar marker is consumed
    cents   frozen sub-unit amount once a cent marker is consumed

Examples (currency profile):
    "two hundred four dollars and eighteen cents"  → 20418
    "seventeen hundred dollars"                    → 170000
    "zero dollars and thirty four cents"           → 34
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Sequence

from .exceptions import (
    EmptyInputError,
    GrammarError,
    MagnitudeError,
    NumberParseError,
    UnknownWordError,
)
from .models import END_TOKEN, GrammarProfile, Token, TokenKind

INT64_MAX = 2**63 - 1

CENTS_PER_DOLLAR = 100


# ─── States ──────────────────────────────────────────────────────────


class State(Enum):
    START = "START"
    AFTER_ZERO = "AFTER_ZERO"
    AFTER_UNIT = "AFTER_UNIT"
    AFTER_TEEN = "AFTER_TEEN"
    AFTER_TENS = "AFTER_TENS"
    AFTER_HUNDRED = "AFTER_HUNDRED"
    AFTER_SCALE = "AFTER_SCALE"
    AFTER_AND = "AFTER_AND"
    AFTER_DOLLARS = "AFTER_DOLLARS"
    AFTER_CENTS = "AFTER_CENTS"
    AFTER_UNKNOWN = "AFTER_UNKNOWN"
    ACCEPT = "ACCEPT"
    ERROR = "ERROR"


_TERMINAL: frozenset[State] = frozenset({State.ACCEPT, State.ERROR})

# Tokens that may start a group, and the state that consumes them
_QUANTITY_STATES: dict[TokenKind, State] = {
    TokenKind.UNIT: State.AFTER_UNIT,
    TokenKind.TEEN: State.AFTER_TEEN,
    TokenKind.TENS: State.AFTER_TENS,
}

_OPENING_STATES: dict[TokenKind, State] = {
    TokenKind.ZERO: State.AFTER_ZERO,
    **_QUANTITY_STATES,
}


# ─── Parser ──────────────────────────────────────────────────────────


class NumberParser:
    """One-shot state machine over a token sequence.

    Usage:
        value = NumberParser(tokens, CURRENCY).run()

    An instance holds the state of a single parse and is not reusable.
    """

    def __init__(self, tokens: Sequence[Token], profile: GrammarProfile):
        self.tokens = tokens
        self.profile = profile
        self.pos = 0
        self.prev = 0
        self.total = 0
        self.dollars = 0
        self.cents = 0
        self.dollars_done = False
        self.cents_done = False
        self.last_scale = 0  # Scales must strictly descend within one amount
        self.seen_number = False
        self.error: NumberParseError | None = None

        self._transitions: dict[State, Callable[[], State]] = {
            State.START: self._start,
            State.AFTER_ZERO: self._zero,
            State.AFTER_UNIT: self._unit,
            State.AFTER_TEEN: self._teen,
            State.AFTER_TENS: self._tens,
            State.AFTER_HUNDRED: self._hundred,
            State.AFTER_SCALE: self._scale,
            State.AFTER_AND: self._and,
            State.AFTER_DOLLARS: self._dollars,
            State.AFTER_CENTS: self._cents,
            State.AFTER_UNKNOWN: self._unknown,
        }

    def run(self) -> int:
        """Drive the machine to a terminal state.

        Returns:
            The plain integer, or the amount in cents for currency profiles.

        Raises:
            NumberParseError: on the first invalid transition.
        """
        state = State.START
        while state not in _TERMINAL:
            state = self._transitions[state]()

        if state is State.ERROR:
            assert self.error is not None
            raise self.error
        return self._finish()

    # ─── Cursor ──────────────────────────────────────────────────────

    def _peek(self) -> Token:
        if self.pos >= len(self.tokens):
            return END_TOKEN
        return self.tokens[self.pos]

    def _next(self) -> Token:
        token = self._peek()
        self.pos += 1
        return token

    # ─── Shared Edges ────────────────────────────────────────────────

    def _close(self, nxt: Token, after: Token) -> State:
        """Route the successor of a completed quantity (unit, teen, tens, hundreds)."""
        if nxt.kind is TokenKind.SCALE:
            return State.AFTER_SCALE
        if nxt.kind is TokenKind.END:
            return State.ACCEPT
        if nxt.kind is TokenKind.UNKNOWN and self.profile.skip_unknown_words:
            return State.AFTER_UNKNOWN
        return self._marker(nxt, after)

    def _marker(self, nxt: Token, after: Token) -> State:
        if nxt.kind is TokenKind.DOLLARS and not self.dollars_done:
            return State.AFTER_DOLLARS
        if nxt.kind is TokenKind.CENTS:
            return State.AFTER_CENTS
        return self._fail(nxt, after)

    def _open_hundreds(self, multiplier: int) -> State:
        # "three hundred five hundred": the pending group folds into the total
        self._flush()
        self.prev = multiplier
        return State.AFTER_HUNDRED

    def _flush(self) -> None:
        self.total += self.prev
        self.prev = 0

    # ─── Transitions ─────────────────────────────────────────────────

    def _start(self) -> State:
        token = self._peek()
        if token.kind in _OPENING_STATES:
            return _OPENING_STATES[token.kind]
        if token.kind is TokenKind.UNKNOWN and self.profile.skip_unknown_words:
            return State.AFTER_UNKNOWN
        return self._fail(token, None)

    def _zero(self) -> State:
        token = self._next()
        self.seen_number = True
        nxt = self._peek()
        if nxt.kind is TokenKind.END:
            return State.ACCEPT
        return self._marker(nxt, token)

    def _unit(self) -> State:
        token = self._next()
        self.seen_number = True
        nxt = self._peek()
        if nxt.kind is TokenKind.HUNDRED:
            return self._open_hundreds(token.value)
        self.prev += token.value
        return self._close(nxt, token)

    def _teen(self) -> State:
        token = self._next()
        self.seen_number = True
        nxt = self._peek()
        if nxt.kind is TokenKind.HUNDRED and self.profile.teen_hundreds:
            return self._open_hundreds(token.value)
        self.prev += token.value
        return self._close(nxt, token)

    def _tens(self) -> State:
        token = self._next()
        self.seen_number = True
        nxt = self._peek()
        if nxt.kind is TokenKind.UNIT:
            unit = self._next()
            value = token.value + unit.value
            ahead = self._peek()
            # "forty five hundred" → 4500
            if ahead.kind is TokenKind.HUNDRED:
                return self._open_hundreds(value)
            self.prev += value
            return self._close(ahead, unit)
        self.prev += token.value
        return self._close(nxt, token)

    def _hundred(self) -> State:
        token = self._next()
        self.prev *= token.value
        nxt = self._peek()
        if nxt.kind in _QUANTITY_STATES:
            return _QUANTITY_STATES[nxt.kind]
        if nxt.kind is TokenKind.AND:
            return State.AFTER_AND
        if nxt.kind is TokenKind.CENTS:
            return self._fail(nxt, token)
        return self._close(nxt, token)

    def _scale(self) -> State:
        after = self.tokens[self.pos - 1]
        token = self._next()
        if not self.prev or (self.last_scale and token.value >= self.last_scale):
            return self._fail(token, after)

        self.total = self._checked(self.total + self.prev * token.value)
        self.prev = 0
        self.last_scale = token.value

        nxt = self._peek()
        if nxt.kind in _QUANTITY_STATES:
            return _QUANTITY_STATES[nxt.kind]
        if nxt.kind is TokenKind.AND:
            return State.AFTER_AND
        if nxt.kind is TokenKind.END:
            return State.ACCEPT
        if nxt.kind is TokenKind.DOLLARS and not self.dollars_done:
            return State.AFTER_DOLLARS
        if nxt.kind is TokenKind.UNKNOWN and self.profile.skip_unknown_words:
            return State.AFTER_UNKNOWN
        return self._fail(nxt, token)

    def _and(self) -> State:
        token = self._next()
        nxt = self._peek()
        if nxt.kind in _QUANTITY_STATES:
            return _QUANTITY_STATES[nxt.kind]
        return self._fail(nxt, token)

    def _dollars(self) -> State:
        token = self._next()
        self._flush()
        self.dollars = self.total
        self.dollars_done = True
        self.total = 0
        self.last_scale = 0

        nxt = self._peek()
        if nxt.kind is TokenKind.AND:
            token = self._next()
            nxt = self._peek()
            if nxt.kind not in _OPENING_STATES:
                return self._fail(nxt, token)
        if nxt.kind is TokenKind.END:
            return State.ACCEPT
        if nxt.kind in _OPENING_STATES:
            return _OPENING_STATES[nxt.kind]
        if nxt.kind is TokenKind.UNKNOWN and self.profile.skip_unknown_words:
            return State.AFTER_UNKNOWN
        return self._fail(nxt, token)

    def _cents(self) -> State:
        token = self._next()
        self._flush()
        self.cents = self.total
        self.cents_done = True
        self.total = 0

        nxt = self._peek()
        if nxt.kind is TokenKind.END:
            return State.ACCEPT
        return self._fail(nxt, token)

    def _unknown(self) -> State:
        token = self._next()
        nxt = self._peek()
        if nxt.kind is TokenKind.UNKNOWN:
            return State.AFTER_UNKNOWN
        if nxt.kind is TokenKind.END:
            return State.ACCEPT
        # Noise may precede a group, but cannot split one
        pending = self.prev or self.total
        if nxt.kind in _OPENING_STATES and not pending:
            return _OPENING_STATES[nxt.kind]
        return self._marker(nxt, token)

    # ─── Results & Errors ────────────────────────────────────────────

    def _finish(self) -> int:
        if not self.seen_number:
            raise EmptyInputError("No number words found in input")

        self._flush()
        if not self.profile.currency:
            return self._checked(self.total)

        # A trailing group after the dollar marker is read as cents
        if self.dollars_done and not self.cents_done:
            self.cents = self.total
        elif not self.dollars_done:
            self.dollars = self.total
        return self._checked(self.dollars * CENTS_PER_DOLLAR + self.cents)

    @staticmethod
    def _checked(value: int) -> int:
        if value > INT64_MAX:
            raise MagnitudeError(
                f"Value {value} exceeds the signed 64-bit range",
                details={"value": str(value)},
            )
        return value

    def _fail(self, token: Token, after: Token | None) -> State:
        if token.kind is TokenKind.END:
            if after is None:
                self.error = EmptyInputError("Empty text cannot be converted to a number")
            else:
                self.error = GrammarError(
                    f"unexpected end of input after {after.text!r}",
                    token="",
                    after=after.text,
                )
            return State.ERROR

        if after is None:
            message = f"unexpected start {token.text!r}"
        else:
            message = f"unexpected {token.text!r} after {after.text!r}"

        after_text = after.text if after is not None else None
        if token.kind is TokenKind.UNKNOWN:
            self.error = UnknownWordError(message, token=token.text, after=after_text)
        else:
            self.error = GrammarError(message, token=token.text, after=after_text)
        return State.ERROR


def parse_tokens(tokens: Sequence[Token], profile: GrammarProfile) -> int:
    """Run a fresh parser over ``tokens``."""
    return NumberParser(tokens, profile).run()
