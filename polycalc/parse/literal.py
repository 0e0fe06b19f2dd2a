"""Textual polynomial literals: validation and recursive-descent parsing.

Grammar:

  Polynomial   := Coefficient | MonomialList
  MonomialList := "(" Monomial ")" ( "+" "(" Monomial ")" )*
  Monomial     := Polynomial "," Exponent
  Coefficient  := ["-"] Digit+      (signed 64-bit)
  Exponent     := Digit+            (0 .. 2^31-1)

Example:
  ((1,2)+(-3,0),1)+(4,0)  →  4 + x0 * (x1^2 - 3)

Parsing runs in two passes.  is_structurally_sound screens the raw line once,
one pair of adjacent characters at a time, for balanced parentheses and
allowed transitions.  The builder only runs on lines that pass, so it can
assume sane nesting; it still checks every rule and raises PolyParseError on
the first violation.
"""

from __future__ import annotations

import re
from typing import List, Tuple

from ..config import COEFF_MAX, COEFF_MIN, EXP_MAX
from ..core.poly import Mono, Poly, from_coeff, from_monos
from .arguments import int_in_range

_DIGITS = frozenset("0123456789")
_COEFF_RE = re.compile(r"-?[0-9]+")
_EXP_RE = re.compile(r"[0-9]+")

# Characters allowed right after each punctuation character ("" is end of line).
_AFTER_OPEN = _DIGITS | {"-", "("}
_AFTER_CLOSE = frozenset({"+", "\n", "", ")", ","})
_AFTER_COMMA = _DIGITS | {"-", "+"}


class PolyParseError(ValueError):
    """Raised when a line is not a valid polynomial literal."""

    def __init__(self, message: str, pos: int):
        super().__init__(f"{message} at position {pos}")
        self.pos = pos


def is_structurally_sound(text: str) -> bool:
    """Check parenthesis balance and character adjacency of a literal line.

    Rejects unbalanced parentheses, ")(", more commas than parentheses opened
    so far, and any character followed by something it may not precede.
    """
    opened = closed = commas = 0
    for i, c in enumerate(text):
        nxt = text[i + 1] if i + 1 < len(text) else ""
        if c in _DIGITS or c == "\n":
            ok = True
        elif c == "+":
            ok = nxt == "("
        elif c == "-":
            ok = nxt in _DIGITS
        elif c == "(":
            ok = nxt in _AFTER_OPEN
            opened += 1
        elif c == ")":
            if nxt == "(":
                return False
            ok = nxt in _AFTER_CLOSE
            closed += 1
        elif c == ",":
            ok = nxt in _AFTER_COMMA
            commas += 1
            if commas > opened:
                return False
        else:
            ok = False

        if not ok or closed > opened:
            return False
    return opened == closed


class _Builder:
    """Recursive-descent builder over one validated line.

    Every step returns (value, position of the first unconsumed character).
    """

    def __init__(self, text: str, coeff_min: int, coeff_max: int, exp_max: int):
        self.text = text
        self.coeff_min = coeff_min
        self.coeff_max = coeff_max
        self.exp_max = exp_max

    def at_end(self, pos: int) -> bool:
        return pos >= len(self.text)

    def poly(self, pos: int) -> Tuple[Poly, int]:
        if not self.at_end(pos) and self.text[pos] != "(":
            return self.coeff(pos)
        return self.monos(pos)

    def coeff(self, pos: int) -> Tuple[Poly, int]:
        match = _COEFF_RE.match(self.text, pos)
        if match is None:
            raise PolyParseError("expected a coefficient", pos)
        end = match.end()
        if not self.at_end(end) and self.text[end] != ",":
            raise PolyParseError("unexpected character after coefficient", end)
        value = int_in_range(match.group(), self.coeff_min, self.coeff_max)
        if value is None:
            raise PolyParseError("coefficient out of range", pos)
        return from_coeff(value), end

    def exp(self, pos: int) -> Tuple[int, int]:
        match = _EXP_RE.match(self.text, pos)
        if match is None:
            raise PolyParseError("expected an exponent", pos)
        end = match.end()
        if not self.at_end(end) and self.text[end] != ")":
            raise PolyParseError("unexpected character after exponent", end)
        value = int_in_range(match.group(), 0, self.exp_max)
        if value is None:
            raise PolyParseError("exponent out of range", pos)
        return value, end

    def monos(self, pos: int) -> Tuple[Poly, int]:
        collected: List[Mono] = []
        while True:
            if not self.text.startswith("(", pos):
                raise PolyParseError("expected '('", pos)
            sub, pos = self.poly(pos + 1)
            if not self.text.startswith(",", pos):
                raise PolyParseError("expected ','", pos)
            exp, pos = self.exp(pos + 1)
            if not self.text.startswith(")", pos):
                raise PolyParseError("expected ')'", pos)
            pos += 1
            collected.append(Mono(exp, sub))

            if self.text.startswith("+", pos):
                pos += 1
            elif self.at_end(pos) or self.text[pos] == ",":
                break
            else:
                raise PolyParseError("expected '+', ',' or end of line", pos)
        return from_monos(collected), pos


def parse_poly(
    text: str,
    coeff_min: int = COEFF_MIN,
    coeff_max: int = COEFF_MAX,
    exp_max: int = EXP_MAX,
) -> Poly:
    """Parse one literal line (a trailing newline is allowed) into a Poly.

    Raises:
        PolyParseError: if the line is not a valid literal.
    """
    if text.endswith("\n"):
        text = text[:-1]
    if not is_structurally_sound(text):
        raise PolyParseError("malformed polynomial", 0)
    poly, end = _Builder(text, coeff_min, coeff_max, exp_max).poly(0)
    if end != len(text):
        raise PolyParseError("trailing characters", end)
    return poly
