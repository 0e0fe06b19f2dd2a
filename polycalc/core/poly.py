"""Sparse multivariate polynomials with int64 coefficients, as recursive trees.

A polynomial in variables x0, x1, ... is either a coefficient (a constant) or
a sum of monomials in the outermost variable x0 whose coefficients are
themselves polynomials in x1, x2, ...:

  Poly  =  Coefficient(c)  |  Sum((exp_0, Poly_0), (exp_1, Poly_1), ...)

Example (2 variables x0, x1):
  x0^2 * x1 + 3  →  Sum((0, 3), (2, Sum((1, 1),)))
                 →  printed as (3,0)+((1,1),2)

Canonical form, guaranteed for every value built through this module:
  1. zero is always the coefficient 0, never an empty sum;
  2. a sum holding only an exponent-0 monomial with a coefficient inside is
     collapsed to that coefficient;
  3. monomial exponents inside one sum are strictly increasing;
  4. no monomial holds the zero polynomial.

from_monos is the only place this form is established; the arithmetic in
arith.py builds raw monomial lists and funnels them through it.

Coefficients are signed 64-bit integers and their arithmetic wraps modulo
2^64, the same as the native integer type of the calculator language.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple

import numpy as np

from ..config import COEFF_MIN

_MODULUS = 1 << 64


def wrap_coeff(value: int) -> int:
    """Reduce an arbitrary integer to the signed 64-bit range (two's complement)."""
    return (int(value) - COEFF_MIN) % _MODULUS + COEFF_MIN


def coeff_add(a: int, b: int) -> int:
    with np.errstate(over="ignore"):
        return int(np.int64(a) + np.int64(b))


def coeff_mul(a: int, b: int) -> int:
    with np.errstate(over="ignore"):
        return int(np.int64(a) * np.int64(b))


def coeff_neg(a: int) -> int:
    with np.errstate(over="ignore"):
        return int(-np.int64(a))


@dataclass(frozen=True)
class Mono:
    """One term poly · x^exp at a single variable level."""

    exp: int
    poly: "Poly"


@dataclass(frozen=True)
class Poly:
    """A polynomial: a coefficient when ``monos`` is empty, a sum otherwise.

    Attributes:
        coeff: Value of a coefficient polynomial; always 0 for a sum.
        monos: Monomials of a sum, sorted by strictly increasing exponent.

    Build instances with from_coeff / from_monos rather than the constructor,
    which does not canonicalize.
    """

    coeff: int = 0
    monos: Tuple[Mono, ...] = ()

    def is_coeff(self) -> bool:
        return not self.monos

    def is_zero(self) -> bool:
        return not self.monos and self.coeff == 0

    def __str__(self) -> str:
        from ..parse.printer import format_poly

        return format_poly(self)


def is_zero(p: Poly) -> bool:
    return p.is_zero()


def is_coeff(p: Poly) -> bool:
    return p.is_coeff()


def zero() -> Poly:
    """Return the zero polynomial (the coefficient 0)."""
    return Poly(0)


def from_coeff(value: int) -> Poly:
    """Return the constant polynomial ``value``, wrapped to int64."""
    return Poly(wrap_coeff(value))


def mono_from_poly(p: Poly, exp: int) -> Mono:
    """Return the monomial p · x^exp holding a deep copy of p."""
    if exp < 0:
        raise ValueError(f"Negative exponent {exp}")
    return Mono(exp, clone(p))


def clone(p: Poly) -> Poly:
    """Deep copy: the result shares no Mono or Poly node with p."""
    if p.is_coeff():
        return Poly(p.coeff)
    return Poly(monos=tuple(Mono(m.exp, clone(m.poly)) for m in p.monos))


def from_monos(monos: Iterable[Mono]) -> Poly:
    """Build a canonical polynomial from an arbitrary list of monomials.

    Sorts by exponent, sums sub-polynomials of equal exponent, drops
    monomials that end up zero and collapses a lone constant term to a
    coefficient.  The monomials are taken over by the result.
    """
    # arith depends on this module, so the merge step imports it lazily.
    from .arith import add

    merged: List[Mono] = []
    for mono in sorted(monos, key=lambda m: m.exp):
        if merged and merged[-1].exp == mono.exp:
            merged[-1] = Mono(mono.exp, add(merged[-1].poly, mono.poly))
        else:
            merged.append(mono)

    kept = [m for m in merged if not m.poly.is_zero()]
    if not kept:
        return zero()
    if len(kept) == 1 and kept[0].exp == 0 and kept[0].poly.is_coeff():
        return Poly(kept[0].poly.coeff)
    return Poly(monos=tuple(kept))
