"""Arithmetic on canonical recursive polynomials.

Every function treats its operands as read-only and returns a freshly built
canonical polynomial; results never share nodes with the operands.

  add / sub / neg / mul   : ring operations
  power                   : exponentiation by squaring
  at                      : substitute an integer for the outermost variable
  compose                 : substitute polynomials for the outer variables
  deg / deg_by            : total degree and degree in one variable
  is_eq                   : structural equality of canonical forms

The degree of the zero polynomial is -1 by convention.
"""

from __future__ import annotations

from typing import List, Sequence

from .poly import (
    Mono, Poly, clone, coeff_add, coeff_mul, coeff_neg, from_coeff, from_monos, zero,
)


def _clone_mono(m: Mono) -> Mono:
    return Mono(m.exp, clone(m.poly))


def _add_coeff(p: Poly, scalar: int) -> Poly:
    """Add a nonzero scalar to a sum, through its exponent-0 monomial."""
    rest = [_clone_mono(m) for m in p.monos[1:]]
    first = p.monos[0]
    if first.exp == 0:
        inner = add(first.poly, Poly(scalar))
        head = [] if inner.is_zero() else [Mono(0, inner)]
        return from_monos(head + rest)
    return from_monos([Mono(0, Poly(scalar)), _clone_mono(first)] + rest)


def add(p: Poly, q: Poly) -> Poly:
    """Return the polynomial p + q."""
    if p.is_zero():
        return clone(q)
    if q.is_zero():
        return clone(p)
    if p.is_coeff() and q.is_coeff():
        return Poly(coeff_add(p.coeff, q.coeff))
    if p.is_coeff():
        return _add_coeff(q, p.coeff)
    if q.is_coeff():
        return _add_coeff(p, q.coeff)

    # Both are sums: merge the two exponent-sorted monomial lists.
    out: List[Mono] = []
    i = j = 0
    while i < len(p.monos) and j < len(q.monos):
        mp, mq = p.monos[i], q.monos[j]
        if mp.exp < mq.exp:
            out.append(_clone_mono(mp))
            i += 1
        elif mp.exp > mq.exp:
            out.append(_clone_mono(mq))
            j += 1
        else:
            total = add(mp.poly, mq.poly)
            if not total.is_zero():
                out.append(Mono(mp.exp, total))
            i += 1
            j += 1
    out.extend(_clone_mono(m) for m in p.monos[i:])
    out.extend(_clone_mono(m) for m in q.monos[j:])
    return from_monos(out)


def neg(p: Poly) -> Poly:
    """Return the polynomial -p."""
    if p.is_coeff():
        return Poly(coeff_neg(p.coeff))
    return Poly(monos=tuple(Mono(m.exp, neg(m.poly)) for m in p.monos))


def sub(p: Poly, q: Poly) -> Poly:
    """Return the polynomial p - q."""
    return add(p, neg(q))


def _mul_scalar(p: Poly, scalar: int) -> Poly:
    if scalar == 0 or p.is_zero():
        return zero()
    if p.is_coeff():
        return Poly(coeff_mul(p.coeff, scalar))
    return from_monos(Mono(m.exp, _mul_scalar(m.poly, scalar)) for m in p.monos)


def mul(p: Poly, q: Poly) -> Poly:
    """Return the polynomial p * q.

    Exponents add without a bound, so a product may hold an exponent above
    2^31 - 1; its printed form is then no longer a valid literal.
    """
    if p.is_zero() or q.is_zero():
        return zero()
    if p.is_coeff() and q.is_coeff():
        return Poly(coeff_mul(p.coeff, q.coeff))
    if p.is_coeff():
        return _mul_scalar(q, p.coeff)
    if q.is_coeff():
        return _mul_scalar(p, q.coeff)

    product = [
        Mono(mp.exp + mq.exp, mul(mp.poly, mq.poly))
        for mp in p.monos
        for mq in q.monos
    ]
    return from_monos(product)


def power(p: Poly, n: int) -> Poly:
    """Return p^n using exponentiation by squaring."""
    if n < 0:
        raise ValueError(f"Negative power {n}")
    if n == 0:
        return from_coeff(1)
    if n == 1:
        return clone(p)
    half = power(p, n // 2)
    square = mul(half, half)
    if n % 2 == 0:
        return square
    return mul(p, square)


def at(p: Poly, x: int) -> Poly:
    """Substitute the integer x for the outermost variable of p.

    Inner variables stay symbolic, so the result is a polynomial in one
    variable fewer (renumbered from 0).  A coefficient is returned as is.
    """
    if p.is_coeff():
        return clone(p)
    point = from_coeff(x)
    result = zero()
    for m in p.monos:
        result = add(result, mul(m.poly, power(point, m.exp)))
    return result


def _compose(p: Poly, qs: Sequence[Poly], offset: int) -> Poly:
    if p.is_coeff():
        return clone(p)
    if offset < len(qs):
        x = qs[offset]
    else:
        x = zero()
    result = zero()
    for m in p.monos:
        result = add(result, mul(power(x, m.exp), _compose(m.poly, qs, offset + 1)))
    return result


def compose(p: Poly, qs: Sequence[Poly]) -> Poly:
    """Substitute qs[i] for variable x_i of p.

    Variables beyond len(qs) are replaced by the zero polynomial.
    """
    return _compose(p, qs, 0)


def deg_by(p: Poly, var_idx: int) -> int:
    """Degree of p with respect to variable x_{var_idx} (-1 for zero)."""
    if var_idx < 0:
        raise ValueError(f"Invalid variable index {var_idx}")
    if p.is_zero():
        return -1
    if p.is_coeff():
        return 0
    if var_idx == 0:
        # Exponents are sorted, so the last monomial carries the maximum.
        return p.monos[-1].exp
    return max(deg_by(m.poly, var_idx - 1) for m in p.monos)


def deg(p: Poly) -> int:
    """Total degree of p (-1 for zero)."""
    if p.is_zero():
        return -1
    if p.is_coeff():
        return 0
    return max(m.exp + deg(m.poly) for m in p.monos)


def is_eq(p: Poly, q: Poly) -> bool:
    """Return True iff p and q have the same canonical structure.

    For canonical inputs this is equality of polynomials: a true constant is
    never stored as a sum, so a coefficient and a sum always differ.
    """
    if p.is_coeff() and q.is_coeff():
        return p.coeff == q.coeff
    if p.is_coeff() or q.is_coeff():
        return False
    if len(p.monos) != len(q.monos):
        return False
    for mp, mq in zip(p.monos, q.monos):
        if mp.exp != mq.exp or not is_eq(mp.poly, mq.poly):
            return False
    return True
