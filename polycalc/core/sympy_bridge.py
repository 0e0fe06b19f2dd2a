"""Conversion between recursive polynomials and SymPy expressions.

Variable level i of the recursive tree (x_i, outermost is 0) maps to the
SymPy symbol ``x{i}``.  Used for display/debugging and as an independent
reference implementation in the tests.  Coefficients are converted as plain
integers, so SymPy results only agree with the int64 arithmetic while no
coefficient overflows.
"""

from typing import List, Optional, Sequence

import sympy
from sympy import Expr, Poly as SymPoly, Symbol, ZZ, expand, symbols as sympy_symbols

from .arith import add
from .poly import Mono, Poly, from_coeff, from_monos, zero


def create_variables(n: int) -> List[Symbol]:
    """Create n SymPy symbols: x0, x1, ..., x_{n-1}."""
    if n == 0:
        return []
    return list(sympy_symbols(f"x0:{n}"))


def num_vars(p: Poly) -> int:
    """Nesting depth of p, i.e. the number of variables it can mention."""
    if p.is_coeff():
        return 0
    return 1 + max(num_vars(m.poly) for m in p.monos)


def _to_expr(p: Poly, syms: Sequence[Symbol], level: int) -> Expr:
    if p.is_coeff():
        return sympy.Integer(p.coeff)
    x = syms[level]
    terms = [x ** m.exp * _to_expr(m.poly, syms, level + 1) for m in p.monos]
    return sympy.Add(*terms)


def to_sympy(p: Poly, syms: Optional[Sequence[Symbol]] = None) -> Expr:
    """Return p as an expanded SymPy expression."""
    if syms is None:
        syms = create_variables(num_vars(p))
    elif len(syms) < num_vars(p):
        raise ValueError(f"Need {num_vars(p)} symbols, got {len(syms)}")
    return expand(_to_expr(p, syms, 0))


def from_sympy(expr: Expr, syms: Sequence[Symbol]) -> Poly:
    """Build a canonical polynomial from an integer-coefficient expression.

    syms fixes the variable order: syms[0] becomes the outermost variable.
    """
    expr = expand(expr)
    if not syms:
        return from_coeff(int(expr))

    result = zero()
    for monom, coeff in SymPoly(expr, *syms, domain=ZZ).terms():
        term = from_coeff(int(coeff))
        # Wrap from the innermost variable outwards.
        for exp in reversed(monom):
            term = from_monos([Mono(int(exp), term)])
        result = add(result, term)
    return result
