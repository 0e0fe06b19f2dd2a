"""Text form of a polynomial, the inverse of parse_poly.

A coefficient prints as a bare integer; a sum prints each monomial as
``(<sub-polynomial>,<exponent>)`` joined by ``+`` in ascending exponent order.
"""

from ..core.poly import Poly


def format_poly(p: Poly) -> str:
    if p.is_coeff():
        return str(p.coeff)
    return "+".join(f"({format_poly(m.poly)},{m.exp})" for m in p.monos)
