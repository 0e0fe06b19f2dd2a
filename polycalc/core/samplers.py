"""Seeded random polynomial generation.

RandomPolySampler builds a polynomial as a sum of random terms
c · x0^e0 · x1^e1 · ..., each term nested one variable level at a time and
accumulated with add, so every sample is canonical.  Used to drive the
property tests of the arithmetic.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Tuple

from .arith import add
from .poly import Mono, Poly, from_coeff, from_monos, zero


def random_term(
    rng: random.Random,
    n_vars: int,
    max_degree: int,
    coeff_range: Tuple[int, int],
) -> Poly:
    """Return one random term with an exponent in [0, max_degree] per variable."""
    term = from_coeff(rng.randint(coeff_range[0], coeff_range[1]))
    for _ in range(n_vars):
        term = from_monos([Mono(rng.randint(0, max_degree), term)])
    return term


@dataclass
class RandomPolySampler:
    """Generates random polynomials with bounded degree and coefficients."""

    n_vars: int = 2
    max_degree: int = 3
    max_terms: int = 4
    coeff_range: Tuple[int, int] = (-5, 5)

    def sample(self, rng: random.Random) -> Poly:
        result = zero()
        for _ in range(rng.randint(0, self.max_terms)):
            term = random_term(rng, self.n_vars, self.max_degree, self.coeff_range)
            result = add(result, term)
        return result
