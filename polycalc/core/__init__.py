from .poly import (
    Poly, Mono, is_zero, is_coeff, zero, from_coeff, from_monos, mono_from_poly, clone,
    wrap_coeff, coeff_add, coeff_mul, coeff_neg,
)
from .arith import add, sub, neg, mul, power, at, compose, deg, deg_by, is_eq
from .samplers import RandomPolySampler, random_term
from .sympy_bridge import create_variables, num_vars, to_sympy, from_sympy
