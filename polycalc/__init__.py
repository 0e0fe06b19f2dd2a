"""Stack calculator for sparse multivariate polynomials with integer coefficients."""

from .config import Config
from .errors import (
    CalcError, WrongPolyError, WrongCommandError, StackUnderflowError,
    DegByWrongVariableError, AtWrongValueError, ComposeWrongParameterError,
)
from .core import Poly, Mono, from_coeff, from_monos, zero
from .parse import parse_poly, format_poly, PolyParseError
from .calc import Calculator, PolyStack, Command, RunSummary

__version__ = "0.1.0"
