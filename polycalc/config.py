"""Central configuration dataclass for the polynomial calculator.

Numeric limits follow the native integer types of the calculator language:
coefficients are signed 64-bit, exponents fit a signed 32-bit int, and the
DEG_BY / COMPOSE arguments are unsigned 64-bit.  They are read from numpy's
integer info so that the bounds are stated once, by type.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

_INT64 = np.iinfo(np.int64)
_INT32 = np.iinfo(np.int32)
_UINT64 = np.iinfo(np.uint64)

COEFF_MIN: int = int(_INT64.min)
COEFF_MAX: int = int(_INT64.max)
EXP_MAX: int = int(_INT32.max)
UINT64_MAX: int = int(_UINT64.max)


@dataclass(frozen=True)
class Config:
    """Frozen settings for one calculator run.

    Groups:
        Limits:       coeff_min/max, exp_max, deg_by_max, at_min/max, compose_max
        Interpreter:  comment_prefix
        Process:      oom_exit_code, recursion_limit, log_level
    """
    # --- Limits ---
    coeff_min: int = COEFF_MIN
    coeff_max: int = COEFF_MAX
    exp_max: int = EXP_MAX
    deg_by_max: int = UINT64_MAX
    at_min: int = COEFF_MIN
    at_max: int = COEFF_MAX
    compose_max: int = UINT64_MAX

    # --- Interpreter ---
    comment_prefix: str = "#"

    # --- Process ---
    oom_exit_code: int = 1
    recursion_limit: Optional[int] = None   # None keeps the interpreter default
    log_level: str = "WARNING"
