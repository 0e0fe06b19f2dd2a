"""Grammar of the numeric argument of DEG_BY, AT and COMPOSE.

A command with an argument must read ``<KEYWORD> <number>`` exactly: one
space, the digits (with an optional leading '-' for AT),
and nothing after them.  A keyword glued to anything but whitespace is not
that command at all and is reported as WRONG COMMAND.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Type

from ..errors import CalcError, WrongCommandError

UNSIGNED_RE = re.compile(r"[0-9]+")
SIGNED_RE = re.compile(r"-?[0-9]+")

# ASCII whitespace only; str.isspace() would also accept unicode spaces.
_WHITESPACE = frozenset(" \t\n\v\f\r")

# No accepted bound has more digits than 2^64 - 1.
_MAX_DIGITS = 20


def int_in_range(token: str, low: int, high: int) -> Optional[int]:
    """Convert a decimal token, or return None if it falls outside [low, high].

    Overlong tokens are rejected before int() sees them.
    """
    if len(token.lstrip("-").lstrip("0")) > _MAX_DIGITS:
        return None
    value = int(token)
    if not low <= value <= high:
        return None
    return value


@dataclass(frozen=True)
class ArgumentGrammar:
    """How to read and bound-check one command's argument."""

    keyword: str
    pattern: re.Pattern
    low: int
    high: int
    error: Type[CalcError]   # raised for any malformed or out-of-range argument


def parse_command_argument(line: str, grammar: ArgumentGrammar) -> int:
    """Return the integer argument of ``line``, which starts with grammar.keyword.

    Raises:
        WrongCommandError: the keyword is followed by a non-whitespace character.
        grammar.error:        the argument is missing, malformed or out of range.
    """
    rest = line[len(grammar.keyword):]
    if not rest:
        raise grammar.error()
    if rest[0] not in _WHITESPACE:
        raise WrongCommandError()
    if rest[0] != " ":
        raise grammar.error()

    token = rest[1:]
    if grammar.pattern.fullmatch(token) is None:
        raise grammar.error()
    value = int_in_range(token, grammar.low, grammar.high)
    if value is None:
        raise grammar.error()
    return value
