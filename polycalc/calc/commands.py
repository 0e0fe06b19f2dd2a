"""Command keywords of the calculator language.

The language has a closed set of commands.  Twelve are bare keywords that
must make up the whole line; DEG_BY, AT and COMPOSE take one integer
argument (see parse/arguments.py).  Stack effects:

  ZERO       push 0
  IS_COEFF   print 1/0: is the top a coefficient
  IS_ZERO    print 1/0: is the top zero
  CLONE      push a copy of the top
  ADD        pop p, pop q, push p + q
  MUL        pop p, pop q, push p * q
  NEG        replace the top p with -p
  SUB        pop p, pop q, push p - q
  IS_EQ      print 1/0: are the two top polynomials equal (nothing popped)
  DEG        print the total degree of the top
  DEG_BY i   print the degree of the top in variable x_i
  PRINT      print the top
  POP        discard the top
  AT x       replace the top p with p evaluated at x0 = x
  COMPOSE k  pop p, then q[k-1], ..., q[0]; push p(q[0], ..., q[k-1])
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional

from ..config import Config
from ..errors import AtWrongValueError, ComposeWrongParameterError, DegByWrongVariableError
from ..parse.arguments import SIGNED_RE, UNSIGNED_RE, ArgumentGrammar


class Command(Enum):
    ZERO = "ZERO"
    IS_COEFF = "IS_COEFF"
    IS_ZERO = "IS_ZERO"
    CLONE = "CLONE"
    ADD = "ADD"
    MUL = "MUL"
    NEG = "NEG"
    SUB = "SUB"
    IS_EQ = "IS_EQ"
    DEG = "DEG"
    DEG_BY = "DEG_BY"
    PRINT = "PRINT"
    POP = "POP"
    AT = "AT"
    COMPOSE = "COMPOSE"

    @property
    def takes_argument(self) -> bool:
        return self in _WITH_ARGUMENT

    def operands(self, arg: Optional[int] = None) -> int:
        """Number of stack elements the command needs."""
        if self is Command.COMPOSE:
            return 1 + (arg or 0)
        return _OPERANDS[self]


_WITH_ARGUMENT = frozenset({Command.DEG_BY, Command.AT, Command.COMPOSE})

_OPERANDS: Dict[Command, int] = {
    Command.ZERO: 0,
    Command.IS_COEFF: 1,
    Command.IS_ZERO: 1,
    Command.CLONE: 1,
    Command.ADD: 2,
    Command.MUL: 2,
    Command.NEG: 1,
    Command.SUB: 2,
    Command.IS_EQ: 2,
    Command.DEG: 1,
    Command.DEG_BY: 1,
    Command.PRINT: 1,
    Command.POP: 1,
    Command.AT: 1,
    Command.COMPOSE: 1,
}


def match_command(line: str) -> Optional[Command]:
    """Return the command a line invokes, or None if it names no command.

    Bare keywords must match the whole line.  Keywords with an argument match
    as a prefix; the rest of the line is checked by parse_command_argument.
    """
    try:
        command = Command(line)
    except ValueError:
        command = None
    if command is not None and not command.takes_argument:
        return command
    for command in (Command.DEG_BY, Command.AT, Command.COMPOSE):
        if line.startswith(command.value):
            return command
    return None


def argument_grammars(config: Config) -> Dict[Command, ArgumentGrammar]:
    """Argument grammar of each command that takes one, bounded by config."""
    return {
        Command.DEG_BY: ArgumentGrammar(
            "DEG_BY", UNSIGNED_RE, 0, config.deg_by_max, DegByWrongVariableError,
        ),
        Command.AT: ArgumentGrammar(
            "AT", SIGNED_RE, config.at_min, config.at_max, AtWrongValueError,
        ),
        Command.COMPOSE: ArgumentGrammar(
            "COMPOSE", UNSIGNED_RE, 0, config.compose_max, ComposeWrongParameterError,
        ),
    }
