"""Line-by-line interpreter of the calculator language.

Each input line is classified once:

  1. blank or comment ("#...")                    → nothing
  2. keyword command (see commands.py)            → run it against the stack
  3. any other line starting with a letter        → WRONG COMMAND
  4. anything else                                → polynomial literal, pushed

Rejected lines produce ``ERROR <line_number> <REASON>`` on the error stream
and leave the stack exactly as it was: every handler computes its result
from the operands in place and only then pops them.
"""

from __future__ import annotations

import string
import sys
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional, TextIO

from ..config import Config
from ..core.arith import add, at, compose, deg, deg_by, is_eq, mul, neg, sub
from ..core.poly import Poly, clone, zero
from ..errors import CalcError, WrongCommandError, WrongPolyError
from ..logging_utils import get_logger
from ..parse.arguments import parse_command_argument
from ..parse.literal import PolyParseError, parse_poly
from ..parse.printer import format_poly
from .commands import Command, argument_grammars, match_command
from .stack import PolyStack

logger = get_logger(__name__)

_LETTERS = frozenset(string.ascii_letters)
_WHITESPACE = frozenset(" \t\n\v\f\r")


@dataclass
class RunSummary:
    """Counters for one run over a stream of lines."""

    lines: int = 0
    errors: int = 0
    stack_size: int = 0


class Calculator:
    """Stack machine executing calculator lines.

    Args:
        config: Limits and interpreter settings (defaults to Config()).
        out:    Stream for query and PRINT results (defaults to stdout).
        err:    Stream for ERROR diagnostics (defaults to stderr).
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None,
    ):
        self.config = config or Config()
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr
        self.stack = PolyStack()
        self._grammars = argument_grammars(self.config)
        self._handlers: Dict[Command, Callable[[Optional[int]], None]] = {
            Command.ZERO: self._zero,
            Command.IS_COEFF: self._is_coeff,
            Command.IS_ZERO: self._is_zero,
            Command.CLONE: self._clone,
            Command.ADD: self._add,
            Command.MUL: self._mul,
            Command.NEG: self._neg,
            Command.SUB: self._sub,
            Command.IS_EQ: self._is_eq,
            Command.DEG: self._deg,
            Command.DEG_BY: self._deg_by,
            Command.PRINT: self._print,
            Command.POP: self._pop,
            Command.AT: self._at,
            Command.COMPOSE: self._compose,
        }

    # ---- Driving ----

    def run(self, lines: Iterable[str]) -> RunSummary:
        """Execute every line, numbering them from 1."""
        summary = RunSummary()
        for line_no, line in enumerate(lines, start=1):
            summary.lines = line_no
            if not self.execute_line(line, line_no):
                summary.errors += 1
        summary.stack_size = len(self.stack)
        logger.info(
            "processed %d lines, %d rejected, %d polynomials left on the stack",
            summary.lines, summary.errors, summary.stack_size,
        )
        return summary

    def execute_line(self, line: str, line_no: int) -> bool:
        """Execute one line; report and return False if it is rejected."""
        try:
            self._execute(line)
        except CalcError as exc:
            logger.debug("line %d rejected (%s): %r", line_no, exc.reason, line)
            self.err.write(exc.format(line_no) + "\n")
            return False
        return True

    def _execute(self, line: str) -> None:
        if line.endswith("\n"):
            line = line[:-1]
        if not line or line.startswith(self.config.comment_prefix):
            return
        if "\0" in line:
            raise self._embedded_nul_error(line)

        command = match_command(line)
        if command is not None:
            arg = None
            if command.takes_argument:
                arg = parse_command_argument(line, self._grammars[command])
            self.stack.require(command.operands(arg))
            logger.debug("executing %s %s", command.value, "" if arg is None else arg)
            self._handlers[command](arg)
            return

        if line[0] in _LETTERS:
            raise WrongCommandError()
        try:
            poly = parse_poly(
                line,
                coeff_min=self.config.coeff_min,
                coeff_max=self.config.coeff_max,
                exp_max=self.config.exp_max,
            )
        except PolyParseError as exc:
            raise WrongPolyError() from exc
        self.stack.push(poly)

    def _embedded_nul_error(self, line: str) -> CalcError:
        """Reason for a line holding a NUL character, which is never valid."""
        if line[0] not in _LETTERS:
            return WrongPolyError()
        for command, grammar in self._grammars.items():
            kw = command.value
            if line.startswith(kw) and len(line) > len(kw) and line[len(kw)] in _WHITESPACE:
                return grammar.error()
        return WrongCommandError()

    # ---- Output ----

    def _emit(self, value) -> None:
        self.out.write(f"{value}\n")

    def _emit_bool(self, flag: bool) -> None:
        self._emit(1 if flag else 0)

    def _replace(self, count: int, result: Poly) -> None:
        """Pop ``count`` operands and push the result computed from them."""
        for _ in range(count):
            self.stack.pop()
        self.stack.push(result)

    # ---- Handlers ----

    def _zero(self, _arg: Optional[int]) -> None:
        self.stack.push(zero())

    def _is_coeff(self, _arg: Optional[int]) -> None:
        self._emit_bool(self.stack.top().is_coeff())

    def _is_zero(self, _arg: Optional[int]) -> None:
        self._emit_bool(self.stack.top().is_zero())

    def _clone(self, _arg: Optional[int]) -> None:
        self.stack.push(clone(self.stack.top()))

    def _add(self, _arg: Optional[int]) -> None:
        self._replace(2, add(self.stack.peek(0), self.stack.peek(1)))

    def _mul(self, _arg: Optional[int]) -> None:
        self._replace(2, mul(self.stack.peek(0), self.stack.peek(1)))

    def _neg(self, _arg: Optional[int]) -> None:
        self._replace(1, neg(self.stack.top()))

    def _sub(self, _arg: Optional[int]) -> None:
        # The top is the minuend.
        self._replace(2, sub(self.stack.peek(0), self.stack.peek(1)))

    def _is_eq(self, _arg: Optional[int]) -> None:
        self._emit_bool(is_eq(self.stack.peek(0), self.stack.peek(1)))

    def _deg(self, _arg: Optional[int]) -> None:
        self._emit(deg(self.stack.top()))

    def _deg_by(self, var_idx: Optional[int]) -> None:
        self._emit(deg_by(self.stack.top(), var_idx))

    def _print(self, _arg: Optional[int]) -> None:
        self._emit(format_poly(self.stack.top()))

    def _pop(self, _arg: Optional[int]) -> None:
        self.stack.pop()

    def _at(self, x: Optional[int]) -> None:
        self._replace(1, at(self.stack.top(), x))

    def _compose(self, k: Optional[int]) -> None:
        # The deepest consumed polynomial substitutes the outermost variable.
        qs = [self.stack.peek(depth) for depth in range(k, 0, -1)]
        self._replace(k + 1, compose(self.stack.top(), qs))
