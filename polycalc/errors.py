"""Recoverable per-line errors of the calculator.

Each class carries the normative reason printed in the diagnostic line
``ERROR <line_number> <REASON>``.  The interpreter catches CalcError, reports
it and moves on to the next line with the stack untouched.
"""


class CalcError(Exception):
    """Base class for errors that reject a single input line."""

    reason = "WRONG COMMAND"

    def format(self, line_no: int) -> str:
        return f"ERROR {line_no} {self.reason}"


class WrongPolyError(CalcError):
    reason = "WRONG POLY"


class WrongCommandError(CalcError):
    reason = "WRONG COMMAND"


class StackUnderflowError(CalcError):
    reason = "STACK UNDERFLOW"


class DegByWrongVariableError(CalcError):
    reason = "DEG BY WRONG VARIABLE"


class AtWrongValueError(CalcError):
    reason = "AT WRONG VALUE"


class ComposeWrongParameterError(CalcError):
    reason = "COMPOSE WRONG PARAMETER"
