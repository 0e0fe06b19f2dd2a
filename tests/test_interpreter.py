"""End-to-end tests of the calculator language through Calculator.run."""

import io

import pytest

from polycalc.calc.commands import Command
from polycalc.calc.interpreter import Calculator
from polycalc.config import Config
from polycalc.errors import (
    AtWrongValueError, CalcError, ComposeWrongParameterError, DegByWrongVariableError,
    StackUnderflowError, WrongCommandError, WrongPolyError,
)
from polycalc.parse.literal import parse_poly


def run(program, config=None):
    out, err = io.StringIO(), io.StringIO()
    calc = Calculator(config, out=out, err=err)
    summary = calc.run(io.StringIO(program))
    return out.getvalue(), err.getvalue(), calc, summary


class TestScenarios:
    def test_add_on_single_element_underflows(self):
        out, err, calc, _ = run("2\nADD\n")
        assert out == ""
        assert err == "ERROR 2 STACK UNDERFLOW\n"
        assert len(calc.stack) == 1

    def test_print_sorts_exponents(self):
        out, err, _, _ = run("(1,2)+(1,0)\nPRINT\n")
        assert out == "(1,0)+(1,2)\n"
        assert err == ""

    def test_add_coefficients(self):
        out, _, _, _ = run("1\n2\nADD\nPRINT\n")
        assert out == "3\n"

    def test_degrees(self):
        out, _, _, _ = run("(2,3)\nDEG\nDEG_BY 0\nDEG_BY 1\n")
        assert out == "3\n3\n0\n"

    def test_wrong_poly_line_number(self):
        _, err, _, _ = run("1\n1\n1\n1\n(1,2))\n")
        assert err == "ERROR 5 WRONG POLY\n"


class TestCommands:
    def test_comments_and_blank_lines(self):
        out, err, calc, summary = run("# a comment\n\n1\nPRINT")
        assert out == "1\n"
        assert err == ""
        assert summary.lines == 4

    def test_line_numbers_count_comments(self):
        _, err, _, _ = run("# one\n\nPOP\n")
        assert err == "ERROR 3 STACK UNDERFLOW\n"

    def test_zero_and_predicates(self):
        out, _, _, _ = run("ZERO\nIS_ZERO\nIS_COEFF\n(1,1)\nIS_ZERO\nIS_COEFF\n")
        assert out == "1\n1\n0\n0\n"

    def test_clone_and_is_eq(self):
        out, _, calc, _ = run("(1,1)\nCLONE\nIS_EQ\n")
        assert out == "1\n"
        assert len(calc.stack) == 2

    def test_is_eq_different(self):
        out, _, calc, _ = run("(1,1)\n(1,2)\nIS_EQ\n")
        assert out == "0\n"
        assert len(calc.stack) == 2

    def test_sub_top_minus_second(self):
        out, _, _, _ = run("1\n5\nSUB\nPRINT\n")
        assert out == "4\n"

    def test_neg(self):
        out, _, _, _ = run("(1,1)\nNEG\nPRINT\n")
        assert out == "(-1,1)\n"

    def test_mul(self):
        out, _, _, _ = run("(1,1)+(1,0)\nCLONE\nMUL\nPRINT\n")
        assert out == "(1,0)+(2,1)+(1,2)\n"

    def test_pop(self):
        _, err, calc, _ = run("1\nPOP\nPOP\n")
        assert err == "ERROR 3 STACK UNDERFLOW\n"
        assert len(calc.stack) == 0

    def test_at(self):
        out, _, _, _ = run("(1,0)+(2,1)+(1,2)\nAT 3\nPRINT\n(1,2)\nAT -2\nPRINT\n")
        assert out == "16\n4\n"

    def test_deg_of_zero(self):
        out, _, _, _ = run("ZERO\nDEG\nDEG_BY 7\n")
        assert out == "-1\n-1\n"

    def test_coefficient_overflow_wraps(self):
        out, _, _, _ = run("9223372036854775807\n1\nADD\nPRINT\n")
        assert out == "-9223372036854775808\n"

    def test_every_command_has_a_handler(self):
        calc = Calculator(out=io.StringIO(), err=io.StringIO())
        assert set(calc._handlers) == set(Command)


class TestCompose:
    def test_single_substitution(self):
        out, _, calc, _ = run("(1,1)+(1,0)\n(1,2)\nCOMPOSE 1\nPRINT\n")
        assert out == "(1,0)+(2,1)+(1,2)\n"
        assert len(calc.stack) == 1

    def test_deepest_operand_is_outermost_variable(self):
        # x0^2 * x1 with x0 = 2, x1 = 3
        out, _, _, _ = run("2\n3\n((1,1),2)\nCOMPOSE 2\nPRINT\n")
        assert out == "12\n"

    def test_compose_zero(self):
        out, _, _, _ = run("1\nCOMPOSE 0\nPRINT\n(1,1)+(7,0)\nCOMPOSE 0\nPRINT\n")
        assert out == "1\n7\n"

    def test_underflow_keeps_stack(self):
        _, err, calc, _ = run("(1,1)\nCOMPOSE 1\nCOMPOSE 0\n")
        assert err == "ERROR 2 STACK UNDERFLOW\n"
        assert len(calc.stack) == 1

    def test_underflow_on_empty_stack(self):
        _, err, _, _ = run("COMPOSE 0\n")
        assert err == "ERROR 1 STACK UNDERFLOW\n"

    def test_wrong_parameter(self):
        _, err, _, _ = run("1\nCOMPOSE -1\nCOMPOSE\nCOMPOSEX\n")
        assert err == (
            "ERROR 2 COMPOSE WRONG PARAMETER\n"
            "ERROR 3 COMPOSE WRONG PARAMETER\n"
            "ERROR 4 WRONG COMMAND\n"
        )


class TestErrors:
    @pytest.mark.parametrize("line, reason", [
        ("FOO", "WRONG COMMAND"),
        ("ADD ", "WRONG COMMAND"),
        ("add", "WRONG COMMAND"),
        ("DEG_BYX", "WRONG COMMAND"),
        ("DEG_BY", "DEG BY WRONG VARIABLE"),
        ("DEG_BY -1", "DEG BY WRONG VARIABLE"),
        ("AT", "AT WRONG VALUE"),
        ("AT x", "AT WRONG VALUE"),
        ("ATX", "WRONG COMMAND"),
        (" 1", "WRONG POLY"),
        ("(1,2)+", "WRONG POLY"),
        ("(1,-2)", "WRONG POLY"),
        ("1 ", "WRONG POLY"),
    ])
    def test_reason(self, line, reason):
        _, err, calc, _ = run(line + "\n")
        assert err == f"ERROR 1 {reason}\n"
        assert len(calc.stack) == 0

    def test_argument_checked_before_stack(self):
        _, err, _, _ = run("AT x\nAT 1\nDEG_BY 1\n")
        assert err == (
            "ERROR 1 AT WRONG VALUE\n"
            "ERROR 2 STACK UNDERFLOW\n"
            "ERROR 3 STACK UNDERFLOW\n"
        )

    @pytest.mark.parametrize("line, reason", [
        ("AT \x005", "AT WRONG VALUE"),
        ("DEG_BY \x00", "DEG BY WRONG VARIABLE"),
        ("COMPOSE\t\x001", "COMPOSE WRONG PARAMETER"),
        ("PRINT\x00", "WRONG COMMAND"),
        ("DEG_BY\x00", "WRONG COMMAND"),
        ("1\x00", "WRONG POLY"),
    ])
    def test_embedded_nul(self, line, reason):
        _, err, _, _ = run("0\n" + line + "\n")
        assert err == f"ERROR 2 {reason}\n"

    def test_failed_binary_command_keeps_operand(self):
        _, _, calc, _ = run("(3,1)\nMUL\nSUB\nIS_EQ\n")
        assert len(calc.stack) == 1
        assert calc.stack.top() == parse_poly("(3,1)")

    def test_summary_counts_errors(self):
        _, _, _, summary = run("1\nFOO\nADD\nPRINT\n")
        assert summary.lines == 4
        assert summary.errors == 2
        assert summary.stack_size == 1

    def test_custom_comment_prefix(self):
        out, err, _, _ = run("; note\n1\nPRINT\n", Config(comment_prefix=";"))
        assert out == "1\n"
        assert err == ""


class TestExecuteLine:
    def test_returns_status(self):
        calc = Calculator(out=io.StringIO(), err=io.StringIO())
        assert calc.execute_line("1\n", 1)
        assert not calc.execute_line("ADD\n", 2)
        assert calc.err.getvalue() == "ERROR 2 STACK UNDERFLOW\n"


class TestErrorClasses:
    @pytest.mark.parametrize("error, text", [
        (WrongPolyError, "ERROR 7 WRONG POLY"),
        (WrongCommandError, "ERROR 7 WRONG COMMAND"),
        (StackUnderflowError, "ERROR 7 STACK UNDERFLOW"),
        (DegByWrongVariableError, "ERROR 7 DEG BY WRONG VARIABLE"),
        (AtWrongValueError, "ERROR 7 AT WRONG VALUE"),
        (ComposeWrongParameterError, "ERROR 7 COMPOSE WRONG PARAMETER"),
    ])
    def test_format(self, error, text):
        assert issubclass(error, CalcError)
        assert error().format(7) == text
