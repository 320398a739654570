from __future__ import annotations

import math

import pytest

from adapters.evaluator.postfix_evaluator import PostfixEvaluator, apply_operator, format_number
from contracts import (
    EvaluationError,
    EvaluationErrorKind,
    LPAREN,
    identifier,
    number,
    operator,
)


def _kind(postfix, env=None) -> EvaluationErrorKind:
    with pytest.raises(EvaluationError) as exc_info:
        PostfixEvaluator().evaluate(postfix, env)
    return exc_info.value.error_kind


def test_evaluate_binary_addition():
    assert PostfixEvaluator().evaluate([number("2"), number("3"), operator("+")]) == 5.0


def test_evaluate_pops_operands_in_order():
    postfix = [number("10"), number("4"), operator("-")]

    assert PostfixEvaluator().evaluate(postfix) == 6.0


def test_evaluate_unary_operators():
    ev = PostfixEvaluator()

    assert ev.evaluate([number("3"), operator("neg")]) == -3.0
    assert ev.evaluate([number("3"), operator("pos")]) == 3.0
    assert ev.evaluate([number("0"), operator("!")]) == 1.0
    assert ev.evaluate([number("7"), operator("!")]) == 0.0


def test_evaluate_variable_from_env():
    assert PostfixEvaluator().evaluate([identifier("x"), number("2"), operator("*")], {"x": 5.0}) == 10.0


def test_env_shadows_constants():
    assert PostfixEvaluator().evaluate([identifier("pi")], {"pi": 3.0}) == 3.0


def test_constants_resolve_without_env():
    ev = PostfixEvaluator()

    assert ev.evaluate([identifier("pi")]) == pytest.approx(3.14159265358979)
    assert ev.evaluate([identifier("e")]) == pytest.approx(math.e)


@pytest.mark.parametrize(
    "name, arg, expected",
    [
        ("sin", "0", 0.0),
        ("cos", "0", 1.0),
        ("tan", "0", 0.0),
        ("sqrt", "16", 4.0),
        ("abs", "5", 5.0),
        ("log", "100", 2.0),
        ("ln", "1", 0.0),
        ("exp", "0", 1.0),
    ],
)
def test_supported_functions(name, arg, expected):
    assert PostfixEvaluator().evaluate([number(arg), identifier(name)]) == pytest.approx(expected)


def test_comparisons_and_logic_yield_one_or_zero():
    assert apply_operator(3, ">", 2) == 1.0
    assert apply_operator(3, "<", 2) == 0.0
    assert apply_operator(2, ">=", 2) == 1.0
    assert apply_operator(3, "<=", 2) == 0.0
    assert apply_operator(2, "==", 2) == 1.0
    assert apply_operator(2, "!=", 2) == 0.0
    assert apply_operator(2, "&&", -3) == 1.0
    assert apply_operator(0, "&&", 1) == 0.0
    assert apply_operator(0, "||", 0.5) == 1.0
    assert apply_operator(0, "||", 0) == 0.0


def test_power_and_modulo():
    assert apply_operator(2, "**", 10) == 1024.0
    assert apply_operator(2, "^", 3) == 8.0
    assert apply_operator(10, "%", 3) == 1.0
    assert apply_operator(-7, "%", 3) == -1.0  # znak dzielnej


def test_division_by_zero():
    assert _kind([number("5"), number("0"), operator("/")]) == EvaluationErrorKind.DIVISION_BY_ZERO


def test_modulo_by_zero():
    assert _kind([number("5"), number("0"), operator("%")]) == EvaluationErrorKind.MODULO_BY_ZERO


def test_stack_underflow_for_binary_operator():
    assert _kind([number("1"), operator("+")]) == EvaluationErrorKind.STACK_UNDERFLOW


def test_stack_underflow_for_function_without_argument():
    assert _kind([identifier("sqrt")]) == EvaluationErrorKind.STACK_UNDERFLOW


def test_residual_values_are_malformed():
    assert _kind([number("1"), number("2")]) == EvaluationErrorKind.MALFORMED_EXPRESSION
    assert _kind([]) == EvaluationErrorKind.MALFORMED_EXPRESSION


def test_unparseable_number_is_malformed():
    assert _kind([number(".")]) == EvaluationErrorKind.MALFORMED_EXPRESSION


def test_paren_in_postfix_is_malformed():
    assert _kind([number("1"), LPAREN]) == EvaluationErrorKind.MALFORMED_EXPRESSION


def test_unknown_operator_is_rejected_before_popping():
    assert _kind([operator("$")]) == EvaluationErrorKind.UNKNOWN_OPERATOR
    assert _kind([number("1"), number("2"), operator("=")]) == EvaluationErrorKind.UNKNOWN_OPERATOR


def test_unknown_identifier():
    assert _kind([identifier("y")]) == EvaluationErrorKind.UNKNOWN_IDENTIFIER
    assert _kind([number("2"), identifier("foo")]) == EvaluationErrorKind.UNKNOWN_IDENTIFIER


@pytest.mark.parametrize(
    "postfix",
    [
        [number("1"), operator("neg"), identifier("sqrt")],
        [number("0"), identifier("ln")],
        [number("8"), operator("neg"), number("0.5"), operator("**")],
        [number("10"), number("1000"), operator("**")],
        [number("1000"), identifier("exp")],
    ],
)
def test_math_domain_errors(postfix):
    assert _kind(postfix) == EvaluationErrorKind.MATH_DOMAIN


def test_evaluate_does_not_mutate_env():
    env = {"x": 1.0}

    PostfixEvaluator().evaluate([identifier("x"), number("1"), operator("+")], env)

    assert env == {"x": 1.0}


def test_evaluate_with_steps_records_each_application():
    postfix = [number("2"), number("3"), operator("*"), number("1"), operator("+")]

    value, steps = PostfixEvaluator().evaluate_with_steps(postfix)

    assert value == 7.0
    assert steps == ["2 * 3 = 6", "6 + 1 = 7"]


def test_evaluate_with_steps_lists_variables_and_functions():
    postfix = [identifier("x"), identifier("sqrt"), operator("neg")]

    value, steps = PostfixEvaluator().evaluate_with_steps(postfix, {"x": 9.0})

    assert value == -3.0
    assert steps == ["x = 9", "sqrt(9) = 3", "-(3) = -3"]


def test_format_number():
    assert format_number(6.0) == "6"
    assert format_number(-2.0) == "-2"
    assert format_number(0.5) == "0.5"
    assert format_number(float("inf")) == "inf"
