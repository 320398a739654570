"""
Adapter: PostfixEvaluator
Implementuje port Evaluator — przejście po sekwencji RPN ze stosem operandów.

  NUMBER      — float(tekst); nieparsowalny → MalformedExpression
  IDENTIFIER  — zmienna z env → stała (pi, e) → funkcja jednoargumentowa
  OPERATOR    — "neg"/"pos"/"!" zdejmują 1 operand, pozostałe 2 (b = szczyt, a = pod nim)

Po przejściu na stosie musi zostać dokładnie jedna wartość.
Wartości logiczne i wyniki porównań to 1.0 / 0.0.

evaluate()            — zwraca float
evaluate_with_steps() — dodatkowo czytelne kroki ("2 * 3 = 6")
"""
from __future__ import annotations

import math
from types import MappingProxyType
from typing import Callable

from adapters import operators
from contracts import EvaluationError, EvaluationErrorKind, Token, TokenKind

CONSTANTS = MappingProxyType({
    "pi": math.pi,
    "e": math.e,
})

FUNCTIONS: dict[str, Callable[[float], float]] = {
    "sin":  math.sin,
    "cos":  math.cos,
    "tan":  math.tan,
    "sqrt": math.sqrt,
    "abs":  math.fabs,
    "log":  math.log10,
    "ln":   math.log,
    "exp":  math.exp,
}


def _truth(x: float) -> float:
    return 1.0 if x else 0.0


def _safe_div(a: float, b: float) -> float:
    if b == 0:
        raise EvaluationError(EvaluationErrorKind.DIVISION_BY_ZERO, "Division by zero")
    return a / b


def _safe_mod(a: float, b: float) -> float:
    if b == 0:
        raise EvaluationError(EvaluationErrorKind.MODULO_BY_ZERO, "Modulo by zero")
    return math.fmod(a, b)


# Mapowanie symboli operatorów binarnych na operacje float
_BINARY_OPS: dict[str, Callable[[float, float], float]] = {
    "+":  lambda a, b: a + b,
    "-":  lambda a, b: a - b,
    "*":  lambda a, b: a * b,
    "/":  _safe_div,
    "%":  _safe_mod,
    "**": math.pow,
    "^":  math.pow,
    ">":  lambda a, b: _truth(a > b),
    "<":  lambda a, b: _truth(a < b),
    ">=": lambda a, b: _truth(a >= b),
    "<=": lambda a, b: _truth(a <= b),
    "==": lambda a, b: _truth(a == b),
    "!=": lambda a, b: _truth(a != b),
    "&&": lambda a, b: _truth(a != 0 and b != 0),
    "||": lambda a, b: _truth(a != 0 or b != 0),
}

_UNARY_OPS: dict[str, Callable[[float], float]] = {
    operators.UNARY_MINUS: lambda a: -a,
    operators.UNARY_PLUS:  lambda a: a,
    operators.LOGICAL_NOT: lambda a: _truth(a == 0),
}

_UNARY_SYMBOLS = {
    operators.UNARY_MINUS: "-",
    operators.UNARY_PLUS: "+",
    operators.LOGICAL_NOT: "!",
}


def apply_operator(a: float, op: str, b: float) -> float:
    """Stosuje operator binarny. Błędy dziedziny matematycznej → MathDomain."""
    fn = _BINARY_OPS.get(op)
    if fn is None:
        raise EvaluationError(EvaluationErrorKind.UNKNOWN_OPERATOR, f"Unknown operator: {op!r}")
    return _guarded(fn, a, b, label=op)


def apply_function(name: str, x: float) -> float:
    fn = FUNCTIONS.get(name)
    if fn is None:
        raise EvaluationError(EvaluationErrorKind.UNKNOWN_IDENTIFIER, f"Unknown identifier: {name!r}")
    return _guarded(fn, x, label=name)


def _guarded(fn: Callable[..., float], *args: float, label: str) -> float:
    try:
        return float(fn(*args))
    except (ValueError, OverflowError) as exc:
        raise EvaluationError(
            EvaluationErrorKind.MATH_DOMAIN,
            f"Math domain error in {label}({', '.join(format_number(a) for a in args)})",
        ) from exc


class PostfixEvaluator:
    """Ewaluator RPN na float. Nie modyfikuje przekazanego env."""

    # -- Evaluator protocol ------------------------------------------------

    def evaluate(
        self,
        postfix: list[Token],
        env: dict[str, float] | None = None,
    ) -> float:
        return self._run(postfix, env or {}, steps=None)

    def evaluate_with_steps(
        self,
        postfix: list[Token],
        env: dict[str, float] | None = None,
    ) -> tuple[float, list[str]]:
        steps: list[str] = []
        value = self._run(postfix, env or {}, steps=steps)
        return value, steps

    # -- Prywatne ----------------------------------------------------------

    def _run(
        self,
        postfix: list[Token],
        env: dict[str, float],
        steps: list[str] | None,
    ) -> float:
        stack: list[float] = []

        for tok in postfix:
            if tok.kind == TokenKind.NUMBER:
                stack.append(self._parse_number(tok.value))

            elif tok.kind == TokenKind.IDENTIFIER:
                self._push_identifier(tok.value, stack, env, steps)

            elif tok.kind == TokenKind.OPERATOR:
                self._apply(tok.value, stack, steps)

            else:
                raise EvaluationError(
                    EvaluationErrorKind.MALFORMED_EXPRESSION,
                    f"Unexpected token in postfix sequence: {tok.value!r}",
                )

        if len(stack) != 1:
            raise EvaluationError(
                EvaluationErrorKind.MALFORMED_EXPRESSION,
                f"Malformed expression: {len(stack)} values left on the stack",
            )
        return stack[0]

    @staticmethod
    def _parse_number(text: str) -> float:
        try:
            return float(text)
        except ValueError as exc:
            raise EvaluationError(
                EvaluationErrorKind.MALFORMED_EXPRESSION,
                f"Invalid number literal: {text!r}",
            ) from exc

    def _push_identifier(
        self,
        name: str,
        stack: list[float],
        env: dict[str, float],
        steps: list[str] | None,
    ) -> None:
        if name in env:
            val = env[name]
            stack.append(val)
            if steps is not None:
                steps.append(f"{name} = {format_number(val)}")
            return
        if name in CONSTANTS:
            stack.append(CONSTANTS[name])
            return
        if name not in FUNCTIONS:
            raise EvaluationError(EvaluationErrorKind.UNKNOWN_IDENTIFIER, f"Unknown identifier: {name!r}")

        (arg,) = self._pop(stack, 1, name)
        result = apply_function(name, arg)
        stack.append(result)
        if steps is not None:
            steps.append(f"{name}({format_number(arg)}) = {format_number(result)}")

    def _apply(self, op: str, stack: list[float], steps: list[str] | None) -> None:
        spec = operators.lookup(op)
        if spec is None:
            raise EvaluationError(EvaluationErrorKind.UNKNOWN_OPERATOR, f"Unknown operator: {op!r}")

        if spec.is_unary:
            (a,) = self._pop(stack, 1, op)
            result = _UNARY_OPS[op](a)
            step = f"{_UNARY_SYMBOLS[op]}({format_number(a)}) = {format_number(result)}"
        else:
            a, b = self._pop(stack, 2, op)
            result = apply_operator(a, op, b)
            step = f"{format_number(a)} {op} {format_number(b)} = {format_number(result)}"

        stack.append(result)
        if steps is not None:
            steps.append(step)

    @staticmethod
    def _pop(stack: list[float], count: int, label: str) -> list[float]:
        """Zdejmuje `count` operandów; zwraca je w kolejności od najgłębszego."""
        if len(stack) < count:
            raise EvaluationError(
                EvaluationErrorKind.STACK_UNDERFLOW,
                f"Not enough operands for {label!r}: need {count}, have {len(stack)}",
            )
        args = stack[-count:]
        del stack[-count:]
        return args


def format_number(v: float) -> str:
    """Czytelna reprezentacja float: 6 zamiast 6.0."""
    if v.is_integer() and abs(v) < 1e15:
        return str(int(v))
    return repr(v)
