"""
Port: Evaluator
Odpowiedzialność: deterministyczne liczenie wyrażeń w notacji postfiksowej (RPN).
"""
from typing import Protocol, runtime_checkable

from contracts import Token


@runtime_checkable
class Evaluator(Protocol):
    def evaluate(
        self,
        postfix: list[Token],
        env: dict[str, float] | None = None,
    ) -> float:
        """
        Evaluates a postfix token sequence to a float.
        env: variable bindings consulted before the constants table.
        Raises EvaluationError (DivisionByZero, ModuloByZero, UnknownIdentifier,
        UnknownOperator, StackUnderflow, MalformedExpression, MathDomain).
        Never mutates env.
        """
        ...

    def evaluate_with_steps(
        self,
        postfix: list[Token],
        env: dict[str, float] | None = None,
    ) -> tuple[float, list[str]]:
        """
        Same as evaluate(), additionally returning one human-readable step
        per operator or function application (e.g. "2 * 3 = 6").
        """
        ...
