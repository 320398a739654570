"""
calculator.py — Calculator: kompozycja Tokenizer → PostfixConverter → Evaluator.

Każda instancja posiada własne środowisko zmiennych. Przypisanie "x = <wyrażenie>"
jest zapisywane dopiero po udanym obliczeniu prawej strony — błąd nigdy nie
zmienia stanu instancji, a instancja pozostaje używalna po każdym błędzie.

Instancja NIE jest bezpieczna przy współbieżnych wywołaniach; API trzyma jedną
instancję na sesję i serializuje dostęp (adapters/session_store).
"""
from __future__ import annotations

import logging

from adapters.converter.shunting_yard import ShuntingYardConverter
from adapters.evaluator.postfix_evaluator import PostfixEvaluator
from adapters.tokenizer.regex_tokenizer import RegexTokenizer
from contracts import EvalResult, Token, TokenKind
from ports.converter import PostfixConverter
from ports.evaluator import Evaluator
from ports.tokenizer import Tokenizer

logger = logging.getLogger("shunt_calc.calculator")

ASSIGN = "="


def split_assignment(tokens: list[Token]) -> tuple[str | None, list[Token]]:
    """Zwraca (nazwa_zmiennej, prawa_strona) dla "x = ..." albo (None, tokens)."""
    if (
        len(tokens) >= 2
        and tokens[0].kind == TokenKind.IDENTIFIER
        and tokens[1].kind == TokenKind.OPERATOR
        and tokens[1].value == ASSIGN
    ):
        return tokens[0].value, tokens[2:]
    return None, tokens


class Calculator:
    """Ewaluator wyrażeń tekstowych ze stanem zmiennych."""

    def __init__(
        self,
        tokenizer: Tokenizer | None = None,
        converter: PostfixConverter | None = None,
        evaluator: Evaluator | None = None,
    ) -> None:
        self._tokenizer = tokenizer or RegexTokenizer()
        self._converter = converter or ShuntingYardConverter()
        self._evaluator = evaluator or PostfixEvaluator()
        self._variables: dict[str, float] = {}

    # -- API publiczne -------------------------------------------------------

    def evaluate(self, expression: str) -> float:
        """
        Oblicza wyrażenie. Dla "x = ..." zapisuje wynik pod x i go zwraca.
        Raises ExpressionSyntaxError / EvaluationError.
        """
        target, postfix = self._prepare(expression)
        value = self._evaluator.evaluate(postfix, self._variables)
        self._commit(target, value)
        return value

    def explain(self, expression: str) -> EvalResult:
        """Jak evaluate(), ale zwraca także sekwencję postfix i kroki obliczeń."""
        target, postfix = self._prepare(expression)
        value, steps = self._evaluator.evaluate_with_steps(postfix, self._variables)
        self._commit(target, value)
        return EvalResult(
            expression=expression,
            value=value,
            postfix=[t.value for t in postfix],
            steps=steps,
            assigned=target,
        )

    @property
    def variables(self) -> dict[str, float]:
        return dict(self._variables)

    def reset(self) -> None:
        self._variables.clear()

    # -- Prywatne ------------------------------------------------------------

    def _prepare(self, expression: str) -> tuple[str | None, list[Token]]:
        tokens = self._tokenizer.tokenize(expression)
        target, rhs = split_assignment(tokens)
        postfix = self._converter.to_postfix(rhs)
        logger.debug("%r → %s", expression, " ".join(t.value for t in postfix))
        return target, postfix

    def _commit(self, target: str | None, value: float) -> None:
        if target is None:
            return
        self._variables[target] = value
        logger.debug("Assigned %s = %r", target, value)
