"""
contracts.py — Jedyne źródło prawdy dla wszystkich typów danych w ShuntCalc.
Wszystkie moduły importują WYŁĄCZNIE stąd. Nie modyfikować bez versioning.
"""
from __future__ import annotations

from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

CONTRACTS_VERSION = "1.0.0"


# ─────────────────────────── Tokenizer ───────────────────────────────────

class TokenKind(str, Enum):
    NUMBER = "number"           # literał liczbowy, tekst dosłownie z wejścia
    OPERATOR = "operator"       # "+", "**", "&&", "neg", ...
    IDENTIFIER = "identifier"   # zmienna lub nazwa funkcji
    LPAREN = "lparen"
    RPAREN = "rparen"


class Token(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: TokenKind
    value: str

    def __str__(self) -> str:
        return self.value


def number(value: str) -> Token:
    return Token(kind=TokenKind.NUMBER, value=value)


def operator(value: str) -> Token:
    return Token(kind=TokenKind.OPERATOR, value=value)


def identifier(value: str) -> Token:
    return Token(kind=TokenKind.IDENTIFIER, value=value)


LPAREN = Token(kind=TokenKind.LPAREN, value="(")
RPAREN = Token(kind=TokenKind.RPAREN, value=")")


# ─────────────────────────── Operatory ───────────────────────────────────

class OperatorSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    symbol: str
    precedence: int               # wyższy = wiąże mocniej
    associativity: Literal["left", "right"] = "left"
    arity: Literal["unary", "binary"] = "binary"

    @property
    def is_unary(self) -> bool:
        return self.arity == "unary"

    @property
    def is_left_assoc(self) -> bool:
        return self.associativity == "left"


# ─────────────────────────── Błędy ───────────────────────────────────────

class EvaluationErrorKind(str, Enum):
    DIVISION_BY_ZERO = "DivisionByZero"
    MODULO_BY_ZERO = "ModuloByZero"
    UNKNOWN_IDENTIFIER = "UnknownIdentifier"
    UNKNOWN_OPERATOR = "UnknownOperator"
    STACK_UNDERFLOW = "StackUnderflow"
    MALFORMED_EXPRESSION = "MalformedExpression"
    MATH_DOMAIN = "MathDomain"    # sqrt(-1), ln(0), przepełnienie float


class CalculatorError(Exception):
    """Bazowy błąd kalkulatora. `kind` identyfikuje rodzaj dla wywołującego."""

    kind: str = "CalculatorError"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class LexError(CalculatorError):
    """Zarezerwowany dla bardziej restrykcyjnego lexera; obecny tokenizer jest totalny."""

    kind = "LexError"


class ExpressionSyntaxError(CalculatorError):
    """Niezbalansowane nawiasy."""

    kind = "SyntaxError"


class EvaluationError(CalculatorError):
    def __init__(self, kind: EvaluationErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind.value
        self.error_kind = kind


# ─────────────────────────── Evaluator ───────────────────────────────────

class EvalResult(BaseModel):
    expression: str
    value: float
    postfix: list[str] = Field(default_factory=list)   # np. ["2", "3", "*"]
    steps: list[str] = Field(default_factory=list)     # czytelne kroki
    assigned: Optional[str] = None                     # nazwa zmiennej przy "x = ..."
