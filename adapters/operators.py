"""
Tabela operatorów — wspólna dla konwertera i ewaluatora.

Drabina priorytetów (wyższy = wiąże mocniej):
  7  !  neg  pos        (jednoargumentowe, prawostronne)
  6  **  ^              (potęga, prawostronna)
  5  *  /  %
  4  +  -
  3  >  <  >=  <=
  2  ==  !=
  1  &&
  0  ||

Jednoargumentowe "-" i "+" mają wewnętrzne symbole "neg" i "pos",
odrębne od binarnych "-" i "+".
"""
from __future__ import annotations

from contracts import OperatorSpec

UNARY_MINUS = "neg"
UNARY_PLUS = "pos"
LOGICAL_NOT = "!"

# Operatory, które mogą być jednoargumentowe zależnie od pozycji
_UNARY_FORMS: dict[str, str] = {"-": UNARY_MINUS, "+": UNARY_PLUS}

# Priorytet dla nieznanych symboli — konwerter je przepuszcza, ewaluator odrzuca
UNKNOWN_PRECEDENCE = -1


def _spec(symbol: str, precedence: int, associativity: str = "left",
          arity: str = "binary") -> tuple[str, OperatorSpec]:
    return symbol, OperatorSpec(
        symbol=symbol,
        precedence=precedence,
        associativity=associativity,  # type: ignore[arg-type]
        arity=arity,                  # type: ignore[arg-type]
    )


OPERATORS: dict[str, OperatorSpec] = dict([
    _spec(LOGICAL_NOT, 7, "right", "unary"),
    _spec(UNARY_MINUS, 7, "right", "unary"),
    _spec(UNARY_PLUS, 7, "right", "unary"),
    _spec("**", 6, "right"),
    _spec("^", 6, "right"),
    _spec("*", 5),
    _spec("/", 5),
    _spec("%", 5),
    _spec("+", 4),
    _spec("-", 4),
    _spec(">", 3),
    _spec("<", 3),
    _spec(">=", 3),
    _spec("<=", 3),
    _spec("==", 2),
    _spec("!=", 2),
    _spec("&&", 1),
    _spec("||", 0),
])


def lookup(symbol: str) -> OperatorSpec | None:
    return OPERATORS.get(symbol)


def precedence(symbol: str) -> int:
    spec = OPERATORS.get(symbol)
    return spec.precedence if spec else UNKNOWN_PRECEDENCE


def is_left_assoc(symbol: str) -> bool:
    spec = OPERATORS.get(symbol)
    return spec.is_left_assoc if spec else True


def unary_form(symbol: str) -> str | None:
    """Zwraca wewnętrzny symbol jednoargumentowej wersji "-"/"+" lub None."""
    return _UNARY_FORMS.get(symbol)
