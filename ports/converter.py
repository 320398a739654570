"""
Port: PostfixConverter
Odpowiedzialność: infix → postfix (Reverse Polish Notation).
"""
from typing import Protocol, runtime_checkable

from contracts import Token


@runtime_checkable
class PostfixConverter(Protocol):
    def to_postfix(self, tokens: list[Token]) -> list[Token]:
        """
        Reorders an infix token sequence into postfix order, resolving
        precedence, associativity, unary operators and function calls.
        Unary minus/plus are emitted as the distinct operators "neg"/"pos".
        Raises ExpressionSyntaxError on unbalanced parentheses.
        """
        ...
