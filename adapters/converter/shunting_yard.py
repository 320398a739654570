"""
Adapter: ShuntingYardConverter
Implementuje port PostfixConverter — algorytm shunting-yard (Dijkstra),
jedno przejście od lewej do prawej ze stosem operatorów.

  NUMBER              → wyjście
  IDENTIFIER + "("    → stos (oczekująca nazwa funkcji)
  IDENTIFIER          → wyjście (referencja do zmiennej)
  OPERATOR            → "-"/"+" na początku, po operatorze lub po "(" to
                        "neg"/"pos"; zdejmujemy operatory o wyższym priorytecie
                        (lub równym, gdy przychodzący jest lewostronny)
  "("                 → stos
  ")"                 → zdejmujemy do "(", potem ewentualną nazwę funkcji

Niezbalansowane nawiasy → ExpressionSyntaxError.
"""
from __future__ import annotations

import logging

from adapters import operators
from contracts import ExpressionSyntaxError, Token, TokenKind, operator

logger = logging.getLogger("shunt_calc.converter")


def _is_unary_position(prev: Token | None) -> bool:
    return prev is None or prev.kind in (TokenKind.OPERATOR, TokenKind.LPAREN)


class ShuntingYardConverter:
    """Infix → postfix. Bezstanowy; jedna instancja może być współdzielona."""

    # -- PostfixConverter protocol -------------------------------------------

    def to_postfix(self, tokens: list[Token]) -> list[Token]:
        output: list[Token] = []
        stack: list[Token] = []

        for i, tok in enumerate(tokens):
            prev = tokens[i - 1] if i > 0 else None
            nxt = tokens[i + 1] if i + 1 < len(tokens) else None

            if tok.kind == TokenKind.NUMBER:
                output.append(tok)

            elif tok.kind == TokenKind.IDENTIFIER:
                if nxt is not None and nxt.kind == TokenKind.LPAREN:
                    stack.append(tok)  # funkcja
                else:
                    output.append(tok)

            elif tok.kind == TokenKind.OPERATOR:
                incoming = self._classify(tok, prev)
                self._pop_higher(incoming.value, stack, output)
                stack.append(incoming)

            elif tok.kind == TokenKind.LPAREN:
                stack.append(tok)

            elif tok.kind == TokenKind.RPAREN:
                self._close_group(stack, output)

        while stack:
            top = stack.pop()
            if top.kind == TokenKind.LPAREN:
                raise ExpressionSyntaxError("Mismatched parentheses: unclosed '('")
            output.append(top)

        logger.debug("postfix: %s", " ".join(t.value for t in output))
        return output

    # -- Prywatne ------------------------------------------------------------

    @staticmethod
    def _classify(tok: Token, prev: Token | None) -> Token:
        """Rozróżnia jednoargumentowe "-"/"+" od binarnych na podstawie poprzedniego tokenu."""
        unary = operators.unary_form(tok.value)
        if unary is not None and _is_unary_position(prev):
            return operator(unary)
        return tok

    @staticmethod
    def _pop_higher(symbol: str, stack: list[Token], output: list[Token]) -> None:
        prec = operators.precedence(symbol)
        left = operators.is_left_assoc(symbol)
        while stack and stack[-1].kind == TokenKind.OPERATOR:
            top_prec = operators.precedence(stack[-1].value)
            if top_prec > prec or (top_prec == prec and left):
                output.append(stack.pop())
            else:
                break

    @staticmethod
    def _close_group(stack: list[Token], output: list[Token]) -> None:
        while stack and stack[-1].kind != TokenKind.LPAREN:
            output.append(stack.pop())
        if not stack:
            raise ExpressionSyntaxError("Mismatched parentheses: unexpected ')'")
        stack.pop()  # "("
        if stack and stack[-1].kind == TokenKind.IDENTIFIER:
            output.append(stack.pop())
