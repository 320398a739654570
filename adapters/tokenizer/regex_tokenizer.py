"""
Adapter: RegexTokenizer
Implementuje port Tokenizer — jedno przejście od lewej do prawej.

Reguły (najdłuższe dopasowanie najpierw):
  whitespace   — pomijany
  NUMBER       — cyfry z co najwyżej jedną kropką (może zaczynać się od ".")
  IDENTIFIER   — litera, potem litery/cyfry/"_"
  OPERATOR     — najpierw dwuznakowe: >= <= == != && || **
  LPAREN/RPAREN
  OPERATOR     — każdy inny pojedynczy znak (odrzucany dopiero przez ewaluator)

Tekst liczby jest zapisywany dosłownie; parsowanie do float robi ewaluator.
Jednoargumentowe "-"/"+" NIE są tu przepisywane — robi to konwerter.
"""
from __future__ import annotations

import re

from contracts import LPAREN, RPAREN, Token, identifier, number, operator

_TOKEN_RE = re.compile(
    r'(?P<ws>\s+)'
    r'|(?P<num>[0-9]+(?:\.[0-9]*)?|\.[0-9]*)'
    r'|(?P<ident>[A-Za-z][A-Za-z0-9_]*)'
    r'|(?P<op2>>=|<=|==|!=|&&|\|\||\*\*)'
    r'|(?P<lparen>\()'
    r'|(?P<rparen>\))'
    r'|(?P<op1>.)',
    re.DOTALL,
)


class RegexTokenizer:
    """Totalny tokenizer: każdy znak wejścia trafia do jakiegoś tokenu lub jest białym znakiem."""

    # -- Tokenizer protocol ------------------------------------------------

    def tokenize(self, text: str) -> list[Token]:
        tokens: list[Token] = []
        for m in _TOKEN_RE.finditer(text):
            group = m.lastgroup
            lexeme = m.group()
            if group == "ws":
                continue
            if group == "num":
                tokens.append(number(lexeme))
            elif group == "ident":
                tokens.append(identifier(lexeme))
            elif group == "lparen":
                tokens.append(LPAREN)
            elif group == "rparen":
                tokens.append(RPAREN)
            else:
                tokens.append(operator(lexeme))
        return tokens
