"""
Port: Tokenizer
Odpowiedzialność: zamiana surowego tekstu na sekwencję tokenów.
"""
from typing import Protocol, runtime_checkable

from contracts import Token


@runtime_checkable
class Tokenizer(Protocol):
    def tokenize(self, text: str) -> list[Token]:
        """
        Splits text into Number, Operator, Identifier, LParen and RParen tokens,
        preserving input order. Total: unknown characters become one-character
        Operator tokens and are rejected downstream.
        """
        ...
