"""Token types and tokens produced by the scanner."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class TokenType(IntEnum):
    """Every token type the compiler knows.

    The order matters: byte operations come before pointer operations, and
    both come before all other kinds.
    """

    INC_BYTE = 0
    DEC_BYTE = 1
    INC_PTR = 2
    DEC_PTR = 3
    OUT = 4
    IN = 5
    IF = 6
    FI = 7
    DEBUG = 8
    EOF = 9
    NONE = 10


_LEXEMES = {
    TokenType.INC_BYTE: "+",
    TokenType.DEC_BYTE: "-",
    TokenType.INC_PTR: ">",
    TokenType.DEC_PTR: "<",
    TokenType.OUT: ".",
    TokenType.IN: ",",
    TokenType.IF: "[",
    TokenType.FI: "]",
    TokenType.DEBUG: "!",
}


@dataclass(frozen=True)
class Token:
    """A single recognised lexeme and its position in the source."""

    type: TokenType
    line: int
    column: int

    def __str__(self) -> str:
        lexeme = _LEXEMES.get(self.type, " ")
        return f"{lexeme} {self.line}:{self.column}"