"""Turns source text into tokens."""

from __future__ import annotations

from goo.payload import StringPayload, TokenPayload
from goo.phase import Phase
from goo.tokens import Token, TokenType

_COMMANDS = {
    "+": TokenType.INC_BYTE,
    "-": TokenType.DEC_BYTE,
    ">": TokenType.INC_PTR,
    "<": TokenType.DEC_PTR,
    ".": TokenType.OUT,
    ",": TokenType.IN,
    "[": TokenType.IF,
    "]": TokenType.FI,
    "!": TokenType.DEBUG,
}


class Scanner(Phase):
    """Extracts a token for every command character, tracking line and column.

    Every other character is a comment. No syntax is checked here. The token
    list always ends with an EOF token.
    """

    def run(self, payload: StringPayload) -> TokenPayload:
        tokens: list[Token] = []
        line = 1
        column = 0

        for char in payload.value:
            column += 1
            if char == "\n":
                line += 1
                column = 0
                continue
            token_type = _COMMANDS.get(char)
            if token_type is not None:
                tokens.append(Token(token_type, line, column))

        tokens.append(Token(TokenType.EOF, line, column))
        return TokenPayload(tokens)