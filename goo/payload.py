"""Payloads handed from one compiler phase to the next."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from goo.stmt import Stmt
from goo.tokens import Token


@dataclass(frozen=True)
class FilePayload:
    """The path of a file that holds code."""

    filepath: str


@dataclass(frozen=True)
class StringPayload:
    """A piece of text, typically code or generated output."""

    value: str


@dataclass(frozen=True)
class TokenPayload:
    """The tokens produced by the scanner."""

    tokens: list[Token]


@dataclass(frozen=True)
class StmtPayload:
    """A list of statements, optimised or not."""

    stmts: list[Stmt]


Payload = Union[FilePayload, StringPayload, TokenPayload, StmtPayload]