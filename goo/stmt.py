"""Statements of the syntax tree and the visitor that processes them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import ClassVar

from goo.tokens import TokenType


class Visitor(ABC):
    """Processes statements; one method per statement kind."""

    @abstractmethod
    def visit_increment_byte(self, stmt: IncrementByte) -> None: ...

    @abstractmethod
    def visit_decrement_byte(self, stmt: DecrementByte) -> None: ...

    @abstractmethod
    def visit_increment_ptr(self, stmt: IncrementPtr) -> None: ...

    @abstractmethod
    def visit_decrement_ptr(self, stmt: DecrementPtr) -> None: ...

    @abstractmethod
    def visit_conditional(self, stmt: Conditional) -> None: ...

    @abstractmethod
    def visit_output(self, stmt: Output) -> None: ...

    @abstractmethod
    def visit_input(self, stmt: Input) -> None: ...

    @abstractmethod
    def visit_debug(self, stmt: Debug) -> None: ...

    @abstractmethod
    def visit_reset(self, stmt: Reset) -> None: ...

    @abstractmethod
    def visit_transfer(self, stmt: Transfer) -> None: ...


@dataclass(frozen=True)
class Stmt(ABC):
    """A single command, with its source position."""

    column: int
    line: int

    type: ClassVar[TokenType] = TokenType.NONE

    def matches(self, pattern: Sequence[TokenType]) -> bool:
        """Return True if the pattern is exactly this statement's type."""
        return len(pattern) == 1 and pattern[0] == self.type

    @abstractmethod
    def accept(self, visitor: Visitor) -> None:
        """Dispatch to the visitor method for this statement."""

    def debug_info(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True)
class IncrementByte(Stmt):
    count: int = 1

    type: ClassVar[TokenType] = TokenType.INC_BYTE

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_increment_byte(self)


@dataclass(frozen=True)
class DecrementByte(Stmt):
    count: int = 1

    type: ClassVar[TokenType] = TokenType.DEC_BYTE

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_decrement_byte(self)


@dataclass(frozen=True)
class IncrementPtr(Stmt):
    count: int = 1

    type: ClassVar[TokenType] = TokenType.INC_PTR

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_increment_ptr(self)


@dataclass(frozen=True)
class DecrementPtr(Stmt):
    count: int = 1

    type: ClassVar[TokenType] = TokenType.DEC_PTR

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_decrement_ptr(self)


@dataclass(frozen=True)
class Conditional(Stmt):
    """A loop running its body while the current byte is not zero."""

    stmts: list[Stmt]

    type: ClassVar[TokenType] = TokenType.IF

    def matches(self, pattern: Sequence[TokenType]) -> bool:
        """Match IF, the types of the body's statements, then FI."""
        own = [TokenType.IF, *(s.type for s in self.stmts if s is not None), TokenType.FI]
        return own == list(pattern)

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_conditional(self)


@dataclass(frozen=True)
class Output(Stmt):
    type: ClassVar[TokenType] = TokenType.OUT

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_output(self)


@dataclass(frozen=True)
class Input(Stmt):
    type: ClassVar[TokenType] = TokenType.IN

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_input(self)


@dataclass(frozen=True)
class Debug(Stmt):
    type: ClassVar[TokenType] = TokenType.DEBUG

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_debug(self)


@dataclass(frozen=True)
class Reset(Stmt):
    """Sets a byte, relative to the tape pointer, to a fixed value."""

    initial_value: int
    tape_ptr_offset: int

    type: ClassVar[TokenType] = TokenType.NONE

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_reset(self)


@dataclass(frozen=True)
class Transfer(Stmt):
    """Moves the byte at ``sub_offset`` onto the byte at ``add_offset``."""

    add_offset: int
    sub_offset: int

    type: ClassVar[TokenType] = TokenType.NONE

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_transfer(self)