"""Optimisation passes that rewrite statement lists into cheaper equivalents."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from enum import Enum
from itertools import groupby

from goo.payload import StmtPayload
from goo.phase import Phase
from goo.stmt import (
    Conditional,
    DecrementByte,
    DecrementPtr,
    IncrementByte,
    IncrementPtr,
    Reset,
    Stmt,
    Transfer,
)
from goo.tokens import TokenType


class OptimizationPass(ABC):
    """A transformation of a list of statements."""

    @abstractmethod
    def run(self, stmts: Sequence[Stmt]) -> list[Stmt]:
        """Return the transformed statements."""


class _Category(Enum):
    BYTE = "byte"
    PTR = "ptr"


def _category(stmt: Stmt) -> _Category | None:
    if stmt.type in (TokenType.INC_BYTE, TokenType.DEC_BYTE):
        return _Category.BYTE
    if stmt.type in (TokenType.INC_PTR, TokenType.DEC_PTR):
        return _Category.PTR
    return None


class GroupPass(OptimizationPass):
    """Merges runs of byte operations and runs of pointer operations.

    A run such as ``+++--`` becomes a single increment by one. Runs that
    cancel out are dropped. Loop bodies are grouped recursively.
    """

    def run(self, stmts: Sequence[Stmt]) -> list[Stmt]:
        result: list[Stmt] = []
        present = (stmt for stmt in stmts if stmt is not None)

        for category, group in groupby(present, key=_category):
            if category is None:
                result.extend(self._recurse(stmt) for stmt in group)
            else:
                result.extend(self._merge(category, list(group)))

        return result

    def _recurse(self, stmt: Stmt) -> Stmt:
        if isinstance(stmt, Conditional):
            return Conditional(stmt.column, stmt.line, self.run(stmt.stmts))
        return stmt

    @staticmethod
    def _merge(category: _Category, group: list[Stmt]) -> list[Stmt]:
        first = group[0]
        moves = sum(
            stmt.count if stmt.type in (TokenType.INC_BYTE, TokenType.INC_PTR) else -stmt.count
            for stmt in group
        )

        if moves == 0:
            return []

        if category is _Category.BYTE:
            cls = IncrementByte if moves > 0 else DecrementByte
        else:
            cls = IncrementPtr if moves > 0 else DecrementPtr
        return [cls(first.column, first.line, abs(moves))]


class ResetPass(OptimizationPass):
    """Replaces ``[-]`` with a reset statement.

    An increment directly after the loop (``[-]+``) becomes the value the
    byte is reset to and is consumed.
    """

    _PATTERN = (TokenType.IF, TokenType.DEC_BYTE, TokenType.FI)

    def run(self, stmts: Sequence[Stmt]) -> list[Stmt]:
        result: list[Stmt] = []
        followers = [*stmts[1:], None]
        skip_next = False

        for stmt, following in zip(stmts, followers):
            if skip_next:
                skip_next = False
                continue

            if stmt.matches(self._PATTERN):
                initial_value = 0
                if isinstance(following, IncrementByte):
                    initial_value = following.count
                    skip_next = True
                result.append(Reset(stmt.column, stmt.line, initial_value, 0))
                continue

            result.append(stmt)

        return result


class TransferPass(OptimizationPass):
    """Replaces simple move loops such as ``[->+<]`` with a transfer statement.

    Recognised shapes are ``[>+<-]``, ``[->+<]``, ``[<+>-]`` and ``[>-<+>]``,
    with any pointer distance. Loops that add or subtract more than one per
    iteration are left as they are. If the loop leaves the pointer moved,
    a pointer statement follows the transfer.
    """

    _PATTERNS = (
        [TokenType.IF, TokenType.DEC_BYTE, TokenType.INC_PTR, TokenType.INC_BYTE,
         TokenType.DEC_PTR, TokenType.FI],
        [TokenType.IF, TokenType.INC_PTR, TokenType.INC_BYTE, TokenType.DEC_PTR,
         TokenType.DEC_BYTE, TokenType.FI],
        [TokenType.IF, TokenType.DEC_PTR, TokenType.INC_BYTE, TokenType.INC_PTR,
         TokenType.DEC_BYTE, TokenType.FI],
        [TokenType.IF, TokenType.INC_PTR, TokenType.DEC_BYTE, TokenType.DEC_PTR,
         TokenType.INC_BYTE, TokenType.INC_PTR, TokenType.FI],
    )

    def run(self, stmts: Sequence[Stmt]) -> list[Stmt]:
        result: list[Stmt] = []
        for stmt in stmts:
            if isinstance(stmt, Conditional) and any(stmt.matches(p) for p in self._PATTERNS):
                replacement = self._transfer(stmt)
                if replacement is not None:
                    result.extend(replacement)
                    continue
            result.append(stmt)
        return result

    @staticmethod
    def _transfer(conditional: Conditional) -> list[Stmt] | None:
        offset = 0
        add_offset = 0
        sub_offset = 0

        for stmt in conditional.stmts:
            if isinstance(stmt, IncrementPtr):
                offset += stmt.count
            elif isinstance(stmt, DecrementPtr):
                offset -= stmt.count
            elif isinstance(stmt, IncrementByte):
                if stmt.count > 1:
                    return None
                add_offset = offset
            elif isinstance(stmt, DecrementByte):
                if stmt.count > 1:
                    return None
                sub_offset = offset

        column, line = conditional.column, conditional.line
        replacement: list[Stmt] = [Transfer(column, line, add_offset, sub_offset)]
        if offset > 0:
            replacement.append(IncrementPtr(column, line, offset))
        elif offset < 0:
            replacement.append(DecrementPtr(column, line, -offset))
        return replacement


class Optimizer(Phase):
    """Runs the grouping, reset and transfer passes in that order."""

    def run(self, payload: StmtPayload) -> StmtPayload:
        passes: list[OptimizationPass] = [GroupPass(), ResetPass(), TransferPass()]
        stmts = list(payload.stmts)
        for optimization in passes:
            stmts = optimization.run(stmts)
        return StmtPayload(stmts)