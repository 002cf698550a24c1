"""Renders the statement tree as indented text, for debugging."""

from __future__ import annotations

from collections.abc import Iterable

from goo.payload import StmtPayload, StringPayload
from goo.phase import Phase
from goo.reporter import Reporter
from goo.stmt import (
    Conditional,
    Debug,
    DecrementByte,
    DecrementPtr,
    IncrementByte,
    IncrementPtr,
    Input,
    Output,
    Reset,
    Stmt,
    Transfer,
    Visitor,
)


class AstPrinter(Phase, Visitor):
    """Produces one line per statement; loop bodies are indented by tabs."""

    def __init__(self, reporter: Reporter) -> None:
        super().__init__(reporter)
        self._depth = 0
        self._lines: list[str] = []

    def run(self, payload: StmtPayload) -> StringPayload:
        self._depth = 0
        self._lines = []
        self._print(payload.stmts)
        return StringPayload("".join(self._lines))

    def _print(self, stmts: Iterable[Stmt | None]) -> None:
        for stmt in stmts:
            if stmt is not None:
                stmt.accept(self)

    def _emit(self, name: str, stmt: Stmt) -> None:
        indentation = "\t" * self._depth
        self._lines.append(f"{indentation}<{name}> {stmt.line}:{stmt.column}\n")

    def visit_increment_byte(self, stmt: IncrementByte) -> None:
        self._emit("IncrementByte", stmt)

    def visit_decrement_byte(self, stmt: DecrementByte) -> None:
        self._emit("DecrementByte", stmt)

    def visit_increment_ptr(self, stmt: IncrementPtr) -> None:
        self._emit("IncrementPtr", stmt)

    def visit_decrement_ptr(self, stmt: DecrementPtr) -> None:
        self._emit("DecrementPtr", stmt)

    def visit_conditional(self, stmt: Conditional) -> None:
        self._emit("Conditional", stmt)
        self._depth += 1
        self._print(stmt.stmts)
        self._depth -= 1

    def visit_output(self, stmt: Output) -> None:
        self._emit("Output", stmt)

    def visit_input(self, stmt: Input) -> None:
        self._emit("Input", stmt)

    def visit_debug(self, stmt: Debug) -> None:
        self._emit("Debug", stmt)

    def visit_reset(self, stmt: Reset) -> None:
        self._emit("Reset", stmt)

    def visit_transfer(self, stmt: Transfer) -> None:
        self._emit("Transfer", stmt)