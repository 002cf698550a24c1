"""Executes statements directly on a byte tape."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import BinaryIO

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

TAPE_SIZE = 30000


class Interpreter(Phase, Visitor):
    """Runs statements on a tape of 30,000 unsigned bytes.

    Byte values wrap within 0-255. Moving the pointer past either end of the
    tape wraps it to the other end and records a warning. The tape and the
    pointer persist across runs; the output is collected per run. Execution
    stops as soon as the reporter holds an error.
    """

    def __init__(self, reporter: Reporter, input_stream: BinaryIO | None = None) -> None:
        super().__init__(reporter)
        self._tape = bytearray(TAPE_SIZE)
        self._ptr = 0
        self._output: list[str] = []
        self._input_stream = input_stream

    def run(self, payload: StmtPayload) -> StringPayload:
        self._output = []
        self._interpret(payload.stmts)
        return StringPayload("".join(self._output))

    def _interpret(self, stmts: Iterable[Stmt | None]) -> None:
        for stmt in stmts:
            if stmt is not None:
                stmt.accept(self)
                if self.reporter.has_error():
                    return

    def visit_increment_byte(self, stmt: IncrementByte) -> None:
        self._tape[self._ptr] = (self._tape[self._ptr] + stmt.count) % 256

    def visit_decrement_byte(self, stmt: DecrementByte) -> None:
        self._tape[self._ptr] = (self._tape[self._ptr] - stmt.count) % 256

    def visit_increment_ptr(self, stmt: IncrementPtr) -> None:
        self._ptr += stmt.count
        if self._ptr >= TAPE_SIZE:
            self.reporter.warning(
                "Attempted to move the tape pointer beyond the bounds of 30,000. Reset to 0.",
                stmt.line,
                stmt.column,
            )
            self._ptr = 0

    def visit_decrement_ptr(self, stmt: DecrementPtr) -> None:
        self._ptr -= stmt.count
        if self._ptr < 0:
            self.reporter.warning(
                "Attempted to move the tape pointer below 0. Reset to 29,999.",
                stmt.line,
                stmt.column,
            )
            self._ptr = TAPE_SIZE - 1

    def visit_input(self, stmt: Input) -> None:
        stream = self._input_stream if self._input_stream is not None else sys.stdin.buffer
        try:
            data = stream.read(1)
        except OSError:
            self.reporter.error("Failed to read user input.", stmt.line, stmt.column)
            return
        self._tape[self._ptr] = data[0] if data else 0

    def visit_output(self, stmt: Output) -> None:
        self._output.append(chr(self._tape[self._ptr]))

    def visit_conditional(self, stmt: Conditional) -> None:
        while self._tape[self._ptr] != 0 and not self.reporter.has_error():
            self._interpret(stmt.stmts)

    def visit_debug(self, stmt: Debug) -> None:
        cells = "".join(
            f"[{index} = {value}]" for index, value in enumerate(self._tape) if value != 0
        )
        self._output.append(
            f"DEBUG: line = {stmt.line}, column = {stmt.column}, "
            f"ptr = {self._ptr}, tape = {cells}\n"
        )

    def visit_reset(self, stmt: Reset) -> None:
        self._tape[(self._ptr + stmt.tape_ptr_offset) % TAPE_SIZE] = stmt.initial_value % 256

    def visit_transfer(self, stmt: Transfer) -> None:
        target = (self._ptr + stmt.add_offset) % TAPE_SIZE
        source = (self._ptr + stmt.sub_offset) % TAPE_SIZE
        self._tape[target] = (self._tape[target] + self._tape[source]) % 256
        self._tape[source] = 0