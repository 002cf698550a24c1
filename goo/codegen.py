"""Translates statements into x86-64 NASM assembler code."""

from __future__ import annotations

from dataclasses import dataclass

from goo.asm_builder import AsmBuilder
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

# Register usage:
#   rax holds addresses (tape, syscall numbers),
#   rbx holds the tape pointer and nothing else,
#   rdx is used by pointer decrements,
#   r8 to r11 hold temporary data.

_CELL = "byte [rax + rbx]"
_LAST_CELL = "29999"


@dataclass(frozen=True)
class CodeGenConfig:
    """Options for code generation."""

    debug_build: bool = False


class CodeGen(Phase, Visitor):
    """Walks the statements and writes matching assembler code.

    A counter keeps guard and loop labels unique. The builder is not reset
    between runs, so every run appends to the code produced before.
    """

    def __init__(self, config: CodeGenConfig, builder: AsmBuilder, reporter: Reporter) -> None:
        super().__init__(reporter)
        self._config = config
        self._builder = builder
        self._label_counter = 0

    def run(self, payload: StmtPayload) -> StringPayload:
        """Translate the statements and finish with an exit syscall."""
        self._label_counter = 0

        for stmt in payload.stmts:
            if stmt is not None:
                stmt.accept(self)

        code = self._builder.mov("rax", "60").xor("rdi", "rdi").syscall().build()
        return StringPayload(code)

    def _next_label(self) -> int:
        self._label_counter += 1
        return self._label_counter

    def _debug_comment(self, stmt: Stmt) -> None:
        if self._config.debug_build:
            self._builder.comment(stmt.debug_info())

    def visit_increment_byte(self, stmt: IncrementByte) -> None:
        inc_guard = f"incGuard{self._next_label()}"
        b = self._builder

        b.lea("rax", "[rel tape]")
        b.add(_CELL, str(stmt.count))
        self._debug_comment(stmt)
        # A negative result means the signed byte overflowed; bring it back up.
        b.cmp(_CELL, "0").jge(inc_guard).add(_CELL, "127")
        b.label(inc_guard)

    def visit_decrement_byte(self, stmt: DecrementByte) -> None:
        counter = self._next_label()
        dec_guard = f"decGuard{counter}"
        b = self._builder

        b.lea("rax", "[rel tape]")

        if stmt.count == 1:
            b.sub(_CELL, "1")
            self._debug_comment(stmt)
            b.cmp(_CELL, "0").jge(dec_guard).mov(_CELL, "127")
        else:
            underflow_guard = f"underflowGuard{counter}"
            b.mov("r8b", str(stmt.count))
            self._debug_comment(stmt)
            b.cmp("r8b", _CELL).jle(underflow_guard)
            b.sub("r8b", _CELL).mov(_CELL, "127").label(underflow_guard)
            b.sub(_CELL, "r8b")

        b.label(dec_guard)

    def visit_increment_ptr(self, stmt: IncrementPtr) -> None:
        ptr_guard = f"ptrGuard{self._next_label()}"
        b = self._builder

        b.add("rbx", str(stmt.count))
        self._debug_comment(stmt)
        # The tape holds 30,000 bytes; wrap around past the last cell.
        b.cmp("rbx", _LAST_CELL).jle(ptr_guard).sub("rbx", _LAST_CELL)
        b.label(ptr_guard)

    def visit_decrement_ptr(self, stmt: DecrementPtr) -> None:
        counter = self._next_label()
        ptr_guard = f"ptrGuard{counter}"
        b = self._builder

        if stmt.count == 1:
            b.sub("rbx", "1")
            self._debug_comment(stmt)
            b.cmp("rbx", "0").jge(ptr_guard).mov("rbx", _LAST_CELL)
        else:
            underflow_guard = f"underflowGuard{counter}"
            b.mov("rdx", str(stmt.count))
            self._debug_comment(stmt)
            b.cmp("rdx", "rbx").jle(underflow_guard)
            b.sub("rdx", "rbx").mov("rbx", _LAST_CELL).label(underflow_guard)
            b.sub("rbx", "rdx")

        b.label(ptr_guard)

    def _io_syscall(self, stmt: Stmt, number: str, descriptor: str) -> None:
        b = self._builder
        b.mov("rax", number)
        self._debug_comment(stmt)
        b.mov("rdi", descriptor).lea("rsi", "[tape + rbx]").mov("rdx", "1").syscall().new_line()

    def visit_input(self, stmt: Input) -> None:
        self._io_syscall(stmt, "0", "0")

    def visit_output(self, stmt: Output) -> None:
        self._io_syscall(stmt, "1", "1")

    def visit_conditional(self, stmt: Conditional) -> None:
        loop_label = f"loop{self._next_label()}"
        exit_label = f"{loop_label}Exit"
        b = self._builder

        b.new_line().label(loop_label)
        self._debug_comment(stmt)
        b.lea("rax", "[rel tape]").cmp(_CELL, "byte 0").jle(exit_label).new_line()

        for child in stmt.stmts:
            child.accept(self)

        b.jmp(loop_label).label(exit_label)

    def visit_debug(self, stmt: Debug) -> None:
        self._builder.mov("r8b", "byte [tape + rbx]")

    def visit_reset(self, stmt: Reset) -> None:
        self._builder.lea("rax", "[rel tape]").mov(_CELL, str(stmt.initial_value))
        self._debug_comment(stmt)

    def _move_pointer(self, stmt: Stmt, offset: int) -> None:
        if offset > 0:
            self.visit_increment_ptr(IncrementPtr(stmt.column, stmt.line, offset))
        elif offset < 0:
            self.visit_decrement_ptr(DecrementPtr(stmt.column, stmt.line, -offset))

    def visit_transfer(self, stmt: Transfer) -> None:
        b = self._builder

        b.mov("r8", "rbx")
        self._debug_comment(stmt)

        # Reuse the pointer logic to find the source cell, then the target.
        self._move_pointer(stmt, stmt.sub_offset)
        b.mov("r10", "rbx")

        if stmt.sub_offset != 0:
            b.mov("rbx", "r8")

        self._move_pointer(stmt, stmt.add_offset)

        inc_guard = f"incGuard{self._next_label()}"
        b.lea("rax", "[rel tape]").mov("r9b", "byte [rax + r10]").add(_CELL, "r9b")
        b.cmp(_CELL, "0").jge(inc_guard)
        b.add(_CELL, "127")

        # A transfer leaves the tape pointer where it was.
        b.label(inc_guard).mov("rbx", "r8")