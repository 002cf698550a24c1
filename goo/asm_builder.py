"""Builds NASM assembler source text one instruction at a time."""

from __future__ import annotations

_PROLOGUE = (
    "bits 64\n\n"
    "section .bss\n\n"
    "\ttape: resb 30000\n\n"
    "\tglobal _start\n\n"
    "section .text\n\n"
)


class AsmBuilder:
    """Accumulates assembler code.

    A new builder already holds the prologue: a 30,000 byte tape, the
    ``_start`` label and the clearing of ``rbx``. Every instruction method
    returns the builder so calls can be chained. Operands are passed through
    verbatim, e.g. ``"byte [tape + rbx]"``.
    """

    def __init__(self) -> None:
        self._parts: list[str] = [_PROLOGUE]
        self.label("_start")
        self.mov("rbx", "0")

    def build(self) -> str:
        """Return the code produced so far; the builder keeps its state."""
        return "".join(self._parts)

    def _instruction(self, mnemonic: str, *operands: str) -> AsmBuilder:
        text = f"\n\t{mnemonic}"
        if operands:
            text += " " + ", ".join(operands)
        self._parts.append(text)
        return self

    def mov(self, dest: str, src: str) -> AsmBuilder:
        return self._instruction("mov", dest, src)

    def label(self, name: str) -> AsmBuilder:
        self._parts.append(f"\n{name}:")
        return self

    def xor(self, dest: str, src: str) -> AsmBuilder:
        return self._instruction("xor", dest, src)

    def syscall(self) -> AsmBuilder:
        return self._instruction("syscall")

    def add(self, dest: str, src: str) -> AsmBuilder:
        return self._instruction("add", dest, src)

    def sub(self, dest: str, src: str) -> AsmBuilder:
        return self._instruction("sub", dest, src)

    def lea(self, dest: str, src: str) -> AsmBuilder:
        return self._instruction("lea", dest, src)

    def cmp(self, dest: str, src: str) -> AsmBuilder:
        return self._instruction("cmp", dest, src)

    def jmp(self, label: str) -> AsmBuilder:
        return self._instruction("jmp", label)

    def jg(self, label: str) -> AsmBuilder:
        return self._instruction("jg", label)

    def jle(self, label: str) -> AsmBuilder:
        return self._instruction("jle", label)

    def jge(self, label: str) -> AsmBuilder:
        return self._instruction("jge", label)

    def comment(self, comment: str) -> AsmBuilder:
        """Append a comment to the current line."""
        self._parts.append(f" ; {comment}")
        return self

    def new_line(self) -> AsmBuilder:
        self._parts.append("\n")
        return self