"""Brainfuck compiler phases: scanner, optimizer, interpreter and NASM code generator."""

__version__ = "0.1.0"