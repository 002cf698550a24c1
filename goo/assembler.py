"""Turns assembler text into an ELF object file by calling nasm."""

from __future__ import annotations

import os
import shlex
import subprocess
import tempfile
from contextlib import suppress
from dataclasses import dataclass

from goo.payload import StringPayload
from goo.phase import Phase
from goo.reporter import Reporter


@dataclass(frozen=True)
class AssemblerConfig:
    """Options for assembling the generated code."""

    debug_build: bool = False
    verbose: bool = False
    output_file: str = "out.o"


class Assembler(Phase):
    """Writes the code to a temporary file and assembles it with nasm."""

    def __init__(self, config: AssemblerConfig, reporter: Reporter) -> None:
        super().__init__(reporter)
        self._config = config

    def run(self, payload: StringPayload) -> None:
        tmp_path = self._write_tmp_file(payload.value)
        if tmp_path is None:
            return None

        try:
            if self._config.verbose:
                print(f"Created tmp file at: {tmp_path}")

            command = self._command(tmp_path)
            command_text = shlex.join(command)

            if self._config.verbose:
                print(f"Executing: {command_text}")

            try:
                returncode = subprocess.run(command, check=False).returncode
            except OSError:
                returncode = None

            if returncode != 0:
                self.reporter.error(f"Error: Failed to execute command: {command_text}")
                return None
        finally:
            with suppress(OSError):
                os.remove(tmp_path)

        print("[Finished]")
        return None

    def _command(self, tmp_path: str) -> list[str]:
        command = ["nasm", "-f", "elf64"]
        if self._config.debug_build:
            command += ["-g", "-F", "dwarf"]
        return [*command, tmp_path, "-o", self._config.output_file]

    def _write_tmp_file(self, content: str) -> str | None:
        try:
            fd, path = tempfile.mkstemp(prefix="bf_tmp", suffix=".asm")
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(content)
        except OSError as exc:
            self.reporter.error(f"Failed to create temporary file: {exc}")
            return None
        return path